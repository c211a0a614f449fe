"""Static metadata for the configuration keys shown in the settings UI.

The catalogs are built once at import time and returned by reference; callers
must treat them as read-only (the entries themselves are frozen).
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict

from . import keys
from .keys import DirectoryLocation, LoginStrategy


class PropertyType(str, Enum):
    """Input widget used to render a property."""

    BOOLEAN = "BOOLEAN"
    STRING = "STRING"
    SINGLE_SELECT_LIST = "SINGLE_SELECT_LIST"


class PropertyDefinition(BaseModel):
    """Describes one recognized configuration key."""

    model_config = ConfigDict(frozen=True)

    key: str
    name: str
    description: str
    category: str = keys.CATEGORY
    subcategory: str
    type: PropertyType = PropertyType.STRING
    default_value: str | None = None
    options: tuple[str, ...] = ()
    index: int


_AUTHENTICATION_PROPERTIES: tuple[PropertyDefinition, ...] = (
    PropertyDefinition(
        key=keys.ENABLED,
        name="Enabled",
        description=(
            "Enable Azure AD users to login. Value is ignored if client ID "
            "and secret are not defined."
        ),
        subcategory=keys.AUTHENTICATION_SUBCATEGORY,
        type=PropertyType.BOOLEAN,
        default_value="false",
        index=1,
    ),
    PropertyDefinition(
        key=keys.CLIENT_ID,
        name="Client ID",
        description="Client ID provided by Azure AD when registering the application.",
        subcategory=keys.AUTHENTICATION_SUBCATEGORY,
        index=2,
    ),
    PropertyDefinition(
        key=keys.CLIENT_SECRET,
        name="Client Secret",
        description="Client key provided by Azure AD when registering the application.",
        subcategory=keys.AUTHENTICATION_SUBCATEGORY,
        index=3,
    ),
    PropertyDefinition(
        key=keys.MULTI_TENANT,
        name="Multi-tenant Azure Application",
        description="multi-tenant application",
        subcategory=keys.AUTHENTICATION_SUBCATEGORY,
        type=PropertyType.BOOLEAN,
        default_value="false",
        index=4,
    ),
    PropertyDefinition(
        key=keys.TENANT_ID,
        name="Tenant ID",
        description="Azure AD Tenant ID.",
        subcategory=keys.AUTHENTICATION_SUBCATEGORY,
        index=5,
    ),
    PropertyDefinition(
        key=keys.ALLOW_USERS_TO_SIGN_UP,
        name="Allow users to sign-up",
        description=(
            "Allow new users to authenticate. When set to 'false', only "
            "existing users will be able to authenticate to the server."
        ),
        subcategory=keys.AUTHENTICATION_SUBCATEGORY,
        type=PropertyType.BOOLEAN,
        default_value="true",
        index=6,
    ),
    PropertyDefinition(
        key=keys.LOGIN_STRATEGY,
        name="Login generation strategy",
        description=(
            f"When the login strategy is set to '{LoginStrategy.UNIQUE.value}', "
            "the user's login will be auto-generated the first time so that it "
            "is unique. When the login strategy is set to "
            f"'{LoginStrategy.PROVIDER_ID.value}', the user's login will be the "
            "Azure AD login."
        ),
        subcategory=keys.AUTHENTICATION_SUBCATEGORY,
        type=PropertyType.SINGLE_SELECT_LIST,
        default_value=keys.LOGIN_STRATEGY_DEFAULT_VALUE,
        options=tuple(s.value for s in LoginStrategy),
        index=7,
    ),
)

_GROUP_PROPERTIES: tuple[PropertyDefinition, ...] = (
    PropertyDefinition(
        key=keys.ENABLE_GROUPS_SYNC,
        name="Enable Groups Synchronization",
        description=(
            "Enable groups synchronization from Azure AD to SonarQube, For each "
            "Azure AD group user belongs to, the user will be associated to a "
            "group with the same name(if it exists) in SonarQube."
        ),
        subcategory=keys.GROUP_SYNC_SUBCATEGORY,
        type=PropertyType.BOOLEAN,
        default_value="false",
        index=1,
    ),
)

_LOCATION_PROPERTIES: tuple[PropertyDefinition, ...] = (
    PropertyDefinition(
        key=keys.DIRECTORY_LOCATION,
        name="Directory Location",
        description=(
            "The location of the Azure installation. You normally won't need "
            "to change this."
        ),
        subcategory=keys.LOCATION_SUBCATEGORY,
        type=PropertyType.SINGLE_SELECT_LIST,
        default_value=DirectoryLocation.GLOBAL.value,
        options=tuple(loc.value for loc in DirectoryLocation),
        index=1,
    ),
)


def authentication_properties() -> tuple[PropertyDefinition, ...]:
    return _AUTHENTICATION_PROPERTIES


def group_properties() -> tuple[PropertyDefinition, ...]:
    return _GROUP_PROPERTIES


def location_properties() -> tuple[PropertyDefinition, ...]:
    return _LOCATION_PROPERTIES


def property_definitions() -> tuple[PropertyDefinition, ...]:
    """Return every catalog entry, in settings-page order."""
    return _LOCATION_PROPERTIES + _AUTHENTICATION_PROPERTIES + _GROUP_PROPERTIES
