from __future__ import annotations

from typing import Iterable, Mapping, Protocol

from pydantic import AliasChoices, Field, SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict

from . import keys
from .catalog import PropertyDefinition, property_definitions


class ConfigurationSource(Protocol):
    """Read-only key/value lookup the settings resolver is built on.

    Every lookup may be absent (``None``); implementations must not raise
    for unknown keys.
    """

    def get_string(self, key: str) -> str | None:
        """Return the raw string value of ``key``."""
        raise NotImplementedError

    def get_boolean(self, key: str) -> bool | None:
        """Return ``key`` parsed as a boolean."""
        raise NotImplementedError


def _parse_boolean(value: str) -> bool:
    return value.strip().lower() == "true"


def _defaults(definitions: Iterable[PropertyDefinition]) -> dict[str, str]:
    return {d.key: d.default_value for d in definitions if d.default_value is not None}


class MapConfiguration:
    """In-memory :class:`ConfigurationSource`.

    Values are held as strings. When ``definitions`` are given, an unset key
    resolves to the matching definition's default value, mirroring how the
    plugin host exposes registered properties.
    """

    def __init__(
        self,
        values: Mapping[str, str | bool | None] | None = None,
        definitions: Iterable[PropertyDefinition] = (),
    ) -> None:
        self._values: dict[str, str] = {}
        self._defaults = _defaults(definitions)
        for key, value in (values or {}).items():
            self.set(key, value)

    def set(self, key: str, value: str | bool | None) -> "MapConfiguration":
        """Set ``key``; ``None`` removes it. Booleans are stored as strings."""
        if value is None:
            self._values.pop(key, None)
        elif isinstance(value, bool):
            self._values[key] = "true" if value else "false"
        else:
            self._values[key] = value
        return self

    def get_string(self, key: str) -> str | None:
        if key in self._values:
            return self._values[key]
        return self._defaults.get(key)

    def get_boolean(self, key: str) -> bool | None:
        value = self.get_string(key)
        if value is None:
            return None
        return _parse_boolean(value)


_FIELDS_BY_KEY: dict[str, str] = {
    keys.ENABLED: "enabled",
    keys.CLIENT_ID: "client_id",
    keys.CLIENT_SECRET: "client_secret",
    keys.TENANT_ID: "tenant_id",
    keys.MULTI_TENANT: "multi_tenant",
    keys.ALLOW_USERS_TO_SIGN_UP: "allow_users_to_sign_up",
    keys.LOGIN_STRATEGY: "login_strategy",
    keys.ENABLE_GROUPS_SYNC: "enable_groups_sync",
    keys.DIRECTORY_LOCATION: "directory_location",
}

_CATALOG_DEFAULTS: dict[str, str] = _defaults(property_definitions())


def _aliases(key: str) -> AliasChoices:
    # Accept both the dotted key and its environment form,
    # e.g. sonar.auth.aad.clientId.secured -> SONAR_AUTH_AAD_CLIENTID_SECURED.
    return AliasChoices(key, key.replace(".", "_").upper())


class EnvironmentConfiguration(BaseSettings):
    """:class:`ConfigurationSource` read from ``SONAR_AUTH_AAD_*`` variables.

    Values may also be passed as keyword arguments using the dotted keys
    (``EnvironmentConfiguration(**{"sonar.auth.aad.enabled": True})``).
    Unset keys fall back to the catalog defaults.

    Environment variables:
        - SONAR_AUTH_AAD_ENABLED
        - SONAR_AUTH_AAD_CLIENTID_SECURED
        - SONAR_AUTH_AAD_CLIENTSECRET_SECURED
        - SONAR_AUTH_AAD_TENANTID
        - SONAR_AUTH_AAD_MULTITENANT
        - SONAR_AUTH_AAD_ALLOWUSERSTOSIGNUP
        - SONAR_AUTH_AAD_LOGINSTRATEGY
        - SONAR_AUTH_AAD_ENABLEGROUPSSYNC
        - SONAR_AUTH_AAD_DIRECTORYLOCATION
    """

    model_config = SettingsConfigDict(
        case_sensitive=False,
        extra="ignore",
        frozen=True,
    )

    enabled: bool | None = Field(default=None, validation_alias=_aliases(keys.ENABLED))
    client_id: str | None = Field(
        default=None, validation_alias=_aliases(keys.CLIENT_ID)
    )
    client_secret: SecretStr | None = Field(
        default=None, validation_alias=_aliases(keys.CLIENT_SECRET)
    )
    tenant_id: str | None = Field(
        default=None, validation_alias=_aliases(keys.TENANT_ID)
    )
    multi_tenant: bool | None = Field(
        default=None, validation_alias=_aliases(keys.MULTI_TENANT)
    )
    allow_users_to_sign_up: bool | None = Field(
        default=None, validation_alias=_aliases(keys.ALLOW_USERS_TO_SIGN_UP)
    )
    login_strategy: str | None = Field(
        default=None, validation_alias=_aliases(keys.LOGIN_STRATEGY)
    )
    enable_groups_sync: bool | None = Field(
        default=None, validation_alias=_aliases(keys.ENABLE_GROUPS_SYNC)
    )
    directory_location: str | None = Field(
        default=None, validation_alias=_aliases(keys.DIRECTORY_LOCATION)
    )

    def _raw(self, key: str) -> str | bool | SecretStr | None:
        field = _FIELDS_BY_KEY.get(key)
        if field is None:
            return None
        value = getattr(self, field)
        if value is None:
            return _CATALOG_DEFAULTS.get(key)
        return value

    def get_string(self, key: str) -> str | None:
        value = self._raw(key)
        if isinstance(value, SecretStr):
            return value.get_secret_value()
        if isinstance(value, bool):
            return "true" if value else "false"
        return value

    def get_boolean(self, key: str) -> bool | None:
        value = self._raw(key)
        if value is None or isinstance(value, bool):
            return value
        if isinstance(value, SecretStr):
            value = value.get_secret_value()
        return _parse_boolean(value)
