from __future__ import annotations

import logging
from enum import Enum
from typing import Final

logger = logging.getLogger(__name__)

CLIENT_ID: Final[str] = "sonar.auth.aad.clientId.secured"
CLIENT_SECRET: Final[str] = "sonar.auth.aad.clientSecret.secured"
ENABLED: Final[str] = "sonar.auth.aad.enabled"
ALLOW_USERS_TO_SIGN_UP: Final[str] = "sonar.auth.aad.allowUsersToSignUp"
TENANT_ID: Final[str] = "sonar.auth.aad.tenantId"
DIRECTORY_LOCATION: Final[str] = "sonar.auth.aad.directoryLocation"
ENABLE_GROUPS_SYNC: Final[str] = "sonar.auth.aad.enableGroupsSync"
LOGIN_STRATEGY: Final[str] = "sonar.auth.aad.loginStrategy"
MULTI_TENANT: Final[str] = "sonar.auth.aad.multiTenant"

CATEGORY: Final[str] = "Azure Active Directory"
LOCATION_SUBCATEGORY: Final[str] = "(1) Azure Active Directory"
AUTHENTICATION_SUBCATEGORY: Final[str] = "(2) Authentication"
GROUP_SYNC_SUBCATEGORY: Final[str] = "(3) Groups Synchronization"


class DirectoryLocation(str, Enum):
    """Sovereign Azure AD clouds, valued by their catalog option labels."""

    GLOBAL = "Azure AD (Global)"
    US_GOVERNMENT = "Azure AD for US Government"
    GERMANY = "Azure AD for Germany"
    CHINA = "Azure AD China"

    @classmethod
    def parse(cls, raw: str | None) -> "DirectoryLocation":
        """Map a raw configuration value to a location.

        Absent or unrecognized values fall back to :attr:`GLOBAL`.
        """
        if raw is None:
            return cls.GLOBAL
        try:
            return cls(raw)
        except ValueError:
            logger.debug(
                "Unknown directory location %r, using %s.", raw, cls.GLOBAL.value
            )
            return cls.GLOBAL


class LoginStrategy(str, Enum):
    """How the local login is derived from the Azure AD identity."""

    UNIQUE = "Unique"
    PROVIDER_ID = "Same as Azure AD login"


LOGIN_STRATEGY_DEFAULT_VALUE: Final[str] = LoginStrategy.UNIQUE.value
