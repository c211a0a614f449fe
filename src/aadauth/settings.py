from __future__ import annotations

import urllib.parse
from dataclasses import dataclass
from typing import Final

from . import keys
from .clouds import CloudEndpoints, cloud_for
from .config import ConfigurationSource
from .keys import DirectoryLocation
from .scopes import default_scope

COMMON_TENANT: Final[str] = "common"
AUTHORIZATION_PATH: Final[str] = "oauth2/authorize"
TOKEN_PATH: Final[str] = "oauth2/token"
GROUPS_REQUEST_FORMAT: Final[str] = "/v1.0/%s/users/%s/memberOf"
AUTH_REQUEST_FORMAT: Final[str] = (
    "{url}?client_id={client_id}&response_type=code"
    "&redirect_uri={redirect_uri}&state={state}&scope=openid"
)


@dataclass(frozen=True)
class ResolvedEndpoints:
    """URLs an authentication flow needs, derived from the current settings."""

    authorization_url: str
    token_url: str
    directory_base_url: str
    group_membership_url_template: str


class AadSettings:
    """Typed, read-through view of the Azure AD authentication settings.

    Holds nothing but a reference to the configuration source. Every accessor
    reads the source again, so changes made by the source's owner are seen on
    the next call. Missing values resolve to defaults; nothing here raises.
    """

    def __init__(self, settings: ConfigurationSource) -> None:
        self._settings = settings

    def client_id(self) -> str | None:
        return self._settings.get_string(keys.CLIENT_ID)

    def client_secret(self) -> str | None:
        return self._settings.get_string(keys.CLIENT_SECRET)

    def tenant_id(self) -> str | None:
        return self._settings.get_string(keys.TENANT_ID)

    def login_strategy(self) -> str | None:
        """Return the raw login strategy.

        Values outside :class:`~aadauth.keys.LoginStrategy` are returned as-is;
        the identity provider dispatching on it is expected to reject them.
        """
        return self._settings.get_string(keys.LOGIN_STRATEGY)

    def allow_users_to_sign_up(self) -> bool:
        return self._boolean(keys.ALLOW_USERS_TO_SIGN_UP)

    def enable_group_sync(self) -> bool:
        return self._boolean(keys.ENABLE_GROUPS_SYNC)

    def multi_tenant(self) -> bool:
        return self._boolean(keys.MULTI_TENANT)

    def directory_location(self) -> DirectoryLocation:
        raw = self._settings.get_string(keys.DIRECTORY_LOCATION)
        return DirectoryLocation.parse(raw)

    def is_enabled(self) -> bool:
        """Return True when Azure AD login may be offered.

        Requires the enabled toggle plus a client id, client secret and login
        strategy. No authentication request may be started otherwise.
        """
        return (
            self._boolean(keys.ENABLED)
            and self.client_id() is not None
            and self.client_secret() is not None
            and self.login_strategy() is not None
        )

    def tenant_segment(self) -> str:
        """Return the tenant path segment: ``common`` for multi-tenant apps."""
        if self.multi_tenant():
            return COMMON_TENANT
        # An unset tenant yields an empty segment rather than an error.
        return self.tenant_id() or ""

    def authorization_url(self) -> str:
        login_host = self._cloud().login_host
        return f"{login_host}/{self.tenant_segment()}/{AUTHORIZATION_PATH}"

    def authority_url(self) -> str:
        """Return the token endpoint."""
        login_host = self._cloud().login_host
        return f"{login_host}/{self.tenant_segment()}/{TOKEN_PATH}"

    def graph_url(self) -> str:
        return self._cloud().graph_host

    def graph_membership_url(self) -> str:
        """Return the memberOf URL template.

        The two ``%s`` placeholders take the tenant (or directory) id and the
        user id, in that order.
        """
        return self.graph_url() + GROUPS_REQUEST_FORMAT

    def graph_scope(self) -> str:
        """Return the ``.default`` scope for this cloud's Graph API."""
        return default_scope(self.graph_url())

    def endpoints(self) -> ResolvedEndpoints:
        return ResolvedEndpoints(
            authorization_url=self.authorization_url(),
            token_url=self.authority_url(),
            directory_base_url=self.graph_url(),
            group_membership_url_template=self.graph_membership_url(),
        )

    def authorization_request_url(self, redirect_uri: str, state: str) -> str:
        """Build the browser redirect that starts the authorization-code flow.

        Args:
            redirect_uri: Callback registered for the application.
            state: Opaque anti-forgery value echoed back by Azure AD.

        Returns:
            The authorization endpoint with the OpenID request parameters.
        """
        return AUTH_REQUEST_FORMAT.format(
            url=self.authorization_url(),
            client_id=urllib.parse.quote(self.client_id() or "", safe=""),
            redirect_uri=urllib.parse.quote(redirect_uri, safe=""),
            state=urllib.parse.quote(state, safe=""),
        )

    def _boolean(self, key: str) -> bool:
        value = self._settings.get_boolean(key)
        return bool(value) if value is not None else False

    def _cloud(self) -> CloudEndpoints:
        return cloud_for(self.directory_location())
