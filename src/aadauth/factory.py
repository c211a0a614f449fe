from __future__ import annotations

import logging

from azure.core.credentials import TokenCredential
from azure.identity import ClientSecretCredential

from .scopes import authority_from_url
from .settings import AadSettings

logger = logging.getLogger(__name__)


def get_credential(settings: AadSettings) -> TokenCredential:
    """Construct the application's :class:`TokenCredential` from :class:`AadSettings`.

    The credential targets the configured cloud's login host and the
    application's home tenant. Multi-tenant applications still authenticate
    against their own tenant here, since client-credentials requests are not
    accepted by the ``common`` endpoint. Nothing is requested from Azure AD
    here; pair it with :meth:`AadSettings.graph_scope` when calling Graph.

    Args:
        settings: Resolved Azure AD settings.

    Returns:
        A :class:`ClientSecretCredential`.

    Raises:
        ValueError: If Azure AD authentication is disabled or incomplete, or
            if no tenant ID is configured.
    """
    if not settings.is_enabled():
        logger.warning(
            "Azure AD credential requested while authentication is disabled."
        )
        raise ValueError(
            "Azure AD authentication is not enabled; it requires the enabled flag, "
            "client ID, client secret and login strategy."
        )

    tenant_id = settings.tenant_id()
    if not tenant_id:
        logger.warning("Azure AD credential requested without a tenant ID.")
        raise ValueError(
            "Azure AD credential requires a tenant ID, including for multi-tenant "
            "applications (use the application's home tenant)."
        )

    authority = authority_from_url(settings.authority_url())
    logger.info(
        "Building Azure AD credential for tenant %r on %s.", tenant_id, authority
    )
    return ClientSecretCredential(
        tenant_id=tenant_id,
        client_id=settings.client_id(),
        client_secret=settings.client_secret(),
        authority=authority,
    )
