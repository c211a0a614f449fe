from typing import Final
from urllib.parse import urlparse

from .clouds import GLOBAL_CLOUD

GRAPH_DEFAULT_SCOPE: Final[str] = f"{GLOBAL_CLOUD.graph_host}/.default"


def authority_from_url(url: str) -> str:
    """Return the URL authority (scheme + host).

    Args:
        url: Absolute URL (e.g., "https://login.microsoftonline.us/common").

    Returns:
        The "<scheme>://<host>" portion of the URL.

    Raises:
        ValueError: If ``url`` is not absolute or lacks a host.
    """
    parsed = urlparse(url)
    if not parsed.scheme or not parsed.netloc:
        raise ValueError("url must be an absolute URL")
    return f"{parsed.scheme}://{parsed.netloc}"


def default_scope(resource_url: str) -> str:
    """Return the ``/.default`` client-credentials scope of a resource."""
    return f"{authority_from_url(resource_url)}/.default"
