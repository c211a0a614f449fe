from __future__ import annotations

from dataclasses import dataclass
from typing import Final

from .keys import DirectoryLocation


@dataclass(frozen=True)
class CloudEndpoints:
    """Hosts serving the OAuth and Graph APIs for one sovereign cloud."""

    login_host: str
    graph_host: str


GLOBAL_CLOUD: Final = CloudEndpoints(
    login_host="https://login.microsoftonline.com",
    graph_host="https://graph.microsoft.com",
)
US_GOVERNMENT_CLOUD: Final = CloudEndpoints(
    login_host="https://login.microsoftonline.us",
    graph_host="https://graph.microsoft.com",
)
GERMANY_CLOUD: Final = CloudEndpoints(
    login_host="https://login.microsoftonline.de",
    graph_host="https://graph.microsoft.de",
)
CHINA_CLOUD: Final = CloudEndpoints(
    login_host="https://login.chinacloudapi.cn",
    graph_host="https://microsoftgraph.chinacloudapi.cn",
)


def cloud_for(location: DirectoryLocation) -> CloudEndpoints:
    """Return the hosts for ``location``; anything unmatched is the global cloud."""
    match location:
        case DirectoryLocation.US_GOVERNMENT:
            return US_GOVERNMENT_CLOUD
        case DirectoryLocation.GERMANY:
            return GERMANY_CLOUD
        case DirectoryLocation.CHINA:
            return CHINA_CLOUD
        case _:
            # DirectoryLocation.GLOBAL
            return GLOBAL_CLOUD
