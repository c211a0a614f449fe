"""Azure AD authentication settings.

Public API:
- AadSettings (resolver over a configuration source)
- ResolvedEndpoints (endpoint URLs derived from the settings)
- MapConfiguration, EnvironmentConfiguration (configuration sources)
- DirectoryLocation, LoginStrategy (enum-like setting values)
- authentication_properties(), group_properties(), location_properties(),
  property_definitions() (settings catalogs)
- get_credential() → TokenCredential
- GRAPH_DEFAULT_SCOPE (Graph scope for the global cloud)
"""

from .catalog import (
    PropertyDefinition,
    PropertyType,
    authentication_properties,
    group_properties,
    location_properties,
    property_definitions,
)
from .config import ConfigurationSource, EnvironmentConfiguration, MapConfiguration
from .factory import get_credential
from .keys import DirectoryLocation, LoginStrategy
from .scopes import GRAPH_DEFAULT_SCOPE
from .settings import AadSettings, ResolvedEndpoints

__all__ = [
    "AadSettings",
    "ResolvedEndpoints",
    "ConfigurationSource",
    "MapConfiguration",
    "EnvironmentConfiguration",
    "DirectoryLocation",
    "LoginStrategy",
    "PropertyDefinition",
    "PropertyType",
    "authentication_properties",
    "group_properties",
    "location_properties",
    "property_definitions",
    "get_credential",
    "GRAPH_DEFAULT_SCOPE",
]
