"""Route prefixing and alias routes for versioned web APIs.

Registers a global ``/prefix/version`` route prefix and, once every route
is known, adds alias routes for endpoints that override or opt out of it.

The package logs through loguru and never configures sinks on import.
Applications that want its default stderr sink call ``setup_logging()``
once at startup.
"""

from apiv.exceptions import (
    ApiVersionError,
    DuplicateRouteError,
    InvalidPluginOptionsError,
    InvalidRouteConfigError,
    LifecycleError,
    RouteRegistrationError,
)
from apiv.core.logging import setup_logging
from apiv.host import InMemoryRouteHost, RouteHost
from apiv.models import (
    AliasDescriptor,
    ApiVersionOptions,
    RouteContext,
    RouteDescriptor,
    RouteVersionConfig,
)
from apiv.plugin import ApiVersionPlugin, plugin, register_versioning, version_override

__version__ = "0.1.0"

__all__ = [
    "AliasDescriptor",
    "ApiVersionError",
    "ApiVersionOptions",
    "ApiVersionPlugin",
    "DuplicateRouteError",
    "InMemoryRouteHost",
    "InvalidPluginOptionsError",
    "InvalidRouteConfigError",
    "LifecycleError",
    "RouteContext",
    "RouteDescriptor",
    "RouteHost",
    "RouteRegistrationError",
    "RouteVersionConfig",
    "plugin",
    "register_versioning",
    "setup_logging",
    "version_override",
]
