"""Host framework adapters."""

from apiv.host.base import InMemoryRouteHost, RouteHost

__all__ = ["InMemoryRouteHost", "RouteHost"]
