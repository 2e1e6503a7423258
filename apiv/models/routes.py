"""Route records exchanged with the host framework."""

from dataclasses import dataclass
from typing import Any, Callable, Optional


@dataclass(frozen=True)
class RouteDescriptor:
    """A route as registered on the host.

    ``config`` holds the raw per-route metadata found under the ``apiv``
    key: ``None`` when the route declares nothing.
    """
    method: str
    path: str
    handler: Callable[..., Any]
    config: Any = None
    # Host specific route object, e.g. a FastAPI APIRoute
    source: Any = None


@dataclass(frozen=True)
class AliasDescriptor:
    """An additional route pointing at an existing handler."""
    method: str
    path: str
    handler: Callable[..., Any]
    route: Optional[RouteDescriptor] = None

    @property
    def key(self):
        return (self.method.upper(), self.path)


@dataclass(frozen=True)
class RouteContext:
    """Initialization context passed to and returned from plugin registration."""
    prefix: str = ""

    def with_prefix(self, prefix: str) -> "RouteContext":
        return RouteContext(prefix=prefix)
