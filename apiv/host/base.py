"""Host framework abstraction.

The plugin only needs four things from a web framework: read the route
table, add a route, and run a callback once every route is registered.
:class:`RouteHost` spells that out and :class:`InMemoryRouteHost` is a
framework-free implementation used in tests and for embedding.
"""

from typing import Any, Callable, Dict, List, Optional, Protocol, Tuple, runtime_checkable

from loguru import logger

from apiv.exceptions import DuplicateRouteError, LifecycleError, RouteRegistrationError
from apiv.models.routes import AliasDescriptor, RouteContext, RouteDescriptor


@runtime_checkable
class RouteHost(Protocol):
    """Operations the plugin consumes from a host framework."""

    def list_routes(self) -> List[RouteDescriptor]:
        ...

    def add_route(self, alias: AliasDescriptor) -> None:
        ...

    def on_before_start(self, callback: Callable[[], Any]) -> None:
        ...


class InMemoryRouteHost:
    """
    Minimal host keeping its route table in a dict.

    Routes registered through :meth:`route` get the current context prefix
    prepended, the same way a framework applies a router prefix. Plugins
    registered through :meth:`register` may return a new context which is
    adopted for every route registered afterwards.
    """

    def __init__(self, prefix: str = ""):
        self.context = RouteContext(prefix=prefix)
        self.started = False
        self._routes: Dict[Tuple[str, str], RouteDescriptor] = {}
        self._before_start: List[Callable[[], Any]] = []
        self._plugins: Dict[str, Any] = {}

    @property
    def prefix(self) -> str:
        return self.context.prefix

    def register(self, plugin, options=None) -> RouteContext:
        """Register a plugin once and adopt the context it returns."""
        name = getattr(plugin, "name", type(plugin).__name__)
        if name in self._plugins:
            raise RouteRegistrationError(f"Plugin {name} is already registered")
        if self.started:
            raise LifecycleError(f"Cannot register plugin {name} after start")

        self._plugins[name] = plugin
        self.context = plugin.register(self, options, self.context)
        logger.debug(f"Plugin {name} registered, route prefix is now {self.prefix!r}")
        return self.context

    def route(self, method: str, path: str, handler: Callable[..., Any], config: Any = None) -> RouteDescriptor:
        """Register a route under the current prefix.

        Raises:
            RouteRegistrationError: If ``path`` is not absolute
            DuplicateRouteError: If the method and full path are taken
        """
        if not path.startswith("/"):
            raise RouteRegistrationError(f"Route path must start with '/': {path!r}")

        full_path = self.prefix + path if path != "/" else (self.prefix or "/")
        return self._add(RouteDescriptor(method.upper(), full_path, handler, config))

    def list_routes(self) -> List[RouteDescriptor]:
        return list(self._routes.values())

    def add_route(self, alias: AliasDescriptor) -> None:
        """Register an alias at its exact path, without the prefix."""
        self._add(RouteDescriptor(alias.method.upper(), alias.path, alias.handler))

    def on_before_start(self, callback: Callable[[], Any]) -> None:
        if self.started:
            raise LifecycleError("Cannot add a before-start callback after start")
        self._before_start.append(callback)

    def start(self) -> None:
        """Fire the before-start callbacks. Can only happen once."""
        if self.started:
            raise LifecycleError("Host already started")
        self.started = True
        for callback in self._before_start:
            callback()
        logger.info(f"Host started with {len(self._routes)} routes")

    def lookup(self, method: str, path: str) -> Optional[Callable[..., Any]]:
        route = self._routes.get((method.upper(), path))
        return route.handler if route else None

    def _add(self, route: RouteDescriptor) -> RouteDescriptor:
        key = (route.method, route.path)
        if key in self._routes:
            raise DuplicateRouteError(route.method, route.path)
        self._routes[key] = route
        return route
