"""FastAPI integration.

Adapts a FastAPI application to :class:`apiv.host.base.RouteHost` and
provides :class:`VersionedAPI`, which mounts routers under the resolved
prefix and adds alias routes when the application starts.
"""

from contextlib import asynccontextmanager
from typing import Any, Callable, List, Mapping, Optional

from fastapi import APIRouter, FastAPI
from fastapi.routing import APIRoute
from loguru import logger

from apiv.core.config import settings
from apiv.exceptions import LifecycleError
from apiv.models.routes import AliasDescriptor, RouteContext, RouteDescriptor
from apiv.plugin import ROUTE_CONFIG_ATTR, ApiVersionPlugin

_MISSING = object()

# Route settings carried over to aliases
_COPIED_SETTINGS = (
    "response_model",
    "status_code",
    "summary",
    "description",
    "response_description",
    "responses",
    "deprecated",
    "response_class",
    "include_in_schema",
    "response_model_exclude_unset",
    "response_model_exclude_none",
)


def route_metadata(route: APIRoute) -> Any:
    """Return the raw override of a FastAPI route, or ``None``.

    The ``version_override`` decorator takes precedence over an
    ``x-apiv`` entry in ``openapi_extra``.
    """
    value = getattr(route.endpoint, ROUTE_CONFIG_ATTR, _MISSING)
    if value is not _MISSING:
        return value
    extra = route.openapi_extra or {}
    return extra.get(f"x-{settings.ROUTE_CONFIG_KEY}")


def _own_values(values, inherited) -> list:
    """Drop the leading values an APIRoute inherited from the app router.

    ``add_api_route`` prepends the app router's values again.
    """
    values = list(values or [])
    inherited = list(inherited or [])
    if inherited and values[:len(inherited)] == inherited:
        return values[len(inherited):]
    return values


class FastAPIRouteHost:
    """RouteHost backed by a FastAPI application's router."""

    def __init__(self, app: FastAPI):
        self.app = app
        self.started = False
        self._before_start: List[Callable[[], Any]] = []
        self._wrap_lifespan()

    def list_routes(self) -> List[RouteDescriptor]:
        routes = []
        for route in self.app.router.routes:
            if not isinstance(route, APIRoute):
                continue
            config = route_metadata(route)
            for method in sorted(route.methods):
                routes.append(RouteDescriptor(method, route.path, route.endpoint, config, source=route))
        return routes

    def add_route(self, alias: AliasDescriptor) -> None:
        kwargs = {}
        source = alias.route.source if alias.route else None
        if isinstance(source, APIRoute):
            kwargs = {name: getattr(source, name) for name in _COPIED_SETTINGS}
            kwargs["tags"] = _own_values(source.tags, self.app.router.tags)
            kwargs["dependencies"] = _own_values(source.dependencies, self.app.router.dependencies)
            kwargs["name"] = source.name

        self.app.add_api_route(alias.path, alias.handler, methods=[alias.method], **kwargs)
        # Cached schema would not list the alias
        self.app.openapi_schema = None

    def _wrap_lifespan(self) -> None:
        """Run the before-start callbacks when the app's lifespan starts."""
        inner = self.app.router.lifespan_context

        @asynccontextmanager
        async def lifespan(app):
            self.run_before_start()
            async with inner(app) as state:
                yield state

        self.app.router.lifespan_context = lifespan

    def on_before_start(self, callback: Callable[[], Any]) -> None:
        if self.started:
            raise LifecycleError("Cannot add a before-start callback after start")
        self._before_start.append(callback)

    def run_before_start(self) -> None:
        """Run the before-start callbacks. Later calls do nothing."""
        if self.started:
            logger.debug("Before-start callbacks already ran")
            return
        self.started = True
        for callback in self._before_start:
            callback()


class VersionedAPI:
    """
    API versioning for a FastAPI application.

    Example:
        app = FastAPI()
        api = VersionedAPI(app, prefix="api", version="v1")
        api.include_router(users.router)

    Aliases are added when the application's lifespan starts, before any
    user lifespan handler runs. :meth:`finalize` adds them earlier.
    """

    def __init__(
        self,
        app: FastAPI,
        options: Optional[Mapping[str, Any]] = None,
        existing_prefix: str = "",
        **kwargs,
    ):
        if options is not None and kwargs:
            options = {**options, **kwargs}
        elif options is None:
            options = kwargs

        self.app = app
        self.host = FastAPIRouteHost(app)
        self.plugin = ApiVersionPlugin()
        self.context = self.plugin.register(self.host, options, RouteContext(prefix=existing_prefix))

    @property
    def prefix(self) -> str:
        return self.context.prefix

    def include_router(self, router: APIRouter, prefix: str = "", **kwargs) -> None:
        """Include ``router`` under the global prefix."""
        self.app.include_router(router, prefix=self.prefix + prefix, **kwargs)

    def finalize(self) -> None:
        """Add alias routes now instead of waiting for the lifespan to start."""
        self.host.run_before_start()
