"""API versioning plugin.

Registering the plugin resolves the global ``/prefix/version`` prefix and
returns it in a new :class:`RouteContext`. It also schedules a pass that
runs once the route table is complete and adds alias routes for every
endpoint that overrides or opts out of versioning.
"""

from typing import Any, Callable, List, Mapping, Optional, TypeVar, Union

from loguru import logger

from apiv.models.options import ApiVersionOptions, RouteVersionConfig
from apiv.models.routes import AliasDescriptor, RouteContext
from apiv.services.aliases import plan_aliases
from apiv.services.prefix import resolve_global_prefix

F = TypeVar("F", bound=Callable[..., Any])

# Attribute set on endpoints by version_override
ROUTE_CONFIG_ATTR = "__apiv__"


class AliasPass:
    """Before-start callback adding alias routes to a host."""

    def __init__(self, host, global_prefix: str, options: ApiVersionOptions):
        self.host = host
        self.global_prefix = global_prefix
        self.options = options
        self.aliases: List[AliasDescriptor] = []
        self.ran = False

    def __call__(self) -> List[AliasDescriptor]:
        if self.ran:
            logger.warning("Alias pass already ran, ignoring repeated invocation")
            return []
        self.ran = True

        aliases = plan_aliases(self.host.list_routes(), self.global_prefix, self.options)
        for alias in aliases:
            self.host.add_route(alias)
            logger.debug(f"Added alias {alias.method.upper()} {alias.path} -> {alias.route.path}")

        self.aliases = aliases
        logger.info(f"Registered {len(aliases)} alias route(s)")
        return aliases


class ApiVersionPlugin:
    """Plugin rewriting the global route prefix and adding alias routes."""

    name = "apiv"

    def register(
        self,
        host,
        options: Union[ApiVersionOptions, Mapping[str, Any], None] = None,
        context: Optional[RouteContext] = None,
    ) -> RouteContext:
        """
        Register the plugin on ``host``.

        Args:
            host: Object implementing :class:`apiv.host.RouteHost`
            options: Raw or validated plugin options
            context: Context holding the prefix currently in effect

        Returns:
            RouteContext: The context routes should be registered under

        Raises:
            InvalidPluginOptionsError: If the options fail validation
        """
        options = ApiVersionOptions.from_input(options)
        context = context or RouteContext()

        if options.is_disabled:
            logger.info("API versioning disabled, route prefix left untouched")
            return context

        global_prefix = resolve_global_prefix(options, context.prefix)
        host.on_before_start(AliasPass(host, global_prefix, options))

        logger.info(f"API versioning enabled with prefix {global_prefix!r}")
        return context.with_prefix(global_prefix)


plugin = ApiVersionPlugin()


def register_versioning(host, options=None, context: Optional[RouteContext] = None) -> RouteContext:
    """Register the shared plugin instance on ``host``."""
    return plugin.register(host, options, context)


def version_override(config: Union[bool, Mapping[str, Any], RouteVersionConfig, None] = None, **fields) -> Callable[[F], F]:
    """
    Attach a per-route override to an endpoint.

    ``@version_override(False)`` or ``@version_override(enabled=False)``
    keeps the endpoint reachable without prefix and version.
    ``@version_override(version="v2")`` adds a ``/api/v2/...`` alias.
    Only keys actually passed count as overrides.
    """
    if config is False or config is True:
        if fields:
            raise TypeError("version_override() takes either a bool or keyword overrides")
        value = config
    elif isinstance(config, RouteVersionConfig):
        value = RouteVersionConfig.model_validate({**config.model_dump(exclude_unset=True), **fields})
    else:
        value = {**(config or {}), **fields}

    def decorator(func: F) -> F:
        setattr(func, ROUTE_CONFIG_ATTR, value)
        return func

    return decorator
