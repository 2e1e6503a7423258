"""Alias route planning.

For every route carrying a per-route override this module works out the
extra path the route should also answer on. Planning is pure: the caller
hands the resulting :class:`AliasDescriptor` objects to the host.
"""

import logging
from typing import Iterable, List, Optional

from pydantic import ValidationError

from apiv.models.options import ApiVersionOptions, RouteVersionConfig
from apiv.models.routes import AliasDescriptor, RouteDescriptor
from apiv.exceptions import DuplicateRouteError, InvalidRouteConfigError
from apiv.services.paths import build_versioned_path, strip_global_prefix

logger = logging.getLogger(__name__)


def route_config(route: RouteDescriptor) -> Optional[RouteVersionConfig]:
    """
    Return the validated override of ``route`` or ``None``.

    Raises:
        InvalidRouteConfigError: If the metadata is malformed
    """
    try:
        return RouteVersionConfig.coerce(route.config)
    except ValidationError as e:
        raise InvalidRouteConfigError(route.method, route.path, str(e)) from e


def plan_alias(
    route: RouteDescriptor,
    global_prefix: str,
    options: ApiVersionOptions,
) -> Optional[AliasDescriptor]:
    """
    Compute the alias for a single route.

    Args:
        route: Route as currently registered, global prefix included
        global_prefix: Prefix resolved at registration time
        options: Validated top-level options, used as fallbacks

    Returns:
        AliasDescriptor or None when the route has no override or the
        rebuilt path is the path it already has
    """
    config = route_config(route)
    if config is None:
        return None

    original_path = strip_global_prefix(route.path, global_prefix)

    if config.is_disabled:
        return AliasDescriptor(
            method=route.method,
            path=original_path,
            handler=route.handler,
            route=route,
        )

    alias_path = build_versioned_path(
        original_path,
        config.effective_prefix(options),
        config.effective_version(options),
    )

    if alias_path == route.path:
        logger.debug("Alias for %s %s matches the registered path, skipping", route.method, route.path)
        return None

    return AliasDescriptor(
        method=route.method,
        path=alias_path,
        handler=route.handler,
        route=route,
    )


def plan_aliases(
    routes: Iterable[RouteDescriptor],
    global_prefix: str,
    options: ApiVersionOptions,
) -> List[AliasDescriptor]:
    """
    Plan aliases for a whole route table.

    The table is snapshotted first. Each route yields at most one alias and
    an alias is dropped when its method and path are already taken by the
    same handler, either through a registered route or an alias planned
    earlier in the same pass.

    Raises:
        DuplicateRouteError: If the method and path belong to another handler
        InvalidRouteConfigError: If a route's override is malformed
    """
    routes = list(routes)
    taken = {}
    for r in routes:
        taken.setdefault((r.method.upper(), r.path), r.handler)
    aliases = []

    for route in routes:
        alias = plan_alias(route, global_prefix, options)
        if alias is None:
            continue
        if alias.key in taken:
            if taken[alias.key] != alias.handler:
                raise DuplicateRouteError(alias.method, alias.path)
            logger.debug("Route %s %s already exists, no alias added", alias.method.upper(), alias.path)
            continue
        taken[alias.key] = alias.handler
        aliases.append(alias)

    return aliases
