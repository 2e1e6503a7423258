"""Service layer for the apiv package.

This package contains the pure prefix and alias computations. Nothing here
touches a host framework; the plugin feeds it route tables and applies
what it returns.
"""

from apiv.services.prefix import join_prefix, resolve_global_prefix
from apiv.services.paths import build_versioned_path, strip_global_prefix
from apiv.services.aliases import plan_alias, plan_aliases

__all__ = [
    "build_versioned_path",
    "join_prefix",
    "plan_alias",
    "plan_aliases",
    "resolve_global_prefix",
    "strip_global_prefix",
]
