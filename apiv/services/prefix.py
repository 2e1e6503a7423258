"""Global prefix resolution.

Computes the single prefix placed in front of every route from the
configured prefix and version segments.
"""

import logging
import re

logger = logging.getLogger(__name__)

_SLASHES = re.compile(r"/+")


def join_prefix(prefix: str = None, version: str = None) -> str:
    """Join the non-empty segments into ``/prefix/version``.

    Returns an empty string when both segments are empty or missing.
    """
    parts = [segment for segment in (prefix, version) if segment]
    if not parts:
        return ""
    joined = _SLASHES.sub("/", "/" + "/".join(parts))
    return joined.rstrip("/")


def resolve_global_prefix(options, existing_prefix: str = "") -> str:
    """
    Resolve the prefix that replaces the host's current route prefix.

    Args:
        options: Validated options exposing ``prefix`` and ``version``
        existing_prefix: Prefix already in effect on the host

    Returns:
        str: ``/prefix/version`` built from the options, or
        ``existing_prefix`` when the options configure neither segment
    """
    resolved = join_prefix(options.prefix, options.version)
    if not resolved:
        logger.debug("No prefix configured, keeping existing prefix %r", existing_prefix)
        return existing_prefix or ""
    return resolved
