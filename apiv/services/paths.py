"""Path helpers used to rebuild alias routes."""

import re

_SLASHES = re.compile(r"/+")


def strip_global_prefix(path: str, global_prefix: str) -> str:
    """Remove ``global_prefix`` from the front of ``path``.

    A path equal to the prefix becomes ``/``. Paths outside the prefixed
    namespace, or any path when there is no prefix, are returned unchanged.
    """
    if not global_prefix:
        return path
    if path.startswith(global_prefix):
        trimmed = path[len(global_prefix):]
        return trimmed if trimmed else "/"
    return path


def build_versioned_path(path: str, prefix: str = None, version: str = None) -> str:
    """Compose ``/prefix/version/path`` skipping empty segments.

    Runs of slashes are collapsed so the result never contains ``//``.
    """
    segments = []
    if prefix:
        segments.append(prefix)
    if version:
        segments.append(version)

    clean_path = path[1:] if path.startswith("/") else path
    if clean_path:
        segments.append(clean_path)

    return _SLASHES.sub("/", "/" + "/".join(segments))
