"""Test utilities for apiv tests."""

from typing import Any

from apiv.models.routes import RouteDescriptor


def handler(*args, **kwargs):
    """Placeholder route handler."""
    return "ok"


def other_handler(*args, **kwargs):
    """Second placeholder handler, distinguishable from ``handler``."""
    return "other"


def make_route(path: str, config: Any = None, method: str = "GET", endpoint=handler) -> RouteDescriptor:
    """Create a RouteDescriptor as a host would report it."""
    return RouteDescriptor(method=method, path=path, handler=endpoint, config=config)
