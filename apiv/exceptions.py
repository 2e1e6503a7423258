"""Exceptions for the apiv package.

This module contains the exception hierarchy raised while validating
options and registering versioned and alias routes.
"""


class ApiVersionError(Exception):
    """Base exception for all plugin errors."""
    pass


class InvalidPluginOptionsError(ApiVersionError, ValueError):
    """Top-level plugin options failed schema validation."""
    pass


class InvalidRouteConfigError(ApiVersionError, ValueError):
    """A per-route override failed schema validation."""

    def __init__(self, method: str, path: str, message: str):
        self.method = method
        self.path = path
        super().__init__(f"Invalid apiv config for {method.upper()} {path}: {message}")


class RouteRegistrationError(ApiVersionError):
    """The host refused to register a route."""
    pass


class DuplicateRouteError(RouteRegistrationError):
    """A route with the same method and path already exists."""

    def __init__(self, method: str, path: str):
        self.method = method
        self.path = path
        super().__init__(f"Route {method.upper()} {path} is already registered")


class LifecycleError(ApiVersionError):
    """A lifecycle operation was attempted in the wrong phase."""
    pass
