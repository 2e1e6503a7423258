"""
Data models for the apiv package.

This module exports the option schemas and route records.
"""

from apiv.models.options import ApiVersionOptions, RouteVersionConfig
from apiv.models.routes import AliasDescriptor, RouteContext, RouteDescriptor

__all__ = [
    # Options
    "ApiVersionOptions",
    "RouteVersionConfig",

    # Routes
    "AliasDescriptor",
    "RouteContext",
    "RouteDescriptor",
]
