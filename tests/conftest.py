"""Test fixtures for the apiv package."""

import pytest
from fastapi import FastAPI

from apiv.host import InMemoryRouteHost
from apiv.models import ApiVersionOptions
from apiv.plugin import ApiVersionPlugin


@pytest.fixture
def options() -> ApiVersionOptions:
    """Global options used by the end-to-end scenarios."""
    return ApiVersionOptions(prefix="api", version="v1")


@pytest.fixture
def global_prefix() -> str:
    return "/api/v1"


@pytest.fixture
def host() -> InMemoryRouteHost:
    """Return an empty in-memory host."""
    return InMemoryRouteHost()


@pytest.fixture
def plugin() -> ApiVersionPlugin:
    """Return a fresh plugin instance."""
    return ApiVersionPlugin()


@pytest.fixture
def versioned_host(host, plugin) -> InMemoryRouteHost:
    """Host with the plugin registered as prefix=api, version=v1."""
    host.register(plugin, {"prefix": "api", "version": "v1"})
    return host


@pytest.fixture
def app() -> FastAPI:
    """Return a bare FastAPI application."""
    return FastAPI()


@pytest.fixture
def recording_host():
    """Host double that records calls instead of routing."""
    class RecordingHost:
        def __init__(self):
            self.routes = []
            self.added = []
            self.callbacks = []

        def list_routes(self):
            return list(self.routes)

        def add_route(self, alias):
            self.added.append(alias)

        def on_before_start(self, callback):
            self.callbacks.append(callback)

    return RecordingHost()
