"""Tests for the in-memory route host."""

import pytest

from apiv.exceptions import DuplicateRouteError, LifecycleError, RouteRegistrationError
from apiv.host import InMemoryRouteHost, RouteHost
from apiv.models import AliasDescriptor
from tests.utils import handler, other_handler


@pytest.mark.unit
class TestInMemoryRouteHost:
    """Tests for route registration and lifecycle on the in-memory host."""

    def test_implements_route_host(self, host):
        """Test the host satisfies the RouteHost protocol."""
        assert isinstance(host, RouteHost)

    def test_routes_get_current_prefix(self):
        """Routes get current prefix."""
        host = InMemoryRouteHost(prefix="/api/v1")

        route = host.route("get", "/users", handler)

        assert route.path == "/api/v1/users"
        assert route.method == "GET"
        assert host.lookup("GET", "/api/v1/users") is handler

    def test_root_route_under_prefix(self):
        """Root route under prefix."""
        host = InMemoryRouteHost(prefix="/api/v1")
        assert host.route("GET", "/", handler).path == "/api/v1"

    def test_root_route_without_prefix(self, host):
        """Root route without prefix."""
        assert host.route("GET", "/", handler).path == "/"

    def test_relative_path_rejected(self, host):
        """Test paths must be absolute."""
        with pytest.raises(RouteRegistrationError):
            host.route("GET", "users", handler)

    def test_duplicate_route_rejected(self, host):
        """Duplicate route rejected."""
        host.route("GET", "/users", handler)

        with pytest.raises(DuplicateRouteError) as excinfo:
            host.route("GET", "/users", other_handler)

        assert excinfo.value.path == "/users"

    def test_add_route_is_not_prefixed(self):
        """Add route is not prefixed."""
        host = InMemoryRouteHost(prefix="/api/v1")

        host.add_route(AliasDescriptor(method="GET", path="/users", handler=handler))

        assert host.lookup("GET", "/users") is handler
        assert host.lookup("GET", "/api/v1/users") is None

    def test_start_runs_callbacks_once(self, host):
        """Start runs callbacks once."""
        calls = []
        host.on_before_start(lambda: calls.append("first"))
        host.on_before_start(lambda: calls.append("second"))

        host.start()

        assert calls == ["first", "second"]
        with pytest.raises(LifecycleError):
            host.start()
        assert calls == ["first", "second"]

    def test_callback_after_start_rejected(self, host):
        """Callback after start rejected."""
        host.start()

        with pytest.raises(LifecycleError):
            host.on_before_start(lambda: None)

    def test_plugin_registered_once(self, host, plugin):
        """Plugin registered once."""
        host.register(plugin, {})

        with pytest.raises(RouteRegistrationError):
            host.register(plugin, {})

    def test_plugin_after_start_rejected(self, host, plugin):
        """Plugin after start rejected."""
        host.start()

        with pytest.raises(LifecycleError):
            host.register(plugin, {})
