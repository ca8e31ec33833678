"""Tests for the API route table."""

import pytest
from agora.client.routes import ROUTES, MethodSpec, RouteSpec, RouteTable, UsersResponse


class TestRouteSpec:
    """Tests for RouteSpec validation."""

    def test__valid_route__exposes_methods(self) -> None:
        """Keep declared methods by name."""
        route = RouteSpec("/things", {"GET": MethodSpec(response=dict)})

        assert list(route.methods) == ["GET"]

    def test__relative_path__raises_value_error(self) -> None:
        """Reject paths without leading slash."""
        with pytest.raises(ValueError, match="must start with '/'"):
            RouteSpec("things", {"GET": MethodSpec(response=dict)})

    def test__no_methods__raises_value_error(self) -> None:
        """Reject routes without methods."""
        with pytest.raises(ValueError, match="declares no methods"):
            RouteSpec("/things", {})

    def test__lowercase_method__raises_value_error(self) -> None:
        """Reject lower-case method names."""
        with pytest.raises(ValueError, match="upper-case"):
            RouteSpec("/things", {"get": MethodSpec(response=dict)})

    def test__methods__are_read_only(self) -> None:
        """Methods mapping cannot be modified after construction."""
        route = RouteSpec("/things", {"GET": MethodSpec(response=dict)})

        with pytest.raises(TypeError):
            route.methods["POST"] = MethodSpec(response=dict)  # type: ignore[index]

    def test__method_lookup__is_case_insensitive(self) -> None:
        """Look up methods regardless of case."""
        spec = MethodSpec(response=dict)
        route = RouteSpec("/things", {"GET": spec})

        assert route.method("get") is spec

    def test__undeclared_method__raises_value_error(self) -> None:
        """Refuse methods the route does not declare."""
        route = RouteSpec("/things", {"GET": MethodSpec(response=dict)})

        with pytest.raises(ValueError, match="POST is not declared for /things"):
            route.method("POST")


class TestRouteTable:
    """Tests for RouteTable."""

    def test__duplicate_path__raises_value_error(self) -> None:
        """Paths must be unique within the table."""
        route = RouteSpec("/things", {"GET": MethodSpec(response=dict)})

        with pytest.raises(ValueError, match="Duplicate route path: /things"):
            RouteTable([route, route])

    def test__iteration__keeps_declaration_order(self) -> None:
        """Iterate paths in the order they were declared."""
        table = RouteTable(
            [
                RouteSpec("/b", {"GET": MethodSpec(response=dict)}),
                RouteSpec("/a", {"GET": MethodSpec(response=dict)}),
            ]
        )

        assert list(table) == ["/b", "/a"]
        assert len(table) == 2


class TestDeclaredRoutes:
    """Tests for the backend route declarations."""

    def test__users_route__declares_get(self) -> None:
        """GET /users returns the user list with status 200."""
        spec = ROUTES["/users"].method("GET")

        assert spec.response is UsersResponse
        assert spec.statuses == frozenset({200})
        assert spec.request is None

    def test__every_method__has_response_schema(self) -> None:
        """Each method on each path declares a response schema."""
        for route in ROUTES.values():
            for spec in route.methods.values():
                assert isinstance(spec.response, type)
