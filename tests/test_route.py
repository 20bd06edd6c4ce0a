"""Tests for routetree.route — the Route record."""

import pytest

from routetree.config import TreeConfig
from routetree.nodes import HandlerRef
from routetree.route import Route
from routetree.routing import Layer


def auth(request: object) -> None:
    pass


def list_users(request: object) -> None:
    pass


def _route() -> Route:
    config = TreeConfig()
    stack = (
        HandlerRef.for_layer(Layer("/", auth, end=False), config),
        HandlerRef.for_layer(Layer("/", list_users, end=True), config),
    )
    return Route(id="getusers", method="GET", path="/users", stack=stack)


class TestRoute:
    def test_layer_by_name(self) -> None:
        route = _route()
        ref = route.layer("list_users")
        assert ref is route.stack[1]
        assert ref.handle is list_users

    def test_layer_first_match(self) -> None:
        config = TreeConfig()
        first = HandlerRef.for_layer(Layer("/", auth, end=False), config)
        second = HandlerRef.for_layer(Layer("/", auth, end=False), config)
        route = Route(id="geta", method="GET", path="/a", stack=(first, second))
        assert route.layer("auth") is first

    def test_layer_missing(self) -> None:
        assert _route().layer("nope") is None

    def test_list(self) -> None:
        assert _route().list() == ["auth", "list_users"]

    def test_list_is_a_copy(self) -> None:
        route = _route()
        names = route.list()
        names.append("extra")
        assert route.list() == ["auth", "list_users"]

    def test_to_dict(self) -> None:
        assert _route().to_dict() == {
            "id": "getusers",
            "method": "GET",
            "path": "/users",
            "stack": ["auth", "list_users"],
        }

    def test_str(self) -> None:
        assert str(_route()) == "GET /users\n  auth\n  list_users"

    def test_frozen(self) -> None:
        route = _route()
        with pytest.raises(AttributeError):
            route.path = "/other"  # type: ignore[misc]
