"""Tests for waypost.views.client — client route registry and file loading."""

import json
from pathlib import Path

import pytest

from waypost.errors import ConfigurationError
from waypost.routing.params import RouteParamType
from waypost.views.client import ClientRouteRegistry
from waypost.views.types import ClientViewConfig

FILE_ROUTES = [
    {
        "route": "",
        "title": "Main",
        "children": [
            {"route": "home", "title": "Home"},
            {
                "route": "user/:userId",
                "title": "User Profile",
                "rolesAllowed": ["ROLE_ADMIN"],
                "lazy": True,
                "params": {":userId": "req"},
                "menu": {"title": "Users", "order": 1},
                "children": [{"route": "posts/:postId?", "params": {":postId?": "opt"}}],
            },
        ],
    },
    {"route": "/login", "title": "Login", "other": {"layout": "bare"}},
]


def _write(tmp_path: Path, data: object) -> Path:
    path = tmp_path / "file-routes.json"
    path.write_text(json.dumps(data), encoding="utf-8")
    return path


class TestRegistry:
    def test_register_and_get(self) -> None:
        registry = ClientRouteRegistry()
        config = ClientViewConfig("Home", None, "/home")
        registry.register("/home", config)
        assert registry.get("/home") is config
        assert "/home" in registry
        assert len(registry) == 1

    def test_preserves_order(self) -> None:
        registry = ClientRouteRegistry()
        for path in ("/home", "/profile", "/user/:userId"):
            registry.register(path, ClientViewConfig(None, None, path))
        assert list(registry.get_all_routes()) == ["/home", "/profile", "/user/:userId"]

    def test_register_replaces_in_place(self) -> None:
        registry = ClientRouteRegistry()
        registry.register("/a", ClientViewConfig("A", None, "/a"))
        registry.register("/b", ClientViewConfig("B", None, "/b"))
        registry.register("/a", ClientViewConfig("A2", None, "/a"))
        routes = registry.get_all_routes()
        assert list(routes) == ["/a", "/b"]
        assert routes["/a"].title == "A2"

    def test_all_routes_is_read_only(self) -> None:
        registry = ClientRouteRegistry()
        with pytest.raises(TypeError):
            registry.get_all_routes()["/x"] = ClientViewConfig(None, None, "/x")  # type: ignore[index]

    def test_remove_and_clear(self) -> None:
        registry = ClientRouteRegistry()
        registry.register("/a", ClientViewConfig("A", None, "/a"))
        registry.register("/b", ClientViewConfig("B", None, "/b"))
        registry.remove("/a")
        registry.remove("/missing")
        assert list(registry.get_all_routes()) == ["/b"]
        registry.clear()
        assert len(registry) == 0


class TestRegisterTree:
    def test_flattens_children_after_parents(self) -> None:
        registry = ClientRouteRegistry()
        registry.register_tree(FILE_ROUTES)
        assert list(registry.get_all_routes()) == [
            "/",
            "/home",
            "/user/:userId",
            "/user/:userId/posts/:postId?",
            "/login",
        ]

    def test_children_kept_nested(self) -> None:
        registry = ClientRouteRegistry()
        [main, _login] = registry.register_tree(FILE_ROUTES)
        assert [child.route for child in main.children] == ["/home", "/user/:userId"]
        assert main.children[1].children[0].route == "/user/:userId/posts/:postId?"

    def test_parent_recorded(self) -> None:
        registry = ClientRouteRegistry()
        registry.register_tree(FILE_ROUTES)
        assert registry.get("/")
        assert registry.get("/").parent is None  # type: ignore[union-attr]
        assert registry.get("/home").parent == "/"  # type: ignore[union-attr]
        posts = registry.get("/user/:userId/posts/:postId?")
        assert posts is not None
        assert posts.parent == "/user/:userId"

    def test_fields_copied(self) -> None:
        registry = ClientRouteRegistry()
        registry.register_tree(FILE_ROUTES)
        user = registry.get("/user/:userId")
        assert user is not None
        assert user.title == "User Profile"
        assert user.roles == ("ROLE_ADMIN",)
        assert user.lazy is True
        assert dict(user.route_parameters) == {":userId": RouteParamType.REQUIRED}
        assert user.menu is not None
        assert user.menu.title == "Users"
        assert user.menu.order == 1

    def test_missing_optional_fields(self) -> None:
        registry = ClientRouteRegistry()
        registry.register_tree(FILE_ROUTES)
        login = registry.get("/login")
        assert login is not None
        assert login.roles is None
        assert login.lazy is False
        assert login.menu is None
        assert dict(login.other) == {"layout": "bare"}

    def test_missing_route_raises(self) -> None:
        with pytest.raises(ConfigurationError, match="'route'"):
            ClientRouteRegistry().register_tree([{"title": "Nowhere"}])

    def test_non_object_raises(self) -> None:
        with pytest.raises(ConfigurationError, match="must be an object"):
            ClientRouteRegistry().register_tree(["home"])  # type: ignore[list-item]

    def test_bad_roles_raise(self) -> None:
        with pytest.raises(ConfigurationError, match="rolesAllowed"):
            ClientRouteRegistry().register_tree([{"route": "a", "rolesAllowed": "ADMIN"}])

    def test_bad_param_kind_raises(self) -> None:
        with pytest.raises(ConfigurationError, match="Unknown route parameter kind"):
            ClientRouteRegistry().register_tree([{"route": "a/:id", "params": {":id": "sometimes"}}])

    def test_bad_children_raise(self) -> None:
        with pytest.raises(ConfigurationError, match="children"):
            ClientRouteRegistry().register_tree([{"route": "a", "children": {"route": "b"}}])

    def test_bad_other_raises(self) -> None:
        with pytest.raises(ConfigurationError, match="'other'"):
            ClientRouteRegistry().register_tree([{"route": "x", "other": "oops"}])

    def test_other_list_raises(self) -> None:
        with pytest.raises(ConfigurationError, match="'other'"):
            ClientRouteRegistry().register_tree([{"route": "x", "other": [["a", 1]]}])

    @pytest.mark.parametrize("value", ["false", "true", 0, 1, None])
    def test_lazy_must_be_boolean(self, value: object) -> None:
        with pytest.raises(ConfigurationError, match="'lazy'"):
            ClientRouteRegistry().register_tree([{"route": "x", "lazy": value}])

    def test_menu_exclude_must_be_boolean(self) -> None:
        with pytest.raises(ConfigurationError, match="'exclude'"):
            ClientRouteRegistry().register_tree([{"route": "x", "menu": {"exclude": "false"}}])

    def test_title_must_be_string(self) -> None:
        with pytest.raises(ConfigurationError, match="'title'"):
            ClientRouteRegistry().register_tree([{"route": "x", "title": 42}])

    @pytest.mark.parametrize(
        "menu",
        [{"title": ["Users"]}, {"icon": 7}, {"order": "1"}, {"order": True}],
    )
    def test_menu_fields_type_checked(self, menu: dict[str, object]) -> None:
        with pytest.raises(ConfigurationError, match="menu of client route '/x'"):
            ClientRouteRegistry().register_tree([{"route": "x", "menu": menu}])

    def test_menu_order_accepts_numbers(self) -> None:
        registry = ClientRouteRegistry()
        registry.register_tree(
            [{"route": "a", "menu": {"order": 2}}, {"route": "b", "menu": {"order": 1.5}}]
        )
        assert registry.get("/a").menu.order == 2  # type: ignore[union-attr]
        assert registry.get("/b").menu.order == 1.5  # type: ignore[union-attr]

    def test_invalid_tree_registers_nothing(self) -> None:
        registry = ClientRouteRegistry()
        with pytest.raises(ConfigurationError):
            registry.register_tree([{"route": "ok"}, {"route": 5}])
        assert len(registry) == 0


class TestLoad:
    def test_load_file(self, tmp_path: Path) -> None:
        registry = ClientRouteRegistry()
        registry.load(_write(tmp_path, FILE_ROUTES))
        assert len(registry) == 5

    def test_load_replaces_contents(self, tmp_path: Path) -> None:
        registry = ClientRouteRegistry()
        registry.register("/stale", ClientViewConfig(None, None, "/stale"))
        registry.load(_write(tmp_path, [{"route": "fresh"}]))
        assert list(registry.get_all_routes()) == ["/fresh"]

    def test_invalid_json(self, tmp_path: Path) -> None:
        path = tmp_path / "file-routes.json"
        path.write_text("[{", encoding="utf-8")
        with pytest.raises(ConfigurationError, match="not valid JSON"):
            ClientRouteRegistry().load(path)

    def test_not_a_list(self, tmp_path: Path) -> None:
        with pytest.raises(ConfigurationError, match="JSON array"):
            ClientRouteRegistry().load(_write(tmp_path, {"route": "home"}))

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(FileNotFoundError):
            ClientRouteRegistry().load(tmp_path / "missing.json")

    def test_non_utf8_file(self, tmp_path: Path) -> None:
        path = tmp_path / "file-routes.json"
        path.write_bytes(b'[{"route": "\xff"}]')
        with pytest.raises(ConfigurationError, match="not valid JSON"):
            ClientRouteRegistry().load(path)

    def test_failed_load_keeps_previous_routes(self, tmp_path: Path) -> None:
        registry = ClientRouteRegistry()
        registry.load(_write(tmp_path, [{"route": "home", "title": "Home"}]))
        with pytest.raises(ConfigurationError):
            registry.load(_write(tmp_path, [{"route": "fresh"}, {"route": "x", "lazy": "no"}]))
        assert list(registry.get_all_routes()) == ["/home"]
        assert registry.get("/home").title == "Home"  # type: ignore[union-attr]

    def test_undecodable_file_keeps_previous_routes(self, tmp_path: Path) -> None:
        registry = ClientRouteRegistry()
        registry.load(_write(tmp_path, [{"route": "home"}]))
        path = tmp_path / "broken.json"
        path.write_bytes(b"\xff\xfe")
        with pytest.raises(ConfigurationError):
            registry.load(path)
        assert "/home" in registry
