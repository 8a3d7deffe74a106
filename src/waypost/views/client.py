"""Client route registry.

Holds the views declared by the client application, keyed by full route
path in declaration order. The frontend build emits them as
``file-routes.json``::

    [
      {"route": "", "title": "Home", "children": [
        {"route": "user/:userId", "title": "User", "rolesAllowed": ["ADMIN"],
         "params": {":userId": "req"}}
      ]}
    ]
"""

import json
import logging
from collections.abc import Iterable, Iterator, Mapping
from pathlib import Path
from types import MappingProxyType
from typing import Any

from waypost.errors import ConfigurationError
from waypost.routing.params import RouteParamType, parse_param_type
from waypost.views.types import ClientViewConfig, MenuConfig

logger = logging.getLogger("waypost.client")


class ClientRouteRegistry:
    """Ordered registry of client-declared views.

    Usage::

        registry = ClientRouteRegistry()
        registry.register("/home", ClientViewConfig("Home", None, "/home"))
        registry.load("frontend/generated/file-routes.json")
    """

    __slots__ = ("_routes",)

    def __init__(self) -> None:
        self._routes: dict[str, ClientViewConfig] = {}

    def register(self, path: str, config: ClientViewConfig) -> None:
        """Register (or replace) the view declared at *path*."""
        self._routes[path] = config

    def get(self, path: str) -> ClientViewConfig | None:
        return self._routes.get(path)

    def remove(self, path: str) -> None:
        self._routes.pop(path, None)

    def clear(self) -> None:
        self._routes.clear()

    def get_all_routes(self) -> Mapping[str, ClientViewConfig]:
        """Return a read-only view of every registered route, in order."""
        return MappingProxyType(self._routes)

    def register_tree(
        self,
        items: Iterable[Mapping[str, Any]],
        parent: str | None = None,
    ) -> list[ClientViewConfig]:
        """Register ``file-routes.json`` declarations, children included.

        Each child is registered under its full path (parent route joined
        with its own) right after its parent, and also kept nested in the
        parent's ``children``. Returns the top-level configs built for *items*.
        """
        configs = [_build_config(item, parent) for item in items]
        for config in _walk(configs):
            self.register(config.route, config)
        return configs

    def load(self, path: str | Path) -> None:
        """Replace the registry contents with the routes in a JSON file.

        Raises ``ConfigurationError`` if the file is not valid UTF-8 JSON or
        does not hold a list of route declarations. The registry is left
        unchanged when loading fails.
        """
        source = Path(path)
        try:
            data = json.loads(source.read_text(encoding="utf-8"))
        except (UnicodeDecodeError, json.JSONDecodeError) as exc:
            msg = f"Client routes file {str(source)!r} is not valid JSON: {exc}"
            raise ConfigurationError(msg) from exc
        if not isinstance(data, list):
            msg = f"Client routes file {str(source)!r} must contain a JSON array."
            raise ConfigurationError(msg)
        # Validate everything before touching the current routes.
        configs = [_build_config(item, None) for item in data]
        self.clear()
        for config in _walk(configs):
            self.register(config.route, config)
        logger.debug("Loaded %d client routes from %s", len(self._routes), source)

    def __len__(self) -> int:
        return len(self._routes)

    def __contains__(self, path: object) -> bool:
        return path in self._routes


# -- file-routes.json parsing --------------------------------------------------


def _walk(configs: Iterable[ClientViewConfig]) -> Iterator[ClientViewConfig]:
    """Pre-order traversal: each parent before its children."""
    for config in configs:
        yield config
        yield from _walk(config.children)


def _build_config(item: Any, parent: str | None) -> ClientViewConfig:
    if not isinstance(item, Mapping):
        msg = f"Client route declaration must be an object, got {type(item).__name__}"
        raise ConfigurationError(msg)
    route = item.get("route")
    if not isinstance(route, str):
        msg = f"Client route declaration is missing a string 'route': {dict(item)!r}"
        raise ConfigurationError(msg)
    full_route = _join(parent, route)
    children = item.get("children") or ()
    if not isinstance(children, list | tuple):
        msg = f"'children' of client route {full_route!r} must be a list."
        raise ConfigurationError(msg)
    return ClientViewConfig(
        title=_optional(item, "title", str, f"client route {full_route!r}"),
        roles=_roles(item.get("rolesAllowed"), full_route),
        route=full_route,
        lazy=_flag(item, "lazy", f"client route {full_route!r}"),
        menu=_menu(item.get("menu"), full_route),
        route_parameters=_params(item.get("params"), full_route),
        other=_other(item.get("other"), full_route),
        children=tuple(_build_config(child, full_route) for child in children),
        parent=parent,
    )


def _join(parent: str | None, route: str) -> str:
    if parent is None:
        return "/" + route.lstrip("/")
    if not route:
        return parent
    return parent.rstrip("/") + "/" + route.lstrip("/")


def _roles(value: Any, route: str) -> tuple[str, ...] | None:
    if value is None:
        return None
    if not isinstance(value, list | tuple) or not all(isinstance(r, str) for r in value):
        msg = f"'rolesAllowed' of client route {route!r} must be a list of strings."
        raise ConfigurationError(msg)
    return tuple(value)


def _menu(value: Any, route: str) -> MenuConfig | None:
    if value is None:
        return None
    if not isinstance(value, Mapping):
        msg = f"'menu' of client route {route!r} must be an object."
        raise ConfigurationError(msg)
    return MenuConfig(
        title=_optional(value, "title", str, f"the menu of client route {route!r}"),
        order=_order(value.get("order"), route),
        icon=_optional(value, "icon", str, f"the menu of client route {route!r}"),
        exclude=_flag(value, "exclude", f"the menu of client route {route!r}"),
    )


def _params(value: Any, route: str) -> Mapping[str, RouteParamType]:
    if not value:
        return MappingProxyType({})
    if not isinstance(value, Mapping):
        msg = f"'params' of client route {route!r} must be an object."
        raise ConfigurationError(msg)
    return MappingProxyType({token: parse_param_type(kind) for token, kind in value.items()})


def _other(value: Any, route: str) -> Mapping[str, Any]:
    if value is None:
        return MappingProxyType({})
    if not isinstance(value, Mapping):
        msg = f"'other' of client route {route!r} must be an object."
        raise ConfigurationError(msg)
    return MappingProxyType(dict(value))


def _flag(value: Mapping[str, Any], key: str, where: str) -> bool:
    flag = value.get(key, False)
    if not isinstance(flag, bool):
        msg = f"{key!r} of {where} must be true or false, got {flag!r}."
        raise ConfigurationError(msg)
    return flag


def _optional(value: Mapping[str, Any], key: str, kind: type, where: str) -> Any:
    field = value.get(key)
    if field is not None and not isinstance(field, kind):
        msg = f"{key!r} of {where} must be a {kind.__name__}, got {field!r}."
        raise ConfigurationError(msg)
    return field


def _order(value: Any, route: str) -> int | float | None:
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, int | float):
        msg = f"'order' of the menu of client route {route!r} must be a number, got {value!r}."
        raise ConfigurationError(msg)
    return value
