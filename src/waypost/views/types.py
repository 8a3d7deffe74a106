"""View metadata records.

Immutable frozen dataclasses for client route declarations and the
merged view entries. ``ViewInfo`` owns its JSON shape so the key order
of the embedded payload is fixed in one place.
"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any

from waypost.routing.params import RouteParamType


def _empty() -> Mapping[str, Any]:
    return MappingProxyType({})


@dataclass(frozen=True, slots=True)
class MenuConfig:
    """Navigation menu hints declared by a client view."""

    title: str | None = None
    order: float | None = None
    icon: str | None = None
    exclude: bool = False

    def to_json(self) -> dict[str, Any]:
        data: dict[str, Any] = {}
        if self.title is not None:
            data["title"] = self.title
        if self.order is not None:
            data["order"] = self.order
        if self.icon is not None:
            data["icon"] = self.icon
        data["exclude"] = self.exclude
        return data


@dataclass(frozen=True, slots=True)
class ClientViewConfig:
    """A view declared by the client application.

    Attributes:
        title: Explicit title, or ``None`` to derive one from the route.
        roles: Roles required to open the view. ``None`` means public.
        route: Route path as declared by the client.
        lazy: Whether the client loads the view on demand.
        menu: Optional menu hints.
        route_parameters: Parameter token to kind, e.g. ``{":id": REQUIRED}``.
        other: Extra metadata passed through to the client untouched.
        children: Nested views declared under this route.
        parent: Full route of the enclosing view, if nested.
    """

    title: str | None
    roles: tuple[str, ...] | None
    route: str
    lazy: bool = False
    menu: MenuConfig | None = None
    route_parameters: Mapping[str, RouteParamType] = field(default_factory=_empty)
    other: Mapping[str, Any] = field(default_factory=_empty)
    children: tuple["ClientViewConfig", ...] = ()
    parent: str | None = None


@dataclass(frozen=True, slots=True)
class ViewInfo:
    """One reachable view in the merged available-views map."""

    route: str
    title: str
    roles: tuple[str, ...] = ()
    route_parameters: Mapping[str, RouteParamType] = field(default_factory=_empty)
    lazy: bool = False
    menu: MenuConfig | None = None
    other: Mapping[str, Any] = field(default_factory=_empty)
    children: tuple["ViewInfo", ...] = ()

    def to_json(self) -> dict[str, Any]:
        """Return the JSON object for this view.

        Key order is fixed: ``title, route, lazy, menu, routeParameters,
        roles, other, children``. Empty optional keys are omitted.
        """
        data: dict[str, Any] = {
            "title": self.title,
            "route": self.route,
            "lazy": self.lazy,
        }
        if self.menu is not None:
            data["menu"] = self.menu.to_json()
        data["routeParameters"] = {
            token: kind.value for token, kind in self.route_parameters.items()
        }
        if self.roles:
            data["roles"] = list(self.roles)
        if self.other:
            data["other"] = dict(self.other)
        if self.children:
            data["children"] = [child.to_json() for child in self.children]
        return data
