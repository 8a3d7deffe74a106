"""Route, PathSegment and RouteData frozen dataclasses."""

from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any

from waypost.routing.params import RouteParamType


@dataclass(frozen=True, slots=True)
class PathSegment:
    """A parsed segment of a route path.

    Static:    ``users``    (is_param=False)
    Param:     ``:id``      (is_param=True, param_name="id")
    Optional:  ``:id?``     (param_type=OPTIONAL)
    Wildcard:  ``:rest*``   (param_type=WILDCARD)
    """

    value: str
    is_param: bool = False
    param_name: str | None = None
    param_type: RouteParamType = RouteParamType.REQUIRED


@dataclass(frozen=True, slots=True)
class Route:
    """A frozen server route definition.

    *handler* is the view class or function serving the page. Its title
    comes from a title provider at aggregation time, not from the route.
    """

    path: str
    handler: Callable[..., Any]
    name: str | None = None


@dataclass(frozen=True, slots=True)
class RouteData:
    """Snapshot entry for one registered route.

    ``parameters`` maps parameter name to its raw pattern, in path order::

        RouteData("comments/:id?", handler, {"id": ":id?"})
    """

    path: str
    handler: Callable[..., Any]
    parameters: Mapping[str, str] = field(default_factory=lambda: MappingProxyType({}))
    name: str | None = None
