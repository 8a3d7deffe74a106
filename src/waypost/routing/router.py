"""Server route registry.

Routes are registered during setup and frozen before the first document
is generated. The aggregator reads them through ``registered_routes()``,
a snapshot that never exposes the registry's own containers.
"""

from collections.abc import Callable
from types import MappingProxyType
from typing import Any

from waypost.errors import ConfigurationError
from waypost.routing.params import RouteParamType, normalize_route, param_type_for
from waypost.routing.route import PathSegment, Route, RouteData


def parse_path(path: str) -> list[PathSegment]:
    """Parse a route path string into segments.

    Examples::

        "/users"             -> [PathSegment("users")]
        "/users/:id"         -> [PathSegment("users"), PathSegment(":id", is_param=True, ...)]
        "comments/:id?"      -> [..., PathSegment(":id?", param_type=OPTIONAL)]
        "files/:path*"       -> [..., PathSegment(":path*", param_type=WILDCARD)]
    """
    segments: list[PathSegment] = []
    seen: set[str] = set()
    for part in path.strip("/").split("/"):
        if not part:
            continue
        if (part.startswith("{") and part.endswith("}")) or (
            part.startswith("<") and part.endswith(">")
        ):
            msg = (
                f"Route {path!r} uses {part!r}. Waypost routes declare parameters "
                "as :param (optional :param?, wildcard :param*), not {param} or <param>."
            )
            raise ConfigurationError(msg)
        if not part.startswith(":"):
            segments.append(PathSegment(value=part))
            continue

        param_type = param_type_for(part)
        name = part[1:]
        if param_type is not RouteParamType.REQUIRED:
            name = name[:-1]
        if not name:
            msg = f"Route {path!r} has a parameter without a name."
            raise ConfigurationError(msg)
        if name in seen:
            msg = f"Route {path!r} declares parameter {name!r} more than once."
            raise ConfigurationError(msg)
        seen.add(name)
        segments.append(
            PathSegment(value=part, is_param=True, param_name=name, param_type=param_type)
        )

    for seg in segments[:-1]:
        if seg.param_type is RouteParamType.WILDCARD:
            msg = f"Route {path!r}: wildcard {seg.value!r} must be the last segment."
            raise ConfigurationError(msg)
    return segments


def _handler_name(handler: Any) -> str:
    return getattr(handler, "__qualname__", None) or repr(handler)


class Router:
    """Ordered server route registry.

    Usage::

        router = Router()
        router.add(Route("users", UsersView))

        @router.view("users/:id")
        class UserView: ...

        router.compile()
        snapshot = router.registered_routes()
    """

    __slots__ = ("_compiled", "_params", "_routes")

    def __init__(self) -> None:
        self._routes: dict[str, Route] = {}
        self._params: dict[str, MappingProxyType[str, str]] = {}
        self._compiled = False

    def add(self, route: Route) -> None:
        """Add a route to the registry. Must be called before compile().

        Paths that normalize to the same view key (``bar``, ``/bar``,
        ``bar/``) count as the same route.
        """
        if self._compiled:
            msg = "Cannot add routes after compilation."
            raise RuntimeError(msg)
        key = normalize_route(route.path)
        if key in self._routes:
            existing = self._routes[key]
            msg = (
                f"Route {route.path!r} ({_handler_name(route.handler)}) is already registered "
                f"as {existing.path!r} ({_handler_name(existing.handler)})."
            )
            raise ConfigurationError(msg)

        segments = parse_path(route.path)
        params = {seg.param_name: seg.value for seg in segments if seg.param_name}
        self._routes[key] = route
        self._params[key] = MappingProxyType(params)

    def view(self, path: str, *, name: str | None = None) -> Callable[[Any], Any]:
        """Decorator form of ``add()``. Returns the handler unchanged."""

        def decorator(handler: Any) -> Any:
            self.add(Route(path=path, handler=handler, name=name))
            return handler

        return decorator

    @property
    def routes(self) -> list[Route]:
        """Return all registered routes in registration order."""
        return list(self._routes.values())

    def registered_routes(self) -> list[RouteData]:
        """Return a read-only snapshot of the registered routes."""
        return [
            RouteData(
                path=route.path,
                handler=route.handler,
                parameters=self._params[key],
                name=route.name,
            )
            for key, route in self._routes.items()
        ]

    @property
    def compiled(self) -> bool:
        return self._compiled

    def compile(self) -> None:
        """Freeze the router. No more routes can be added."""
        self._compiled = True

    def __len__(self) -> int:
        return len(self._routes)
