"""Route parameter kinds and path normalization.

Parameter tokens follow the client router's suffix convention::

    :id      required
    :id?     optional
    :rest*   wildcard (consumes the remaining path)
"""

from enum import Enum

from waypost.errors import ConfigurationError


class RouteParamType(Enum):
    """Kind of a dynamic route segment. Values are the JSON encoding."""

    REQUIRED = "req"
    OPTIONAL = "opt"
    WILDCARD = "*"


def param_type_for(pattern: str) -> RouteParamType:
    """Classify a raw parameter pattern by its suffix.

    Anything without a ``?`` or ``*`` suffix is required, including
    patterns with suffixes we don't recognize.
    """
    if pattern.endswith("?"):
        return RouteParamType.OPTIONAL
    if pattern.endswith("*"):
        return RouteParamType.WILDCARD
    return RouteParamType.REQUIRED


def parse_param_type(value: str | RouteParamType) -> RouteParamType:
    """Parse a declared parameter kind from client route metadata.

    Accepts the JSON values (``"req"``, ``"opt"``, ``"*"``) or the enum
    names, case-insensitively.

    Raises ``ConfigurationError`` for anything else.
    """
    if isinstance(value, RouteParamType):
        return value
    if not isinstance(value, str):
        msg = f"Route parameter kind must be a string, got {type(value).__name__}"
        raise ConfigurationError(msg)
    lowered = value.strip().lower()
    for kind in RouteParamType:
        if lowered in (kind.value, kind.name.lower()):
            return kind
    msg = f"Unknown route parameter kind {value!r}. Expected one of: req, opt, *"
    raise ConfigurationError(msg)


def normalize_route(path: str, *, strip_trailing_slash: bool = True) -> str:
    """Normalize a route path into a view key.

    Leading slashes collapse to exactly one. A trailing slash is removed
    (except on the root) when *strip_trailing_slash* is true, so ``home``,
    ``/home`` and ``/home/`` all map to ``/home``.

    Examples::

        "bar"               -> "/bar"
        "//:id/edit"        -> "/:id/edit"
        "/comments/:id?/"   -> "/comments/:id?"
        ""                  -> "/"
    """
    route = "/" + path.lstrip("/")
    if strip_trailing_slash and len(route) > 1:
        route = route.rstrip("/") or "/"
    return route
