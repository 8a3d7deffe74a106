"""View titles.

Titles come from explicit metadata, never from inspecting handlers:
``page_title`` records a title on a handler and a *title provider*
reads it back. Callers may supply their own provider.
"""

from collections.abc import Callable
from typing import Any

type TitleProvider = Callable[[Any], str | None]

_TITLE_ATTR = "__page_title__"


def page_title(title: str) -> Callable[[Any], Any]:
    """Declare the display title of a server view.

    Usage::

        @page_title("User profile")
        class ProfileView: ...
    """

    def decorator(handler: Any) -> Any:
        setattr(handler, _TITLE_ATTR, title)
        return handler

    return decorator


def declared_title(handler: Any) -> str | None:
    """Default title provider: the title set by ``page_title``, if any."""
    # vars() skips titles inherited from a decorated base class.
    try:
        return vars(handler).get(_TITLE_ATTR)
    except TypeError:
        return None


def simple_name(handler: Any) -> str:
    """Simplified type or function name of *handler*.

    ``app.views.Outer.RouteTarget`` -> ``RouteTarget``
    """
    qualname = getattr(handler, "__qualname__", None) or getattr(handler, "__name__", None)
    if qualname:
        return qualname.rsplit(".", 1)[-1]
    return type(handler).__name__


def title_for(handler: Any, provider: TitleProvider | None = None) -> str:
    """Resolve a handler's title: provider result, else its simple name."""
    title = (provider or declared_title)(handler)
    if title:
        return title
    return simple_name(handler)


def title_from_route(route: str) -> str:
    """Fallback title for a client view without one.

    Uses the last static segment: ``/user-settings/:id`` -> ``User Settings``.
    The root route has an empty title.
    """
    for part in reversed(route.strip("/").split("/")):
        if part and not part.startswith(":"):
            return part.replace("-", " ").replace("_", " ").title()
    return ""
