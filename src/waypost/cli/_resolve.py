"""Import resolution — resolves ``"module:attribute"`` strings.

Shared by every ``waypost`` sub-command to locate a Router (or a tagged
class) from a user-supplied import string.
"""

import importlib
from typing import Any

from waypost.routing.router import Router


def resolve_object(import_string: str, default_attr: str) -> Any:
    """Import ``module:attribute``, defaulting the attribute to *default_attr*.

    Raises:
        ModuleNotFoundError: If the module cannot be imported.
        AttributeError: If the attribute does not exist on the module.
    """
    module_path, _, attr_name = import_string.partition(":")
    module = importlib.import_module(module_path)
    return getattr(module, attr_name or default_attr)


def resolve_router(import_string: str) -> Router:
    """Resolve an import string to a waypost Router instance.

    Accepts ``"module:attribute"`` format.  When the attribute portion
    is omitted, defaults to ``"router"`` (e.g. ``"myapp"`` resolves to
    ``myapp.router``).

    Supports factory functions: if the resolved object is callable and
    not a Router instance, it will be called.

    Raises:
        ModuleNotFoundError: If the module cannot be imported.
        AttributeError: If the attribute does not exist on the module.
        TypeError: If the resolved object is not a Router or a factory for one.
    """
    obj = resolve_object(import_string, "router")

    if callable(obj) and not isinstance(obj, Router):
        try:
            obj = obj()
        except Exception as exc:
            msg = f"Factory function {import_string!r} raised an error: {exc}"
            raise TypeError(msg) from exc

    if not isinstance(obj, Router):
        msg = f"{import_string!r} resolved to {type(obj).__name__}, not a waypost.Router instance"
        raise TypeError(msg)

    return obj
