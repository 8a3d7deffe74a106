"""Waypost — available-view metadata for server-rendered index pages.

Collects the views a client application can navigate to, from the
server's route registry and the client's own route declarations, and
embeds them in the index document as JSON.

Basic usage::

    from waypost import ClientRouteRegistry, Router, ViewAggregator
    from waypost.document import IndexDocument, IndexHtmlResponse

    router = Router()

    @router.view("orders/:orderId")
    class OrderView: ...

    registry = ClientRouteRegistry()
    registry.load("frontend/generated/file-routes.json")

    response = IndexHtmlResponse(IndexDocument(index_html))
    ViewAggregator(registry).modify_index_html_response(response, router)
"""

__version__ = "0.1.0"
__all__ = [
    "ClientRouteRegistry",
    "ClientViewConfig",
    "ConfigurationError",
    "MissingRouterError",
    "Route",
    "RouteParamType",
    "Router",
    "ViewAggregator",
    "ViewInfo",
    "ViewSerializationError",
    "ViewsConfig",
    "WaypostError",
    "page_title",
]


# name -> (module, attribute)
_LAZY_IMPORTS: dict[str, tuple[str, str]] = {
    "ClientRouteRegistry": ("waypost.views.client", "ClientRouteRegistry"),
    "ClientViewConfig": ("waypost.views.types", "ClientViewConfig"),
    "ConfigurationError": ("waypost.errors", "ConfigurationError"),
    "MissingRouterError": ("waypost.errors", "MissingRouterError"),
    "Route": ("waypost.routing.route", "Route"),
    "RouteParamType": ("waypost.routing.params", "RouteParamType"),
    "Router": ("waypost.routing.router", "Router"),
    "ViewAggregator": ("waypost.views.aggregate", "ViewAggregator"),
    "ViewInfo": ("waypost.views.types", "ViewInfo"),
    "ViewSerializationError": ("waypost.errors", "ViewSerializationError"),
    "ViewsConfig": ("waypost.config", "ViewsConfig"),
    "WaypostError": ("waypost.errors", "WaypostError"),
    "page_title": ("waypost.views.titles", "page_title"),
}


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import waypost`` fast while providing a clean top-level API.
    """
    target = _LAZY_IMPORTS.get(name)
    if target is None:
        msg = f"module {__name__!r} has no attribute {name!r}"
        raise AttributeError(msg)
    module_name, attr = target
    from importlib import import_module

    return getattr(import_module(module_name), attr)
