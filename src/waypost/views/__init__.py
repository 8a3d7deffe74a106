"""Views — available-view metadata for the client application.

Server routes and client-declared routes are merged into one ordered
map and embedded in the index document::

    from waypost.views import ClientRouteRegistry, ViewAggregator

    registry = ClientRouteRegistry()
    registry.load("frontend/generated/file-routes.json")
    aggregator = ViewAggregator(registry)
    aggregator.modify_index_html_response(response, router)
"""

from waypost.views.aggregate import ViewAggregator, serialize_views
from waypost.views.client import ClientRouteRegistry
from waypost.views.titles import page_title
from waypost.views.types import ClientViewConfig, MenuConfig, ViewInfo

__all__ = [
    "ClientRouteRegistry",
    "ClientViewConfig",
    "MenuConfig",
    "ViewAggregator",
    "ViewInfo",
    "page_title",
    "serialize_views",
]
