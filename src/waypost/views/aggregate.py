"""Available-views aggregation.

Merges server routes and client-declared views into one ordered map
and embeds it in the index document as::

    <script data-waypost="views">window.Waypost = window.Waypost ?? {};
    window.Waypost.views = {"/home": {...}, ...};</script>

The map is rebuilt for every document and discarded afterwards. Server
views are collected first; a client view with the same route replaces
the server entry in place, so client metadata wins while key order
stays stable.
"""

import json
import logging
from collections.abc import Mapping, MutableMapping
from types import MappingProxyType

from waypost.config import ViewsConfig
from waypost.document import IndexHtmlResponse, script_element
from waypost.errors import MissingRouterError, ViewSerializationError
from waypost.routing.params import normalize_route, param_type_for
from waypost.routing.router import Router
from waypost.views.client import ClientRouteRegistry
from waypost.views.titles import TitleProvider, title_for, title_from_route
from waypost.views.types import ClientViewConfig, ViewInfo

logger = logging.getLogger("waypost.views")


def serialize_views(views: Mapping[str, ViewInfo]) -> str:
    """Encode the views map as compact JSON.

    Output is deterministic for identical input. ``<`` is escaped so the
    text can sit inside a ``<script>`` element.

    Raises ``ViewSerializationError`` if any value cannot be encoded.
    """
    payload = {route: info.to_json() for route, info in views.items()}
    try:
        text = json.dumps(payload, ensure_ascii=False, separators=(",", ":"), allow_nan=False)
    except (TypeError, ValueError) as exc:
        msg = f"Cannot serialize available views: {exc}"
        raise ViewSerializationError(msg) from exc
    return text.replace("<", "\\u003c")


class ViewAggregator:
    """Builds the available-views map and injects it into index documents.

    Args:
        client_registry: Views declared by the client application.
        title_provider: Returns the explicit title of a server handler,
            or ``None`` to fall back to the handler's simple name.
        config: Script naming and route-key options.
    """

    __slots__ = ("_client_registry", "_config", "_title_provider")

    def __init__(
        self,
        client_registry: ClientRouteRegistry,
        *,
        title_provider: TitleProvider | None = None,
        config: ViewsConfig | None = None,
    ) -> None:
        self._client_registry = client_registry
        self._title_provider = title_provider
        self._config = config or ViewsConfig()

    @classmethod
    def from_config(
        cls,
        config: ViewsConfig,
        *,
        title_provider: TitleProvider | None = None,
    ) -> "ViewAggregator":
        """Create an aggregator whose client registry is loaded from
        ``config.client_routes_file`` (left empty when unset).
        """
        registry = ClientRouteRegistry()
        if config.client_routes_file is not None:
            registry.load(config.client_routes_file)
        return cls(registry, title_provider=title_provider, config=config)

    @property
    def config(self) -> ViewsConfig:
        return self._config

    def _key(self, path: str) -> str:
        return normalize_route(path, strip_trailing_slash=self._config.strip_trailing_slash)

    def collect_server_views(self, target: MutableMapping[str, ViewInfo], router: Router | None) -> None:
        """Add one entry per registered server route to *target*."""
        if router is None:
            raise MissingRouterError
        snapshot = router.registered_routes()
        for data in snapshot:
            route = self._key(data.path)
            params = {pattern: param_type_for(pattern) for pattern in data.parameters.values()}
            target[route] = ViewInfo(
                route=route,
                title=title_for(data.handler, self._title_provider),
                route_parameters=MappingProxyType(params),
            )
        logger.debug("Collected %d server views", len(snapshot))

    def collect_client_views(self, target: MutableMapping[str, ViewInfo]) -> None:
        """Add or replace one entry per client-declared route in *target*."""
        routes = self._client_registry.get_all_routes()
        for path, config in routes.items():
            info = self._client_view(config, path)
            if info.route in target:
                logger.debug("Client view overrides server view at %s", info.route)
            target[info.route] = info
        logger.debug("Collected %d client views", len(routes))

    def _client_view(self, config: ClientViewConfig, path: str) -> ViewInfo:
        route = self._key(path)
        return ViewInfo(
            route=route,
            title=config.title if config.title is not None else title_from_route(route),
            roles=config.roles or (),
            route_parameters=MappingProxyType(dict(config.route_parameters)),
            lazy=config.lazy,
            menu=config.menu,
            other=config.other,
            children=tuple(self._client_view(child, child.route) for child in config.children),
        )

    def available_views(self, router: Router | None) -> dict[str, ViewInfo]:
        """Build a fresh map: server views first, then client views."""
        views: dict[str, ViewInfo] = {}
        self.collect_server_views(views, router)
        self.collect_client_views(views)
        return views

    def views_script(self, router: Router | None) -> str:
        """Return the script text assigning the views map on ``window``."""
        return self._config.script_prefix + serialize_views(self.available_views(router)) + ";"

    def modify_index_html_response(self, response: IndexHtmlResponse, router: Router | None) -> None:
        """Append the available-views script to the response document's head."""
        script = script_element(self.views_script(router), marker=self._config.script_marker)
        response.document.append_to_head(script)
