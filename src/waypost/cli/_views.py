"""``waypost views`` and ``waypost render`` — the available-views payload.

``views`` prints the merged JSON map. ``render`` reads an index page,
appends the views script to its head, and writes the result.
"""

import argparse
import logging
import sys
from pathlib import Path

from waypost.cli._resolve import resolve_router
from waypost.config import ViewsConfig
from waypost.document import IndexDocument, IndexHtmlResponse
from waypost.errors import WaypostError
from waypost.routing.router import Router
from waypost.views.aggregate import ViewAggregator, serialize_views

logger = logging.getLogger("waypost.cli")


def _setup(args: argparse.Namespace) -> tuple[Router, ViewAggregator]:
    try:
        router = resolve_router(args.app)
    except (ModuleNotFoundError, AttributeError, TypeError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc

    try:
        aggregator = ViewAggregator.from_config(ViewsConfig(client_routes_file=args.client_routes))
    except (OSError, WaypostError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc
    return router, aggregator


def run_views(args: argparse.Namespace) -> None:
    """Print the available-views JSON for ``args.app``."""
    router, aggregator = _setup(args)
    try:
        text = serialize_views(aggregator.available_views(router))
    except WaypostError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc
    print(text)


def run_render(args: argparse.Namespace) -> None:
    """Write ``args.index`` with the views script appended to its head."""
    router, aggregator = _setup(args)
    try:
        source = Path(args.index).read_text(encoding="utf-8")
    except OSError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc

    response = IndexHtmlResponse(IndexDocument(source))
    try:
        aggregator.modify_index_html_response(response, router)
    except WaypostError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc

    if args.output:
        Path(args.output).write_text(response.document.html, encoding="utf-8")
        logger.info("Wrote %s", args.output)
    else:
        sys.stdout.write(response.document.html)
