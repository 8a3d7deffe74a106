"""Waypost CLI — inspect routes and render the available-views payload.

Entry point registered as ``waypost`` in ``pyproject.toml``::

    [project.scripts]
    waypost = "waypost.cli:main"
"""

import argparse
import logging
import sys


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for the ``waypost`` command."""
    parser = argparse.ArgumentParser(
        prog="waypost",
        description="Waypost — available-view metadata for server-rendered index pages.",
    )
    parser.add_argument(
        "--log-level",
        default="warning",
        choices=("debug", "info", "warning", "error"),
        help="Logging level (default: warning)",
    )
    subparsers = parser.add_subparsers(dest="command")

    # -- waypost routes ---------------------------------------------------
    routes_parser = subparsers.add_parser("routes", help="List server routes")
    routes_parser.add_argument("app", help="Import string of a Router (e.g. myapp:router)")

    # -- waypost views ----------------------------------------------------
    views_parser = subparsers.add_parser("views", help="Print the available-views JSON")
    views_parser.add_argument("app", help="Import string of a Router (e.g. myapp:router)")
    views_parser.add_argument(
        "--client-routes",
        default=None,
        help="Path to the client's file-routes.json",
    )

    # -- waypost render ---------------------------------------------------
    render_parser = subparsers.add_parser(
        "render", help="Inject the available-views script into an index page"
    )
    render_parser.add_argument("app", help="Import string of a Router (e.g. myapp:router)")
    render_parser.add_argument("index", help="Path to the index HTML file")
    render_parser.add_argument(
        "--client-routes",
        default=None,
        help="Path to the client's file-routes.json",
    )
    render_parser.add_argument(
        "-o",
        "--output",
        default=None,
        help="Write the page here instead of stdout",
    )

    # -- waypost packages -------------------------------------------------
    packages_parser = subparsers.add_parser(
        "packages", help="Print npm dependencies declared on classes"
    )
    packages_parser.add_argument(
        "classes",
        nargs="+",
        help="Import strings of tagged classes (e.g. waypost.npm:ReactForm)",
    )

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        sys.exit(0)

    logging.basicConfig(
        level=args.log_level.upper(),
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.command == "routes":
        from waypost.cli._routes import run_routes

        run_routes(args)
    elif args.command == "views":
        from waypost.cli._views import run_views

        run_views(args)
    elif args.command == "render":
        from waypost.cli._views import run_render

        run_render(args)
    elif args.command == "packages":
        from waypost.cli._packages import run_packages

        run_packages(args)
