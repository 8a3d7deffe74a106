"""``waypost routes`` — list registered server routes.

Resolves an import string to a Router and prints every route with its
parameters and handler.
"""

import argparse
import sys

from waypost.cli._resolve import resolve_router
from waypost.views.titles import simple_name


def run_routes(args: argparse.Namespace) -> None:
    """Print a table of PATH, PARAMS, and HANDLER for ``args.app``."""
    try:
        router = resolve_router(args.app)
    except (ModuleNotFoundError, AttributeError, TypeError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc

    routes = router.registered_routes()
    if not routes:
        print("No routes registered.")
        return

    rows: list[tuple[str, str, str]] = []
    for data in routes:
        params = ", ".join(data.parameters.values()) or "-"
        handler_name = simple_name(data.handler)
        if data.name:
            handler_name = f"{handler_name} ({data.name})"
        rows.append((data.path, params, handler_name))

    max_path = max(max(len(r[0]) for r in rows), 4)  # "PATH" header
    max_params = max(max(len(r[1]) for r in rows), 6)  # "PARAMS" header

    fmt = f"{{:<{max_path}}}  {{:<{max_params}}}  {{}}"
    print(fmt.format("PATH", "PARAMS", "HANDLER"))
    sep_len = max_path + max_params + 4 + max(len(r[2]) for r in rows)
    print("-" * min(sep_len, 80))
    for path, params, handler_name in rows:
        print(fmt.format(path, params, handler_name))
