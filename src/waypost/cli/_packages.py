"""``waypost packages`` — print npm dependencies declared on classes."""

import argparse
import json
import sys

from waypost.cli._resolve import resolve_object
from waypost.errors import ConfigurationError
from waypost.npm import collect_npm_packages


def run_packages(args: argparse.Namespace) -> None:
    """Print ``{"dependencies": {...}}`` for the classes in ``args.classes``."""
    classes = []
    for import_string in args.classes:
        if ":" not in import_string:
            print(f"Error: {import_string!r} must be in module:Class form", file=sys.stderr)
            raise SystemExit(2)
        try:
            obj = resolve_object(import_string, "")
        except (ModuleNotFoundError, AttributeError) as exc:
            print(f"Error: {exc}", file=sys.stderr)
            raise SystemExit(1) from exc
        if not isinstance(obj, type):
            print(f"Error: {import_string!r} is not a class", file=sys.stderr)
            raise SystemExit(1)
        classes.append(obj)

    try:
        dependencies = collect_npm_packages(classes)
    except ConfigurationError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc
    print(json.dumps({"dependencies": dependencies}, indent=2))
