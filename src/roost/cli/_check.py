"""``roost check`` — detect stale entries in a route cache.

Resolves the cache against the classes themselves: each controller
identifier must still import as a class, and the class must still define
the cached operation.  Run it after renaming or removing controllers to
catch a cache that would fail at startup.
"""

import argparse
import sys
from pathlib import Path

from roost.discovery.universe import load_class
from roost.errors import RoostError
from roost.resolver import resolve_routes


def _class_locator(identifier: str) -> type | None:
    try:
        return load_class(identifier)
    except (ImportError, AttributeError, TypeError, ValueError):
        return None


def run_check(args: argparse.Namespace) -> None:
    """Resolve ``args.cache_file`` and report the first stale route."""
    sys.path.insert(0, str(Path.cwd()))
    try:
        resolved = resolve_routes(args.cache_file, _class_locator)
    except RoostError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc

    print(f"OK: {len(resolved)} route(s)")
