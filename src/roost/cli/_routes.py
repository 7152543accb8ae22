"""``roost routes`` — list the routes in a cache file.

Reads a route cache and prints every route with method, path, and
handler (``controller.operation``) in table order.
"""

import argparse
import sys

from roost.cache import read_routes
from roost.errors import RoostError
from roost.routing.route import RouteTable


def run_routes(args: argparse.Namespace) -> None:
    """Print a METHOD / PATH / HANDLER table for ``args.cache_file``."""
    try:
        routes = read_routes(args.cache_file)
    except RoostError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc

    if not routes:
        print("No routes registered.")
        return

    print(format_routes(routes))


def format_routes(routes: RouteTable) -> str:
    """Render routes as an aligned text table."""
    rows = [
        (str(route.method), f"/{route.path}", f"{route.controller}.{route.operation}")
        for route in routes
    ]

    # Column widths, never narrower than the headers
    max_method = max(6, *(len(r[0]) for r in rows))
    max_path = max(4, *(len(r[1]) for r in rows))

    fmt = f"{{:<{max_method}}}  {{:<{max_path}}}  {{}}"
    lines = [fmt.format("METHOD", "PATH", "HANDLER")]
    sep_len = max_method + max_path + 4 + max(len(r[2]) for r in rows)
    lines.append("-" * min(sep_len, 80))
    lines.extend(fmt.format(*row) for row in rows)
    return "\n".join(lines)
