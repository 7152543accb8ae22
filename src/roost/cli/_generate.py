"""``roost generate`` — compile routes and write the cache."""

import argparse
import logging
import sys
from pathlib import Path

from roost.cache import write_routes
from roost.compiler import compile_routes
from roost.config import RouterConfig
from roost.discovery.reflect import ReflectiveScanner
from roost.discovery.source import SourceScanner
from roost.discovery.universe import package_classes
from roost.errors import DirectoryNotFound, RoostError


def run_generate(args: argparse.Namespace) -> None:
    """Discover routes under ``args.project_dir`` and write the cache.

    The source strategy scans files directly.  The reflect strategy
    imports ``args.package`` (with ``args.project_dir`` on ``sys.path``)
    and introspects its classes.
    """
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(message)s")

    config = RouterConfig(
        project_dir=args.project_dir,
        cache_file=args.cache_file,
        namespace=args.namespace,
        strategy=args.strategy,
    )

    try:
        if config.strategy == "reflect":
            if not args.package:
                print("Error: --package is required with --strategy reflect", file=sys.stderr)
                raise SystemExit(2)
            if not Path(config.project_dir).is_dir():
                raise DirectoryNotFound(config.project_dir)
            sys.path.insert(0, str(config.project_dir))
            table = compile_routes(
                ReflectiveScanner(namespace=config.namespace),
                package_classes(args.package),
            )
        else:
            table = compile_routes(SourceScanner(), config.project_dir)
        path = write_routes(table, config.cache_path)
    except (RoostError, ImportError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc

    print(f"Route cache generated: {len(table)} route(s)")
    print(f"Cache file: {path}")
