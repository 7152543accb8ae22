"""Roost CLI — route cache generation, listing and validation.

Entry point registered as ``roost`` in ``pyproject.toml``::

    [project.scripts]
    roost = "roost.cli:main"
"""

import argparse
import sys


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for the ``roost`` command."""
    parser = argparse.ArgumentParser(
        prog="roost",
        description="Roost — compiled, cached route tables for API controllers.",
    )
    subparsers = parser.add_subparsers(dest="command")

    # -- roost generate ---------------------------------------------------
    generate_parser = subparsers.add_parser("generate", help="Compile routes into the cache")
    generate_parser.add_argument("project_dir", help="Directory to discover controllers in")
    generate_parser.add_argument(
        "--cache-file",
        default=None,
        help="Cache location (default: <project_dir>/caches/routes.json)",
    )
    generate_parser.add_argument(
        "--strategy",
        choices=("source", "reflect"),
        default="source",
        help="Read source files as text, or import and introspect classes",
    )
    generate_parser.add_argument(
        "--package",
        default=None,
        help="Package to import and scan (required with --strategy reflect)",
    )
    generate_parser.add_argument(
        "--namespace",
        default="",
        help="Only scan classes whose identifier starts with this prefix",
    )
    generate_parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log each discovered controller and route",
    )

    # -- roost routes -----------------------------------------------------
    routes_parser = subparsers.add_parser("routes", help="List the routes in a cache file")
    routes_parser.add_argument("cache_file", help="Route cache to read")

    # -- roost check ------------------------------------------------------
    check_parser = subparsers.add_parser(
        "check", help="Verify cached routes still match importable classes"
    )
    check_parser.add_argument("cache_file", help="Route cache to verify")

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        sys.exit(0)

    if args.command == "generate":
        from roost.cli._generate import run_generate

        run_generate(args)
    elif args.command == "routes":
        from roost.cli._routes import run_routes

        run_routes(args)
    elif args.command == "check":
        from roost.cli._check import run_check

        run_check(args)
