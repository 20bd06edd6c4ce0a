"""routetree CLI — list the resolved routes of an app or router.

Entry point registered as ``routetree`` in ``pyproject.toml``::

    [project.scripts]
    routetree = "routetree.cli:main"
"""

import argparse
import sys


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for the ``routetree`` command."""
    parser = argparse.ArgumentParser(
        prog="routetree",
        description="routetree — inspect the handler chain of every route.",
    )
    subparsers = parser.add_subparsers(dest="command")

    # -- routetree routes -------------------------------------------------
    routes_parser = subparsers.add_parser("routes", help="List routes and their handlers")
    routes_parser.add_argument(
        "app",
        help="Import string (e.g. myapp:app)",
    )
    routes_parser.add_argument(
        "--json",
        action="store_true",
        help="Print routes as JSON",
    )
    routes_parser.add_argument(
        "--match",
        default=None,
        metavar="REGEX",
        help="Only list routes whose id matches REGEX",
    )

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        sys.exit(0)

    if args.command == "routes":
        from routetree.cli._routes import run_routes

        run_routes(args)
