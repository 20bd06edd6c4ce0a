"""``routetree routes`` — list resolved routes.

Resolves an import string to an app or router, builds its route tree,
and prints each route with method, path, and handler chain.
"""

import argparse
import json
import re
import sys

from routetree.cli._resolve import resolve_root
from routetree.tree import RouteTree


def run_routes(args: argparse.Namespace) -> None:
    """List resolved routes for an app or router.

    Prints a table of METHOD, PATH, and STACK (handler names joined
    with ``>``), or a JSON array with ``--json``.
    """
    try:
        root = resolve_root(args.app)
        tree = RouteTree(root)
    except (ModuleNotFoundError, AttributeError, TypeError) as exc:
        # InvalidInput is a TypeError
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc

    if args.match is not None:
        try:
            routes = tree.find_all(re.compile(args.match))
        except re.error as exc:
            print(f"Error: invalid --match pattern: {exc}", file=sys.stderr)
            raise SystemExit(1) from exc
    else:
        routes = list(tree)

    if args.json:
        print(json.dumps([route.to_dict() for route in routes], indent=2))
        return

    if not routes:
        print("No routes registered.")
        return

    # Build rows: (method, path, stack)
    rows = [(r.method, r.path, " > ".join(r.list())) for r in routes]

    # Column widths
    max_method = max(max(len(r[0]) for r in rows), 6)  # "METHOD" header
    max_path = max(max(len(r[1]) for r in rows), 4)  # "PATH" header

    fmt = f"{{:<{max_method}}}  {{:<{max_path}}}  {{}}"
    print(fmt.format("METHOD", "PATH", "STACK"))
    sep_len = max_method + max_path + 4 + max(len(r[2]) for r in rows)
    print("-" * min(sep_len, 80))
    for method, path, stack in rows:
        print(fmt.format(method, path, stack))

