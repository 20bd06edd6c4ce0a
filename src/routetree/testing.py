"""Test helpers for swapping live handlers.

Handlers in a route's stack are live references into the app. Replacing
one changes what the app runs until it is put back::

    route = RouteTree(app).find("getapiusers")
    with patch_handler(route, "require_auth", allow_all):
        response = client.get("/api/users")
"""

from collections.abc import Iterator
from contextlib import contextmanager
from typing import Any

from routetree.nodes import HandlerRef
from routetree.route import Route


@contextmanager
def patch_handler(route: Route, name: str, replacement: Any) -> Iterator[HandlerRef]:
    """Replace the handler named *name* on *route* for the ``with`` block.

    Raises ``LookupError`` if the route has no such handler. The original
    is restored on exit, including when the block raises.
    """
    ref = route.layer(name)
    if ref is None:
        msg = f"{route.method} {route.path} has no handler named {name!r}"
        raise LookupError(msg)

    original = ref.handle
    ref.handle = replacement
    try:
        yield ref
    finally:
        ref.handle = original
