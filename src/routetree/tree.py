"""RouteTree — a flat index of every route in a routing configuration.

A router never materializes "a route" the way callers think of one. At
request time it walks its stack, testing each layer's matcher, and
builds up a single chain of middleware. ``RouteTree`` performs the same
walk once, ahead of time, and records a ``Route`` for every method of
every route definition it reaches, with the chain that would run for it.

Usage::

    tree = RouteTree(app)
    route = tree.find("getapiusers")
    route.list()  # ["log_request", "require_auth", "list_users"]
"""

import logging
import re
from collections.abc import Iterator, Sequence
from typing import Any, Protocol

from routetree.config import TreeConfig
from routetree.errors import InvalidInput
from routetree.nodes import HandlerRef, MiddlewareNode, RouteNode, SubRouterNode, classify
from routetree.paths import literal_prefix_from, normalize
from routetree.route import Route

logger = logging.getLogger("routetree.tree")

_NON_WORD = re.compile(r"\W")


class Searchable(Protocol):
    """Anything with a regex-style ``search``, e.g. a compiled pattern."""

    def search(self, string: str, /) -> Any: ...


def route_id(method: str, path: str) -> str:
    """Build a route id: method and path, word characters only, lowercased.

    Distinct routes can share an id (``/a-b`` and ``/ab``); lookups by id
    return the first in tree order.
    """
    return _NON_WORD.sub("", method + path).lower()


def root_stack(root: Any) -> list[Any]:
    """Return the top-level stack of an app or router.

    Raises ``InvalidInput`` for anything else.
    """
    router = getattr(root, "_router", None)
    if router is not None and isinstance(getattr(router, "stack", None), list):
        return router.stack
    stack = getattr(root, "stack", None)
    if isinstance(stack, list):
        return stack
    msg = f"input must be an app or router, got {type(root).__name__}"
    raise InvalidInput(msg)


class RouteTree:
    """Every route reachable from an app or router, in dispatch order.

    Built eagerly on construction and never updated; build a new tree to
    pick up configuration changes. Lookups are pure reads.
    """

    __slots__ = ("_config", "_routes")

    def __init__(self, root: Any, config: TreeConfig | None = None) -> None:
        self._config = config or TreeConfig()
        stack = root_stack(root)
        output: list[Route] = []
        self._walk(stack, self._config.prefix, (), output)
        self._routes: tuple[Route, ...] = tuple(output)
        logger.debug("Built route tree: %d routes from %d layers", len(output), len(stack))

    # -- Building --

    def _walk(
        self,
        layers: Sequence[Any],
        prefix: str,
        branch: tuple[HandlerRef, ...],
        output: list[Route],
    ) -> None:
        """Depth-first walk of one level of a stack.

        *branch* holds the middleware inherited so far. Middleware found
        at this level extends it for later siblings; a nested router gets
        its own extended copy, so nothing it adds comes back out.
        """
        for layer in layers:
            node = classify(layer, self._config)

            match node:
                case MiddlewareNode():
                    branch = (*branch, HandlerRef.for_layer(layer, self._config))

                case SubRouterNode(stack=stack, pattern=pattern, params=params):
                    # Param handlers reach only the routes of this router
                    nested_prefix = normalize(prefix + literal_prefix_from(pattern))
                    self._walk(stack, nested_prefix, (*branch, *params), output)

                case RouteNode(route=route):
                    self._add_route(route, prefix, branch, output)

                case None:
                    logger.debug("Skipping unrecognized layer %r", layer)

    def _add_route(
        self,
        route: Any,
        prefix: str,
        branch: tuple[HandlerRef, ...],
        output: list[Route],
    ) -> None:
        """Append one ``Route`` per registered method of *route*."""
        path = normalize(prefix + route.path)
        methods = [m.upper() for m, registered in route.methods.items() if registered]

        for method in methods:
            own = tuple(
                HandlerRef.for_layer(layer, self._config)
                for layer in route.stack
                if (layer.method or "").upper() == method
            )
            output.append(
                Route(
                    id=route_id(method, path),
                    method=method,
                    path=path,
                    stack=(*branch, *own),
                )
            )

    # -- Lookup --

    @property
    def routes(self) -> tuple[Route, ...]:
        return self._routes

    def find(self, identifier: str | Searchable) -> Route | None:
        """Return the first route matching *identifier*, or ``None``.

        A string must equal the route id exactly (``"postapiv1users"``).
        Anything else is treated as a pattern and searched against ids,
        e.g. ``re.compile(r"^get.*users")``.
        """
        return next(self._matching(identifier), None)

    def find_all(self, identifier: str | Searchable) -> list[Route]:
        """Return every route matching *identifier*, in tree order."""
        return list(self._matching(identifier))

    def _matching(self, identifier: str | Searchable) -> Iterator[Route]:
        if isinstance(identifier, str):
            return (r for r in self._routes if r.id == identifier)
        return (r for r in self._routes if identifier.search(r.id))

    # -- Views --

    def to_list(self) -> list[dict[str, Any]]:
        """JSON-ready list of every route's ``to_dict()`` view."""
        return [route.to_dict() for route in self._routes]

    def __iter__(self) -> Iterator[Route]:
        return iter(self._routes)

    def __len__(self) -> int:
        return len(self._routes)

    def __str__(self) -> str:
        lines = [f"  {r.method} {r.path}" for r in self._routes]
        return "\n".join(["RouteTree[", *lines, "]"])

    def __repr__(self) -> str:
        return f"RouteTree({len(self._routes)} routes)"
