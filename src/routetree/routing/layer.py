"""Layer and RouteDef — the nodes of a routing configuration.

A router's ``stack`` is a list of layers. Each layer holds a compiled
matcher plus one of:

- a middleware function (``handle`` is callable)
- a mounted ``Router`` (``handle.stack`` is the nested stack)
- a ``RouteDef`` (``route`` is set, ``handle`` is ``None``)

Layers are plain mutable objects. The route tree keeps references to
them, so reassigning ``layer.handle`` after the fact is visible to it.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from routetree.errors import ConfigurationError
from routetree.routing.pattern import compile_path

# Any connect-style handler; the tree never calls it
type Handler = Callable[..., Any]

METHODS: tuple[str, ...] = ("get", "post", "put", "patch", "delete", "head", "options")

ANONYMOUS = "<anonymous>"


def handler_name(handle: object) -> str:
    """Display name for a handler: its ``__name__``, or ``<anonymous>``."""
    return getattr(handle, "__name__", None) or ANONYMOUS


def check_handlers(
    handlers: tuple[Any, ...], where: str, allow: tuple[type, ...] = ()
) -> None:
    """Raise ``ConfigurationError`` unless *handlers* is non-empty and callable.

    Instances of *allow* pass without being callable (mounted routers).
    """
    if not handlers:
        msg = f"{where} requires at least one handler."
        raise ConfigurationError(msg)
    for handler in handlers:
        if not isinstance(handler, allow) and not callable(handler):
            msg = f"{where} expected a callable handler, got {type(handler).__name__}."
            raise ConfigurationError(msg)


class Layer:
    """One entry in a router or route stack."""

    __slots__ = ("handle", "keys", "method", "name", "path", "regexp", "route")

    def __init__(
        self,
        path: str,
        handle: Any,
        *,
        end: bool,
        name: str | None = None,
        sensitive: bool = False,
        strict: bool = False,
    ) -> None:
        self.path = path
        self.handle = handle
        self.name = name or handler_name(handle)
        self.regexp, self.keys = compile_path(
            path, end=end, strict=strict, sensitive=sensitive
        )
        # Set by RouteDef for per-method handler layers
        self.method: str | None = None
        # Set by Router.route() for route layers
        self.route: RouteDef | None = None

    def __repr__(self) -> str:
        return f"Layer({self.name!r}, {self.regexp.pattern!r})"


class RouteDef:
    """A route definition: one path, per-method handler layers.

    Usage::

        route = RouteDef("/users")
        route.get(list_users).post(require_auth, create_user)
    """

    __slots__ = ("methods", "path", "stack")

    def __init__(self, path: str) -> None:
        self.path = path
        self.methods: dict[str, bool] = {}
        self.stack: list[Layer] = []

    def _add(self, method: str, handlers: tuple[Handler, ...]) -> RouteDef:
        check_handlers(handlers, f"{method.upper()} {self.path}")
        for handler in handlers:
            layer = Layer("/", handler, end=True)
            layer.method = method
            self.methods[method] = True
            self.stack.append(layer)
        return self

    def get(self, *handlers: Handler) -> RouteDef:
        return self._add("get", handlers)

    def post(self, *handlers: Handler) -> RouteDef:
        return self._add("post", handlers)

    def put(self, *handlers: Handler) -> RouteDef:
        return self._add("put", handlers)

    def patch(self, *handlers: Handler) -> RouteDef:
        return self._add("patch", handlers)

    def delete(self, *handlers: Handler) -> RouteDef:
        return self._add("delete", handlers)

    def head(self, *handlers: Handler) -> RouteDef:
        return self._add("head", handlers)

    def options(self, *handlers: Handler) -> RouteDef:
        return self._add("options", handlers)

    def all(self, *handlers: Handler) -> RouteDef:
        """Register *handlers* for every method in ``METHODS``."""
        for method in METHODS:
            self._add(method, handlers)
        return self

    def __repr__(self) -> str:
        methods = ", ".join(m.upper() for m, on in self.methods.items() if on)
        return f"RouteDef({self.path!r}, [{methods}])"
