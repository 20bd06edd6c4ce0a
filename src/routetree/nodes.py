"""Handler references and routing node classification.

Layers come in three shapes with no tag to tell them apart. ``classify``
inspects a layer once and returns the matching node type so the tree
walk can ``match`` on it:

- ``RouteNode``: the layer carries a ``route``
- ``SubRouterNode``: ``layer.handle.stack`` is a list of layers
- ``MiddlewareNode``: ``layer.handle`` is a plain callable

Any of them may carry param handlers from ``layer.handle.params``.
"""

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from routetree.config import TreeConfig


class HandlerRef:
    """A live reference to one handler in a routing configuration.

    ``handle`` is read from the configuration on every access, and
    assigning it writes back into the configuration: the running server
    sees the change too. The same ref is shared by every route whose
    stack includes it.

    Two kinds of slot are supported: an attribute on a layer
    (``for_layer``) and an index into a param handler list
    (``for_param``).
    """

    __slots__ = ("_key", "_owner", "name", "pattern")

    def __init__(
        self,
        owner: Any,
        key: str | int,
        name: str,
        pattern: Any = None,
    ) -> None:
        self._owner = owner
        self._key = key
        self.name = name
        # Matcher of the layer a param handler was found on
        self.pattern = pattern

    @classmethod
    def for_layer(cls, layer: Any, config: TreeConfig) -> "HandlerRef":
        return cls(layer, "handle", getattr(layer, "name", None) or config.anonymous_name)

    @classmethod
    def for_param(
        cls,
        handlers: list[Any],
        index: int,
        pattern: Any,
        config: TreeConfig,
    ) -> "HandlerRef":
        handler = handlers[index]
        name = getattr(handler, "__name__", None) or config.anonymous_name
        return cls(handlers, index, name, pattern)

    @property
    def layer(self) -> Any | None:
        """The layer this ref points into, or ``None`` for param handlers."""
        return self._owner if isinstance(self._key, str) else None

    @property
    def handle(self) -> Any:
        if isinstance(self._key, str):
            return getattr(self._owner, self._key)
        return self._owner[self._key]

    @handle.setter
    def handle(self, value: Any) -> None:
        if isinstance(self._key, str):
            setattr(self._owner, self._key, value)
        else:
            self._owner[self._key] = value

    def __repr__(self) -> str:
        return f"HandlerRef({self.name!r})"


@dataclass(frozen=True, slots=True)
class MiddlewareNode:
    """A bare handler that runs for everything registered after it."""

    layer: Any
    params: tuple[HandlerRef, ...] = ()


@dataclass(frozen=True, slots=True)
class SubRouterNode:
    """A mounted router: a nested stack under a mount matcher."""

    layer: Any
    stack: list[Any]
    pattern: Any
    params: tuple[HandlerRef, ...] = ()


@dataclass(frozen=True, slots=True)
class RouteNode:
    """A leaf route: a path suffix with per-method handler layers."""

    layer: Any
    route: Any
    params: tuple[HandlerRef, ...] = ()


type RoutingNode = MiddlewareNode | SubRouterNode | RouteNode


def param_refs(layer: Any, config: TreeConfig) -> tuple[HandlerRef, ...]:
    """Collect refs for every param handler attached to *layer*'s handle.

    Each ref is tagged with the layer's own matcher. Groups keep their
    registration order, as do the handlers within each group.
    """
    params = getattr(getattr(layer, "handle", None), "params", None)
    if not isinstance(params, Mapping):
        return ()

    pattern = getattr(layer, "regexp", None)
    refs: list[HandlerRef] = []
    for handlers in params.values():
        for index in range(len(handlers)):
            refs.append(HandlerRef.for_param(handlers, index, pattern, config))
    return tuple(refs)


def classify(layer: Any, config: TreeConfig) -> RoutingNode | None:
    """Determine which kind of node *layer* is.

    Returns ``None`` for layers matching none of the known shapes; the
    tree walk skips those.
    """
    params = param_refs(layer, config)

    route = getattr(layer, "route", None)
    if route is not None:
        return RouteNode(layer=layer, route=route, params=params)

    handle = getattr(layer, "handle", None)
    stack = getattr(handle, "stack", None)
    if isinstance(stack, list):
        return SubRouterNode(
            layer=layer,
            stack=stack,
            pattern=getattr(layer, "regexp", ""),
            params=params,
        )

    if callable(handle):
        return MiddlewareNode(layer=layer, params=params)

    return None
