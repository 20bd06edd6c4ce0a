"""Route — one (method, path) pair and the handlers that run for it.

A route's stack holds direct ``HandlerRef``s into the routing
configuration. That has two effects:

1. A mounted handler can be stubbed or called directly after the fact,
   through ``route.layer(name).handle``.
2. Any such change affects the actual server being inspected. Restore
   what you replace (see ``routetree.testing.patch_handler``).
"""

from dataclasses import dataclass
from typing import Any

from routetree.nodes import HandlerRef


@dataclass(frozen=True, slots=True)
class Route:
    """A resolved route. Created by the tree walk, never by hand.

    ``stack`` is ordered by execution: inherited middleware outer to
    inner, then the route's own handlers for ``method``.
    """

    id: str
    method: str
    path: str
    stack: tuple[HandlerRef, ...]

    def layer(self, name: str) -> HandlerRef | None:
        """Return the first handler named *name*, or ``None``."""
        return next((ref for ref in self.stack if ref.name == name), None)

    def list(self) -> list[str]:
        """Handler names in stack order."""
        return [ref.name for ref in self.stack]

    def to_dict(self) -> dict[str, Any]:
        """JSON-ready view with the stack reduced to handler names."""
        return {
            "id": self.id,
            "method": self.method,
            "path": self.path,
            "stack": self.list(),
        }

    def __str__(self) -> str:
        lines = [f"{self.method} {self.path}"]
        lines.extend(f"  {name}" for name in self.list())
        return "\n".join(lines)
