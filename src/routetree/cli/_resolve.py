"""Import resolution — resolves ``"module:attribute"`` strings to a tree root.

Used by ``routetree routes`` to locate an app or router from a
user-supplied import string.
"""

import importlib
from typing import Any

from routetree.routing.router import App, Router


def _is_root(obj: Any) -> bool:
    if isinstance(obj, type):
        return False
    return isinstance(obj, (App, Router)) or hasattr(obj, "_router") or hasattr(obj, "stack")


def resolve_root(import_string: str) -> Any:
    """Resolve an import string to an app or router.

    Accepts ``"module:attribute"`` format.  When the attribute portion
    is omitted, defaults to ``"app"`` (e.g. ``"myapp"`` resolves to
    ``myapp.app``).

    Supports factory functions: if the resolved object is callable and
    does not look like an app or router, it is called.

    Raises:
        ModuleNotFoundError: If the module cannot be imported.
        AttributeError: If the attribute does not exist on the module.
        TypeError: If the resolved object is not an app or router.

    """
    module_path, _, attr_name = import_string.partition(":")
    if not attr_name:
        attr_name = "app"

    module = importlib.import_module(module_path)
    obj = getattr(module, attr_name)

    if callable(obj) and not _is_root(obj):
        try:
            obj = obj()
        except Exception as exc:
            msg = f"Factory function {import_string!r} raised an error: {exc}"
            raise TypeError(msg) from exc

    if not _is_root(obj):
        msg = f"{import_string!r} resolved to {type(obj).__name__}, not an app or router"
        raise TypeError(msg)

    return obj
