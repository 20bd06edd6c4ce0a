"""routetree — inspect what actually runs for each route of an app.

Walks an Express-style routing configuration (middleware, mounted
routers, route definitions) and flattens it into one ``Route`` per
method and path, each with its full handler chain in execution order.

Basic usage::

    from routetree import App, RouteTree

    app = App()
    app.use(require_auth)
    app.get("/users", list_users)

    tree = RouteTree(app)
    tree.find("getusers").list()  # ["require_auth", "list_users"]
"""

__version__ = "0.1.0"
__all__ = [
    "App",
    "ConfigurationError",
    "HandlerRef",
    "InvalidInput",
    "Route",
    "RouteTree",
    "RouteTreeError",
    "Router",
    "TreeConfig",
    "get_tree",
    "patch_handler",
    "time_handler",
]


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import routetree`` fast while providing a clean top-level API.
    """
    if name in ("App", "Router"):
        from routetree.routing import router as _router

        return getattr(_router, name)

    if name == "RouteTree":
        from routetree.tree import RouteTree

        return RouteTree

    if name == "Route":
        from routetree.route import Route

        return Route

    if name == "HandlerRef":
        from routetree.nodes import HandlerRef

        return HandlerRef

    if name == "TreeConfig":
        from routetree.config import TreeConfig

        return TreeConfig

    if name in ("ConfigurationError", "InvalidInput", "RouteTreeError"):
        from routetree import errors as _errors

        return getattr(_errors, name)

    if name == "get_tree":
        from routetree.cache import get_tree

        return get_tree

    if name == "patch_handler":
        from routetree.testing import patch_handler

        return patch_handler

    if name == "time_handler":
        from routetree.timing import time_handler

        return time_handler

    msg = f"module {__name__!r} has no attribute {name!r}"
    raise AttributeError(msg)
