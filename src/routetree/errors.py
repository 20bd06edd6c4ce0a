"""routetree exception hierarchy.

Shared across the routing builder, the tree walk, and the CLI so every
module raises and catches the same types.
"""


class RouteTreeError(Exception):
    """Base for all routetree-specific errors."""


class ConfigurationError(RouteTreeError):
    """Raised when a routing configuration is assembled incorrectly.

    Typically raised by ``Router.use()`` or a route registrar when a
    handler is missing or not callable.
    """


class InvalidInput(RouteTreeError, TypeError):  # noqa: N818 — mirrors the TypeError it extends
    """Raised when a tree root is neither an app nor a router.

    Subclasses ``TypeError`` so callers checking for the builtin still
    catch it.
    """
