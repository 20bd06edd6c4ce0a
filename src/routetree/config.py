"""Tree configuration.

TreeConfig is a frozen dataclass — immutable after creation, passed to
``RouteTree`` to control how the walk names and roots what it finds.
"""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class TreeConfig:
    """Route tree configuration. Immutable after creation.

    Override what you need::

        config = TreeConfig(prefix="/mounted")
    """

    # Path every route is resolved against
    prefix: str = "/"

    # Display name for handlers without a ``__name__``
    anonymous_name: str = "<anonymous>"
