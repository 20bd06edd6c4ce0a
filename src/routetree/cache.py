"""Memoized route trees, one per app or router object.

Building a tree walks the whole configuration; test suites that inspect
the same app from many tests can share one::

    tree = get_tree(app)
    tree = get_tree(app, rebuild=True)  # after registering more routes
"""

import logging
import threading
from typing import Any

from routetree.tree import RouteTree

logger = logging.getLogger("routetree.cache")

# id(root) -> (root, tree). Holding the root keeps its id from being reused.
_trees: dict[int, tuple[Any, RouteTree]] = {}
_lock = threading.Lock()


def get_tree(root: Any, rebuild: bool = False) -> RouteTree:
    """Return the memoized tree for *root*, building it on first use.

    With ``rebuild=True`` a fresh tree is built and replaces the cached
    one. Raises ``InvalidInput`` if *root* is not an app or router.

    Each cached root stays alive until ``clear_cache()`` is called, so
    long-running processes that build many apps should clear it.
    """
    key = id(root)
    with _lock:
        entry = _trees.get(key)
        if rebuild or entry is None:
            tree = RouteTree(root)
            _trees[key] = (root, tree)
            logger.debug("Cached route tree for %s (rebuild=%s)", type(root).__name__, rebuild)
            return tree
        return entry[1]


def clear_cache() -> None:
    """Drop every memoized tree."""
    with _lock:
        _trees.clear()
