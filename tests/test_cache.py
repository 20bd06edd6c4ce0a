"""Tests for routetree.cache — memoized trees per root object."""

import gc
import weakref
from collections.abc import Iterator

import pytest

from routetree.cache import clear_cache, get_tree
from routetree.errors import InvalidInput
from routetree.routing import App


def list_users(request: object) -> None:
    pass


@pytest.fixture(autouse=True)
def _clean_cache() -> Iterator[None]:
    clear_cache()
    yield
    clear_cache()


class TestGetTree:
    def test_memoized_per_root(self) -> None:
        app = App()
        app.get("/users", list_users)
        assert get_tree(app) is get_tree(app)

    def test_distinct_roots(self) -> None:
        first, second = App(), App()
        first.get("/a", list_users)
        second.get("/b", list_users)
        assert get_tree(first) is not get_tree(second)
        assert get_tree(second).routes[0].path == "/b"

    def test_stale_until_rebuilt(self) -> None:
        app = App()
        app.get("/users", list_users)
        tree = get_tree(app)

        app.post("/users", list_users)
        assert get_tree(app) is tree
        assert len(tree) == 1

        rebuilt = get_tree(app, rebuild=True)
        assert rebuilt is not tree
        assert len(rebuilt) == 2
        assert get_tree(app) is rebuilt

    def test_clear_cache(self) -> None:
        app = App()
        app.get("/users", list_users)
        tree = get_tree(app)
        clear_cache()
        assert get_tree(app) is not tree

    def test_invalid_root_not_cached(self) -> None:
        with pytest.raises(InvalidInput):
            get_tree(object())


class TestCacheLifetime:
    def test_cached_root_kept_alive_until_cleared(self) -> None:
        app = App()
        app.get("/users", list_users)
        ref = weakref.ref(app)
        get_tree(app)

        del app
        gc.collect()
        assert ref() is not None

        clear_cache()
        gc.collect()
        assert ref() is None
