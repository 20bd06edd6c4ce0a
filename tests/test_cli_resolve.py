"""Tests for routetree.cli._resolve — import resolution."""

import sys
import types

import pytest

from routetree.cli._resolve import resolve_root
from routetree.routing import App, Router


def _factory() -> App:
    return App()


def _broken_factory() -> App:
    msg = "no config"
    raise RuntimeError(msg)


@pytest.fixture
def _fake_module(monkeypatch: pytest.MonkeyPatch) -> None:
    mod = types.ModuleType("_fake_routetree_root")
    mod.app = App()  # type: ignore[attr-defined]
    mod.router = Router()  # type: ignore[attr-defined]
    mod.create_app = _factory  # type: ignore[attr-defined]
    mod.broken = _broken_factory  # type: ignore[attr-defined]
    mod.not_an_app = "just a string"  # type: ignore[attr-defined]
    mod.RouterClass = Router  # type: ignore[attr-defined]
    monkeypatch.setitem(sys.modules, "_fake_routetree_root", mod)


@pytest.mark.usefixtures("_fake_module")
class TestResolveRoot:
    def test_explicit_attribute(self) -> None:
        assert isinstance(resolve_root("_fake_routetree_root:router"), Router)

    def test_default_attribute(self) -> None:
        """Omitting :attr defaults to 'app'."""
        assert isinstance(resolve_root("_fake_routetree_root"), App)

    def test_factory(self) -> None:
        assert isinstance(resolve_root("_fake_routetree_root:create_app"), App)

    def test_class_is_called_as_factory(self) -> None:
        assert isinstance(resolve_root("_fake_routetree_root:RouterClass"), Router)

    def test_broken_factory(self) -> None:
        with pytest.raises(TypeError, match="raised an error: no config"):
            resolve_root("_fake_routetree_root:broken")

    def test_missing_module(self) -> None:
        with pytest.raises(ModuleNotFoundError):
            resolve_root("nonexistent_module_xyz:app")

    def test_missing_attribute(self) -> None:
        with pytest.raises(AttributeError):
            resolve_root("_fake_routetree_root:does_not_exist")

    def test_wrong_type(self) -> None:
        with pytest.raises(TypeError, match="not an app or router"):
            resolve_root("_fake_routetree_root:not_an_app")
