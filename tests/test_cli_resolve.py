"""Tests for waypost.cli._resolve — Router import resolution."""

import sys
import types

import pytest

from waypost.cli._resolve import resolve_object, resolve_router
from waypost.routing.router import Router


def _factory() -> Router:
    return Router()


def _broken_factory() -> Router:
    msg = "boom"
    raise RuntimeError(msg)


@pytest.fixture
def _fake_router_module(monkeypatch: pytest.MonkeyPatch) -> None:
    """Register a fake module with waypost Routers on sys.modules."""
    mod = types.ModuleType("_fake_waypost_app")
    mod.router = Router()  # type: ignore[attr-defined]
    mod.custom = Router()  # type: ignore[attr-defined]
    mod.create_router = _factory  # type: ignore[attr-defined]
    mod.broken = _broken_factory  # type: ignore[attr-defined]
    mod.not_a_router = "just a string"  # type: ignore[attr-defined]
    monkeypatch.setitem(sys.modules, "_fake_waypost_app", mod)


@pytest.mark.usefixtures("_fake_router_module")
class TestResolveRouter:
    def test_explicit_attribute(self) -> None:
        assert isinstance(resolve_router("_fake_waypost_app:custom"), Router)

    def test_default_attribute(self) -> None:
        """Omitting :attr defaults to 'router'."""
        router = resolve_router("_fake_waypost_app")
        assert router is sys.modules["_fake_waypost_app"].router

    def test_factory(self) -> None:
        assert isinstance(resolve_router("_fake_waypost_app:create_router"), Router)

    def test_factory_error(self) -> None:
        with pytest.raises(TypeError, match="raised an error: boom"):
            resolve_router("_fake_waypost_app:broken")

    def test_missing_module(self) -> None:
        with pytest.raises(ModuleNotFoundError):
            resolve_router("nonexistent_module_xyz:router")

    def test_missing_attribute(self) -> None:
        with pytest.raises(AttributeError):
            resolve_router("_fake_waypost_app:does_not_exist")

    def test_wrong_type(self) -> None:
        with pytest.raises(TypeError, match=r"not a waypost\.Router instance"):
            resolve_router("_fake_waypost_app:not_a_router")


@pytest.mark.usefixtures("_fake_router_module")
class TestResolveObject:
    def test_default_attr(self) -> None:
        assert resolve_object("_fake_waypost_app", "not_a_router") == "just a string"

    def test_explicit_attr(self) -> None:
        assert resolve_object("_fake_waypost_app:create_router", "router") is _factory
