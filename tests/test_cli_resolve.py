"""Tests for glue.cli._resolve — Glue import resolution."""

import sys
import types

import pytest

from glue.asgi import GlueASGI
from glue.cli._resolve import resolve_glue
from glue.glue import Glue


@pytest.fixture
def _fake_glue_module(monkeypatch: pytest.MonkeyPatch) -> None:
    """Register a fake module with a Glue router on sys.modules."""
    mod = types.ModuleType("_fake_glue_app")
    mod.glue = Glue()  # type: ignore[attr-defined]
    mod.custom = Glue("/api")  # type: ignore[attr-defined]
    mod.factory = lambda: Glue("/made")  # type: ignore[attr-defined]
    mod.bad_factory = lambda: 1 / 0  # type: ignore[attr-defined]
    mod.app = GlueASGI(Glue("/served"))  # type: ignore[attr-defined]
    mod.asgi_factory = lambda: GlueASGI(Glue("/built"))  # type: ignore[attr-defined]
    mod.not_a_glue = "just a string"  # type: ignore[attr-defined]
    monkeypatch.setitem(sys.modules, "_fake_glue_app", mod)


@pytest.mark.usefixtures("_fake_glue_module")
class TestResolveGlue:
    def test_explicit_attribute(self) -> None:
        assert isinstance(resolve_glue("_fake_glue_app:glue"), Glue)

    def test_custom_attribute(self) -> None:
        assert resolve_glue("_fake_glue_app:custom").config.base_url == "/api"

    def test_default_attribute(self) -> None:
        """Omitting :attr defaults to 'glue'."""
        assert isinstance(resolve_glue("_fake_glue_app"), Glue)

    def test_factory(self) -> None:
        assert resolve_glue("_fake_glue_app:factory").config.base_url == "/made"

    def test_asgi_app_unwrapped(self) -> None:
        assert resolve_glue("_fake_glue_app:app").config.base_url == "/served"

    def test_asgi_factory_unwrapped(self) -> None:
        assert resolve_glue("_fake_glue_app:asgi_factory").config.base_url == "/built"

    def test_dotted_module_without_colon(self, monkeypatch: pytest.MonkeyPatch) -> None:
        mod = types.ModuleType("_fake_glue_pkg.routes")
        mod.glue = Glue("/nested")  # type: ignore[attr-defined]
        monkeypatch.setitem(sys.modules, "_fake_glue_pkg.routes", mod)
        assert resolve_glue("_fake_glue_pkg.routes").config.base_url == "/nested"

    def test_failing_factory_propagates(self) -> None:
        with pytest.raises(ZeroDivisionError):
            resolve_glue("_fake_glue_app:bad_factory")

    def test_missing_module(self) -> None:
        with pytest.raises(ModuleNotFoundError):
            resolve_glue("nonexistent_module_xyz:glue")

    def test_missing_attribute(self) -> None:
        with pytest.raises(AttributeError):
            resolve_glue("_fake_glue_app:does_not_exist")

    def test_wrong_type(self) -> None:
        with pytest.raises(TypeError, match="expected a Glue router"):
            resolve_glue("_fake_glue_app:not_a_glue")
