"""Tests for glue.config — GlueConfig frozen dataclass."""

import pytest

from glue.config import GlueConfig
from glue.errors import ResourceNotFound
from glue.glue import Glue


class TestGlueConfig:
    def test_defaults(self) -> None:
        cfg = GlueConfig()

        assert cfg.base_url == ""
        assert cfg.ignore_case is True
        assert cfg.trailing_slash is True

    def test_override(self) -> None:
        cfg = GlueConfig(base_url="/api", ignore_case=False)

        assert cfg.base_url == "/api"
        assert cfg.ignore_case is False

    def test_frozen(self) -> None:
        cfg = GlueConfig()
        with pytest.raises(AttributeError):
            cfg.base_url = "/api"  # type: ignore[misc]


class TestGlueUsesConfig:
    def test_default_config(self) -> None:
        assert Glue().config == GlueConfig()

    def test_base_url_argument(self) -> None:
        assert Glue("/api").config.base_url == "/api"

    def test_base_url_argument_keeps_other_flags(self) -> None:
        glue = Glue("/api", config=GlueConfig(base_url="/v1", ignore_case=False))
        assert glue.config == GlueConfig(base_url="/api", ignore_case=False)

    def test_config_base_url(self) -> None:
        glue = Glue(config=GlueConfig(base_url="/v1"))
        glue.add_route("/users", dict)
        assert glue.match("/v1/users").route.key == "/v1/users"

    def test_case_sensitive(self) -> None:
        glue = Glue(config=GlueConfig(ignore_case=False))
        glue.add_route("/users", dict)
        assert glue.match("/users")
        with pytest.raises(ResourceNotFound):
            glue.match("/Users")

    def test_strict_trailing_slash(self) -> None:
        glue = Glue(config=GlueConfig(trailing_slash=False))
        glue.add_route("/users", dict)
        assert glue.match("/users")
        with pytest.raises(ResourceNotFound):
            glue.match("/users/")
