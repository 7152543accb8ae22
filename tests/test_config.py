"""Tests for roost.config — RouterConfig frozen dataclass."""

from pathlib import Path

import pytest

from roost.config import DEFAULT_CACHE_FILE, RouterConfig


class TestRouterConfig:
    def test_defaults(self) -> None:
        cfg = RouterConfig(project_dir="src/shop")

        assert cfg.project_dir == "src/shop"
        assert cfg.cache_file is None
        assert cfg.namespace == ""
        assert cfg.strategy == "reflect"

    def test_default_cache_path(self) -> None:
        cfg = RouterConfig(project_dir="src/shop")
        assert cfg.cache_path == Path("src/shop") / "caches" / "routes.json"
        assert DEFAULT_CACHE_FILE == Path("caches/routes.json")

    def test_explicit_cache_path(self, tmp_path: Path) -> None:
        cfg = RouterConfig(project_dir="src/shop", cache_file=str(tmp_path / "r.json"))
        assert cfg.cache_path == tmp_path / "r.json"

    def test_override(self) -> None:
        cfg = RouterConfig(project_dir=Path("app"), namespace="app.", strategy="source")

        assert cfg.project_dir == Path("app")
        assert cfg.namespace == "app."
        assert cfg.strategy == "source"

    def test_frozen(self) -> None:
        cfg = RouterConfig(project_dir="src/shop")

        with pytest.raises(AttributeError):
            cfg.strategy = "source"  # type: ignore[misc]
