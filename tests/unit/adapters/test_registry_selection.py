from __future__ import annotations

from pathlib import Path

from repo_intel.adapters import (
    AdapterRegistry,
    TypeScriptJavaScriptExtractor,
    build_adapter_registry,
)
from repo_intel.config import default_config


def test_default_registry_selects_ts_js_for_indexable_extensions(tmp_path: Path) -> None:
    registry = build_adapter_registry(default_config(tmp_path))

    for path in ("a.js", "a.ts", "a.jsx", "a.tsx", "a.mjs", "a.cjs", "A.TS"):
        adapter = registry.select(path)
        assert adapter is not None
        assert adapter.name == "ts_js_lexical"


def test_registry_returns_none_for_unindexed_paths(tmp_path: Path) -> None:
    registry = build_adapter_registry(default_config(tmp_path))

    assert registry.select("main.py") is None
    assert registry.select("README.md") is None
    assert registry.select("component.vue") is None


def test_extractor_honors_custom_extensions() -> None:
    registry = AdapterRegistry()
    registry.register(TypeScriptJavaScriptExtractor(extensions=(".vue",)))

    assert registry.select("App.vue") is not None
    assert registry.select("app.ts") is None
