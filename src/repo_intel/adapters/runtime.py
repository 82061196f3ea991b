"""Runtime adapter registry construction."""

from __future__ import annotations

from repo_intel.adapters.registry import AdapterRegistry
from repo_intel.adapters.ts_js import TypeScriptJavaScriptExtractor
from repo_intel.config import IntelConfig


def build_adapter_registry(config: IntelConfig) -> AdapterRegistry:
    """Build adapter registry from effective config."""
    registry = AdapterRegistry()
    registry.register(TypeScriptJavaScriptExtractor(extensions=config.extraction.extensions))
    return registry
