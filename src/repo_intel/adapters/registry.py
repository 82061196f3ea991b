"""Adapter registry with deterministic selection behavior."""

from __future__ import annotations

from dataclasses import dataclass, field

from repo_intel.adapters.base import ExtractionAdapter


@dataclass(slots=True)
class AdapterRegistry:
    """Ordered adapter registry; paths no adapter claims are not indexed."""

    _adapters: list[ExtractionAdapter] = field(default_factory=list)

    def register(self, adapter: ExtractionAdapter) -> None:
        """Register an adapter in deterministic insertion order."""
        self._adapters.append(adapter)

    def select(self, path: str) -> ExtractionAdapter | None:
        """Select the first adapter that supports the path."""
        for adapter in self._adapters:
            if adapter.supports_path(path):
                return adapter
        return None
