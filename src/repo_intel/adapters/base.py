"""Core adapter protocol and data types."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol


@dataclass(slots=True, frozen=True)
class ModuleSurface:
    """Exported names and import targets recovered from one source file."""

    exports: tuple[str, ...]
    imports: tuple[str, ...]


class ExtractionAdapter(Protocol):
    """Language-specific extraction contract."""

    name: str

    def supports_path(self, path: str) -> bool:
        """Return True when adapter handles the given path."""

    def extract(self, path: str, text: str) -> ModuleSurface:
        """Recover exports and imports from raw source text."""


def surface_from_sets(exports: set[str], imports: set[str]) -> ModuleSurface:
    """Build a surface with deterministic, de-duplicated ordering."""
    return ModuleSurface(
        exports=tuple(sorted(name for name in exports if name)),
        imports=tuple(sorted(source for source in imports if source)),
    )
