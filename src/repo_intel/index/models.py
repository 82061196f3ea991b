"""Typed models for indexing state."""

from __future__ import annotations

from dataclasses import dataclass, field

INDEX_SCHEMA_VERSION = 1


@dataclass(slots=True, frozen=True)
class FileRecord:
    """Extraction result for one indexed source file."""

    path: str
    exports: tuple[str, ...]
    imports: tuple[str, ...]
    indexed: str

    def to_dict(self) -> dict[str, object]:
        """Return the on-disk representation (the path is the mapping key)."""
        return {
            "exports": list(self.exports),
            "imports": list(self.imports),
            "indexed": self.indexed,
        }


@dataclass(slots=True)
class IntelIndex:
    """Mapping of absolute file path to its record, in insertion order."""

    version: int = INDEX_SCHEMA_VERSION
    updated: str | None = None
    files: dict[str, FileRecord] = field(default_factory=dict)

    def to_dict(self) -> dict[str, object]:
        """Return the on-disk representation."""
        return {
            "version": self.version,
            "updated": self.updated,
            "files": {path: record.to_dict() for path, record in self.files.items()},
        }

    @property
    def file_count(self) -> int:
        """Return the number of indexed files."""
        return len(self.files)
