"""Persistent index storage with a read-modify-write cycle per update."""

from __future__ import annotations

import json
import os
from collections.abc import Iterable
from datetime import UTC, datetime
from pathlib import Path

from repo_intel.index.models import INDEX_SCHEMA_VERSION, FileRecord, IntelIndex
from repo_intel.logging import utc_timestamp

INDEX_FILE_NAME = "index.json"
CONVENTIONS_FILE_NAME = "conventions.json"
SUMMARY_FILE_NAME = "summary.md"


class IndexStore:
    """Owns the index document and the artifacts derived from it.

    There is no locking: two processes updating the same data directory at
    once can lose one of the updates, because the whole index is replaced on
    every write.
    """

    def __init__(self, data_dir: Path) -> None:
        self._data_dir = data_dir
        self._index_path = data_dir / INDEX_FILE_NAME
        self._conventions_path = data_dir / CONVENTIONS_FILE_NAME
        self._summary_path = data_dir / SUMMARY_FILE_NAME

    @property
    def index_path(self) -> Path:
        """Return on-disk index path."""
        return self._index_path

    @property
    def conventions_path(self) -> Path:
        """Return on-disk conventions path."""
        return self._conventions_path

    @property
    def summary_path(self) -> Path:
        """Return on-disk summary path."""
        return self._summary_path

    def load(self) -> IntelIndex:
        """Return the persisted index, or a fresh one if it is missing or unusable."""
        try:
            with self._index_path.open("r", encoding="utf-8") as handle:
                payload = json.load(handle)
        except (OSError, ValueError, RecursionError):
            return IntelIndex()
        if not isinstance(payload, dict):
            return IntelIndex()
        if payload.get("version") != INDEX_SCHEMA_VERSION:
            return IntelIndex()
        raw_files = payload.get("files")
        if not isinstance(raw_files, dict):
            return IntelIndex()

        files: dict[str, FileRecord] = {}
        for path, obj in raw_files.items():
            record = _record_from_dict(path, obj)
            if record is None:
                continue
            files[path] = record
        return IntelIndex(
            version=INDEX_SCHEMA_VERSION,
            updated=_as_timestamp(payload.get("updated")),
            files=files,
        )

    def upsert(
        self,
        path: str | Path,
        exports: Iterable[str],
        imports: Iterable[str],
        *,
        base: Path | None = None,
    ) -> IntelIndex:
        """Replace one file's record, persist the whole index, and return it."""
        index = self.load()
        apply_record(index, path, exports, imports, base=base)
        self.save(index)
        return index

    def save(self, index: IntelIndex) -> None:
        """Write the full index document."""
        self._atomic_write_json(self._index_path, index.to_dict())

    def write_conventions(self, document: dict[str, object]) -> None:
        """Write the full conventions document."""
        self._atomic_write_json(self._conventions_path, document)

    def write_summary(self, text: str) -> None:
        """Write the rendered summary."""
        self._atomic_write_text(self._summary_path, text)

    def read_summary(self) -> str | None:
        """Return the current summary text, if one has been written."""
        try:
            return self._summary_path.read_text(encoding="utf-8")
        except OSError:
            return None

    def _atomic_write_json(self, path: Path, payload: dict[str, object]) -> None:
        # Key order is meaningful here (directory and suffix insertion order).
        self._atomic_write_text(path, json.dumps(payload, indent=2) + "\n")

    def _atomic_write_text(self, path: Path, text: str) -> None:
        self._data_dir.mkdir(parents=True, exist_ok=True)
        tmp = path.with_suffix(path.suffix + ".tmp")
        with tmp.open("w", encoding="utf-8") as handle:
            handle.write(text)
        tmp.replace(path)


def apply_record(
    index: IntelIndex,
    path: str | Path,
    exports: Iterable[str],
    imports: Iterable[str],
    *,
    base: Path | None = None,
) -> FileRecord:
    """Write one file's record into an in-memory index and bump its timestamp."""
    normalized = normalize_path(path, base=base)
    timestamp = utc_timestamp()
    record = FileRecord(
        path=normalized,
        exports=tuple(sorted(set(exports))),
        imports=tuple(sorted(set(imports))),
        indexed=timestamp,
    )
    index.files[normalized] = record
    index.updated = timestamp
    return record


def normalize_path(path: str | Path, base: Path | None = None) -> str:
    """Return an absolute, normalized path string used as the index key."""
    candidate = Path(path)
    if not candidate.is_absolute():
        candidate = (base or Path.cwd()) / candidate
    return os.path.normpath(str(candidate))


def _record_from_dict(path: object, obj: object) -> FileRecord | None:
    if not isinstance(path, str) or not path:
        return None
    if not isinstance(obj, dict):
        return None
    exports = obj.get("exports")
    imports = obj.get("imports")
    if not isinstance(exports, list) or not all(isinstance(item, str) for item in exports):
        return None
    if not isinstance(imports, list) or not all(isinstance(item, str) for item in imports):
        return None
    return FileRecord(
        path=path,
        exports=tuple(exports),
        imports=tuple(imports),
        indexed=_as_timestamp(obj.get("indexed")) or "",
    )


def _as_timestamp(value: object) -> str | None:
    if isinstance(value, str):
        return value
    # Epoch milliseconds, as written by earlier versions of the index.
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        try:
            moment = datetime.fromtimestamp(value / 1000, tz=UTC)
        except (OverflowError, OSError, ValueError):
            return None
        return moment.isoformat(timespec="milliseconds").replace("+00:00", "Z")
    return None
