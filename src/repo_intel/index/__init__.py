"""Index storage and discovery package."""

from .discovery import discover_source_files, has_allowed_extension, should_exclude
from .models import INDEX_SCHEMA_VERSION, FileRecord, IntelIndex
from .store import (
    CONVENTIONS_FILE_NAME,
    INDEX_FILE_NAME,
    SUMMARY_FILE_NAME,
    IndexStore,
    apply_record,
    normalize_path,
)

__all__ = [
    "CONVENTIONS_FILE_NAME",
    "FileRecord",
    "INDEX_FILE_NAME",
    "INDEX_SCHEMA_VERSION",
    "IndexStore",
    "IntelIndex",
    "SUMMARY_FILE_NAME",
    "apply_record",
    "discover_source_files",
    "has_allowed_extension",
    "normalize_path",
    "should_exclude",
]
