"""Convention detection over the full index.

Conventions are always recomputed from scratch: the result depends only on
the index content, the purpose vocabularies and the two thresholds.
"""

from __future__ import annotations

import math
import re
from dataclasses import dataclass, field

from repo_intel.conventions.naming import classify_case
from repo_intel.conventions.vocabulary import directory_purpose, suffix_purpose
from repo_intel.index.models import INDEX_SCHEMA_VERSION, IntelIndex

MIN_SAMPLES = 5
MIN_MATCH_RATE = 0.70

_SUFFIX_PATTERN_RE = re.compile(r"\.([a-z]+)\.(js|ts|jsx|tsx|mjs|cjs)$", re.IGNORECASE)
_PATH_SEPARATOR_RE = re.compile(r"[\\/]")


@dataclass(slots=True, frozen=True)
class NamingConvention:
    """Dominant case style among exported names."""

    dominant: str
    count: int
    percentage: int


@dataclass(slots=True)
class DirectoryConvention:
    """Well-known directory and how many indexed paths pass through it."""

    purpose: str
    files: int = 0


@dataclass(slots=True)
class SuffixConvention:
    """Dotted file suffix such as ".service.ts" and its occurrence count."""

    purpose: str
    count: int = 0


@dataclass(slots=True)
class ConventionRecord:
    """Derived conventions; never persisted independently of the index."""

    naming_exports: NamingConvention | None = None
    directories: dict[str, DirectoryConvention] = field(default_factory=dict)
    suffixes: dict[str, SuffixConvention] = field(default_factory=dict)

    def to_dict(self, updated: str | None) -> dict[str, object]:
        """Return the on-disk conventions document."""
        naming: dict[str, object] = {}
        if self.naming_exports is not None:
            naming["exports"] = {
                "dominant": self.naming_exports.dominant,
                "count": self.naming_exports.count,
                "percentage": self.naming_exports.percentage,
            }
        return {
            "version": INDEX_SCHEMA_VERSION,
            "updated": updated,
            "naming": naming,
            "directories": {
                name: {"purpose": entry.purpose, "files": entry.files}
                for name, entry in self.directories.items()
            },
            "suffixes": {
                suffix: {"purpose": entry.purpose, "count": entry.count}
                for suffix, entry in self.suffixes.items()
            },
        }


def detect_conventions(
    index: IntelIndex,
    *,
    min_samples: int = MIN_SAMPLES,
    min_match_rate: float = MIN_MATCH_RATE,
) -> ConventionRecord:
    """Infer naming, directory and suffix conventions from every indexed file."""
    case_counts: dict[str, int] = {}
    classified_total = 0
    directories: dict[str, DirectoryConvention] = {}
    suffix_counts: dict[str, SuffixConvention] = {}

    for path, record in index.files.items():
        for export_name in record.exports:
            style = classify_case(export_name)
            if style is None:
                continue
            case_counts[style] = case_counts.get(style, 0) + 1
            classified_total += 1

        for segment in _PATH_SEPARATOR_RE.split(path):
            purpose = directory_purpose(segment)
            if purpose is None:
                continue
            key = segment.lower()
            entry = directories.get(key)
            if entry is None:
                entry = DirectoryConvention(purpose=purpose)
                directories[key] = entry
            entry.files += 1

        suffix_match = _SUFFIX_PATTERN_RE.search(path)
        if suffix_match is not None:
            suffix = suffix_match.group(1).lower()
            key = f".{suffix}.{suffix_match.group(2).lower()}"
            suffix_entry = suffix_counts.get(key)
            if suffix_entry is None:
                suffix_entry = SuffixConvention(purpose=suffix_purpose(suffix))
                suffix_counts[key] = suffix_entry
            suffix_entry.count += 1

    return ConventionRecord(
        naming_exports=_dominant_naming(
            case_counts,
            classified_total,
            min_samples=min_samples,
            min_match_rate=min_match_rate,
        ),
        directories=directories,
        suffixes={
            key: entry for key, entry in suffix_counts.items() if entry.count >= min_samples
        },
    )


def _dominant_naming(
    case_counts: dict[str, int],
    total: int,
    *,
    min_samples: int,
    min_match_rate: float,
) -> NamingConvention | None:
    if total < min_samples:
        return None
    dominant: str | None = None
    max_count = 0
    # Strict comparison keeps the first-seen style on ties.
    for style, count in case_counts.items():
        if count > max_count:
            dominant = style
            max_count = count
    if dominant is None:
        return None
    rate = max_count / total
    if rate < min_match_rate:
        return None
    return NamingConvention(
        dominant=dominant,
        count=max_count,
        percentage=math.floor(rate * 100 + 0.5),
    )
