"""Markdown digest of the index and its conventions."""

from __future__ import annotations

from repo_intel.adapters.ts_js import DEFAULT_EXPORT
from repo_intel.conventions.detector import ConventionRecord
from repo_intel.index.models import IntelIndex
from repo_intel.logging import utc_timestamp

SUMMARY_TITLE = "# Codebase Intelligence Summary"


def generate_summary(
    index: IntelIndex,
    conventions: ConventionRecord,
    *,
    generated_at: str | None = None,
    max_directories: int = 5,
    max_file_patterns: int = 3,
) -> str:
    """Render a short summary meant to fit comfortably in a prompt."""
    lines = [SUMMARY_TITLE, ""]
    lines.append(f"Last updated: {generated_at or utc_timestamp()}")
    lines.append(f"Indexed files: {index.file_count}")
    lines.append("")

    naming = conventions.naming_exports
    if naming is not None:
        lines.append("## Naming Conventions")
        lines.append("")
        lines.append(
            f"- Export naming: {naming.dominant} ({naming.percentage}% of {naming.count} exports)"
        )
        lines.append("")

    directories = list(conventions.directories.items())[:max_directories]
    if directories:
        lines.append("## Key Directories")
        lines.append("")
        for name, directory in directories:
            lines.append(f"- `{name}/`: {directory.purpose} ({directory.files} files)")
        lines.append("")

    suffixes = list(conventions.suffixes.items())[:max_file_patterns]
    if suffixes:
        lines.append("## File Patterns")
        lines.append("")
        for suffix, pattern in suffixes:
            lines.append(f"- `*{suffix}`: {pattern.purpose} ({pattern.count} files)")
        lines.append("")

    total_exports = count_named_exports(index)
    if total_exports > 0:
        lines.append(f"Total exports: {total_exports}")

    return "\n".join(lines)


def count_named_exports(index: IntelIndex) -> int:
    """Count exports across all files, ignoring the "default" sentinel."""
    return sum(
        1
        for record in index.files.values()
        for name in record.exports
        if name != DEFAULT_EXPORT
    )
