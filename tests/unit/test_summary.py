from __future__ import annotations

from repo_intel.conventions import detect_conventions
from repo_intel.conventions.detector import (
    ConventionRecord,
    DirectoryConvention,
    NamingConvention,
    SuffixConvention,
)
from repo_intel.index import FileRecord, IntelIndex
from repo_intel.summary import count_named_exports, generate_summary

STAMP = "2026-10-19T00:00:00.000Z"


def _index(records: dict[str, tuple[str, ...]]) -> IntelIndex:
    index = IntelIndex()
    for path, exports in records.items():
        index.files[path] = FileRecord(path=path, exports=exports, imports=(), indexed="t")
    return index


def test_empty_index_renders_header_only() -> None:
    text = generate_summary(IntelIndex(), ConventionRecord(), generated_at=STAMP)

    assert text == (
        "# Codebase Intelligence Summary\n"
        "\n"
        f"Last updated: {STAMP}\n"
        "Indexed files: 0\n"
    )


def test_full_summary_layout() -> None:
    index = _index(
        {f"/repo/services/s{i}.service.ts": (f"getItem{i}", "default") for i in range(5)}
    )
    conventions = detect_conventions(index)

    text = generate_summary(index, conventions, generated_at=STAMP)

    assert text == "\n".join(
        [
            "# Codebase Intelligence Summary",
            "",
            f"Last updated: {STAMP}",
            "Indexed files: 5",
            "",
            "## Naming Conventions",
            "",
            "- Export naming: camelCase (100% of 5 exports)",
            "",
            "## Key Directories",
            "",
            "- `services/`: Service layer (5 files)",
            "",
            "## File Patterns",
            "",
            "- `*.service.ts`: Service layer (5 files)",
            "",
            "Total exports: 5",
        ]
    )


def test_directory_and_pattern_blocks_are_bounded() -> None:
    conventions = ConventionRecord(
        naming_exports=NamingConvention(dominant="PascalCase", count=9, percentage=90),
        directories={
            name: DirectoryConvention(purpose="p", files=1)
            for name in ("a", "b", "c", "d", "e", "f", "g")
        },
        suffixes={f".s{i}.ts": SuffixConvention(purpose="q", count=5) for i in range(5)},
    )

    lines = generate_summary(IntelIndex(), conventions, generated_at=STAMP).splitlines()

    directory_lines = [line for line in lines if "/`:" in line]
    pattern_lines = [line for line in lines if line.startswith("- `*")]
    assert [line.split("`")[1] for line in directory_lines] == ["a/", "b/", "c/", "d/", "e/"]
    assert [line.split("`")[1] for line in pattern_lines] == ["*.s0.ts", "*.s1.ts", "*.s2.ts"]
    assert "- Export naming: PascalCase (90% of 9 exports)" in lines
    assert not any(line.startswith("Total exports") for line in lines)


def test_bounds_are_configurable() -> None:
    conventions = ConventionRecord(
        directories={name: DirectoryConvention(purpose="p", files=1) for name in ("a", "b")},
    )

    lines = generate_summary(
        IntelIndex(), conventions, generated_at=STAMP, max_directories=1
    ).splitlines()

    assert "- `a/`: p (1 files)" in lines
    assert "- `b/`: p (1 files)" not in lines


def test_total_export_count_excludes_default_sentinel() -> None:
    index = _index({"/repo/a.ts": ("default", "App"), "/repo/b.ts": ("default",)})

    assert count_named_exports(index) == 1
    text = generate_summary(index, ConventionRecord(), generated_at=STAMP)
    assert text.endswith("Total exports: 1")
