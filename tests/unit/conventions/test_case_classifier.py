from __future__ import annotations

import pytest

from repo_intel.conventions import classify_case


@pytest.mark.parametrize(
    ("name", "expected"),
    [
        ("MAX_RETRIES", "SCREAMING_SNAKE"),
        ("HTTP_2_PORT", "SCREAMING_SNAKE"),
        ("user_name", "snake_case"),
        ("my-component", "kebab-case"),
        ("UserModel", "PascalCase"),
        ("useFoo", "camelCase"),
        ("getUserById", "camelCase"),
    ],
)
def test_multi_segment_styles(name: str, expected: str) -> None:
    assert classify_case(name) == expected


@pytest.mark.parametrize(
    ("name", "expected"),
    [
        ("main", "camelCase"),
        ("item2", "camelCase"),
        ("App", "PascalCase"),
        ("DEBUG", "SCREAMING_SNAKE"),
        ("A", "SCREAMING_SNAKE"),
    ],
)
def test_single_segment_fallbacks(name: str, expected: str) -> None:
    assert classify_case(name) == expected


@pytest.mark.parametrize(
    "name", ["default", "", "$store", "_private", "Mixed_Case", "a__b", 42, None]
)
def test_names_without_determinable_style(name: object) -> None:
    assert classify_case(name) is None
