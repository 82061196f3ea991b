"""Identifier case-style classification."""

from __future__ import annotations

import re
from typing import Final

CAMEL_CASE: Final = "camelCase"
PASCAL_CASE: Final = "PascalCase"
SNAKE_CASE: Final = "snake_case"
SCREAMING_SNAKE: Final = "SCREAMING_SNAKE"
KEBAB_CASE: Final = "kebab-case"

# Ordered most specific first; the first full match wins.
_MULTI_SEGMENT_PATTERNS: Final[tuple[tuple[str, re.Pattern[str]], ...]] = (
    (SCREAMING_SNAKE, re.compile(r"[A-Z][A-Z0-9]*(?:_[A-Z0-9]+)+")),
    (SNAKE_CASE, re.compile(r"[a-z][a-z0-9]*(?:_[a-z0-9]+)+")),
    (KEBAB_CASE, re.compile(r"[a-z][a-z0-9]*(?:-[a-z0-9]+)+")),
    (PASCAL_CASE, re.compile(r"[A-Z][a-z0-9]+(?:[A-Z][a-z0-9]+)*")),
    (CAMEL_CASE, re.compile(r"[a-z][a-z0-9]*(?:[A-Z][a-z0-9]+)+")),
)
_SINGLE_SEGMENT_PATTERNS: Final[tuple[tuple[str, re.Pattern[str]], ...]] = (
    (CAMEL_CASE, re.compile(r"[a-z][a-z0-9]*")),
    (PASCAL_CASE, re.compile(r"[A-Z][a-z0-9]+")),
    (SCREAMING_SNAKE, re.compile(r"[A-Z][A-Z0-9]*")),
)

# "default" is the export keyword, not a name the author chose.
_UNCLASSIFIED_NAMES: Final = frozenset({"default"})


def classify_case(name: object) -> str | None:
    """Return the case style of an identifier, or None when it has none."""
    if not isinstance(name, str) or not name:
        return None
    if name in _UNCLASSIFIED_NAMES:
        return None
    for style, pattern in _MULTI_SEGMENT_PATTERNS:
        if pattern.fullmatch(name):
            return style
    for style, pattern in _SINGLE_SEGMENT_PATTERNS:
        if pattern.fullmatch(name):
            return style
    return None
