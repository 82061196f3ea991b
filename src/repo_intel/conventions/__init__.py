"""Naming and layout convention inference."""

from .detector import (
    MIN_MATCH_RATE,
    MIN_SAMPLES,
    ConventionRecord,
    DirectoryConvention,
    NamingConvention,
    SuffixConvention,
    detect_conventions,
)
from .naming import classify_case
from .vocabulary import DIRECTORY_PURPOSES, SUFFIX_PURPOSES, UNKNOWN_PURPOSE

__all__ = [
    "ConventionRecord",
    "DIRECTORY_PURPOSES",
    "DirectoryConvention",
    "MIN_MATCH_RATE",
    "MIN_SAMPLES",
    "NamingConvention",
    "SUFFIX_PURPOSES",
    "SuffixConvention",
    "UNKNOWN_PURPOSE",
    "classify_case",
    "detect_conventions",
]
