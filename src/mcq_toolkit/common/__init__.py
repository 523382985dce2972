"""Common utilities shared across the toolkit."""

from __future__ import annotations

from .text import (
    OPTION_PREFIX_PATTERN,
    normalize_whitespace,
    strip_option_prefix,
    clean_option_text,
    sanitize_text,
)
from .thresholds import (
    EXTRACTION_THRESHOLDS,
    RESOLUTION_THRESHOLDS,
    REQUEST_THRESHOLDS,
)

__all__ = [
    # text
    "OPTION_PREFIX_PATTERN",
    "normalize_whitespace",
    "strip_option_prefix",
    "clean_option_text",
    "sanitize_text",
    # thresholds
    "EXTRACTION_THRESHOLDS",
    "RESOLUTION_THRESHOLDS",
    "REQUEST_THRESHOLDS",
]
