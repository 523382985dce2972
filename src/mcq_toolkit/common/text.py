"""
Module: common.text

Purpose:
    Text normalization shared by every extractor and the resolver. Trims
    and collapses whitespace, and removes list/option markers such as
    "A.", "2)" or "(B)" from the start of a line.

Key Functions:
    - normalize_whitespace(): Trim and collapse whitespace runs
    - strip_option_prefix(): Remove one leading choice marker
    - clean_option_text(): strip_option_prefix + normalize_whitespace
    - sanitize_text(): Normalize and drop angle brackets

Dependencies:
    - re (std)

Used By:
    - extractor.classification
    - extractor.structured / extractor.text strategies
    - answers.resolver
"""

from __future__ import annotations

import re

# Leading choice markers: "A." "b)" "C:" "12." "3)" "(B)" "(2)"
OPTION_PREFIX_PATTERN = re.compile(
    r"^(?:[A-Za-z][.):]|\d+[.):]|\([A-Za-z]\)|\(\d+\))"
)
_PREFIX_WITH_GAP = re.compile(OPTION_PREFIX_PATTERN.pattern + r"\s*")
_WHITESPACE = re.compile(r"\s+")
_ANGLE_BRACKETS = re.compile(r"[<>]")


def normalize_whitespace(text: str) -> str:
    """
    Trim and collapse internal whitespace runs to a single space.

    Example:
        >>> normalize_whitespace("  What   is\\n 2+2? ")
        'What is 2+2?'
    """
    if not text:
        return ""
    return _WHITESPACE.sub(" ", text).strip()


def strip_option_prefix(text: str) -> str:
    """
    Remove a single leading option marker.

    Only the first matching marker is removed; the function does not
    recurse, so "A. 1) x" becomes "1) x". Input without a marker is
    returned unchanged.

    Example:
        >>> strip_option_prefix("(B) Berlin")
        'Berlin'
        >>> strip_option_prefix("3) Madrid")
        'Madrid'
    """
    if not text:
        return text
    stripped = text.strip()
    match = _PREFIX_WITH_GAP.match(stripped)
    if not match:
        return text
    return stripped[match.end():]


def clean_option_text(text: str) -> str:
    """Option text as stored on an Option: marker removed, whitespace collapsed."""
    return normalize_whitespace(strip_option_prefix(text))


def sanitize_text(text: str) -> str:
    """
    Sanitize free text before it is sent to an answering service.

    Removes '<' and '>' and collapses whitespace.
    """
    return normalize_whitespace(_ANGLE_BRACKETS.sub("", text))
