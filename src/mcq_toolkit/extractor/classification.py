"""
Module: extractor.classification

Purpose:
    Heuristic line/node classification. Decides whether a piece of text
    looks like an answer option or like a question, using an OR of many
    weak signals. False positives are filtered downstream by the option
    count bounds and deduplication.

Key Functions:
    - looks_like_option(): Line starts with a choice marker
    - looks_like_question(): Text carries any question signal

Dependencies:
    - mcq_toolkit.common.text: Shared prefix pattern

Used By:
    - extractor.structured: Question lookup and list acceptance
    - extractor.text: Block parsing and paragraph filtering
"""

from __future__ import annotations

import re
from typing import Optional

from mcq_toolkit.common.text import OPTION_PREFIX_PATTERN
from mcq_toolkit.common.thresholds import EXTRACTION_THRESHOLDS


QUESTION_PATTERNS = (
    re.compile(r"\?$"),
    re.compile(r"^(?:what|which|who|where|when|why|how)\b", re.IGNORECASE),
    re.compile(r"^(?:select|choose|identify|find|determine|calculate)\b", re.IGNORECASE),
    re.compile(r"\b(?:is|are|was|were|will|would|should|can|could)\s+", re.IGNORECASE),
    re.compile(r"^(?:question\s*\d+|q\d+)\b", re.IGNORECASE),
    re.compile(r"^\d+[.)]"),
)


def looks_like_option(line: Optional[str]) -> bool:
    """
    Check if a line starts with a choice marker.

    Example:
        >>> looks_like_option("B) Berlin")
        True
        >>> looks_like_option("Berlin")
        False
    """
    if not line:
        return False
    return OPTION_PREFIX_PATTERN.match(line.strip()) is not None


def looks_like_question(
    text: Optional[str],
    *,
    min_length: int = EXTRACTION_THRESHOLDS.question_min_length,
) -> bool:
    """
    Check if text looks like a question.

    Requires at least ``min_length`` characters and any of: a trailing
    question mark, a leading interrogative or instruction word, a
    copular/modal verb followed by whitespace, a "Question N"/"QN" label,
    or a leading ordinal.

    Example:
        >>> looks_like_question("Which planet is largest?")
        True
        >>> looks_like_question("Berlin")
        False
    """
    if not text:
        return False
    candidate = text.strip()
    if len(candidate) < min_length:
        return False
    return any(pattern.search(candidate) for pattern in QUESTION_PATTERNS)
