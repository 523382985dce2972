"""
Module: extractor.dedup

Purpose:
    Cross-strategy deduplication. Strategies overlap freely (a radio
    group inside a ``.question`` div is found twice), so candidates are
    collapsed by question text before they reach the caller.

Key Functions:
    - deduplicate(): Keep the first candidate per question key
"""

from __future__ import annotations

import logging
from typing import Callable, Dict, Iterable, List, Optional

from mcq_toolkit.core.models import MCQ

logger = logging.getLogger(__name__)

DuplicateCallback = Callable[[MCQ, MCQ], None]


def deduplicate(
    mcqs: Iterable[MCQ],
    on_duplicate: Optional[DuplicateCallback] = None,
) -> List[MCQ]:
    """
    Drop candidates whose question repeats an earlier one.

    The key is the lower-cased, trimmed question text. The first
    candidate seen wins, even if a later one has more options.

    Args:
        mcqs: Candidates in strategy order.
        on_duplicate: Called as ``on_duplicate(dropped, kept)`` for every
            dropped candidate.

    Returns:
        Surviving candidates in their original order.
    """
    kept: Dict[str, MCQ] = {}
    for mcq in mcqs:
        existing = kept.get(mcq.dedup_key)
        if existing is not None:
            logger.debug(
                f"Duplicate question from {mcq.source_strategy} dropped "
                f"(kept {existing.source_strategy}): {mcq.question[:40]!r}"
            )
            if on_duplicate is not None:
                on_duplicate(mcq, existing)
            continue
        kept[mcq.dedup_key] = mcq
    return list(kept.values())
