"""
Module: extractor.candidates

Purpose:
    Candidate construction shared by all strategies. Applies the
    acceptance rules (non-empty question, option count within bounds)
    before an MCQ is built, so malformed candidates are dropped quietly
    instead of raising.

Key Functions:
    - make_candidate(): Build an MCQ or return None
    - node_option(): Option from a tree node
"""

from __future__ import annotations

import logging
from typing import Any, Iterable, Optional

from mcq_toolkit.common.text import clean_option_text, normalize_whitespace
from mcq_toolkit.core.models import MCQ, Option, SourceStrategy

from .config import ExtractionConfig
from .tree.nodes import DocumentNode

logger = logging.getLogger(__name__)


def node_option(node: DocumentNode, raw_value: Optional[str] = None) -> Option:
    """Option whose text is the node's cleaned visible text."""
    raw = node.text_content
    return Option(
        text=clean_option_text(raw),
        source_ref=node,
        raw_value=raw if raw_value is None else raw_value,
    )


def make_candidate(
    question: str,
    options: Iterable[Option],
    strategy: SourceStrategy,
    config: ExtractionConfig,
    *,
    question_ref: Optional[Any] = None,
    ordinal: Optional[int] = None,
    platform: Optional[str] = None,
    group_name: Optional[str] = None,
) -> Optional[MCQ]:
    """
    Build a candidate MCQ, or None if it breaks an acceptance rule.

    Options with empty text are discarded before counting.

    Returns:
        MCQ, or None when the question is empty or the option count is
        outside the configured bounds.
    """
    question_text = normalize_whitespace(question)
    kept = tuple(opt for opt in options if opt.text)

    if not question_text:
        logger.debug(f"[{strategy}] Dropped candidate without question text")
        return None
    if not config.accepts_option_count(len(kept)):
        logger.debug(
            f"[{strategy}] Dropped {question_text[:40]!r}: {len(kept)} options "
            f"(allowed {config.min_options}-{config.max_options})"
        )
        return None

    return MCQ(
        question=question_text,
        options=kept,
        source_strategy=strategy,
        question_ref=question_ref,
        ordinal=ordinal,
        platform=platform,
        group_name=group_name,
    )
