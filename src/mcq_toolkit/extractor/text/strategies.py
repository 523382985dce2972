"""
Module: extractor.text.strategies

Purpose:
    Text strategies for recognized or pasted text, where no document
    structure is available. Each strategy splits the text into candidate
    blocks differently; all of them share parse_question_block().

Key Functions:
    - extract_numbered_blocks(): "1." / "2)" numbered questions
    - extract_label_prefixed(): "Q1:" / "q2 " labelled questions
    - extract_paragraphs(): Blank-line separated paragraphs

Used By:
    - extractor.text: TEXT_STRATEGIES
"""

from __future__ import annotations

import re
from typing import List, Optional

from mcq_toolkit.core.models import MCQ, Option, SourceStrategy
from mcq_toolkit.extractor.candidates import make_candidate
from mcq_toolkit.extractor.classification import looks_like_question
from mcq_toolkit.extractor.config import ExtractionConfig

from .blocks import parse_question_block, split_marked_blocks, split_paragraphs

NUMBERED_START = re.compile(r"^\s*(\d+)[.)]\s*(.*)$")
LABEL_START = re.compile(r"^\s*Q(\d+)(?::|\s)\s*(.*)$", re.IGNORECASE)
QUESTION_WORD_LABEL = re.compile(r"^\s*Question\s*(\d+)[:.)]?\s+(.*)$", re.IGNORECASE)


def extract_numbered_blocks(text: str, config: ExtractionConfig) -> List[MCQ]:
    """Questions introduced by a number and "." or ")"; the number is the ordinal."""
    return _extract_marked(text, config, NUMBERED_START, SourceStrategy.NUMBERED_BLOCK)


def extract_label_prefixed(text: str, config: ExtractionConfig) -> List[MCQ]:
    """Questions introduced by "Q<number>" and ":" or whitespace."""
    return _extract_marked(text, config, LABEL_START, SourceStrategy.LABEL_PREFIXED)


def extract_paragraphs(text: str, config: ExtractionConfig) -> List[MCQ]:
    """Blank-line separated paragraphs that look like a question.

    A leading "Q<number>" or "Question <number>" label is removed from the
    question text, so a labelled question found by both this strategy and
    the label strategy deduplicates to one entry.
    """
    mcqs: List[MCQ] = []
    for paragraph in split_paragraphs(_unify_newlines(text)):
        if not looks_like_question(paragraph):
            continue
        mcq = _block_to_mcq(
            paragraph, config, SourceStrategy.PARAGRAPH, ordinal=None, strip_label=True
        )
        if mcq is not None:
            mcqs.append(mcq)
    return mcqs


def _extract_marked(
    text: str,
    config: ExtractionConfig,
    start: "re.Pattern[str]",
    strategy: SourceStrategy,
) -> List[MCQ]:
    mcqs: List[MCQ] = []
    for number, block in split_marked_blocks(_unify_newlines(text), start):
        mcq = _block_to_mcq(block, config, strategy, ordinal=number)
        if mcq is not None:
            mcqs.append(mcq)
    return mcqs


def _block_to_mcq(
    block: str,
    config: ExtractionConfig,
    strategy: SourceStrategy,
    ordinal: Optional[int],
    strip_label: bool = False,
) -> Optional[MCQ]:
    parsed = parse_question_block(block)
    if parsed is None:
        return None
    question = _strip_question_label(parsed.question) if strip_label else parsed.question
    return make_candidate(
        question,
        [Option(text=opt, raw_value=opt) for opt in parsed.options],
        strategy,
        config,
        ordinal=ordinal,
    )


def _strip_question_label(question: str) -> str:
    for pattern in (LABEL_START, QUESTION_WORD_LABEL):
        match = pattern.match(question)
        if match and match.group(2).strip():
            return match.group(2).strip()
    return question


def _unify_newlines(text: str) -> str:
    return text.replace("\r\n", "\n").replace("\r", "\n")
