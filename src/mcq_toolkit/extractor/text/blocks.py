"""
Module: extractor.text.blocks

Purpose:
    Block splitting and the shared question-block parser used by every
    text strategy. A block is a run of lines holding one question
    followed by its options, e.g.::

        What is 2+2?
        A. 2
        B. 3
        C. 4

Key Functions:
    - parse_question_block(): Block text -> ParsedBlock or None
    - split_marked_blocks(): Split text at lines carrying a start marker
    - split_paragraphs(): Split text at blank-line gaps

Used By:
    - extractor.text.strategies
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import List, Optional, Pattern, Tuple

from mcq_toolkit.common.text import clean_option_text, normalize_whitespace
from mcq_toolkit.extractor.classification import looks_like_option

_PARAGRAPH_GAP = re.compile(r"\n[ \t]*\n\s*")


@dataclass(frozen=True)
class ParsedBlock:
    """Question text and cleaned option texts read from one block."""
    question: str
    options: Tuple[str, ...]


def parse_question_block(block: str) -> Optional[ParsedBlock]:
    """
    Parse a block into a question and its options.

    Leading lines without a choice marker form the question. Options
    start at the first marked line; after that only marked lines are
    kept, so trailing footers or answer keys never leak into an option.

    Returns:
        ParsedBlock, or None if there is no question text or no option
        line. Option-count bounds are left to the caller.

    Example:
        >>> parse_question_block("What is 2+2?\\nA. 2\\nB. 4")
        ParsedBlock(question='What is 2+2?', options=('2', '4'))
    """
    lines = [line.strip() for line in block.splitlines()]
    lines = [line for line in lines if line]

    question_lines: List[str] = []
    index = 0
    while index < len(lines) and not looks_like_option(lines[index]):
        question_lines.append(lines[index])
        index += 1

    if not question_lines or index == len(lines):
        return None

    options = [clean_option_text(line) for line in lines[index:] if looks_like_option(line)]

    return ParsedBlock(
        question=normalize_whitespace(" ".join(question_lines)),
        options=tuple(opt for opt in options if opt),
    )


def split_marked_blocks(text: str, start: Pattern[str]) -> List[Tuple[int, str]]:
    """
    Split text into blocks that begin at lines matching ``start``.

    ``start`` must capture the block number as group 1 and the rest of
    the start line as group 2. Text before the first start line is
    ignored.

    Returns:
        (number, block text) pairs in document order.
    """
    blocks: List[Tuple[int, str]] = []
    current: Optional[List[str]] = None
    number = 0
    for line in text.splitlines():
        match = start.match(line)
        if match:
            if current is not None:
                blocks.append((number, "\n".join(current)))
            number = int(match.group(1))
            current = [match.group(2)]
        elif current is not None:
            current.append(line)
    if current is not None:
        blocks.append((number, "\n".join(current)))
    return blocks


def split_paragraphs(text: str) -> List[str]:
    """Paragraphs separated by one or more blank lines."""
    return [part for part in _PARAGRAPH_GAP.split(text) if part.strip()]
