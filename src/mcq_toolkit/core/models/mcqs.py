"""
Module: mcqs

Purpose:
    Provides the MCQ dataclass - the main data structure returned by every
    extractor and consumed by the answer resolver. Represents one question
    with its ordered options and provenance. Immutable.

Key Functions:
    - MCQ.option_texts: Option texts in encounter order
    - MCQ.letter_for(index): Letter label ("A", "B", ...) for an option
    - MCQ.dedup_key: Canonical identity used by deduplication
    - MCQ.to_dict() / MCQ.from_dict(): Serialization

Dependencies:
    - dataclasses (std)
    - enum (std)
    - .options.Option

Used By:
    - extractor (all strategies, dedup, pipeline)
    - core.schemas.validator
    - core.utils.serialization
    - answers.resolver
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from functools import cached_property
from typing import Any, Optional, Tuple

from .options import Option

# Lower bound enforced on construction. The upper bound (6) is an extractor
# acceptance rule and a validator check, not a model invariant.
MIN_OPTIONS = 2


class SourceStrategy(str, Enum):
    """Extraction strategy that produced a candidate."""
    GROUPED_CHOICE = "grouped_choice"   # Radio groups sharing a name
    LIST = "list"                       # <ol>/<ul> with marked items
    TAGGED_BLOCK = "tagged_block"       # question/option class or data attrs
    TABLE = "table"                     # Row 0 question, rows 1.. options
    PLATFORM = "platform"               # Known third-party markup
    NUMBERED_BLOCK = "numbered_block"   # "1." / "2)" text blocks
    LABEL_PREFIXED = "label_prefixed"   # "Q1:" text blocks
    PARAGRAPH = "paragraph"             # Blank-line separated text blocks

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class MCQ:
    """
    Multiple-choice question (immutable).

    Attributes:
        question: Question text, whitespace-normalized.
        options: Options in encounter order. Option i maps to letter A+i.
        source_strategy: Strategy that produced this MCQ.
        question_ref: Tree node holding the question, None for text sources.
        ordinal: Declared question number ("Q3" -> 3), else None.
        platform: Platform template name for PLATFORM candidates.
        group_name: Shared control name for GROUPED_CHOICE candidates.

    Invariants:
        - question is non-empty
        - len(options) >= 2

    Example:
        >>> mcq = MCQ(
        ...     question="What is 2+2?",
        ...     options=(Option("3"), Option("4")),
        ...     source_strategy=SourceStrategy.NUMBERED_BLOCK,
        ...     ordinal=1,
        ... )
        >>> mcq.letter_for(1)
        'B'
    """

    question: str
    options: Tuple[Option, ...]
    source_strategy: SourceStrategy
    question_ref: Optional[Any] = field(default=None, compare=False, repr=False)
    ordinal: Optional[int] = None
    platform: Optional[str] = None
    group_name: Optional[str] = None

    def __post_init__(self) -> None:
        """Validate MCQ on construction."""
        if not isinstance(self.options, tuple):
            # Freeze whatever sequence the extractor accumulated
            object.__setattr__(self, "options", tuple(self.options))
        if not self.question or not self.question.strip():
            raise ValueError("question must be non-empty")
        if len(self.options) < MIN_OPTIONS:
            raise ValueError(
                f"MCQ needs at least {MIN_OPTIONS} options, got {len(self.options)}"
            )
        if not isinstance(self.source_strategy, SourceStrategy):
            object.__setattr__(self, "source_strategy", SourceStrategy(self.source_strategy))

    # ─────────────────────────────────────────────────────────────────────────
    # Calculated Properties
    # ─────────────────────────────────────────────────────────────────────────

    @cached_property
    def option_texts(self) -> list[str]:
        """Option texts in encounter order."""
        return [opt.text for opt in self.options]

    @cached_property
    def dedup_key(self) -> str:
        """Lower-cased, trimmed question text."""
        return self.question.strip().lower()

    def letter_for(self, index: int) -> str:
        """
        Letter label for the option at ``index``.

        Raises:
            IndexError: If index is outside the option list.
        """
        if not 0 <= index < len(self.options):
            raise IndexError(f"option index out of range: {index}")
        return chr(ord("A") + index)

    # ─────────────────────────────────────────────────────────────────────────
    # Serialization
    # ─────────────────────────────────────────────────────────────────────────

    def to_dict(self) -> dict:
        """
        Serialize to dictionary for JSON output.

        Node references are dropped; optional provenance fields are only
        written when set.
        """
        d = {
            "question": self.question,
            "options": [opt.to_dict() for opt in self.options],
            "source_strategy": self.source_strategy.value,
        }
        if self.ordinal is not None:
            d["ordinal"] = self.ordinal
        if self.platform:
            d["platform"] = self.platform
        if self.group_name:
            d["group_name"] = self.group_name
        return d

    @classmethod
    def from_dict(cls, data: dict) -> MCQ:
        return cls(
            question=data["question"],
            options=tuple(Option.from_dict(o) for o in data["options"]),
            source_strategy=SourceStrategy(data["source_strategy"]),
            ordinal=data.get("ordinal"),
            platform=data.get("platform"),
            group_name=data.get("group_name"),
        )

    def __repr__(self) -> str:
        """Concise representation for debugging."""
        return (
            f"MCQ({self.question[:40]!r}, options={len(self.options)}, "
            f"strategy={self.source_strategy})"
        )
