"""
Module: answers

Purpose:
    Result types for answer resolution. A ResolvedAnswer names the
    canonical option picked for a free-form model answer; Unresolved is
    the explicit no-match outcome.

Key Classes:
    - ResolutionMethod: Which resolver tier accepted the answer
    - ResolvedAnswer: Canonical option + confidence + method
    - Unresolved: Falsy no-match value

Dependencies:
    - dataclasses (std)
    - enum (std)
    - .options.Option

Used By:
    - answers.resolver
    - answers.response
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from .options import Option

MIN_CONFIDENCE = 0
MAX_CONFIDENCE = 100


class ResolutionMethod(str, Enum):
    """Resolver tier that produced a match."""
    EXACT = "exact"
    SUBSTRING = "substring"
    LETTER = "letter"
    FUZZY = "fuzzy"
    FALLBACK = "fallback"  # Caller-side default, never produced by the resolver

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class ResolvedAnswer:
    """
    Answer mapped onto a canonical option (immutable, not persisted).

    Attributes:
        option: The canonical Option from the MCQ.
        confidence: Caller-supplied confidence, 0-100.
        method: Tier that accepted the answer.
        index: Position of the option in the MCQ's option list.
    """

    option: Option
    confidence: int
    method: ResolutionMethod
    index: int = 0

    def __post_init__(self) -> None:
        if not (MIN_CONFIDENCE <= self.confidence <= MAX_CONFIDENCE):
            raise ValueError(f"confidence must be 0-100: {self.confidence}")

    @property
    def letter(self) -> str:
        return chr(ord("A") + self.index)

    def __bool__(self) -> bool:
        return True

    def to_dict(self) -> dict:
        return {
            "option": self.option.text,
            "index": self.index,
            "letter": self.letter,
            "confidence": self.confidence,
            "method": self.method.value,
        }


@dataclass(frozen=True)
class Unresolved:
    """
    No resolver tier accepted the answer.

    Falsy so callers can write ``if not result: ...`` before applying
    their own fallback policy.

    Attributes:
        answer: The raw answer that could not be matched.
        best_distance: Smallest edit distance seen in the fuzzy tier.
    """

    answer: str
    best_distance: Optional[int] = None

    def __bool__(self) -> bool:
        return False

    def to_dict(self) -> dict:
        return {"answer": self.answer, "best_distance": self.best_distance, "method": None}
