"""
Module: answers.resolver

Purpose:
    Maps a free-form answer string (usually produced by a language model)
    onto one of an MCQ's canonical options. Tiers are tried in order and
    the first one that accepts wins:

    1. exact     - case/whitespace-insensitive equality
    2. substring - answer contains an option or the option contains the
                   answer, options checked in order
    3. letter    - answer opens with a letter marker ("B)", "C.", "A ")
    4. fuzzy     - smallest edit distance, accepted below a length ratio

    An answer that cites a letter and then repeats that option's text
    ("B) Berlin") is reported as a letter match ahead of the substring
    tier, since the citation is the stronger signal.

Key Classes:
    - ResolutionConfig: Tunable thresholds
    - AnswerResolver: Resolver bound to a config

Key Functions:
    - resolve_answer(): Resolve with the default config
    - fallback_answer(): Caller-side "first option" default

Dependencies:
    - mcq_toolkit.common.text: Normalization
    - .distance: Levenshtein distance

Used By:
    - answers.response: Resolving parsed model responses
    - cli: ``resolve`` command
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import List, Optional, Sequence, Union

from mcq_toolkit.common.text import normalize_whitespace
from mcq_toolkit.common.thresholds import RESOLUTION_THRESHOLDS
from mcq_toolkit.core.models import Option, ResolutionMethod, ResolvedAnswer, Unresolved

from .distance import levenshtein

logger = logging.getLogger(__name__)

FALLBACK_CONFIDENCE = RESOLUTION_THRESHOLDS.fallback_confidence

# "B) ...", "C. ...", "A: ...", "D ..."
LETTER_MARKER = re.compile(r"^([A-Z])[.):\s]")
# A bare capital letter is a citation too, but only for the early check
_LETTER_CITATION = re.compile(r"^([A-Z])(?:[.):\s]|$)")

OptionLike = Union[Option, str]
Resolution = Union[ResolvedAnswer, Unresolved]


@dataclass(frozen=True)
class ResolutionConfig:
    """
    Configuration for answer resolution.

    Attributes:
        fuzzy_accept_ratio: Fuzzy matches are accepted when the distance is
            below this fraction of the longer string (default 0.4)
        default_confidence: Confidence attached when the caller gives none
            (default 70)
        letter_citation_first: Report "B) Berlin"-style answers as letter
            matches before the substring tier (default True)
    """
    fuzzy_accept_ratio: float = RESOLUTION_THRESHOLDS.fuzzy_accept_ratio
    default_confidence: int = RESOLUTION_THRESHOLDS.default_model_confidence
    letter_citation_first: bool = True

    def __post_init__(self) -> None:
        if not 0 < self.fuzzy_accept_ratio <= 1:
            raise ValueError(f"fuzzy_accept_ratio must be in (0, 1]: {self.fuzzy_accept_ratio}")


class AnswerResolver:
    """
    Tiered answer-to-option resolver.

    Example:
        >>> resolver = AnswerResolver()
        >>> resolver.resolve("B) Berlin", ["Paris", "Berlin", "Rome"]).method
        <ResolutionMethod.LETTER: 'letter'>
    """

    def __init__(self, config: Optional[ResolutionConfig] = None):
        self.config = config or ResolutionConfig()

    def resolve(
        self,
        answer: str,
        options: Sequence[OptionLike],
        *,
        confidence: Optional[int] = None,
    ) -> Resolution:
        """
        Resolve ``answer`` against ``options``.

        Args:
            answer: Free-form answer text.
            options: Options in MCQ order (Option objects or plain strings).
            confidence: Confidence to attach to a match, 0-100.

        Returns:
            ResolvedAnswer, or Unresolved when no tier accepts.

        Raises:
            TypeError: If answer is not a string.
            ValueError: If options is empty or confidence is outside 0-100.
        """
        if not isinstance(answer, str):
            raise TypeError(f"answer must be a string, got {type(answer).__name__}")
        choices = coerce_options(options)
        if confidence is None:
            confidence = self.config.default_confidence

        target = _normalize(answer)
        if not target:
            return Unresolved(answer)
        texts = [_normalize(opt.text) for opt in choices]

        def hit(index: int, method: ResolutionMethod) -> ResolvedAnswer:
            logger.debug(f"Resolved {answer[:40]!r} -> {choices[index].text!r} via {method}")
            return ResolvedAnswer(choices[index], confidence, method, index)

        # Tier 1: exact
        for i, text in enumerate(texts):
            if text == target:
                return hit(i, ResolutionMethod.EXACT)

        if self.config.letter_citation_first:
            cited = _cited_index(answer, texts)
            if cited is not None:
                return hit(cited, ResolutionMethod.LETTER)

        # Tier 2: substring in either direction, first option in order wins
        for i, text in enumerate(texts):
            if text and (text in target or target in text):
                return hit(i, ResolutionMethod.SUBSTRING)

        # Tier 3: letter marker
        match = LETTER_MARKER.match(answer.strip())
        if match:
            index = ord(match.group(1)) - ord("A")
            if index < len(choices):
                return hit(index, ResolutionMethod.LETTER)

        # Tier 4: fuzzy
        best_index, best_distance = 0, None
        for i, text in enumerate(texts):
            distance = levenshtein(target, text)
            if best_distance is None or distance < best_distance:
                best_index, best_distance = i, distance
        limit = max(len(target), len(texts[best_index])) * self.config.fuzzy_accept_ratio
        if best_distance is not None and best_distance < limit:
            return hit(best_index, ResolutionMethod.FUZZY)

        logger.debug(f"No option matched {answer[:40]!r} (best distance {best_distance})")
        return Unresolved(answer, best_distance)


def resolve_answer(
    answer: str,
    options: Sequence[OptionLike],
    *,
    confidence: Optional[int] = None,
) -> Resolution:
    """Resolve an answer with the default configuration. See AnswerResolver.resolve."""
    return _DEFAULT_RESOLVER.resolve(answer, options, confidence=confidence)


def fallback_answer(
    options: Sequence[OptionLike],
    confidence: int = FALLBACK_CONFIDENCE,
) -> ResolvedAnswer:
    """
    Caller-side default when nothing could be resolved: the first option.

    Raises:
        ValueError: If options is empty.
    """
    choices = coerce_options(options)
    return ResolvedAnswer(choices[0], confidence, ResolutionMethod.FALLBACK, 0)


def _cited_index(answer: str, texts: List[str]) -> Optional[int]:
    """Index of a letter citation whose remainder agrees with the cited option."""
    stripped = answer.strip()
    match = _LETTER_CITATION.match(stripped)
    if not match:
        return None
    index = ord(match.group(1)) - ord("A")
    if index >= len(texts):
        return None
    remainder = _normalize(stripped[match.end():])
    cited = texts[index]
    if not remainder or remainder == cited:
        return index
    if cited and (cited in remainder or remainder in cited):
        return index
    return None


def coerce_options(options: Sequence[OptionLike]) -> List[Option]:
    """Options as Option objects; plain strings are wrapped."""
    if not options:
        raise ValueError("options must not be empty")
    return [opt if isinstance(opt, Option) else Option(text=str(opt), raw_value=str(opt)) for opt in options]


def _normalize(text: str) -> str:
    return normalize_whitespace(text).lower()


_DEFAULT_RESOLVER = AnswerResolver()
