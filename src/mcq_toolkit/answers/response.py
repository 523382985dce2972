"""
Module: answers.response

Purpose:
    Parses the raw text returned by an answering model into an answer,
    a confidence and an explanation, and resolves the answer onto the
    MCQ's options. Well-formed responses are JSON objects (possibly
    wrapped in a markdown code fence); anything else goes through a
    best-effort text scan.

Key Classes:
    - ModelResponse: Parsed response with its resolution

Key Functions:
    - parse_model_response(): Raw text -> ModelResponse
    - clamp_confidence(): Coerce a reported confidence into 0-100

Used By:
    - cli: ``resolve --response``
"""

from __future__ import annotations

import json
import logging
import math
import re
from dataclasses import dataclass
from typing import Any, Optional, Sequence

from mcq_toolkit.common.thresholds import RESOLUTION_THRESHOLDS
from mcq_toolkit.core.models import Option, ResolutionMethod, ResolvedAnswer
from mcq_toolkit.core.models.answers import MAX_CONFIDENCE, MIN_CONFIDENCE

from .resolver import OptionLike, Resolution, coerce_options, resolve_answer

logger = logging.getLogger(__name__)

DEFAULT_EXPLANATION = "No explanation provided"
LETTER_EXPLANATION = "Extracted from unstructured response"
MENTION_EXPLANATION = "Matched from response text"
FALLBACK_EXPLANATION = "Unable to parse response reliably"

_FENCE = re.compile(r"^```[a-zA-Z]*\s*(.*?)\s*```$", re.DOTALL)
_LETTER_IN_TEXT = re.compile(r"\b([A-Z])[.):\s]")


@dataclass(frozen=True)
class ModelResponse:
    """
    Parsed answering-model response.

    Attributes:
        answer: Matched option text, or the raw answer if nothing matched.
        confidence: Confidence 0-100.
        explanation: Model explanation or a note on how the answer was found.
        resolved: Resolution of the answer against the options.
    """
    answer: str
    confidence: int
    explanation: str
    resolved: Resolution

    def to_dict(self) -> dict:
        return {
            "answer": self.answer,
            "confidence": self.confidence,
            "explanation": self.explanation,
            "resolution": self.resolved.to_dict(),
        }


def clamp_confidence(
    value: Any,
    default: int = RESOLUTION_THRESHOLDS.default_model_confidence,
) -> int:
    """
    Coerce a reported confidence to an int in 0-100.

    Numbers and numeric strings are clamped and rounded half up; anything
    else (missing, non-numeric, NaN) gives ``default``.

    Example:
        >>> clamp_confidence("87.5")
        88
        >>> clamp_confidence(140)
        100
    """
    if isinstance(value, bool):
        return default
    if isinstance(value, str):
        try:
            value = float(value.strip().rstrip("%"))
        except ValueError:
            return default
    if not isinstance(value, (int, float)) or math.isnan(value):
        return default
    clamped = max(MIN_CONFIDENCE, min(MAX_CONFIDENCE, value))
    return int(math.floor(clamped + 0.5))


def parse_model_response(raw: str, options: Sequence[OptionLike]) -> ModelResponse:
    """
    Parse a model response and resolve its answer.

    JSON responses need a non-empty ``answer``; ``confidence`` defaults
    to 70 and ``explanation`` to "No explanation provided". Other text is
    scanned for a letter marker (confidence 50), then for an option's
    text (confidence 40); failing both, the first option is returned with
    confidence 20.

    Raises:
        TypeError: If raw is not a string.
        ValueError: If options is empty.
    """
    if not isinstance(raw, str):
        raise TypeError(f"response must be a string, got {type(raw).__name__}")
    choices = coerce_options(options)

    payload = _load_json_object(raw)
    if payload is not None and payload.get("answer"):
        answer = str(payload["answer"])
        confidence = clamp_confidence(payload.get("confidence"))
        explanation = str(payload.get("explanation") or DEFAULT_EXPLANATION)
        resolved = resolve_answer(answer, choices, confidence=confidence)
        if resolved:
            answer = resolved.option.text
        return ModelResponse(answer, confidence, explanation, resolved)

    logger.debug(f"Response is not a usable JSON object, scanning text: {raw[:80]!r}")
    return _scan_text(raw, choices)


def _load_json_object(raw: str) -> Optional[dict]:
    text = raw.strip()
    fenced = _FENCE.match(text)
    if fenced:
        text = fenced.group(1)
    try:
        data = json.loads(text)
    except json.JSONDecodeError:
        return None
    return data if isinstance(data, dict) else None


def _scan_text(raw: str, choices: Sequence[Option]) -> ModelResponse:
    thresholds = RESOLUTION_THRESHOLDS

    for match in _LETTER_IN_TEXT.finditer(raw):
        index = ord(match.group(1)) - ord("A")
        if index < len(choices):
            return _picked(choices, index, thresholds.letter_mention_confidence,
                           ResolutionMethod.LETTER, LETTER_EXPLANATION)

    lowered = raw.lower()
    for index, option in enumerate(choices):
        if option.text and option.text.lower() in lowered:
            return _picked(choices, index, thresholds.option_mention_confidence,
                           ResolutionMethod.SUBSTRING, MENTION_EXPLANATION)

    return _picked(choices, 0, thresholds.fallback_confidence,
                   ResolutionMethod.FALLBACK, FALLBACK_EXPLANATION)


def _picked(
    choices: Sequence[Option],
    index: int,
    confidence: int,
    method: ResolutionMethod,
    explanation: str,
) -> ModelResponse:
    option = choices[index]
    return ModelResponse(
        answer=option.text,
        confidence=confidence,
        explanation=explanation,
        resolved=ResolvedAnswer(option, confidence, method, index),
    )
