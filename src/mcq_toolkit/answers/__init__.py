"""
Answer resolution: mapping free-form model answers back onto the
canonical options of an extracted MCQ.
"""

from .distance import levenshtein
from .resolver import (
    FALLBACK_CONFIDENCE,
    AnswerResolver,
    ResolutionConfig,
    coerce_options,
    fallback_answer,
    resolve_answer,
)
from .response import ModelResponse, clamp_confidence, parse_model_response

__all__ = [
    "AnswerResolver",
    "ResolutionConfig",
    "resolve_answer",
    "fallback_answer",
    "coerce_options",
    "FALLBACK_CONFIDENCE",
    "levenshtein",
    "ModelResponse",
    "parse_model_response",
    "clamp_confidence",
]
