"""
Schemas Package

JSON schema definitions and validation utilities.
"""

from .validator import (
    validate_mcq,
    validate_answer_request,
    validate_mcq_payload,
    ValidationReport,
    QUESTION_TOO_SHORT,
    NOT_ENOUGH_OPTIONS,
    TOO_MANY_OPTIONS,
    EMPTY_OPTION,
)
from mcq_toolkit.core.errors import ValidationError

__all__ = [
    "validate_mcq",
    "validate_answer_request",
    "validate_mcq_payload",
    "ValidationReport",
    "ValidationError",
    "QUESTION_TOO_SHORT",
    "NOT_ENOUGH_OPTIONS",
    "TOO_MANY_OPTIONS",
    "EMPTY_OPTION",
]
