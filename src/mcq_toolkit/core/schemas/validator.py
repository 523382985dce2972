"""
MCQ Validation Utilities

Advisory quality checks for extracted MCQs and answer requests, plus
payload validation for serialized MCQ data.

- `validate_mcq()` and `validate_answer_request()` never raise on bad
  data; they return a ValidationReport listing every issue found.
- `validate_mcq_payload()` guards deserialization and fails fast with
  ValidationError; strict mode validates against `mcq.schema.json`.
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Sequence

import jsonschema

from mcq_toolkit.common.text import normalize_whitespace
from mcq_toolkit.common.thresholds import EXTRACTION_THRESHOLDS, REQUEST_THRESHOLDS
from mcq_toolkit.core.errors import ValidationError
from mcq_toolkit.core.models import MCQ, SourceStrategy

# Issue strings reported by validate_mcq()
QUESTION_TOO_SHORT = "question too short"
NOT_ENOUGH_OPTIONS = "not enough options"
TOO_MANY_OPTIONS = "too many options"
EMPTY_OPTION = "empty option"


# Load schemas lazily
_SCHEMAS: dict[str, dict] = {}


def _load_schema(name: str) -> dict:
    """Load a schema from the schemas directory."""
    if name not in _SCHEMAS:
        schema_path = Path(__file__).parent / f"{name}.schema.json"
        if not schema_path.exists():
            raise FileNotFoundError(f"Schema not found: {schema_path}")
        with open(schema_path, "r", encoding="utf-8") as f:
            _SCHEMAS[name] = json.load(f)
    return _SCHEMAS[name]


@dataclass(frozen=True)
class ValidationReport:
    """Outcome of an advisory check. Truthy when valid."""
    issues: tuple[str, ...] = field(default_factory=tuple)

    @property
    def is_valid(self) -> bool:
        return not self.issues

    def __bool__(self) -> bool:
        return self.is_valid

    def to_dict(self) -> dict[str, Any]:
        return {"is_valid": self.is_valid, "issues": list(self.issues)}


def validate_mcq(mcq: MCQ) -> ValidationReport:
    """
    Check an MCQ against the extraction quality rules.

    Flags a question shorter than 10 characters, fewer than 2 or more
    than 6 options, and options that are empty after normalization. The
    MCQ is not modified.

    Example:
        >>> validate_mcq(mcq).issues
        ('too many options',)
    """
    issues: list[str] = []

    if len(mcq.question.strip()) < EXTRACTION_THRESHOLDS.question_min_length:
        issues.append(QUESTION_TOO_SHORT)
    if len(mcq.options) < EXTRACTION_THRESHOLDS.min_options:
        issues.append(NOT_ENOUGH_OPTIONS)
    if len(mcq.options) > EXTRACTION_THRESHOLDS.max_options:
        issues.append(TOO_MANY_OPTIONS)
    if any(not normalize_whitespace(opt.text) for opt in mcq.options):
        issues.append(EMPTY_OPTION)

    return ValidationReport(tuple(issues))


def validate_answer_request(question: Any, options: Any) -> ValidationReport:
    """
    Check a question/options pair before it is sent to an answering service.

    Limits: question 10-1000 characters, 2-10 options, each option a
    non-empty string of at most 500 characters. Option messages use
    1-based positions.
    """
    issues: list[str] = []
    limits = REQUEST_THRESHOLDS

    if not question:
        issues.append("question is required")
    elif not isinstance(question, str):
        issues.append("question must be a string")
    elif len(question.strip()) < EXTRACTION_THRESHOLDS.question_min_length:
        issues.append(f"question too short (minimum {EXTRACTION_THRESHOLDS.question_min_length} characters)")
    elif len(question) > limits.question_max_length:
        issues.append(f"question too long (maximum {limits.question_max_length} characters)")

    if not options:
        issues.append("options are required")
    elif isinstance(options, (str, bytes)) or not isinstance(options, Sequence):
        issues.append("options must be a list")
    elif len(options) < EXTRACTION_THRESHOLDS.min_options:
        issues.append(f"at least {EXTRACTION_THRESHOLDS.min_options} options are required")
    elif len(options) > limits.max_request_options:
        issues.append(f"maximum {limits.max_request_options} options allowed")
    else:
        for position, option in enumerate(options, start=1):
            if not isinstance(option, str):
                issues.append(f"option {position} must be a string")
            elif not option.strip():
                issues.append(f"option {position} is empty")
            elif len(option) > limits.option_max_length:
                issues.append(f"option {position} too long (maximum {limits.option_max_length} characters)")

    return ValidationReport(tuple(issues))


def validate_mcq_payload(data: dict[str, Any], *, strict: bool = False) -> None:
    """
    Validate serialized MCQ data (as produced by MCQ.to_dict()).

    Args:
        data: MCQ dictionary to validate
        strict: If True, also validate against the JSON schema

    Raises:
        ValidationError: If data is invalid
    """
    if not isinstance(data, dict):
        raise ValidationError(f"MCQ payload must be an object, got {type(data).__name__}")

    required = ["question", "options", "source_strategy"]
    missing = [f for f in required if f not in data]
    if missing:
        raise ValidationError(
            f"Missing required fields: {missing}",
            path="",
            errors=[f"Missing field: {f}" for f in missing]
        )

    question = data["question"]
    if not isinstance(question, str) or not question.strip():
        raise ValidationError("question must be a non-empty string", path="question")

    strategy = data["source_strategy"]
    valid_strategies = [s.value for s in SourceStrategy]
    if strategy not in valid_strategies:
        raise ValidationError(
            f"Invalid source_strategy: {strategy!r} (expected one of {valid_strategies})",
            path="source_strategy"
        )

    options = data["options"]
    if not isinstance(options, list):
        raise ValidationError("options must be a list", path="options")
    if len(options) < EXTRACTION_THRESHOLDS.min_options:
        raise ValidationError(f"{NOT_ENOUGH_OPTIONS}: {len(options)}", path="options")
    if len(options) > EXTRACTION_THRESHOLDS.max_options:
        raise ValidationError(f"{TOO_MANY_OPTIONS}: {len(options)}", path="options")
    for i, option in enumerate(options):
        if not isinstance(option, dict) or not isinstance(option.get("text"), str):
            raise ValidationError(
                "option must be an object with a text string",
                path=f"options[{i}]"
            )
        if not option["text"].strip():
            raise ValidationError(EMPTY_OPTION, path=f"options[{i}].text")

    ordinal = data.get("ordinal")
    if ordinal is not None and (not isinstance(ordinal, int) or isinstance(ordinal, bool)):
        raise ValidationError(f"Invalid ordinal: {ordinal!r}", path="ordinal")

    if strict:
        schema = _load_schema("mcq")
        try:
            jsonschema.validate(data, schema)
        except jsonschema.ValidationError as e:
            raise ValidationError(
                f"Schema validation failed: {e.message}",
                path=".".join(str(p) for p in e.absolute_path),
                errors=[e.message]
            ) from e
