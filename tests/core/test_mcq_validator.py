"""
Unit Tests for core.schemas.validator

Advisory MCQ checks, answer-request checks and payload validation.
"""

import pytest

from mcq_toolkit.core.errors import ValidationError
from mcq_toolkit.core.models import MCQ, Option, SourceStrategy
from mcq_toolkit.core.schemas.validator import (
    EMPTY_OPTION,
    QUESTION_TOO_SHORT,
    TOO_MANY_OPTIONS,
    validate_answer_request,
    validate_mcq,
    validate_mcq_payload,
)


def mcq_with(question="Which city is the capital of France?", texts=("Paris", "Rome")):
    return MCQ(
        question=question,
        options=tuple(Option(t) for t in texts),
        source_strategy=SourceStrategy.NUMBERED_BLOCK,
    )


def valid_payload(**overrides):
    data = {
        "question": "Which city is the capital of France?",
        "options": [{"text": "Paris", "raw_value": "A. Paris"}, {"text": "Rome"}],
        "source_strategy": "numbered_block",
        "ordinal": 1,
    }
    data.update(overrides)
    return data


class TestValidateMcq:
    """Tests for validate_mcq()."""

    def test_validate_when_well_formed_then_valid(self):
        """A normal MCQ has no issues."""
        report = validate_mcq(mcq_with())
        assert report.is_valid
        assert report.issues == ()

    def test_validate_when_seven_options_then_too_many_options(self):
        """More than six options is flagged."""
        report = validate_mcq(mcq_with(texts=[f"o{i}" for i in range(7)]))
        assert not report.is_valid
        assert TOO_MANY_OPTIONS in report.issues

    def test_validate_when_short_question_then_flagged(self):
        """Questions under ten characters are flagged."""
        assert validate_mcq(mcq_with(question="2+2?")).issues == (QUESTION_TOO_SHORT,)

    def test_validate_when_blank_option_then_empty_option(self):
        """Options that normalize to nothing are flagged."""
        assert EMPTY_OPTION in validate_mcq(mcq_with(texts=("Paris", "  "))).issues

    def test_validate_when_called_then_does_not_modify_mcq(self):
        """Validation is read-only."""
        mcq = mcq_with(texts=("Paris", "  "))
        before = mcq.to_dict()
        validate_mcq(mcq)
        assert mcq.to_dict() == before


class TestValidateAnswerRequest:
    """Tests for validate_answer_request()."""

    def test_validate_when_valid_then_no_issues(self):
        """A reasonable question and options pass."""
        assert validate_answer_request("What is the capital of France?", ["Paris", "Rome"])

    def test_validate_when_question_missing_then_flagged(self):
        """A missing question is reported."""
        report = validate_answer_request("", ["Paris", "Rome"])
        assert report.issues == ("question is required",)

    def test_validate_when_eleven_options_then_flagged(self):
        """Requests allow at most ten options."""
        report = validate_answer_request("What is the capital of France?", [str(i) for i in range(11)])
        assert report.issues == ("maximum 10 options allowed",)

    def test_validate_when_option_empty_or_long_then_reports_position(self):
        """Option problems name the 1-based option position."""
        report = validate_answer_request("What is the capital of France?", ["Paris", " ", "x" * 501])
        assert report.issues == ("option 2 is empty", "option 3 too long (maximum 500 characters)")

    def test_validate_when_options_is_string_then_flagged(self):
        """A single string is not an option list."""
        report = validate_answer_request("What is the capital of France?", "Paris")
        assert report.issues == ("options must be a list",)


class TestValidateMcqPayload:
    """Tests for validate_mcq_payload()."""

    def test_validate_when_valid_then_passes(self):
        """Valid payloads pass in both modes."""
        validate_mcq_payload(valid_payload())
        validate_mcq_payload(valid_payload(), strict=True)

    def test_validate_when_missing_field_then_raises_error(self):
        """Missing required fields are listed."""
        data = valid_payload()
        del data["options"]
        with pytest.raises(ValidationError) as exc_info:
            validate_mcq_payload(data)
        assert exc_info.value.errors == ["Missing field: options"]

    def test_validate_when_unknown_strategy_then_raises_error(self):
        """source_strategy must be a known strategy."""
        with pytest.raises(ValidationError) as exc_info:
            validate_mcq_payload(valid_payload(source_strategy="magic"))
        assert exc_info.value.path == "source_strategy"

    def test_validate_when_seven_options_then_too_many_options(self):
        """Payloads carry the same option bound as extraction."""
        options = [{"text": f"o{i}"} for i in range(7)]
        with pytest.raises(ValidationError, match="too many options"):
            validate_mcq_payload(valid_payload(options=options))

    def test_validate_when_strict_and_extra_field_then_schema_error(self):
        """Strict mode applies the JSON schema, which forbids unknown fields."""
        with pytest.raises(ValidationError, match="Schema validation failed"):
            validate_mcq_payload(valid_payload(extra=True), strict=True)

    def test_validate_when_not_strict_and_extra_field_then_passes(self):
        """Basic checks ignore unknown fields."""
        validate_mcq_payload(valid_payload(extra=True))
