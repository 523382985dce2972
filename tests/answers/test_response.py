"""
Unit Tests for answers.response
"""

import pytest

from mcq_toolkit.answers.response import (
    DEFAULT_EXPLANATION,
    FALLBACK_EXPLANATION,
    clamp_confidence,
    parse_model_response,
)
from mcq_toolkit.core.models import ResolutionMethod


CAPITALS = ["Paris", "Berlin", "Rome"]


class TestClampConfidence:
    """Tests for clamp_confidence()."""

    @pytest.mark.parametrize("value, expected", [
        (87, 87),
        ("87.5", 88),
        (49.5, 50),
        (140, 100),
        (-5, 0),
        ("95%", 95),
    ])
    def test_clamp_when_numeric_then_clamped_and_rounded(self, value, expected):
        """Numbers and numeric strings are clamped to 0-100."""
        assert clamp_confidence(value) == expected

    @pytest.mark.parametrize("value", [None, "high", True, float("nan"), [90]])
    def test_clamp_when_not_numeric_then_default(self, value):
        """Anything non-numeric gives the default."""
        assert clamp_confidence(value) == 70


class TestParseModelResponse:
    """Tests for parse_model_response()."""

    def test_parse_when_json_then_answer_resolved(self):
        """JSON answers are resolved and replaced by the option text."""
        raw = '{"answer": "B", "confidence": 92, "explanation": "Capital of Germany"}'

        response = parse_model_response(raw, CAPITALS)

        assert response.answer == "Berlin"
        assert response.confidence == 92
        assert response.explanation == "Capital of Germany"
        assert response.resolved.method == ResolutionMethod.LETTER

    def test_parse_when_fenced_json_then_defaults_applied(self):
        """Code fences are stripped; missing fields get defaults."""
        raw = '```json\n{"answer": "paris"}\n```'
        response = parse_model_response(raw, CAPITALS)
        assert response.answer == "Paris"
        assert response.confidence == 70
        assert response.explanation == DEFAULT_EXPLANATION

    def test_parse_when_json_answer_unmatched_then_unresolved_kept(self):
        """An unmatched answer keeps its raw text and an Unresolved result."""
        response = parse_model_response('{"answer": "Madrid", "confidence": 60}', CAPITALS)
        assert response.answer == "Madrid"
        assert not response.resolved
        assert response.to_dict()["resolution"]["method"] is None

    def test_parse_when_text_with_letter_then_letter_confidence(self):
        """Letters beyond the option list are skipped during the scan."""
        response = parse_model_response("I believe the answer is B. Berlin", CAPITALS)
        assert response.answer == "Berlin"
        assert response.confidence == 50
        assert response.resolved.method == ResolutionMethod.LETTER

    def test_parse_when_text_mentions_option_then_mention_confidence(self):
        """Option text found in prose gives confidence 40."""
        response = parse_model_response("it's probably rome, honestly", CAPITALS)
        assert response.answer == "Rome"
        assert response.confidence == 40
        assert response.resolved.method == ResolutionMethod.SUBSTRING

    def test_parse_when_nothing_usable_then_first_option_fallback(self):
        """Unparseable text falls back to the first option at 20."""
        response = parse_model_response('{"confidence": 80}', CAPITALS)
        assert response.answer == "Paris"
        assert response.confidence == 20
        assert response.explanation == FALLBACK_EXPLANATION

    def test_parse_when_not_string_then_type_error(self):
        """Raw responses must be strings."""
        with pytest.raises(TypeError):
            parse_model_response(b"{}", CAPITALS)  # type: ignore
