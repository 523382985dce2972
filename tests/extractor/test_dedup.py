"""
Unit Tests for extractor.dedup
"""

from mcq_toolkit.core.models import MCQ, Option, SourceStrategy
from mcq_toolkit.extractor.dedup import deduplicate


def make_mcq(question, strategy, n_options=2):
    return MCQ(
        question=question,
        options=tuple(Option(f"opt {i}") for i in range(n_options)),
        source_strategy=strategy,
    )


class TestDeduplicate:
    """Tests for deduplicate()."""

    def test_deduplicate_when_same_question_different_case_then_first_kept(self):
        """Keys ignore case and surrounding whitespace; the first candidate wins."""
        # Arrange
        first = make_mcq("Which planet is largest?", SourceStrategy.GROUPED_CHOICE)
        second = make_mcq("  which PLANET is largest?  ", SourceStrategy.TAGGED_BLOCK, n_options=4)

        # Act
        result = deduplicate([first, second])

        # Assert
        assert result == [first]
        assert result[0].source_strategy == SourceStrategy.GROUPED_CHOICE

    def test_deduplicate_when_distinct_then_order_preserved(self):
        """Unique questions keep their strategy order."""
        mcqs = [
            make_mcq("Question number one?", SourceStrategy.LIST),
            make_mcq("Question number two?", SourceStrategy.TABLE),
            make_mcq("Question number three?", SourceStrategy.LIST),
        ]
        assert deduplicate(mcqs) == mcqs

    def test_deduplicate_when_duplicate_then_callback_receives_pair(self):
        """on_duplicate is called with (dropped, kept)."""
        kept = make_mcq("What is 2+2?", SourceStrategy.NUMBERED_BLOCK)
        dropped = make_mcq("what is 2+2?", SourceStrategy.PARAGRAPH)
        seen = []

        deduplicate([kept, dropped], on_duplicate=lambda d, k: seen.append((d, k)))

        assert seen == [(dropped, kept)]

    def test_deduplicate_when_empty_then_empty(self):
        """No candidates, no output."""
        assert deduplicate([]) == []
