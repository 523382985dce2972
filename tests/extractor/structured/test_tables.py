"""
Unit Tests for extractor.structured.tables
"""

from mcq_toolkit.core.models import SourceStrategy
from mcq_toolkit.extractor.structured.tables import extract_tables
from mcq_toolkit.extractor.tree.html import parse_html


class TestExtractTables:
    """Tests for extract_tables()."""

    def test_extract_when_question_row_then_option_rows_follow(self, config):
        """Row 0 is the question, every later row an option."""
        tree = parse_html(
            "<table>"
            "<tr><td>Which gas do plants absorb?</td></tr>"
            "<tr><td>A. Oxygen</td></tr>"
            "<tr><td>B. Carbon dioxide</td></tr>"
            "</table>"
        )

        mcqs = extract_tables(tree, config)

        assert len(mcqs) == 1
        assert mcqs[0].question == "Which gas do plants absorb?"
        assert mcqs[0].option_texts == ["Oxygen", "Carbon dioxide"]
        assert mcqs[0].source_strategy == SourceStrategy.TABLE
        assert mcqs[0].question_ref.tag == "tr"

    def test_extract_when_too_few_rows_then_ignored(self, config):
        """Tables need a question row and at least two option rows."""
        tree = parse_html("<table><tr><td>Question?</td></tr><tr><td>Only</td></tr></table>")
        assert extract_tables(tree, config) == []

    def test_extract_when_nested_table_then_rows_not_shared(self, config):
        """Rows of a nested table don't count as rows of the outer table."""
        inner = (
            "<table><tr><td>Which is a mammal?</td></tr>"
            "<tr><td>Whale</td></tr><tr><td>Shark</td></tr></table>"
        )
        tree = parse_html(
            f"<table><tr><td>Outer question here</td></tr><tr><td>{inner}</td></tr></table>"
        )
        mcqs = extract_tables(tree, config)
        assert [m.question for m in mcqs] == ["Which is a mammal?"]
