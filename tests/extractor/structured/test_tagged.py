"""
Unit Tests for extractor.structured.tagged
"""

from mcq_toolkit.core.models import SourceStrategy
from mcq_toolkit.extractor.dedup import deduplicate
from mcq_toolkit.extractor.structured.tagged import extract_tagged_blocks
from mcq_toolkit.extractor.tree.html import parse_html


class TestExtractTaggedBlocks:
    """Tests for extract_tagged_blocks()."""

    def test_extract_when_question_and_option_siblings_then_mcq(self, config):
        """Option nodes next to a .question node become its options."""
        tree = parse_html(
            "<div class='quiz'>"
            "<div class='question'>What is the boiling point of water?</div>"
            "<div class='option'>A. 90C</div><div class='option'>B. 100C</div>"
            "</div>"
        )

        mcqs = deduplicate(extract_tagged_blocks(tree, config))

        assert len(mcqs) == 1
        assert mcqs[0].question == "What is the boiling point of water?"
        assert mcqs[0].option_texts == ["90C", "100C"]
        assert mcqs[0].source_strategy == SourceStrategy.TAGGED_BLOCK

    def test_extract_when_patterns_overlap_then_same_question_repeated(self, config):
        """Each question pattern runs independently; dedup collapses overlaps."""
        tree = parse_html(
            "<div><div class='question'>Which is a noble gas?</div>"
            "<span class='choice'>Neon</span><span class='choice'>Nitrogen</span></div>"
        )
        mcqs = extract_tagged_blocks(tree, config)
        assert len(mcqs) >= 2
        assert {m.question for m in mcqs} == {"Which is a noble gas?"}

    def test_extract_when_options_nested_in_wrapper_then_innermost_kept(self, config):
        """Wrapper nodes matching [class*=option] don't become options."""
        tree = parse_html(
            "<div class='question'>Pick one?"
            "<div class='options'><span class='option'>Yes</span><span class='option'>No</span></div>"
            "</div>"
        )
        mcq = extract_tagged_blocks(tree, config)[0]
        assert mcq.question == "Pick one?"
        assert mcq.option_texts == ["Yes", "No"]

    def test_extract_when_data_attributes_then_mcq(self, config):
        """data-question / data-option attributes are recognised."""
        tree = parse_html(
            "<div><p data-question='1'>Which organ pumps blood?</p>"
            "<p data-option='a'>Heart</p><p data-option='b'>Liver</p></div>"
        )
        mcqs = extract_tagged_blocks(tree, config)
        assert [m.option_texts for m in mcqs] == [["Heart", "Liver"]]

    def test_extract_when_single_option_then_rejected(self, config):
        """Candidates below the option bound are dropped."""
        tree = parse_html(
            "<div><div class='question'>Is water wet?</div><div class='option'>Yes</div></div>"
        )
        assert extract_tagged_blocks(tree, config) == []
