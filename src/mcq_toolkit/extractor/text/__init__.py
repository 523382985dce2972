"""Text strategies, in the order the pipeline runs them."""

from mcq_toolkit.extractor.strategy import Strategy

from .blocks import ParsedBlock, parse_question_block
from .strategies import extract_label_prefixed, extract_numbered_blocks, extract_paragraphs

TEXT_STRATEGIES = (
    Strategy("numbered_block", extract_numbered_blocks),
    Strategy("label_prefixed", extract_label_prefixed),
    Strategy("paragraph", extract_paragraphs),
)

__all__ = [
    "TEXT_STRATEGIES",
    "ParsedBlock",
    "parse_question_block",
    "extract_numbered_blocks",
    "extract_label_prefixed",
    "extract_paragraphs",
]
