"""
Structured-tree strategies, in the order the pipeline runs them.

Order matters: deduplication keeps the first candidate seen for a
question, so earlier strategies win overlaps.
"""

from mcq_toolkit.extractor.strategy import Strategy

from .choices import extract_grouped_choices
from .lists import extract_lists
from .platforms import extract_platform_templates
from .tables import extract_tables
from .tagged import extract_tagged_blocks

STRUCTURED_STRATEGIES = (
    Strategy("grouped_choice", extract_grouped_choices),
    Strategy("list", extract_lists),
    Strategy("tagged_block", extract_tagged_blocks),
    Strategy("table", extract_tables),
    Strategy("platform", extract_platform_templates),
)

__all__ = [
    "STRUCTURED_STRATEGIES",
    "extract_grouped_choices",
    "extract_lists",
    "extract_tagged_blocks",
    "extract_tables",
    "extract_platform_templates",
]
