"""
Module: extractor.structured.tables

Purpose:
    Table strategy. The first row of a table holds the question and each
    following row one option.

Key Functions:
    - extract_tables(): Strategy entry point

Used By:
    - extractor.structured: STRUCTURED_STRATEGIES
"""

from __future__ import annotations

from typing import List

from mcq_toolkit.core.models import MCQ, SourceStrategy
from mcq_toolkit.extractor.candidates import make_candidate, node_option
from mcq_toolkit.extractor.config import ExtractionConfig
from mcq_toolkit.extractor.tree.nodes import DocumentNode, DocumentTree
from mcq_toolkit.extractor.tree.selectors import by_tag

IS_TABLE = by_tag("table")
IS_ROW = by_tag("tr")


def extract_tables(tree: DocumentTree, config: ExtractionConfig) -> List[MCQ]:
    """Extract MCQs from tables with a question row followed by option rows."""
    mcqs: List[MCQ] = []
    for table in tree.find_all(IS_TABLE):
        rows = _own_rows(table)
        if len(rows) < config.table_min_rows:
            continue

        question_row, option_rows = rows[0], rows[1:]
        if not config.accepts_option_count(len(option_rows)):
            continue

        mcq = make_candidate(
            question_row.text_content,
            [node_option(row) for row in option_rows],
            SourceStrategy.TABLE,
            config,
            question_ref=question_row,
        )
        if mcq is not None:
            mcqs.append(mcq)
    return mcqs


def _own_rows(table: DocumentNode) -> List[DocumentNode]:
    """Rows of ``table`` itself, skipping rows of nested tables."""
    return [
        row for row in table.find_all(IS_ROW)
        if row.closest(IS_TABLE) is table
    ]
