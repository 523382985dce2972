"""
Module: extractor.structured.lists

Purpose:
    List strategy. An ``<ol>``/``<ul>`` with a handful of items becomes an
    MCQ when a question precedes it and at least one item carries an
    explicit choice marker ("A.", "2)", "(c)"). The marker requirement
    keeps ordinary bullet lists out.

Key Functions:
    - extract_lists(): Strategy entry point

Used By:
    - extractor.structured: STRUCTURED_STRATEGIES
"""

from __future__ import annotations

from typing import List

from mcq_toolkit.core.models import MCQ, SourceStrategy
from mcq_toolkit.extractor.candidates import make_candidate, node_option
from mcq_toolkit.extractor.classification import looks_like_option
from mcq_toolkit.extractor.config import ExtractionConfig
from mcq_toolkit.extractor.tree.nodes import DocumentTree
from mcq_toolkit.extractor.tree.selectors import by_tag

from .questions import find_question_before

IS_LIST = by_tag("ol", "ul")
IS_ITEM = by_tag("li")


def extract_lists(tree: DocumentTree, config: ExtractionConfig) -> List[MCQ]:
    """Extract MCQs from lists whose items are marked as choices."""
    mcqs: List[MCQ] = []
    for list_node in tree.find_all(IS_LIST):
        items = list_node.children_matching(IS_ITEM)
        if not config.accepts_option_count(len(items)):
            continue
        if not any(looks_like_option(item.text_content) for item in items):
            continue

        located = find_question_before(list_node, config.question_scan_limit)
        if located is None:
            continue

        mcq = make_candidate(
            located.text,
            [node_option(item) for item in items],
            SourceStrategy.LIST,
            config,
            question_ref=located.node,
        )
        if mcq is not None:
            mcqs.append(mcq)
    return mcqs
