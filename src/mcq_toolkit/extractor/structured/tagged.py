"""
Module: extractor.structured.tagged

Purpose:
    Tagged-block strategy. Pairs nodes whose class or data attributes mark
    them as questions with nearby nodes marked as options or choices.

Key Functions:
    - extract_tagged_blocks(): Strategy entry point

Used By:
    - extractor.structured: STRUCTURED_STRATEGIES
"""

from __future__ import annotations

import logging
from typing import List

from mcq_toolkit.core.models import MCQ, SourceStrategy
from mcq_toolkit.extractor.candidates import make_candidate, node_option
from mcq_toolkit.extractor.config import ExtractionConfig
from mcq_toolkit.extractor.tree.nodes import DocumentNode, DocumentTree, NodePredicate
from mcq_toolkit.extractor.tree.selectors import class_contains, has_attr, has_class

logger = logging.getLogger(__name__)

# Tried in order; each pattern is applied independently, overlaps are
# resolved by deduplication.
QUESTION_PATTERNS: tuple[tuple[str, NodePredicate], ...] = (
    (".question", has_class("question")),
    (".quiz-question", has_class("quiz-question")),
    (".mcq-question", has_class("mcq-question")),
    ("[class*=question]", class_contains("question")),
    ("[data-question]", has_attr("data-question")),
)

# The last pattern with any match wins.
OPTION_PATTERNS: tuple[tuple[str, NodePredicate], ...] = (
    (".option", has_class("option")),
    (".answer-option", has_class("answer-option")),
    (".choice", has_class("choice")),
    ("[class*=option]", class_contains("option")),
    ("[class*=choice]", class_contains("choice")),
    ("[data-option]", has_attr("data-option")),
)


def extract_tagged_blocks(tree: DocumentTree, config: ExtractionConfig) -> List[MCQ]:
    """
    Extract MCQs from class/attribute-tagged question and option nodes.

    For each question node, options are searched among the descendants of
    its parent (so both siblings and the question's own descendants), or
    among its own descendants when it has no parent. Question text leaves
    out any option nodes nested inside the question node.
    """
    mcqs: List[MCQ] = []
    for selector, matches_question in QUESTION_PATTERNS:
        for question_node in tree.find_all(matches_question):
            option_nodes = _find_option_nodes(question_node)
            if not config.accepts_option_count(len(option_nodes)):
                continue

            question_text = question_node.text_excluding(option_nodes)
            mcq = make_candidate(
                question_text,
                [node_option(node) for node in option_nodes],
                SourceStrategy.TAGGED_BLOCK,
                config,
                question_ref=question_node,
            )
            if mcq is not None:
                logger.debug(f"Tagged block matched {selector}: {mcq.question[:40]!r}")
                mcqs.append(mcq)
    return mcqs


def _find_option_nodes(question_node: DocumentNode) -> List[DocumentNode]:
    scope = question_node.parent or question_node
    found: List[DocumentNode] = []
    for _, matches_option in OPTION_PATTERNS:
        candidates = [
            node for node in scope.find_all(matches_option)
            if node is not question_node and not _is_ancestor(node, question_node)
        ]
        if candidates:
            found = candidates
    # Wrappers such as <div class="options"> also match [class*=option];
    # keep only the innermost matches.
    return [
        node for node in found
        if not any(other is not node and _is_ancestor(node, other) for other in found)
    ]


def _is_ancestor(node: DocumentNode, other: DocumentNode) -> bool:
    current = other.parent
    while current is not None:
        if current is node:
            return True
        current = current.parent
    return False
