"""
Module: plugins.builtin

Purpose:
    Built-in platform templates for Google Forms, Quizlet and Canvas.
    Each platform lays out one question per container element; the
    templates differ only in how the container, question and options are
    recognised and in how the platform itself is detected.

Key Classes:
    - ContainerLayout: Container/question/option predicates for one platform

Key Functions:
    - extract_with_layout(): Shared container walk
    - is_google_forms(), is_quizlet(), is_canvas(): Platform detection

Used By:
    - plugins: Registered on first registry access
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, List

from mcq_toolkit.common.text import clean_option_text
from mcq_toolkit.core.models import MCQ, Option, SourceStrategy
from mcq_toolkit.extractor.candidates import make_candidate
from mcq_toolkit.extractor.config import ExtractionConfig
from mcq_toolkit.extractor.tree.nodes import DocumentNode, DocumentTree, NodePredicate
from mcq_toolkit.extractor.tree.selectors import attr_equals, class_contains, has_class

from . import PlatformTemplate

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ContainerLayout:
    """Predicates locating one platform's question containers and parts."""
    platform: str
    container: NodePredicate
    question: NodePredicate
    option: NodePredicate
    option_text: Callable[[DocumentNode], str] = lambda node: node.text_content


def extract_with_layout(
    tree: DocumentTree,
    config: ExtractionConfig,
    layout: ContainerLayout,
) -> List[MCQ]:
    """
    Walk every container and build one candidate per container.

    The question is the first matching descendant of the container, the
    options all matching descendants in document order.
    """
    mcqs: List[MCQ] = []
    for container in tree.find_all(layout.container):
        question_node = container.find(layout.question)
        if question_node is None or not question_node.text_content:
            continue

        option_nodes = [
            node for node in container.find_all(layout.option)
            if node is not question_node
        ]
        options = []
        for node in option_nodes:
            raw = layout.option_text(node)
            options.append(Option(text=clean_option_text(raw), source_ref=node, raw_value=raw))

        mcq = make_candidate(
            question_node.text_content,
            options,
            SourceStrategy.PLATFORM,
            config,
            question_ref=container,
            platform=layout.platform,
        )
        if mcq is not None:
            mcqs.append(mcq)

    logger.debug(f"[{layout.platform}] {len(mcqs)} question(s)")
    return mcqs


# ─────────────────────────────────────────────────────────────────────────────
# Google Forms
# ─────────────────────────────────────────────────────────────────────────────

def _google_option_text(node: DocumentNode) -> str:
    # Choice widgets often render the label only as an attribute
    return node.text_content or node.get("aria-label") or node.get("data-value") or ""


GOOGLE_FORMS_LAYOUT = ContainerLayout(
    platform="google_forms",
    container=attr_equals("role", "listitem"),
    question=attr_equals("role", "heading"),
    option=attr_equals("role", "radio"),
    option_text=_google_option_text,
)


def is_google_forms(tree: DocumentTree) -> bool:
    host = tree.host
    if host == "forms.google.com":
        return True
    return host == "docs.google.com" and "/forms" in (tree.url or "")


# ─────────────────────────────────────────────────────────────────────────────
# Quizlet
# ─────────────────────────────────────────────────────────────────────────────

QUIZLET_LAYOUT = ContainerLayout(
    platform="quizlet",
    container=class_contains("MultipleChoiceQuestion"),
    question=class_contains("question"),
    option=class_contains("choice"),
)


def is_quizlet(tree: DocumentTree) -> bool:
    host = tree.host
    return host == "quizlet.com" or host.endswith(".quizlet.com")


# ─────────────────────────────────────────────────────────────────────────────
# Canvas LMS
# ─────────────────────────────────────────────────────────────────────────────

CANVAS_LAYOUT = ContainerLayout(
    platform="canvas",
    container=has_class("question"),
    question=has_class("question_text"),
    option=has_class("answer"),
)


def is_canvas(tree: DocumentTree) -> bool:
    host = tree.host
    if host == "instructure.com" or host.endswith(".instructure.com"):
        return True
    # Self-hosted Canvas instances are recognised by their markup
    return tree.find(class_contains("canvas")) is not None


def _layout_extractor(layout: ContainerLayout) -> Callable[[DocumentTree, ExtractionConfig], List[MCQ]]:
    def extract(tree: DocumentTree, config: ExtractionConfig) -> List[MCQ]:
        return extract_with_layout(tree, config, layout)
    return extract


BUILTIN_PLATFORMS = (
    PlatformTemplate("google_forms", is_google_forms, _layout_extractor(GOOGLE_FORMS_LAYOUT)),
    PlatformTemplate("quizlet", is_quizlet, _layout_extractor(QUIZLET_LAYOUT)),
    PlatformTemplate("canvas", is_canvas, _layout_extractor(CANVAS_LAYOUT)),
)
