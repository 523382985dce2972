"""
Module: extractor.structured.questions

Purpose:
    Locating question text and option labels around tree nodes. Shared by
    the grouped-choice and list strategies.

Key Functions:
    - find_question_before(): Preceding-sibling scan + parent heading lookup
    - find_question_for_group(): Semantic container first, then the scan
    - label_text_for_control(): Visible label for a form control

Dependencies:
    - extractor.classification: looks_like_question

Used By:
    - extractor.structured.choices
    - extractor.structured.lists
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from mcq_toolkit.extractor.classification import looks_like_question
from mcq_toolkit.extractor.tree.nodes import DocumentNode, DocumentTree
from mcq_toolkit.extractor.tree.selectors import (
    HEADING_TAGS,
    any_of,
    attr_equals,
    by_tag,
    has_class,
)


# Containers that group one question's controls
QUESTION_CONTAINER = any_of(
    by_tag("fieldset"),
    attr_equals("role", "group"),
    attr_equals("role", "radiogroup"),
    has_class("question"),
    has_class("quiz-item"),
)
CONTAINER_HEADING = any_of(by_tag(*HEADING_TAGS), has_class("question-text"))
PARENT_CANDIDATE = by_tag(*HEADING_TAGS, "p", "div")


@dataclass(frozen=True)
class LocatedQuestion:
    """Question text and the node it was read from."""
    text: str
    node: DocumentNode


def find_question_before(node: DocumentNode, scan_limit: int = 5) -> Optional[LocatedQuestion]:
    """
    Find question text preceding ``node``.

    Checks up to ``scan_limit`` preceding siblings, nearest first, for
    text that looks like a question. If none does, the first heading,
    paragraph or div in the parent that does not contain ``node`` is
    tried.

    Args:
        node: Node the question should precede (a list, a control...).
        scan_limit: Maximum number of siblings to check.

    Returns:
        LocatedQuestion, or None if nothing looks like a question.
    """
    for attempts, sibling in enumerate(node.previous_siblings()):
        if attempts >= scan_limit:
            break
        text = sibling.text_content
        if looks_like_question(text):
            return LocatedQuestion(text, sibling)

    parent = node.parent
    if parent is None:
        return None
    for candidate in parent.iter_descendants():
        if not PARENT_CANDIDATE(candidate):
            continue
        if _contains(candidate, node):
            continue
        # Only the first candidate match counts, as with querySelector
        text = candidate.text_content
        if looks_like_question(text):
            return LocatedQuestion(text, candidate)
        return None
    return None


def find_question_for_group(control: DocumentNode, scan_limit: int = 5) -> Optional[LocatedQuestion]:
    """
    Find the question for a group of choice controls.

    Walks up to the nearest semantic container (fieldset, group role,
    question/quiz-item class) and prefers its legend, then a heading or
    ``.question-text`` descendant. Without a container heading, falls
    back to the preceding-sibling scan from the control (or from its
    enclosing label, which is the usual sibling of the question text).
    """
    container = control.closest(QUESTION_CONTAINER)
    if container is not None:
        legend = container.find(by_tag("legend"))
        if legend is not None and legend.text_content:
            return LocatedQuestion(legend.text_content, legend)
        heading = container.find(CONTAINER_HEADING)
        if heading is not None and heading.text_content:
            return LocatedQuestion(heading.text_content, heading)

    anchor = control.closest(by_tag("label")) or control
    return find_question_before(anchor, scan_limit)


def label_text_for_control(control: DocumentNode, tree: DocumentTree) -> Optional[str]:
    """
    Visible label of a form control.

    Tries, in order: ``<label for=id>``, an enclosing ``<label>``, the
    next sibling element. Returns None when nothing has text.
    """
    control_id = control.id
    if control_id:
        for label in tree.labels_for(control_id):
            if label.text_content:
                return label.text_content

    enclosing = control.closest(by_tag("label"))
    if enclosing is not None and enclosing.text_content:
        return enclosing.text_content

    following = control.next_sibling()
    if following is not None and following.text_content:
        return following.text_content
    return None


def _contains(ancestor: DocumentNode, node: DocumentNode) -> bool:
    current: Optional[DocumentNode] = node
    while current is not None:
        if current is ancestor:
            return True
        current = current.parent
    return False
