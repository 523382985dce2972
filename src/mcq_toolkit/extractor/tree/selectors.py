"""
Predicate builders standing in for the small CSS subset the extractors
need: tag names, exact classes, class substrings (``[class*=x]``) and
attribute presence/equality.
"""

from __future__ import annotations

from .nodes import DocumentNode, NodePredicate

HEADING_TAGS = ("h1", "h2", "h3", "h4", "h5", "h6")


def by_tag(*tags: str) -> NodePredicate:
    wanted = frozenset(t.lower() for t in tags)
    return lambda node: node.tag in wanted


def has_class(name: str) -> NodePredicate:
    return lambda node: name in node.classes


def class_contains(fragment: str) -> NodePredicate:
    """Match like ``[class*="fragment"]``: substring of the whole class attribute."""
    return lambda node: fragment in node.attrs.get("class", "")


def has_attr(name: str) -> NodePredicate:
    return lambda node: name in node.attrs


def attr_equals(name: str, value: str) -> NodePredicate:
    return lambda node: node.attrs.get(name) == value


def any_of(*predicates: NodePredicate) -> NodePredicate:
    return lambda node: any(p(node) for p in predicates)


def is_radio(node: DocumentNode) -> bool:
    return node.tag == "input" and node.attrs.get("type", "").lower() == "radio"
