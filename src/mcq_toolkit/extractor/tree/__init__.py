"""
Module: extractor.tree

Purpose:
    Generic labeled document tree and the HTML adapter that builds it.
    Structured extraction is written against this interface only.
"""

from .nodes import DocumentNode, DocumentTree, element
from .html import parse_html, tree_from_soup

__all__ = [
    "DocumentNode",
    "DocumentTree",
    "element",
    "parse_html",
    "tree_from_soup",
]
