"""
Module: extractor.tree.html

Purpose:
    Adapter from HTML markup to the generic DocumentTree. This is the
    live-page caller's side of the structured extractor: the extractor
    itself never sees BeautifulSoup objects.

Key Functions:
    - parse_html(): Parse markup into a DocumentTree
    - tree_from_soup(): Convert an existing BeautifulSoup document

Dependencies:
    - bs4 (beautifulsoup4): HTML parsing

Used By:
    - extractor.pipeline.extract_from_html
    - cli: ``extract`` on .html files
"""

from __future__ import annotations

import logging
from typing import Optional, Union

from bs4 import BeautifulSoup
from bs4.element import (
    Comment,
    Declaration,
    Doctype,
    NavigableString,
    ProcessingInstruction,
    Tag,
)

from .nodes import DocumentNode, DocumentTree

logger = logging.getLogger(__name__)

# NavigableString subclasses that never contribute text
_SKIPPED_STRINGS = (Comment, Declaration, Doctype, ProcessingInstruction)


def parse_html(markup: Union[str, bytes], url: Optional[str] = None) -> DocumentTree:
    """
    Parse HTML into a DocumentTree.

    Args:
        markup: HTML document or fragment.
        url: Optional page URL, used for platform detection.

    Returns:
        DocumentTree rooted at a "#document" node.

    Raises:
        TypeError: If markup is not str or bytes.

    Example:
        >>> tree = parse_html("<ul><li>A. Paris</li></ul>")
        >>> [n.tag for n in tree.root.iter_descendants()]
        ['ul', 'li']
    """
    if not isinstance(markup, (str, bytes)):
        raise TypeError(f"markup must be str or bytes, got {type(markup).__name__}")
    soup = BeautifulSoup(markup, "html.parser")
    return tree_from_soup(soup, url=url)


def tree_from_soup(soup: BeautifulSoup, url: Optional[str] = None) -> DocumentTree:
    """Convert a parsed BeautifulSoup document into a DocumentTree."""
    root = DocumentNode(tag="#document")
    for child in soup.contents:
        _append_converted(root, child)
    logger.debug(f"Converted HTML document with {sum(1 for _ in root.iter_descendants())} nodes")
    return DocumentTree(root=root, url=url)


def _append_converted(parent: DocumentNode, item) -> None:
    if isinstance(item, Tag):
        node = DocumentNode(tag=item.name, attrs=_convert_attrs(item.attrs))
        parent.append(node)
        for child in item.contents:
            _append_converted(node, child)
    elif isinstance(item, NavigableString) and not isinstance(item, _SKIPPED_STRINGS):
        parent.append(str(item))


def _convert_attrs(attrs: dict) -> dict:
    # bs4 returns multi-valued attributes (class, rel, ...) as lists
    return {
        key: " ".join(value) if isinstance(value, list) else str(value)
        for key, value in attrs.items()
    }
