"""
Module: extractor.tree.nodes

Purpose:
    Generic labeled document tree used by the structured extractor. Each
    node has a tag, string attributes and mixed content (child nodes and
    text). The extractor only relies on this interface, so it can be fed
    from HTML, from a live-page snapshot, or from synthetic test trees.

Key Classes:
    - DocumentNode: Tree node with parent links and traversal helpers
    - DocumentTree: Root node plus source URL and id/label lookups

Key Functions:
    - element(): Compact builder for synthetic trees

Dependencies:
    - dataclasses (std)
    - urllib.parse (std)

Used By:
    - extractor.tree.html: Builds trees from BeautifulSoup documents
    - extractor.structured: All structured strategies
    - plugins: Platform templates
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Dict, FrozenSet, Iterable, Iterator, List, Optional, Union
from urllib.parse import urlparse

from mcq_toolkit.common.text import normalize_whitespace

NodePredicate = Callable[["DocumentNode"], bool]

# Text inside these elements is never part of visible text
HIDDEN_TAGS = frozenset({"script", "style", "template", "noscript"})

# Inline elements are concatenated without a separator; everything else is
# treated as a block and separated by a space.
INLINE_TAGS = frozenset({
    "a", "abbr", "b", "bdi", "bdo", "cite", "code", "em", "i", "kbd", "mark",
    "q", "s", "samp", "small", "span", "strong", "sub", "sup", "u", "var",
})


@dataclass(eq=False)
class DocumentNode:
    """
    Node in a generic document tree.

    Identity semantics: two nodes are equal only if they are the same
    object, so nodes can be used as back-references and dict keys.

    Attributes:
        tag: Lower-case tag name ("div", "input", "#document").
        attrs: Attribute map; multi-valued attributes are space-joined.
        contents: Child nodes and text fragments in document order.
        parent: Parent node, None for the root.

    Example:
        >>> li = element("li", "A. Paris")
        >>> li.text_content
        'A. Paris'
    """

    tag: str
    attrs: Dict[str, str] = field(default_factory=dict)
    contents: List[Union["DocumentNode", str]] = field(default_factory=list)
    parent: Optional["DocumentNode"] = field(default=None, repr=False)

    def __post_init__(self) -> None:
        self.tag = self.tag.lower()
        for item in self.contents:
            if isinstance(item, DocumentNode):
                item.parent = self

    # ─────────────────────────────────────────────────────────────────────────
    # Construction
    # ─────────────────────────────────────────────────────────────────────────

    def append(self, child: Union["DocumentNode", str]) -> None:
        """Append a child node or text fragment."""
        if isinstance(child, DocumentNode):
            child.parent = self
        self.contents.append(child)

    # ─────────────────────────────────────────────────────────────────────────
    # Attributes
    # ─────────────────────────────────────────────────────────────────────────

    def get(self, name: str, default: Optional[str] = None) -> Optional[str]:
        return self.attrs.get(name, default)

    @property
    def classes(self) -> List[str]:
        return self.attrs.get("class", "").split()

    @property
    def id(self) -> Optional[str]:
        return self.attrs.get("id") or None

    # ─────────────────────────────────────────────────────────────────────────
    # Text
    # ─────────────────────────────────────────────────────────────────────────

    @property
    def text_content(self) -> str:
        """Visible text, hidden elements excluded, whitespace collapsed."""
        return normalize_whitespace("".join(self._text_parts(frozenset())))

    def text_excluding(self, excluded: Iterable["DocumentNode"]) -> str:
        """Visible text with the subtrees of ``excluded`` nodes left out."""
        skip = frozenset(id(node) for node in excluded)
        return normalize_whitespace("".join(self._text_parts(skip)))

    def _text_parts(self, skip: FrozenSet[int]) -> Iterator[str]:
        for item in self.contents:
            if isinstance(item, str):
                yield item
            elif item.tag in HIDDEN_TAGS or id(item) in skip:
                continue
            elif item.tag in INLINE_TAGS:
                yield from item._text_parts(skip)
            else:
                yield " "
                yield from item._text_parts(skip)
                yield " "

    # ─────────────────────────────────────────────────────────────────────────
    # Traversal
    # ─────────────────────────────────────────────────────────────────────────

    @property
    def element_children(self) -> List["DocumentNode"]:
        return [item for item in self.contents if isinstance(item, DocumentNode)]

    def iter_descendants(self) -> Iterator["DocumentNode"]:
        """Iterate over all descendant nodes in document order (self excluded)."""
        for child in self.element_children:
            yield child
            yield from child.iter_descendants()

    def find_all(self, predicate: NodePredicate) -> List["DocumentNode"]:
        """Descendants matching ``predicate`` in document order."""
        return [node for node in self.iter_descendants() if predicate(node)]

    def find(self, predicate: NodePredicate) -> Optional["DocumentNode"]:
        """First descendant matching ``predicate``."""
        for node in self.iter_descendants():
            if predicate(node):
                return node
        return None

    def children_matching(self, predicate: NodePredicate) -> List["DocumentNode"]:
        return [child for child in self.element_children if predicate(child)]

    def closest(self, predicate: NodePredicate) -> Optional["DocumentNode"]:
        """Nearest node matching ``predicate``, starting with self and walking up."""
        node: Optional[DocumentNode] = self
        while node is not None:
            if predicate(node):
                return node
            node = node.parent
        return None

    def previous_siblings(self) -> Iterator["DocumentNode"]:
        """Preceding element siblings, nearest first."""
        if self.parent is None:
            return
        siblings = self.parent.element_children
        index = siblings.index(self)
        for sibling in reversed(siblings[:index]):
            yield sibling

    def next_sibling(self) -> Optional["DocumentNode"]:
        """Following element sibling, if any."""
        if self.parent is None:
            return None
        siblings = self.parent.element_children
        index = siblings.index(self)
        return siblings[index + 1] if index + 1 < len(siblings) else None

    def __repr__(self) -> str:
        marker = f"#{self.id}" if self.id else ""
        classes = "".join(f".{c}" for c in self.classes)
        return f"<{self.tag}{marker}{classes}>"


@dataclass
class DocumentTree:
    """
    Snapshot of a rendered document.

    Attributes:
        root: Root node (usually "#document").
        url: Location the document was loaded from, used by platform
            templates to recognise known sites.
    """

    root: DocumentNode
    url: Optional[str] = None

    @property
    def host(self) -> str:
        """Lower-case host name of ``url``, empty when unknown."""
        if not self.url:
            return ""
        return (urlparse(self.url).hostname or "").lower()

    def iter_nodes(self) -> Iterator[DocumentNode]:
        """Root followed by all descendants in document order."""
        yield self.root
        yield from self.root.iter_descendants()

    def find_all(self, predicate: NodePredicate) -> List[DocumentNode]:
        return [node for node in self.iter_nodes() if predicate(node)]

    def find(self, predicate: NodePredicate) -> Optional[DocumentNode]:
        for node in self.iter_nodes():
            if predicate(node):
                return node
        return None

    def get_by_id(self, node_id: str) -> Optional[DocumentNode]:
        return self.find(lambda n: n.get("id") == node_id)

    def labels_for(self, node_id: str) -> List[DocumentNode]:
        """``<label for=...>`` nodes pointing at ``node_id``."""
        return self.find_all(lambda n: n.tag == "label" and n.get("for") == node_id)


def element(tag: str, *contents: Union[DocumentNode, str], **attrs: str) -> DocumentNode:
    """
    Build a node for synthetic trees.

    Keyword names map to attributes: a trailing underscore is dropped
    (``class_`` -> ``class``, ``for_`` -> ``for``) and remaining
    underscores become hyphens (``data_question`` -> ``data-question``).

    Example:
        >>> element("input", type="radio", name="q1", value="a")
        <input>
    """
    normalized = {
        key.rstrip("_").replace("_", "-"): str(value)
        for key, value in attrs.items()
    }
    return DocumentNode(tag=tag, attrs=normalized, contents=list(contents))
