"""
Unit Tests for extractor.tree.nodes and extractor.tree.selectors
"""

import pytest

from mcq_toolkit.extractor.tree.nodes import DocumentNode, DocumentTree, element
from mcq_toolkit.extractor.tree.selectors import (
    any_of,
    attr_equals,
    by_tag,
    class_contains,
    has_attr,
    has_class,
    is_radio,
)


@pytest.fixture
def sample_tree():
    root = element(
        "#document",
        element("h2", "Which planet ", element("b", "is"), " largest?", id="q"),
        element("script", "var x = 1;"),
        element(
            "div",
            element("label", "Jupiter", for_="r1"),
            element("input", type="radio", name="p", id="r1"),
            element("span", "Mars"),
            class_="answers main-options",
            data_question="1",
        ),
    )
    return DocumentTree(root=root, url="https://Example.COM/quiz?id=1")


class TestElement:
    """Tests for the element() builder."""

    def test_element_when_keyword_attrs_then_normalized_names(self):
        """Trailing underscores are dropped and underscores become hyphens."""
        node = element("div", class_="a", for_="x", data_question="1")
        assert node.attrs == {"class": "a", "for": "x", "data-question": "1"}

    def test_element_when_children_then_parent_links_set(self):
        """Child nodes point at their parent."""
        child = element("li", "x")
        parent = element("ul", child)
        assert child.parent is parent


class TestDocumentNode:
    """Tests for DocumentNode traversal and text."""

    def test_text_content_when_inline_and_hidden_then_joined_without_script(self, sample_tree):
        """Inline children join seamlessly; script text is excluded."""
        assert sample_tree.root.find(by_tag("h2")).text_content == "Which planet is largest?"
        assert "var x" not in sample_tree.root.text_content

    def test_text_content_when_block_children_then_space_separated(self):
        """Block elements are separated by whitespace."""
        node = element("div", element("p", "one"), element("p", "two"))
        assert node.text_content == "one two"

    def test_text_excluding_when_node_given_then_subtree_skipped(self):
        """Excluded subtrees don't contribute text."""
        opt = element("div", "A. Paris", class_="option")
        question = element("div", "Capital of France?", opt, class_="question")
        assert question.text_excluding([opt]) == "Capital of France?"

    def test_closest_when_self_matches_then_returns_self(self, sample_tree):
        """closest() starts with the node itself."""
        div = sample_tree.find(by_tag("div"))
        assert div.closest(by_tag("div")) is div

    def test_previous_siblings_when_called_then_nearest_first(self):
        """Preceding element siblings are yielded nearest first."""
        a, b, c = element("p", "a"), element("p", "b"), element("p", "c")
        element("div", a, "text", b, c)
        assert list(c.previous_siblings()) == [b, a]

    def test_next_sibling_when_last_then_none(self):
        """The last child has no next sibling."""
        a, b = element("p", "a"), element("p", "b")
        element("div", a, b)
        assert a.next_sibling() is b
        assert b.next_sibling() is None

    def test_eq_when_same_content_then_identity_only(self):
        """Nodes compare by identity."""
        assert element("p", "x") != element("p", "x")


class TestDocumentTree:
    """Tests for DocumentTree lookups."""

    def test_host_when_url_set_then_lower_case_hostname(self, sample_tree):
        """host is the lower-cased hostname."""
        assert sample_tree.host == "example.com"

    def test_host_when_no_url_then_empty(self):
        """Trees without a URL have an empty host."""
        assert DocumentTree(DocumentNode("#document")).host == ""

    def test_labels_for_when_label_targets_id_then_found(self, sample_tree):
        """labels_for() finds <label for=...>."""
        labels = sample_tree.labels_for("r1")
        assert [label.text_content for label in labels] == ["Jupiter"]

    def test_get_by_id_when_missing_then_none(self, sample_tree):
        """Unknown ids give None."""
        assert sample_tree.get_by_id("q").tag == "h2"
        assert sample_tree.get_by_id("nope") is None


class TestSelectors:
    """Tests for predicate builders."""

    def test_has_class_when_exact_class_then_matches(self, sample_tree):
        """has_class matches whole class tokens only."""
        div = sample_tree.find(by_tag("div"))
        assert has_class("answers")(div)
        assert not has_class("answer")(div)

    def test_class_contains_when_substring_then_matches(self, sample_tree):
        """class_contains behaves like [class*=...]."""
        div = sample_tree.find(by_tag("div"))
        assert class_contains("option")(div)
        assert class_contains("answer")(div)

    def test_attr_selectors_when_attribute_present_then_match(self, sample_tree):
        """has_attr and attr_equals inspect attributes."""
        div = sample_tree.find(by_tag("div"))
        assert has_attr("data-question")(div)
        assert attr_equals("data-question", "1")(div)
        assert any_of(by_tag("p"), by_tag("div"))(div)

    def test_is_radio_when_radio_input_then_true(self, sample_tree):
        """Only radio inputs match."""
        radios = sample_tree.find_all(is_radio)
        assert [r.id for r in radios] == ["r1"]
