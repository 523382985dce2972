"""
Unit Tests for the plugins platform registry
"""

import pytest

from mcq_toolkit.core.models import Option, SourceStrategy
from mcq_toolkit.extractor.candidates import make_candidate
from mcq_toolkit.extractor.pipeline import extract
from mcq_toolkit.extractor.tree.html import parse_html
from mcq_toolkit.extractor.tree.selectors import has_class
from mcq_toolkit.plugins import (
    DuplicatePlatformError,
    PlatformTemplate,
    UnknownPlatformError,
    get_platform,
    register_platform,
    registered_platforms,
    unregister_platform,
)


def _is_example_quiz(tree):
    return tree.host == "quiz.example.org"


def _extract_example_quiz(tree, config):
    mcqs = []
    for card in tree.find_all(has_class("card")):
        prompt = card.find(has_class("prompt"))
        answers = card.find_all(has_class("pick"))
        mcq = make_candidate(
            prompt.text_content,
            [Option.from_text(node.text_content, source_ref=node) for node in answers],
            SourceStrategy.PLATFORM,
            config,
            question_ref=card,
            platform="example_quiz",
        )
        if mcq is not None:
            mcqs.append(mcq)
    return mcqs


def _explode(tree, config):
    raise RuntimeError("template bug")


EXAMPLE_TEMPLATE = PlatformTemplate("example_quiz", _is_example_quiz, _extract_example_quiz)

EXAMPLE_MARKUP = """
<div class="card">
  <span class="prompt">Which element has symbol Fe?</span>
  <span class="pick">A. Iron</span>
  <span class="pick">B. Fluorine</span>
</div>
"""


@pytest.fixture
def example_platform():
    register_platform(EXAMPLE_TEMPLATE)
    yield EXAMPLE_TEMPLATE
    unregister_platform(EXAMPLE_TEMPLATE.name)


class TestRegistry:
    """Tests for register/unregister/get."""

    def test_registered_when_first_access_then_builtins_present(self):
        """Built-in templates are registered lazily, in order."""
        names = [t.name for t in registered_platforms()]
        assert names[:3] == ["google_forms", "quizlet", "canvas"]

    def test_register_when_name_taken_then_duplicate_error(self, example_platform):
        """Names are unique unless replace=True."""
        with pytest.raises(DuplicatePlatformError):
            register_platform(example_platform)
        register_platform(example_platform, replace=True)
        assert get_platform("example_quiz") is example_platform

    def test_unregister_when_unknown_then_none(self):
        """Unregistering an unknown name is a no-op."""
        assert unregister_platform("no_such_platform") is None

    def test_get_when_unknown_then_unknown_platform_error(self):
        """get_platform raises for unknown names."""
        with pytest.raises(UnknownPlatformError):
            get_platform("no_such_platform")


class TestCustomTemplate:
    """Registered templates take part in extraction without code changes."""

    def test_extract_when_custom_template_registered_then_used(self, example_platform):
        """The platform strategy dispatches to the new template."""
        tree = parse_html(EXAMPLE_MARKUP, url="https://quiz.example.org/t/1")

        mcqs = extract(tree).mcqs

        platform_mcqs = [m for m in mcqs if m.platform == "example_quiz"]
        assert len(platform_mcqs) == 1
        assert platform_mcqs[0].option_texts == ["Iron", "Fluorine"]

    def test_extract_when_template_raises_then_others_still_run(self, example_platform):
        """A failing template doesn't stop the remaining templates."""
        register_platform(PlatformTemplate("exploding", lambda tree: True, _explode))
        try:
            tree = parse_html(EXAMPLE_MARKUP, url="https://quiz.example.org/t/1")
            result = extract(tree)
        finally:
            unregister_platform("exploding")

        assert [m.platform for m in result.mcqs] == ["example_quiz"]
        assert result.failures == []
