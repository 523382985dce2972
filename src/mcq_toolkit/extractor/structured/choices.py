"""
Module: extractor.structured.choices

Purpose:
    Grouped-choice strategy. Radio inputs sharing a ``name`` form one
    question; each control's label becomes an option that keeps a
    reference to the control itself.

Key Functions:
    - extract_grouped_choices(): Strategy entry point

Used By:
    - extractor.structured: STRUCTURED_STRATEGIES
"""

from __future__ import annotations

import logging
from typing import Dict, List

from mcq_toolkit.common.text import clean_option_text
from mcq_toolkit.core.models import MCQ, Option, SourceStrategy
from mcq_toolkit.extractor.candidates import make_candidate
from mcq_toolkit.extractor.config import ExtractionConfig
from mcq_toolkit.extractor.tree.nodes import DocumentNode, DocumentTree
from mcq_toolkit.extractor.tree.selectors import is_radio

from .questions import find_question_for_group, label_text_for_control

logger = logging.getLogger(__name__)


def extract_grouped_choices(tree: DocumentTree, config: ExtractionConfig) -> List[MCQ]:
    """
    Extract MCQs from radio-button groups.

    Controls without a ``name`` are ignored. A group becomes a candidate
    only if a question is found for its first control and the number of
    labelled controls is within the configured option bounds.

    Args:
        tree: Document to scan.
        config: Extraction settings.

    Returns:
        Candidates in order of each group's first control.
    """
    groups: Dict[str, List[DocumentNode]] = {}
    for control in tree.find_all(is_radio):
        name = control.get("name")
        if not name:
            continue
        groups.setdefault(name, []).append(control)

    mcqs: List[MCQ] = []
    for name, controls in groups.items():
        if len(controls) < config.min_options:
            logger.debug(f"Radio group {name!r} has {len(controls)} control(s), skipped")
            continue

        located = find_question_for_group(controls[0], config.question_scan_limit)
        if located is None:
            logger.debug(f"No question found for radio group {name!r}")
            continue

        options = []
        for control in controls:
            value = control.get("value", "")
            label = label_text_for_control(control, tree)
            text = clean_option_text(label) if label else clean_option_text(value)
            options.append(Option(text=text, source_ref=control, raw_value=value))

        mcq = make_candidate(
            located.text,
            options,
            SourceStrategy.GROUPED_CHOICE,
            config,
            question_ref=located.node,
            group_name=name,
        )
        if mcq is not None:
            mcqs.append(mcq)

    return mcqs
