"""
Module: extractor.structured.platforms

Purpose:
    Platform-template strategy. Dispatches to every registered platform
    template whose signature matches the document. Templates live in the
    ``mcq_toolkit.plugins`` registry, so new platforms are added by
    registration rather than by editing this dispatcher.

Key Functions:
    - extract_platform_templates(): Strategy entry point

Used By:
    - extractor.structured: STRUCTURED_STRATEGIES
"""

from __future__ import annotations

import logging
from typing import List

from mcq_toolkit.core.models import MCQ
from mcq_toolkit.extractor.config import ExtractionConfig
from mcq_toolkit.extractor.tree.nodes import DocumentTree
from mcq_toolkit.plugins import registered_platforms

logger = logging.getLogger(__name__)


def extract_platform_templates(tree: DocumentTree, config: ExtractionConfig) -> List[MCQ]:
    """
    Run all matching platform templates in registration order.

    A template that raises is logged and skipped; the remaining templates
    still run.
    """
    mcqs: List[MCQ] = []
    for template in registered_platforms():
        if not template.matches(tree):
            continue
        try:
            found = template.try_extract(tree, config)
        except Exception as exc:
            logger.warning(f"Platform template {template.name!r} failed: {exc}")
            continue
        logger.debug(f"Platform template {template.name!r} found {len(found)} question(s)")
        mcqs.extend(found)
    return mcqs
