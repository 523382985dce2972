"""
Module: extractor.pipeline

Purpose:
    Orchestrates an extraction pass. Runs every enabled strategy for the
    input modality in fixed order, isolates strategy failures, times each
    strategy and deduplicates the combined candidates.

Key Functions:
    - extract(): Detailed entry point returning an ExtractionResult
    - extract_from_tree(), extract_from_text(): MCQ-list entry points
    - extract_from_html(), extract_from_pdf(): Convenience callers
    - run_strategies(): Failure-isolated strategy loop

Key Classes:
    - ExtractionResult: Container for extraction output

Dependencies:
    - mcq_toolkit.extractor.structured / .text: Strategy tables
    - mcq_toolkit.extractor.tree.html: BeautifulSoup adapter
    - mcq_toolkit.extractor.utils.pdf: PyMuPDF text extraction

Used By:
    - mcq_toolkit.cli: Command-line extraction
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, List, Optional, Sequence, Tuple, Union

from mcq_toolkit.core.models import MCQ
from mcq_toolkit.core.schemas.validator import ValidationReport, validate_mcq

from .config import ExtractionConfig
from .dedup import deduplicate
from .diagnostics import DiagnosticsCollector
from .strategy import Strategy
from .structured import STRUCTURED_STRATEGIES
from .text import TEXT_STRATEGIES
from .timing import TimingLog, timed_phase
from .tree.html import parse_html
from .tree.nodes import DocumentTree
from .utils.pdf import extract_pdf_text

logger = logging.getLogger(__name__)

TEXT_SOURCE_NAME = "<text>"
TREE_SOURCE_NAME = "<tree>"


@dataclass
class ExtractionResult:
    """
    Result of one extraction pass.

    Attributes:
        mcqs: Deduplicated MCQs in strategy order.
        candidate_count: Candidates produced before deduplication.
        failures: Names of strategies that raised and were skipped.
        timings: Per-strategy timing for this pass.
        reports: Validation report per MCQ (same order), only filled
            when the config asks for validation.
    """
    mcqs: List[MCQ]
    candidate_count: int
    failures: List[str] = field(default_factory=list)
    timings: TimingLog = field(default_factory=TimingLog)
    reports: List[ValidationReport] = field(default_factory=list)

    @property
    def question_count(self) -> int:
        return len(self.mcqs)


def run_strategies(
    strategies: Sequence[Strategy],
    source: Any,
    *,
    config: ExtractionConfig,
    timing_log: Optional[TimingLog] = None,
    diagnostics: Optional[DiagnosticsCollector] = None,
    source_name: str = "",
) -> Tuple[List[MCQ], List[str]]:
    """
    Run strategies in order and concatenate their candidates.

    A strategy that raises contributes no candidates; the error is
    logged, recorded in ``diagnostics`` and the next strategy runs.

    Returns:
        (candidates, names of failed strategies)
    """
    timing_log = timing_log if timing_log is not None else TimingLog()
    candidates: List[MCQ] = []
    failures: List[str] = []

    for strategy in strategies:
        if not config.is_enabled(strategy.name):
            continue
        try:
            with timed_phase(timing_log, "strategy", strategy=strategy.name):
                found = strategy(source, config)
        except Exception as e:
            logger.warning(
                f"Strategy {strategy.name} failed: {e} [source: {source_name or '?'}]",
                extra={"strategy": strategy.name, "error": str(e)},
            )
            failures.append(strategy.name)
            if diagnostics is not None:
                diagnostics.add_strategy_failure(source_name, strategy.name, e)
            continue

        logger.debug(f"Strategy {strategy.name}: {len(found)} candidate(s)")
        candidates.extend(found)

    return candidates, failures


def extract(
    source: Union[DocumentTree, str],
    *,
    config: Optional[ExtractionConfig] = None,
    diagnostics: Optional[DiagnosticsCollector] = None,
) -> ExtractionResult:
    """
    Extract MCQs from a document tree or from plain text.

    Trees go through the structured strategies, strings through the text
    strategies. Empty or whitespace-only text yields an empty result
    without running any strategy.

    Args:
        source: DocumentTree or text.
        config: Optional extraction configuration.
        diagnostics: Optional collector for failures, duplicates and
            validation issues.

    Returns:
        ExtractionResult with deduplicated MCQs.

    Raises:
        TypeError: If source is neither a DocumentTree nor a str.

    Example:
        >>> result = extract("1. What is 2+2?\\nA. 2\\nB. 3\\nC. 4\\nD. 5")
        >>> result.mcqs[0].option_texts
        ['2', '3', '4', '5']
    """
    config = config or ExtractionConfig()
    timing_log = TimingLog()

    if isinstance(source, DocumentTree):
        strategies: Sequence[Strategy] = STRUCTURED_STRATEGIES
        source_name = source.url or TREE_SOURCE_NAME
    elif isinstance(source, str):
        if not source.strip():
            return ExtractionResult(mcqs=[], candidate_count=0, timings=timing_log)
        strategies = TEXT_STRATEGIES
        source_name = TEXT_SOURCE_NAME
    else:
        raise TypeError(f"Expected DocumentTree or str, got {type(source).__name__}")

    candidates, failures = run_strategies(
        strategies,
        source,
        config=config,
        timing_log=timing_log,
        diagnostics=diagnostics,
        source_name=source_name,
    )

    def _record_duplicate(dropped: MCQ, kept: MCQ) -> None:
        if diagnostics is not None:
            diagnostics.add_duplicate(
                source_name, str(dropped.source_strategy), dropped.question, str(kept.source_strategy)
            )

    with timed_phase(timing_log, "dedup"):
        mcqs = deduplicate(candidates, on_duplicate=_record_duplicate)

    reports: List[ValidationReport] = []
    if config.validate:
        for mcq in mcqs:
            report = validate_mcq(mcq)
            reports.append(report)
            if not report.is_valid and diagnostics is not None:
                diagnostics.add_invalid_question(
                    source_name, str(mcq.source_strategy), mcq.question, report.issues
                )

    logger.info(
        f"Extracted {len(mcqs)} question(s) from {len(candidates)} candidate(s) "
        f"[{source_name}]"
    )
    return ExtractionResult(
        mcqs=mcqs,
        candidate_count=len(candidates),
        failures=failures,
        timings=timing_log,
        reports=reports,
    )


def extract_from_tree(
    tree: DocumentTree,
    *,
    config: Optional[ExtractionConfig] = None,
    diagnostics: Optional[DiagnosticsCollector] = None,
) -> List[MCQ]:
    """
    Extract MCQs from a document tree.

    Raises:
        TypeError: If tree is not a DocumentTree.
    """
    if not isinstance(tree, DocumentTree):
        raise TypeError(f"Expected DocumentTree, got {type(tree).__name__}")
    return extract(tree, config=config, diagnostics=diagnostics).mcqs


def extract_from_text(
    text: str,
    *,
    config: Optional[ExtractionConfig] = None,
    diagnostics: Optional[DiagnosticsCollector] = None,
) -> List[MCQ]:
    """
    Extract MCQs from recognized or pasted text.

    Raises:
        TypeError: If text is not a str.
    """
    if not isinstance(text, str):
        raise TypeError(f"Expected str, got {type(text).__name__}")
    return extract(text, config=config, diagnostics=diagnostics).mcqs


def extract_from_html(
    markup: Union[str, bytes],
    url: Optional[str] = None,
    *,
    config: Optional[ExtractionConfig] = None,
    diagnostics: Optional[DiagnosticsCollector] = None,
) -> List[MCQ]:
    """Parse HTML markup and extract MCQs from the resulting tree."""
    return extract_from_tree(parse_html(markup, url=url), config=config, diagnostics=diagnostics)


def extract_from_pdf(
    pdf_path: Union[str, Path],
    *,
    config: Optional[ExtractionConfig] = None,
    diagnostics: Optional[DiagnosticsCollector] = None,
) -> List[MCQ]:
    """
    Extract MCQs from the text layer of a PDF.

    Raises:
        FileNotFoundError: If pdf_path doesn't exist.
        PdfTextError: If the PDF can't be read.
    """
    text = extract_pdf_text(pdf_path)
    return extract_from_text(text, config=config, diagnostics=diagnostics)
