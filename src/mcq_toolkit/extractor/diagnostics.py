"""
Module: extractor.diagnostics

Captures extraction issues (failed strategies, dropped duplicates,
questions failing validation) and generates diagnostic reports for
analysis.
"""

from __future__ import annotations

import json
import logging
import threading
from dataclasses import dataclass
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, List, Sequence, Set

logger = logging.getLogger(__name__)


@dataclass
class ExtractionIssue:
    """
    A single extraction issue.

    Fields:
    - source: Document the issue came from (URL, file name or "<text>")
    - strategy: Strategy that produced the issue, "" for pass-level issues
    - question: Question text involved, truncated in reports
    """
    issue_type: str
    source: str
    strategy: str
    message: str
    question: str = ""

    def to_dict(self) -> Dict[str, Any]:
        d = {
            "issue_type": self.issue_type,
            "source": self.source,
            "strategy": self.strategy,
            "message": self.message,
        }
        if self.question:
            d["question"] = self.question[:200]
        return d


class DiagnosticsCollector:
    """
    Thread-safe collector for extraction issues.

    One collector may be shared by several extraction passes running in
    different threads.
    """

    def __init__(self):
        self._issues: List[ExtractionIssue] = []
        self._lock = threading.Lock()
        self._sources: Set[str] = set()

    def _add(self, issue: ExtractionIssue) -> None:
        with self._lock:
            self._issues.append(issue)
            self._sources.add(issue.source)

    def add_strategy_failure(self, source: str, strategy: str, error: BaseException) -> None:
        """Record a strategy that raised and was skipped."""
        self._add(ExtractionIssue(
            issue_type="strategy_failure",
            source=source,
            strategy=strategy,
            message=f"{type(error).__name__}: {error}",
        ))

    def add_duplicate(self, source: str, strategy: str, question: str, kept_strategy: str) -> None:
        """Record a candidate dropped because an earlier one had the same question."""
        self._add(ExtractionIssue(
            issue_type="duplicate",
            source=source,
            strategy=strategy,
            message=f"Duplicate of a {kept_strategy} candidate",
            question=question,
        ))

    def add_invalid_question(
        self,
        source: str,
        strategy: str,
        question: str,
        validation_failures: Sequence[str],
    ) -> None:
        """Record a question that failed advisory validation."""
        self._add(ExtractionIssue(
            issue_type="invalid_question",
            source=source,
            strategy=strategy,
            message=f"INVALID: {', '.join(validation_failures)}",
            question=question,
        ))

    def generate_report(self) -> "ExtractionDiagnosticsReport":
        with self._lock:
            return ExtractionDiagnosticsReport.from_issues(list(self._issues), set(self._sources))

    @property
    def issue_count(self) -> int:
        with self._lock:
            return len(self._issues)


@dataclass
class ExtractionDiagnosticsReport:
    """Complete diagnostics report."""
    generated_at: str
    sources: List[str]
    total_issues: int
    summary_by_type: Dict[str, int]
    issues: List[ExtractionIssue]

    @classmethod
    def from_issues(cls, issues: List[ExtractionIssue], sources: Set[str]) -> "ExtractionDiagnosticsReport":
        summary_by_type: Dict[str, int] = {}
        for issue in issues:
            summary_by_type[issue.issue_type] = summary_by_type.get(issue.issue_type, 0) + 1

        return cls(
            generated_at=datetime.now(timezone.utc).isoformat(),
            sources=sorted(sources),
            total_issues=len(issues),
            summary_by_type=summary_by_type,
            issues=issues,
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "generated_at": self.generated_at,
            "sources": self.sources,
            "total_issues": self.total_issues,
            "summary_by_type": self.summary_by_type,
            "issues": [issue.to_dict() for issue in self.issues],
        }

    def to_json(self, indent: int = 2) -> str:
        return json.dumps(self.to_dict(), indent=indent)

    def save(self, path: Path) -> None:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(self.to_json())
        logger.info(f"Extraction diagnostics saved: {path}")
