"""
Module: extractor.timing

Purpose:
    Timing instrumentation for extraction passes, to see which strategy
    dominates a slow document.

Key Classes:
    - TimingLog: Collects pass-level and per-strategy durations

Key Functions:
    - timed_phase: Context manager for timing code blocks

Dependencies:
    - time (std)
    - contextlib (std)
    - dataclasses (std)

Used By:
    - extractor.pipeline: Times every strategy run
"""

from __future__ import annotations

import json
import logging
import time
from contextlib import contextmanager
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Generator, List, Optional, Tuple

logger = logging.getLogger(__name__)


@dataclass
class TimingLog:
    """
    Timing metrics for extraction passes.

    Attributes:
        pass_timings: Dict of phase_name -> duration_seconds
        strategy_timings: Dict of strategy_name -> list of durations, one
            entry per pass the strategy ran in

    Example:
        >>> log = TimingLog()
        >>> log.log_pass("parse_html", 0.012)
        >>> log.log_strategy("grouped_choice", 0.003)
        >>> print(log.summary())
    """
    pass_timings: Dict[str, float] = field(default_factory=dict)
    strategy_timings: Dict[str, List[float]] = field(default_factory=dict)

    def log_pass(self, phase: str, duration: float) -> None:
        """Log a pass-level timing metric."""
        self.pass_timings[phase] = duration

    def log_strategy(self, strategy: str, duration: float) -> None:
        """Log one run of a strategy."""
        self.strategy_timings.setdefault(strategy, []).append(duration)

    def get_strategy_total(self, strategy: str) -> float:
        return sum(self.strategy_timings.get(strategy, ()))

    def get_strategy_averages(self) -> Dict[str, float]:
        """Average time per run for each strategy."""
        return {
            name: sum(runs) / len(runs)
            for name, runs in self.strategy_timings.items()
            if runs
        }

    def get_slowest_strategies(self, n: int = 3) -> List[Tuple[str, float]]:
        """The N strategies with the largest total time."""
        totals = [(name, sum(runs)) for name, runs in self.strategy_timings.items()]
        totals.sort(key=lambda x: x[1], reverse=True)
        return totals[:n]

    def summary(self) -> str:
        """Generate human-readable timing summary."""
        lines = ["", "=== Extraction Timing Summary ==="]

        if self.pass_timings:
            lines.append("Pass-level:")
            for phase, duration in sorted(self.pass_timings.items()):
                lines.append(f"  {phase:25s} {duration:.3f}s")

        averages = self.get_strategy_averages()
        if averages:
            lines.append("")
            lines.append("Strategy averages:")
            for name, avg in sorted(averages.items(), key=lambda x: -x[1]):
                lines.append(f"  {name:25s} {avg:.4f}s")

        lines.append("")
        return "\n".join(lines)

    def to_dict(self) -> Dict[str, Any]:
        """Export timing data as dictionary."""
        return {
            "pass_timings": self.pass_timings,
            "strategy_timings": self.strategy_timings,
            "strategy_averages": self.get_strategy_averages(),
            "slowest_strategies": [
                {"name": name, "total": total}
                for name, total in self.get_slowest_strategies(5)
            ],
        }

    def save(self, path: Path) -> None:
        """Save timing data to a JSON file, overwriting it."""
        with open(path, "w", encoding="utf-8") as f:
            json.dump(self.to_dict(), f, indent=2)
        logger.debug(f"Saved timing data to {path}")


@contextmanager
def timed_phase(
    log: TimingLog,
    phase: str,
    strategy: Optional[str] = None,
) -> Generator[None, None, None]:
    """
    Context manager for timing a code phase.

    Args:
        log: TimingLog instance to record metrics
        phase: Name of the phase being timed
        strategy: If provided, records a run of that strategy; otherwise
                  records a pass-level metric under ``phase``

    Example:
        >>> log = TimingLog()
        >>> with timed_phase(log, "parse_html"):
        ...     tree = parse_html(markup)
        >>> with timed_phase(log, "structured", strategy="list"):
        ...     mcqs = extract_lists(tree, config)
    """
    start = time.perf_counter()
    try:
        yield
    finally:
        elapsed = time.perf_counter() - start
        if strategy:
            log.log_strategy(strategy, elapsed)
        else:
            log.log_pass(phase, elapsed)
