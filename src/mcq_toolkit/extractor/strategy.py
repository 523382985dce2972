"""
Module: extractor.strategy

Purpose:
    The Strategy wrapper: a named, self-contained extraction algorithm
    tried independently of the others. Structured strategies take a
    DocumentTree, text strategies take a string; both return candidate
    MCQs in discovery order.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, List

from mcq_toolkit.core.models import MCQ

from .config import ExtractionConfig

StrategyFunc = Callable[[Any, ExtractionConfig], List[MCQ]]


@dataclass(frozen=True)
class Strategy:
    """
    Named extraction strategy.

    Attributes:
        name: Stable name used in logs, timing and ``enabled_strategies``.
        func: ``func(source, config) -> list[MCQ]``.
    """
    name: str
    func: StrategyFunc

    def __call__(self, source: Any, config: ExtractionConfig) -> List[MCQ]:
        return self.func(source, config)
