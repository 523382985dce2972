"""
Module: extractor.config

Purpose:
    Configuration dataclass for the extraction pipeline. Provides
    immutable settings for option bounds, question probing and which
    strategies run.

Key Classes:
    - ExtractionConfig: Main configuration for extraction

Dependencies:
    - dataclasses: For frozen dataclass support

Used By:
    - extractor.pipeline: Passes the config to every strategy
    - extractor.structured / extractor.text: Option bounds and scan limits
"""

from dataclasses import dataclass
from typing import FrozenSet, Optional

from mcq_toolkit.common.thresholds import EXTRACTION_THRESHOLDS


@dataclass(frozen=True)
class ExtractionConfig:
    """
    Configuration for question extraction.

    Attributes:
        min_options: Fewest options a candidate may have (default 2)
        max_options: Most options a candidate may have (default 6)
        question_scan_limit: Preceding siblings scanned for question text (default 5)
        table_min_rows: Rows a table needs to be considered (default 3)
        enabled_strategies: Strategy names to run; None runs all (default None)
        validate: Attach validation reports to the extraction result (default False)
    """
    min_options: int = EXTRACTION_THRESHOLDS.min_options
    max_options: int = EXTRACTION_THRESHOLDS.max_options
    question_scan_limit: int = EXTRACTION_THRESHOLDS.question_scan_limit
    table_min_rows: int = EXTRACTION_THRESHOLDS.table_min_rows
    enabled_strategies: Optional[FrozenSet[str]] = None
    validate: bool = False

    def __post_init__(self) -> None:
        if self.min_options < 2:
            raise ValueError(f"min_options must be at least 2: {self.min_options}")
        if self.max_options < self.min_options:
            raise ValueError(
                f"max_options ({self.max_options}) must be >= min_options ({self.min_options})"
            )
        if self.enabled_strategies is not None and not isinstance(self.enabled_strategies, frozenset):
            object.__setattr__(self, "enabled_strategies", frozenset(self.enabled_strategies))

    def accepts_option_count(self, count: int) -> bool:
        return self.min_options <= count <= self.max_options

    def is_enabled(self, strategy_name: str) -> bool:
        return self.enabled_strategies is None or strategy_name in self.enabled_strategies
