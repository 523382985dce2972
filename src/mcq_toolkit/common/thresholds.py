"""Centralized threshold and magic number configuration.

This module contains the bounds, ratios and default confidences used
throughout extraction and answer resolution. Having these in one place
makes tuning easier and documents what each value controls.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class ExtractionThresholds:
    """Thresholds for question/option recognition."""

    question_min_length: int = 10  # Shorter text never counts as a question
    min_options: int = 2  # Fewer options is not a multiple-choice question
    max_options: int = 6  # More options is almost always a regular list
    question_scan_limit: int = 5  # Preceding siblings scanned for question text
    table_min_rows: int = 3  # Question row + at least two option rows


@dataclass
class ResolutionThresholds:
    """Thresholds for mapping a model answer onto an option."""

    fuzzy_accept_ratio: float = 0.4  # Max edit distance as fraction of the longer string
    fallback_confidence: int = 20  # Caller-side "first option" default
    letter_mention_confidence: int = 50  # Letter found in unstructured response text
    option_mention_confidence: int = 40  # Option text found in unstructured response text
    default_model_confidence: int = 70  # JSON response without a usable confidence


@dataclass
class RequestThresholds:
    """Limits for question/option payloads sent to an answering service."""

    question_max_length: int = 1000
    max_request_options: int = 10
    option_max_length: int = 500


# Global instances for easy import
EXTRACTION_THRESHOLDS = ExtractionThresholds()
RESOLUTION_THRESHOLDS = ResolutionThresholds()
REQUEST_THRESHOLDS = RequestThresholds()
