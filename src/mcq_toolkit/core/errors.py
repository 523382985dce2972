"""
Module: core.errors

Purpose:
    Exception hierarchy for the toolkit. Data-quality problems (no question
    found, wrong option count, no matching option) are returned as values;
    these exceptions are reserved for misuse and unreadable inputs.
"""

from __future__ import annotations


class MCQToolkitError(Exception):
    """Base class for toolkit errors."""


class ValidationError(MCQToolkitError):
    """Raised when serialized MCQ data fails validation."""

    def __init__(self, message: str, path: str = "", errors: list[str] | None = None):
        super().__init__(message)
        self.path = path
        self.errors = errors or []


class PdfTextError(MCQToolkitError):
    """Raised when text cannot be read from a PDF document."""
