"""
MCQ Toolkit Core Package

Shared data models, validation and serialization. These models are the
single source of truth passed between extractors, the resolver and callers.
"""

from .errors import MCQToolkitError, ValidationError, PdfTextError
from .models import MCQ, Option, SourceStrategy, ResolutionMethod, ResolvedAnswer, Unresolved

__all__ = [
    "MCQ",
    "Option",
    "SourceStrategy",
    "ResolutionMethod",
    "ResolvedAnswer",
    "Unresolved",
    "MCQToolkitError",
    "ValidationError",
    "PdfTextError",
]
