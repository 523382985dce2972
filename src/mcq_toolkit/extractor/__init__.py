"""
Module: extractor

Purpose:
    Multi-strategy MCQ extraction from document trees (rendered pages,
    HTML) and from plain text (OCR output, PDF text layers). Strategies
    run independently in a fixed order and their candidates are
    deduplicated by question text.

Key Functions:
    - extract(): Detailed entry point
    - extract_from_tree(), extract_from_text(): MCQ-list entry points
    - extract_from_html(), extract_from_pdf(): Convenience callers

Key Classes:
    - ExtractionConfig: Configuration for extraction settings
    - ExtractionResult: Container for extraction output

Dependencies:
    - bs4 (BeautifulSoup): HTML parsing
    - fitz (PyMuPDF): PDF text extraction
"""

from .config import ExtractionConfig
from .diagnostics import DiagnosticsCollector
from .pipeline import (
    ExtractionResult,
    extract,
    extract_from_html,
    extract_from_pdf,
    extract_from_text,
    extract_from_tree,
    run_strategies,
)

__all__ = [
    "extract",
    "extract_from_tree",
    "extract_from_text",
    "extract_from_html",
    "extract_from_pdf",
    "run_strategies",
    "ExtractionConfig",
    "ExtractionResult",
    "DiagnosticsCollector",
]
