"""Extractor utilities."""

from .pdf import extract_pdf_text

__all__ = ["extract_pdf_text"]
