"""
Module: extractor.utils.pdf

Purpose:
    Plain-text extraction from PDF documents, feeding the text
    strategies. Pages are separated by a blank line so a question never
    runs across a page break into the next page's paragraph.

Key Functions:
    - extract_pdf_text(): Text of every page of a PDF file or byte string

Dependencies:
    - fitz (PyMuPDF): PDF parsing and text extraction

Used By:
    - extractor.pipeline: extract_from_pdf()
    - cli: ``extract`` on .pdf files
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Union

import fitz

from mcq_toolkit.core.errors import PdfTextError

logger = logging.getLogger(__name__)

PAGE_SEPARATOR = "\n\n"


def extract_pdf_text(source: Union[str, Path, bytes]) -> str:
    """
    Extract the text of all pages of a PDF.

    Args:
        source: Path to a PDF file, or the PDF content itself.

    Returns:
        Page texts in page order, joined by a blank line.

    Raises:
        FileNotFoundError: If ``source`` is a path that does not exist.
        PdfTextError: If the document cannot be opened or read.

    Example:
        >>> text = extract_pdf_text("quiz.pdf")
        >>> text.splitlines()[0]
        '1. What is 2+2?'
    """
    if isinstance(source, (bytes, bytearray)):
        name = "<bytes>"
        open_kwargs = {"stream": bytes(source), "filetype": "pdf"}
    else:
        path = Path(source)
        if not path.exists():
            raise FileNotFoundError(f"PDF not found: {path}")
        name = path.name
        open_kwargs = {"filename": str(path)}

    try:
        with fitz.open(**open_kwargs) as doc:
            pages: List[str] = [page.get_text("text") for page in doc]
    except (RuntimeError, ValueError) as e:
        raise PdfTextError(f"Could not read PDF {name}: {e}") from e

    logger.debug(f"Extracted text from {len(pages)} page(s) of {name}")
    return PAGE_SEPARATOR.join(page.strip("\n") for page in pages)
