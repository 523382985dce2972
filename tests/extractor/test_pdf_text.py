"""
Unit Tests for extractor.utils.pdf

Builds small PDFs in memory with PyMuPDF.
"""

import fitz
import pytest

from mcq_toolkit.core.errors import PdfTextError
from mcq_toolkit.extractor.pipeline import extract_from_pdf
from mcq_toolkit.extractor.utils.pdf import extract_pdf_text


def make_pdf(*pages):
    doc = fitz.open()
    for lines in pages:
        page = doc.new_page()
        y = 72
        for line in lines:
            page.insert_text((72, y), line)
            y += 18
    data = doc.tobytes()
    doc.close()
    return data


@pytest.fixture
def quiz_pdf(tmp_path):
    path = tmp_path / "quiz.pdf"
    path.write_bytes(make_pdf(
        ["1. What is 2+2?", "A. 2", "B. 3", "C. 4", "D. 5"],
        ["2. Which planet is closest to the sun?", "A. Venus", "B. Mercury"],
    ))
    return path


class TestExtractPdfText:
    """Tests for extract_pdf_text()."""

    def test_extract_when_bytes_then_page_text_returned(self):
        """Byte strings are opened as in-memory documents."""
        text = extract_pdf_text(make_pdf(["1. What is 2+2?", "A. 2"]))
        assert "What is 2+2?" in text
        assert "A. 2" in text

    def test_extract_when_two_pages_then_separated_by_blank_line(self, quiz_pdf):
        """Page texts are joined with a blank line."""
        text = extract_pdf_text(quiz_pdf)
        first, second = text.split("\n\n")
        assert first.startswith("1. What is 2+2?")
        assert second.startswith("2. Which planet")

    def test_extract_when_missing_file_then_file_not_found(self, tmp_path):
        """Missing paths raise FileNotFoundError."""
        with pytest.raises(FileNotFoundError):
            extract_pdf_text(tmp_path / "absent.pdf")

    def test_extract_when_not_a_pdf_then_pdf_text_error(self):
        """Unreadable data raises PdfTextError."""
        with pytest.raises(PdfTextError):
            extract_pdf_text(b"this is not a pdf")


class TestExtractFromPdf:
    """Tests for extract_from_pdf()."""

    def test_extract_from_pdf_when_numbered_questions_then_found(self, quiz_pdf):
        """PDF text runs through the text strategies."""
        mcqs = extract_from_pdf(quiz_pdf)
        assert [m.ordinal for m in mcqs] == [1, 2]
        assert mcqs[0].option_texts == ["2", "3", "4", "5"]
