import pytest
import sys
from pathlib import Path

# Add src to sys.path so we can import mcq_toolkit
SRC_PATH = Path(__file__).resolve().parent.parent / "src"
if SRC_PATH.as_posix() not in sys.path:
    sys.path.insert(0, SRC_PATH.as_posix())

from mcq_toolkit.extractor.config import ExtractionConfig  # noqa: E402


# Common test fixtures
@pytest.fixture
def config():
    """Default extraction configuration."""
    return ExtractionConfig()


@pytest.fixture
def numbered_text():
    """Two numbered questions as OCR would return them."""
    return (
        "1. What is 2+2?\n"
        "A. 2\n"
        "B. 3\n"
        "C. 4\n"
        "D. 5\n"
        "2. Which planet is closest to the sun?\n"
        "A) Venus\n"
        "B) Mercury\n"
        "C) Mars\n"
    )
