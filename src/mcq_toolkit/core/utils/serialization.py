"""
Serialization Utilities

Provides to/from JSON utilities for MCQ data models.

- `serialize_mcq` / `deserialize_mcq` wrap the model `to_dict()` and
  `from_dict()` methods, validating payloads before they are parsed
- JSONL helpers store one MCQ per line
- `format_mcqs` renders MCQs for people rather than programs
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Iterable

from ..errors import ValidationError
from ..models.mcqs import MCQ
from ..schemas.validator import validate_mcq_payload

BLOCK_SEPARATOR = "\n\n---\n\n"


# ─────────────────────────────────────────────────────────────────────────────
# MCQ Serialization
# ─────────────────────────────────────────────────────────────────────────────

def serialize_mcq(mcq: MCQ) -> dict[str, Any]:
    """
    Serialize an MCQ to a dictionary.

    Node references are not included; the output passes schema
    validation whenever the MCQ has at most six options.
    """
    return mcq.to_dict()


def deserialize_mcq(data: dict[str, Any], *, validate: bool = True) -> MCQ:
    """
    Deserialize an MCQ from a dictionary.

    Args:
        data: Dictionary from JSON
        validate: Whether to validate the payload first

    Returns:
        MCQ instance

    Raises:
        ValidationError: If validate=True and data is invalid
        ValueError: If data cannot be parsed
    """
    if validate:
        validate_mcq_payload(data, strict=False)
    return MCQ.from_dict(data)


def mcqs_to_json(mcqs: Iterable[MCQ], indent: int | None = 2) -> str:
    """Serialize MCQs to a JSON array."""
    return json.dumps([serialize_mcq(m) for m in mcqs], indent=indent, ensure_ascii=False)


def format_mcqs(mcqs: Iterable[MCQ]) -> str:
    """
    Render MCQs as readable text blocks.

    Each block is numbered with the MCQ's ordinal, or its 1-based position
    when it has none.

    Example:
        >>> print(format_mcqs([mcq]))
        Question 1:
        What is 2+2?
        <BLANKLINE>
        Options:
          A. 3
          B. 4
    """
    blocks = []
    for position, mcq in enumerate(mcqs, start=1):
        number = mcq.ordinal if mcq.ordinal is not None else position
        lines = [f"Question {number}:", mcq.question, "", "Options:"]
        lines.extend(
            f"  {mcq.letter_for(i)}. {opt.text}" for i, opt in enumerate(mcq.options)
        )
        blocks.append("\n".join(lines))
    return BLOCK_SEPARATOR.join(blocks)


# ─────────────────────────────────────────────────────────────────────────────
# JSONL Utilities
# ─────────────────────────────────────────────────────────────────────────────

def load_mcqs_jsonl(path: Path, *, validate: bool = True) -> list[MCQ]:
    """
    Load MCQs from a JSONL file.

    Raises:
        FileNotFoundError: If file doesn't exist
        ValidationError: If any line is invalid
    """
    if not path.exists():
        raise FileNotFoundError(f"MCQ file not found: {path}")

    mcqs = []
    with open(path, "r", encoding="utf-8") as f:
        for line_no, line in enumerate(f, 1):
            line = line.strip()
            if not line:
                continue

            try:
                mcqs.append(deserialize_mcq(json.loads(line), validate=validate))
            except (json.JSONDecodeError, ValidationError, ValueError, KeyError) as e:
                raise ValidationError(
                    f"Error parsing line {line_no}: {e}",
                    path=str(path),
                    errors=[str(e)]
                ) from e

    return mcqs


def save_mcqs_jsonl(mcqs: Iterable[MCQ], path: Path) -> None:
    """Save MCQs to a JSONL file, one object per line."""
    path.parent.mkdir(parents=True, exist_ok=True)

    with open(path, "w", encoding="utf-8") as f:
        for mcq in mcqs:
            f.write(json.dumps(serialize_mcq(mcq), ensure_ascii=False))
            f.write("\n")
