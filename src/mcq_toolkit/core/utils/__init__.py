"""
Utils Package

Serialization and utility functions.
"""

from .serialization import (
    serialize_mcq,
    deserialize_mcq,
    mcqs_to_json,
    format_mcqs,
    load_mcqs_jsonl,
    save_mcqs_jsonl,
)

__all__ = [
    "serialize_mcq",
    "deserialize_mcq",
    "mcqs_to_json",
    "format_mcqs",
    "load_mcqs_jsonl",
    "save_mcqs_jsonl",
]
