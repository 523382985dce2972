"""
Module: options

Purpose:
    Provides the Option dataclass - one canonical choice of an MCQ.
    Options extracted from a document tree keep a back-reference to the
    node they came from; options parsed from plain text have none.

Key Functions:
    - Option.from_text(): Build an option from a raw line or node text
    - Option.to_dict() / Option.from_dict(): Serialization

Dependencies:
    - dataclasses (std)

Used By:
    - core.models.mcqs.MCQ
    - extractor.structured / extractor.text strategies
    - answers.resolver
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional


@dataclass(frozen=True)
class Option:
    """
    One answer choice (immutable).

    Attributes:
        text: Cleaned option text, prefix markers removed.
        source_ref: Non-owning reference to the originating tree node,
            or None for text-block extraction. Excluded from equality.
        raw_value: The value as found in the source (control value,
            unstripped line, etc.).

    Example:
        >>> opt = Option.from_text("B) Berlin")
        >>> opt.text, opt.raw_value
        ('Berlin', 'B) Berlin')
    """

    text: str
    source_ref: Optional[Any] = field(default=None, compare=False, repr=False)
    raw_value: str = ""

    @classmethod
    def from_text(cls, raw: str, source_ref: Optional[Any] = None) -> Option:
        """Create an option from raw text, stripping any choice marker."""
        from mcq_toolkit.common.text import clean_option_text

        return cls(text=clean_option_text(raw), source_ref=source_ref, raw_value=raw.strip())

    def to_dict(self) -> dict:
        """Serialize to dictionary. The node reference is never stored."""
        return {"text": self.text, "raw_value": self.raw_value}

    @classmethod
    def from_dict(cls, data: dict) -> Option:
        return cls(text=data["text"], raw_value=data.get("raw_value", data["text"]))
