"""
Core Models Package

Immutable data models shared by the extractors and the answer resolver.

All models in this package are frozen dataclasses. Candidates are created
fresh on every extraction pass and never mutated afterwards; tree node
references are carried for the caller but excluded from equality and
serialization.
"""

from .options import Option
from .mcqs import MCQ, SourceStrategy
from .answers import ResolutionMethod, ResolvedAnswer, Unresolved

__all__ = [
    "Option",
    "MCQ",
    "SourceStrategy",
    "ResolutionMethod",
    "ResolvedAnswer",
    "Unresolved",
]
