"""Edit distance used by the fuzzy resolver tier."""

from __future__ import annotations


def levenshtein(a: str, b: str) -> int:
    """
    Levenshtein distance with unit costs for insert, delete and substitute.

    Example:
        >>> levenshtein("fotosynthesis", "photosynthesis")
        2
    """
    if a == b:
        return 0
    if len(a) < len(b):
        a, b = b, a
    if not b:
        return len(a)

    previous = list(range(len(b) + 1))
    for i, char_a in enumerate(a, start=1):
        current = [i]
        for j, char_b in enumerate(b, start=1):
            current.append(min(
                previous[j] + 1,  # deletion
                current[j - 1] + 1,  # insertion
                previous[j - 1] + (char_a != char_b),  # substitution
            ))
        previous = current
    return previous[-1]
