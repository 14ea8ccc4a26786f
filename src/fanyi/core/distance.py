from __future__ import annotations

from typing import Hashable, Sequence

from rapidfuzz.distance import Levenshtein


def levenshtein(a: Sequence[Hashable], b: Sequence[Hashable]) -> int:
    """Edit distance between two sequences (strings or token lists)."""
    return Levenshtein.distance(a, b)


def edit_similarity(a: Sequence[Hashable], b: Sequence[Hashable]) -> float:
    if not a and not b:
        return 1.0
    return Levenshtein.normalized_similarity(a, b)
