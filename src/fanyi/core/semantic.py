from __future__ import annotations

import math

from fanyi.core.distance import levenshtein
from fanyi.core.equivalence import are_phrases_equivalent, are_words_equivalent
from fanyi.core.normalize import normalize_text
from fanyi.core.tables import DEFAULT_TABLES, EquivalenceTables

POSITION_BONUS = 0.2
FUZZY_MIN_LENGTH = 3
FUZZY_MAX_DISTANCE_RATIO = 0.3


def extract_content_words(sentence: str, *, tables: EquivalenceTables = DEFAULT_TABLES) -> list[str]:
    """Normalized tokens that carry meaning, in order, duplicates kept."""
    return [
        word
        for word in normalize_text(sentence).split()
        if word not in tables.non_critical and len(word) > 1
    ]


def _near_miss(a: str, b: str) -> bool:
    if len(a) <= FUZZY_MIN_LENGTH or len(b) <= FUZZY_MIN_LENGTH:
        return False
    if a in b or b in a:
        return True
    return levenshtein(a, b) / max(len(a), len(b)) < FUZZY_MAX_DISTANCE_RATIO


def _is_covered(word: str, candidate_words: list[str], tables: EquivalenceTables) -> bool:
    if word in candidate_words:
        return True
    for other in candidate_words:
        if are_phrases_equivalent(word, other, tables=tables):
            return True
        if are_words_equivalent(word, other, tables=tables):
            return True
        if _near_miss(word, other):
            return True
    return False


def _has_strict_match(section: list[str], candidate_words: list[str], tables: EquivalenceTables) -> bool:
    return any(
        word == other or are_phrases_equivalent(word, other, tables=tables)
        for word in section
        for other in candidate_words
    )


def assess_semantic_similarity(
    reference: str,
    candidate: str,
    *,
    tables: EquivalenceTables = DEFAULT_TABLES,
) -> float:
    """Share of reference content words the candidate covers, in [0, 1].

    References with three or more content words earn up to POSITION_BONUS
    when the candidate touches their beginning, middle and end. That bonus
    only counts exact and phrase-group matches.
    """
    reference_words = extract_content_words(reference, tables=tables)
    candidate_words = extract_content_words(candidate, tables=tables)
    if not reference_words or not candidate_words:
        return 0.0

    covered = sum(1 for word in reference_words if _is_covered(word, candidate_words, tables))
    score = covered / len(reference_words)

    if len(reference_words) < 3:
        return score

    size = math.ceil(len(reference_words) / 3)
    sections = [
        reference_words[:size],
        reference_words[size : 2 * size],
        reference_words[2 * size :],
    ]
    matched = sum(1 for section in sections if _has_strict_match(section, candidate_words, tables))
    return min(1.0, score + (matched / 3) * POSITION_BONUS)
