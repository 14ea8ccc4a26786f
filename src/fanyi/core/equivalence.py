from __future__ import annotations

from fanyi.core.normalize import normalize_text
from fanyi.core.tables import DEFAULT_TABLES, EquivalenceTables


def _english_alternative(w1: str, w2: str, tables: EquivalenceTables) -> bool:
    return w2 in tables.english_alternatives.get(w1, ())


def _homophone_in(w1: str, w2: str, tables: EquivalenceTables) -> bool:
    # Character containment, not whole-word equality: "他们" matches "她".
    for char in w1:
        alternatives = tables.chinese_homophones.get(char)
        if alternatives and any(alt in w2 for alt in alternatives):
            return True
    return False


def are_words_equivalent(w1: str, w2: str, *, tables: EquivalenceTables = DEFAULT_TABLES) -> bool:
    """True when two tokens count as the same word for scoring.

    Covers case-insensitive equality, English pronoun alternation (he/she/it)
    and Mandarin homophones (他/她/它).
    """
    a = w1.lower()
    b = w2.lower()
    if a == b:
        return True
    if _english_alternative(a, b, tables) or _english_alternative(b, a, tables):
        return True
    return _homophone_in(w1, w2, tables) or _homophone_in(w2, w1, tables)


def _groups_of(phrase: str, tables: EquivalenceTables) -> set[int]:
    return {
        index
        for index, group in enumerate(tables.phrase_groups)
        if any(phrase == entry or entry in phrase for entry in group)
    }


def are_phrases_equivalent(p1: str, p2: str, *, tables: EquivalenceTables = DEFAULT_TABLES) -> bool:
    a = normalize_text(p1)
    b = normalize_text(p2)
    if a == b:
        return True
    if not a or not b:
        return False
    return bool(_groups_of(a, tables) & _groups_of(b, tables))
