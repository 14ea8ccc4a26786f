from __future__ import annotations

from dataclasses import dataclass

from fanyi.core.distance import edit_similarity
from fanyi.core.equivalence import are_words_equivalent
from fanyi.core.normalize import normalize_text, tokenize
from fanyi.core.tables import DEFAULT_TABLES, EquivalenceTables

SHORT_WORD_LENGTH = 3
SHORT_WORD_THRESHOLD = 0.85
LONG_WORD_THRESHOLD = 0.75


@dataclass(frozen=True)
class WordMatch:
    word: str
    matched: bool


@dataclass(frozen=True)
class WordComparison:
    reference_words: tuple[WordMatch, ...]
    candidate_words: tuple[WordMatch, ...]

    @staticmethod
    def _ratio(words: tuple[WordMatch, ...]) -> float:
        if not words:
            return 0.0
        return sum(1 for w in words if w.matched) / len(words)

    @property
    def reference_ratio(self) -> float:
        return self._ratio(self.reference_words)

    @property
    def candidate_ratio(self) -> float:
        return self._ratio(self.candidate_words)

    def to_dict(self) -> dict:
        return {
            "reference_words": [{"word": w.word, "matched": w.matched} for w in self.reference_words],
            "candidate_words": [{"word": w.word, "matched": w.matched} for w in self.candidate_words],
        }


class _Side:
    def __init__(self, sentence: str) -> None:
        self.words = tokenize(sentence)
        self.normalized = [normalize_text(word) for word in self.words]
        self.matched = [False] * len(self.words)

    def unmatched(self):
        return (i for i, done in enumerate(self.matched) if not done)

    def freeze(self) -> tuple[WordMatch, ...]:
        return tuple(WordMatch(word=w, matched=m) for w, m in zip(self.words, self.matched))


def _fuzzy_threshold(a: str, b: str) -> float:
    if len(a) <= SHORT_WORD_LENGTH or len(b) <= SHORT_WORD_LENGTH:
        return SHORT_WORD_THRESHOLD
    return LONG_WORD_THRESHOLD


def compare_word_by_word(
    reference: str,
    candidate: str,
    *,
    tables: EquivalenceTables = DEFAULT_TABLES,
) -> WordComparison:
    """Flag which words of each sentence found a counterpart on the other side.

    Three greedy passes, first match wins and nothing is revisited:
    same position, then any position, then near-miss spelling.
    """
    ref = _Side(reference)
    cand = _Side(candidate)

    def same(i: int, j: int) -> bool:
        return ref.normalized[i] == cand.normalized[j] or are_words_equivalent(
            ref.words[i], cand.words[j], tables=tables
        )

    def pair(i: int, j: int) -> None:
        ref.matched[i] = True
        cand.matched[j] = True

    for i in range(min(len(ref.words), len(cand.words))):
        if same(i, i):
            pair(i, i)

    for j in list(cand.unmatched()):
        if not cand.normalized[j]:
            continue
        for i in ref.unmatched():
            if same(i, j):
                pair(i, j)
                break

    for j in list(cand.unmatched()):
        cand_word = cand.normalized[j]
        if len(cand_word) < 2:
            continue
        for i in ref.unmatched():
            ref_word = ref.normalized[i]
            if len(ref_word) < 2:
                continue
            if edit_similarity(ref_word, cand_word) > _fuzzy_threshold(ref_word, cand_word):
                pair(i, j)
                break

    return WordComparison(reference_words=ref.freeze(), candidate_words=cand.freeze())
