from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Final

from fanyi.core.alignment import compare_word_by_word
from fanyi.core.distance import edit_similarity
from fanyi.core.normalize import normalize_text
from fanyi.core.semantic import assess_semantic_similarity
from fanyi.core.tables import DEFAULT_TABLES, EquivalenceTables

log = logging.getLogger(__name__)

SHORT_ANSWER_LENGTH = 5


class Strictness(str, Enum):
    LENIENT = "lenient"
    MODERATE = "moderate"
    STRICT = "strict"


@dataclass(frozen=True)
class Weights:
    semantic: float
    word: float
    edit: float


WEIGHTS: Final[dict[Strictness, Weights]] = {
    Strictness.LENIENT: Weights(semantic=0.6, word=0.3, edit=0.1),
    Strictness.MODERATE: Weights(semantic=0.4, word=0.4, edit=0.2),
    Strictness.STRICT: Weights(semantic=0.2, word=0.5, edit=0.3),
}

FACTORS: Final[dict[Strictness, float]] = {
    Strictness.LENIENT: 1.3,
    Strictness.MODERATE: 1.0,
    Strictness.STRICT: 0.8,
}


@dataclass(frozen=True)
class SimilarityBreakdown:
    score: float
    strictness: Strictness
    edit: float | None = None
    word: float | None = None
    semantic: float | None = None
    shortcut: str | None = None

    def to_dict(self) -> dict:
        return {
            "score": self.score,
            "strictness": self.strictness.value,
            "components": {"edit": self.edit, "word": self.word, "semantic": self.semantic},
            "shortcut": self.shortcut,
        }


def resolve_strictness(value: str | Strictness | None) -> Strictness:
    """Map a caller-supplied level to Strictness; anything unknown scores as moderate."""
    if isinstance(value, Strictness):
        return value
    if value is None:
        return Strictness.MODERATE
    try:
        return Strictness(str(value).strip().lower())
    except ValueError:
        log.warning("Unknown strictness %r, using moderate", value)
        return Strictness.MODERATE


def score_breakdown(
    reference: str,
    candidate: str,
    strictness: str | Strictness | None = Strictness.MODERATE,
    *,
    tables: EquivalenceTables = DEFAULT_TABLES,
) -> SimilarityBreakdown:
    level = resolve_strictness(strictness)
    ref_norm = normalize_text(reference)
    cand_norm = normalize_text(candidate)

    if not ref_norm or not cand_norm:
        return SimilarityBreakdown(score=0.0, strictness=level, shortcut="empty")
    if ref_norm == cand_norm:
        return SimilarityBreakdown(score=1.0, strictness=level, shortcut="identical")
    if len(ref_norm) < SHORT_ANSWER_LENGTH or len(cand_norm) < SHORT_ANSWER_LENGTH:
        # Too short to score partially; only an exact answer counts.
        return SimilarityBreakdown(score=0.0, strictness=level, shortcut="short")

    edit = edit_similarity(ref_norm, cand_norm)
    comparison = compare_word_by_word(ref_norm, cand_norm, tables=tables)
    word = (comparison.reference_ratio + comparison.candidate_ratio) / 2
    semantic = assess_semantic_similarity(ref_norm, cand_norm, tables=tables)

    weights = WEIGHTS[level]
    raw = weights.semantic * semantic + weights.word * word + weights.edit * edit
    score = max(0.0, min(1.0, raw * FACTORS[level]))
    log.debug(
        "similarity level=%s edit=%.3f word=%.3f semantic=%.3f score=%.3f",
        level.value,
        edit,
        word,
        semantic,
        score,
    )
    return SimilarityBreakdown(
        score=score,
        strictness=level,
        edit=edit,
        word=word,
        semantic=semantic,
    )


def check_similarity(
    reference: str,
    candidate: str,
    strictness: str | Strictness | None = Strictness.MODERATE,
    *,
    tables: EquivalenceTables = DEFAULT_TABLES,
) -> float:
    """Score a learner's answer against the reference translation, in [0, 1]."""
    return score_breakdown(reference, candidate, strictness, tables=tables).score
