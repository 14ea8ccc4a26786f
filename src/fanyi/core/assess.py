from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator

from fanyi.core.alignment import WordComparison, compare_word_by_word
from fanyi.core.feedback import Feedback, FeedbackThresholds, classify, has_temporal_conflict
from fanyi.core.similarity import SimilarityBreakdown, Strictness, score_breakdown
from fanyi.core.tables import DEFAULT_TABLES, EquivalenceTables


@dataclass(frozen=True)
class Assessment:
    """Score, highlights and feedback bucket for one answer.

    The score's word component aligns the normalized sentences, while
    `comparison` aligns the raw ones so highlights keep the learner's
    casing and punctuation. Punctuation glued to a pronoun ("He." vs "She")
    blocks the pronoun rule on the raw side only, so a highlight can read
    unmatched where the score counted a match.
    """

    reference: str
    candidate: str
    breakdown: SimilarityBreakdown
    comparison: WordComparison
    temporal_conflict: bool
    feedback: Feedback
    thresholds: FeedbackThresholds

    @property
    def score(self) -> float:
        return self.breakdown.score

    def to_dict(self) -> dict:
        data = self.breakdown.to_dict()
        data.update(self.comparison.to_dict())
        data.update(
            {
                "feedback": self.feedback.value,
                "temporal_conflict": self.temporal_conflict,
                "thresholds": self.thresholds.to_dict(),
            }
        )
        return data


def assess_answer(
    reference: str,
    candidate: str,
    *,
    strictness: str | Strictness | None = Strictness.MODERATE,
    thresholds: FeedbackThresholds | None = None,
    tables: EquivalenceTables = DEFAULT_TABLES,
) -> Assessment:
    thresholds = thresholds or FeedbackThresholds()
    breakdown = score_breakdown(reference, candidate, strictness, tables=tables)
    conflict = has_temporal_conflict(reference, candidate, tables=tables)
    return Assessment(
        reference=reference,
        candidate=candidate,
        breakdown=breakdown,
        comparison=compare_word_by_word(reference, candidate, tables=tables),
        temporal_conflict=conflict,
        feedback=classify(breakdown.score, thresholds, temporal_conflict=conflict),
        thresholds=thresholds,
    )


def assess_batch(
    rows: Iterable[tuple[str, str]],
    *,
    strictness: str | Strictness | None = Strictness.MODERATE,
    thresholds: FeedbackThresholds | None = None,
    tables: EquivalenceTables = DEFAULT_TABLES,
) -> Iterator[Assessment]:
    for reference, candidate in rows:
        yield assess_answer(reference, candidate, strictness=strictness, thresholds=thresholds, tables=tables)
