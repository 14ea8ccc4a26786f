from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum

from fanyi.core import config as config_core
from fanyi.core.tables import DEFAULT_TABLES, EquivalenceTables

log = logging.getLogger(__name__)

DEFAULT_CORRECT_THRESHOLD = 0.7
DEFAULT_PARTIAL_THRESHOLD = 0.25


class Feedback(str, Enum):
    CORRECT = "correct"
    PARTIAL = "partial"
    INCORRECT = "incorrect"


@dataclass(frozen=True)
class FeedbackThresholds:
    correct: float = DEFAULT_CORRECT_THRESHOLD
    partial: float = DEFAULT_PARTIAL_THRESHOLD

    def __post_init__(self) -> None:
        if not 0.0 <= self.partial <= self.correct <= 1.0:
            raise ValueError(
                f"Invalid feedback thresholds: need 0 <= partial <= correct <= 1 "
                f"(partial={self.partial}, correct={self.correct})"
            )

    def to_dict(self) -> dict:
        return {"correct": self.correct, "partial": self.partial}


def _as_threshold(value: object, name: str, default: float) -> float:
    if value is None:
        return default
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValueError(f"Invalid config value for feedback.{name}: {value!r}")
    return float(value)


def thresholds_from_config(
    *,
    correct: float | None = None,
    partial: float | None = None,
) -> FeedbackThresholds:
    """Thresholds from explicit overrides, else the `[feedback]` config table, else defaults."""
    if correct is None:
        correct = _as_threshold(config_core.get_config_value("feedback", "correct"), "correct", DEFAULT_CORRECT_THRESHOLD)
    if partial is None:
        partial = _as_threshold(config_core.get_config_value("feedback", "partial"), "partial", DEFAULT_PARTIAL_THRESHOLD)
    return FeedbackThresholds(correct=correct, partial=partial)


def has_temporal_conflict(
    reference: str,
    candidate: str,
    *,
    tables: EquivalenceTables = DEFAULT_TABLES,
) -> bool:
    """True when the candidate swaps a time word the reference depends on (today vs tomorrow)."""
    ref = reference.lower()
    cand = candidate.lower()
    for first, second in tables.temporal_conflicts:
        for said, expected in ((first, second), (second, first)):
            if said in cand and expected in ref and said not in ref:
                log.debug("temporal conflict: answer says %r, reference says %r", said, expected)
                return True
    return False


def classify(
    score: float,
    thresholds: FeedbackThresholds | None = None,
    *,
    temporal_conflict: bool = False,
) -> Feedback:
    thresholds = thresholds or FeedbackThresholds()
    if score >= thresholds.correct and not temporal_conflict:
        return Feedback.CORRECT
    if score >= thresholds.partial:
        return Feedback.PARTIAL
    return Feedback.INCORRECT
