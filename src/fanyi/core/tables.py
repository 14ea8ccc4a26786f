from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Final, Iterable, Mapping

# Closed-class English words that carry no meaning on their own. They are
# ignored when scoring content coverage but still take part in alignment.
NON_CRITICAL_WORDS: Final[frozenset[str]] = frozenset(
    {
        "a",
        "an",
        "the",
        "is",
        "are",
        "am",
        "was",
        "were",
        "be",
        "been",
        "to",
        "of",
        "in",
        "on",
        "at",
        "for",
        "with",
        "by",
        "and",
        "or",
        "but",
        "so",
        "very",
        "really",
        "too",
        "also",
        "just",
        "do",
        "does",
        "did",
    }
)

# Interchangeable phrasings. A phrase belongs to a group when it equals or
# contains one of the group's entries, so no entry may sit inside an unrelated
# word: "eat" would pull in "meat", "read" would pull in "bread".
PHRASE_GROUPS: Final[tuple[tuple[str, ...], ...]] = (
    # verbs
    ("look at", "looking at", "watching", "seeing"),
    ("study", "studying", "studies", "learn", "learning", "learns", "learned"),
    ("have a meal", "having a meal", "dining", "dined"),
    ("drink", "drinking", "drinks", "drank"),
    ("enjoy", "enjoying", "fond of", "keen on"),
    ("want to", "wants to", "would like to", "wish to", "feel like"),
    ("buy", "buying", "bought", "purchase", "purchasing"),
    ("speak", "speaking", "spoken", "said", "saying"),
    ("write", "writing", "wrote", "written"),
    ("sleep", "sleeping", "slept", "go to bed", "went to bed"),
    ("walking", "strolling", "take a walk", "went for a walk"),
    # time expressions
    ("today", "this day"),
    ("tomorrow", "next day", "the next day"),
    ("yesterday", "previous day", "the day before"),
    ("currently", "right now", "at the moment", "at present"),
    ("evening", "tonight", "at night"),
    ("every day", "everyday", "daily"),
    ("frequently", "regularly"),
    # locations and people
    ("supermarket", "grocery store", "grocery shop"),
    ("teacher", "instructor", "professor"),
    ("father", "daddy", "dad"),
    ("mother", "mommy", "mama"),
    ("friend", "buddy"),
    # descriptions
    ("nice", "excellent", "wonderful"),
    ("glad", "delighted", "joyful"),
    ("beautiful", "lovely", "gorgeous"),
    ("huge", "enormous", "massive"),
    ("small", "little"),
    # contracted pronoun forms
    ("i am", "i'm"),
    ("you are", "you're"),
    ("we are", "we're"),
    ("they are", "they're"),
    ("do not", "don't"),
    ("does not", "doesn't"),
    ("cannot", "can't", "can not"),
    # tense and aspect markers
    ("going to", "gonna"),
    ("will not", "won't"),
    ("completed", "wrapped up"),
)

# English pronouns a listener cannot tell apart when the Mandarin source only
# says "ta". Each cluster is interchangeable as a whole.
ENGLISH_PRONOUN_CLUSTERS: Final[tuple[tuple[str, ...], ...]] = (
    ("he", "she", "it"),
    ("him", "her", "it"),
    ("his", "her", "its"),
    ("he's", "she's", "it's"),
    ("himself", "herself", "itself"),
)

# 他/她/它 (and the variant forms 牠/祂) are all pronounced tā.
CHINESE_HOMOPHONE_CLUSTERS: Final[tuple[tuple[str, ...], ...]] = (
    ("他", "她", "它", "牠", "祂"),
)

# Time words a learner must not swap even when the rest of the answer fits.
TEMPORAL_CONFLICTS: Final[tuple[tuple[str, str], ...]] = (
    ("today", "tomorrow"),
    ("today", "yesterday"),
    ("tomorrow", "yesterday"),
)


def build_symmetric_map(clusters: Iterable[Iterable[str]]) -> Mapping[str, tuple[str, ...]]:
    """Map every cluster member to the other members of the clusters it belongs to.

    A member that appears in several clusters collects the union of their
    other members, in first-seen order.
    """
    collected: dict[str, list[str]] = {}
    for cluster in clusters:
        members = list(dict.fromkeys(cluster))
        for member in members:
            others = collected.setdefault(member, [])
            for other in members:
                if other != member and other not in others:
                    others.append(other)
    return MappingProxyType({key: tuple(values) for key, values in collected.items()})


def is_symmetric(mapping: Mapping[str, Iterable[str]]) -> bool:
    for key, values in mapping.items():
        for value in values:
            if key not in mapping.get(value, ()):
                return False
    return True


@dataclass(frozen=True)
class EquivalenceTables:
    non_critical: frozenset[str] = NON_CRITICAL_WORDS
    phrase_groups: tuple[tuple[str, ...], ...] = PHRASE_GROUPS
    english_alternatives: Mapping[str, tuple[str, ...]] = field(
        default_factory=lambda: build_symmetric_map(ENGLISH_PRONOUN_CLUSTERS)
    )
    chinese_homophones: Mapping[str, tuple[str, ...]] = field(
        default_factory=lambda: build_symmetric_map(CHINESE_HOMOPHONE_CLUSTERS)
    )
    temporal_conflicts: tuple[tuple[str, str], ...] = TEMPORAL_CONFLICTS

    def __post_init__(self) -> None:
        for name in ("english_alternatives", "chinese_homophones"):
            if not is_symmetric(getattr(self, name)):
                raise ValueError(f"{name} must be symmetric")


def make_tables(
    *,
    non_critical: Iterable[str] = NON_CRITICAL_WORDS,
    phrase_groups: Iterable[Iterable[str]] = PHRASE_GROUPS,
    english_clusters: Iterable[Iterable[str]] = ENGLISH_PRONOUN_CLUSTERS,
    chinese_clusters: Iterable[Iterable[str]] = CHINESE_HOMOPHONE_CLUSTERS,
    temporal_conflicts: Iterable[tuple[str, str]] = TEMPORAL_CONFLICTS,
) -> EquivalenceTables:
    """Build a table set from plain clusters; tests use this for small fixtures."""
    return EquivalenceTables(
        non_critical=frozenset(word.lower() for word in non_critical),
        phrase_groups=tuple(tuple(group) for group in phrase_groups),
        english_alternatives=build_symmetric_map(english_clusters),
        chinese_homophones=build_symmetric_map(chinese_clusters),
        temporal_conflicts=tuple((a, b) for a, b in temporal_conflicts),
    )


DEFAULT_TABLES: Final[EquivalenceTables] = EquivalenceTables()
