from __future__ import annotations

import dataclasses

import pytest

from fanyi.core import tables


def test_default_maps_are_symmetric() -> None:
    assert tables.is_symmetric(tables.DEFAULT_TABLES.english_alternatives)
    assert tables.is_symmetric(tables.DEFAULT_TABLES.chinese_homophones)


def test_entries_list_only_other_members() -> None:
    english = tables.DEFAULT_TABLES.english_alternatives
    assert set(english["he"]) == {"she", "it"}
    assert "he" not in english["he"]
    assert set(tables.DEFAULT_TABLES.chinese_homophones["他"]) >= {"她", "它"}


def test_shared_member_collects_every_cluster() -> None:
    mapping = tables.build_symmetric_map([("him", "her"), ("his", "her")])
    assert mapping["her"] == ("him", "his")
    assert mapping["him"] == ("her",)


def test_non_critical_words_are_closed_class() -> None:
    assert len(tables.NON_CRITICAL_WORDS) == 30
    assert {"the", "a", "is", "to"} <= tables.NON_CRITICAL_WORDS
    assert "he" not in tables.NON_CRITICAL_WORDS


def test_asymmetric_map_is_rejected() -> None:
    with pytest.raises(ValueError, match="symmetric"):
        tables.EquivalenceTables(english_alternatives={"a": ("b",)})


def test_default_tables_are_read_only() -> None:
    with pytest.raises(TypeError):
        tables.DEFAULT_TABLES.english_alternatives["x"] = ("y",)  # type: ignore[index]
    with pytest.raises(dataclasses.FrozenInstanceError):
        tables.DEFAULT_TABLES.non_critical = frozenset()  # type: ignore[misc]


def test_make_tables_builds_small_fixture() -> None:
    fixture = tables.make_tables(
        non_critical=["The"],
        phrase_groups=[("cat", "kitty")],
        english_clusters=[],
        chinese_clusters=[],
    )
    assert fixture.non_critical == frozenset({"the"})
    assert fixture.phrase_groups == (("cat", "kitty"),)
    assert dict(fixture.english_alternatives) == {}


@pytest.mark.parametrize(
    "word",
    [
        "meat", "weather", "bread", "already", "essay", "likely", "unlike", "abandoned",
        "homework", "network", "seem", "seed", "sawdust", "destiny", "minimum", "ambiguous",
        "goodbye", "define", "willing", "stalk", "unhappy", "sardine", "seats", "heating",
        "interviewing", "glove", "papaya", "marshall", "bishop", "restore", "soften",
    ],
)
def test_no_phrase_entry_hides_inside_common_words(word: str) -> None:
    hits = [entry for group in tables.PHRASE_GROUPS for entry in group if entry in word]
    assert hits == []
