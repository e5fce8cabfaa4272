"""Fuzzy matcher: Bitap scoring, thresholding, ordering and the result cap."""

import sys

import pytest

from storefront_admin.application.services.fuzzy_matcher import (
    BitapPattern,
    FuzzyMatcher,
    field_norm,
)
from storefront_admin.domain.entities import SearchEntry
from storefront_admin.domain.enums import SearchCategory


def _entry(entity_id: str, text: str, category: SearchCategory = SearchCategory.CATALOG_ITEM) -> SearchEntry:
    return SearchEntry(category=category, id=entity_id, title=text, search_text=text)


def test_exact_substring_at_start_scores_minimum() -> None:
    pattern = BitapPattern("a@x")
    is_match, score = pattern.search_in("a@x.com")
    assert is_match is True
    assert score == pytest.approx(0.001)


def test_identical_text_scores_zero() -> None:
    assert BitapPattern("hoodie").search_in("HOODIE") == (True, 0.0)


def test_typo_within_threshold_matches() -> None:
    is_match, score = BitapPattern("hodie").search_in("red hoodie red-hoodie on3")
    assert is_match is True
    assert 0.0 < score <= 0.3


def test_unrelated_text_does_not_match() -> None:
    assert BitapPattern("qqqq").search_in("Red Hoodie red-hoodie On3") == (False, 1.0)


def test_exact_occurrence_further_away_scores_by_distance() -> None:
    is_match, score = BitapPattern("hoodie").search_in("red hoodie")
    assert is_match is True
    assert score == pytest.approx(0.04)


def test_zero_threshold_rejects_typos() -> None:
    pattern = BitapPattern("hodie", threshold=0.0)
    assert pattern.search_in("hoodie")[0] is False


def test_long_pattern_is_split_into_chunks() -> None:
    query = "the quick brown fox jumps over the lazy dog"
    pattern = BitapPattern(query)
    assert len(pattern.chunks) == 2
    assert pattern.chunks[1].start_index == len(query) - 32
    is_match, score = pattern.search_in(query + " again")
    assert is_match is True
    assert score == pytest.approx(0.001)


def test_field_norm_rounds_half_up() -> None:
    assert field_norm("one") == 1.0
    assert field_norm("one two") == 0.707
    assert field_norm("a b c") == 0.577
    assert field_norm("a b c d") == 0.5


def test_short_query_is_inactive() -> None:
    matcher = FuzzyMatcher()
    assert matcher.is_active("ab") is True
    assert matcher.is_active(" a ") is False
    assert matcher.search([_entry("p1", "a apple")], " a ") == []


def test_worked_example_hoodie_typo() -> None:
    entries = [
        SearchEntry(
            category=SearchCategory.CATALOG_ITEM,
            id="p1",
            title="Red Hoodie",
            subtitle="On3",
            search_text="Red Hoodie red-hoodie On3",
        ),
        _entry("p2", "Blue Jeans blue-jeans"),
    ]
    hits = FuzzyMatcher().search(entries, "hodie")
    assert [h.entry.id for h in hits] == ["p1"]
    assert hits[0].entry.title == "Red Hoodie"
    assert hits[0].entry.subtitle == "On3"


def test_worked_example_account_email() -> None:
    entry = SearchEntry(
        category=SearchCategory.ACCOUNT, id="u1", title="a@x.com", search_text="a@x.com"
    )
    hits = FuzzyMatcher().search([entry], "a@x")
    assert len(hits) == 1
    assert hits[0].entry.subtitle is None
    assert hits[0].score == pytest.approx(0.001)


def test_query_is_trimmed_before_matching() -> None:
    hits = FuzzyMatcher().search([_entry("p1", "hoodie")], "  hoodie  ")
    assert hits[0].score == pytest.approx(sys.float_info.epsilon)


def test_results_sorted_best_first() -> None:
    entries = [
        _entry("far", "red hoodie"),
        _entry("near", "hoodie red"),
        _entry("exact", "hoodie"),
    ]
    hits = FuzzyMatcher().search(entries, "hoodie")
    assert [h.entry.id for h in hits] == ["exact", "near", "far"]
    assert hits[0].score < hits[1].score < hits[2].score


def test_equal_scores_keep_scan_order() -> None:
    entries = [
        _entry("o1", "hoodie", SearchCategory.ORDER),
        _entry("p1", "hoodie", SearchCategory.CATALOG_ITEM),
        _entry("u1", "hoodie", SearchCategory.ACCOUNT),
    ]
    hits = FuzzyMatcher().search(entries, "hoodie")
    assert [h.index for h in hits] == [0, 1, 2]
    assert [h.entry.id for h in hits] == ["o1", "p1", "u1"]


def test_results_capped_at_limit() -> None:
    entries = [_entry(f"p{i}", f"hoodie {i}") for i in range(12)]
    hits = FuzzyMatcher().search(entries, "hoodie")
    assert len(hits) == 8
    assert [h.entry.id for h in hits] == [f"p{i}" for i in range(8)]


def test_custom_limit() -> None:
    entries = [_entry(f"p{i}", "hoodie") for i in range(5)]
    assert len(FuzzyMatcher(limit=3).search(entries, "hoodie")) == 3


def test_no_entries_yields_no_hits() -> None:
    assert FuzzyMatcher().search([], "hoodie") == []
