"""Tests for candidate ordering."""
import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from cycleautocomplete.candidates import Candidate
from cycleautocomplete.config import SortOrder
from cycleautocomplete.ranker import rank
from cycleautocomplete.scanner import MatchKind

E = MatchKind.EXACT
F = MatchKind.FUZZY


def sample():
    return [
        Candidate("delta", 40, E),
        Candidate("alpha", 7, F),
        Candidate("charlie", 3, E),
        Candidate("bravo", 12, F),
        Candidate("echo", 25, E),
        Candidate.sentinel("typed"),
    ]


def texts(candidates):
    return [c.text for c in candidates]


def test_by_distance_with_kind_grouping():
    ranked = rank(sample(), SortOrder.BY_DISTANCE, skip_fuzzy_if_exact_found=False)
    assert texts(ranked) == ["charlie", "echo", "delta", "alpha", "bravo", "typed"]


def test_alphabetical_with_kind_grouping():
    ranked = rank(sample(), SortOrder.ALPHABETICAL, skip_fuzzy_if_exact_found=False)
    assert texts(ranked) == ["charlie", "delta", "echo", "alpha", "bravo", "typed"]


def test_no_kind_grouping_when_fuzzy_skipped():
    ranked = rank(sample(), SortOrder.BY_DISTANCE, skip_fuzzy_if_exact_found=True)
    assert texts(ranked) == ["charlie", "alpha", "bravo", "echo", "delta", "typed"]


def test_two_pass_sort_matches_tuple_key():
    items = sample()
    body = items[:-1]
    for order, key in ((SortOrder.BY_DISTANCE, lambda c: (c.match_kind, c.distance)),
                       (SortOrder.ALPHABETICAL, lambda c: (c.match_kind, c.text))):
        ranked = rank(items, order, skip_fuzzy_if_exact_found=False)
        assert ranked[:-1] == sorted(body, key=key)


def test_sentinel_stays_last():
    items = [Candidate("zzz", 1, E), Candidate.sentinel("aaa")]
    for order in SortOrder:
        ranked = rank(items, order, skip_fuzzy_if_exact_found=False)
        assert ranked[-1].is_sentinel
        assert texts(ranked) == ["zzz", "aaa"]


def test_equal_distances_keep_discovery_order():
    items = [Candidate("after", 5, E), Candidate("before", 5, E), Candidate.sentinel("x")]
    ranked = rank(items, SortOrder.BY_DISTANCE, skip_fuzzy_if_exact_found=False)
    assert texts(ranked) == ["after", "before", "x"]


def test_input_is_not_mutated():
    items = sample()
    before = texts(items)
    rank(items, SortOrder.ALPHABETICAL, skip_fuzzy_if_exact_found=False)
    assert texts(items) == before


def test_empty():
    assert rank([], SortOrder.BY_DISTANCE, skip_fuzzy_if_exact_found=False) == []


if __name__ == '__main__':
    test_by_distance_with_kind_grouping()
    test_alphabetical_with_kind_grouping()
    test_no_kind_grouping_when_fuzzy_skipped()
    test_two_pass_sort_matches_tuple_key()
    test_sentinel_stays_last()
    test_equal_distances_keep_discovery_order()
    test_input_is_not_mutated()
    test_empty()
    print("All ranker tests passed.")
