"""Tests for the buffer scanner."""
import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from cycleautocomplete.buffer import TextBuffer
from cycleautocomplete.config import CompletionSettings
from cycleautocomplete.scanner import MatchKind, scan, search_window, SEARCH_RADIUS_UNIT


def _scan(text, prefix, word=None, mode=MatchKind.EXACT, cursor=None, **settings):
    buf = TextBuffer(text)
    cursor = len(text) if cursor is None else cursor
    word = prefix if word is None else word
    return list(scan(buf, cursor, prefix, word, mode, CompletionSettings(**settings)))


def test_search_window():
    assert search_window(100, 50, 0) == (0, 100)
    assert search_window(10000, 5000, 1) == (5000 - SEARCH_RADIUS_UNIT, 5000 + SEARCH_RADIUS_UNIT)
    assert search_window(10000, 500, 1) == (0, 500 + SEARCH_RADIUS_UNIT)
    assert search_window(600, 500, 1) == (0, 600)


def test_exact_scan_skips_current_word():
    hits = _scan("foobar foo food foobaz foo", "foo")
    assert hits == [("foobar", 0), ("food", 11), ("foobaz", 16)]


def test_exact_scan_is_word_start_anchored():
    hits = _scan("xfoo foobar _foo fo", "fo")
    assert [h.text for h in hits] == ["foobar"]


def test_repeated_tokens_are_yielded_again():
    hits = _scan("foobar foobar fo", "fo")
    assert hits == [("foobar", 0), ("foobar", 7)]


def test_candidate_limit_counts_new_tokens():
    hits = _scan("aa aa ab ac ad a", "a", candidate_limit=2)
    assert [h.text for h in hits] == ["aa", "aa", "ab"]


def test_known_tokens_do_not_count_towards_limit():
    buf = TextBuffer("aa ab ac a")
    hits = list(scan(buf, 10, "a", "a", MatchKind.EXACT,
                     CompletionSettings(candidate_limit=1), known={"aa"}))
    assert [h.text for h in hits] == ["aa", "ab"]


def test_fuzzy_scan_uses_first_char_and_subsequence():
    hits = _scan("bracket bar bingo br", "br", mode=MatchKind.FUZZY)
    assert hits == [("bracket", 0), ("bar", 8)]


def test_distance_limit_excludes_far_occurrences():
    text = "alpha" + " " * 2000 + "alpine al"
    near = _scan(text, "al", distance_limit=1)
    assert [h.text for h in near] == ["alpine"]

    everything = _scan(text, "al", distance_limit=0)
    assert [h.text for h in everything] == ["alpha", "alpine"]


def test_scan_covers_text_after_cursor():
    hits = _scan("fo foobar", "fo", cursor=2)
    assert hits == [("foobar", 3)]


def test_empty_buffer():
    assert _scan("", "fo", cursor=0) == []


if __name__ == '__main__':
    test_search_window()
    test_exact_scan_skips_current_word()
    test_exact_scan_is_word_start_anchored()
    test_repeated_tokens_are_yielded_again()
    test_candidate_limit_counts_new_tokens()
    test_known_tokens_do_not_count_towards_limit()
    test_fuzzy_scan_uses_first_char_and_subsequence()
    test_distance_limit_excludes_far_occurrences()
    test_scan_covers_text_after_cursor()
    test_empty_buffer()
    print("All scanner tests passed.")
