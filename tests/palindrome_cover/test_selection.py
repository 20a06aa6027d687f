"""Tests for candidate collection and greedy interval selection."""

from __future__ import annotations

import pytest

from palindrome_cover.selection import (
    SubstringInterval,
    assemble_substrings,
    collect_candidates,
    select_non_overlapping,
)


def test_interval_length_and_slice() -> None:
    interval = SubstringInterval(2, 4)
    assert interval.length == 3
    assert interval.slice("zzaba") == "aba"


@pytest.mark.parametrize("start, end", [(-1, 2), (3, 2)])
def test_interval_rejects_invalid_bounds(start: int, end: int) -> None:
    with pytest.raises(ValueError):
        SubstringInterval(start, end)


def test_collect_candidates_reports_maximal_suffixes() -> None:
    assert collect_candidates("ababa") == [
        SubstringInterval(0, 2),
        SubstringInterval(1, 3),
        SubstringInterval(0, 4),
    ]


def test_collect_candidates_skips_short_suffixes() -> None:
    assert collect_candidates("aabbcc") == []
    assert collect_candidates("abcdefg12345") == []


def test_collect_candidates_honours_min_length() -> None:
    assert collect_candidates("aabb", min_length=2) == [
        SubstringInterval(0, 1),
        SubstringInterval(2, 3),
    ]


def test_select_prefers_longest_candidate() -> None:
    candidates = [SubstringInterval(0, 2), SubstringInterval(1, 3), SubstringInterval(0, 4)]
    assert select_non_overlapping(candidates, 5) == [SubstringInterval(0, 4)]


def test_select_breaks_length_ties_by_earliest_start() -> None:
    candidates = [SubstringInterval(2, 4), SubstringInterval(0, 2), SubstringInterval(4, 6)]
    assert select_non_overlapping(candidates, 7) == [
        SubstringInterval(0, 2),
        SubstringInterval(4, 6),
    ]


def test_select_does_not_backtrack() -> None:
    # The long middle interval blocks two shorter ones that together cover more.
    candidates = [
        SubstringInterval(0, 3),
        SubstringInterval(3, 7),
        SubstringInterval(7, 10),
    ]
    assert select_non_overlapping(candidates, 11) == [SubstringInterval(3, 7)]


def test_select_accepts_adjacent_intervals() -> None:
    candidates = [SubstringInterval(3, 5), SubstringInterval(0, 2)]
    assert select_non_overlapping(candidates, 6) == [
        SubstringInterval(0, 2),
        SubstringInterval(3, 5),
    ]


def test_select_rejects_out_of_range_interval() -> None:
    with pytest.raises(ValueError):
        select_non_overlapping([SubstringInterval(0, 5)], 3)


def test_select_handles_no_candidates() -> None:
    assert select_non_overlapping([], 10) == []


def test_assemble_orders_by_start() -> None:
    text = "zzaba123321qq"
    intervals = [SubstringInterval(5, 10), SubstringInterval(2, 4)]
    assert assemble_substrings(text, intervals) == ("aba", "123321")


def test_assemble_empty() -> None:
    assert assemble_substrings("abc", []) == ()
