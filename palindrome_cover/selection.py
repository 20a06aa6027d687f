"""Candidate collection and greedy selection of palindromic intervals.

The eertree reports one maximal palindromic suffix per position.  Those
reports become :class:`SubstringInterval` candidates which are then scheduled
greedily: longer intervals first, earlier starts breaking ties, and a
candidate is accepted only when none of its positions has been claimed yet.
The heuristic is not guaranteed to maximise either the number of palindromes
or the covered length.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List, Sequence, Tuple

from .eertree import PalindromeAutomaton

__all__ = [
    "MIN_PALINDROME_LENGTH",
    "SubstringInterval",
    "assemble_substrings",
    "collect_candidates",
    "select_non_overlapping",
]

MIN_PALINDROME_LENGTH = 3


@dataclass(frozen=True)
class SubstringInterval:
    """Inclusive ``[start, end]`` range inside the scanned text."""

    start: int
    end: int

    def __post_init__(self) -> None:
        if self.start < 0 or self.end < self.start:
            raise ValueError(
                f"invalid interval [{self.start}, {self.end}]: "
                "start must be non-negative and not exceed end"
            )

    @property
    def length(self) -> int:
        """Number of characters covered by the interval."""

        return self.end - self.start + 1

    def slice(self, text: str) -> str:
        """Return the substring of *text* covered by the interval."""

        return text[self.start : self.end + 1]


def collect_candidates(
    text: str, min_length: int = MIN_PALINDROME_LENGTH
) -> List[SubstringInterval]:
    """Return the longest palindromic suffix at each position of *text*.

    Positions whose longest palindromic suffix is shorter than *min_length*
    contribute nothing.  The automaton is local to the call.
    """

    automaton = PalindromeAutomaton(text)
    candidates: List[SubstringInterval] = []
    for position in range(len(text)):
        node_index = automaton.add_character_at(position)
        length = automaton.length_of(node_index)
        if length >= min_length:
            candidates.append(SubstringInterval(position - length + 1, position))
    return candidates


def _selection_key(interval: SubstringInterval) -> Tuple[int, int]:
    return -interval.length, interval.start


def select_non_overlapping(
    candidates: Iterable[SubstringInterval], text_length: int
) -> List[SubstringInterval]:
    """Greedily pick pairwise disjoint intervals, longest first.

    Candidates are ordered by length descending and then start ascending.
    Each one is accepted if no position it covers is already occupied;
    rejected candidates are never reconsidered.  Accepted intervals are
    returned in acceptance order.
    """

    occupied = [False] * text_length
    selected: List[SubstringInterval] = []
    for interval in sorted(candidates, key=_selection_key):
        if interval.end >= text_length:
            raise ValueError(
                f"interval [{interval.start}, {interval.end}] exceeds text length {text_length}"
            )
        if any(occupied[interval.start : interval.end + 1]):
            continue
        occupied[interval.start : interval.end + 1] = [True] * interval.length
        selected.append(interval)
    return selected


def assemble_substrings(
    text: str, intervals: Sequence[SubstringInterval]
) -> Tuple[str, ...]:
    """Slice *text* at each interval, ordered by start position."""

    ordered = sorted(intervals, key=lambda interval: interval.start)
    return tuple(interval.slice(text) for interval in ordered)
