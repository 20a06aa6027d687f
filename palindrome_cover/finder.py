"""Public entry points for finding disjoint palindromes in a text.

``find_palindromes`` validates its input, builds a palindromic tree over the
text, turns every maximal palindromic suffix of length three or more into a
candidate interval and greedily keeps the longest non-overlapping ones.  The
result is ordered left-to-right.

Each call owns its automaton and occupancy marker, so concurrent callers
never share state.
"""

from __future__ import annotations

import logging
from typing import Tuple

from .selection import (
    MIN_PALINDROME_LENGTH,
    SubstringInterval,
    assemble_substrings,
    collect_candidates,
    select_non_overlapping,
)
from .validation import validate_text

logger = logging.getLogger(__name__)

__all__ = ["find_palindrome_intervals", "find_palindromes"]


def _validate_min_length(min_length: int) -> None:
    if not isinstance(min_length, int) or isinstance(min_length, bool):
        raise TypeError("min_length must be an integer")
    if min_length < 1:
        raise ValueError("min_length must be at least 1")


def find_palindrome_intervals(
    text: str, *, min_length: int = MIN_PALINDROME_LENGTH
) -> Tuple[SubstringInterval, ...]:
    """Return the selected palindrome intervals of *text* ordered by start.

    Raises the same errors as :func:`find_palindromes`.
    """

    validate_text(text)
    _validate_min_length(min_length)
    if len(text) < min_length:
        return ()

    candidates = collect_candidates(text, min_length)
    if not candidates:
        logger.debug("No palindromic candidates in text of length %d", len(text))
        return ()

    selected = select_non_overlapping(candidates, len(text))
    logger.debug(
        "Selected %d of %d palindromic candidates (text length %d)",
        len(selected),
        len(candidates),
        len(text),
    )
    return tuple(sorted(selected, key=lambda interval: interval.start))


def find_palindromes(
    text: str, *, min_length: int = MIN_PALINDROME_LENGTH
) -> Tuple[str, ...]:
    """Return disjoint palindromic substrings of *text*, left to right.

    Parameters
    ----------
    text:
        String made only of Unicode letters and decimal digits.
    min_length:
        Shortest palindrome worth reporting. Defaults to three.

    Raises
    ------
    NullInputError
        If *text* is ``None``.
    TypeError
        If *text* is not a string.
    InvalidCharacterError
        If *text* contains a character that is not a letter or digit.

    Returns
    -------
    tuple[str, ...]
        Selected palindromes ordered by their start position; empty when
        nothing qualifies.
    """

    intervals = find_palindrome_intervals(text, min_length=min_length)
    return assemble_substrings(text, intervals)
