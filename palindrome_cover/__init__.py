"""Greedy disjoint palindrome finder built on an online palindromic tree."""

from .eertree import PalindromeAutomaton, PalindromeNode
from .finder import find_palindrome_intervals, find_palindromes
from .selection import (
    MIN_PALINDROME_LENGTH,
    SubstringInterval,
    assemble_substrings,
    collect_candidates,
    select_non_overlapping,
)
from .validation import (
    InvalidCharacterError,
    NullInputError,
    PalindromeInputError,
    is_letter_or_digit,
    validate_text,
)

__all__ = [
    "InvalidCharacterError",
    "MIN_PALINDROME_LENGTH",
    "NullInputError",
    "PalindromeAutomaton",
    "PalindromeInputError",
    "PalindromeNode",
    "SubstringInterval",
    "assemble_substrings",
    "collect_candidates",
    "find_palindrome_intervals",
    "find_palindromes",
    "is_letter_or_digit",
    "select_non_overlapping",
    "validate_text",
]
