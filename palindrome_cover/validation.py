"""Input validation for the palindrome finder.

Only letters and decimal digits are accepted.  Classification happens per
Unicode code point so that non-ASCII letters such as ``ą`` or ``ß`` pass while
whitespace, punctuation and symbols are rejected with the index of the first
offending character.
"""

from __future__ import annotations

import unicodedata

__all__ = [
    "InvalidCharacterError",
    "NullInputError",
    "PalindromeInputError",
    "is_letter_or_digit",
    "validate_text",
]

_LETTER_OR_DIGIT_CATEGORIES = frozenset({"Lu", "Ll", "Lt", "Lm", "Lo", "Nd"})


class PalindromeInputError(ValueError):
    """Raised when the text handed to the palindrome finder is invalid."""


class NullInputError(PalindromeInputError):
    """Raised when no text was supplied at all."""

    def __init__(self) -> None:
        super().__init__("text must not be None")


class InvalidCharacterError(PalindromeInputError):
    """Raised for the first character that is neither a letter nor a digit."""

    def __init__(self, index: int, character: str) -> None:
        super().__init__(
            "Input must contain only letters and digits. "
            f"Invalid character at index {index}."
        )
        self.index = index
        self.character = character


def is_letter_or_digit(character: str) -> bool:
    """Return ``True`` when *character* is a Unicode letter or decimal digit."""

    return unicodedata.category(character) in _LETTER_OR_DIGIT_CATEGORIES


def validate_text(text: object) -> str:
    """Validate *text* and return it unchanged.

    Raises
    ------
    NullInputError
        If *text* is ``None``.
    TypeError
        If *text* is not a string.
    InvalidCharacterError
        For the left-most character that is not a letter or digit.
    """

    if text is None:
        raise NullInputError()
    if not isinstance(text, str):
        raise TypeError("text must be a string")
    for index, character in enumerate(text):
        if not is_letter_or_digit(character):
            raise InvalidCharacterError(index, character)
    return text
