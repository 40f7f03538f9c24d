"""
Password Letters

A letter is one character of the password alphabet and encodes a 4-bit value.
Values 0-9 can be spelled two ways: a canonical letter and a "garbage" letter.
Both spellings decode to the same value; which one was written is what the
password checksum records.

Alphabet:
    value     0 1 2 3 4 5 6 7 8 9 10 11 12 13 14 15
    canonical Z Y W V U T S R Q P N  M  L  K  J  X
    garbage   A B C D E F G H I O

Value 0 is the blank letter (``Z``). Value 15 (``X``) is the terminal letter,
which the game refuses as a checksum.
"""

import random
from typing import Dict, Optional, Tuple

from .errors import InvalidLetterError, NullInputError, OutOfRangeError

# Number of bits encoded by one letter
SHIFT = 4
MASK = (1 << SHIFT) - 1
COUNT = 1 << SHIFT

CANONICAL_CHARS = "ZYWVUTSRQPNMLKJX"
GARBAGE_CHARS = "ABCDEFGHIO"

# Letter written for blank letters when normalizing
GARBAGE_CHAR = "Z"

# char -> (value, is_garbage)
_CHAR_TABLE: Dict[str, Tuple[int, bool]] = {}
for _value, _char in enumerate(CANONICAL_CHARS):
    _CHAR_TABLE[_char] = (_value, False)
for _value, _char in enumerate(GARBAGE_CHARS):
    _CHAR_TABLE[_char] = (_value, True)


def value_allows_garbage(value: int) -> bool:
    """Check if a letter value has a garbage spelling."""
    return 0 <= value < len(GARBAGE_CHARS)


def validate_garbage_char(c: str) -> "Letter":
    """
    Check that c spells a blank letter and return that letter.

    Raises:
        InvalidLetterError: c is not an alphabet character or is not blank
    """
    blank = Letter.from_char(c)
    if blank.value != 0:
        raise InvalidLetterError(f"Garbage character must spell a blank letter, got {c!r}!")
    return blank


class Letter:
    """An immutable password letter: a value plus the spelling it was written in."""

    __slots__ = ("_value", "_garbage")

    def __init__(self, value: int = 0, garbage: bool = False):
        if value is None:
            raise NullInputError("Letter value cannot be None")
        if not 0 <= value < COUNT:
            raise OutOfRangeError(
                f"Letter value must be between 0 and {COUNT - 1}, got {value}!"
            )
        if garbage and not value_allows_garbage(value):
            raise InvalidLetterError(
                f"Letter value {value} does not have a garbage spelling!"
            )
        self._value = value
        self._garbage = bool(garbage)

    @classmethod
    def from_char(cls, c: str) -> "Letter":
        """
        Create a letter from its character (case-insensitive).

        Raises:
            NullInputError: c is None
            InvalidLetterError: c is not a single alphabet character
        """
        if c is None:
            raise NullInputError("Letter character cannot be None")
        if not isinstance(c, str) or len(c) != 1:
            raise InvalidLetterError(f"Invalid letter {c!r}, expected one character!")
        entry = _CHAR_TABLE.get(c.upper())
        if entry is None:
            raise InvalidLetterError(f"Invalid letter character {c!r}!")
        value, garbage = entry
        return cls(value, garbage)

    @classmethod
    def from_value(cls, value: int) -> "Letter":
        return cls(value)

    @staticmethod
    def is_valid_char(c: str) -> bool:
        return isinstance(c, str) and len(c) == 1 and c.upper() in _CHAR_TABLE

    @staticmethod
    def is_valid_string(s: str, length: Optional[int] = None) -> bool:
        """Check if every character of s is a letter, and optionally its length."""
        if not isinstance(s, str):
            return False
        if length is not None and len(s) != length:
            return False
        return all(c.upper() in _CHAR_TABLE for c in s)

    @property
    def value(self) -> int:
        return self._value

    @property
    def is_garbage(self) -> bool:
        return self._garbage

    @property
    def allows_garbage(self) -> bool:
        return value_allows_garbage(self._value)

    @property
    def char(self) -> str:
        return self.to_char()

    def to_char(self, prefer_garbage: Optional[bool] = None) -> str:
        """
        Get the character for this letter.

        Args:
            prefer_garbage: None for the stored spelling, otherwise request the
                garbage (True) or canonical (False) spelling. Values without a
                garbage spelling always return their single character.
        """
        garbage = self._garbage if prefer_garbage is None else prefer_garbage
        if garbage and self.allows_garbage:
            return GARBAGE_CHARS[self._value]
        return CANONICAL_CHARS[self._value]

    def normalized(self, garbage_char: Optional[str] = None) -> "Letter":
        """
        Get this letter in its canonical spelling.

        Args:
            garbage_char: Character written for blank (zero-valued) letters.
                Must spell the value 0. None uses the canonical blank.
        """
        if self._value == 0 and garbage_char is not None:
            return validate_garbage_char(garbage_char)
        if not self._garbage:
            return self
        return Letter(self._value)

    def randomized(self, rng: Optional[random.Random] = None) -> "Letter":
        """Get this letter in a randomly chosen accepted spelling."""
        if not self.allows_garbage:
            return self
        chooser = rng if rng is not None else random
        return Letter(self._value, chooser.random() < 0.5)

    def __eq__(self, other):
        if isinstance(other, Letter):
            return self._value == other._value and self._garbage == other._garbage
        return NotImplemented

    def __hash__(self):
        return hash((self._value, self._garbage))

    def __int__(self):
        return self._value

    def __str__(self):
        return self.to_char()

    def __repr__(self):
        return f"Letter({self.to_char()!r}, value={self._value})"
