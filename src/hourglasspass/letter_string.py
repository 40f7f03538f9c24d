"""
Fixed-Length Letter Strings

LetterString is the contract shared by every structured password value: a
fixed number of letters that converts losslessly to and from a letter array,
a string and a bounded integer.

Letter ``i`` occupies bits ``[4*i, 4*i + 4)`` of the value, so the first
letter is the least significant one. When ``MAX_VALUE`` does not need the full
width of the last letter, the excess high bits of that letter are discarded
when it is stored.

Subclasses only declare their constants; composite types override the storage
primitives (``_read``, ``_write``, ``_pack``, ``_unpack``).
"""

import operator
import random
from functools import total_ordering
from typing import Iterable, Iterator, List, Optional

from . import config
from .errors import (
    HourglassPassError,
    IndexOutOfRangeError,
    LengthMismatchError,
    NullInputError,
    OutOfRangeError,
)
from .formatting import (
    PasswordStyles,
    format_letter_string,
    parse_letter_string,
    parse_number,
)
from .letters import MASK, SHIFT, Letter, validate_garbage_char


@total_ordering
class LetterString:
    """Base class for fixed-length letter strings."""

    NAME = "Letter string"
    LENGTH = 0
    MIN_VALUE = 0
    MAX_VALUE = 0
    DEFAULT_FORMAT = "PS"

    def __init__(self, source=None):
        """
        Create a letter string.

        Args:
            source: None for the blank letter string, or another letter
                string, a sequence of letters, a string, or an integer value
        """
        self._reset()
        if source is None:
            return
        if isinstance(source, LetterString):
            self.letters = source.letters
        elif isinstance(source, str):
            self.string = source
        elif isinstance(source, int) and not isinstance(source, bool):
            self.value = source
        else:
            self.letters = source

    # --- Alternate constructors ---

    @classmethod
    def from_letters(cls, letters: Iterable[Letter]):
        if letters is None:
            raise NullInputError(f"{cls.NAME} letters cannot be None")
        return cls(list(letters))

    @classmethod
    def from_string(cls, s: str):
        if s is None:
            raise NullInputError(f"{cls.NAME} string cannot be None")
        return cls(str(s))

    @classmethod
    def from_value(cls, value: int):
        if value is None:
            raise NullInputError(f"{cls.NAME} value cannot be None")
        return cls(operator.index(value))

    # --- Storage primitives ---

    def _reset(self) -> None:
        self._letters = [Letter() for _ in range(self.LENGTH)]

    def _read(self, index: int) -> Letter:
        return self._letters[index]

    def _write(self, index: int, letter: Letter) -> None:
        self._letters[index] = self._clamp(index, letter)

    def _pack(self) -> int:
        value = 0
        for i, letter in enumerate(self._letters):
            value |= letter.value << (i * SHIFT)
        return value & self.MAX_VALUE

    def _unpack(self, value: int) -> None:
        for i in range(self.LENGTH):
            self._write(i, Letter((value >> (i * SHIFT)) & MASK))

    @classmethod
    def _letter_bits(cls, index: int) -> int:
        """Number of value bits the letter at index can hold."""
        remaining = cls.MAX_VALUE.bit_length() - index * SHIFT
        return max(0, min(SHIFT, remaining))

    @classmethod
    def _clamp(cls, index: int, letter: Letter) -> Letter:
        bits = cls._letter_bits(index)
        if bits >= SHIFT:
            return letter
        masked = letter.value & ((1 << bits) - 1)
        if masked == letter.value:
            return letter
        garbage = letter.is_garbage and Letter(masked).allows_garbage
        return Letter(masked, garbage)

    # --- Validation ---

    def _check_index(self, index) -> int:
        if not isinstance(index, int) or isinstance(index, bool):
            raise TypeError(f"{self.NAME} indices must be integers, got {type(index).__name__}")
        if index < 0 or index >= self.LENGTH:
            raise IndexOutOfRangeError(
                f"Index must be between 0 and {self.LENGTH - 1}, got {index}!"
            )
        return index

    @staticmethod
    def _coerce_letter(letter) -> Letter:
        if letter is None:
            raise NullInputError("Letter cannot be None")
        if isinstance(letter, Letter):
            return letter
        return Letter.from_char(letter)

    @classmethod
    def _validate_letters(cls, letters) -> List[Letter]:
        if letters is None:
            raise NullInputError(f"{cls.NAME} letters cannot be None")
        letters = [cls._coerce_letter(letter) for letter in letters]
        if len(letters) != cls.LENGTH:
            raise LengthMismatchError(
                f"{cls.NAME} letters must be {cls.LENGTH} letters long, got {len(letters)} letters!"
            )
        return letters

    @classmethod
    def _validate_string(cls, s: str) -> List[Letter]:
        if s is None:
            raise NullInputError(f"{cls.NAME} string cannot be None")
        if len(s) != cls.LENGTH:
            raise LengthMismatchError(
                f"{cls.NAME} string must be {cls.LENGTH} letters long, got {len(s)} letters!"
            )
        return [Letter.from_char(c) for c in s.upper()]

    @classmethod
    def _validate_value(cls, value: int) -> int:
        if value is None:
            raise NullInputError(f"{cls.NAME} value cannot be None")
        value = operator.index(value)
        if value < cls.MIN_VALUE or value > cls.MAX_VALUE:
            raise OutOfRangeError(
                f"{cls.NAME} value must be between {cls.MIN_VALUE} and {cls.MAX_VALUE}, got {value}!"
            )
        return value

    # --- Properties ---

    def __len__(self) -> int:
        return self.LENGTH

    def __getitem__(self, index: int) -> Letter:
        return self._read(self._check_index(index))

    def __setitem__(self, index: int, letter) -> None:
        index = self._check_index(index)
        self._write(index, self._coerce_letter(letter))

    def __iter__(self) -> Iterator[Letter]:
        for i in range(self.LENGTH):
            yield self._read(i)

    @property
    def letters(self) -> List[Letter]:
        return [self._read(i) for i in range(self.LENGTH)]

    @letters.setter
    def letters(self, letters) -> None:
        for i, letter in enumerate(self._validate_letters(letters)):
            self._write(i, letter)

    @property
    def string(self) -> str:
        return "".join(letter.to_char() for letter in self)

    @string.setter
    def string(self, s: str) -> None:
        for i, letter in enumerate(self._validate_string(s)):
            self._write(i, letter)

    @property
    def value(self) -> int:
        return self._pack()

    @value.setter
    def value(self, value: int) -> None:
        self._unpack(self._validate_value(value))

    def allows_garbage(self, index: int) -> bool:
        return self[index].allows_garbage

    def is_garbage(self, index: int) -> bool:
        return self[index].is_garbage

    def groups(self) -> List[str]:
        """Letter groups rendered separately by spaced formats."""
        return [self.string]

    # --- Mutation ---

    def copy(self):
        return type(self)(self)

    def normalize(self, garbage_char: str = config.DEFAULT_GARBAGE_CHAR) -> None:
        """Rewrite every letter in its canonical spelling, blanks as garbage_char."""
        validate_garbage_char(garbage_char)
        letters = [letter.normalized(garbage_char) for letter in self]
        for i, letter in enumerate(letters):
            self._write(i, letter)

    def randomize(self, rng: Optional[random.Random] = None) -> None:
        """Rewrite every letter in a randomly chosen accepted spelling."""
        for i in range(self.LENGTH):
            self._write(i, self._read(i).randomized(rng))

    def normalized(self, garbage_char: str = config.DEFAULT_GARBAGE_CHAR):
        result = self.copy()
        result.normalize(garbage_char)
        return result

    def randomized(self, rng: Optional[random.Random] = None):
        result = self.copy()
        result.randomize(rng)
        return result

    # --- Parsing ---

    @classmethod
    def parse(cls, s: str, style: PasswordStyles = PasswordStyles.PASSWORD_OR_VALUE):
        letters, value = parse_letter_string(
            s, style, cls.NAME, cls.LENGTH, cls.MIN_VALUE, cls.MAX_VALUE
        )
        return cls(letters) if letters is not None else cls(value)

    @classmethod
    def try_parse(cls, s: str, style: PasswordStyles = PasswordStyles.PASSWORD_OR_VALUE):
        """Parse text, returning None instead of raising on failure."""
        try:
            return cls.parse(s, style)
        except HourglassPassError:
            return None

    @classmethod
    def parse_number(cls, s: str, base: int = 10):
        return cls(parse_number(s, cls.NAME, base))

    @classmethod
    def is_valid_string(cls, s: str) -> bool:
        return Letter.is_valid_string(s, cls.LENGTH)

    # --- Formatting ---

    def to_string(self, fmt: Optional[str] = None) -> str:
        return format_letter_string(self, fmt, self.NAME)

    def __format__(self, format_spec: str) -> str:
        return self.to_string(format_spec or None)

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.string!r}, value={self.value})"

    def __int__(self) -> int:
        return self.value

    # --- Comparison ---

    def _other_value(self, other) -> Optional[int]:
        """Decode the other side of a comparison, or None when incomparable."""
        if isinstance(other, LetterString):
            if other.LENGTH != self.LENGTH or other.MAX_VALUE != self.MAX_VALUE:
                return None
            return other.value
        if isinstance(other, bool):
            return None
        if isinstance(other, int):
            return other
        if isinstance(other, str):
            return type(self)(other).value
        if isinstance(other, (list, tuple)):
            return type(self)(list(other)).value
        return None

    def __eq__(self, other):
        try:
            other_value = self._other_value(other)
        except HourglassPassError:
            return False
        if other_value is None:
            return NotImplemented
        return self.value == other_value

    def __lt__(self, other):
        other_value = self._other_value(other)
        if other_value is None:
            return NotImplemented
        return self.value < other_value

    __hash__ = None
