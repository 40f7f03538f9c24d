"""
Parsing and formatting for letter strings.

Parsing is driven by PasswordStyles flags that select whether text may be read
as a letter string, a decimal value, or a hexadecimal value.

Formatting uses a small mini-language:

    P<mode><sep>  letter string rendering
                  S  as stored          C  checksum-corrected copy
                                        (as stored when uncorrectable)
                  N  normalized         R  randomized
                  B  letter values in binary
                  D  letter values in decimal
                  X  letter values in hexadecimal
    VB<sep>       value in binary, grouped by letter with <sep>
    V<spec>       value through Python's format-spec mini-language
"""

from enum import IntFlag
from typing import List, Optional, Tuple

from .errors import (
    CorrectionError,
    InvalidFormatError,
    InvalidLetterError,
    LengthMismatchError,
    NullInputError,
    OutOfRangeError,
)
from .letters import SHIFT, Letter


class PasswordStyles(IntFlag):
    """Representations accepted when parsing letter strings."""

    NONE = 0
    PASSWORD = 1
    VALUE = 2
    HEX_VALUE = 4
    PASSWORD_OR_VALUE = PASSWORD | VALUE
    ANY = PASSWORD | VALUE | HEX_VALUE


def _parse_integer(s: str, style: PasswordStyles) -> Optional[int]:
    """Try each numeric style in turn, returning None when none applies."""
    text = s.strip()
    if style & PasswordStyles.VALUE:
        try:
            return int(text, 10)
        except ValueError:
            pass
    if style & PasswordStyles.HEX_VALUE:
        try:
            return int(text, 16)
        except ValueError:
            pass
    return None


def parse_letter_string(
    s: str,
    style: PasswordStyles,
    name: str,
    length: int,
    min_value: int,
    max_value: int,
) -> Tuple[Optional[List[Letter]], Optional[int]]:
    """
    Parse text as either letters or a value.

    A text of exactly ``length`` characters is tried as letters first when the
    style allows it; numeric styles are the fallback.

    Returns:
        Tuple of (letters, value) where exactly one is not None

    Raises:
        NullInputError: s is None
        LengthMismatchError: Password-only style and the length is wrong
        InvalidLetterError: Password-only style and a character is invalid
        InvalidFormatError: No allowed representation matches
        OutOfRangeError: A numeric literal is outside [min_value, max_value]
    """
    if s is None:
        raise NullInputError(f"{name} text cannot be None")
    style = PasswordStyles(style)
    numeric = style & (PasswordStyles.VALUE | PasswordStyles.HEX_VALUE)

    if style & PasswordStyles.PASSWORD:
        if len(s) == length:
            try:
                return [Letter.from_char(c) for c in s], None
            except InvalidLetterError:
                if not numeric:
                    raise
        elif not numeric:
            raise LengthMismatchError(
                f"{name} string must be {length} letters long, got {len(s)} letters!"
            )

    if numeric:
        value = _parse_integer(s, style)
        if value is not None:
            if value < min_value or value > max_value:
                raise OutOfRangeError(
                    f"{name} value must be between {min_value} and {max_value}, got {value}!"
                )
            return None, value

    raise InvalidFormatError(f"Could not parse {s!r} as a {name}!")


def parse_number(s: str, name: str, base: int = 10) -> int:
    """Parse a plain integer literal, reporting failures as InvalidFormatError."""
    if s is None:
        raise NullInputError(f"{name} text cannot be None")
    try:
        return int(s, base)
    except (TypeError, ValueError) as e:
        raise InvalidFormatError(f"Could not parse {s!r} as a {name} value: {e}") from e


_LETTER_DIGITS = {
    "B": (lambda v: format(v, f"0{SHIFT}b"), " "),
    "D": (lambda v: str(v), " "),
    "X": (lambda v: format(v, "X"), ""),
}


def _format_letters(letter_string, mode: str, separator: str) -> str:
    if mode == "S":
        source = letter_string
    elif mode == "C":
        corrected = getattr(letter_string, "corrected", None)
        try:
            source = corrected() if corrected is not None else letter_string
        except CorrectionError:
            # Uncorrectable passwords render as stored
            source = letter_string
    elif mode == "N":
        source = letter_string.normalized()
    elif mode == "R":
        source = letter_string.randomized()
    elif mode in _LETTER_DIGITS:
        digits, default_separator = _LETTER_DIGITS[mode]
        sep = separator if separator else default_separator
        return sep.join(digits(letter.value) for letter in letter_string)
    else:
        raise InvalidFormatError(f"Unknown letter format mode {mode!r}!")
    return separator.join(source.groups())


def _format_binary(value: int, max_value: int, separator: str) -> str:
    width = max(max_value.bit_length(), 1)
    bits = format(value, f"0{width}b")
    if not separator:
        return bits
    groups = []
    # Group from the least significant bit so each group is one letter
    for end in range(len(bits), 0, -SHIFT):
        groups.append(bits[max(end - SHIFT, 0) : end])
    return separator.join(reversed(groups))


def format_letter_string(letter_string, fmt: Optional[str], name: str) -> str:
    """
    Render a letter string with the format mini-language.

    Args:
        letter_string: Letter string to render
        fmt: Format string, None or empty for the type's default
        name: Type name used in error messages

    Raises:
        InvalidFormatError: The format string is not recognized
    """
    if not fmt:
        fmt = letter_string.DEFAULT_FORMAT

    kind = fmt[0]
    if kind == "P":
        mode = fmt[1] if len(fmt) > 1 else "S"
        return _format_letters(letter_string, mode, fmt[2:])
    if kind == "V":
        if fmt.startswith("VB"):
            return _format_binary(
                letter_string.value, letter_string.MAX_VALUE, fmt[2:]
            )
        try:
            return format(letter_string.value, fmt[1:])
        except ValueError as e:
            raise InvalidFormatError(f"Invalid {name} value format {fmt!r}: {e}") from e
    raise InvalidFormatError(f"Invalid {name} format {fmt!r}!")
