"""
Exceptions raised by the hourglasspass codec.

Every error describes exactly one malformed input and is raised immediately;
no operation partially applies a write before failing.
"""


class HourglassPassError(Exception):
    """Base exception for password codec errors"""

    pass


class InvalidLetterError(HourglassPassError, ValueError):
    """A character is not part of the password alphabet"""

    pass


class LengthMismatchError(HourglassPassError, ValueError):
    """A letter string or letter array has the wrong length"""

    pass


class OutOfRangeError(HourglassPassError, ValueError):
    """An integer lies outside its declared bounds"""

    pass


class IndexOutOfRangeError(OutOfRangeError, IndexError):
    """A letter index lies outside the letter string"""

    pass


class InvalidFormatError(HourglassPassError, ValueError):
    """Unparseable text or an unrecognized format string"""

    pass


class NullInputError(HourglassPassError, TypeError):
    """A required argument was None"""

    pass


class CorrectionError(HourglassPassError):
    """The checksum could not be corrected at the fixed correction letter"""

    pass
