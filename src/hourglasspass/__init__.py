"""
hourglasspass - Password codec for Hourglass of Summer save states.

A password is 8 letters encoding a Scene ID, a checksum and 16 flag bits.
Letters 0-9 have two accepted spellings and the checksum records which
spelling each ambiguous letter was written in, catching most transcription
mistakes when the password is typed back in.

Example Usage:
    from hourglasspass import Password

    pw = Password.parse("ZAZZQZZZ")
    pw.correct()
    print(pw)                # ZAZWQZZZ
    print(f"{pw:PS }")       # ZAZ W QZZZ
    print(f"{pw:V08X}")      # 00020008
"""

from .errors import (
    HourglassPassError,
    InvalidLetterError,
    LengthMismatchError,
    OutOfRangeError,
    IndexOutOfRangeError,
    InvalidFormatError,
    NullInputError,
    CorrectionError,
)
from .letters import Letter
from .letter_string import LetterString
from .formatting import PasswordStyles
from .segments import PasswordSceneId, PasswordChecksum, PasswordFlagData
from .scene_id import SceneId
from .password import Password
from .checksum import compute_checksum, correct_checksum, fix_checksum

__version__ = "0.1.0"
__description__ = "Password codec for Hourglass of Summer save states"

__all__ = [
    "Letter",
    "LetterString",
    "PasswordStyles",
    "PasswordSceneId",
    "PasswordChecksum",
    "PasswordFlagData",
    "SceneId",
    "Password",
    "compute_checksum",
    "correct_checksum",
    "fix_checksum",
    # Errors
    "HourglassPassError",
    "InvalidLetterError",
    "LengthMismatchError",
    "OutOfRangeError",
    "IndexOutOfRangeError",
    "InvalidFormatError",
    "NullInputError",
    "CorrectionError",
]
