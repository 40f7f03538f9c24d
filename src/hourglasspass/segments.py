"""
Password segments: the Scene ID, Checksum and Flag Data fields of a Password.
"""

from .letter_string import LetterString


class PasswordSceneId(LetterString):
    """The scene a password resumes at. The last letter holds only 2 bits."""

    NAME = "Scene ID"
    LENGTH = 3
    MAX_VALUE = 0x3FF


class PasswordChecksum(LetterString):
    """Records which ambiguous letters of the password were written as garbage."""

    NAME = "Checksum"
    LENGTH = 1
    MAX_VALUE = 0xF


class PasswordFlagData(LetterString):
    """16 bits of story flags."""

    NAME = "Flag Data"
    LENGTH = 4
    MAX_VALUE = 0xFFFF
