"""
Hourglass of Summer Passwords

A Password is 8 letters made of three segments:

    letters   S S S | C | F F F F
    segment   Scene ID  Checksum  Flag Data
    bits      29..20    19..16    15..0

The packed value is ``scene << 20 | checksum << 16 | flags``. Writing any
letter, segment, string or value updates the packed value; the checksum is
only recomputed by normalize(), randomize(), fix_checksum() and correct().
"""

import random
from typing import List, Optional

from . import config
from .checksum import compute_checksum, correct_checksum, fix_checksum
from .letter_string import LetterString
from .letters import Letter, validate_garbage_char
from .scene_id import SceneId
from .segments import PasswordChecksum, PasswordFlagData, PasswordSceneId


class Password(LetterString):
    """A complete password: Scene ID, Checksum and Flag Data."""

    NAME = "Password"

    SCENE_SHIFT = 20
    CHECKSUM_SHIFT = 16

    SCENE_OFFSET = 0
    CHECKSUM_OFFSET = PasswordSceneId.LENGTH
    FLAGS_OFFSET = CHECKSUM_OFFSET + PasswordChecksum.LENGTH

    LENGTH = PasswordSceneId.LENGTH + PasswordChecksum.LENGTH + PasswordFlagData.LENGTH
    MIN_VALUE = 0
    MAX_VALUE = (
        (PasswordSceneId.MAX_VALUE << SCENE_SHIFT)
        | (PasswordChecksum.MAX_VALUE << CHECKSUM_SHIFT)
        | PasswordFlagData.MAX_VALUE
    )

    @classmethod
    def zero(cls) -> "Password":
        """The blank password, ``ZZZZZZZZ``."""
        return cls("Z" * cls.LENGTH)

    # --- Storage primitives ---

    def _reset(self) -> None:
        self.scene = PasswordSceneId()
        self.checksum = PasswordChecksum()
        self.flags = PasswordFlagData()

    def _segment_at(self, index: int):
        """Get the segment owning a password index and the index within it."""
        if index < self.CHECKSUM_OFFSET:
            return self.scene, index - self.SCENE_OFFSET
        if index < self.FLAGS_OFFSET:
            return self.checksum, index - self.CHECKSUM_OFFSET
        return self.flags, index - self.FLAGS_OFFSET

    def _read(self, index: int) -> Letter:
        segment, local = self._segment_at(index)
        return segment[local]

    def _write(self, index: int, letter: Letter) -> None:
        segment, local = self._segment_at(index)
        segment[local] = letter

    def _pack(self) -> int:
        return (
            (self.scene.value << self.SCENE_SHIFT)
            | (self.checksum.value << self.CHECKSUM_SHIFT)
            | self.flags.value
        )

    def _unpack(self, value: int) -> None:
        self.scene.value = (value >> self.SCENE_SHIFT) & PasswordSceneId.MAX_VALUE
        self.checksum.value = (value >> self.CHECKSUM_SHIFT) & PasswordChecksum.MAX_VALUE
        self.flags.value = value & PasswordFlagData.MAX_VALUE

    @property
    def letters(self) -> List[Letter]:
        return self.scene.letters + self.checksum.letters + self.flags.letters

    @letters.setter
    def letters(self, letters) -> None:
        letters = self._validate_letters(letters)
        self._load_segments(
            letters[self.SCENE_OFFSET : self.CHECKSUM_OFFSET],
            letters[self.CHECKSUM_OFFSET : self.FLAGS_OFFSET],
            letters[self.FLAGS_OFFSET :],
        )

    @property
    def string(self) -> str:
        return f"{self.scene.string}{self.checksum.string}{self.flags.string}"

    @string.setter
    def string(self, s: str) -> None:
        self._validate_string(s)
        s = s.upper()
        self._load_segments(
            s[self.SCENE_OFFSET : self.CHECKSUM_OFFSET],
            s[self.CHECKSUM_OFFSET : self.FLAGS_OFFSET],
            s[self.FLAGS_OFFSET :],
        )

    def _load_segments(self, scene, checksum, flags) -> None:
        # Build every segment before assigning so a failure leaves self untouched
        segments = (PasswordSceneId(scene), PasswordChecksum(checksum), PasswordFlagData(flags))
        self.scene, self.checksum, self.flags = segments

    def groups(self) -> List[str]:
        return [self.scene.string, self.checksum.string, self.flags.string]

    @property
    def scene_id(self) -> SceneId:
        return SceneId(self.scene.value)

    @scene_id.setter
    def scene_id(self, scene_id) -> None:
        self.scene.value = SceneId(scene_id).value

    # --- Checksum ---

    @property
    def expected_checksum(self) -> int:
        """The checksum value the current letter spellings call for."""
        return compute_checksum(self)

    @property
    def checksum_valid(self) -> bool:
        """True when the stored checksum matches the spellings and is not terminal."""
        value = self.checksum.value
        return value == compute_checksum(self) and value != PasswordChecksum.MAX_VALUE

    def fix_checksum(self) -> int:
        """Recompute the checksum without correcting a terminal value."""
        return fix_checksum(self)

    def correct(self) -> bool:
        """
        Correct the password so the game's password input accepts it.

        Returns:
            True if a letter had to be respelled to avoid the terminal checksum
        """
        return correct_checksum(self)

    def corrected(self) -> "Password":
        result = self.copy()
        result.correct()
        return result

    # --- Mutation ---

    def normalize(self, garbage_char: str = config.DEFAULT_GARBAGE_CHAR) -> None:
        validate_garbage_char(garbage_char)
        self.scene.normalize(garbage_char)
        self.checksum.normalize(garbage_char)
        self.flags.normalize(garbage_char)
        self.fix_checksum()

    def randomize(self, rng: Optional[random.Random] = None) -> None:
        self.scene.randomize(rng)
        self.checksum.randomize(rng)
        self.flags.randomize(rng)
        self.fix_checksum()
