"""
Standalone Scene ID value.

Unlike the Scene ID segment inside a Password, a SceneId only stores its value:
its letters are always canonical and normalizing or randomizing does nothing.
Its default text is the decimal value rather than the letter string.
"""

import random
from typing import Optional

from . import config
from .letters import Letter
from .segments import PasswordSceneId


class SceneId(PasswordSceneId):
    """A scene identifier between 0 and 0x3FF."""

    DEFAULT_FORMAT = "V"

    def _write(self, index: int, letter: Letter) -> None:
        super()._write(index, letter.normalized())

    def normalize(self, garbage_char: str = config.DEFAULT_GARBAGE_CHAR) -> None:
        pass

    def randomize(self, rng: Optional[random.Random] = None) -> None:
        pass
