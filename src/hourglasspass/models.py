from pydantic import BaseModel, Field
from typing import List

from .password import Password


class LetterInfo(BaseModel):
    """One letter of a decoded password."""

    index: int = Field(..., description="Position of the letter in the password.")
    char: str = Field(..., description="Letter as written.")
    value: int = Field(..., description="4-bit value of the letter.")
    segment: str = Field(..., description="Segment owning the letter.")
    allows_garbage: bool = Field(
        ..., description="Whether the value has a garbage spelling."
    )
    is_garbage: bool = Field(..., description="Whether the letter uses it.")


class PasswordBreakdown(BaseModel):
    """A decoded password with its fields and checksum status."""

    password: str = Field(..., description="The 8-letter password as written.")
    value: int = Field(..., description="Packed 30-bit password value.")
    scene_id: int = Field(..., description="Scene ID field.")
    checksum: int = Field(..., description="Checksum stored in the password.")
    expected_checksum: int = Field(
        ..., description="Checksum the letter spellings call for."
    )
    checksum_valid: bool = Field(
        ..., description="Whether the stored checksum is accepted."
    )
    flags: int = Field(..., description="16 bits of flag data.")
    letters: List[LetterInfo] = Field([], description="Per-letter breakdown.")

    @classmethod
    def from_password(cls, password: Password) -> "PasswordBreakdown":
        letters = []
        for i, letter in enumerate(password):
            if i < Password.CHECKSUM_OFFSET:
                segment = password.scene.NAME
            elif i < Password.FLAGS_OFFSET:
                segment = password.checksum.NAME
            else:
                segment = password.flags.NAME
            letters.append(
                LetterInfo(
                    index=i,
                    char=letter.to_char(),
                    value=letter.value,
                    segment=segment,
                    allows_garbage=letter.allows_garbage,
                    is_garbage=letter.is_garbage,
                )
            )
        return cls(
            password=password.string,
            value=password.value,
            scene_id=password.scene.value,
            checksum=password.checksum.value,
            expected_checksum=password.expected_checksum,
            checksum_valid=password.checksum_valid,
            flags=password.flags.value,
            letters=letters,
        )
