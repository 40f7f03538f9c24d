"""
Password Checksum Engine

The checksum is a bit pattern of which ambiguous letters were written in their
garbage spelling. Letters are scanned in password order, skipping the checksum
letter itself; every letter that has a garbage spelling consumes the next bit
index, and the bit is set when the letter is garbage:

    password  A Z B | . | Q Z X D
    eligible  0 1 2       3 4 - 5
    garbage   1 0 1       0 0 - 1
    checksum  bits 0..3 -> 0b0101

Only the first four eligible letters fit in the 4-bit checksum.

The game rejects the terminal checksum letter (value 15, ``X``). Correction
rewrites the blank letter at Scene ID index 1 in its canonical spelling, which
clears a bit of the all-ones pattern, and recomputes once.
"""

from .errors import CorrectionError
from .letters import Letter
from .lib.logging_utils import get_logger, log
from .segments import PasswordChecksum

# Scene ID letter rewritten by correction, always zero-valued in game scene IDs
CORRECTION_INDEX = 1

logger = get_logger("checksum")


def compute_checksum(password) -> int:
    """
    Compute the checksum a password's letter spellings call for.

    Args:
        password: Password whose letters are scanned

    Returns:
        Checksum value masked to PasswordChecksum.MAX_VALUE
    """
    checksum_start = password.CHECKSUM_OFFSET
    checksum_end = checksum_start + PasswordChecksum.LENGTH

    value = 0
    index = 0
    for position, letter in enumerate(password):
        if checksum_start <= position < checksum_end:
            continue
        if letter.allows_garbage:
            if letter.is_garbage:
                value |= 1 << index
            index += 1
    return value & PasswordChecksum.MAX_VALUE


def fix_checksum(password) -> int:
    """Store the computed checksum in the password and return it."""
    value = compute_checksum(password)
    password.checksum.value = value
    return value


def correct_checksum(password) -> bool:
    """
    Fix the checksum, avoiding the terminal checksum letter.

    Returns:
        True if the correction letter had to be rewritten

    Raises:
        CorrectionError: The checksum is terminal but the correction letter is
            not blank, so it cannot be respelled without changing the value
    """
    if fix_checksum(password) != PasswordChecksum.MAX_VALUE:
        return False

    letter = password.scene[CORRECTION_INDEX]
    if letter.value != 0:
        raise CorrectionError(
            f"Cannot correct checksum of {password.string}: Scene ID letter "
            f"{CORRECTION_INDEX} is {letter.to_char()!r}, expected a blank letter!"
        )

    log(
        logger,
        "debug",
        "Terminal checksum, respelling correction letter",
        password=password.string,
        index=CORRECTION_INDEX,
    )
    password.scene[CORRECTION_INDEX] = Letter(0)
    fix_checksum(password)
    return True
