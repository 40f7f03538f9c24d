import random

import pytest

from hourglasspass.errors import (
    CorrectionError,
    IndexOutOfRangeError,
    InvalidLetterError,
    LengthMismatchError,
    OutOfRangeError,
)
from hourglasspass.letters import CANONICAL_CHARS, GARBAGE_CHARS, Letter
from hourglasspass.password import Password
from hourglasspass.scene_id import SceneId
from hourglasspass.segments import PasswordChecksum

ALPHABET = CANONICAL_CHARS + GARBAGE_CHARS


def random_password_string(rng, blank_correction_letter=True):
    chars = [rng.choice(ALPHABET) for _ in range(Password.LENGTH)]
    if blank_correction_letter:
        chars[1] = rng.choice("ZA")
    return "".join(chars)


def test_constants():
    assert Password.LENGTH == 8
    assert Password.MAX_VALUE == 0x3FFFFFFF
    assert Password.CHECKSUM_OFFSET == 3
    assert Password.FLAGS_OFFSET == 4


def test_all_blank_password_is_zero():
    assert Password("ZZZZZZZZ").value == 0
    assert Password.zero().value == 0
    assert Password().string == "ZZZZZZZZ"


def test_value_layout():
    pw = Password((0x2A5 << 20) | (0x7 << 16) | 0xBEEF)
    assert pw.scene.value == 0x2A5
    assert pw.checksum.value == 0x7
    assert pw.flags.value == 0xBEEF
    assert pw.string == pw.scene.string + pw.checksum.string + pw.flags.string


def test_round_trip():
    rng = random.Random(99)
    for value in [0, Password.MAX_VALUE] + [rng.randint(0, Password.MAX_VALUE) for _ in range(200)]:
        pw = Password(value)
        assert pw.value == value
        assert Password(pw.letters).value == value
        assert Password(pw.string).value == value


def test_entry_points_agree():
    text = "AYBWQOXK"
    by_string = Password(text)
    by_letters = Password([Letter.from_char(c) for c in text])
    by_value = Password(by_string.value)
    assert by_string.string == by_letters.string == text
    assert by_value.value == by_string.value
    assert Password(by_string).string == text


def test_index_dispatch():
    pw = Password("ZZZQZZZZ")
    assert pw[3] == Letter(8)
    pw[5] = "Y"
    assert pw.flags.string == "ZYZZ"
    pw[0] = "T"
    assert pw.scene.value == 5
    with pytest.raises(IndexOutOfRangeError):
        pw[8]
    with pytest.raises(IndexOutOfRangeError):
        pw[-1] = "Z"


def test_failed_write_leaves_password_untouched():
    pw = Password("AYBWQOXK")
    with pytest.raises(InvalidLetterError):
        pw.string = "AYBWQOX1"
    with pytest.raises(LengthMismatchError):
        pw.string = "AYB"
    with pytest.raises(OutOfRangeError):
        pw.value = Password.MAX_VALUE + 1
    assert pw.string == "AYBWQOXK"


def test_scene_id_property():
    pw = Password()
    pw.scene_id = SceneId(0x301)
    assert pw.scene.value == 0x301
    assert isinstance(pw.scene_id, SceneId)
    assert pw.scene_id == 0x301
    pw.scene_id = 7
    assert pw.scene.value == 7


def test_garbage_spelling_changes_checksum_not_value():
    canonical = Password("ZZZZZZZZ")
    garbage = Password("AZZZZZZZ")
    assert canonical.value == garbage.value
    assert canonical == garbage
    assert canonical.expected_checksum == 0
    assert garbage.expected_checksum == 1


def test_expected_checksum_does_not_mutate():
    pw = Password("AZZZZZZZ")
    assert pw.expected_checksum == 1
    assert pw.checksum.value == 0
    assert not pw.checksum_valid
    pw.fix_checksum()
    assert pw.checksum.string == "Y"
    assert pw.checksum_valid


def test_correct_terminal_checksum():
    pw = Password("AAAZAZZZ")
    assert pw.expected_checksum == PasswordChecksum.MAX_VALUE

    assert pw.correct() is True
    assert pw.scene[1] == Letter(0)
    assert pw.scene[1].to_char() == "Z"
    assert pw.checksum.value == 0b1101
    assert pw.string == "AZAKAZZZ"
    assert pw.checksum_valid


def test_correct_without_terminal_checksum():
    pw = Password("AZZZZZZZ")
    assert pw.correct() is False
    assert pw.string == "AZZYZZZZ"


def test_correct_is_idempotent():
    pw = Password("AAAZAZZZ").corrected()
    again = pw.corrected()
    assert again.string == pw.string
    assert again == pw


def test_corrected_leaves_source_untouched():
    pw = Password("AAAZAZZZ")
    assert pw.corrected().string == "AZAKAZZZ"
    assert pw.string == "AAAZAZZZ"


def test_correction_letter_must_be_blank():
    pw = Password("ANAZAAZZ")
    with pytest.raises(CorrectionError):
        pw.correct()


def test_checksum_never_terminal_after_correct():
    rng = random.Random(2024)
    for _ in range(500):
        pw = Password(random_password_string(rng))
        pw.correct()
        assert pw.checksum.value < PasswordChecksum.MAX_VALUE
        assert pw.checksum_valid


def test_normalize_recomputes_checksum():
    pw = Password("AZZWBZZZ")
    normalized = pw.normalized()
    assert normalized.string == "ZZZZYZZZ"
    assert normalized.checksum_valid


def test_normalize_with_garbage_blanks():
    assert Password("ZZZZYZZZ").normalized("A").string == "AAARYAAA"


def test_normalize_rejects_bad_garbage_char():
    pw = Password("ABZZBZZZ")
    with pytest.raises(InvalidLetterError):
        pw.normalize("Q")
    assert pw.string == "ABZZBZZZ"


def test_normalize_is_idempotent():
    rng = random.Random(5)
    for _ in range(50):
        once = Password(random_password_string(rng)).normalized()
        twice = once.normalized()
        assert twice.string == once.string
        assert twice == once


def test_randomize_keeps_fields_and_refreshes_checksum(rng):
    pw = Password((0x103 << 20) | 0x4321)
    for _ in range(50):
        randomized = pw.randomized(rng)
        assert randomized.scene.value == pw.scene.value
        assert randomized.flags.value == pw.flags.value
        assert randomized.checksum.value == randomized.expected_checksum


def test_equality_with_raw_values():
    pw = Password("AZZZQZZZ")
    assert pw == "ZZZZQZZZ"
    assert pw == 8
    assert pw != 9
    assert int(pw) == 8
    assert str(pw) == "AZZZQZZZ"
