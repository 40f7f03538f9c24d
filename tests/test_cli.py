import json

import pytest
from click.testing import CliRunner

from hourglasspass.cli.main import cli
from hourglasspass.password import Password
from hourglasspass.segments import PasswordChecksum


@pytest.fixture
def runner():
    return CliRunner()


def last_line(result):
    return result.output.strip().splitlines()[-1]


def test_decode_json(runner):
    result = runner.invoke(cli, ["decode", "ZAZWQZZZ", "--json"])
    assert result.exit_code == 0, result.output
    data = json.loads(result.output)
    assert data["password"] == "ZAZWQZZZ"
    assert data["value"] == 0x20008
    assert data["scene_id"] == 0
    assert data["flags"] == 8
    assert data["checksum_valid"] is True
    assert len(data["letters"]) == 8
    assert data["letters"][1]["is_garbage"] is True
    assert data["letters"][3]["segment"] == "Checksum"


def test_decode_table(runner):
    result = runner.invoke(cli, ["decode", "AZZZZZZZ"])
    assert result.exit_code == 0, result.output
    assert "Password AZZZZZZZ" in result.output
    assert "invalid" in result.output


def test_decode_value(runner):
    result = runner.invoke(cli, ["decode", "8", "--style", "value", "--json"])
    assert result.exit_code == 0, result.output
    assert json.loads(result.output)["password"] == "ZZZZQZZZ"


def test_decode_rejects_bad_text(runner):
    result = runner.invoke(cli, ["decode", "ZZZ"])
    assert result.exit_code == 1
    assert "Error" in result.output


def test_encode(runner):
    result = runner.invoke(cli, ["encode", "--scene", "0", "--flags", "8"])
    assert result.exit_code == 0, result.output
    assert last_line(result) == "ZZZZQZZZ"


def test_encode_random_is_correct(runner):
    result = runner.invoke(
        cli, ["encode", "--scene", "2", "--flags", "4660", "--random", "--seed", "3"]
    )
    assert result.exit_code == 0, result.output
    pw = Password(last_line(result))
    assert pw.scene.value == 2
    assert pw.flags.value == 4660
    assert pw.checksum_valid


@pytest.mark.parametrize("seed", range(200))
def test_encode_random_with_non_blank_correction_letter(runner, seed):
    result = runner.invoke(
        cli, ["encode", "--scene", "1023", "--random", "--seed", str(seed)]
    )
    assert result.exit_code == 0, result.output
    pw = Password(last_line(result))
    assert pw.scene.value == 1023
    assert pw.flags.value == 0
    assert pw.checksum_valid
    assert pw.checksum.value != PasswordChecksum.MAX_VALUE


def test_encode_rejects_out_of_range_scene(runner):
    result = runner.invoke(cli, ["encode", "--scene", "1024"])
    assert result.exit_code != 0


def test_format(runner):
    result = runner.invoke(cli, ["format", "ZAZWQZZZ", "PS "])
    assert result.exit_code == 0, result.output
    assert last_line(result) == "ZAZ W QZZZ"


def test_format_unknown_mode(runner):
    result = runner.invoke(cli, ["format", "ZAZWQZZZ", "Q"])
    assert result.exit_code == 1
    assert "Invalid" in result.output


def test_correct(runner):
    result = runner.invoke(cli, ["correct", "AAAZAZZZ"])
    assert result.exit_code == 0, result.output
    assert last_line(result) == "AZAKAZZZ"


def test_normalize(runner):
    result = runner.invoke(cli, ["normalize", "AZZZBZZZ"])
    assert result.exit_code == 0, result.output
    assert last_line(result) == "ZZZZYZZZ"


def test_normalize_rejects_bad_garbage_char(runner):
    result = runner.invoke(cli, ["normalize", "AZZZBZZZ", "--garbage-char", "Q"])
    assert result.exit_code == 1


def test_randomize(runner):
    result = runner.invoke(cli, ["randomize", "ZZZZQZZZ", "--seed", "9"])
    assert result.exit_code == 0, result.output
    pw = Password(last_line(result))
    assert pw.flags.value == 8
    assert pw.checksum.value == pw.expected_checksum


def test_verify(runner):
    assert runner.invoke(cli, ["verify", "ZZZZZZZZ"]).exit_code == 0
    assert runner.invoke(cli, ["verify", "AZZZZZZZ"]).exit_code == 1
    assert runner.invoke(cli, ["verify", "AZZYZZZZ"]).exit_code == 0
