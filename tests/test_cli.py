import json

import pytest
from click.testing import CliRunner

from solitaire import __version__
from solitaire.cli import cli


@pytest.fixture
def runner():
    return CliRunner()


def _invoke(runner, *args, **kwargs):
    return runner.invoke(cli, list(args), obj={}, **kwargs)


def test_encrypt_text_output(runner):
    result = _invoke(runner, "-o", "text", "encrypt", "CRYPTONOMICON", "solitaire")
    assert result.exit_code == 0, result.output
    assert result.output.strip() == "KIRAK SFJAN"


def test_decrypt_text_output(runner):
    result = _invoke(runner, "-o", "text", "decrypt", "cryptonomicon", "KIRAK SFJAN")
    assert result.exit_code == 0, result.output
    assert result.output.strip() == "SOLIT AIREX"


def test_encrypt_reads_stdin(runner):
    result = _invoke(
        runner, "-o", "text", "encrypt", "CRYPTONOMICON", "-", input="solitaire\n"
    )
    assert result.exit_code == 0, result.output
    assert result.output.strip() == "KIRAK SFJAN"


def test_json_output(runner):
    result = _invoke(runner, "-o", "json", "encrypt", "F", "AAAAAAAAAAAAAAA")
    assert result.exit_code == 0, result.output
    report = json.loads(result.output)
    assert report["generator"]["name"] == "pontifex"
    assert report["result"]["output"] == "XYIUQ BMHKK JBEGY"
    assert report["result"]["metadata"]["mode"] == "encrypt"


def test_console_output_contains_ciphertext(runner):
    result = _invoke(runner, "encrypt", "", "AAAAAAAAAA")
    assert result.exit_code == 0, result.output
    assert "EXKYI ZSGEH" in result.output


def test_report_file(runner, tmp_path):
    report_path = tmp_path / "out" / "report.json"
    result = _invoke(
        runner, "-q", "-o", "text", "-f", str(report_path), "encrypt", "FOO", "AAAAA"
    )
    assert result.exit_code == 0, result.output
    assert result.output.strip() == "ITHZU"
    report = json.loads(report_path.read_text(encoding="utf-8"))
    assert report["result"]["operation"] == "encrypt"


def test_keystream_command(runner):
    result = _invoke(runner, "-o", "text", "keystream", "", "--count", "10")
    assert result.exit_code == 0, result.output
    assert result.output.strip() == "4 49 10 24 8 51 44 6 4 33"


def test_deck_command(runner):
    result = _invoke(runner, "-o", "text", "deck", "")
    assert result.exit_code == 0, result.output
    labels = result.output.split()
    assert labels[:2] == ["AC", "2C"]
    assert labels[-2:] == ["JA", "JB"]


def test_invalid_character_is_fatal(runner):
    result = _invoke(runner, "-o", "text", "encrypt", "KEY", "HELLO1")
    assert result.exit_code == 1
    assert "failed to encrypt" in result.output
    assert "invalid character: '1'" in result.output


def test_invalid_passphrase_is_fatal(runner):
    result = _invoke(runner, "-o", "text", "deck", "KEY-1")
    assert result.exit_code == 1
    assert "failed to initialize deck" in result.output


def test_lenient_config_drops_non_letters(runner, tmp_path):
    config_path = tmp_path / "lenient.toml"
    config_path.write_text("[solitaire]\nstrict = false\n", encoding="utf-8")
    result = _invoke(
        runner, "-c", str(config_path), "-o", "text", "encrypt", "CRYPTONOMICON", "soli-taire!"
    )
    assert result.exit_code == 0, result.output
    assert result.output.strip() == "KIRAK SFJAN"


def test_invalid_config_value_is_rejected(runner, tmp_path):
    config_path = tmp_path / "bad.toml"
    config_path.write_text("[solitaire]\ngroup_size = 0\n", encoding="utf-8")
    result = _invoke(runner, "-c", str(config_path), "-o", "text", "encrypt", "KEY", "HELLO")
    assert result.exit_code == 1
    assert "invalid configuration" in result.output
    assert "group_size" in result.output


def test_version(runner):
    result = _invoke(runner, "--version")
    assert result.exit_code == 0
    assert __version__ in result.output
