import json

import pytest

from shared.config import PontifexConfig
from shared.logger import PontifexLogger
from solitaire.core.engine import SolitaireEngine
from solitaire.core.errors import InvalidCharacterError


@pytest.fixture
def engine():
    logger = PontifexLogger("solitaire.test", console_output=False)
    return SolitaireEngine(logger=logger)


def test_encrypt_normalizes_input(engine):
    result = engine.encrypt("cryptonomicon", "solitaire")
    assert result.output == "KIRAK SFJAN"
    assert result.tool_name == "solitaire"
    assert result.operation == "encrypt"
    assert result.end_time is not None
    assert result.metadata["input_length"] == 9
    assert result.metadata["padded_length"] == 10
    assert result.metadata["passphrase_length"] == 13


def test_decrypt_keeps_padding(engine):
    result = engine.decrypt("CRYPTONOMICON", "KIRAK SFJAN")
    assert result.output == "SOLIT AIREX"
    assert result.metadata["mode"] == "decrypt"
    assert result.metadata["padded_length"] == 10


def test_calls_are_independent(engine):
    first = engine.encrypt("FOO", "AAAAAAAAAAAAAAA").output
    second = engine.encrypt("FOO", "AAAAAAAAAAAAAAA").output
    assert first == second == "ITHZU JIWGR FARMW"


def test_keystream(engine):
    result = engine.keystream("", 10)
    assert result.metadata["values"] == [4, 49, 10, 24, 8, 51, 44, 6, 4, 33]
    assert result.output.split()[:3] == ["4", "49", "10"]


def test_keystream_rejects_negative_count(engine):
    with pytest.raises(ValueError):
        engine.keystream("", -1)


def test_deck_snapshot(engine):
    result = engine.deck("")
    assert result.metadata["cards"] == list(range(1, 55))
    assert result.output.startswith("AC 2C 3C")
    assert "52 and 53" in result.summary


def test_invalid_characters_surface_by_default(engine):
    with pytest.raises(InvalidCharacterError) as excinfo:
        engine.encrypt("KEY", "NO DIGITS 4U")
    assert excinfo.value.character == "4"
    with pytest.raises(InvalidCharacterError):
        engine.deck("KEY!")


def test_configured_group_size():
    config = PontifexConfig()
    config.solitaire.group_size = 4
    engine = SolitaireEngine(config, logger=PontifexLogger("solitaire.test", console_output=False))
    result = engine.encrypt("", "AAAAAA")
    assert result.output == "EXKY IZPD"
    assert result.metadata["padded_length"] == 8


def test_lenient_mode_drops_non_letters():
    config = PontifexConfig()
    config.solitaire.strict = False
    engine = SolitaireEngine(config, logger=PontifexLogger("solitaire.test", console_output=False))
    assert engine.encrypt("CRYPTONOMICON", "soli-taire 2!").output == "KIRAK SFJAN"


def test_engine_log_holds_counts_not_secrets(tmp_path):
    log_file = tmp_path / "engine.log"
    logger = PontifexLogger(
        "solitaire.test",
        log_level="INFO",
        log_file=log_file,
        json_logs=True,
        console_output=False,
    )
    SolitaireEngine(logger=logger).encrypt("CRYPTONOMICON", "SOLITAIRE")
    for handler in logger.underlying.handlers:
        handler.flush()

    text = log_file.read_text(encoding="utf-8")
    assert "CRYPTONOMICON" not in text
    assert "SOLITAIRE" not in text
    start = json.loads(text.splitlines()[0])
    assert start["operation"] == "encrypt"
    assert start["extra"] == {"passphrase_letters": 13, "message_letters": 9}
