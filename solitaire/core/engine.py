"""
Solitaire Engine
=================

Central orchestrator for the Solitaire tool.  The engine normalizes raw
user input, keys a fresh deck for every request, runs the cipher core,
and wraps the outcome in a :class:`~shared.models.RunResult` that the
CLI output layer and report generator consume.

Architecture follows the Facade pattern: callers never touch
:class:`~solitaire.core.deck.Deck` directly.

References:
    - Gamma, E., Helm, R., Johnson, R., & Vlissides, J. (1994).
      Design Patterns: Elements of Reusable Object-Oriented Software.
    - Schneier, B. (1999). The Solitaire Encryption Algorithm.
"""

from __future__ import annotations

from typing import Optional

from shared.config import PontifexConfig
from shared.logger import PontifexLogger
from shared.models import RunResult

from solitaire.core.keying import build_deck
from solitaire.core.keystream import Solitaire, pad
from solitaire.core.models import (
    CipherMode,
    CipherResult,
    DeckSnapshot,
    KeystreamResult,
)
from solitaire.parsers.text import normalize


class SolitaireEngine:
    """Orchestrates Solitaire encryption, decryption and inspection.

    Every call keys its own deck, so calls are independent of each other
    and repeated calls with the same input give the same output.

    Usage::

        engine = SolitaireEngine()
        result = engine.encrypt("cryptonomicon", "solitaire")
        print(result.output)          # KIRAK SFJAN

    Attributes:
        config: Pontifex configuration instance.
        logger: Logger for the solitaire engine.
    """

    def __init__(
        self,
        config: Optional[PontifexConfig] = None,
        logger: Optional[PontifexLogger] = None,
    ) -> None:
        self.config = config or PontifexConfig()
        settings = self.config.global_settings
        self.logger = logger or PontifexLogger(
            "solitaire.engine",
            log_level=settings.log_level,
            log_file=settings.log_file,
            json_logs=settings.log_json,
        )

    # ------------------------------------------------------------------ #
    #  Input handling
    # ------------------------------------------------------------------ #

    def normalize(self, text: str) -> str:
        """Apply the configured normalization policy to *text*."""
        cfg = self.config.solitaire
        return normalize(
            text,
            strict=cfg.strict,
            uppercase=cfg.uppercase,
            strip_spaces=cfg.strip_spaces,
        )

    def _cipher(self, key: str) -> Solitaire:
        cfg = self.config.solitaire
        return Solitaire(
            key,
            group_size=cfg.group_size,
            pad_char=cfg.pad_char,
            max_joker_skips=cfg.max_joker_skips,
        )

    # ------------------------------------------------------------------ #
    #  Cipher operations
    # ------------------------------------------------------------------ #

    def encrypt(self, passphrase: str, message: str) -> RunResult:
        """Encrypt *message* under *passphrase*.

        Raises:
            InvalidCharacterError: Either input holds a character outside
                ``A``-``Z`` after normalization.
        """
        return self._run(CipherMode.ENCRYPT, passphrase, message)

    def decrypt(self, passphrase: str, message: str) -> RunResult:
        """Decrypt *message* under *passphrase*.  Padding is kept.

        Raises:
            InvalidCharacterError: Either input holds a character outside
                ``A``-``Z`` after normalization.
        """
        return self._run(CipherMode.DECRYPT, passphrase, message)

    def _run(self, mode: CipherMode, passphrase: str, message: str) -> RunResult:
        cfg = self.config.solitaire
        result = RunResult(tool_name="solitaire", operation=mode.value)
        key = self.normalize(passphrase)
        text = self.normalize(message)

        with self.logger.operation(mode.value):
            self.logger.info(
                "Starting %s",
                mode.value,
                passphrase_letters=len(key),
                message_letters=len(text),
            )
            with self.logger.timed(f"{mode.value} of {len(text)} letters"):
                cipher = self._cipher(key)
                if mode is CipherMode.ENCRYPT:
                    output = cipher.encrypt(text)
                    processed = len(pad(text, block=cfg.group_size, pad_char=cfg.pad_char))
                else:
                    output = cipher.decrypt(text)
                    processed = len(text)

        cipher_result = CipherResult(
            mode=mode,
            passphrase_length=len(key),
            input_length=len(text),
            padded_length=processed,
            group_size=cfg.group_size,
            text=output,
        )
        result.output = output
        result.metadata = cipher_result.model_dump(mode="json")
        return result.finalize(
            f"{mode.value.capitalize()}ed {processed} letters "
            f"into {len(output.split())} blocks"
        )

    # ------------------------------------------------------------------ #
    #  Inspection
    # ------------------------------------------------------------------ #

    def keystream(self, passphrase: str, count: int) -> RunResult:
        """Draw *count* keystream values from a deck keyed by *passphrase*."""
        if count < 0:
            raise ValueError(f"count must be non-negative, got {count}")
        result = RunResult(tool_name="solitaire", operation="keystream")
        key = self.normalize(passphrase)

        with self.logger.operation("keystream"):
            self.logger.info("Drawing %d keystream values", count, passphrase_letters=len(key))
            values = self._cipher(key).keystream(count)

        stream = KeystreamResult(passphrase_length=len(key), values=values)
        result.output = " ".join(str(value) for value in values)
        result.metadata = stream.model_dump(mode="json")
        return result.finalize(f"Drew {count} keystream values")

    def deck(self, passphrase: str) -> RunResult:
        """Report the deck order produced by keying with *passphrase*."""
        result = RunResult(tool_name="solitaire", operation="deck")
        key = self.normalize(passphrase)

        with self.logger.operation("deck"):
            self.logger.info("Keying deck", passphrase_letters=len(key))
            deck = build_deck(key, max_joker_skips=self.config.solitaire.max_joker_skips)

        snapshot = DeckSnapshot(passphrase_length=len(key), cards=list(deck.cards))
        result.output = " ".join(snapshot.labels)
        result.metadata = snapshot.model_dump(mode="json")
        return result.finalize(
            "Keyed deck; jokers at positions %d and %d" % snapshot.jokers
        )
