"""
Solitaire Core Data Models
===========================

Pydantic models for the results of the Solitaire engine.  They carry
what the output layer needs (cipher text, keystream values, deck order)
and the lengths involved, never the passphrase itself.

All models are serialisable to JSON and consumed by both the console
output layer and the JSON report generator.
"""

from __future__ import annotations

import enum

from pydantic import BaseModel, Field, field_validator

from solitaire.core.cards import DECK_SIZE, card_label
from solitaire.core.deck import joker_positions


# ===================================================================== #
#  Enumerations
# ===================================================================== #


class CipherMode(str, enum.Enum):
    """Direction in which the keystream is applied."""

    ENCRYPT = "encrypt"
    DECRYPT = "decrypt"


# ===================================================================== #
#  Result Models
# ===================================================================== #


class CipherResult(BaseModel):
    """Outcome of one encryption or decryption.

    Attributes:
        mode: Direction the keystream was applied in.
        passphrase_length: Number of passphrase letters used for keying.
        input_length: Letters in the normalized input.
        padded_length: Letters actually processed (after ``X`` padding).
        group_size: Letters per output block.
        text: Grouped output text.
    """

    mode: CipherMode
    passphrase_length: int = Field(ge=0)
    input_length: int = Field(ge=0)
    padded_length: int = Field(ge=0)
    group_size: int = Field(default=5, ge=1)
    text: str = ""

    @property
    def letters(self) -> str:
        """Output text without block separators."""
        return self.text.replace(" ", "")


class KeystreamResult(BaseModel):
    """A run of keystream values drawn from a keyed deck.

    Attributes:
        passphrase_length: Number of passphrase letters used for keying.
        values: Keystream values, each in 1-52.
    """

    passphrase_length: int = Field(ge=0)
    values: list[int] = Field(default_factory=list)

    @field_validator("values")
    @classmethod
    def _check_range(cls, v: list[int]) -> list[int]:
        for value in v:
            if not 1 <= value <= 52:
                raise ValueError(f"keystream value out of range: {value}")
        return v

    @property
    def letters(self) -> str:
        """Values as letters; equals the encryption of an all-``A`` plaintext."""
        return "".join(chr(ord("A") + value % 26) for value in self.values)


class DeckSnapshot(BaseModel):
    """The order of a deck at one point in time, top card first.

    Attributes:
        passphrase_length: Number of passphrase letters used for keying.
        cards: The 54 card values.
    """

    passphrase_length: int = Field(default=0, ge=0)
    cards: list[int]

    @field_validator("cards")
    @classmethod
    def _check_permutation(cls, v: list[int]) -> list[int]:
        if sorted(v) != list(range(1, DECK_SIZE + 1)):
            raise ValueError(
                f"a deck must hold each of the cards 1..{DECK_SIZE} exactly once"
            )
        return v

    @property
    def labels(self) -> list[str]:
        return [card_label(card) for card in self.cards]

    @property
    def jokers(self) -> tuple[int, int]:
        """Positions of joker A and joker B."""
        return joker_positions(self.cards)
