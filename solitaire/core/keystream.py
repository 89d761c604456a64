"""
Keystream Cipher
=================

Combines the deck's keystream with A-Z text.  Encryption adds each
keystream value to the letter's alphabet index modulo 26; decryption
adds ``52 - value``, which is the same as subtracting modulo 26.

Output is written in blocks of five letters separated by single spaces.
Plaintext is padded with ``X`` to a whole number of blocks before
encryption; decryption neither pads nor strips, so a decrypted message
keeps its padding.
"""

from __future__ import annotations

import logging
from typing import Optional

from solitaire.core.cards import ALPHABET
from solitaire.core.deck import Deck
from solitaire.core.keying import build_deck, letter_index

logger = logging.getLogger(__name__)

DEFAULT_GROUP_SIZE: int = 5
DEFAULT_PAD_CHAR: str = "X"


def pad(text: str, *, block: int = DEFAULT_GROUP_SIZE, pad_char: str = DEFAULT_PAD_CHAR) -> str:
    """Right-pad *text* with *pad_char* to a multiple of *block* letters.

    Raises:
        ValueError: *block* is below 1 or *pad_char* is not a single character.
    """
    if block < 1:
        raise ValueError(f"block must be at least 1, got {block}")
    if len(pad_char) != 1:
        raise ValueError(f"pad_char must be a single character, got {pad_char!r}")
    remainder = len(text) % block
    if remainder:
        text += pad_char * (block - remainder)
    return text


def group(letters: str, size: int = DEFAULT_GROUP_SIZE) -> str:
    """Split *letters* into space-separated blocks of *size*."""
    return " ".join(letters[i:i + size] for i in range(0, len(letters), size))


def apply_keystream(
    deck: Deck,
    message: str,
    decrypting: bool,
    *,
    group_size: int = DEFAULT_GROUP_SIZE,
) -> str:
    """Combine *message* with the keystream drawn from *deck*.

    Every character is validated before the deck is advanced, so an
    invalid message leaves the deck untouched and yields no output.

    Args:
        deck:       Keyed deck; one keystream value is consumed per letter.
        message:    Uppercase ``A``-``Z`` text without separators.
        decrypting: Subtract the keystream instead of adding it.
        group_size: Letters per output block.

    Raises:
        InvalidCharacterError: *message* holds a character outside ``A``-``Z``.
    """
    indices = [letter_index(character) for character in message]

    letters: list[str] = []
    for index in indices:
        value = deck.output()
        if decrypting:
            value = 52 - value
        letters.append(ALPHABET[(index + value) % 26])

    logger.debug(
        "Applied keystream to %d letters (decrypting=%s)", len(indices), decrypting
    )
    return group("".join(letters), group_size)


def encrypt(
    deck: Deck,
    plaintext: str,
    *,
    group_size: int = DEFAULT_GROUP_SIZE,
    pad_char: str = DEFAULT_PAD_CHAR,
) -> str:
    """Pad *plaintext* to whole blocks and encrypt it with *deck*."""
    padded = pad(plaintext, block=group_size, pad_char=pad_char)
    return apply_keystream(deck, padded, False, group_size=group_size)


def decrypt(
    deck: Deck,
    ciphertext: str,
    *,
    group_size: int = DEFAULT_GROUP_SIZE,
) -> str:
    """Decrypt *ciphertext* with *deck*.  Padding is left in place."""
    return apply_keystream(deck, ciphertext, True, group_size=group_size)


class Solitaire:
    """A keyed deck bundled with the cipher operations.

    One instance processes one message stream: every call consumes
    keystream from the same deck, so encrypting and then decrypting
    with a single instance does *not* round-trip.  Build a fresh
    instance per message.

    Usage::

        >>> Solitaire("CRYPTONOMICON").encrypt("SOLITAIRE")
        'KIRAK SFJAN'

    Args:
        passphrase:      Uppercase ``A``-``Z`` key; empty means unkeyed.
        group_size:      Letters per output block (and padding unit).
        pad_char:        Letter appended to short plaintexts.
        max_joker_skips: Forwarded to :class:`Deck`.
    """

    def __init__(
        self,
        passphrase: str = "",
        *,
        group_size: int = DEFAULT_GROUP_SIZE,
        pad_char: str = DEFAULT_PAD_CHAR,
        max_joker_skips: int = 10_000,
        deck: Optional[Deck] = None,
    ) -> None:
        self.deck = deck if deck is not None else build_deck(
            passphrase, max_joker_skips=max_joker_skips
        )
        self.group_size = group_size
        self.pad_char = pad_char

    def encrypt(self, plaintext: str) -> str:
        """Pad and encrypt *plaintext*, consuming keystream from the deck."""
        return encrypt(
            self.deck, plaintext, group_size=self.group_size, pad_char=self.pad_char
        )

    def decrypt(self, ciphertext: str) -> str:
        """Decrypt *ciphertext*; padding letters are kept."""
        return decrypt(self.deck, ciphertext, group_size=self.group_size)

    def keystream(self, count: int) -> list[int]:
        """Next *count* keystream values (1-52)."""
        return self.deck.outputs(count)
