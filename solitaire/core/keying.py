"""
Key Scheduler
==============

Keys a deck from a passphrase.  Starting from the unkeyed deck, every
passphrase letter runs one ordinary step followed by an extra count cut
by the letter's position in the alphabet (A = 1 ... Z = 26).  The extra
cut is what separates keying from plain keystream generation.
"""

from __future__ import annotations

import logging

from solitaire.core.deck import Deck
from solitaire.core.errors import InvalidCharacterError

logger = logging.getLogger(__name__)


def letter_index(character: str) -> int:
    """Zero-based alphabet position of *character* (A = 0).

    Raises:
        InvalidCharacterError: *character* is not in ``A``-``Z``.
    """
    if len(character) != 1 or not "A" <= character <= "Z":
        raise InvalidCharacterError(character)
    return ord(character) - ord("A")


def build_deck(passphrase: str, *, max_joker_skips: int = 10_000) -> Deck:
    """Return a deck keyed by *passphrase*.

    An empty passphrase yields the unkeyed deck.

    Raises:
        InvalidCharacterError: The passphrase holds a character outside
            ``A``-``Z``.  Raised before the offending letter is applied.
    """
    deck = Deck(max_joker_skips=max_joker_skips)
    for character in passphrase:
        index = letter_index(character)
        deck.step()
        deck.count_cut(index + 1)
    logger.debug("Keyed deck with %d passphrase letters", len(passphrase))
    return deck
