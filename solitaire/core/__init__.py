"""
Solitaire Core Module
======================

The deck state machine, key scheduler and keystream cipher, plus the
engine facade and result models built on them.
"""

from solitaire.core.cards import JOKER_A, JOKER_B, is_joker, rank_value
from solitaire.core.deck import Deck
from solitaire.core.engine import SolitaireEngine
from solitaire.core.errors import DeckInvariantError, InvalidCharacterError
from solitaire.core.keying import build_deck
from solitaire.core.keystream import Solitaire, apply_keystream, decrypt, encrypt
from solitaire.core.models import (
    CipherMode,
    CipherResult,
    DeckSnapshot,
    KeystreamResult,
)

__all__ = [
    "CipherMode",
    "CipherResult",
    "Deck",
    "DeckInvariantError",
    "DeckSnapshot",
    "InvalidCharacterError",
    "JOKER_A",
    "JOKER_B",
    "KeystreamResult",
    "Solitaire",
    "SolitaireEngine",
    "apply_keystream",
    "build_deck",
    "decrypt",
    "encrypt",
    "is_joker",
    "rank_value",
]
