"""
Card Model
===========

A Solitaire deck holds the 52 cards of a bridge deck plus two jokers.
Cards are plain integers: 1-52 for the suited cards (clubs, diamonds,
hearts, spades in bridge order) and 53 / 54 for the two jokers.

The jokers are distinct identities while the deck is shuffled (each one
moves by its own rule) but count the same when a card's value feeds a
cut or the keystream: both are worth 53.

Reference:
    Schneier, B. (1999). The Solitaire Encryption Algorithm.
    Appendix I of Stephenson, N. Cryptonomicon.
"""

from __future__ import annotations

DECK_SIZE: int = 54

JOKER_A: int = 53
JOKER_B: int = 54

# Both jokers count as 53.
JOKER_VALUE: int = JOKER_A

ALPHABET: str = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"

_SUITS = ("C", "D", "H", "S")
_FACES = ("A", "2", "3", "4", "5", "6", "7", "8", "9", "T", "J", "Q", "K")


def is_joker(card: int) -> bool:
    """True iff *card* is one of the two jokers."""
    return card == JOKER_A or card == JOKER_B


def rank_value(card: int) -> int:
    """Effective rank used for counting: 53 for either joker, else the card."""
    if is_joker(card):
        return JOKER_VALUE
    return card


def card_label(card: int) -> str:
    """Short human-readable label, e.g. ``AC``, ``TD``, ``KS``, ``JA``."""
    if card == JOKER_A:
        return "JA"
    if card == JOKER_B:
        return "JB"
    if not 1 <= card <= 52:
        raise ValueError(f"not a card: {card!r}")
    suit, face = divmod(card - 1, 13)
    return _FACES[face] + _SUITS[suit]


def identity_order() -> list[int]:
    """The unkeyed deck: 1..52, then joker A, then joker B."""
    return list(range(1, DECK_SIZE + 1))
