"""
Solitaire Exceptions
=====================

Two failure categories exist.  :class:`InvalidCharacterError` is the only
error a caller is expected to handle: a passphrase or message symbol
outside ``A``-``Z``.  :class:`DeckInvariantError` signals corrupted deck
state and is never caught inside the package.
"""

from __future__ import annotations


class InvalidCharacterError(ValueError):
    """An input symbol is not an uppercase letter ``A``-``Z``."""

    def __init__(self, character: str) -> None:
        self.character = character
        super().__init__(f"invalid character: '{character}'")


class DeckInvariantError(AssertionError):
    """The deck is no longer a permutation of the 54 cards."""

    pass
