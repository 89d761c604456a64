"""
Solitaire Deck
===============

The deck is the cipher's entire state: an ordered permutation of the 54
card values, position 0 being the top of the face-up deck.  All of the
algorithm's shuffling is built from one primitive, :meth:`Deck.reorder`,
which rebuilds the deck from a list of slices, plus adjacent swaps in
:meth:`Deck.move_down`.

One step of the generator (:meth:`Deck.step`) is:

1. Move joker A down one card, joker B down two cards, treating the
   deck as circular (a card moved past the bottom lands just below the
   top card).
2. Triple cut: swap the cards above the first joker with the cards below
   the second joker.
3. Count cut: read the bottom card's value *n*, move the top *n* cards to
   just above the bottom card.

:meth:`Deck.output` steps, then counts down from the top by the top
card's value; the card found there is the keystream value, unless it is
a joker, in which case the deck is stepped again.

Reference:
    Schneier, B. (1999). The Solitaire Encryption Algorithm.
    https://www.schneier.com/academic/solitaire/
"""

from __future__ import annotations

import logging
from typing import Iterable, Optional, Sequence

from solitaire.core.cards import (
    DECK_SIZE,
    JOKER_A,
    JOKER_B,
    identity_order,
    is_joker,
    rank_value,
)
from solitaire.core.errors import DeckInvariantError

logger = logging.getLogger(__name__)

_LAST = DECK_SIZE - 1


class Deck:
    """A 54-card Solitaire deck and its deterministic state transition.

    A deck is keyed once, then consumed sequentially for one message.
    It is not thread-safe; build one deck per message.

    Usage::

        deck = Deck()
        deck.step()
        value = deck.output()

    Args:
        cards:           Initial order; defaults to the unkeyed deck.
        max_joker_skips: Consecutive joker output candidates tolerated by
                         :meth:`output` before the deck is declared broken.
    """

    def __init__(
        self,
        cards: Optional[Iterable[int]] = None,
        *,
        max_joker_skips: int = 10_000,
    ) -> None:
        if cards is None:
            order = identity_order()
        else:
            order = list(cards)
            if sorted(order) != identity_order():
                raise ValueError(
                    f"a deck must hold each of the cards 1..{DECK_SIZE} exactly once"
                )
        self._cards: list[int] = order
        self._max_joker_skips = max_joker_skips

    # ------------------------------------------------------------------ #
    #  Inspection
    # ------------------------------------------------------------------ #

    @property
    def cards(self) -> tuple[int, ...]:
        """Current order, top card first."""
        return tuple(self._cards)

    def __len__(self) -> int:
        return len(self._cards)

    def __repr__(self) -> str:
        return f"Deck({self._cards!r})"

    def locate(self, target: int) -> int:
        """Return the position of *target*.

        Raises:
            DeckInvariantError: The card is missing, i.e. the deck no
                longer holds a permutation.
        """
        try:
            return self._cards.index(target)
        except ValueError:
            raise DeckInvariantError(f"card not found: {target}") from None

    # ------------------------------------------------------------------ #
    #  Primitives
    # ------------------------------------------------------------------ #

    def reorder(self, *ranges: tuple[int, int]) -> None:
        """Rebuild the deck from the ``(start, end)`` slices, in order.

        A range with ``start > end`` contributes nothing.  The caller
        supplies ranges that partition ``0..53``.
        """
        rebuilt: list[int] = []
        for start, end in ranges:
            if start <= end:
                rebuilt.extend(self._cards[start:end])
        self._cards = rebuilt

    def move_down(self, position: int, offset: int) -> None:
        """Move the card at *position* down by *offset* places.

        A card at the bottom wraps to just below the top card.
        """
        cards = self._cards
        for _ in range(offset):
            if position == _LAST:
                self.reorder((0, 1), (_LAST, DECK_SIZE), (1, _LAST))
                cards = self._cards
                position = 1
            else:
                cards[position], cards[position + 1] = cards[position + 1], cards[position]
                position += 1

    # ------------------------------------------------------------------ #
    #  Shuffle operations
    # ------------------------------------------------------------------ #

    def move_jokers(self) -> None:
        """Joker A down one card, then joker B down two cards."""
        self.move_down(self.locate(JOKER_A), 1)
        self.move_down(self.locate(JOKER_B), 2)

    def triple_cut(self) -> None:
        """Swap the cards above the first joker with those below the second."""
        lo, hi = self.locate(JOKER_A), self.locate(JOKER_B)
        if lo > hi:
            lo, hi = hi, lo
        hi += 1
        self.reorder((hi, DECK_SIZE), (lo, hi), (0, lo))

    def count_cut(self, count: int) -> None:
        """Move the top *count* cards to just above the bottom card."""
        self.reorder((count, _LAST), (0, count), (_LAST, DECK_SIZE))

    def step(self) -> None:
        """Advance the deck by one full state transition."""
        self.move_jokers()
        self.triple_cut()
        self.count_cut(rank_value(self._cards[_LAST]))

    # ------------------------------------------------------------------ #
    #  Keystream
    # ------------------------------------------------------------------ #

    def output(self) -> int:
        """Step the deck and return the next keystream value (1-52).

        Joker candidates are discarded and the deck is stepped again.

        Raises:
            DeckInvariantError: More than ``max_joker_skips`` consecutive
                jokers were drawn.
        """
        for _ in range(self._max_joker_skips + 1):
            self.step()
            candidate = self._cards[rank_value(self._cards[0])]
            if not is_joker(candidate):
                return candidate
            logger.debug("Output card is joker %d, stepping again", candidate)
        raise DeckInvariantError(
            f"no non-joker output after {self._max_joker_skips} skips"
        )

    def outputs(self, count: int) -> list[int]:
        """Return the next *count* keystream values."""
        return [self.output() for _ in range(count)]


def joker_positions(cards: Sequence[int]) -> tuple[int, int]:
    """Positions of joker A and joker B in *cards*."""
    return cards.index(JOKER_A), cards.index(JOKER_B)
