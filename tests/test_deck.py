import pytest

from solitaire.core.cards import (
    JOKER_A,
    JOKER_B,
    card_label,
    identity_order,
    is_joker,
    rank_value,
)
from solitaire.core.deck import Deck
from solitaire.core.errors import DeckInvariantError
from solitaire.core.keying import build_deck

FULL_DECK = list(range(1, 55))

# Unkeyed keystream from Schneier's description; a joker is skipped
# between 10 and 24.
UNKEYED_KEYSTREAM = [4, 49, 10, 24, 8, 51, 44, 6, 4, 33]


def assert_permutation(deck):
    assert len(deck) == 54
    assert sorted(deck.cards) == FULL_DECK


@pytest.mark.parametrize(
    "card,joker,value",
    [
        (1, False, 1),
        (52, False, 52),
        (JOKER_A, True, 53),
        (JOKER_B, True, 53),
    ],
)
def test_card_rank(card, joker, value):
    assert is_joker(card) is joker
    assert rank_value(card) == value


def test_card_labels():
    assert card_label(1) == "AC"
    assert card_label(10) == "TC"
    assert card_label(14) == "AD"
    assert card_label(52) == "KS"
    assert card_label(JOKER_A) == "JA"
    assert card_label(JOKER_B) == "JB"
    with pytest.raises(ValueError):
        card_label(0)


def test_new_deck_is_unkeyed_order():
    deck = Deck()
    assert deck.cards == tuple(identity_order())
    assert deck.cards[-2:] == (JOKER_A, JOKER_B)


def test_deck_rejects_non_permutation():
    with pytest.raises(ValueError):
        Deck([1] * 54)
    with pytest.raises(ValueError):
        Deck(range(1, 54))


def test_locate_finds_each_card():
    deck = build_deck("FOO")
    for position, card in enumerate(deck.cards):
        assert deck.locate(card) == position


def test_locate_missing_card_is_invariant_violation():
    deck = Deck()
    deck._cards[53] = 1
    with pytest.raises(DeckInvariantError):
        deck.locate(JOKER_B)


def test_reorder_skips_inverted_ranges():
    deck = Deck()
    deck.reorder((10, 54), (5, 3), (0, 10))
    assert deck.cards == tuple(range(11, 55)) + tuple(range(1, 11))


def test_move_down_swaps_with_next_card():
    deck = Deck()
    deck.move_down(0, 2)
    assert deck.cards[:3] == (2, 3, 1)
    assert_permutation(deck)


def test_move_down_from_bottom_wraps_below_top_card():
    deck = Deck()
    deck.move_down(53, 1)
    assert deck.cards == (1, JOKER_B) + tuple(range(2, 54))


def test_move_down_wraps_mid_move():
    deck = Deck()
    deck.move_down(52, 2)
    assert deck.cards == (1, JOKER_A) + tuple(range(2, 53)) + (JOKER_B,)


def test_move_jokers_from_unkeyed_deck():
    deck = Deck()
    deck.move_jokers()
    assert deck.cards == (1, JOKER_B) + tuple(range(2, 53)) + (JOKER_A,)


def test_triple_cut_swaps_outer_sections():
    order = [1, 2, JOKER_A, 3, 4, JOKER_B] + list(range(5, 53))
    deck = Deck(order)
    deck.triple_cut()
    assert deck.cards == tuple(range(5, 53)) + (JOKER_A, 3, 4, JOKER_B, 1, 2)


def test_triple_cut_with_joker_b_first():
    order = [1, JOKER_B, 2, JOKER_A] + list(range(3, 53))
    deck = Deck(order)
    deck.triple_cut()
    assert deck.cards == tuple(range(3, 53)) + (JOKER_B, 2, JOKER_A, 1)


def test_triple_cut_with_jokers_at_both_ends_is_noop():
    order = [JOKER_A] + list(range(1, 53)) + [JOKER_B]
    deck = Deck(order)
    deck.triple_cut()
    assert deck.cards == tuple(order)


def test_count_cut_keeps_bottom_card():
    deck = Deck()
    deck.count_cut(5)
    assert deck.cards == tuple(range(6, 54)) + (1, 2, 3, 4, 5, JOKER_B)


@pytest.mark.parametrize("count", [0, 53])
def test_count_cut_degenerate_counts_are_noops(count):
    deck = Deck()
    deck.count_cut(count)
    assert deck.cards == tuple(identity_order())


def test_first_step_from_unkeyed_deck():
    deck = Deck()
    deck.step()
    assert deck.cards == tuple(range(2, 53)) + (JOKER_A, JOKER_B, 1)


def test_permutation_holds_after_every_operation():
    deck = build_deck("CRYPTONOMICON")
    for _ in range(300):
        deck.move_jokers()
        assert_permutation(deck)
        deck.triple_cut()
        assert_permutation(deck)
        deck.count_cut(rank_value(deck.cards[-1]))
        assert_permutation(deck)
        deck.step()
        assert_permutation(deck)


def test_unkeyed_keystream():
    deck = Deck()
    assert deck.outputs(10) == UNKEYED_KEYSTREAM


def test_output_skips_joker_candidate(monkeypatch):
    steps = []
    original_step = Deck.step

    def counting_step(self):
        steps.append(1)
        original_step(self)

    monkeypatch.setattr(Deck, "step", counting_step)

    deck = Deck()
    assert deck.outputs(3) == UNKEYED_KEYSTREAM[:3]
    assert len(steps) == 3

    # The fourth cycle lands on a joker and needs a second step.
    assert deck.output() == 24
    assert len(steps) == 5


def test_fourth_unkeyed_step_lands_on_joker():
    deck = Deck()
    deck.outputs(3)
    deck.step()
    candidate = deck.cards[rank_value(deck.cards[0])]
    assert is_joker(candidate)


def test_output_never_returns_joker_value():
    deck = build_deck("BCD")
    values = deck.outputs(2000)
    assert all(1 <= value <= 52 for value in values)


def test_joker_skip_cap_raises():
    deck = Deck(max_joker_skips=0)
    deck.outputs(3)
    with pytest.raises(DeckInvariantError):
        deck.output()
