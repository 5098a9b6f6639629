"""
Property based tests for hand evaluation.

Random draws come from a standard deck so every generated input is a set of
distinct real cards.
"""
import itertools

import pytest
from hypothesis import given, settings, strategies as st

from poker_hands.core.deck import Deck
from poker_hands.evaluation.canonical import form_cards
from poker_hands.evaluation.evaluator import evaluate_hand
from poker_hands.evaluation.hand import compare_hands
from poker_hands.evaluation.options import Options, Sorting
from poker_hands.evaluation.rankings import matching_rules

FULL_DECK = Deck().get_cards()


def draws(min_size, max_size):
    """Lists of distinct cards from a single deck."""
    return st.lists(st.sampled_from(FULL_DECK), min_size=min_size, max_size=max_size, unique=True)


options_strategy = st.builds(
    Options,
    sorting=st.sampled_from(Sorting),
    ignore_straights=st.booleans(),
    ignore_flushes=st.booleans(),
    ace_is_low=st.booleans(),
)


def sign(value):
    return (value > 0) - (value < 0)


@pytest.mark.property_test
@given(draws(1, 5), options_strategy)
@settings(max_examples=500, deadline=None)
def test_exactly_one_ranking_matches(cards, options):
    """Every canonical hand, blank padded or not, matches exactly one ranking rule."""
    formed = form_cards(cards, options)
    assert len(formed) == 5
    assert len(matching_rules(formed, options)) == 1


@pytest.mark.property_test
@given(draws(7, 7))
@settings(deadline=None)
def test_best_of_seven_beats_every_subset(cards):
    """The selected hand is at least as strong as every five card subset."""
    best = evaluate_hand(cards)
    for subset in itertools.combinations(cards, 5):
        assert compare_hands(best, evaluate_hand(list(subset))) >= 0


@pytest.mark.property_test
@given(draws(7, 7))
@settings(deadline=None)
def test_low_sorting_picks_weakest_subset(cards):
    options = Options(sorting=Sorting.LOW)
    worst = evaluate_hand(cards, options)
    for subset in itertools.combinations(cards, 5):
        assert compare_hands(worst, evaluate_hand(list(subset), options)) <= 0


@pytest.mark.property_test
@given(draws(1, 7), draws(1, 7))
def test_comparator_is_antisymmetric(cards1, cards2):
    a, b = evaluate_hand(cards1), evaluate_hand(cards2)
    assert sign(compare_hands(a, b)) == -sign(compare_hands(b, a))
    assert compare_hands(a, a) == 0


@pytest.mark.property_test
@given(draws(5, 7), draws(5, 7), draws(5, 7))
def test_comparator_is_transitive(cards1, cards2, cards3):
    hands = [evaluate_hand(cards) for cards in (cards1, cards2, cards3)]
    for x, y, z in itertools.permutations(hands):
        if compare_hands(x, y) <= 0 and compare_hands(y, z) <= 0:
            assert compare_hands(x, z) <= 0


@pytest.mark.property_test
@given(draws(1, 7), options_strategy)
def test_evaluated_hands_use_input_cards(cards, options):
    hand = evaluate_hand(cards, options)
    real = [card for card in hand.cards if not card.is_blank]
    assert len(hand.cards) == 5
    assert len(real) == min(len(cards), 5)
    assert all(card in cards for card in real)
