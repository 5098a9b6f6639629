"""Tests for pair, flush and straight detection."""
import pytest

from poker_hands.core.card import cards_from_string
from poker_hands.evaluation.canonical import form_cards
from poker_hands.evaluation.constants import PAIR_SIGNATURES
from poker_hands.evaluation.options import Options
from poker_hands.evaluation.predicates import (
    cards_for_rank, has_blank_cards, has_flush, has_pairs, has_straight
)


def canonical(hand, **options):
    return form_cards(cards_from_string(hand), Options(**options))


@pytest.mark.parametrize("hand,signature", [
    ("As Kd 9c 4h 2s", 'none'),
    ("As Ad 9c 4h 2s", 'pair'),
    ("As Ad 9c 9h 2s", 'two_pair'),
    ("As Ad Ac 4h 2s", 'three_of_a_kind'),
    ("As Ad Ac 4h 4s", 'full_house'),
    ("As Ad Ac Ah 2s", 'four_of_a_kind'),
    ("As Kd", 'none'),
    ("As Ad", 'pair'),
    ("As Ad Kc Kh", 'two_pair'),
    ("As Ad Ac", 'three_of_a_kind'),
    ("As Ad Ac Ah", 'four_of_a_kind'),
])
def test_pair_signatures(hand, signature):
    cards = canonical(hand)
    matches = [name for name, expected in PAIR_SIGNATURES.items() if has_pairs(cards, expected)]
    assert matches == [signature]


def test_flush():
    assert has_flush(canonical("2s 4s 6s 8s Ts"))
    assert not has_flush(canonical("2s 4s 6s 8s Th"))


def test_blanks_never_flush_or_straight():
    cards = canonical("As Ks Qs Js")
    assert has_blank_cards(cards)
    assert not has_flush(cards)
    assert not has_straight(cards)


@pytest.mark.parametrize("hand,expected", [
    ("Ts Jh Qd Kc As", True),
    ("9s Th Jd Qc Kh", True),
    ("As 2h 3d 4c 5s", True),
    ("2s 3h 4d 5c 6h", True),
    ("Ks As 2h 3d 4c", False),   # no wrap around
    ("2s 3h 4d 5c 7h", False),
])
def test_straight_ace_high(hand, expected):
    assert has_straight(canonical(hand)) == expected


@pytest.mark.parametrize("hand,expected", [
    ("As 2h 3d 4c 5s", True),
    ("9s Th Jd Qc Kh", True),
    ("Ts Jh Qd Kc As", False),   # ace cannot play high
])
def test_straight_ace_low(hand, expected):
    assert has_straight(canonical(hand, ace_is_low=True), ace_is_low=True) == expected


def test_cards_for_rank_ignores_blanks():
    cards = canonical("As Ad")
    assert len(cards_for_rank(cards, cards[0].rank)) == 2
    assert cards_for_rank(cards, None) == []
