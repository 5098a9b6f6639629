"""Pair, flush and straight detection over canonical five card hands.

Every function here expects the cards in canonical order (see
canonical.form_cards) and only inspects fixed positions.
"""
from typing import List, Optional, Sequence

from poker_hands.core.card import Card, Rank
from poker_hands.evaluation.constants import HAND_SIZE, WHEEL


def cards_for_rank(cards: Sequence[Card], rank: Optional[Rank]) -> List[Card]:
    """All real cards of the given rank; blanks never share a rank."""
    if rank is None:
        return []
    return [card for card in cards if card.rank == rank]


def rank_count(cards: Sequence[Card], card: Card) -> int:
    """Number of cards sharing the rank of `card` (a blank counts as one)."""
    if card.is_blank:
        return 1
    return len(cards_for_rank(cards, card.rank))


def has_blank_cards(cards: Sequence[Card]) -> bool:
    """Whether any card is a blank placeholder."""
    return any(card.is_blank for card in cards)


def has_pairs(cards: Sequence[Card], expected: Sequence[int]) -> bool:
    """
    Check the pair signature of a canonical hand.

    Args:
        cards: Five cards in canonical order
        expected: For each position, how many cards share that position's rank

    Returns:
        True if every position matches its expected count
    """
    return all(
        rank_count(cards, cards[i]) == expected[i]
        for i in range(HAND_SIZE)
    )


def has_flush(cards: Sequence[Card]) -> bool:
    """All five cards share a suit."""
    if has_blank_cards(cards):
        return False
    suit = cards[0].suit
    return all(card.suit == suit for card in cards)


def has_straight(cards: Sequence[Card], ace_is_low: bool = False) -> bool:
    """Five consecutive descending ranks, or the wheel 5-4-3-2-A."""
    if has_blank_cards(cards):
        return False
    indices = [card.rank.index(ace_is_low) for card in cards]
    consecutive = all(
        indices[i - 1] == indices[i] + 1
        for i in range(1, HAND_SIZE)
    )
    return consecutive or has_low_straight(cards)


def has_low_straight(cards: Sequence[Card]) -> bool:
    """Whether the canonical hand is exactly the wheel 5-4-3-2-A."""
    return tuple(card.rank for card in cards) == WHEEL
