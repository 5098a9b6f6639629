"""Canonical ordering of a five card hand."""
import logging
from typing import Dict, List, Sequence

from poker_hands.core.card import Card, Rank
from poker_hands.evaluation.constants import HAND_SIZE, WHEEL_ACE_HIGH
from poker_hands.evaluation.options import Options, DEFAULT_OPTIONS

logger = logging.getLogger(__name__)


def form_cards(cards: Sequence[Card], options: Options = DEFAULT_OPTIONS) -> List[Card]:
    """
    Arrange up to five cards in the order every ranking rule expects.

    Cards are sorted by rank, highest first under the active ace ordering,
    then grouped so the largest groups come first (ties broken by rank).
    Short hands are padded with blanks. The wheel A-5-4-3-2 is always turned
    into 5-4-3-2-A so its five is the high card.

    Args:
        cards: Between one and five real cards
        options: Active rule options

    Returns:
        Exactly five cards in canonical order

    Raises:
        ValueError: If more than five cards or a blank card are given
    """
    if len(cards) > HAND_SIZE:
        raise ValueError(f"Cannot form more than {HAND_SIZE} cards, got {len(cards)}")
    if any(card.is_blank for card in cards):
        raise ValueError("Blank cards cannot be formed into a hand")

    ace_is_low = options.ace_is_low
    ordered = sorted(cards, key=lambda c: c.rank.index(ace_is_low), reverse=True)

    groups: Dict[Rank, List[Card]] = {}
    for card in ordered:
        groups.setdefault(card.rank, []).append(card)

    # dicts keep insertion order, so equal sized groups stay highest rank first
    formed = [
        card
        for group in sorted(groups.values(), key=len, reverse=True)
        for card in group
    ]

    formed.extend(Card.blank() for _ in range(HAND_SIZE - len(formed)))

    return form_low_straight(formed)


def form_low_straight(cards: List[Card]) -> List[Card]:
    """Move the ace of an A-5-4-3-2 hand to the end."""
    if tuple(card.rank for card in cards) == WHEEL_ACE_HIGH:
        logger.debug("Wheel detected, playing the ace low")
        return cards[1:] + cards[:1]
    return cards
