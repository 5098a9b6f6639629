"""Enumeration of the five card subsets of a set of cards."""
import itertools
import math
from typing import Iterator, List, Sequence

from poker_hands.core.card import Card
from poker_hands.evaluation.constants import HAND_SIZE


def card_combinations(cards: Sequence[Card]) -> Iterator[List[Card]]:
    """
    Yield every distinct subset of min(len(cards), 5) cards.

    Subsets come in lexicographic order of their indices into `cards`.
    Fewer than five cards yield a single subset holding all of them.
    """
    size = min(len(cards), HAND_SIZE)
    for indices in itertools.combinations(range(len(cards)), size):
        yield [cards[i] for i in indices]


def combination_count(card_count: int) -> int:
    """Number of subsets card_combinations yields for card_count cards."""
    if card_count <= 0:
        return 0
    return math.comb(card_count, min(card_count, HAND_SIZE))
