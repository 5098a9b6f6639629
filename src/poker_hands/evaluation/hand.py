"""Finished poker hands and their ordering."""
from dataclasses import dataclass
from typing import Any, Dict, Tuple

from poker_hands.core.card import Card
from poker_hands.evaluation.constants import HAND_SIZE
from poker_hands.evaluation.rankings import Ranking


@dataclass(frozen=True)
class Hand:
    """
    The best five card hand found for a set of cards.

    Attributes:
        ranking: Ranking category of the hand
        cards: Exactly five cards, most significant first, blank padded
        description: Human readable description, e.g. "full house kings full of sixes"
        ace_is_low: Ace ordering the cards were arranged and are compared under
    """
    ranking: Ranking
    cards: Tuple[Card, ...]
    description: str
    ace_is_low: bool = False

    def __post_init__(self):
        if len(self.cards) != HAND_SIZE:
            raise ValueError(f"A hand holds exactly {HAND_SIZE} cards, got {len(self.cards)}")

    def __str__(self) -> str:
        """Description followed by the cards used."""
        return f"{self.description} [{' '.join(str(card) for card in self.cards)}]"

    def compare_to(self, other: 'Hand') -> int:
        """
        Compare the value of two hands.

        Returns:
            Positive if this hand beats the other, negative if it loses,
            zero if the hands are equal in value
        """
        return compare_hands(self, other)

    def to_dict(self) -> Dict[str, Any]:
        """Plain representation used for serialization."""
        return {
            'ranking': int(self.ranking),
            'cards': [str(card) for card in self.cards],
            'description': self.description,
        }


def compare_hands(first: Hand, second: Hand) -> int:
    """
    Total order over hands: ranking first, then the canonical cards position
    by position. Suits never count. Both hands must share one ace ordering.

    Returns:
        Positive if `first` is stronger, negative if weaker, zero if equal

    Raises:
        ValueError: If the hands were formed under different ace orderings
    """
    if first.ace_is_low != second.ace_is_low:
        raise ValueError("Cannot compare hands formed under different ace orderings")

    if first.ranking != second.ranking:
        return int(first.ranking) - int(second.ranking)

    ace_is_low = first.ace_is_low
    for mine, theirs in zip(first.cards, second.cards):
        difference = mine.rank_index(ace_is_low) - theirs.rank_index(ace_is_low)
        if difference:
            return difference
    return 0
