"""Deck implementation."""
from typing import List, Optional
import random

from .card import Card, Rank, Suit


class Deck:
    """
    A standard 52 card deck.

    Attributes:
        cards: List of cards in the deck, the last card is the top
    """

    def __init__(self, rng: Optional[random.Random] = None):
        """
        Initialize a new deck.

        Args:
            rng: Random source used for shuffling, defaults to the module one
        """
        self.cards: List[Card] = []
        self._rng = rng or random.Random()
        self._initialize_deck()

    def _initialize_deck(self) -> None:
        """Create a fresh deck of cards."""
        for suit in Suit:
            for rank in Rank:
                self.cards.append(Card(rank=rank, suit=suit))

    def shuffle(self, times: int = 1) -> None:
        """
        Shuffle the deck.

        Args:
            times: Number of times to shuffle
        """
        for _ in range(times):
            self._rng.shuffle(self.cards)

    def deal_card(self) -> Optional[Card]:
        """
        Deal a single card from the top of the deck.

        Returns:
            Card or None if deck is empty
        """
        if not self.cards:
            return None
        return self.cards.pop()

    def deal_cards(self, count: int) -> List[Card]:
        """
        Deal multiple cards from the top of the deck.

        Args:
            count: Number of cards to deal

        Returns:
            List of cards (may be fewer than requested if deck runs out)
        """
        cards = []
        for _ in range(count):
            card = self.deal_card()
            if card is None:
                break
            cards.append(card)
        return cards

    def remove_card(self, card: Card) -> Card:
        """
        Remove a specific card from the deck.

        Raises:
            ValueError: If card not in deck
        """
        try:
            self.cards.remove(card)
        except ValueError:
            raise ValueError(f"Card {card} not in deck")
        return card

    def get_cards(self) -> List[Card]:
        """Get all cards in the deck."""
        return self.cards.copy()

    @property
    def size(self) -> int:
        """Number of cards in the deck."""
        return len(self.cards)
