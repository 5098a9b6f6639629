"""Card related classes and utilities."""
from dataclasses import dataclass
from enum import Enum
from typing import Optional


class Suit(Enum):
    """Card suits."""
    CLUBS = 'c'
    DIAMONDS = 'd'
    HEARTS = 'h'
    SPADES = 's'

    def __str__(self) -> str:
        return self.value

    @property
    def symbol(self) -> str:
        """Display symbol for the suit, e.g. '♠'."""
        return SUIT_SYMBOLS[self]


class Rank(Enum):
    """Card ranks, declared from lowest to highest with the ace high."""
    TWO = '2'
    THREE = '3'
    FOUR = '4'
    FIVE = '5'
    SIX = '6'
    SEVEN = '7'
    EIGHT = '8'
    NINE = '9'
    TEN = 'T'
    JACK = 'J'
    QUEEN = 'Q'
    KING = 'K'
    ACE = 'A'

    def __str__(self) -> str:
        return self.value

    @property
    def singular_name(self) -> str:
        """Singular display name, e.g. 'six'."""
        return RANK_NAMES[self][0]

    @property
    def plural_name(self) -> str:
        """Plural display name, e.g. 'sixes'."""
        return RANK_NAMES[self][1]

    def index(self, ace_is_low: bool = False) -> int:
        """
        Position of the rank in an ascending ordering.

        Args:
            ace_is_low: Use the ace-low ordering (A < 2 < ... < K) instead of
                        the ace-high one (2 < ... < K < A)

        Returns:
            0 for the lowest rank up to 12 for the highest
        """
        if ace_is_low:
            return _ACE_LOW_INDEX[self]
        return _ACE_HIGH_INDEX[self]


SUIT_SYMBOLS = {
    Suit.CLUBS: '♣',
    Suit.DIAMONDS: '♦',
    Suit.HEARTS: '♥',
    Suit.SPADES: '♠',
}

RANK_NAMES = {
    Rank.TWO: ('two', 'twos'),
    Rank.THREE: ('three', 'threes'),
    Rank.FOUR: ('four', 'fours'),
    Rank.FIVE: ('five', 'fives'),
    Rank.SIX: ('six', 'sixes'),
    Rank.SEVEN: ('seven', 'sevens'),
    Rank.EIGHT: ('eight', 'eights'),
    Rank.NINE: ('nine', 'nines'),
    Rank.TEN: ('ten', 'tens'),
    Rank.JACK: ('jack', 'jacks'),
    Rank.QUEEN: ('queen', 'queens'),
    Rank.KING: ('king', 'kings'),
    Rank.ACE: ('ace', 'aces'),
}

_ACE_HIGH_INDEX = {rank: i for i, rank in enumerate(Rank)}
_ACE_LOW_INDEX = {rank: i for i, rank in enumerate([Rank.ACE] + [r for r in Rank if r != Rank.ACE])}

BLANK_TOKEN = '??'


@dataclass(frozen=True)
class Card:
    """
    Represents a playing card.

    A card with neither rank nor suit is a blank: a placeholder used to pad
    hands built from fewer than five real cards.

    Attributes:
        rank: Card rank (2-A), None for a blank
        suit: Card suit, None for a blank
    """
    rank: Optional[Rank]
    suit: Optional[Suit]

    def __str__(self) -> str:
        """String representation in format 'As' for Ace of spades."""
        if self.is_blank:
            return BLANK_TOKEN
        return f"{self.rank}{self.suit}"

    @property
    def is_blank(self) -> bool:
        """Whether this card is a blank placeholder."""
        return self.rank is None

    @property
    def symbol(self) -> str:
        """Display token using the suit symbol, e.g. 'A♠'."""
        if self.is_blank:
            return BLANK_TOKEN
        return f"{self.rank}{self.suit.symbol}"

    def rank_index(self, ace_is_low: bool = False) -> int:
        """Rank position used for comparison; blanks sort below every rank."""
        if self.is_blank:
            return -1
        return self.rank.index(ace_is_low)

    @classmethod
    def blank(cls) -> 'Card':
        """Create a blank placeholder card."""
        return cls(rank=None, suit=None)

    @classmethod
    def from_string(cls, card_str: str) -> 'Card':
        """
        Create a Card from a string representation.

        Args:
            card_str: String in format 'As' or 'A♠' for Ace of spades,
                     or '??' for a blank

        Returns:
            Card instance

        Raises:
            ValueError: If string format is invalid
        """
        if len(card_str) != 2:
            raise ValueError(f"Invalid card string: {card_str}")

        if card_str == BLANK_TOKEN:
            return cls.blank()

        rank_str, suit_str = card_str[0], card_str[1]

        try:
            rank = next(r for r in Rank if r.value == rank_str.upper())
            suit = next(
                s for s in Suit
                if s.value == suit_str.lower() or s.symbol == suit_str
            )
        except StopIteration:
            raise ValueError(f"Invalid rank or suit in: {card_str}")

        return cls(rank=rank, suit=suit)


def cards_from_string(cards_str: str) -> list[Card]:
    """
    Parse a whitespace or comma separated list of cards.

    Example: 'As Kd 5c' or 'As,Kd,5c'
    """
    tokens = cards_str.replace(',', ' ').split()
    return [Card.from_string(token) for token in tokens]
