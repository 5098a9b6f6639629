"""Hand ranking categories and the rules that recognize them."""
from abc import ABC, abstractmethod
from enum import IntEnum
from typing import Sequence, Tuple
import logging

from poker_hands.core.card import Card, Rank
from poker_hands.evaluation.constants import PAIR_SIGNATURES
from poker_hands.evaluation.exceptions import ClassificationError
from poker_hands.evaluation.options import Options
from poker_hands.evaluation.predicates import has_flush, has_pairs, has_straight

logger = logging.getLogger(__name__)


class Ranking(IntEnum):
    """
    The ten hand rankings, weakest first.

    Examples:
        HIGH_CARD        A♠ K♠ J♣ 7♥ 5♦
        PAIR             A♠ A♣ K♣ J♥ 5♦
        TWO_PAIR         A♠ A♣ J♣ J♦ 5♦
        THREE_OF_A_KIND  A♠ A♣ A♦ J♥ 5♦
        STRAIGHT         A♠ K♣ Q♦ J♥ T♦
        FLUSH            T♠ 7♠ 4♠ 3♠ 2♠
        FULL_HOUSE       4♠ 4♣ 4♦ 2♠ 2♥
        FOUR_OF_A_KIND   A♠ A♣ A♦ A♥ 5♥
        STRAIGHT_FLUSH   5♥ 4♥ 3♥ 2♥ A♥
        ROYAL_FLUSH      A♥ K♥ Q♥ J♥ T♥
    """
    HIGH_CARD = 0
    PAIR = 1
    TWO_PAIR = 2
    THREE_OF_A_KIND = 3
    STRAIGHT = 4
    FLUSH = 5
    FULL_HOUSE = 6
    FOUR_OF_A_KIND = 7
    STRAIGHT_FLUSH = 8
    ROYAL_FLUSH = 9

    def __str__(self) -> str:
        return self.name.lower().replace('_', ' ')


class RankingRule(ABC):
    """Recognizes one ranking in a canonical five card hand and describes it."""

    ranking: Ranking

    @abstractmethod
    def is_valid(self, cards: Sequence[Card], options: Options) -> bool:
        """Whether the canonical hand belongs to this ranking."""
        pass

    @abstractmethod
    def describe(self, cards: Sequence[Card]) -> str:
        """Human readable description of a hand of this ranking."""
        pass


def _straight(cards: Sequence[Card], options: Options) -> bool:
    """Straight that counts under the options."""
    return not options.ignore_straights and has_straight(cards, options.ace_is_low)


def _flush(cards: Sequence[Card], options: Options) -> bool:
    """Flush that counts under the options."""
    return not options.ignore_flushes and has_flush(cards)


def _top_rank(cards: Sequence[Card]) -> Rank:
    return cards[0].rank


class HighCardRule(RankingRule):
    ranking = Ranking.HIGH_CARD

    def is_valid(self, cards, options):
        return (
            has_pairs(cards, PAIR_SIGNATURES['none'])
            and not _straight(cards, options)
            and not _flush(cards, options)
        )

    def describe(self, cards):
        return f"high card {_top_rank(cards).singular_name} high"


class PairRule(RankingRule):
    ranking = Ranking.PAIR

    def is_valid(self, cards, options):
        return has_pairs(cards, PAIR_SIGNATURES['pair'])

    def describe(self, cards):
        return f"pair of {_top_rank(cards).plural_name}"


class TwoPairRule(RankingRule):
    ranking = Ranking.TWO_PAIR

    def is_valid(self, cards, options):
        return has_pairs(cards, PAIR_SIGNATURES['two_pair'])

    def describe(self, cards):
        return f"two pair {cards[0].rank.plural_name} and {cards[2].rank.plural_name}"


class ThreeOfAKindRule(RankingRule):
    ranking = Ranking.THREE_OF_A_KIND

    def is_valid(self, cards, options):
        return has_pairs(cards, PAIR_SIGNATURES['three_of_a_kind'])

    def describe(self, cards):
        return f"three of a kind {_top_rank(cards).plural_name}"


class StraightRule(RankingRule):
    ranking = Ranking.STRAIGHT

    def is_valid(self, cards, options):
        return _straight(cards, options) and not _flush(cards, options)

    def describe(self, cards):
        return f"straight {_top_rank(cards).singular_name} high"


class FlushRule(RankingRule):
    ranking = Ranking.FLUSH

    def is_valid(self, cards, options):
        return _flush(cards, options) and not _straight(cards, options)

    def describe(self, cards):
        return f"flush {_top_rank(cards).singular_name} high"


class FullHouseRule(RankingRule):
    ranking = Ranking.FULL_HOUSE

    def is_valid(self, cards, options):
        return has_pairs(cards, PAIR_SIGNATURES['full_house'])

    def describe(self, cards):
        return f"full house {cards[0].rank.plural_name} full of {cards[3].rank.plural_name}"


class FourOfAKindRule(RankingRule):
    ranking = Ranking.FOUR_OF_A_KIND

    def is_valid(self, cards, options):
        return has_pairs(cards, PAIR_SIGNATURES['four_of_a_kind'])

    def describe(self, cards):
        return f"four of a kind {_top_rank(cards).plural_name}"


class StraightFlushRule(RankingRule):
    ranking = Ranking.STRAIGHT_FLUSH

    def is_valid(self, cards, options):
        return (
            _straight(cards, options)
            and _flush(cards, options)
            and _top_rank(cards) != Rank.ACE
        )

    def describe(self, cards):
        return f"straight flush {_top_rank(cards).singular_name} high"


class RoyalFlushRule(RankingRule):
    ranking = Ranking.ROYAL_FLUSH

    def is_valid(self, cards, options):
        return (
            _straight(cards, options)
            and _flush(cards, options)
            and _top_rank(cards) == Rank.ACE
        )

    def describe(self, cards):
        return "royal flush"


# Weakest to strongest, one rule per Ranking
RANKING_RULES: Tuple[RankingRule, ...] = (
    HighCardRule(),
    PairRule(),
    TwoPairRule(),
    ThreeOfAKindRule(),
    StraightRule(),
    FlushRule(),
    FullHouseRule(),
    FourOfAKindRule(),
    StraightFlushRule(),
    RoyalFlushRule(),
)


def matching_rules(cards: Sequence[Card], options: Options) -> list:
    """Every rule that accepts the canonical hand; exactly one for valid input."""
    return [rule for rule in RANKING_RULES if rule.is_valid(cards, options)]


def classify(cards: Sequence[Card], options: Options) -> Tuple[Ranking, str]:
    """
    Find the ranking of a canonical five card hand.

    Args:
        cards: Five cards as produced by canonical.form_cards
        options: Active rule options

    Returns:
        Tuple of (ranking, description)

    Raises:
        ClassificationError: If no rule accepts the hand
    """
    for rule in RANKING_RULES:
        if rule.is_valid(cards, options):
            return rule.ranking, rule.describe(cards)

    hand_str = ' '.join(str(card) for card in cards)
    logger.error(f"No ranking matched hand {hand_str} with {options}")
    raise ClassificationError(f"No ranking matched hand: {hand_str}")
