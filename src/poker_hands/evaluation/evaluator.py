"""Main poker hand evaluation interface."""
from functools import cmp_to_key
from typing import List, Optional, Sequence, Union
import logging

from poker_hands.core.card import Card
from poker_hands.evaluation.canonical import form_cards
from poker_hands.evaluation.combinations import card_combinations, combination_count
from poker_hands.evaluation.exceptions import EmptyHandError
from poker_hands.evaluation.hand import Hand, compare_hands
from poker_hands.evaluation.options import Options, Sorting, DEFAULT_OPTIONS
from poker_hands.evaluation.rankings import classify
from poker_hands.evaluation.rule_sets import get_rule_set

logger = logging.getLogger(__name__)


def hand_for_five_cards(cards: Sequence[Card], options: Options = DEFAULT_OPTIONS) -> Hand:
    """Canonicalize and classify a single combination of up to five cards."""
    formed = form_cards(cards, options)
    ranking, description = classify(formed, options)
    return Hand(
        ranking=ranking,
        cards=tuple(formed),
        description=description,
        ace_is_low=options.ace_is_low,
    )


def evaluate_hand(cards: Sequence[Card], options: Optional[Options] = None) -> Hand:
    """
    Find the best hand a set of cards can form.

    Every five card combination is ranked and the strongest one is
    returned, or the weakest when options.sorting is LOW. Fewer than five
    cards are padded with blanks so a value can still be calculated.

    Args:
        cards: One or more cards
        options: Rule options, defaults to standard high hand rules

    Returns:
        The selected Hand

    Raises:
        EmptyHandError: If no cards are given
        ValueError: If a blank card is passed in
    """
    options = options or DEFAULT_OPTIONS
    if not cards:
        raise EmptyHandError("Cannot evaluate a hand without cards")
    if any(card.is_blank for card in cards):
        raise ValueError("Blank cards cannot be evaluated")

    candidates = [hand_for_five_cards(combo, options) for combo in card_combinations(cards)]
    candidates.sort(key=cmp_to_key(compare_hands))

    hand = candidates[0] if options.sorting == Sorting.LOW else candidates[-1]
    logger.debug(
        f"Evaluated {len(cards)} cards ({combination_count(len(cards))} combinations, "
        f"{options.sorting.value} sorting): {hand}"
    )
    return hand


class HandEvaluator:
    """
    Evaluates and compares hands under one fixed rule set.

    Args:
        rules: Options instance or the id of a configured rule set
               (e.g. 'high', 'low', 'a5_low')
    """

    def __init__(self, rules: Union[Options, str, None] = None):
        if isinstance(rules, str):
            self.options = get_rule_set(rules)
        else:
            self.options = rules or DEFAULT_OPTIONS

    def evaluate(self, cards: Sequence[Card]) -> Hand:
        """Evaluate a set of cards under this evaluator's rules."""
        return evaluate_hand(cards, self.options)

    def compare_hands(self, cards1: Sequence[Card], cards2: Sequence[Card]) -> int:
        """
        Compare two sets of cards.

        Returns:
            1 if cards1 wins, -1 if cards2 wins, 0 if tie. Under LOW sorting
            the weaker hand wins.
        """
        result = compare_hands(self.evaluate(cards1), self.evaluate(cards2))
        if self.options.sorting == Sorting.LOW:
            result = -result
        return (result > 0) - (result < 0)

    def winners(self, card_sets: Sequence[Sequence[Card]]) -> List[int]:
        """
        Indices of the winning card sets; more than one on a tie.

        Raises:
            ValueError: If no card sets are given
        """
        if not card_sets:
            raise ValueError("No hands to compare")

        hands = [self.evaluate(cards) for cards in card_sets]
        best = [0]
        for i in range(1, len(hands)):
            result = compare_hands(hands[i], hands[best[0]])
            if self.options.sorting == Sorting.LOW:
                result = -result
            if result > 0:
                best = [i]
            elif result == 0:
                best.append(i)
        return best


# Global instance
evaluator = HandEvaluator()
