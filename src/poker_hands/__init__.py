"""Poker hand evaluation package."""

from poker_hands.core.card import Card, Rank, Suit, cards_from_string
from poker_hands.core.deck import Deck
from poker_hands.evaluation.evaluator import HandEvaluator, evaluate_hand
from poker_hands.evaluation.exceptions import (
    ClassificationError,
    EmptyHandError,
    EvaluationError,
    RuleSetError,
    SerializationError,
)
from poker_hands.evaluation.hand import Hand, compare_hands
from poker_hands.evaluation.options import Options, Sorting
from poker_hands.evaluation.rankings import Ranking
from poker_hands.evaluation.rule_sets import get_rule_set
from poker_hands.evaluation.serialization import hand_from_json, hand_to_json

__version__ = "0.1.0"
__all__ = [
    "Card",
    "Rank",
    "Suit",
    "cards_from_string",
    "Deck",
    "HandEvaluator",
    "evaluate_hand",
    "ClassificationError",
    "EmptyHandError",
    "EvaluationError",
    "RuleSetError",
    "SerializationError",
    "Hand",
    "compare_hands",
    "Options",
    "Sorting",
    "Ranking",
    "get_rule_set",
    "hand_from_json",
    "hand_to_json",
]
