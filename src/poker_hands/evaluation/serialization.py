"""JSON serialization of finished hands.

The record format is::

    {"ranking": 9, "cards": ["As", "Ks", "Qs", "Js", "Ts"], "description": "royal flush"}

Reading a record re-evaluates its cards rather than trusting the stored
ranking and description.
"""
import json
import logging
from typing import Optional

from poker_hands.core.card import Card
from poker_hands.evaluation.evaluator import evaluate_hand
from poker_hands.evaluation.exceptions import SerializationError
from poker_hands.evaluation.hand import Hand
from poker_hands.evaluation.options import Options

logger = logging.getLogger(__name__)


def hand_to_json(hand: Hand) -> str:
    """Serialize a hand to a JSON record."""
    return json.dumps(hand.to_dict(), ensure_ascii=False)


def hand_from_json(data: str, options: Optional[Options] = None) -> Hand:
    """
    Rebuild a hand from a JSON record.

    Blank placeholders in the record are dropped before evaluation.

    Args:
        data: JSON record as produced by hand_to_json
        options: Rule options to evaluate the cards under

    Raises:
        SerializationError: If the record is malformed or holds no real cards
    """
    try:
        record = json.loads(data)
    except json.JSONDecodeError as e:
        raise SerializationError(f"Invalid hand JSON: {e}") from e

    if not isinstance(record, dict) or not isinstance(record.get('cards'), list):
        raise SerializationError("Hand record must be an object with a 'cards' list")

    try:
        cards = [Card.from_string(token) for token in record['cards']]
    except (TypeError, ValueError) as e:
        raise SerializationError(f"Invalid card in hand record: {e}") from e

    cards = [card for card in cards if not card.is_blank]
    if not cards:
        raise SerializationError("Hand record holds no cards")

    hand = evaluate_hand(cards, options)
    if 'ranking' in record and record['ranking'] != int(hand.ranking):
        logger.warning(
            f"Stored ranking {record['ranking']} differs from evaluated "
            f"{int(hand.ranking)} for {hand}"
        )
    return hand
