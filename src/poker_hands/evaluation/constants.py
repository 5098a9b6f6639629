"""Constants for poker hand evaluation."""
from types import MappingProxyType

from poker_hands.core.card import Rank

# Number of cards in a finished hand
HAND_SIZE = 5

# The wheel as produced by grouping and as it reads once the ace plays low
WHEEL_ACE_HIGH = (Rank.ACE, Rank.FIVE, Rank.FOUR, Rank.THREE, Rank.TWO)
WHEEL = (Rank.FIVE, Rank.FOUR, Rank.THREE, Rank.TWO, Rank.ACE)

# Number of cards sharing each position's rank in a canonical hand
PAIR_SIGNATURES = MappingProxyType({
    'none': (1, 1, 1, 1, 1),
    'pair': (2, 2, 1, 1, 1),
    'two_pair': (2, 2, 2, 2, 1),
    'three_of_a_kind': (3, 3, 3, 1, 1),
    'full_house': (3, 3, 3, 2, 2),
    'four_of_a_kind': (4, 4, 4, 4, 1),
})
