"""Ordering of classified hands.

Comparison rules:
- Different hand types: the stronger type wins, whatever the ranks
- Same hand type: compare the type's tie-break ranks in priority order,
  stopping at the first difference
    - High card, pair: main rank, then kickers lowest first
    - Two pair: high pair, low pair, kicker
    - Three of a kind: main rank, high kicker, low kicker
    - Straight: top card
    - Full house: three of a kind, then pair
    - Four of a kind: four of a kind, then kicker
- Equal at every step: the hands tie
"""

from enum import Enum
from typing import Tuple

from .hands import Hand, Score, classify
from .ranks import compare_ranks


class Outcome(Enum):
    """Result of a showdown between a left and a right hand."""

    LEFT = "a"
    TIE = "ab"
    RIGHT = "b"

    @property
    def symbol(self) -> str:
        """Winner indicator printed by the showdown driver."""
        return self.value

    @classmethod
    def from_comparison(cls, result: int) -> "Outcome":
        if result > 0:
            return cls.LEFT
        if result < 0:
            return cls.RIGHT
        return cls.TIE


def compare_hands(left: Score, right: Score) -> int:
    """Compare two classified hands.

    Args:
        left: First score
        right: Second score

    Returns:
        Positive if left wins
        Negative if right wins
        Zero if the hands tie
    """
    if left.hand_type != right.hand_type:
        return int(left.hand_type) - int(right.hand_type)

    for left_rank, right_rank in zip(left.tiebreak, right.tiebreak):
        result = compare_ranks(left_rank, right_rank)
        if result != 0:
            return result
    return 0


def can_beat(left: Score, right: Score) -> bool:
    """Check if left strictly beats right."""
    return compare_hands(left, right) > 0


def showdown(left: Hand, right: Hand) -> Tuple[Score, Score, Outcome]:
    """Classify two hands and decide the winner.

    Returns:
        (left score, right score, outcome)
    """
    left_score = classify(left)
    right_score = classify(right)
    return left_score, right_score, Outcome.from_comparison(compare_hands(left_score, right_score))
