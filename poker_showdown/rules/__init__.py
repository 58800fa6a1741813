"""Poker hand rules.

This module provides:
- Rank definitions and parsing (ranks.py)
- Hand parsing and classification (hands.py)
- Hand comparison (compare.py)
"""

from .ranks import (
    Rank,
    RANK_SYMBOLS,
    SYMBOL_TO_RANK,
    PokerParseError,
    RankParseError,
    parse_rank,
    rank_value,
    rank_symbol,
    compare_ranks,
    are_consecutive,
    get_rank_counts,
    sort_ranks,
    create_rank_deck,
)

from .hands import (
    HAND_SIZE,
    HandType,
    HAND_TYPE_LABELS,
    Hand,
    HandParseError,
    HandLengthError,
    parse_hand,
    Score,
    HighCard,
    Pair,
    TwoPair,
    ThreeOfAKind,
    Straight,
    FullHouse,
    FourOfAKind,
    classify,
    make_hand_from_ranks,
    deal_hands,
)

from .compare import (
    Outcome,
    compare_hands,
    can_beat,
    showdown,
)

__all__ = [
    # Ranks
    "Rank",
    "RANK_SYMBOLS",
    "SYMBOL_TO_RANK",
    "PokerParseError",
    "RankParseError",
    "parse_rank",
    "rank_value",
    "rank_symbol",
    "compare_ranks",
    "are_consecutive",
    "get_rank_counts",
    "sort_ranks",
    "create_rank_deck",
    # Hands
    "HAND_SIZE",
    "HandType",
    "HAND_TYPE_LABELS",
    "Hand",
    "HandParseError",
    "HandLengthError",
    "parse_hand",
    "Score",
    "HighCard",
    "Pair",
    "TwoPair",
    "ThreeOfAKind",
    "Straight",
    "FullHouse",
    "FourOfAKind",
    "classify",
    "make_hand_from_ranks",
    "deal_hands",
    # Comparison
    "Outcome",
    "compare_hands",
    "can_beat",
    "showdown",
]
