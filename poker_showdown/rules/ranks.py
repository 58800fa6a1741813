"""Card rank definitions and utilities.

Rank order (low to high): 2 < 3 < 4 < 5 < 6 < 7 < 8 < 9 < T < J < Q < K < A

Cards are rank-only: there are no suits, so a card and its rank are the same
thing throughout this package.

This module provides:
- Rank constants and ordering
- Single-character rank parsing
- Rank counting over a fixed 13-bucket array
- A rank-only deck for dealing
"""

from enum import IntEnum
from typing import Iterable, List

import numpy as np


class Rank(IntEnum):
    """Card ranks, valued by their poker value (Two=2 ... Ace=14).

    Ace ranks above King everywhere except inside the wheel straight
    (A-2-3-4-5), which is handled by the classifier.
    """

    TWO = 2
    THREE = 3
    FOUR = 4
    FIVE = 5
    SIX = 6
    SEVEN = 7
    EIGHT = 8
    NINE = 9
    TEN = 10
    JACK = 11
    QUEEN = 12
    KING = 13
    ACE = 14  # Highest rank


# Rank symbols for display and parsing
RANK_SYMBOLS = {
    Rank.TWO: "2",
    Rank.THREE: "3",
    Rank.FOUR: "4",
    Rank.FIVE: "5",
    Rank.SIX: "6",
    Rank.SEVEN: "7",
    Rank.EIGHT: "8",
    Rank.NINE: "9",
    Rank.TEN: "T",
    Rank.JACK: "J",
    Rank.QUEEN: "Q",
    Rank.KING: "K",
    Rank.ACE: "A",
}

# Symbol to rank mapping (for parsing)
SYMBOL_TO_RANK = {v: k for k, v in RANK_SYMBOLS.items()}

MIN_RANK = Rank.TWO

# One count bucket per rank, indexed by rank value - MIN_RANK
NUM_RANKS = len(Rank)

# Copies of each rank in a standard 52-card deck
CARDS_PER_RANK = 4


class PokerParseError(ValueError):
    """Base class for errors raised while parsing ranks and hands."""

    pass


class RankParseError(PokerParseError):
    """Raised when a character is not one of the 13 rank symbols.

    Attributes:
        character: The offending input
    """

    def __init__(self, character: str):
        self.character = character
        super().__init__(f"Character '{character}' is not valid.")


def parse_rank(char: str) -> Rank:
    """Parse a rank from its single-character symbol.

    Args:
        char: One of '2'-'9', 'T', 'J', 'Q', 'K', 'A'

    Returns:
        The matching Rank

    Raises:
        RankParseError: If the input is not a valid rank symbol
    """
    try:
        return SYMBOL_TO_RANK[char]
    except (KeyError, TypeError):
        raise RankParseError(char) from None


def rank_value(rank: Rank) -> int:
    """Poker value of a rank: Two=2 ... Ace=14."""
    return int(rank)


def rank_symbol(rank: Rank) -> str:
    """Display symbol of a rank, e.g. "T" for Ten."""
    return RANK_SYMBOLS[rank]


def compare_ranks(rank1: Rank, rank2: Rank) -> int:
    """Compare two ranks.

    Args:
        rank1: First rank
        rank2: Second rank

    Returns:
        Positive if rank1 > rank2, negative if rank1 < rank2, zero if equal
    """
    return rank_value(rank1) - rank_value(rank2)


def are_consecutive(ranks: List[Rank]) -> bool:
    """Check if a sorted list of unique ranks are consecutive.

    Args:
        ranks: List of ranks (should be sorted and unique)

    Returns:
        True if all ranks are consecutive
    """
    if len(ranks) < 2:
        return True

    for i in range(1, len(ranks)):
        if rank_value(ranks[i]) - rank_value(ranks[i - 1]) != 1:
            return False
    return True


def get_rank_counts(ranks: Iterable[Rank]) -> np.ndarray:
    """Count occurrences of each rank.

    Args:
        ranks: Ranks to count

    Returns:
        Integer array of NUM_RANKS buckets; bucket i holds the count of
        Rank(i + MIN_RANK), so iterating the array visits ranks ascending.
    """
    offsets = np.fromiter((rank_value(r) - MIN_RANK for r in ranks), dtype=np.int64)
    return np.bincount(offsets, minlength=NUM_RANKS)


def rank_from_bucket(index: int) -> Rank:
    """Inverse of the bucket indexing used by get_rank_counts."""
    return Rank(int(index) + MIN_RANK)


def sort_ranks(ranks: Iterable[Rank]) -> List[Rank]:
    """Return a new list of ranks sorted ascending."""
    return sorted(ranks)


def create_rank_deck() -> List[Rank]:
    """Create a standard 52-card deck with suits dropped.

    Returns:
        List of 52 ranks (13 ranks x 4 copies), ascending
    """
    deck = []
    for rank in Rank:
        deck.extend([rank] * CARDS_PER_RANK)
    return deck
