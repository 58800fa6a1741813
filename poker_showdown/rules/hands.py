"""Hand parsing and classification.

Hand types supported (weakest to strongest):
- High card: no other category applies
- Pair: two cards of the same rank
- Two pair: two distinct pairs
- Three of a kind: three cards of the same rank, no pair
- Straight: five consecutive ranks (A-2-3-4-5 counts, topped by the Five)
- Full house: three of a kind plus a pair
- Four of a kind: four cards of the same rank

There are no suits, so there are no flushes.

Every classified hand carries exactly the ranks needed to order it against
other hands of the same type. Kickers are always stored lowest first.
"""

import logging
from dataclasses import dataclass
from enum import IntEnum
from typing import ClassVar, List, Optional, Tuple

import numpy as np

from .ranks import (
    Rank,
    PokerParseError,
    rank_symbol,
    are_consecutive,
    create_rank_deck,
    get_rank_counts,
    parse_rank,
    rank_from_bucket,
    sort_ranks,
)

logger = logging.getLogger(__name__)

HAND_SIZE = 5

# Sorted ranks of the five-high straight
WHEEL = (Rank.TWO, Rank.THREE, Rank.FOUR, Rank.FIVE, Rank.ACE)


class HandType(IntEnum):
    """Hand categories; the value is the category strength."""

    HIGH_CARD = 1
    PAIR = 2
    TWO_PAIR = 3
    THREE_OF_A_KIND = 4
    STRAIGHT = 5
    FULL_HOUSE = 6
    FOUR_OF_A_KIND = 7

    @property
    def label(self) -> str:
        """Report label, e.g. FULLHOUSE."""
        return HAND_TYPE_LABELS[self]


HAND_TYPE_LABELS = {
    HandType.HIGH_CARD: "HIGHCARD",
    HandType.PAIR: "PAIR",
    HandType.TWO_PAIR: "TWOPAIR",
    HandType.THREE_OF_A_KIND: "THREEOFAKIND",
    HandType.STRAIGHT: "STRAIGHT",
    HandType.FULL_HOUSE: "FULLHOUSE",
    HandType.FOUR_OF_A_KIND: "FOUROFAKIND",
}


class HandParseError(PokerParseError):
    """Raised when text cannot form a hand."""

    pass


class HandLengthError(HandParseError):
    """Raised when a hand does not have exactly HAND_SIZE cards.

    Attributes:
        length: Number of cards (characters) actually found
    """

    def __init__(self, length: int):
        self.length = length
        super().__init__(f"Required {HAND_SIZE} characters but found {length}.")


@dataclass(frozen=True)
class Hand:
    """Exactly five ranks, kept in the order they were given.

    Order does not affect classification. Duplicates are allowed and are not
    checked against a real deck, so "22222" is a valid Hand.
    """

    ranks: Tuple[Rank, ...]

    def __post_init__(self):
        if len(self.ranks) != HAND_SIZE:
            raise HandLengthError(len(self.ranks))
        object.__setattr__(self, "ranks", tuple(Rank(r) for r in self.ranks))

    def __len__(self) -> int:
        return len(self.ranks)

    def __iter__(self):
        return iter(self.ranks)

    def __str__(self) -> str:
        return "".join(rank_symbol(r) for r in self.ranks)

    @classmethod
    def from_string(cls, s: str) -> "Hand":
        return parse_hand(s)


def parse_hand(text: str) -> Hand:
    """Parse a hand from five rank symbols, e.g. "AAKKK".

    Args:
        text: Exactly five characters from '2'-'9', 'T', 'J', 'Q', 'K', 'A'

    Returns:
        Hand with the ranks in input order

    Raises:
        HandLengthError: If text is not exactly five characters long
        RankParseError: For the first character that is not a rank symbol
    """
    if len(text) != HAND_SIZE:
        raise HandLengthError(len(text))
    return Hand(tuple(parse_rank(c) for c in text))


# =============================================================================
# Scores
# =============================================================================


@dataclass(frozen=True)
class Score:
    """A classified hand.

    Subclasses set hand_type and define tiebreak: the payload ranks in the
    order they are compared when both hands share a type.
    """

    hand_type: ClassVar[HandType]

    @property
    def tiebreak(self) -> Tuple[Rank, ...]:
        raise NotImplementedError

    @property
    def label(self) -> str:
        return self.hand_type.label


@dataclass(frozen=True)
class HighCard(Score):
    """Highest card plus the other four, lowest first."""

    hand_type: ClassVar[HandType] = HandType.HIGH_CARD

    card: Rank
    kickers: Tuple[Rank, Rank, Rank, Rank]

    @property
    def tiebreak(self) -> Tuple[Rank, ...]:
        return (self.card,) + tuple(self.kickers)


@dataclass(frozen=True)
class Pair(Score):
    """Paired rank plus three kickers, lowest first."""

    hand_type: ClassVar[HandType] = HandType.PAIR

    card: Rank
    kickers: Tuple[Rank, Rank, Rank]

    @property
    def tiebreak(self) -> Tuple[Rank, ...]:
        return (self.card,) + tuple(self.kickers)


@dataclass(frozen=True)
class TwoPair(Score):
    hand_type: ClassVar[HandType] = HandType.TWO_PAIR

    low_pair: Rank
    high_pair: Rank
    kicker: Rank

    @property
    def tiebreak(self) -> Tuple[Rank, ...]:
        return (self.high_pair, self.low_pair, self.kicker)


@dataclass(frozen=True)
class ThreeOfAKind(Score):
    """Tripled rank plus two kickers.

    Kickers are compared high first, unlike Pair and HighCard.
    """

    hand_type: ClassVar[HandType] = HandType.THREE_OF_A_KIND

    card: Rank
    low_kicker: Rank
    high_kicker: Rank

    @property
    def tiebreak(self) -> Tuple[Rank, ...]:
        return (self.card, self.high_kicker, self.low_kicker)


@dataclass(frozen=True)
class Straight(Score):
    """Top card of the run (Five for the wheel)."""

    hand_type: ClassVar[HandType] = HandType.STRAIGHT

    card: Rank

    @property
    def tiebreak(self) -> Tuple[Rank, ...]:
        return (self.card,)


@dataclass(frozen=True)
class FullHouse(Score):
    hand_type: ClassVar[HandType] = HandType.FULL_HOUSE

    three_of_a_kind: Rank
    pair: Rank

    @property
    def tiebreak(self) -> Tuple[Rank, ...]:
        return (self.three_of_a_kind, self.pair)


@dataclass(frozen=True)
class FourOfAKind(Score):
    hand_type: ClassVar[HandType] = HandType.FOUR_OF_A_KIND

    four_of_a_kind: Rank
    kicker: Rank

    @property
    def tiebreak(self) -> Tuple[Rank, ...]:
        return (self.four_of_a_kind, self.kicker)


# =============================================================================
# Classification
# =============================================================================


def classify(hand: Hand) -> Score:
    """Classify a hand into its category and tie-break ranks.

    Args:
        hand: The hand to classify (not modified)

    Returns:
        The Score subclass instance for the hand's category

    Raises:
        AssertionError: If a rank occurs more than four times. That cannot
            happen with a real deck and means the hand should never have
            reached the classifier.
    """
    cards = sort_ranks(hand.ranks)
    counts = get_rank_counts(cards)

    pairs: List[Rank] = []
    singles: List[Rank] = []
    three_of_a_kind: Optional[Rank] = None
    four_of_a_kind: Optional[Rank] = None

    # Buckets are visited in ascending rank order, so pairs and singles
    # come out sorted.
    for index in np.flatnonzero(counts):
        rank = rank_from_bucket(index)
        count = int(counts[index])
        if count == 1:
            singles.append(rank)
        elif count == 2:
            pairs.append(rank)
        elif count == 3:
            three_of_a_kind = rank
        elif count == 4:
            four_of_a_kind = rank
        else:
            raise AssertionError(f"Unexpected count {count} for rank {rank.name} in hand {hand}")

    score = _score_from_groups(cards, pairs, singles, three_of_a_kind, four_of_a_kind)
    logger.debug("Classified %s as %r", hand, score)
    return score


def _score_from_groups(
    cards: List[Rank],
    pairs: List[Rank],
    singles: List[Rank],
    three_of_a_kind: Optional[Rank],
    four_of_a_kind: Optional[Rank],
) -> Score:
    if four_of_a_kind is not None:
        return FourOfAKind(four_of_a_kind=four_of_a_kind, kicker=singles[0])

    if three_of_a_kind is not None and pairs:
        return FullHouse(three_of_a_kind=three_of_a_kind, pair=pairs[0])

    straight = _try_parse_straight(cards)
    if straight is not None:
        return straight

    if len(pairs) == 2:
        return TwoPair(low_pair=pairs[0], high_pair=pairs[1], kicker=singles[0])

    if three_of_a_kind is not None:
        return ThreeOfAKind(card=three_of_a_kind, low_kicker=singles[0], high_kicker=singles[1])

    if pairs:
        return Pair(card=pairs[0], kickers=tuple(singles))

    return HighCard(card=cards[-1], kickers=tuple(cards[:-1]))


def _try_parse_straight(cards: List[Rank]) -> Optional[Straight]:
    """Try to read sorted cards as a straight.

    Rules:
    - Every rank must appear exactly once
    - Ranks must be consecutive, or be exactly the wheel A-2-3-4-5
    """
    if len(set(cards)) != HAND_SIZE:
        return None

    # The Ace plays low here, so the run is topped by the Five
    if tuple(cards) == WHEEL:
        return Straight(card=Rank.FIVE)

    if not are_consecutive(cards):
        return None

    return Straight(card=cards[-1])


# =============================================================================
# Dealing
# =============================================================================


def make_hand_from_ranks(ranks: List[Rank]) -> Hand:
    """Build a Hand directly from ranks (mainly for tests)."""
    return Hand(tuple(ranks))


def deal_hands(rng: np.random.Generator, count: int = 2) -> List[Hand]:
    """Deal hands from one shuffled rank-only deck.

    Args:
        rng: NumPy random generator
        count: Number of hands to deal (at most 10)

    Returns:
        List of Hand objects; no rank appears more than four times overall
    """
    deck = create_rank_deck()
    if count * HAND_SIZE > len(deck):
        raise ValueError(f"Cannot deal {count} hands from a {len(deck)}-card deck")

    order = rng.permutation(len(deck))
    hands = []
    for i in range(count):
        picks = order[i * HAND_SIZE : (i + 1) * HAND_SIZE]
        hands.append(Hand(tuple(deck[int(j)] for j in picks)))
    return hands
