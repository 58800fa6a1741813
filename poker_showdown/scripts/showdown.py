#!/usr/bin/env python
"""Showdown script: classify and compare pairs of five-card hands.

Input format (file or stdin):
    N
    LEFT RIGHT
    ... (N lines)

Each hand is five rank symbols (2-9, T, J, Q, K, A). For every valid line the
script prints the left label, the right label and the winner (a = left,
b = right, ab = tie):

    $ printf '1\\nAAKKK 23456\\n' | python -m poker_showdown.scripts.showdown
    FULLHOUSE STRAIGHT a

Invalid lines are reported on stderr with their line number and skipped.

Usage:
    python -m poker_showdown.scripts.showdown hands.txt
    python -m poker_showdown.scripts.showdown --random 20 --seed 42
    python -m poker_showdown.scripts.showdown --help
"""

import argparse
import logging
import sys
from dataclasses import dataclass, field
from typing import IO, Iterator, List, Optional, Union

from poker_showdown.rules import (
    Hand,
    Outcome,
    PokerParseError,
    Score,
    deal_hands,
    parse_hand,
    showdown,
)
from poker_showdown.utils.seeding import make_rng

logger = logging.getLogger(__name__)


class InputFormatError(Exception):
    """Raised when the input as a whole cannot be read (bad count, short input)."""

    pass


@dataclass(frozen=True)
class Matchup:
    """Two parsed hands from one input line."""

    line_number: int
    left: Hand
    right: Hand


@dataclass(frozen=True)
class LineError:
    """A pair line that could not be parsed.

    Attributes:
        line_number: 1-based index of the pair line (the count line excluded)
        message: Human-readable description
    """

    line_number: int
    message: str

    def __str__(self) -> str:
        return self.message


@dataclass(frozen=True)
class ShowdownResult:
    left: Hand
    right: Hand
    left_score: Score
    right_score: Score
    outcome: Outcome

    def format(self, echo_hands: bool = False) -> str:
        parts = [self.left_score.label, self.right_score.label, self.outcome.symbol]
        if echo_hands:
            parts = [str(self.left), str(self.right)] + parts
        return " ".join(parts)


@dataclass
class RunStats:
    """Counters for one run of the driver."""

    processed: int = 0
    outcomes: dict = field(default_factory=lambda: {o: 0 for o in Outcome})
    errors: List[LineError] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.errors


def parse_line(line: str, line_number: int) -> Union[Matchup, LineError]:
    """Parse one pair line into a Matchup, or describe why it is invalid."""
    parts = line.split()
    if not parts:
        return LineError(line_number, f"Left hand missing on line {line_number}.")
    if len(parts) < 2:
        return LineError(line_number, f"Right hand missing on line {line_number}.")

    try:
        left = parse_hand(parts[0])
    except PokerParseError as e:
        return LineError(line_number, f"The left hand of line {line_number} is invalid: {e}")

    try:
        right = parse_hand(parts[1])
    except PokerParseError as e:
        return LineError(line_number, f"The right hand of line {line_number} is invalid: {e}")

    if len(parts) > 2:
        logger.warning("Ignoring extra tokens on line %d: %s", line_number, " ".join(parts[2:]))

    return Matchup(line_number=line_number, left=left, right=right)


def read_matchups(stream: IO[str]) -> Iterator[Union[Matchup, LineError]]:
    """Read the count line and then that many pair lines.

    Yields:
        A Matchup or LineError per pair line, in input order

    Raises:
        InputFormatError: If the count line is not a number or the input
            ends before the announced number of lines
    """
    header = stream.readline()
    while header and not header.strip():
        header = stream.readline()

    try:
        count = int(header.strip())
    except ValueError:
        raise InputFormatError(
            f"The first line of input should be a number and it was not: {header.strip()!r}"
        ) from None
    if count < 0:
        raise InputFormatError(f"The first line of input should be a non-negative number, got {count}")

    logger.debug("Expecting %d lines", count)

    for line_number in range(1, count + 1):
        line = stream.readline()
        if not line:
            raise InputFormatError(f"Missing lines: expected {count}, found {line_number - 1}")
        yield parse_line(line, line_number)


def play(left: Hand, right: Hand) -> ShowdownResult:
    left_score, right_score, outcome = showdown(left, right)
    logger.debug("%s (%r) vs %s (%r): %s", left, left_score, right, right_score, outcome.name)
    return ShowdownResult(left, right, left_score, right_score, outcome)


def run(stream: IO[str], out: Optional[IO[str]] = None, err: Optional[IO[str]] = None) -> RunStats:
    """Process every line of an input stream.

    Args:
        stream: Input text
        out: Where result lines are written
        err: Where per-line and input errors are written

    Returns:
        RunStats for the run
    """
    out = out if out is not None else sys.stdout
    err = err if err is not None else sys.stderr
    stats = RunStats()
    try:
        for item in read_matchups(stream):
            if isinstance(item, LineError):
                stats.errors.append(item)
                print(item, file=err)
                continue

            result = play(item.left, item.right)
            stats.processed += 1
            stats.outcomes[result.outcome] += 1
            print(result.format(), file=out)
    except InputFormatError as e:
        stats.errors.append(LineError(0, str(e)))
        print(e, file=err)
    except (OSError, UnicodeDecodeError) as e:
        error = LineError(0, f"io error: {e}")
        stats.errors.append(error)
        print(error, file=err)

    return stats


def run_random(
    matchups: int, seed: Optional[int] = None, out: Optional[IO[str]] = None
) -> RunStats:
    """Deal random pairs of hands and print each showdown with its hands.

    Args:
        matchups: Number of pairs to deal
        seed: Random seed for reproducibility
        out: Where result lines are written
    """
    out = out if out is not None else sys.stdout
    rng = make_rng(seed)
    stats = RunStats()
    for _ in range(matchups):
        left, right = deal_hands(rng, count=2)
        result = play(left, right)
        stats.processed += 1
        stats.outcomes[result.outcome] += 1
        print(result.format(echo_hands=True), file=out)
    return stats


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the showdown script."""
    parser = argparse.ArgumentParser(
        description="Classify and compare pairs of five-card poker hands",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python -m poker_showdown.scripts.showdown hands.txt
  cat hands.txt | python -m poker_showdown.scripts.showdown
  python -m poker_showdown.scripts.showdown --random 20 --seed 42
        """,
    )

    parser.add_argument(
        "input",
        nargs="?",
        type=argparse.FileType("r"),
        default=None,
        help="Input file: a count line followed by that many 'LEFT RIGHT' lines (default: stdin)",
    )

    parser.add_argument(
        "--random",
        "-r",
        type=int,
        default=None,
        metavar="N",
        help="Deal N random pairs instead of reading input",
    )

    parser.add_argument(
        "--seed", "-s", type=int, default=None, help="Random seed for --random"
    )

    parser.add_argument(
        "--verbose", "-v", action="store_true", help="Log every classification"
    )

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.random is not None and args.input is not None:
        parser.error("--random cannot be combined with an input file")
    if args.random is not None and args.random < 0:
        parser.error("--random must be non-negative")

    try:
        if args.random is not None:
            stats = run_random(args.random, seed=args.seed)
        else:
            stream = args.input if args.input is not None else sys.stdin
            try:
                stats = run(stream)
            finally:
                if args.input is not None:
                    args.input.close()
    except KeyboardInterrupt:
        print("\nShowdown interrupted by user.", file=sys.stderr)
        return 130

    logger.info(
        "Processed %d lines (%s), %d errors",
        stats.processed,
        ", ".join(f"{o.name.lower()}={n}" for o, n in stats.outcomes.items()),
        len(stats.errors),
    )
    return 0 if stats.ok else 1


if __name__ == "__main__":
    sys.exit(main())
