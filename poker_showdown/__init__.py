"""Poker Showdown - five-card poker hand classification and comparison.

Scores rank-only five-card hands into their poker category and decides the
winner between two hands with the full kicker tie-break rules.
"""

__version__ = "0.1.0"
__author__ = "Poker Showdown Team"

from poker_showdown.utils.seeding import set_seed

__all__ = ["__version__", "set_seed"]
