"""Deterministic seeding utilities for reproducibility.

Provides a single function to set seeds across the random number generators
used in the project: Python's random and NumPy.
"""

import random
from typing import Optional

import numpy as np


def set_seed(seed: Optional[int] = None) -> int:
    """Set random seeds for reproducibility across all RNGs.

    Sets seeds for:
    - Python's built-in random module
    - NumPy's legacy global random number generator

    Args:
        seed: The seed value to use. If None, a random seed will be generated
              and returned for later reproducibility.

    Returns:
        The seed value that was used (useful when seed=None was passed).

    Example:
        >>> from poker_showdown import set_seed
        >>> set_seed(42)  # Deterministic
        42
        >>> seed = set_seed()  # Random seed, but returns it for logging
        >>> print(f"Using seed: {seed}")
    """
    if seed is None:
        seed = random.randint(0, 2**32 - 1)

    random.seed(seed)
    np.random.seed(seed)

    return seed


def make_rng(seed: Optional[int] = None) -> np.random.Generator:
    """Seed all RNGs and return a NumPy Generator built from the same seed."""
    return np.random.default_rng(set_seed(seed))
