"""
dataset.py — Input Arrays
==========================
The collaborator that hands the sorting core a clean list of integers.

  • generate_random  – bounded small positive integers (seedable)
  • parse_values     – user text such as "5, 3, 8, 1"

Malformed input is rejected HERE with a ValueError; the step generators
never see anything but ints.
"""

import random
import re
from typing import List, Optional


DEFAULT_MIN_VALUE = 1
DEFAULT_MAX_VALUE = 100

_SEPARATORS = re.compile(r"[,\s]+")


def generate_random(
    size: int,
    low: int = DEFAULT_MIN_VALUE,
    high: int = DEFAULT_MAX_VALUE,
    seed: Optional[int] = None,
) -> List[int]:
    """
    Return `size` integers drawn uniformly from [low, high].

    Args:
        size : Number of values (0 is allowed).
        low  : Inclusive lower bound.
        high : Inclusive upper bound.
        seed : RNG seed for reproducible arrays.
    """
    if size < 0:
        raise ValueError(f"Array size must be non-negative, got {size}")
    if low > high:
        raise ValueError(f"Empty value range [{low}, {high}]")
    rng = random.Random(seed)
    return [rng.randint(low, high) for _ in range(size)]


def parse_values(text: str) -> List[int]:
    """
    Parse comma / whitespace separated integers.  Tokens that are not
    integers are skipped; if nothing usable remains a ValueError is raised.
    """
    if text is not None and not isinstance(text, str):
        raise ValueError("Input must be a string of numbers")

    values: List[int] = []
    for token in _SEPARATORS.split(text or ""):
        if not token:
            continue
        try:
            values.append(int(token))
        except ValueError:
            continue
    if not values:
        raise ValueError("Please enter valid comma-separated numbers")
    return values
