"""
bars/
-----
Array model for the visualizer.

    from bars import Bar, BarState, initial_bars
    from bars import generate_random, parse_values
"""

from bars.bar     import Bar, BarState, initial_bars
from bars.dataset import generate_random, parse_values

__all__ = [
    "Bar",
    "BarState",
    "initial_bars",
    "generate_random",
    "parse_values",
]
