"""
bubble.py — Bubble Sort
========================
Generator-based bubble sort.  Yields a Step at every meaningful event:
  1. Two neighbours are compared  →  both marked COMPARING
  2. They are out of order        →  swapped
  3. A pass ends                  →  the last unsorted slot is marked SORTED

The COMPARING marks are cleared without a snapshot of their own; the next
comparison (or end-of-pass) frame carries the reset forward.
"""

from typing import Generator, List, Sequence

from bars import Bar, BarState
from algorithms.step import Step, SortTrace


# ---------------------------------------------------------------------------
# Pseudocode: each string is one displayed line; index = pseudocode_line
# ---------------------------------------------------------------------------
PSEUDOCODE: List[str] = [
    "def bubble_sort(A):",                        # 0
    "    for i in 0 .. n-1:",                      # 1
    "        for j in 0 .. n-i-2:",                # 2
    "            if A[j] > A[j+1]:",               # 3
    "                swap(A[j], A[j+1])",          # 4
    "        A[n-i-1] is in its final place",      # 5
]


# ---------------------------------------------------------------------------
# Generator
# ---------------------------------------------------------------------------
def bubble_sort(bars: Sequence[Bar]) -> Generator[Step, None, None]:
    """
    Yields Step snapshots for every event during bubble sort.

    Args:
        bars : Initial array, all DEFAULT.

    Yields:
        Step – one per event (compare, swap, pass-complete).
    """

    trace = SortTrace(bars)
    n     = len(trace)

    yield trace.snapshot(
        f"Initial array of {n} element(s). Each pass bubbles the largest "
        f"unsorted value to the end.",
        line=0,
    )

    for i in range(n):
        for j in range(n - i - 1):
            a, b = trace.value(j), trace.value(j + 1)

            trace.mark(BarState.COMPARING, j, j + 1)
            trace.comparisons += 1
            yield trace.snapshot(f"Compare {a} and {b} at positions {j} and {j + 1}.", line=3)

            if a > b:
                trace.swap(j, j + 1)
                trace.swaps += 1
                yield trace.snapshot(f"{a} > {b}, so swap them.", line=4)

            trace.mark(BarState.DEFAULT, j, j + 1)

        trace.mark(BarState.SORTED, n - i - 1)
        yield trace.snapshot(
            f"Pass {i + 1} done: {trace.value(n - i - 1)} is in its final place.",
            line=5,
        )

    final = trace.finish("All passes done. The array is sorted.", line=5)
    if final is not None:
        yield final
