"""
quick.py — Quick Sort (Lomuto partition)
=========================================
The pivot is always the last element of the range.  Yields a Step when:
  1. A pivot is chosen                    →  PIVOT
  2. An element is compared to the pivot  →  COMPARING
  3. It belongs left of the pivot         →  swapped into the low side
  4. The pivot is swapped into place      →  SORTED

After each partition every bar that is not SORTED goes back to DEFAULT.
Sub-ranges of one element are never partitioned, so the run closes with a
single "everything sorted" frame.
"""

from typing import Generator, List, Sequence

from bars import Bar, BarState
from algorithms.step import Step, SortTrace


PSEUDOCODE: List[str] = [
    "def quick_sort(A, lo, hi):",                   # 0
    "    if lo < hi:",                               # 1
    "        p ← partition(A, lo, hi)",              # 2
    "        quick_sort(A, lo, p-1)",                # 3
    "        quick_sort(A, p+1, hi)",                # 4
    "def partition(A, lo, hi):",                     # 5
    "    pivot ← A[hi]; i ← lo - 1",                 # 6
    "    for j in lo .. hi-1:",                      # 7
    "        if A[j] <= pivot:",                     # 8
    "            i ← i + 1; swap(A[i], A[j])",       # 9
    "    swap(A[i+1], A[hi]); return i + 1",         # 10
]


def quick_sort(bars: Sequence[Bar]) -> Generator[Step, None, None]:
    """Yields Step snapshots for every event during quick sort."""

    trace = SortTrace(bars)
    yield trace.snapshot(f"Initial array of {len(trace)} element(s).", line=0)

    yield from _quick_sort(trace, 0, len(trace) - 1)

    final = trace.finish("Every partition is done. The array is sorted.", line=0)
    if final is not None:
        yield final


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------
def _quick_sort(trace: SortTrace, low: int, high: int) -> Generator[Step, None, None]:
    if low < high:
        pivot_index = yield from _partition(trace, low, high)
        yield from _quick_sort(trace, low, pivot_index - 1)
        yield from _quick_sort(trace, pivot_index + 1, high)


def _partition(trace: SortTrace, low: int, high: int) -> Generator[Step, None, int]:
    """Lomuto partition of [low, high]; returns the pivot's final index."""
    pivot = trace.value(high)
    trace.mark(BarState.PIVOT, high)
    yield trace.snapshot(f"Partition [{low}..{high}] around pivot {pivot}.", line=6)

    i = low - 1
    for j in range(low, high):
        value = trace.value(j)
        trace.mark(BarState.COMPARING, j)
        trace.comparisons += 1
        yield trace.snapshot(f"Compare {value} with pivot {pivot}.", line=8)

        if value <= pivot:
            i += 1
            trace.swap(i, j)
            trace.swaps += 1
            yield trace.snapshot(
                f"{value} <= {pivot}: move it to the low side (position {i}).", line=9
            )
            trace.mark(BarState.DEFAULT, i)

        trace.mark(BarState.DEFAULT, j)

    trace.swap(i + 1, high)
    trace.swaps += 1
    trace.mark(BarState.SORTED, i + 1)
    yield trace.snapshot(
        f"Place pivot {pivot} at position {i + 1}; it is now in its final place.",
        line=10,
    )

    trace.reset_unsorted()
    return i + 1
