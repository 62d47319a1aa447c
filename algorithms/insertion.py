"""
insertion.py — Insertion Sort
==============================
Grows a sorted prefix one element at a time.  Yields a Step when:
  1. The next key is picked up            →  marked CURRENT
  2. A prefix element is compared to it   →  marked COMPARING
  3. A larger prefix element shifts right →  the key swaps one slot left
  4. The key comes to rest                →  marked SORTED

The "shift" is done as a swap with the key, so the key travels with its
original_index and no value is ever duplicated on screen.
"""

from typing import Generator, List, Sequence

from bars import Bar, BarState
from algorithms.step import Step, SortTrace


PSEUDOCODE: List[str] = [
    "def insertion_sort(A):",                     # 0
    "    A[0] forms the sorted prefix",            # 1
    "    for i in 1 .. n-1:",                      # 2
    "        key ← A[i]; j ← i - 1",               # 3
    "        while j >= 0 and A[j] > key:",        # 4
    "            A[j+1] ← A[j]; j ← j - 1",        # 5
    "        A[j+1] ← key",                        # 6
]


def insertion_sort(bars: Sequence[Bar]) -> Generator[Step, None, None]:
    """Yields Step snapshots for every event during insertion sort."""

    trace = SortTrace(bars)
    n     = len(trace)

    yield trace.snapshot(f"Initial array of {n} element(s).", line=0)

    if n:
        trace.mark(BarState.SORTED, 0)
        yield trace.snapshot(
            f"A single element ({trace.value(0)}) is trivially sorted.", line=1
        )

    for i in range(1, n):
        key = trace.value(i)
        trace.mark(BarState.CURRENT, i)
        yield trace.snapshot(f"Pick up key {key} at position {i}.", line=3)

        j = i - 1
        while j >= 0:
            other = trace.value(j)
            trace.mark(BarState.COMPARING, j)
            trace.comparisons += 1
            yield trace.snapshot(f"Compare {other} with key {key}.", line=4)

            if other > key:
                # key sits at j + 1; swapping moves `other` right and the key left
                trace.swap(j, j + 1)
                trace.swaps += 1
                yield trace.snapshot(f"{other} > {key}: shift {other} one slot right.", line=5)
                trace.mark(BarState.SORTED, j + 1)
                j -= 1
            else:
                trace.mark(BarState.SORTED, j)
                break

        trace.mark(BarState.SORTED, j + 1)
        yield trace.snapshot(f"Insert key {key} at position {j + 1}.", line=6)

    final = trace.finish("Every key inserted. The array is sorted.", line=6)
    if final is not None:
        yield final
