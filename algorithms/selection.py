"""
selection.py — Selection Sort
==============================
Repeatedly selects the minimum of the unsorted suffix and swaps it to
the front.  The running minimum is shown SELECTED; a bar that loses that
title goes back to DEFAULT as the scan proceeds.
"""

from typing import Generator, List, Sequence

from bars import Bar, BarState
from algorithms.step import Step, SortTrace


PSEUDOCODE: List[str] = [
    "def selection_sort(A):",                     # 0
    "    for i in 0 .. n-2:",                      # 1
    "        min ← i",                             # 2
    "        for j in i+1 .. n-1:",                # 3
    "            if A[j] < A[min]: min ← j",       # 4
    "        if min != i: swap(A[i], A[min])",     # 5
    "        A[i] is in its final place",          # 6
]


def selection_sort(bars: Sequence[Bar]) -> Generator[Step, None, None]:
    """Yields Step snapshots for every event during selection sort."""

    trace = SortTrace(bars)
    n     = len(trace)

    yield trace.snapshot(f"Initial array of {n} element(s).", line=0)

    for i in range(n - 1):
        trace.mark(BarState.CURRENT, i)
        yield trace.snapshot(
            f"Find the minimum of positions {i}..{n - 1}; start with {trace.value(i)}.",
            line=2,
        )

        min_index = i
        for j in range(i + 1, n):
            trace.mark(BarState.COMPARING, j)
            trace.comparisons += 1
            yield trace.snapshot(
                f"Compare {trace.value(j)} with current minimum {trace.value(min_index)}.",
                line=4,
            )

            if trace.value(j) < trace.value(min_index):
                if min_index != i:
                    trace.mark(BarState.DEFAULT, min_index)
                min_index = j
                trace.mark(BarState.SELECTED, min_index)
                yield trace.snapshot(f"New minimum: {trace.value(j)}.", line=4)
            else:
                trace.mark(BarState.DEFAULT, j)
                yield trace.snapshot(f"{trace.value(j)} is not smaller; keep scanning.", line=3)

        if min_index != i:
            trace.mark(BarState.COMPARING, i, min_index)
            yield trace.snapshot(
                f"Swap minimum {trace.value(min_index)} into position {i}.", line=5
            )
            trace.swap(i, min_index)
            trace.swaps += 1
            trace.mark(BarState.DEFAULT, min_index)

        trace.mark(BarState.SORTED, i)
        yield trace.snapshot(f"{trace.value(i)} is in its final place.", line=6)

    if n:
        trace.mark(BarState.SORTED, n - 1)
        yield trace.snapshot(
            f"The last element ({trace.value(n - 1)}) is the largest; done.", line=6
        )

    final = trace.finish("The array is sorted.", line=6)
    if final is not None:
        yield final
