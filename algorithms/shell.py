"""
shell.py — Shell Sort
======================
Gapped insertion sort with the gap sequence n/2, n/4, …, 1.

For each gap and each i ≥ gap it yields a Step when the element at i is
picked up (CURRENT), for every element gap slots to its left that it is
compared with (COMPARING), for every shift, and once the element comes to
rest (SELECTED).  Shifts swap the travelling element leftwards so every
frame holds exactly the input values.
"""

from typing import Generator, List, Sequence

from bars import Bar, BarState
from algorithms.step import Step, SortTrace


PSEUDOCODE: List[str] = [
    "def shell_sort(A):",                                   # 0
    "    for gap in n//2, n//4, …, 1:",                      # 1
    "        for i in gap .. n-1:",                          # 2
    "            temp ← A[i]; j ← i",                        # 3
    "            while j >= gap and A[j-gap] > temp:",       # 4
    "                A[j] ← A[j-gap]; j ← j - gap",          # 5
    "            A[j] ← temp",                               # 6
]


def shell_sort(bars: Sequence[Bar]) -> Generator[Step, None, None]:
    """Yields Step snapshots for every event during shell sort."""

    trace = SortTrace(bars)
    n     = len(trace)

    yield trace.snapshot(f"Initial array of {n} element(s).", line=0)

    gap = n // 2
    while gap > 0:
        for i in range(gap, n):
            temp = trace.value(i)
            trace.mark(BarState.CURRENT, i)
            yield trace.snapshot(f"Gap {gap}: pick up {temp} at position {i}.", line=3)

            j = i
            while j >= gap:
                other = trace.value(j - gap)
                trace.mark(BarState.COMPARING, j - gap)
                trace.comparisons += 1
                yield trace.snapshot(f"Compare {other} with {temp}.", line=4)

                if other > temp:
                    trace.swap(j - gap, j)
                    trace.swaps += 1
                    yield trace.snapshot(
                        f"{other} > {temp}: shift {other} {gap} slot(s) right.", line=5
                    )
                    trace.mark(BarState.DEFAULT, j)
                    j -= gap
                else:
                    trace.mark(BarState.DEFAULT, j - gap)
                    break

            trace.mark(BarState.SELECTED, j)
            yield trace.snapshot(f"{temp} comes to rest at position {j}.", line=6)
            trace.mark(BarState.DEFAULT, j)

        gap //= 2

    final = trace.finish("Gap 1 pass done. The array is sorted.", line=6)
    if final is not None:
        yield final
