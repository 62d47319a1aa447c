"""
heap.py — Heap Sort
====================
Builds a max-heap bottom-up, then repeatedly swaps the root to the end of
the shrinking heap and sifts the new root down.

heapify(i) yields a Step when:
  1. i becomes the node being sifted       →  CURRENT
  2. each child is examined                →  COMPARING, then SELECTED
                                              (new largest) or DEFAULT
  3. the largest child is swapped with i   →  both COMPARING, then DEFAULT
  4. i is already the largest              →  DEFAULT
"""

from typing import Generator, List, Sequence

from bars import Bar, BarState
from algorithms.step import Step, SortTrace


PSEUDOCODE: List[str] = [
    "def heap_sort(A):",                                    # 0
    "    for i in n//2-1 .. 0: heapify(A, n, i)",           # 1
    "    for end in n-1 .. 1:",                              # 2
    "        swap(A[0], A[end])",                            # 3
    "        heapify(A, end, 0)",                            # 4
    "def heapify(A, size, i):",                              # 5
    "    largest ← i",                                       # 6
    "    if left < size and A[left] > A[largest]: ...",      # 7
    "    if right < size and A[right] > A[largest]: ...",    # 8
    "    if largest != i:",                                  # 9
    "        swap(A[i], A[largest]); heapify(A, size, largest)",  # 10
]


def heap_sort(bars: Sequence[Bar]) -> Generator[Step, None, None]:
    """Yields Step snapshots for every event during heap sort."""

    trace = SortTrace(bars)
    n     = len(trace)

    yield trace.snapshot(f"Initial array of {n} element(s).", line=0)

    # build max-heap
    for i in range(n // 2 - 1, -1, -1):
        yield from _heapify(trace, n, i)

    # extract
    for end in range(n - 1, 0, -1):
        trace.mark(BarState.COMPARING, 0, end)
        yield trace.snapshot(
            f"Root {trace.value(0)} is the heap maximum; swap it to position {end}.",
            line=3,
        )

        trace.swap(0, end)
        trace.swaps += 1
        trace.mark(BarState.DEFAULT, 0)
        trace.mark(BarState.SORTED, end)
        yield trace.snapshot(f"{trace.value(end)} is in its final place.", line=3)

        yield from _heapify(trace, end, 0)

    if n:
        trace.mark(BarState.SORTED, 0)
        yield trace.snapshot(f"{trace.value(0)} is the smallest; done.", line=2)

    final = trace.finish("The array is sorted.", line=2)
    if final is not None:
        yield final


# ---------------------------------------------------------------------------
# Helper
# ---------------------------------------------------------------------------
def _heapify(trace: SortTrace, size: int, i: int) -> Generator[Step, None, None]:
    largest = i
    left    = 2 * i + 1
    right   = 2 * i + 2

    trace.mark(BarState.CURRENT, i)
    yield trace.snapshot(f"Sift down {trace.value(i)} at position {i}.", line=6)

    for child, line in ((left, 7), (right, 8)):
        if child >= size:
            continue

        trace.mark(BarState.COMPARING, child)
        trace.comparisons += 1
        yield trace.snapshot(
            f"Compare child {trace.value(child)} with largest so far {trace.value(largest)}.",
            line=line,
        )

        if trace.value(child) > trace.value(largest):
            if largest != i:
                trace.mark(BarState.DEFAULT, largest)
            largest = child
            trace.mark(BarState.SELECTED, largest)
            yield trace.snapshot(f"{trace.value(child)} is the new largest.", line=line)
        else:
            trace.mark(BarState.DEFAULT, child)
            yield trace.snapshot(f"{trace.value(child)} is not larger.", line=line)

    if largest != i:
        trace.mark(BarState.COMPARING, i, largest)
        yield trace.snapshot(
            f"Swap {trace.value(i)} with its larger child {trace.value(largest)}.",
            line=10,
        )

        trace.swap(i, largest)
        trace.swaps += 1
        trace.mark(BarState.DEFAULT, i, largest)
        yield trace.snapshot(f"Continue sifting at position {largest}.", line=10)

        yield from _heapify(trace, size, largest)
    else:
        trace.mark(BarState.DEFAULT, i)
        yield trace.snapshot(f"{trace.value(i)} satisfies the heap property.", line=9)
