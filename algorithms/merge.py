"""
merge.py — Merge Sort
======================
Top-down merge sort.  Yields a Step when:
  1. Two adjacent runs are about to be merged  →  all of them COMPARING
  2. The front elements are compared and one is placed  →  SORTED
  3. A leftover element is confirmed in place           →  SORTED

The merge is done in place: taking from the right run lifts that bar out
and re-inserts it in front of the remaining left run, so every frame holds
exactly the input bars.  Ties take from the left run, which keeps the sort
stable.
"""

from typing import Generator, List, Sequence

from bars import Bar, BarState
from algorithms.step import Step, SortTrace


PSEUDOCODE: List[str] = [
    "def merge_sort(A, lo, hi):",                       # 0
    "    if lo < hi:",                                   # 1
    "        mid ← (lo + hi) // 2",                      # 2
    "        merge_sort(A, lo, mid)",                    # 3
    "        merge_sort(A, mid+1, hi)",                  # 4
    "        merge(A, lo, mid, hi)",                     # 5
    "def merge(A, lo, mid, hi):",                        # 6
    "    while both runs are non-empty:",                # 7
    "        if L.front <= R.front: take L.front",       # 8
    "        else: take R.front",                        # 9
    "    copy whatever remains",                         # 10
]


def merge_sort(bars: Sequence[Bar]) -> Generator[Step, None, None]:
    """Yields Step snapshots for every event during merge sort."""

    trace = SortTrace(bars)
    yield trace.snapshot(f"Initial array of {len(trace)} element(s).", line=0)

    yield from _merge_sort(trace, 0, len(trace) - 1)

    final = trace.finish("The array is sorted.", line=10)
    if final is not None:
        yield final


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------
def _merge_sort(trace: SortTrace, start: int, end: int) -> Generator[Step, None, None]:
    if start >= end:
        return
    mid = (start + end) // 2
    yield from _merge_sort(trace, start, mid)
    yield from _merge_sort(trace, mid + 1, end)
    yield from _merge(trace, start, mid, end)


def _merge(trace: SortTrace, start: int, mid: int, end: int) -> Generator[Step, None, None]:
    trace.mark_range(BarState.COMPARING, start, end + 1)
    yield trace.snapshot(
        f"Merge runs [{start}..{mid}] and [{mid + 1}..{end}].", line=5
    )

    # `left` is both the front of the left run and the next output slot
    left, left_end, right = start, mid, mid + 1
    while left <= left_end and right <= end:
        a, b = trace.value(left), trace.value(right)
        trace.comparisons += 1

        if a <= b:
            explanation, line = f"{a} <= {b}: take {a} from the left run.", 8
        else:
            trace.move(right, left)
            trace.swaps += 1
            left_end += 1
            right    += 1
            explanation, line = f"{b} < {a}: take {b} from the right run.", 9

        trace.mark(BarState.SORTED, left)
        yield trace.snapshot(explanation, line=line)
        left += 1

    for k in range(left, end + 1):
        trace.mark(BarState.SORTED, k)
        yield trace.snapshot(f"Copy remaining {trace.value(k)} into place.", line=10)
