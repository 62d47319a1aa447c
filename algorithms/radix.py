"""
radix.py — LSD Radix Sort (base 10)
====================================
One stable counting-sort pass per decimal digit, least significant first.
Per pass it yields a Step for:
  1. every element scanned while counting digits   →  COMPARING
  2. every element placed into its output slot     →  SELECTED
     (walked backwards, which keeps each pass stable)
  3. every output slot written back to the array   →  COMPARING

The write-back applies the pass's permutation of positions with swaps, so
frames never show a value twice.  Negative values are handled by extracting
digits from (value - min); comparisons always stay 0 because radix sort
never compares two elements.  Inputs of zero or one element are already
sorted and skip the digit passes.
"""

from typing import Generator, List, Sequence

from bars import Bar, BarState
from algorithms.step import Step, SortTrace


PSEUDOCODE: List[str] = [
    "def radix_sort(A):",                                  # 0
    "    m ← max(A)",                                       # 1
    "    for exp in 1, 10, 100, … while m // exp > 0:",     # 2
    "        count digits of A at exp",                     # 3
    "        prefix-sum the counts",                        # 4
    "        for i in n-1 .. 0: out[--count[d]] ← A[i]",    # 5
    "        A ← out",                                      # 6
]

BASE = 10


def radix_sort(bars: Sequence[Bar]) -> Generator[Step, None, None]:
    """Yields Step snapshots for every event during radix sort."""

    trace = SortTrace(bars)
    n     = len(trace)

    yield trace.snapshot(f"Initial array of {n} element(s).", line=0)

    offset, max_key = 0, 0
    if n > 1:
        offset  = min(0, min(b.value for b in trace.bars))
        max_key = max(b.value - offset for b in trace.bars)

    exp = 1
    while max_key // exp > 0:
        count = [0] * BASE

        for i in range(n):
            count[_digit(trace.value(i), exp, offset)] += 1
            trace.mark(BarState.COMPARING, i)
            yield trace.snapshot(
                f"Digit of {trace.value(i)} at place {exp} is "
                f"{_digit(trace.value(i), exp, offset)}.",
                line=3,
            )
            trace.mark(BarState.DEFAULT, i)

        for d in range(1, BASE):
            count[d] += count[d - 1]

        # output[k] = position, at the start of this pass, of the bar for slot k
        output: List[int] = [0] * n
        for i in range(n - 1, -1, -1):
            digit = _digit(trace.value(i), exp, offset)
            count[digit] -= 1
            output[count[digit]] = i
            trace.swaps += 1

            trace.mark(BarState.SELECTED, i)
            yield trace.snapshot(
                f"Place {trace.value(i)} into output slot {count[digit]}.", line=5
            )
            trace.mark(BarState.DEFAULT, i)

        yield from _write_back(trace, output)

        exp *= BASE

    final = trace.finish("All digit passes done. The array is sorted.", line=6)
    if final is not None:
        yield final


def _write_back(trace: SortTrace, output: List[int]) -> Generator[Step, None, None]:
    """Move the bar for each output slot into place, one swap per slot."""
    where = list(range(len(output)))   # pass-start position -> current position
    at    = list(range(len(output)))   # current position -> pass-start position

    for k, src in enumerate(output):
        j = where[src]
        trace.swap(k, j)
        displaced = at[k]
        at[k], at[j] = src, displaced
        where[src], where[displaced] = k, j

        trace.mark(BarState.COMPARING, k)
        yield trace.snapshot(f"Write {trace.value(k)} back to position {k}.", line=6)
        trace.mark(BarState.DEFAULT, k)


def _digit(value: int, exp: int, offset: int) -> int:
    return ((value - offset) // exp) % BASE
