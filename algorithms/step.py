"""
step.py — Sorting Step Snapshot
================================
Every sorting algorithm is a generator that yields Step objects.
A Step is a frozen-in-time picture of everything a renderer needs to
draw one frame:

    • The full array, each bar carrying its value, state and original index
    • Running comparison / swap counters
    • Which line of pseudocode is executing right now
    • A plain-English explanation of *why* this step happened

Design decisions:
  - Step is a frozen dataclass holding a tuple of frozen Bars, so a
    snapshot can never change after it has been yielded.  The generator
    is the only writer; the stepper / renderer are pure readers.
  - The generator's working array lives in a SortTrace, which is passed
    explicitly through every (recursive) call together with the counters.
"""

from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple

from bars import Bar, BarState


@dataclass(frozen=True)
class Step:
    """
    Attributes:
        step_number     : 0-based index of this step in the run.
        bars            : The whole array at this instant.
        comparisons     : Comparisons made so far in the run.
        swaps           : Swaps / moves made so far in the run.
        pseudocode_line : 0-based index of the pseudocode line executing now.
        explanation     : Human-readable "why" text.
    """

    step_number:      int              = 0
    bars:             Tuple[Bar, ...]  = ()
    comparisons:      int              = 0
    swaps:            int              = 0
    pseudocode_line:  int              = 0
    explanation:      str              = ""

    @property
    def values(self) -> List[int]:
        return [b.value for b in self.bars]

    @property
    def states(self) -> List[BarState]:
        return [b.state for b in self.bars]

    @property
    def is_sorted(self) -> bool:
        """True when every bar is marked SORTED (vacuously for an empty array)."""
        return all(b.state is BarState.SORTED for b in self.bars)

    def to_dict(self) -> dict:
        return {
            "step_number":     self.step_number,
            "bars":            [b.to_dict() for b in self.bars],
            "comparisons":     self.comparisons,
            "swaps":           self.swaps,
            "pseudocode_line": self.pseudocode_line,
            "explanation":     self.explanation,
        }


# ---------------------------------------------------------------------------
# Working array + counters, threaded through every algorithm call
# ---------------------------------------------------------------------------
class SortTrace:
    """
    Mutable scratch-pad that algorithms use to rearrange bars and
    record Steps.

    Usage inside an algorithm generator:
        trace = SortTrace(bars)
        yield trace.snapshot("Initial array.")
        trace.mark(BarState.COMPARING, 0, 1)
        trace.comparisons += 1
        yield trace.snapshot("Compare 5 and 3.", line=3)
    """

    def __init__(self, bars: Sequence[Bar]):
        self.bars:        List[Bar]       = list(bars)
        self.comparisons: int             = 0
        self.swaps:       int             = 0
        self._step_no:    int             = 0
        self._last:       Optional[Step]  = None

    def __len__(self) -> int:
        return len(self.bars)

    # -- reads --
    def value(self, i: int) -> int:
        return self.bars[i].value

    # -- state changes --
    def mark(self, state: BarState, *indices: int) -> None:
        for i in indices:
            self.bars[i] = self.bars[i].with_state(state)

    def mark_range(self, state: BarState, start: int, stop: int) -> None:
        self.mark(state, *range(start, stop))

    def mark_all(self, state: BarState) -> None:
        self.mark_range(state, 0, len(self.bars))

    def reset_unsorted(self) -> None:
        """Every bar that is not SORTED goes back to DEFAULT."""
        for i, bar in enumerate(self.bars):
            if bar.state is not BarState.SORTED:
                self.bars[i] = bar.with_state(BarState.DEFAULT)

    # -- rearrangement (never creates or drops a bar) --
    def swap(self, i: int, j: int) -> None:
        self.bars[i], self.bars[j] = self.bars[j], self.bars[i]

    def move(self, src: int, dst: int) -> None:
        """Lift the bar at `src` out and re-insert it at `dst`, shifting the rest."""
        self.bars.insert(dst, self.bars.pop(src))

    # -- recording --
    def snapshot(self, explanation: str = "", line: int = 0) -> Step:
        step = Step(
            step_number=self._step_no,
            bars=tuple(self.bars),
            comparisons=self.comparisons,
            swaps=self.swaps,
            pseudocode_line=line,
            explanation=explanation,
        )
        self._step_no += 1
        self._last = step
        return step

    def finish(self, explanation: str = "", line: int = 0) -> Optional[Step]:
        """
        Mark every bar SORTED.  Returns the closing Step, or None when the
        last recorded snapshot already shows a fully sorted array.
        """
        self.mark_all(BarState.SORTED)
        if self._last is not None and self._last.is_sorted:
            return None
        return self.snapshot(explanation or "Array is sorted.", line)
