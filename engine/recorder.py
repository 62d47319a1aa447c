"""
recorder.py — Run Recorder & Analytics
========================================
Materializes a complete sorting run (every Step), then computes the
analytics the UI shows next to the bars and in Comparison Mode.

Usage:
    rec = Recorder()
    rec.start(algo_key="quick", values=[5, 3, 8, 1])
    rec.run_to_completion()          # exhausts the generator
    metrics = rec.get_metrics()      # the analytics card
    rec.export()                     # serialisable snapshot for save/replay

Comparison Mode:
    The UI holds two Recorders (one per algo), runs both to completion
    on the SAME values, then calls compare(rec1, rec2) → ComparisonResult.

Scaling:
    Generation is synchronous and produces as many snapshots as the
    algorithm does work (O(n²) frames for bubble / insertion / selection),
    each an O(n) copy.  Meant for tens to low hundreds of elements.
"""

import logging
import sys
import time
from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Sequence, Tuple

from algorithms import AlgoInfo, get_algorithm
from algorithms.step import Step, SortTrace
from bars import initial_bars


logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# SortRun: one materialized step sequence plus its counters
# ---------------------------------------------------------------------------
@dataclass(frozen=True)
class SortRun:
    algo_key:     str
    steps:        Tuple[Step, ...]
    comparisons:  int = 0
    swaps:        int = 0

    @property
    def total_steps(self) -> int:
        return len(self.steps)

    @property
    def initial_step(self) -> Step:
        return self.steps[0]

    @property
    def final_step(self) -> Step:
        return self.steps[-1]


# ---------------------------------------------------------------------------
# Metrics dataclass: what the Analytics panel renders
# ---------------------------------------------------------------------------
@dataclass
class RunMetrics:
    algo_key:        str   = ""
    algo_label:      str   = ""
    array_size:      int   = 0
    comparisons:     int   = 0
    swaps:           int   = 0
    total_steps:     int   = 0          # number of Steps recorded
    wall_time_ms:    float = 0.0        # wall-clock time to generate every step
    memory_bytes:    int   = 0          # approx size of the step buffer (sys.getsizeof)
    recognized:      bool  = True       # False when the no-op fallback was used


# ---------------------------------------------------------------------------
# ComparisonResult: side-by-side analytics
# ---------------------------------------------------------------------------
@dataclass
class ComparisonResult:
    left:  RunMetrics = field(default_factory=RunMetrics)
    right: RunMetrics = field(default_factory=RunMetrics)
    # derived
    winner_comparisons: str = ""   # which algo compared less
    winner_swaps:       str = ""
    winner_steps:       str = ""   # which algo needs fewer frames


# ---------------------------------------------------------------------------
# Recorder
# ---------------------------------------------------------------------------
class Recorder:
    """
    Attributes:
        run      : The SortRun (available after run_to_completion).
        metrics  : Computed RunMetrics (available after run_to_completion).
    """

    def __init__(self):
        self.run:       Optional[SortRun]    = None
        self.metrics:   Optional[RunMetrics] = None

        self._algo_key:   str                 = ""
        self._algo_info:  Optional[AlgoInfo]  = None
        self._values:     Tuple[int, ...]     = ()
        self._started:    bool                = False

    # ------------------------------------------------------------------
    # Setup & run
    # ------------------------------------------------------------------
    def start(self, algo_key: str, values: Sequence[int], strict: bool = False) -> None:
        """
        Remember what to run.  An unrecognized key falls back to a no-op
        run (one step, zero counters) unless `strict` is set.
        """
        info = get_algorithm(algo_key)
        if info is None:
            if strict:
                raise ValueError(f"Unknown algorithm: {algo_key}")
            logger.warning("Unknown algorithm %r; recording the input unchanged", algo_key)

        self._algo_key  = algo_key
        self._algo_info = info
        self._values    = tuple(int(v) for v in values)
        self._started   = True
        self.run        = None
        self.metrics    = None

    def run_to_completion(self) -> RunMetrics:
        """Exhaust the generator, record every step, compute metrics."""
        if not self._started:
            raise RuntimeError("Call start() first.")

        start_time = time.monotonic()

        bars = initial_bars(self._values)
        if self._algo_info is None:
            steps: Tuple[Step, ...] = (SortTrace(bars).snapshot("Unknown algorithm; nothing to do."),)
        else:
            steps = tuple(self._algo_info.fn(bars))

        last = steps[-1]
        self.run = SortRun(
            algo_key=self._algo_key,
            steps=steps,
            comparisons=last.comparisons,
            swaps=last.swaps,
        )

        wall_ms = (time.monotonic() - start_time) * 1000
        self.metrics = self._compute_metrics(wall_ms)
        logger.debug(
            "Recorded %s on %d values: %d steps, %d comparisons, %d swaps",
            self._algo_key, len(self._values), len(steps),
            self.run.comparisons, self.run.swaps,
        )
        return self.metrics

    def get_metrics(self) -> Optional[RunMetrics]:
        return self.metrics

    # ------------------------------------------------------------------
    # Export (serialisable snapshot)
    # ------------------------------------------------------------------
    def export(self) -> Dict[str, Any]:
        run = self.run
        return {
            "algo_key":    self._algo_key,
            "values":      list(self._values),
            "metrics":     self.metrics.__dict__ if self.metrics else {},
            "comparisons": run.comparisons if run else 0,
            "swaps":       run.swaps if run else 0,
            "steps":       [s.to_dict() for s in run.steps] if run else [],
        }

    # ------------------------------------------------------------------
    # Internal
    # ------------------------------------------------------------------
    def _compute_metrics(self, wall_ms: float) -> RunMetrics:
        info = self._algo_info
        run  = self.run

        # approximate memory: sizeof the steps buffer and each snapshot's tuple
        mem = sys.getsizeof(run.steps)
        for s in run.steps:
            mem += sys.getsizeof(s) + sys.getsizeof(s.bars)

        return RunMetrics(
            algo_key=self._algo_key,
            algo_label=info.label if info else self._algo_key,
            array_size=len(self._values),
            comparisons=run.comparisons,
            swaps=run.swaps,
            total_steps=run.total_steps,
            wall_time_ms=round(wall_ms, 2),
            memory_bytes=mem,
            recognized=info is not None,
        )


# ---------------------------------------------------------------------------
# One-shot helper
# ---------------------------------------------------------------------------
def generate_run(values: Sequence[int], algo_key: str, strict: bool = False) -> SortRun:
    """Generate the full step sequence and run statistics for one algorithm."""
    rec = Recorder()
    rec.start(algo_key, values, strict=strict)
    rec.run_to_completion()
    return rec.run


# ---------------------------------------------------------------------------
# Comparison helper
# ---------------------------------------------------------------------------
def compare(left: Recorder, right: Recorder) -> ComparisonResult:
    """Given two completed Recorders, produce a ComparisonResult."""
    l = left.metrics  or RunMetrics()
    r = right.metrics or RunMetrics()

    def winner(l_val, r_val, l_key, r_key, lower_is_better=True):
        if l_val == r_val:
            return "tie"
        if lower_is_better:
            return l_key if l_val < r_val else r_key
        return l_key if l_val > r_val else r_key

    return ComparisonResult(
        left=l,
        right=r,
        winner_comparisons=winner(l.comparisons, r.comparisons, l.algo_label, r.algo_label),
        winner_swaps      =winner(l.swaps, r.swaps, l.algo_label, r.algo_label),
        winner_steps      =winner(l.total_steps, r.total_steps, l.algo_label, r.algo_label),
    )
