"""
engine/
-------
Playback & recording layer.

    from engine import Stepper, Recorder, generate_run, compare
"""

from engine.stepper   import Stepper, StepperState, SPEED_PRESETS, speed_to_delay
from engine.recorder  import Recorder, SortRun, RunMetrics, ComparisonResult, compare, generate_run
from engine.scheduler import drive

__all__ = [
    "Stepper",
    "StepperState",
    "SPEED_PRESETS",
    "speed_to_delay",
    "Recorder",
    "SortRun",
    "RunMetrics",
    "ComparisonResult",
    "compare",
    "generate_run",
    "drive",
]
