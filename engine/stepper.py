"""
stepper.py — Step-by-Step Playback Engine
==========================================
The Stepper is the ONLY object the UI interacts with during playback.
It holds an already-materialized sequence of Steps, a cursor into it, and
exposes a clean play/pause/next/prev/seek/speed API.  It never mutates
the steps themselves.

State machine:
    load()            →  PAUSED   (index 0)
    PAUSED  →  play()   →  PLAYING   (no-op at the last step)
    PLAYING →  pause()  →  PAUSED
    PLAYING →  (last step reached) → PAUSED
    any     →  reset()  →  PAUSED   (index 0)

Every load() bumps `generation`.  A scheduling loop started for an older
generation must stop ticking; tick(generation=…) ignores stale callers.

Thread safety:
  This class is NOT thread-safe.  Call tick() / play() from a single
  thread or from one asyncio event loop (see engine.scheduler).
"""

import logging
import time
from enum import Enum
from typing import Callable, Optional, Sequence, Tuple

from algorithms.step import Step


logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# States
# ---------------------------------------------------------------------------
class StepperState(Enum):
    PAUSED   = "paused"
    PLAYING  = "playing"


# ---------------------------------------------------------------------------
# Speed → delay mapping
# ---------------------------------------------------------------------------
MIN_SPEED     = 1
MAX_SPEED     = 100
DEFAULT_SPEED = 50

MAX_DELAY = 0.8     # seconds per step at MIN_SPEED
MIN_DELAY = 0.02    # seconds per step at MAX_SPEED

SPEED_PRESETS = {
    "slow":   10,     # teaching mode
    "medium": DEFAULT_SPEED,
    "fast":   80,     # demo mode
    "turbo":  MAX_SPEED,
}


def clamp_speed(speed: int) -> int:
    return max(MIN_SPEED, min(MAX_SPEED, int(speed)))


def speed_to_delay(speed: int) -> float:
    """Linear, strictly decreasing map from [MIN_SPEED, MAX_SPEED] to seconds."""
    speed = clamp_speed(speed)
    fraction = (speed - MIN_SPEED) / (MAX_SPEED - MIN_SPEED)
    return MAX_DELAY - fraction * (MAX_DELAY - MIN_DELAY)


# ---------------------------------------------------------------------------
# Stepper
# ---------------------------------------------------------------------------
class Stepper:
    """
    Attributes:
        state       : Current StepperState.
        steps       : The loaded step sequence (read-only).
        current_idx : Index into `steps` that is currently displayed.
        speed       : Normalised speed, MIN_SPEED..MAX_SPEED.
        generation  : Incremented on every load(); identifies the live run.
        on_step     : Optional callback(Step) fired every time current step changes.
                      The UI hooks its re-render here.
    """

    def __init__(
        self,
        on_step: Optional[Callable[[Step], None]] = None,
        clock: Callable[[], float] = time.monotonic,
    ):
        self.steps:       Tuple[Step, ...] = ()
        self.current_idx: int          = 0
        self.state:       StepperState = StepperState.PAUSED
        self.speed:       int          = DEFAULT_SPEED
        self.generation:  int          = 0
        self.on_step:     Optional[Callable[[Step], None]] = on_step

        # for auto-play timing
        self._clock:      Callable[[], float] = clock
        self._last_tick:  float = 0.0

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------
    def load(self, steps: Sequence[Step]) -> int:
        """Replace the sequence with a new run's steps.  Returns the new generation."""
        self.steps       = tuple(steps)
        self.current_idx = 0
        self.state       = StepperState.PAUSED
        self.generation += 1
        logger.debug("Loaded %d steps (generation %d)", len(self.steps), self.generation)
        self._goto(0)
        return self.generation

    def reset(self) -> None:
        """Stop playback and go back to step 0."""
        self.state = StepperState.PAUSED
        self._goto(0)

    # ------------------------------------------------------------------
    # Navigation
    # ------------------------------------------------------------------
    def step_forward(self) -> bool:
        """Advance one step forward.  Returns False if already at end."""
        if self.at_end:
            return False
        self._goto(self.current_idx + 1)
        return True

    def step_backward(self) -> bool:
        """Rewind one step.  Returns False if already at start."""
        if self.current_idx <= 0:
            return False
        self._goto(self.current_idx - 1)
        return True

    def goto_step(self, idx: int) -> bool:
        """Jump to an arbitrary step index."""
        if 0 <= idx < len(self.steps):
            self._goto(idx)
            return True
        return False

    def jump_to_end(self) -> None:
        if self.steps:
            self._goto(len(self.steps) - 1)

    # ------------------------------------------------------------------
    # Play / Pause
    # ------------------------------------------------------------------
    def play(self) -> bool:
        if self.state == StepperState.PLAYING or self.at_end:
            return False
        self.state      = StepperState.PLAYING
        self._last_tick = self._clock()
        return True

    def pause(self) -> None:
        self.state = StepperState.PAUSED

    def toggle_play(self) -> None:
        if self.state == StepperState.PLAYING:
            self.pause()
        else:
            self.play()

    # ------------------------------------------------------------------
    # Tick  (call this from your event loop / timer)
    # ------------------------------------------------------------------
    def tick(self, generation: Optional[int] = None) -> bool:
        """
        Call once per frame.  If playing and at least `delay` seconds have
        passed since the last advance, moves one step forward.  Returns True
        if a step was taken.  A caller holding a stale generation is ignored.
        """
        if generation is not None and generation != self.generation:
            return False
        if self.state != StepperState.PLAYING:
            return False
        if self.at_end:
            self.pause()
            return False
        now = self._clock()
        if now - self._last_tick >= self.delay:
            self._last_tick = now
            return self.step_forward()
        return False

    # ------------------------------------------------------------------
    # Speed
    # ------------------------------------------------------------------
    def set_speed(self, speed: int) -> None:
        self.speed = clamp_speed(speed)

    def set_speed_preset(self, preset: str) -> None:
        self.speed = SPEED_PRESETS.get(preset, DEFAULT_SPEED)

    @property
    def delay(self) -> float:
        """Seconds between auto-advance ticks at the current speed."""
        return speed_to_delay(self.speed)

    # ------------------------------------------------------------------
    # Read-only accessors
    # ------------------------------------------------------------------
    @property
    def current_step(self) -> Optional[Step]:
        if 0 <= self.current_idx < len(self.steps):
            return self.steps[self.current_idx]
        return None

    @property
    def total_steps(self) -> int:
        return len(self.steps)

    @property
    def at_end(self) -> bool:
        return self.current_idx >= len(self.steps) - 1

    @property
    def is_playing(self) -> bool:
        return self.state == StepperState.PLAYING

    @property
    def progress(self) -> int:
        """Percent of the run played, 0..100."""
        if len(self.steps) <= 1:
            return 0
        return round(self.current_idx / (len(self.steps) - 1) * 100)

    def to_dict(self) -> dict:
        return {
            "current_step": self.current_idx,
            "total_steps":  self.total_steps,
            "is_playing":   self.is_playing,
            "speed":        self.speed,
            "delay":        round(self.delay, 4),
            "progress":     self.progress,
            "generation":   self.generation,
        }

    # ------------------------------------------------------------------
    # Internal
    # ------------------------------------------------------------------
    def _goto(self, idx: int) -> None:
        self.current_idx = idx
        if self.state == StepperState.PLAYING and self.at_end:
            self.state = StepperState.PAUSED
        self._notify(self.current_step)

    def _notify(self, step: Optional[Step]) -> None:
        if self.on_step and step is not None:
            self.on_step(step)
