"""
scheduler.py — Cooperative Playback Loop
=========================================
Drives a Stepper from an asyncio event loop: one tick per frame, at most
one step per elapsed delay (the Stepper enforces that part).

The loop captures the Stepper's generation when it starts.  As soon as a
new run is loaded (generation changes) or playback pauses, the loop
returns, so a superseded loop can never advance the new run.

    stepper.play()
    advanced = await drive(stepper)
"""

import asyncio
import logging
from typing import Awaitable, Callable

from engine.stepper import Stepper


logger = logging.getLogger(__name__)

FRAME_INTERVAL = 1 / 60   # seconds between ticks


async def drive(
    stepper: Stepper,
    frame_interval: float = FRAME_INTERVAL,
    sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
) -> int:
    """Tick `stepper` until it stops playing or is reloaded.  Returns steps advanced."""
    generation = stepper.generation
    advanced   = 0

    while stepper.is_playing and stepper.generation == generation:
        if stepper.tick(generation):
            advanced += 1
        await sleep(frame_interval)

    if stepper.generation != generation:
        logger.debug("Playback loop for generation %d superseded", generation)
    return advanced
