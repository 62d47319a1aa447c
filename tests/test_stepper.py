"""
Tests for the playback controller.

Time is driven by a fake clock so auto-advance is deterministic.
"""

import unittest

from engine import Stepper, StepperState, SPEED_PRESETS, generate_run, speed_to_delay
from engine.stepper import MAX_DELAY, MIN_DELAY


class FakeClock:
    def __init__(self):
        self.now = 0.0

    def __call__(self):
        return self.now


class TestSpeedMapping(unittest.TestCase):

    def test_bounds(self):
        self.assertAlmostEqual(speed_to_delay(1), MAX_DELAY)
        self.assertAlmostEqual(speed_to_delay(100), MIN_DELAY)
        self.assertGreater(MIN_DELAY, 0)
        self.assertLess(MAX_DELAY, 1.0)

    def test_monotonic(self):
        delays = [speed_to_delay(s) for s in range(1, 101)]
        for slower, faster in zip(delays, delays[1:]):
            self.assertGreater(slower, faster)

    def test_clamped(self):
        self.assertEqual(speed_to_delay(0), speed_to_delay(1))
        self.assertEqual(speed_to_delay(500), speed_to_delay(100))

    def test_presets(self):
        stepper = Stepper()
        stepper.set_speed_preset("turbo")
        self.assertEqual(stepper.speed, SPEED_PRESETS["turbo"])
        stepper.set_speed_preset("nonsense")
        self.assertEqual(stepper.speed, SPEED_PRESETS["medium"])
        stepper.set_speed(250)
        self.assertEqual(stepper.speed, 100)


class TestNavigation(unittest.TestCase):

    def setUp(self):
        self.run = generate_run([5, 3, 8, 1], "bubble")
        self.seen = []
        self.stepper = Stepper(on_step=self.seen.append, clock=FakeClock())
        self.stepper.load(self.run.steps)

    def test_initial_state(self):
        self.assertEqual(self.stepper.current_idx, 0)
        self.assertEqual(self.stepper.state, StepperState.PAUSED)
        self.assertEqual(self.stepper.total_steps, 15)
        self.assertIs(self.stepper.current_step, self.run.steps[0])
        self.assertEqual(self.seen, [self.run.steps[0]])

    def test_step_backward_at_start_is_noop(self):
        self.assertFalse(self.stepper.step_backward())
        self.assertEqual(self.stepper.current_idx, 0)

    def test_step_forward_at_end_is_noop(self):
        self.stepper.jump_to_end()
        self.assertEqual(self.stepper.current_idx, 14)
        self.assertFalse(self.stepper.step_forward())
        self.assertEqual(self.stepper.current_idx, 14)

    def test_forward_and_back(self):
        self.assertTrue(self.stepper.step_forward())
        self.assertTrue(self.stepper.step_forward())
        self.assertTrue(self.stepper.step_backward())
        self.assertEqual(self.stepper.current_idx, 1)
        self.assertEqual(self.seen[-1], self.run.steps[1])

    def test_goto(self):
        self.assertTrue(self.stepper.goto_step(7))
        self.assertEqual(self.stepper.current_idx, 7)
        self.assertFalse(self.stepper.goto_step(15))
        self.assertFalse(self.stepper.goto_step(-1))
        self.assertEqual(self.stepper.current_idx, 7)

    def test_progress(self):
        self.assertEqual(self.stepper.progress, 0)
        self.stepper.jump_to_end()
        self.assertEqual(self.stepper.progress, 100)
        self.stepper.goto_step(7)
        self.assertEqual(self.stepper.progress, 50)

    def test_single_step_run(self):
        stepper = Stepper()
        stepper.load(generate_run([9, 1], "foo").steps)
        self.assertFalse(stepper.play())
        self.assertFalse(stepper.is_playing)
        self.assertFalse(stepper.step_forward())
        self.assertEqual(stepper.progress, 0)

    def test_does_not_mutate_steps(self):
        before = tuple(self.run.steps)
        self.stepper.jump_to_end()
        self.stepper.reset()
        self.assertEqual(self.run.steps, before)


class TestPlayback(unittest.TestCase):

    def setUp(self):
        self.clock = FakeClock()
        self.stepper = Stepper(clock=self.clock)
        self.stepper.load(generate_run([5, 3, 8, 1], "bubble").steps)
        self.stepper.set_speed(50)

    def test_tick_waits_for_delay(self):
        self.assertTrue(self.stepper.play())
        self.assertFalse(self.stepper.tick())
        self.clock.now += self.stepper.delay / 2
        self.assertFalse(self.stepper.tick())
        self.clock.now += self.stepper.delay
        self.assertTrue(self.stepper.tick())
        self.assertEqual(self.stepper.current_idx, 1)

    def test_at_most_one_step_per_tick(self):
        self.stepper.play()
        self.clock.now += 100.0
        self.assertTrue(self.stepper.tick())
        self.assertEqual(self.stepper.current_idx, 1)
        self.assertFalse(self.stepper.tick())

    def test_tick_while_paused_does_nothing(self):
        self.clock.now += 100.0
        self.assertFalse(self.stepper.tick())
        self.assertEqual(self.stepper.current_idx, 0)

    def test_play_is_noop_when_already_playing(self):
        self.assertTrue(self.stepper.play())
        self.assertFalse(self.stepper.play())

    def test_reaching_the_end_pauses(self):
        self.stepper.play()
        for _ in range(self.stepper.total_steps + 5):
            self.clock.now += 1.0
            self.stepper.tick()
        self.assertEqual(self.stepper.current_idx, self.stepper.total_steps - 1)
        self.assertFalse(self.stepper.is_playing)

    def test_tick_at_end_while_playing_pauses(self):
        self.stepper.jump_to_end()
        self.stepper.state = StepperState.PLAYING
        self.clock.now += 1.0
        self.assertFalse(self.stepper.tick())
        self.assertEqual(self.stepper.current_idx, self.stepper.total_steps - 1)
        self.assertFalse(self.stepper.is_playing)

    def test_manual_step_to_end_while_playing_pauses(self):
        self.stepper.goto_step(self.stepper.total_steps - 2)
        self.stepper.play()
        self.stepper.step_forward()
        self.assertFalse(self.stepper.is_playing)

    def test_play_at_end_is_noop(self):
        self.stepper.jump_to_end()
        self.assertFalse(self.stepper.play())
        self.assertFalse(self.stepper.is_playing)

    def test_reset_pauses_and_rewinds(self):
        self.stepper.play()
        self.clock.now += 1.0
        self.stepper.tick()
        self.stepper.reset()
        self.assertEqual(self.stepper.current_idx, 0)
        self.assertFalse(self.stepper.is_playing)

    def test_toggle(self):
        self.stepper.toggle_play()
        self.assertTrue(self.stepper.is_playing)
        self.stepper.toggle_play()
        self.assertFalse(self.stepper.is_playing)

    def test_load_supersedes_previous_run(self):
        old_generation = self.stepper.generation
        self.stepper.play()
        self.clock.now += 1.0
        self.stepper.tick()

        new_generation = self.stepper.load(generate_run([2, 1], "merge").steps)
        self.assertEqual(new_generation, old_generation + 1)
        self.assertEqual(self.stepper.current_idx, 0)
        self.assertFalse(self.stepper.is_playing)

        # a loop still holding the old generation can no longer advance anything
        self.stepper.play()
        self.clock.now += 1.0
        self.assertFalse(self.stepper.tick(old_generation))
        self.assertEqual(self.stepper.current_idx, 0)
        self.assertTrue(self.stepper.tick(new_generation))
