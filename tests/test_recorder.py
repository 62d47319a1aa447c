"""
Tests for run recording, metrics, export and comparison.
"""

import unittest

from engine import Recorder, compare, generate_run


class TestRecorder(unittest.TestCase):

    def test_run_before_start(self):
        with self.assertRaises(RuntimeError):
            Recorder().run_to_completion()

    def test_metrics(self):
        rec = Recorder()
        rec.start("bubble", [5, 3, 8, 1])
        metrics = rec.run_to_completion()

        self.assertIs(rec.get_metrics(), metrics)
        self.assertEqual(metrics.algo_label, "Bubble Sort")
        self.assertEqual(metrics.array_size, 4)
        self.assertEqual(metrics.comparisons, 6)
        self.assertEqual(metrics.swaps, 4)
        self.assertEqual(metrics.total_steps, 15)
        self.assertGreater(metrics.memory_bytes, 0)
        self.assertGreaterEqual(metrics.wall_time_ms, 0)
        self.assertTrue(metrics.recognized)

    def test_unknown_algorithm_fallback(self):
        rec = Recorder()
        with self.assertLogs("engine.recorder", level="WARNING"):
            rec.start("foo", [9, 1])
        metrics = rec.run_to_completion()
        self.assertFalse(metrics.recognized)
        self.assertEqual(metrics.total_steps, 1)
        self.assertEqual(rec.run.initial_step.values, [9, 1])

    def test_unknown_algorithm_strict(self):
        with self.assertRaises(ValueError):
            Recorder().start("foo", [9, 1], strict=True)

    def test_start_discards_previous_run(self):
        rec = Recorder()
        rec.start("merge", [3, 2, 1])
        rec.run_to_completion()
        rec.start("quick", [3, 2, 1])
        self.assertIsNone(rec.run)
        self.assertIsNone(rec.metrics)

    def test_export(self):
        rec = Recorder()
        rec.start("merge", [2, 2, 1])
        rec.run_to_completion()
        data = rec.export()

        self.assertEqual(data["algo_key"], "merge")
        self.assertEqual(data["values"], [2, 2, 1])
        self.assertEqual(len(data["steps"]), rec.run.total_steps)
        last = data["steps"][-1]
        self.assertEqual(
            last["bars"][0], {"value": 1, "state": "sorted", "originalIndex": 2}
        )
        self.assertEqual((data["comparisons"], data["swaps"]), (2, 1))

    def test_generate_run_matches_recorder(self):
        rec = Recorder()
        rec.start("heap", [4, 1, 3])
        rec.run_to_completion()
        self.assertEqual(generate_run([4, 1, 3], "heap"), rec.run)


class TestCompare(unittest.TestCase):

    def _recorded(self, key, values):
        rec = Recorder()
        rec.start(key, values)
        rec.run_to_completion()
        return rec

    def test_merge_beats_bubble_on_reversed_input(self):
        values = [8, 7, 6, 5, 4, 3, 2, 1]
        result = compare(self._recorded("bubble", values), self._recorded("merge", values))

        self.assertEqual(result.left.comparisons, 28)
        self.assertEqual(result.right.comparisons, 12)
        self.assertEqual(result.winner_comparisons, "Merge Sort")
        self.assertEqual(result.winner_swaps, "Merge Sort")
        self.assertEqual(result.winner_steps, "Merge Sort")

    def test_tie(self):
        values = [3, 1, 2]
        result = compare(self._recorded("quick", values), self._recorded("quick", values))
        self.assertEqual(result.winner_comparisons, "tie")
        self.assertEqual(result.winner_steps, "tie")
