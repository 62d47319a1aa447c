"""
Tests for the Flask JSON API.
"""

import unittest

from main import WORKSPACES, app


class ApiTestCase(unittest.TestCase):

    def setUp(self):
        app.config["TESTING"] = True
        self._strict = app.config["STRICT_ALGORITHMS"]
        self._max_workspaces = app.config["MAX_WORKSPACES"]
        WORKSPACES.clear()
        self.client = app.test_client()

    def tearDown(self):
        app.config["STRICT_ALGORITHMS"] = self._strict
        app.config["MAX_WORKSPACES"] = self._max_workspaces
        WORKSPACES.clear()

    def post(self, url, payload=None):
        return self.client.post(url, json=payload or {})

    def load(self, text, algo_key):
        self.assertEqual(self.post("/api/data/custom", {"text": text}).status_code, 200)
        resp = self.post("/api/config/algo", {"algo_key": algo_key})
        self.assertEqual(resp.status_code, 200)
        return resp.get_json()


class TestState(ApiTestCase):

    def test_index(self):
        data = self.client.get("/").get_json()
        self.assertEqual(len(data["algorithms"]), 8)
        state = data["state"]
        self.assertEqual(state["selected_algo"], app.config["DEFAULT_ALGORITHM"])
        self.assertEqual(len(state["values"]), app.config["DEFAULT_ARRAY_SIZE"])
        self.assertEqual(state["current_step"], 0)
        self.assertFalse(state["is_playing"])

    def test_algorithms(self):
        data = self.client.get("/api/algorithms").get_json()
        keys = [a["key"] for a in data["algorithms"]]
        self.assertIn("radix", keys)
        self.assertTrue(all(a["pseudocode"] for a in data["algorithms"]))

    def test_workspace_persists_across_requests(self):
        first = self.client.get("/api/state").get_json()
        second = self.client.get("/api/state").get_json()
        self.assertEqual(first["values"], second["values"])
        self.assertEqual(len(WORKSPACES), 1)

    def test_algorithms_by_tag(self):
        data = self.client.get("/api/algorithms?tag=non-comparison").get_json()
        self.assertEqual([a["key"] for a in data["algorithms"]], ["radix"])
        data = self.client.get("/api/algorithms?tag=nonsense").get_json()
        self.assertEqual(data["algorithms"], [])

    def test_workspace_store_is_capped(self):
        app.config["MAX_WORKSPACES"] = 3
        keeper = app.test_client()
        keeper.get("/api/state")
        for _ in range(6):
            app.test_client().get("/api/state")
            keeper.get("/api/state")
        self.assertEqual(len(WORKSPACES), 3)

        # the client that kept coming back was never evicted
        before = set(WORKSPACES)
        keeper.get("/api/state")
        self.assertEqual(set(WORKSPACES), before)

    def test_evicted_session_gets_a_fresh_workspace(self):
        app.config["MAX_WORKSPACES"] = 1
        first = app.test_client()
        first.post("/api/data/custom", json={"text": "3 2 1"})
        app.test_client().get("/api/state")
        state = first.get("/api/state").get_json()
        self.assertEqual(len(state["values"]), app.config["DEFAULT_ARRAY_SIZE"])
        self.assertEqual(len(WORKSPACES), 1)


class TestRuns(ApiTestCase):

    def test_bubble_scenario(self):
        data = self.load("5, 3, 8, 1", "bubble")
        self.assertEqual(data["total_steps"], 15)
        self.assertEqual(data["comparisons"], 6)
        self.assertEqual(data["swaps"], 4)
        self.assertEqual([b["value"] for b in data["step"]["bars"]], [5, 3, 8, 1])

        end = self.post("/api/step/end").get_json()
        self.assertEqual([b["value"] for b in end["step"]["bars"]], [1, 3, 5, 8])
        self.assertTrue(all(b["state"] == "sorted" for b in end["step"]["bars"]))
        self.assertEqual(end["progress"], 100)

    def test_unknown_algorithm_falls_back(self):
        data = self.load("9, 1", "foo")
        self.assertEqual(data["total_steps"], 1)
        self.assertEqual((data["comparisons"], data["swaps"]), (0, 0))

    def test_unknown_algorithm_strict(self):
        app.config["STRICT_ALGORITHMS"] = True
        resp = self.post("/api/config/algo", {"algo_key": "foo"})
        self.assertEqual(resp.status_code, 400)
        self.assertIn("foo", resp.get_json()["error"])

    def test_invalid_custom_input(self):
        resp = self.post("/api/data/custom", {"text": "a, b"})
        self.assertEqual(resp.status_code, 400)
        self.assertIn("error", resp.get_json())

    def test_random_data(self):
        a = self.post("/api/data/random", {"size": 12, "seed": 5}).get_json()
        b = self.post("/api/data/random", {"size": 12, "seed": 5}).get_json()
        self.assertEqual(len(a["values"]), 12)
        self.assertEqual(a["values"], b["values"])
        self.assertEqual(b["generation"], a["generation"] + 1)

    def test_random_data_too_large(self):
        size = app.config["MAX_ARRAY_SIZE"] + 1
        resp = self.post("/api/data/random", {"size": size})
        self.assertEqual(resp.status_code, 400)

    def test_export(self):
        self.load("4, 2, 3", "shell")
        data = self.client.get("/api/run/export").get_json()
        self.assertEqual(data["algo_key"], "shell")
        self.assertEqual(data["values"], [4, 2, 3])
        self.assertEqual(len(data["steps"]), data["metrics"]["total_steps"])

    def test_compare(self):
        self.post("/api/data/custom", {"text": "8 7 6 5 4 3 2 1"})
        data = self.post("/api/compare", {"algo_keys": ["bubble", "merge"]}).get_json()
        self.assertEqual(data["winner_comparisons"], "Merge Sort")
        self.assertEqual(data["left"]["comparisons"], 28)

    def test_compare_needs_two_known_algorithms(self):
        self.assertEqual(self.post("/api/compare", {"algo_keys": ["bubble"]}).status_code, 400)
        self.assertEqual(
            self.post("/api/compare", {"algo_keys": ["bubble", "foo"]}).status_code, 400
        )

    def test_wrong_json_types_are_rejected(self):
        self.client.get("/")
        cases = [
            ("/api/config/algo", {"algo_key": ["bubble"]}),
            ("/api/config/algo", {"algo_key": 3}),
            ("/api/data/custom", {"text": 5}),
            ("/api/data/custom", {"text": ["5", "3"]}),
            ("/api/compare", {"algo_keys": [["a"], "b"]}),
            ("/api/compare", {"algo_keys": "ab"}),
            ("/api/data/random", {"size": [3]}),
        ]
        for url, payload in cases:
            with self.subTest(url=url, payload=payload):
                resp = self.post(url, payload)
                self.assertEqual(resp.status_code, 400)
                self.assertIn("error", resp.get_json())

    def test_non_object_body_uses_defaults(self):
        resp = self.client.post("/api/step/next", json=[1, 2])
        self.assertEqual(resp.status_code, 200)


class TestPlayback(ApiTestCase):

    def test_navigation_bounds_are_silent(self):
        self.load("5, 3, 8, 1", "bubble")
        prev = self.post("/api/step/prev").get_json()
        self.assertFalse(prev["moved"])
        self.assertEqual(prev["current_step"], 0)

        self.post("/api/step/end")
        nxt = self.post("/api/step/next").get_json()
        self.assertFalse(nxt["moved"])
        self.assertEqual(nxt["current_step"], 14)

    def test_next_prev_goto_reset(self):
        self.load("5, 3, 8, 1", "bubble")
        self.assertEqual(self.post("/api/step/next").get_json()["current_step"], 1)
        self.assertEqual(self.post("/api/step/goto", {"index": 9}).get_json()["current_step"], 9)
        self.assertEqual(self.post("/api/step/prev").get_json()["current_step"], 8)
        self.assertEqual(self.post("/api/step/goto", {"index": 99}).status_code, 400)
        self.assertEqual(self.post("/api/step/reset").get_json()["current_step"], 0)

    def test_play_toggle(self):
        data = self.load("5, 3, 8, 1", "bubble")
        playing = self.post("/api/step/play", {"generation": data["generation"]}).get_json()
        self.assertTrue(playing["is_playing"])
        paused = self.post("/api/step/play").get_json()
        self.assertFalse(paused["is_playing"])

    def test_stale_tick_is_rejected(self):
        old = self.load("5, 3, 8, 1", "bubble")["generation"]
        self.post("/api/config/algo", {"algo_key": "merge"})

        resp = self.post("/api/step/tick", {"generation": old})
        self.assertEqual(resp.status_code, 409)
        self.assertEqual(resp.get_json()["generation"], old + 1)

    def test_changing_algorithm_resets_playback(self):
        self.load("5, 3, 8, 1", "bubble")
        self.post("/api/step/goto", {"index": 5})
        self.post("/api/step/play")
        data = self.post("/api/config/algo", {"algo_key": "heap"}).get_json()
        self.assertEqual(data["current_step"], 0)
        self.assertFalse(data["is_playing"])

    def test_speed(self):
        self.client.get("/")
        self.assertEqual(self.post("/api/config/speed", {"speed": "fast"}).get_json()["speed"], 80)
        self.assertEqual(self.post("/api/config/speed", {"speed": 500}).get_json()["speed"], 100)
        self.assertEqual(self.post("/api/config/speed", {"speed": "7"}).get_json()["speed"], 7)
        self.assertEqual(self.post("/api/config/speed", {"speed": [1]}).status_code, 400)
        self.assertEqual(self.post("/api/config/speed", {"speed": "50.5"}).status_code, 400)
        self.assertEqual(self.post("/api/config/speed", {"speed": "ludicrous"}).status_code, 400)
        self.assertEqual(self.client.get("/api/state").get_json()["speed"], 7)
