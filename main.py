"""
main.py — Sorting Visualizer Flask App
========================================
JSON API over the step generator and playback engine.  A browser-side
renderer polls it and draws `step.bars` (value → height, state → colour).

Routes:
  GET  /                       – app info + current state
  GET  /api/state              – current playback state
  GET  /api/algorithms         – registry metadata (optional ?tag= filter)
  POST /api/data/random        – new random array (new run)
  POST /api/data/custom        – parse user values (new run)
  POST /api/config/algo        – switch algorithm (new run)
  POST /api/config/speed       – playback speed (1-100 or preset name)
  POST /api/step/next          – advance one step
  POST /api/step/prev          – rewind one step
  POST /api/step/goto          – jump to step N
  POST /api/step/reset         – pause and go back to step 0
  POST /api/step/end           – jump to the final step
  POST /api/step/play          – toggle play/pause
  POST /api/step/tick          – frame tick from the client's animation loop
  GET  /api/run/export         – the whole run, serialised
  POST /api/compare            – run two algorithms on the current values

State management:
  Each browser session gets a Workspace (values, algorithm, Recorder,
  Stepper) held in an in-process LRU dict keyed by a random id stored in the
  Flask session, capped at MAX_WORKSPACES.  Step sequences are far too large
  for the session cookie.
  Changing the values or the algorithm regenerates the run and bumps the
  Stepper's generation; ticks carrying an older generation get a 409.
"""

import logging
import secrets
from collections import OrderedDict
from typing import List, Optional

from flask import Flask, jsonify, request, session

from algorithms import algorithms_by_tag, get_algorithm, list_algorithms
from bars import generate_random, parse_values
from engine import SPEED_PRESETS, Recorder, Stepper, compare
from settings import DefaultConfig


app = Flask(__name__)
app.config.from_object(DefaultConfig)
app.config.from_prefixed_env("SORTVIZ")


# ---------------------------------------------------------------------------
# Workspace: one user's values, run and playback cursor
# ---------------------------------------------------------------------------
class Workspace:
    def __init__(self, values: List[int], algo_key: str, speed: int, strict: bool = False):
        self.values:   List[int] = list(values)
        self.algo_key: str       = algo_key
        self.strict:   bool      = strict
        self.recorder: Recorder  = Recorder()
        self.stepper:  Stepper   = Stepper()
        self.stepper.set_speed(speed)
        self.regenerate()

    def regenerate(self) -> None:
        """Discard the current run and record a fresh one."""
        self.stepper.pause()
        self.recorder.start(self.algo_key, self.values, strict=self.strict)
        self.recorder.run_to_completion()
        self.stepper.load(self.recorder.run.steps)

    def set_values(self, values: List[int]) -> None:
        self.values = list(values)
        self.regenerate()

    def set_algorithm(self, algo_key: str) -> None:
        self.algo_key = algo_key
        self.regenerate()


# least recently used first
WORKSPACES: "OrderedDict[str, Workspace]" = OrderedDict()


# ---------------------------------------------------------------------------
# Session State Helpers
# ---------------------------------------------------------------------------
def get_workspace() -> Workspace:
    """Look up this session's workspace, or create one with a random array."""
    sid = session.get("sid")
    if sid in WORKSPACES:
        WORKSPACES.move_to_end(sid)
    else:
        sid = secrets.token_hex(16)
        session["sid"] = sid
        values = generate_random(
            app.config["DEFAULT_ARRAY_SIZE"],
            low=app.config["MIN_VALUE"],
            high=app.config["MAX_VALUE"],
        )
        WORKSPACES[sid] = Workspace(
            values,
            app.config["DEFAULT_ALGORITHM"],
            app.config["DEFAULT_SPEED"],
            strict=app.config["STRICT_ALGORITHMS"],
        )
        app.logger.info("New workspace %s (%d values)", sid[:8], len(values))
        evict_workspaces()
    return WORKSPACES[sid]


def evict_workspaces() -> None:
    """Drop least recently used workspaces beyond MAX_WORKSPACES."""
    while len(WORKSPACES) > max(1, app.config["MAX_WORKSPACES"]):
        old_sid, _ = WORKSPACES.popitem(last=False)
        app.logger.info("Evicted workspace %s", old_sid[:8])


def get_state(ws: Workspace) -> dict:
    """Return current app state as a dict."""
    run  = ws.recorder.run
    info = get_algorithm(ws.algo_key)
    state = {
        "selected_algo": ws.algo_key,
        "algo_label":    info.label if info else ws.algo_key,
        "values":        list(ws.values),
        "comparisons":   run.comparisons if run else 0,
        "swaps":         run.swaps if run else 0,
    }
    state.update(ws.stepper.to_dict())
    return state


def step_payload(ws: Workspace, **extra) -> dict:
    step = ws.stepper.current_step
    payload = get_state(ws)
    payload["step"] = step.to_dict() if step else None
    payload.update(extra)
    return payload


def json_body() -> dict:
    """The request's JSON object, or {} when the body is missing or not an object."""
    data = request.get_json(silent=True)
    return data if isinstance(data, dict) else {}


def error(message: str, status: int = 400, **extra):
    body = {"error": message}
    body.update(extra)
    return jsonify(body), status


def stale_generation(ws: Workspace) -> Optional[tuple]:
    """409 response when the client is driving a run that has been replaced."""
    data = json_body()
    generation = data.get("generation")
    if generation is not None and generation != ws.stepper.generation:
        return error("Run superseded", 409, generation=ws.stepper.generation)
    return None


# ---------------------------------------------------------------------------
# Main Route
# ---------------------------------------------------------------------------
@app.route("/")
def index():
    ws = get_workspace()
    return jsonify({
        "app":        "Sorting Algorithm Visualizer",
        "algorithms": [a.key for a in list_algorithms()],
        "state":      get_state(ws),
    })


@app.route("/api/state")
def api_state():
    return jsonify(step_payload(get_workspace()))


@app.route("/api/algorithms")
def api_algorithms():
    tag = request.args.get("tag")
    algos = algorithms_by_tag(tag) if tag else list_algorithms()
    return jsonify({"algorithms": [a.to_dict() for a in algos]})


# ---------------------------------------------------------------------------
# API: Input Data
# ---------------------------------------------------------------------------
@app.route("/api/data/random", methods=["POST"])
def api_data_random():
    ws   = get_workspace()
    data = json_body()

    try:
        size = int(data.get("size", app.config["DEFAULT_ARRAY_SIZE"]))
        seed = data.get("seed")
        if size > app.config["MAX_ARRAY_SIZE"]:
            raise ValueError(f"Array size is limited to {app.config['MAX_ARRAY_SIZE']}")
        values = generate_random(
            size,
            low=app.config["MIN_VALUE"],
            high=app.config["MAX_VALUE"],
            seed=seed,
        )
    except (TypeError, ValueError) as e:
        return error(str(e))

    ws.set_values(values)
    return jsonify(step_payload(ws))


@app.route("/api/data/custom", methods=["POST"])
def api_data_custom():
    ws   = get_workspace()
    data = json_body()

    try:
        values = parse_values(data.get("text", ""))
    except ValueError as e:
        return error(str(e))
    if len(values) > app.config["MAX_ARRAY_SIZE"]:
        return error(f"Array size is limited to {app.config['MAX_ARRAY_SIZE']}")

    ws.set_values(values)
    return jsonify(step_payload(ws))


# ---------------------------------------------------------------------------
# API: Config Changes
# ---------------------------------------------------------------------------
@app.route("/api/config/algo", methods=["POST"])
def api_config_algo():
    ws       = get_workspace()
    data     = json_body()
    algo_key = data.get("algo_key", app.config["DEFAULT_ALGORITHM"])

    if not isinstance(algo_key, str):
        return error(f"Invalid algorithm key: {algo_key!r}")

    if get_algorithm(algo_key) is None:
        if app.config["STRICT_ALGORITHMS"]:
            return error(f"Unknown algorithm: {algo_key}")
        app.logger.warning("Unknown algorithm %r selected", algo_key)

    ws.set_algorithm(algo_key)
    return jsonify(step_payload(ws))


@app.route("/api/config/speed", methods=["POST"])
def api_config_speed():
    ws    = get_workspace()
    data  = json_body()
    speed = data.get("speed", app.config["DEFAULT_SPEED"])

    if isinstance(speed, str) and not speed.lstrip("-").isdigit():
        if speed not in SPEED_PRESETS:
            return error(f"Invalid speed: {speed!r}")
        ws.stepper.set_speed_preset(speed)
    else:
        try:
            ws.stepper.set_speed(int(speed))
        except (TypeError, ValueError):
            return error(f"Invalid speed: {speed!r}")
    return jsonify(get_state(ws))


# ---------------------------------------------------------------------------
# API: Step Navigation
# ---------------------------------------------------------------------------
@app.route("/api/step/next", methods=["POST"])
def api_step_next():
    ws = get_workspace()
    moved = ws.stepper.step_forward()
    return jsonify(step_payload(ws, moved=moved))


@app.route("/api/step/prev", methods=["POST"])
def api_step_prev():
    ws = get_workspace()
    moved = ws.stepper.step_backward()
    return jsonify(step_payload(ws, moved=moved))


@app.route("/api/step/goto", methods=["POST"])
def api_step_goto():
    ws   = get_workspace()
    data = json_body()

    try:
        idx = int(data.get("index", 0))
    except (TypeError, ValueError):
        return error("Invalid step index")
    if not ws.stepper.goto_step(idx):
        return error("Invalid step index")
    return jsonify(step_payload(ws, moved=True))


@app.route("/api/step/reset", methods=["POST"])
def api_step_reset():
    ws = get_workspace()
    ws.stepper.reset()
    return jsonify(step_payload(ws))


@app.route("/api/step/end", methods=["POST"])
def api_step_end():
    ws = get_workspace()
    ws.stepper.pause()
    ws.stepper.jump_to_end()
    return jsonify(step_payload(ws))


@app.route("/api/step/play", methods=["POST"])
def api_step_play():
    ws = get_workspace()
    stale = stale_generation(ws)
    if stale:
        return stale
    ws.stepper.toggle_play()
    return jsonify(get_state(ws))


@app.route("/api/step/tick", methods=["POST"])
def api_step_tick():
    ws = get_workspace()
    stale = stale_generation(ws)
    if stale:
        return stale
    moved = ws.stepper.tick()
    return jsonify(step_payload(ws, moved=moved))


# ---------------------------------------------------------------------------
# API: Export & Comparison
# ---------------------------------------------------------------------------
@app.route("/api/run/export")
def api_run_export():
    ws = get_workspace()
    return jsonify(ws.recorder.export())


@app.route("/api/compare", methods=["POST"])
def api_compare():
    ws   = get_workspace()
    data = json_body()
    keys = data.get("algo_keys") or []

    if not isinstance(keys, list) or len(keys) != 2:
        return error("Pick exactly two algorithms to compare")
    for key in keys:
        if not isinstance(key, str):
            return error(f"Invalid algorithm key: {key!r}")
        if get_algorithm(key) is None:
            return error(f"Unknown algorithm: {key}")

    recorders = []
    for key in keys:
        rec = Recorder()
        rec.start(key, ws.values, strict=True)
        rec.run_to_completion()
        recorders.append(rec)

    result = compare(recorders[0], recorders[1])
    return jsonify({
        "left":               result.left.__dict__,
        "right":              result.right.__dict__,
        "winner_comparisons": result.winner_comparisons,
        "winner_swaps":       result.winner_swaps,
        "winner_steps":       result.winner_steps,
    })


# ---------------------------------------------------------------------------
# Run
# ---------------------------------------------------------------------------
if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    print("=" * 60)
    print("  Sorting Algorithm Visualizer")
    print("  Starting Flask server...")
    print("  Open http://localhost:5000")
    print("=" * 60)
    app.run(debug=True, host="0.0.0.0", port=5000)
