"""
main.py — Algorithm Visualizer Flask App
=========================================
JSON adapter in front of the engine.  Rendering lives in the browser;
this server only owns the step producers and one PlaybackController
per session.

Routes:
  GET  /api/algorithms         – registry listing (optionally ?family=…)
  POST /api/run                – attach a producer (step-by-step, or autoplay)
  POST /api/step/next          – advance one step
  POST /api/step/prev          – rewind one step
  POST /api/step/goto          – jump to history entry N
  POST /api/step/play          – toggle play/pause
  POST /api/stop               – stop and clear history
  POST /api/config/speed       – set pacing (preset name or ms)
  GET  /api/state              – tick() the controller, return published state
  POST /api/benchmark          – run every algorithm of a family
  POST /api/array/generate     – load a random / patterned working array
  POST /api/array/shuffle      – shuffle the working array
  POST /api/grid/maze          – generate a maze grid

State management:
  The Flask session only carries an opaque id and the selected
  algorithm key.  Controllers live in a bounded in-process table keyed
  by that id (single worker; move to a shared store before scaling out).
  Every route that touches a controller holds that controller's lock,
  so overlapping requests from one client are serialised.
  Playback is advanced by the polling client through /api/state, which
  calls controller.tick().
"""

from flask import Flask, request, jsonify, session
import logging
import os
import secrets
from contextlib import contextmanager
from typing import Any, Dict, Iterator, List, Tuple

from algorithms import (
    get_algorithm, list_algorithms, build_bst, FAMILIES,
    PATTERNS, generate_pattern, shuffled,
)
from algorithms.pathfinding import resolve_heuristic
from engine import (
    ControllerTable, PlaybackController, SPEED_PRESETS,
    benchmark_sorting, benchmark_searching, benchmark_pathfinding,
)
from grid import Grid


logger = logging.getLogger(__name__)

app = Flask(__name__)
app.secret_key = os.environ.get("VISUALIZER_SECRET_KEY") or secrets.token_hex(32)
app.config.update(
    DEFAULT_GRID_ROWS=15,
    DEFAULT_GRID_COLS=25,
    DEFAULT_ARRAY_SIZE=30,
    MAX_VALUES=200,
    MAX_GRID_CELLS=2500,
    MAX_SESSIONS=256,
    SESSION_IDLE_SECONDS=1800,
)

_CONTROLLERS = ControllerTable(
    max_sessions=app.config["MAX_SESSIONS"],
    idle_seconds=app.config["SESSION_IDLE_SECONDS"],
)


# ---------------------------------------------------------------------------
# Session State Helpers
# ---------------------------------------------------------------------------
@contextmanager
def session_controller() -> Iterator[PlaybackController]:
    """Controller for this browser session, locked for the duration of the block."""
    sid = session.get("sid")
    if sid is None:
        sid = secrets.token_hex(16)
        session["sid"] = sid
    with _CONTROLLERS.checkout(sid) as controller:
        yield controller


def state_payload(controller: PlaybackController) -> Dict[str, Any]:
    payload = controller.snapshot().to_dict()
    payload.update({
        "state":               controller.state.value,
        "algo":                session.get("algo"),
        "is_paused":           controller.is_paused,
        "has_active_producer": controller.has_active_producer,
        "can_step_back":       controller.can_step_back,
        "history_index":       controller.history_index,
        "history_length":      len(controller.history),
        "speed_ms":            controller.speed_ms,
    })
    return payload


def error(message: str, status: int = 400):
    return jsonify({"error": message}), status


# ---------------------------------------------------------------------------
# Input parsing — everything is validated here, producers never validate
# ---------------------------------------------------------------------------
def _parse_values(raw: Any) -> List[int]:
    """Accept a JSON list of ints or a comma-separated string like "5, 3, 8"."""
    if raw is None:
        raise ValueError("'values' is required")
    if isinstance(raw, str):
        parts = [p.strip() for p in raw.split(",") if p.strip()]
        try:
            values = [int(p) for p in parts]
        except ValueError:
            raise ValueError(f"'values' must be integers, got {raw!r}") from None
    elif isinstance(raw, list):
        if not all(isinstance(v, int) and not isinstance(v, bool) for v in raw):
            raise ValueError("'values' must be a list of integers")
        values = list(raw)
    else:
        raise ValueError("'values' must be a list or a comma-separated string")
    if len(values) > app.config["MAX_VALUES"]:
        raise ValueError(f"At most {app.config['MAX_VALUES']} values are allowed")
    return values


def _parse_int(raw: Any, name: str) -> int:
    if isinstance(raw, bool) or not isinstance(raw, (int, str)):
        raise ValueError(f"'{name}' must be an integer")
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"'{name}' must be an integer") from None


def _parse_position(raw: Any, name: str) -> Tuple[int, int]:
    if not isinstance(raw, (list, tuple)) or len(raw) != 2:
        raise ValueError(f"'{name}' must be [row, col]")
    return _parse_int(raw[0], name), _parse_int(raw[1], name)


def _check_grid_size(rows: int, cols: int) -> None:
    if rows < 0 or cols < 0:
        raise ValueError("Grid dimensions must not be negative")
    if rows * cols > app.config["MAX_GRID_CELLS"]:
        raise ValueError(f"Grids are limited to {app.config['MAX_GRID_CELLS']} cells")


def _parse_grid(body: Dict[str, Any]) -> Grid:
    """Build the request's grid; the size limit is enforced before any cell exists."""
    if "grid" in body:
        data = body["grid"]
        if not isinstance(data, dict):
            raise ValueError("'grid' must be an object")
        _check_grid_size(_parse_int(data.get("rows", 0), "grid.rows"), _parse_int(data.get("cols", 0), "grid.cols"))
        nodes = data.get("nodes", [])
        if not isinstance(nodes, list):
            raise ValueError("'grid.nodes' must be a list")
        if len(nodes) > app.config["MAX_GRID_CELLS"]:
            raise ValueError(f"Grids are limited to {app.config['MAX_GRID_CELLS']} cells")
        try:
            return Grid.from_dict(data)
        except (KeyError, TypeError) as exc:
            raise ValueError(f"Malformed 'grid': {exc}") from None

    rows = _parse_int(body.get("rows", app.config["DEFAULT_GRID_ROWS"]), "rows")
    cols = _parse_int(body.get("cols", app.config["DEFAULT_GRID_COLS"]), "cols")
    _check_grid_size(rows, cols)
    grid = Grid(rows, cols)
    for key, setter in (("walls", grid.set_walls), ("mud", grid.set_mud)):
        cells = [_parse_position(p, key) for p in body.get(key, [])]
        try:
            setter(cells)
        except IndexError as exc:
            raise ValueError(str(exc)) from None
    return grid


def _json_body() -> Dict[str, Any]:
    body = request.get_json(silent=True)
    if body is None:
        return {}
    if not isinstance(body, dict):
        raise ValueError("Request body must be a JSON object")
    return body


# ---------------------------------------------------------------------------
# API: Registry
# ---------------------------------------------------------------------------
@app.route("/api/algorithms")
def api_algorithms():
    family = request.args.get("family")
    try:
        algos = list_algorithms(family)
    except ValueError as exc:
        return error(str(exc))
    return jsonify({
        "families":   list(FAMILIES),
        "algorithms": [a.to_dict() for a in algos],
        "heuristics": ["manhattan", "euclidean"],
        "patterns":   list(PATTERNS),
        "speeds":     SPEED_PRESETS,
    })


# ---------------------------------------------------------------------------
# API: Run
# ---------------------------------------------------------------------------
@app.route("/api/run", methods=["POST"])
def api_run():
    with session_controller() as controller:
        try:
            body = _json_body()
            info = get_algorithm(body.get("algo", ""))

            if info.family == "sorting":
                values = _parse_values(body.get("values"))
                controller.load_array(values)
                producer = info.fn(list(values))

            elif info.family == "searching":
                values = _parse_values(body.get("values"))
                if info.requires_sorted:
                    values = sorted(values)
                target = _parse_int(body.get("target"), "target")
                controller.load_array(values)
                producer = info.fn(list(values), target)

            elif info.family == "pathfinding":
                grid  = _parse_grid(body)
                start = _parse_position(body.get("start", [0, 0]), "start")
                end   = _parse_position(body.get("end", [grid.rows - 1, grid.cols - 1]), "end")
                heuristic = body.get("heuristic")
                if heuristic is not None and not isinstance(heuristic, str):
                    raise ValueError("'heuristic' must be a string")
                if info.has_heuristic:
                    resolve_heuristic(heuristic)
                controller.load_grid(grid)
                producer = info.fn(grid.prepared(), start, end, heuristic=heuristic)

            else:
                root = build_bst(_parse_values(body.get("values")))
                controller.stop()
                producer = info.fn(root)

        except ValueError as exc:
            return error(str(exc))

        controller.start_step_by_step(producer)
        session["algo"] = info.key
        if body.get("autoplay"):
            controller.toggle_pause()
        logger.info("Attached %s (%s)", info.label, info.family)

        payload = state_payload(controller)
        payload["pseudocode"] = info.pseudocode
        payload["complexity"] = info.complexity.to_dict()
        return jsonify(payload)


# ---------------------------------------------------------------------------
# API: Step Navigation
# ---------------------------------------------------------------------------
@app.route("/api/step/next", methods=["POST"])
def api_step_next():
    with session_controller() as controller:
        if not controller.step_forward():
            return error("Already at last step")
        return jsonify(state_payload(controller))


@app.route("/api/step/prev", methods=["POST"])
def api_step_prev():
    with session_controller() as controller:
        if not controller.step_backward():
            return error("Already at first step")
        return jsonify(state_payload(controller))


@app.route("/api/step/goto", methods=["POST"])
def api_step_goto():
    with session_controller() as controller:
        try:
            idx = _parse_int(_json_body().get("index", 0), "index")
        except ValueError as exc:
            return error(str(exc))
        if not controller.goto(idx):
            return error("Invalid step index")
        return jsonify(state_payload(controller))


@app.route("/api/step/play", methods=["POST"])
def api_step_play():
    with session_controller() as controller:
        if not controller.has_active_producer:
            return error("Nothing to play, start a run first")
        controller.toggle_pause()
        return jsonify(state_payload(controller))


@app.route("/api/stop", methods=["POST"])
def api_stop():
    with session_controller() as controller:
        controller.stop()
        return jsonify(state_payload(controller))


@app.route("/api/state")
def api_state():
    with session_controller() as controller:
        controller.tick()
        return jsonify(state_payload(controller))


# ---------------------------------------------------------------------------
# API: Config Changes
# ---------------------------------------------------------------------------
@app.route("/api/config/speed", methods=["POST"])
def api_config_speed():
    with session_controller() as controller:
        try:
            speed = _json_body().get("speed", "medium")
            if isinstance(speed, str) and speed in SPEED_PRESETS:
                controller.set_speed_preset(speed)
            else:
                ms = _parse_int(speed, "speed")
                if ms < 0:
                    raise ValueError("'speed' must not be negative")
                controller.set_speed(ms)
        except ValueError as exc:
            return error(str(exc))
        return jsonify({"speed_ms": controller.speed_ms})


# ---------------------------------------------------------------------------
# API: Benchmark
# ---------------------------------------------------------------------------
@app.route("/api/benchmark", methods=["POST"])
def api_benchmark():
    try:
        body   = _json_body()
        family = body.get("family", "sorting")
        if family == "sorting":
            results = benchmark_sorting(_parse_values(body.get("values")))
        elif family == "searching":
            results = benchmark_searching(
                _parse_values(body.get("values")),
                _parse_int(body.get("target"), "target"),
            )
        elif family == "pathfinding":
            grid = _parse_grid(body)
            results = benchmark_pathfinding(
                grid,
                _parse_position(body.get("start", [0, 0]), "start"),
                _parse_position(body.get("end", [grid.rows - 1, grid.cols - 1]), "end"),
            )
        else:
            raise ValueError(f"Cannot benchmark family {family!r}")
    except ValueError as exc:
        return error(str(exc))
    return jsonify({"family": family, "results": [m.to_dict() for m in results]})


# ---------------------------------------------------------------------------
# API: Arrays
# ---------------------------------------------------------------------------
@app.route("/api/array/generate", methods=["POST"])
def api_array_generate():
    with session_controller() as controller:
        try:
            body    = _json_body()
            size    = _parse_int(body.get("size", app.config["DEFAULT_ARRAY_SIZE"]), "size")
            pattern = body.get("pattern", "random")
            seed    = body.get("seed")
            seed    = _parse_int(seed, "seed") if seed is not None else None
            if size > app.config["MAX_VALUES"]:
                raise ValueError(f"At most {app.config['MAX_VALUES']} values are allowed")
            if not isinstance(pattern, str):
                raise ValueError("'pattern' must be a string")
            values = generate_pattern(size, pattern, seed=seed)
        except ValueError as exc:
            return error(str(exc))

        controller.load_array(values)
        return jsonify(state_payload(controller))


@app.route("/api/array/shuffle", methods=["POST"])
def api_array_shuffle():
    with session_controller() as controller:
        try:
            seed = _json_body().get("seed")
            seed = _parse_int(seed, "seed") if seed is not None else None
        except ValueError as exc:
            return error(str(exc))

        controller.load_array(shuffled(controller.array, seed=seed))
        return jsonify(state_payload(controller))


# ---------------------------------------------------------------------------
# API: Grid
# ---------------------------------------------------------------------------
@app.route("/api/grid/maze", methods=["POST"])
def api_grid_maze():
    with session_controller() as controller:
        try:
            body  = _json_body()
            rows  = _parse_int(body.get("rows", app.config["DEFAULT_GRID_ROWS"]), "rows")
            cols  = _parse_int(body.get("cols", app.config["DEFAULT_GRID_COLS"]), "cols")
            seed  = body.get("seed")
            seed  = _parse_int(seed, "seed") if seed is not None else None
            start = _parse_position(body.get("start", [1, 1]), "start")
            end   = _parse_position(body.get("end", [rows - 2, cols - 2]), "end")
            _check_grid_size(rows, cols)
        except ValueError as exc:
            return error(str(exc))

        grid = Grid.generate_maze(rows, cols, seed=seed, keep_open=[start, end])
        controller.load_grid(grid)
        return jsonify({"grid": grid.to_dict(), "start": list(start), "end": list(end)})


# ---------------------------------------------------------------------------
# Run
# ---------------------------------------------------------------------------
def configure_logging() -> None:
    logging.basicConfig(
        level=os.environ.get("VISUALIZER_LOG_LEVEL", "INFO").upper(),
        format="%(asctime)s %(levelname)-7s %(name)s: %(message)s",
    )


if __name__ == "__main__":
    configure_logging()
    logger.info("Algorithm Visualizer API on http://localhost:5000")
    app.run(debug=True, host="0.0.0.0", port=5000)
