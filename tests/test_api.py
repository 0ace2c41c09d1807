import pytest

import grid.grid as grid_module
from grid import GridNode
from main import app


@pytest.fixture
def client():
    app.config["TESTING"] = True
    with app.test_client() as client:
        yield client


def drain(client):
    """Step until the controller refuses, return every successful payload."""
    payloads = []
    while True:
        resp = client.post("/api/step/next")
        if resp.status_code != 200:
            assert resp.get_json()["error"] == "Already at last step"
            return payloads
        payloads.append(resp.get_json())


# ---------------------------------------------------------------------------
# Registry
# ---------------------------------------------------------------------------
def test_algorithms_listing(client):
    data = client.get("/api/algorithms").get_json()
    assert len(data["algorithms"]) == 24
    assert data["families"] == ["sorting", "searching", "pathfinding", "traversal"]
    assert data["heuristics"] == ["manhattan", "euclidean"]
    assert data["speeds"]["medium"] == 400


def test_algorithms_listing_by_family(client):
    data = client.get("/api/algorithms?family=searching").get_json()
    assert [a["key"] for a in data["algorithms"]] == ["linear", "binary", "jump", "interpolation", "exponential"]
    assert client.get("/api/algorithms?family=nope").status_code == 400


# ---------------------------------------------------------------------------
# Run + step navigation
# ---------------------------------------------------------------------------
def test_sorting_run_step_by_step(client):
    resp = client.post("/api/run", json={"algo": "bubble", "values": [3, 1, 2]})
    data = resp.get_json()
    assert resp.status_code == 200
    assert data["state"] == "paused"
    assert data["algo"] == "bubble"
    assert data["history_length"] == 0
    assert data["pseudocode"][0].startswith("def bubble_sort")
    assert data["complexity"]["worst"] == "O(n²)"

    first = client.post("/api/step/next").get_json()
    assert first["history_index"] == 0
    assert client.post("/api/step/prev").status_code == 400

    payloads = drain(client)
    assert payloads[-1]["array"] == [1, 2, 3]
    assert client.get("/api/state").get_json()["state"] == "idle"

    back = client.post("/api/step/prev").get_json()
    assert back["history_index"] == back["history_length"] - 2


def test_values_may_be_a_comma_separated_string(client):
    resp = client.post("/api/run", json={"algo": "Insertion", "values": "5, 3, 8"})
    assert resp.status_code == 200
    assert resp.get_json()["array"] == [5, 3, 8]


@pytest.mark.parametrize("body", [
    {"algo": "bogo", "values": [1, 2]},
    {"algo": "bubble", "values": "a,b"},
    {"algo": "bubble", "values": [True, 2]},
    {"algo": "bubble"},
    {"algo": "bubble", "values": list(range(500))},
    {"algo": "binary", "values": [1, 2, 3], "target": "x"},
])
def test_invalid_run_requests(client, body):
    resp = client.post("/api/run", json=body)
    assert resp.status_code == 400
    assert "error" in resp.get_json()


def test_non_object_body_is_rejected(client):
    assert client.post("/api/run", json=[1, 2, 3]).status_code == 400


def test_search_run_sorts_input_and_reports_hit(client):
    resp = client.post("/api/run", json={"algo": "binary", "values": [9, 1, 5], "target": 5})
    assert resp.get_json()["array"] == [1, 5, 9]

    payloads = drain(client)
    assert payloads[-1]["found"] == 1


def test_pathfinding_run(client):
    body = {"algo": "dijkstra", "rows": 3, "cols": 3, "walls": [[1, 0], [1, 1]], "mud": [[0, 2]]}
    resp = client.post("/api/run", json=body)
    assert resp.status_code == 200
    assert resp.get_json()["grid"]["nodes"][3]["is_wall"] is True

    payloads = drain(client)
    nodes = payloads[-1]["grid"]["nodes"]
    assert nodes[8]["is_path"] is True
    assert nodes[0]["is_path"] is True
    assert nodes[3]["is_path"] is False


def test_pathfinding_run_accepts_a_grid_object(client):
    grid = client.post("/api/grid/maze", json={"rows": 7, "cols": 7, "seed": 5}).get_json()["grid"]
    resp = client.post("/api/run", json={"algo": "A*", "grid": grid, "start": [1, 1], "end": [5, 5],
                                         "heuristic": "euclidean"})
    assert resp.status_code == 200
    nodes = drain(client)[-1]["grid"]["nodes"]
    assert nodes[5 * 7 + 5]["is_path"] is True


@pytest.mark.parametrize("body", [
    {"algo": "astar", "rows": 3, "cols": 3, "heuristic": "chebyshev"},
    {"algo": "astar", "rows": 3, "cols": 3, "heuristic": 3},
    {"algo": "bfs", "rows": 3, "cols": 3, "walls": [[5, 5]]},
    {"algo": "bfs", "rows": 3, "cols": 3, "start": [0]},
    {"algo": "bfs", "rows": 100, "cols": 100},
    {"algo": "bfs", "grid": {"rows": 2, "cols": 2, "nodes": [{"col": 0}]}},
])
def test_invalid_pathfinding_requests(client, body):
    assert client.post("/api/run", json=body).status_code == 400


def test_traversal_run(client):
    client.post("/api/run", json={"algo": "in_order", "values": [2, 1, 3]})
    visited = [p["variables"]["value"] for p in drain(client)]
    assert visited == [1, 2, 3]
    assert client.get("/api/state").get_json()["state"] == "idle"


def test_goto(client):
    client.post("/api/run", json={"algo": "selection", "values": [4, 3, 2, 1]})
    for _ in range(4):
        client.post("/api/step/next")
    data = client.post("/api/step/goto", json={"index": 1}).get_json()
    assert data["history_index"] == 1
    assert client.post("/api/step/goto", json={"index": 50}).status_code == 400


# ---------------------------------------------------------------------------
# Playback
# ---------------------------------------------------------------------------
def test_play_requires_an_active_run(client):
    assert client.post("/api/step/play").status_code == 400


def test_play_toggles(client):
    client.post("/api/run", json={"algo": "bubble", "values": [2, 1]})
    assert client.post("/api/step/play").get_json()["state"] == "running"
    assert client.post("/api/step/play").get_json()["state"] == "paused"


def test_state_ticks_an_autoplaying_run(client):
    client.post("/api/config/speed", json={"speed": 0})
    data = client.post("/api/run", json={"algo": "bubble", "values": [3, 2, 1], "autoplay": True}).get_json()
    assert data["state"] == "running"

    data = client.get("/api/state").get_json()
    assert data["history_length"] == 1


def test_stop_clears_history(client):
    client.post("/api/run", json={"algo": "bubble", "values": [3, 2, 1]})
    client.post("/api/step/next")
    data = client.post("/api/stop").get_json()
    assert data["state"] == "idle"
    assert data["history_length"] == 0
    assert data["array"] is not None


@pytest.mark.parametrize("speed, expected", [("fast", 150), ("turbo", 50), (250, 250), ("75", 75)])
def test_speed(client, speed, expected):
    assert client.post("/api/config/speed", json={"speed": speed}).get_json() == {"speed_ms": expected}


@pytest.mark.parametrize("speed", [-1, "warp", 1.5])
def test_invalid_speed(client, speed):
    assert client.post("/api/config/speed", json={"speed": speed}).status_code == 400


# ---------------------------------------------------------------------------
# Benchmark + maze
# ---------------------------------------------------------------------------
def test_benchmark_sorting(client):
    data = client.post("/api/benchmark", json={"family": "sorting", "values": [5, 2, 9, 1]}).get_json()
    assert data["family"] == "sorting"
    assert len(data["results"]) == 11
    assert all(r["total_steps"] > 0 for r in data["results"])


def test_benchmark_pathfinding(client):
    data = client.post("/api/benchmark", json={"family": "pathfinding", "rows": 4, "cols": 4}).get_json()
    assert len(data["results"]) == 7
    assert all(r["path_found"] for r in data["results"])


def test_benchmark_rejects_traversal(client):
    assert client.post("/api/benchmark", json={"family": "traversal"}).status_code == 400


def test_maze(client):
    data = client.post("/api/grid/maze", json={"rows": 11, "cols": 11, "seed": 3}).get_json()
    assert data["grid"]["rows"] == 11
    assert data["start"] == [1, 1]
    assert data["end"] == [9, 9]

    state = client.get("/api/state").get_json()
    assert state["grid"] == data["grid"]


def test_maze_size_is_limited(client):
    assert client.post("/api/grid/maze", json={"rows": 100, "cols": 100}).status_code == 400


def test_payload_reports_whether_the_cursor_can_go_back(client):
    client.post("/api/run", json={"algo": "bubble", "values": [3, 2, 1]})
    assert client.post("/api/step/next").get_json()["can_step_back"] is False
    assert client.post("/api/step/next").get_json()["can_step_back"] is True


# ---------------------------------------------------------------------------
# Grid size limits
# ---------------------------------------------------------------------------
@pytest.mark.parametrize("body", [
    {"algo": "bfs", "rows": 400, "cols": 400},
    {"algo": "bfs", "grid": {"rows": 400, "cols": 400, "nodes": []}},
    {"algo": "bfs", "rows": -400, "cols": 3},
])
def test_oversized_grid_is_rejected_before_any_cell_is_built(client, monkeypatch, body):
    built = []

    class CountingNode(GridNode):
        def __init__(self, *args, **kwargs):
            built.append(1)
            super().__init__(*args, **kwargs)

    monkeypatch.setattr(grid_module, "GridNode", CountingNode)

    assert client.post("/api/run", json=body).status_code == 400
    assert client.post("/api/benchmark", json=dict(body, family="pathfinding")).status_code == 400
    assert built == []


def test_grid_nodes_must_be_a_list(client):
    body = {"algo": "bfs", "grid": {"rows": 2, "cols": 2, "nodes": 7}}
    assert client.post("/api/run", json=body).status_code == 400


# ---------------------------------------------------------------------------
# Arrays
# ---------------------------------------------------------------------------
def test_generate_array(client):
    data = client.post("/api/array/generate", json={"size": 12, "pattern": "reversed"}).get_json()
    assert len(data["array"]) == 12
    assert data["array"] == sorted(data["array"], reverse=True)
    assert data["state"] == "idle"


def test_generate_array_is_reproducible_with_a_seed(client):
    first = client.post("/api/array/generate", json={"size": 15, "seed": 8}).get_json()["array"]
    second = client.post("/api/array/generate", json={"size": 15, "seed": 8}).get_json()["array"]
    assert first == second


@pytest.mark.parametrize("body", [
    {"size": 500},
    {"size": -1},
    {"pattern": "zigzag"},
    {"pattern": 4},
    {"seed": "x"},
])
def test_invalid_generate_requests(client, body):
    assert client.post("/api/array/generate", json=body).status_code == 400


def test_shuffle_stops_the_run_and_permutes_the_array(client):
    client.post("/api/run", json={"algo": "bubble", "values": list(range(20))})
    client.post("/api/step/next")

    data = client.post("/api/array/shuffle", json={"seed": 2}).get_json()
    assert sorted(data["array"]) == list(range(20))
    assert data["array"] != list(range(20))
    assert data["history_length"] == 0
    assert data["state"] == "idle"


def test_patterns_are_listed(client):
    assert client.get("/api/algorithms").get_json()["patterns"] == ["random", "sorted", "reversed", "nearly"]
