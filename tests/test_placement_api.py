# File: tests/test_placement_api.py

from fastapi.testclient import TestClient

from blemap.main import app

client = TestClient(app)

BARRIER = {"id": "barrier-1", "coordinates": [[[0, 0], [10, 0], [10, 10], [0, 10], [0, 0]]]}


def test_antenna_range_defaults():
    resp = client.get("/api/placement/antenna-range")
    assert resp.status_code == 200
    assert resp.json() == {"range": 10.0, "step": 7.5}


def test_antenna_range_query():
    resp = client.get("/api/placement/antenna-range", params={"height": 5, "angle": 0})
    assert resp.json() == {"range": 15.0, "step": 11.25}


def test_antenna_range_negative_height_is_400():
    resp = client.get("/api/placement/antenna-range", params={"height": -1})
    assert resp.status_code == 400


def test_auto_place_beacons_avoids_barrier():
    resp = client.post(
        "/api/placement/beacons",
        json={"mapWidthMeters": 20, "mapHeightMeters": 10, "step": 5, "barriers": [BARRIER]},
    )
    assert resp.status_code == 200
    data = resp.json()
    assert data["count"] == 4
    assert [b["position"] for b in data["beacons"]] == [
        [12.5, 2.5], [17.5, 2.5], [12.5, 7.5], [17.5, 7.5]
    ]
    assert data["beacons"][0] == {"id": "beacon-auto-0", "position": [12.5, 2.5], "rssi": 70.0}


def test_auto_place_beacons_default_step():
    resp = client.post("/api/placement/beacons", json={"mapWidthMeters": 100, "mapHeightMeters": 100})
    assert resp.json()["count"] == 400


def test_auto_place_beacons_rejects_bad_input():
    resp = client.post(
        "/api/placement/beacons",
        json={"mapWidthMeters": 20, "mapHeightMeters": 10, "step": 0},
    )
    assert resp.status_code == 400

    resp = client.post("/api/placement/beacons", json={"mapWidthMeters": -5, "mapHeightMeters": 10})
    assert resp.status_code == 400


def test_degenerate_barrier_is_400():
    resp = client.post(
        "/api/placement/beacons",
        json={
            "mapWidthMeters": 20,
            "mapHeightMeters": 10,
            "barriers": [{"id": "line", "coordinates": [[[0, 0], [5, 5], [0, 0]]]}],
        },
    )
    assert resp.status_code == 400


def test_auto_place_antennas():
    resp = client.post(
        "/api/placement/antennas",
        json={"mapWidthMeters": 30, "mapHeightMeters": 15, "height": 5, "angle": 0},
    )
    assert resp.status_code == 200
    data = resp.json()
    assert data["count"] == 3
    assert data["range"] == 15.0
    assert data["step"] == 11.25
    assert data["antennas"][0] == {
        "id": "antenna-auto-0",
        "position": [5.625, 5.625],
        "height": 5.0,
        "angle": 0.0,
        "range": 15.0,
    }


def test_map_stats():
    resp = client.post(
        "/api/placement/stats",
        json={"mapWidthMeters": 40, "mapHeightMeters": 20, "barriers": [BARRIER]},
    )
    assert resp.status_code == 200
    assert resp.json() == {"totalArea": 800.0, "barrierArea": 100.0, "movableArea": 700.0}


def test_auto_place_beacons_oversized_grid_is_400():
    resp = client.post(
        "/api/placement/beacons",
        json={"mapWidthMeters": 2000, "mapHeightMeters": 2000, "step": 1},
    )
    assert resp.status_code == 400
    assert "exceeds" in resp.json()["detail"]
