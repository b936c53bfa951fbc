"""Tests for API endpoints."""

from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from tests.conftest import SQUARE_D, SQUARE_SVG

from vectorloop.main import app


client = TestClient(app)


def test_health():
    response = client.get("/api/health")
    assert response.status_code == 200
    assert response.json()["status"] == "ok"


def test_parse_square():
    response = client.post("/api/parse", json={"d": SQUARE_D})
    assert response.status_code == 200
    data = response.json()
    assert len(data["segments"]) == 4
    assert data["segments"][0] == {"kind": "line", "points": [[0.0, 0.0], [10.0, 0.0]]}
    assert data["d"].startswith("M0.0,0.0")


def test_parse_unsupported_command():
    response = client.post("/api/parse", json={"d": "M0,0 A1,1 0 0 1 2,2 Z"})
    assert response.status_code == 422
    assert response.json()["detail"]["error"] == "UnsupportedCommand"


def test_parse_strict_closure():
    response = client.post("/api/parse", json={"d": "M0,0 L10,0 L10,10 Z", "strict_closure": True})
    assert response.status_code == 422
    assert response.json()["detail"]["error"] == "UnclosedPath"


def test_tessellate_square():
    response = client.post(
        "/api/tessellate",
        json={"svg": SQUARE_SVG, "sample_count": 4, "precision": "float32"},
    )
    assert response.status_code == 200
    data = response.json()
    assert data["point_count"] == 8
    assert data["segment_count"] == 4
    assert data["precision"] == "float32"
    assert data["points"] == [0, 0, 5, 0, 10, 0, 10, 5, 10, 10, 5, 10, 0, 10, 0, 5]
    assert data["area"] == pytest.approx(100.0)
    assert data["perimeter"] == pytest.approx(40.0)


def test_tessellate_missing_path():
    response = client.post("/api/tessellate", json={"svg": "<svg><g></g></svg>"})
    assert response.status_code == 422
    assert response.json()["detail"]["error"] == "NotFound"


@pytest.mark.parametrize(
    "payload",
    [
        {"svg": SQUARE_SVG, "sample_count": 0},
        {"svg": SQUARE_SVG, "precision": "float16"},
    ],
)
def test_tessellate_rejects_bad_options(payload):
    response = client.post("/api/tessellate", json=payload)
    assert response.status_code == 422


def test_parse_overflowing_number():
    response = client.post("/api/parse", json={"d": "M0,0 L1e999,0 L0,10 Z"})
    assert response.status_code == 422
    detail = response.json()["detail"]
    assert set(detail) == {"error", "message"}
    assert detail["error"] == "MalformedPath"
