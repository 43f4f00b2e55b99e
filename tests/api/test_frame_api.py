import pytest
from fastapi.testclient import TestClient

from api.dependencies import set_render_loop
from api.main import create_app
from engine.frame_compositor import FrameCompositor
from engine.render_context import RenderContext
from engine.render_loop import RenderLoop
from hardware.led.virtual_strip import VirtualStrip
from models.config import AppConfig
from models.enums import WiringTopology
from models.grid import GridConfig


@pytest.fixture
def client():
    yield TestClient(create_app())
    set_render_loop(None)


@pytest.fixture
def serpentine_loop():
    config = AppConfig(grid=GridConfig(wiring=WiringTopology.SERPENTINE))
    loop = RenderLoop(
        FrameCompositor.from_config(config),
        RenderContext.create(config.grid),
        VirtualStrip(config.grid.pixel_count),
        frame_interval_ms=100,
    )
    set_render_loop(loop)
    return loop


def test_health(client):
    response = client.get("/api/health")
    assert response.status_code == 200
    assert response.json()["status"] == "healthy"


def test_renderer_not_registered(client):
    set_render_loop(None)
    response = client.get("/api/v1/frame/config")

    assert response.status_code == 503
    assert response.json()["error"]["code"] == "RENDERER_UNAVAILABLE"


def test_grid_config(client, serpentine_loop):
    body = client.get("/api/v1/frame/config").json()

    assert body["width"] == 8
    assert body["height"] == 8
    assert body["pixel_count"] == 64
    assert body["wiring"] == "serpentine"
    assert body["rotation"] == 0
    assert body["brightness_ceiling"] == 60
    assert body["frame_interval_ms"] == 100


def test_latest_before_first_commit(client, serpentine_loop):
    response = client.get("/api/v1/frame/latest")

    assert response.status_code == 404
    error = response.json()["error"]
    assert error["code"] == "FRAME_NOT_AVAILABLE"
    assert "request_id" in response.json()


def test_latest_physical_order(client, serpentine_loop):
    frame = serpentine_loop.render_once()

    body = client.get("/api/v1/frame/latest").json()

    assert body["index"] == frame.index
    assert body["layout"] == "physical"
    assert body["pixels"] == frame.to_hex()
    assert body["rows"] == []
    assert body["lit"] == sum(1 for c in frame.pixels if not c.is_black())


def test_latest_logical_rows_undo_wiring(client, serpentine_loop):
    frame = serpentine_loop.render_once()
    hex_pixels = frame.to_hex()

    body = client.get("/api/v1/frame/latest", params={"layout": "logical"}).json()

    rows = body["rows"]
    assert len(rows) == 8 and all(len(row) == 8 for row in rows)
    assert rows[1][0] == hex_pixels[15]
    assert rows[1][7] == hex_pixels[8]
    assert rows[2][3] == hex_pixels[19]
    assert body["pixels"] == []


def test_invalid_layout_rejected(client, serpentine_loop):
    response = client.get("/api/v1/frame/latest", params={"layout": "diagonal"})
    assert response.status_code == 422


def test_metrics(client, serpentine_loop):
    serpentine_loop.render_once()
    serpentine_loop.render_once()

    body = client.get("/api/v1/frame/metrics").json()

    assert body["frames_rendered"] == 2
    assert body["running"] is False
    assert body["frames_exported"] == 0
