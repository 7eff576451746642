"""Tests for the HTTP endpoint layer."""

from datetime import datetime, timedelta

from fastapi.testclient import TestClient
import pytest

from promo_countdown import web
from promo_countdown.errors import RenderFailure
from promo_countdown.settings import CountdownSettings

TARGET = datetime(2025, 11, 28, 0, 0, 0)


def make_client(now: datetime, **overrides) -> TestClient:
    settings = CountdownSettings(target_date=TARGET, **overrides)
    return TestClient(web.create_app(settings, clock=lambda: now))


@pytest.mark.parametrize(
    "path, media_type",
    [
        ("/countdown.gif", "image/gif"),
        ("/countdown.png", "image/png"),
        ("/countdown.svg", "image/svg+xml"),
    ],
)
def test_image_endpoints(path, media_type):
    client = make_client(TARGET - timedelta(hours=5))

    response = client.get(path)

    assert response.status_code == 200
    assert response.headers["content-type"].startswith(media_type)
    assert response.headers["cache-control"] == "no-cache, no-store, must-revalidate"
    assert response.headers["pragma"] == "no-cache"
    assert response.headers["expires"] == "0"
    assert len(response.content) > 0


def test_svg_shows_remaining_time():
    client = make_client(datetime(2025, 11, 27, 23, 59, 58))

    response = client.get("/countdown.svg")

    assert response.headers["x-countdown-mode"] == "real_countdown"
    assert response.text.count(">00</text>") == 3
    assert ">02</text>" in response.text


def test_expired_endpoints():
    client = make_client(TARGET + timedelta(seconds=1))

    for path in web.ENDPOINTS:
        response = client.get(path)
        assert response.status_code == 200
        assert response.headers["x-countdown-mode"] == "expired_loop"


def test_gif_mode_query_override():
    client = make_client(TARGET - timedelta(minutes=10))

    assert client.get("/countdown.gif").headers["x-countdown-mode"] == "cosmetic_loop"
    response = client.get("/countdown.gif", params={"mode": "countdown"})
    assert response.headers["x-countdown-mode"] == "real_countdown"


def test_gif_mode_from_settings():
    client = make_client(TARGET - timedelta(minutes=10), gif_mode="countdown")

    assert client.get("/countdown.gif").headers["x-countdown-mode"] == "real_countdown"


def test_gif_invalid_mode_is_bad_request():
    client = make_client(TARGET - timedelta(minutes=10))

    response = client.get("/countdown.gif", params={"mode": "sparkle"})

    assert response.status_code == 400
    assert "Invalid GIF mode" in response.json()["detail"]


def test_render_failure_returns_plain_500(monkeypatch):
    def explode(*args, **kwargs):
        raise RenderFailure("encoder exploded")

    monkeypatch.setattr(web, "encode_countdown", explode)
    client = make_client(TARGET - timedelta(minutes=10))

    response = client.get("/countdown.png")

    assert response.status_code == 500
    assert response.text == "Error generating image"
    assert response.headers["content-type"].startswith("text/plain")


def test_clock_is_read_per_request():
    now = [TARGET - timedelta(seconds=1)]
    settings = CountdownSettings(target_date=TARGET)
    client = TestClient(web.create_app(settings, clock=lambda: now[0]))

    assert client.get("/countdown.png").headers["x-countdown-mode"] == "real_countdown"
    now[0] = TARGET
    assert client.get("/countdown.png").headers["x-countdown-mode"] == "expired_loop"


def test_health():
    client = make_client(TARGET - timedelta(seconds=90))

    response = client.get("/health")

    assert response.json() == {
        "status": "ok",
        "target": "2025-11-28T00:00:00",
        "remaining": 90,
    }


def test_index_lists_endpoints():
    client = make_client(TARGET)

    response = client.get("/")

    assert response.status_code == 200
    for path in web.ENDPOINTS:
        assert path in response.text
