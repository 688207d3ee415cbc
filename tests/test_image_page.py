"""End-to-end tests for the /{slug} embed page."""
import pytest
from fastapi.testclient import TestClient

from app.handlers import image_handler
from app.main import app
from app.services.disco_api import get_api_client


@pytest.fixture
def client(api_client):
    app.dependency_overrides[get_api_client] = lambda: api_client
    yield TestClient(app)
    app.dependency_overrides.clear()


def _get(client, slug="abc123", host="disco.pics"):
    return client.get(f"/{slug}", headers={"host": host}, follow_redirects=False)


def test_scenario_basic_image(client, backend, image_json):
    backend.image_json = image_json
    backend.user_json = {"data": {"user": {"embed_title": "My Pic", "embed_colour": "ff0000", "custom_css": ""}}}

    resp = _get(client)

    assert resp.status_code == 200
    html = resp.text
    assert '<meta property="og:title" content="My Pic" />' in html
    assert '<meta property="theme-color" content="#ff0000" />' in html
    assert '<meta property="og:image" content="https://cdn.discordapp.com/x.png" />' in html
    assert 'src="https://media.discordapp.net/x.png"' in html
    assert 'href="https://cdn.discordapp.com/x.png"' in html
    assert "bg-black" in html
    assert "<style" not in html
    assert "Download image abc123" in html
    assert 'href="https://disco.pics"' in html
    assert "<title>Disco.pics</title>" in html
    assert backend.paths() == ["/api/getImage", "/api/user"]
    assert backend.requests[0].url.params["host"] == "disco.pics"
    assert backend.requests[1].url.params["id"] == "u1"


def test_video_page(client, backend, image_json):
    image_json["img_url"] = "https://cdn.discordapp.com/clip.mp4"
    backend.image_json = image_json

    html = _get(client).text

    assert 'property="og:image"' not in html
    assert '<meta property="og:video:secure_url" content="https://cdn.discordapp.com/clip.mp4" />' in html
    assert '<meta property="og:video:width" content="1280" />' in html
    assert '<video src="https://media.discordapp.net/clip.mp4"' in html


def test_custom_css_embedded_verbatim(client, backend, image_json):
    css = "div > img { border: 2px solid \"red\"; }"
    backend.image_json = image_json
    backend.user_json = {"data": {"user": {"custom_css": css}}}

    html = _get(client).text

    assert css in html
    assert "bg-black" not in html


def test_owner_lookup_failure_degrades(client, backend, image_json):
    backend.image_json = image_json
    backend.user_status = 500

    resp = _get(client)

    assert resp.status_code == 200
    html = resp.text
    assert '<meta property="og:title" content="" />' in html
    assert '<meta property="twitter:title" content="Disco.pics" />' in html
    assert '<meta property="theme-color" content="#000000" />' in html
    assert "bg-black" in html
    assert "undefined" not in html
    assert "None" not in html


def test_image_not_found_redirects(client, backend):
    backend.image_status = 404

    resp = _get(client)

    assert resp.status_code == 302
    assert resp.headers["location"] == "/404"
    assert backend.paths() == ["/api/getImage"]


def test_missing_hostname_makes_no_calls(client, backend):
    resp = _get(client, host="")

    assert resp.status_code == 302
    assert resp.headers["location"] == "/404"
    assert backend.requests == []


def test_hostname_override(client, backend, image_json, monkeypatch):
    monkeypatch.setattr(image_handler.settings, "hostname_override", "disco.pics")
    backend.image_json = image_json

    resp = _get(client, host="localhost:8000")

    assert resp.status_code == 200
    assert backend.requests[0].url.params["host"] == "disco.pics"


def test_escapes_preferences(client, backend, image_json):
    backend.image_json = image_json
    backend.user_json = {"data": {"user": {"embed_title": '"><script>alert(1)</script>'}}}

    html = _get(client).text

    assert "<script>alert(1)</script>" not in html
    assert "&lt;script&gt;" in html
