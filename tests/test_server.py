"""Tests for the FastAPI web service."""

from __future__ import annotations

from pathlib import Path

import pytest

try:
    from httpx import AsyncClient, ASGITransport
    _HAS_HTTPX = True
except ImportError:
    _HAS_HTTPX = False

from md2storefront.server import app

FIXTURE_DIR = Path(__file__).parent / "fixtures"
SAMPLE_TXT = FIXTURE_DIR / "sample.txt"

pytestmark = pytest.mark.skipif(not _HAS_HTTPX, reason="httpx not installed")


@pytest.fixture
def client():
    """Create an async test client."""
    transport = ASGITransport(app=app)
    return AsyncClient(transport=transport, base_url="http://test")


@pytest.mark.asyncio
class TestHealthEndpoint:

    async def test_health(self, client):
        resp = await client.get("/health")
        assert resp.status_code == 200
        data = resp.json()
        assert data["status"] == "ok"
        assert "version" in data


@pytest.mark.asyncio
class TestProfilesEndpoint:

    async def test_list_profiles(self, client):
        resp = await client.get("/profiles")
        assert resp.status_code == 200
        assert resp.json() == {"profiles": ["semantic", "div"]}


@pytest.mark.asyncio
class TestRenderEndpoint:

    async def test_render_text(self, client):
        resp = await client.post("/render", data={"text": "# Hello\n\nParagraph."})
        assert resp.status_code == 200
        assert resp.json() == {
            "profile": "semantic",
            "html": "<h1>Hello</h1><p>Paragraph.</p>",
        }

    async def test_render_div_profile(self, client):
        resp = await client.post("/render", data={"text": "- a", "profile": "div"})
        assert resp.status_code == 200
        assert resp.json()["html"].startswith('<div class="list list-unordered">')

    async def test_no_value_is_null(self, client):
        resp = await client.post("/render", data={"text": "   "})
        assert resp.status_code == 200
        assert resp.json()["html"] is None

    async def test_fallback(self, client):
        resp = await client.post("/render", data={"text": "", "fallback": "true"})
        assert resp.status_code == 200
        assert resp.json()["html"] == "<p>No description provided.</p>"

    async def test_escapes_html(self, client):
        resp = await client.post("/render", data={"text": "<script>x</script>"})
        assert resp.json()["html"] == "<p>&lt;script&gt;x&lt;/script&gt;</p>"

    async def test_unknown_profile(self, client):
        resp = await client.post("/render", data={"text": "x", "profile": "markdown"})
        assert resp.status_code == 400


@pytest.mark.asyncio
class TestRenderFileEndpoint:

    async def test_render_file_upload(self, client):
        resp = await client.post(
            "/render/file",
            files={"file": ("notes.txt", b"## Care\n\nKeep dry.", "text/plain")},
        )
        assert resp.status_code == 200
        assert "text/html" in resp.headers["content-type"]
        assert resp.text == "<h2>Care</h2><p>Keep dry.</p>"

    async def test_render_sample_fixture(self, client):
        if not SAMPLE_TXT.exists():
            pytest.skip("sample.txt fixture not found")
        resp = await client.post(
            "/render/file",
            files={"file": ("sample.txt", SAMPLE_TXT.read_bytes(), "text/plain")},
            data={"profile": "div"},
        )
        assert resp.status_code == 200
        assert resp.text.startswith('<div class="heading heading-1">')

    async def test_bad_encoding(self, client):
        resp = await client.post(
            "/render/file",
            files={"file": ("notes.txt", b"\xff\xfe\xfa", "text/plain")},
        )
        assert resp.status_code == 400
