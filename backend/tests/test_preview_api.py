import pytest


@pytest.mark.asyncio
async def test_health(client):
    resp = await client.get("/health")
    assert resp.status_code == 200
    assert resp.json() == {"status": "ok", "version": "0.1.0"}


@pytest.mark.asyncio
async def test_preview_uses_configured_defaults(client):
    """Omitted break_words/suffix come from settings."""
    resp = await client.post(
        "/api/preview", json={"html": "<p>Hello World</p>", "length": 7}
    )
    assert resp.status_code == 200
    data = resp.json()
    assert data["html"] == "<p>Hello W</p>…"
    assert data["truncated"] is True
    assert data["visible_chars"] == 7
    assert data["fallback"] is False


@pytest.mark.asyncio
async def test_preview_keep_words_no_suffix(client):
    resp = await client.post(
        "/api/preview",
        json={
            "html": "<p>Hello World</p>",
            "length": 7,
            "break_words": False,
            "suffix": "",
        },
    )
    assert resp.status_code == 200
    assert resp.json()["html"] == "<p>Hello</p>"


@pytest.mark.asyncio
async def test_preview_default_length(client):
    resp = await client.post("/api/preview", json={"html": "<i>short</i>"})
    assert resp.status_code == 200
    data = resp.json()
    assert data["html"] == "<i>short</i>"
    assert data["truncated"] is False


@pytest.mark.asyncio
async def test_preview_malformed_falls_back(client):
    resp = await client.post(
        "/api/preview", json={"html": "<b>x</i>", "length": 10}
    )
    assert resp.status_code == 200
    data = resp.json()
    assert data["fallback"] is True
    assert data["html"] == "&lt;b&gt;x&lt;/i&gt;"


@pytest.mark.asyncio
async def test_preview_strict_rejects_malformed(client):
    resp = await client.post(
        "/api/preview",
        json={"html": "<b>x</i>", "length": 10, "strict": True},
    )
    assert resp.status_code == 422
    assert "Unexpected closing tag 'i'" in resp.json()["detail"]


@pytest.mark.asyncio
async def test_preview_length_validation(client):
    resp = await client.post("/api/preview", json={"html": "x", "length": -1})
    assert resp.status_code == 422

    resp = await client.post("/api/preview", json={"html": "x", "length": 10_001})
    assert resp.status_code == 422


@pytest.mark.asyncio
async def test_count_endpoint(client):
    resp = await client.post(
        "/api/preview/count", json={"html": "<p>Tom &amp; Jerry</p>"}
    )
    assert resp.status_code == 200
    assert resp.json() == {"visible_chars": 11}


@pytest.mark.asyncio
async def test_count_endpoint_rejects_malformed(client):
    resp = await client.post("/api/preview/count", json={"html": "a &amp"})
    assert resp.status_code == 422
    assert "';'" in resp.json()["detail"]
