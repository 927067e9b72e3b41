from factories import API


async def test_liveness_and_readiness(make_client, monkeypatch):
    monkeypatch.setenv("BACKEND_BUILT_AT", "2024-01-01T00:00:00Z")
    client = await make_client()

    resp = await client.get(f"{API}/health")
    assert resp.status_code == 200
    assert resp.json() == {"status": "ok", "built_at": "2024-01-01T00:00:00Z"}

    resp = await client.get(f"{API}/health/ready")
    assert resp.json() == {"status": "ok", "database": "connected"}


async def test_unknown_route_uses_message_envelope(make_client):
    client = await make_client()
    resp = await client.get(f"{API}/nope")
    assert resp.status_code == 404
    assert "message" in resp.json()
