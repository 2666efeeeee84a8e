def test_health(client):
    r = client.get("/__health__")
    assert r.status_code == 200
    assert r.data == b"ok"


def test_dbcheck(client):
    r = client.get("/__dbcheck__")
    assert r.get_json() == {"ok": True, "db": {"connected": True, "driver": "sqlite"}}


def test_api_health_reports_provider(client):
    data = client.get("/api/health").get_json()
    assert data == {"ok": True, "database": True, "ai": False, "provider": "openai"}


def test_unknown_route_is_json_404(client):
    r = client.get("/api/nowhere")
    assert r.status_code == 404
    assert "message" in r.get_json()
