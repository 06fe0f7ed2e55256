from app.config import settings


def test_health(client):
    r = client.get("/v1/health")
    assert r.status_code == 200
    assert r.json()["status"] == "ok"


def test_missing_api_key_rejected(client):
    r = client.get("/v1/sizes/letter/8")
    assert r.status_code == 401


def test_bearer_api_key_accepted(client):
    r = client.get("/v1/sizes/letter/8", headers={"Authorization": f"Bearer {settings.api_key}"})
    assert r.status_code == 200
    assert r.json() == {"letter": "M"}


def test_rate_limit(client, auth, monkeypatch):
    monkeypatch.setattr(settings, "rate_limit_burst", 2)
    monkeypatch.setattr(settings, "rate_limit_per_min", 1)
    assert client.get("/v1/health").status_code == 200
    assert client.get("/v1/health").status_code == 200
    r = client.get("/v1/health")
    assert r.status_code == 429
    assert r.json()["detail"] == "Too Many Requests"


def test_debug_status(client):
    r = client.get("/v1/debug/status")
    assert r.status_code == 200
    body = r.json()
    assert body["cache"]["entries"] == 0
    assert body["rate_limiting"]["active_buckets"] == 1


def test_request_id_is_echoed(client):
    r = client.get("/v1/health", headers={"X-Request-ID": "abc123"})
    assert r.headers["X-Request-ID"] == "abc123"


def test_request_id_is_generated(client):
    first = client.get("/v1/health").headers["X-Request-ID"]
    second = client.get("/v1/health").headers["X-Request-ID"]
    assert len(first) == 12
    assert first != second
