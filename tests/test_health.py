from __future__ import annotations


def test_root(client):
    r = client.get("/")
    assert r.status_code == 200
    assert r.json()["status"] == "healthy"


def test_health_reports_database(client):
    r = client.get("/health")
    assert r.status_code == 200
    assert r.json() == {"status": "healthy", "database": "connected"}


def test_unknown_route_uses_error_body(client):
    r = client.get("/no-such-route")
    assert r.status_code == 404
    assert r.json() == {"error": "Not Found"}


def test_wrong_method_uses_error_body(client):
    r = client.delete("/users")
    assert r.status_code == 405
    assert r.json() == {"error": "Method Not Allowed"}
    assert "GET" in r.headers["allow"]
