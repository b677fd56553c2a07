from fastapi.testclient import TestClient

from infra_api.main import create_app


def test_unexpected_error_keeps_error_shape(profanity):
    app = create_app(profanity_filter=profanity)

    @app.get("/boom")
    def boom():
        raise RuntimeError("disk on fire")

    with TestClient(app, raise_server_exceptions=False) as c:
        r = c.get("/boom")
    assert r.status_code == 500
    assert r.headers["content-type"].startswith("application/json")
    assert r.json() == {"error": "disk on fire"}


def test_unknown_route_uses_error_shape(client):
    r = client.get("/api/nope")
    assert r.status_code == 404
    assert r.json() == {"error": "Not Found"}


def test_nan_coordinates_rejected_on_direct_create(client):
    body = '{"name": "X", "budget": 5, "status": "planning", "province": "Ontario", "city": "Y", "latitude": NaN, "longitude": 1}'
    r = client.post("/api/projects", content=body, headers={"content-type": "application/json"})
    assert r.status_code == 400
    assert "latitude" in r.json()["error"]
