import pytest
from fastapi.middleware.cors import CORSMiddleware
from fastapi.testclient import TestClient

from search_gateway.main import app

FRONT_END = "http://localhost:8080"


@pytest.fixture()
def client(monkeypatch):
    # CORSMiddleware reads allow_origins when the middleware stack is built,
    # so patch its options and force a rebuild on the next request
    (cors,) = [m for m in app.user_middleware if m.cls is CORSMiddleware]
    monkeypatch.setitem(cors.kwargs, "allow_origins", [FRONT_END])
    monkeypatch.setattr(app, "middleware_stack", None)
    return TestClient(app)


def test_cors_preflight(client):
    r = client.options(
        "/api/search",
        headers={
            "Origin": FRONT_END,
            "Access-Control-Request-Method": "POST",
        }
    )
    assert r.status_code in (200, 204)
    assert r.headers.get("access-control-allow-origin") == FRONT_END


def test_cors_rejects_unlisted_origin(client):
    r = client.options(
        "/api/search",
        headers={
            "Origin": "http://evil.example",
            "Access-Control-Request-Method": "POST",
        }
    )
    assert r.status_code == 400
    assert "access-control-allow-origin" not in r.headers
