import pytest
from fastapi.testclient import TestClient

import search_gateway.core.config as cfg
from search_gateway.api.dependencies import get_health_status, get_search_service
from search_gateway.main import app
from search_gateway.services.search import SearchService

from tests.fakes import FakeStore

AUTH = ("user", "password")


@pytest.fixture()
def store():
    return FakeStore()


@pytest.fixture()
def client(store, monkeypatch):
    monkeypatch.setattr(cfg.settings, "AUTH_USERS", {"user": "password"}, raising=True)
    app.dependency_overrides[get_search_service] = lambda: SearchService(store, "documents")
    app.dependency_overrides[get_health_status] = lambda: SearchService(store, "documents").check_health()
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()
