import pytest
from elasticsearch import ConnectionError as ESConnectionError
from pydantic import ValidationError

from search_gateway.clients.elastic import StoreResult
from search_gateway.lib.errors import QueryExecutionError
from search_gateway.models.search import SearchRequest
from search_gateway.services.search import HealthState, SearchService

from tests.fakes import FakeStore


def _hits(n):
    return [({"id": str(i), "title": f"doc {i}"}, 1.0) for i in range(n)]


def test_search_end_to_end():
    store = FakeStore(result=StoreResult(hits=[({"id": "1", "title": "Test Document"}, 1.0)], total_hits=1))
    resp = SearchService(store, "documents").search(SearchRequest(query="test", page=0, size=10))

    assert [(d.id, d.title) for d in resp.items] == [("1", "Test Document")]
    assert (resp.total_hits, resp.page, resp.size) == (1, 0, 10)
    assert resp.took >= 0
    assert store.calls[0]["index"] == "documents"


@pytest.mark.parametrize("size", [1, 3, 10])
def test_items_never_exceed_page_size(size):
    store = FakeStore(result=StoreResult(hits=_hits(size), total_hits=50))
    resp = SearchService(store, "documents").search(SearchRequest(query="doc", size=size))
    assert len(resp.items) <= size


def test_store_failure_is_wrapped_with_cause():
    cause = ESConnectionError("Connection refused")
    store = FakeStore(execute_exc=cause)

    with pytest.raises(QueryExecutionError) as ei:
        SearchService(store, "documents").search(SearchRequest(query="test"))

    assert "Connection refused" in str(ei.value)
    assert ei.value.cause is cause
    assert ei.value.__cause__ is cause
    # single attempt, no retry
    assert len(store.calls) == 1


@pytest.mark.parametrize("query", ["", "a"])
def test_invalid_request_never_reaches_store(query):
    store = FakeStore()
    with pytest.raises(ValidationError):
        SearchService(store, "documents").search(SearchRequest(query=query))
    assert store.calls == []


# ----------------------- check_health -----------------------

def test_health_ok():
    status = SearchService(FakeStore(exists=True), "documents").check_health()
    assert status.state is HealthState.OK
    assert str(status).startswith("OK:")


def test_health_warning_when_index_missing():
    status = SearchService(FakeStore(exists=False), "documents").check_health()
    assert status.state is HealthState.WARNING
    assert str(status) == "WARNING: Index 'documents' does not exist"


def test_health_error_never_raises_or_retries():
    store = FakeStore(exists_exc=ESConnectionError("Connection timed out"))
    status = SearchService(store, "documents").check_health()

    assert status.state is HealthState.ERROR
    assert str(status) == "ERROR: Connection timed out"
    assert store.exists_calls == ["documents"]
