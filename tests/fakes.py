from typing import Any, Dict, List, Optional

from elastic_transport import ApiResponseMeta, HttpHeaders, NodeConfig
from elasticsearch import NotFoundError

from search_gateway.clients.elastic import StoreResult
from search_gateway.lib.query_utils import NativeQuery, PageWindow


class FakeStore:
    """In-memory DocumentStore that records every call it receives."""

    def __init__(self, *, result: Optional[StoreResult] = None, exists: bool = True,
                 execute_exc: Optional[BaseException] = None, exists_exc: Optional[BaseException] = None):
        self.result = result or StoreResult()
        self.exists = exists
        self.execute_exc = execute_exc
        self.exists_exc = exists_exc
        self.calls: List[Dict[str, Any]] = []
        self.exists_calls: List[str] = []

    def execute(self, native: NativeQuery, window: PageWindow, index: str) -> StoreResult:
        self.calls.append(dict(native=native, window=window, index=index))
        if self.execute_exc:
            raise self.execute_exc
        return self.result

    def index_exists(self, index: str) -> bool:
        self.exists_calls.append(index)
        if self.exists_exc:
            raise self.exists_exc
        return self.exists


class MockES:
    """Minimal Elasticsearch stub: search, count, indices.exists/create."""

    class _Indices:
        def __init__(self, parent: "MockES"):
            self.parent = parent

        def exists(self, **kwargs):
            self.parent.calls.append(("indices.exists", kwargs))
            if self.parent.exists_exc:
                raise self.parent.exists_exc
            return self.parent.index_exists

        def create(self, **kwargs):
            self.parent.calls.append(("indices.create", kwargs))
            self.parent.index_exists = True
            return {"acknowledged": True}

    def __init__(self, *, search_ret=None, search_exc=None, index_exists=True, exists_exc=None, count=0):
        self.search_ret = search_ret
        self.search_exc = search_exc
        self.index_exists = index_exists
        self.exists_exc = exists_exc
        self.doc_count = count
        self.calls: List[Any] = []
        self.indices = MockES._Indices(self)

    def search(self, **kwargs):
        self.calls.append(("search", kwargs))
        if self.search_exc:
            raise self.search_exc
        # mimic ES client (python) returning a dict-like object
        return self.search_ret or {"took": 0, "hits": {"total": {"value": 0}, "hits": []}}

    def count(self, **kwargs):
        self.calls.append(("count", kwargs))
        return {"count": self.doc_count}


def es_hit(doc_id: str, score: float = 1.0, **source) -> Dict[str, Any]:
    return {"_index": "documents", "_id": doc_id, "_score": score, "_source": source}


def index_not_found(index: str = "documents") -> NotFoundError:
    meta = ApiResponseMeta(
        status=404,
        http_version="1.1",
        headers=HttpHeaders(),
        duration=0.0,
        node=NodeConfig("http", "localhost", 9200),
    )
    return NotFoundError(
        message=f"no such index [{index}]",
        meta=meta,
        body={"error": {"type": "index_not_found_exception"}, "status": 404},
    )
