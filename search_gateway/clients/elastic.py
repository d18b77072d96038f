from dataclasses import dataclass, field
from typing import Any, Dict, List, Protocol, Tuple

from elasticsearch import Elasticsearch

from search_gateway.core.config import Settings
from search_gateway.lib.query_utils import NativeQuery, PageWindow

Hit = Tuple[Dict[str, Any], float | None]


def build_es(cfg: Settings) -> Elasticsearch:
    """
    Build the ES client from explicit settings. Nothing is sent over the wire
    here; the client connects lazily on first request.
    """
    auth_kwargs: Dict[str, Any] = {}
    # Prefer API key in production (no username/password in logs)
    if cfg.ES_API_KEY:
        auth_kwargs["api_key"] = cfg.ES_API_KEY
    elif cfg.ES_USERNAME and cfg.ES_PASSWORD:
        auth_kwargs["basic_auth"] = (cfg.ES_USERNAME, cfg.ES_PASSWORD)

    common_kwargs = dict(
        # failures surface straight away as query errors; no client-side retry
        retry_on_timeout=False,
        max_retries=0,
        http_compress=True,
        connections_per_node=10,
        request_timeout=(cfg.ES_CONNECT_TIMEOUT_MS + cfg.ES_SOCKET_TIMEOUT_MS) / 1000,
        **auth_kwargs,
    )

    # Prefer Cloud ID if supplied
    if cfg.ES_CLOUD_ID:
        return Elasticsearch(cloud_id=cfg.ES_CLOUD_ID, **common_kwargs)

    # Otherwise fall back to a direct host/URL (for local dev)
    if cfg.ES_HOST:
        return Elasticsearch(cfg.ES_HOST, **common_kwargs)

    # Nothing configured
    raise RuntimeError(
        "No Elasticsearch connection configured. Set ES_CLOUD_ID or ES_HOST (+ credentials)."
    )


@dataclass
class StoreResult:
    hits: List[Hit] = field(default_factory=list)
    total_hits: int = 0
    took_ms: int = 0


class DocumentStore(Protocol):
    def execute(self, native: NativeQuery, window: PageWindow, index: str) -> StoreResult: ...

    def index_exists(self, index: str) -> bool: ...


class ElasticStore:
    """Runs translated queries against Elasticsearch and unpacks the raw response."""

    def __init__(self, es: Elasticsearch):
        self.es = es

    def execute(self, native: NativeQuery, window: PageWindow, index: str) -> StoreResult:
        raw = self.es.search(
            index=index,
            from_=window.offset,
            size=window.size,
            # real total, not the 10k lower bound ES reports by default
            track_total_hits=True,
            **native.to_search_kwargs(),
        )
        resp: Dict[str, Any] = getattr(raw, "body", raw)
        return unpack_search_response(resp)

    def index_exists(self, index: str) -> bool:
        return bool(self.es.indices.exists(index=index))


def unpack_search_response(resp: Dict[str, Any]) -> StoreResult:
    hits_node = resp.get("hits", {}) or {}
    total = hits_node.get("total", 0)
    if isinstance(total, dict):
        total = total.get("value", 0)

    hits: List[Hit] = []
    for h in hits_node.get("hits", []) or []:
        doc = {**(h.get("_source") or {}), "id": h.get("_id")}
        hits.append((doc, h.get("_score")))

    return StoreResult(hits=hits, total_hits=int(total or 0), took_ms=int(resp.get("took", 0) or 0))
