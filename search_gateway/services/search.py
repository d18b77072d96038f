"""
Search service
==============

Entry point the HTTP layer calls: translate -> execute -> assemble, with
store failures wrapped as QueryExecutionError.
"""

import logging
import time
from dataclasses import dataclass
from enum import Enum

from search_gateway.clients.elastic import DocumentStore
from search_gateway.lib.errors import QueryExecutionError, error_text
from search_gateway.lib.query_utils import translate
from search_gateway.lib.result_utils import assemble
from search_gateway.models.common import SearchResponse
from search_gateway.models.documents import SearchableDocument
from search_gateway.models.search import SearchRequest

log = logging.getLogger(__name__)


class HealthState(str, Enum):
    OK = "OK"
    WARNING = "WARNING"
    ERROR = "ERROR"


@dataclass(frozen=True)
class HealthStatus:
    state: HealthState
    message: str

    def __str__(self) -> str:
        return f"{self.state.value}: {self.message}"


class SearchService:
    def __init__(self, store: DocumentStore, index_name: str):
        self.store = store
        self.index_name = index_name

    def search(self, request: SearchRequest) -> SearchResponse[SearchableDocument]:
        """
        Run one search. `request` is already validated by its model, so the
        pipeline starts at translation. Any store failure is re-raised as
        QueryExecutionError; nothing is retried.
        """
        log.info("Performing search with query: %s", request.query)
        started = time.perf_counter()

        log.debug("search stage=translating")
        native, window = translate(request)

        log.debug("search stage=executing index=%s page=%d size=%d", self.index_name, window.page, window.size)
        try:
            result = self.store.execute(native, window, self.index_name)
        except Exception as e:
            log.error("Error during search: %s", error_text(e))
            raise QueryExecutionError("Failed to execute search query", e) from e

        log.debug("search stage=assembling hits=%d", len(result.hits))
        took = int((time.perf_counter() - started) * 1000)
        response = assemble(result.hits, result.total_hits, window.page, window.size, took)

        log.debug("search stage=done")
        log.info("Search completed in %d ms with %d results", took, response.total_hits)
        return response

    def check_health(self) -> HealthStatus:
        """Single existence probe against the index; reports, never raises."""
        try:
            exists = self.store.index_exists(self.index_name)
        except Exception as e:
            log.error("Error checking Elasticsearch health: %s", error_text(e))
            return HealthStatus(HealthState.ERROR, error_text(e))

        if not exists:
            return HealthStatus(HealthState.WARNING, f"Index '{self.index_name}' does not exist")
        return HealthStatus(
            HealthState.OK, f"Connected to Elasticsearch, index '{self.index_name}' exists"
        )
