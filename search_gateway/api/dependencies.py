import logging
from functools import lru_cache

from elasticsearch import Elasticsearch

from search_gateway.clients.elastic import ElasticStore, build_es
from search_gateway.core.config import settings
from search_gateway.lib.errors import error_text
from search_gateway.services.search import HealthState, HealthStatus, SearchService

log = logging.getLogger(__name__)


@lru_cache
def get_es() -> Elasticsearch:
    # one pooled client per process, shared by every request
    return build_es(settings)


def get_search_service() -> SearchService:
    return SearchService(ElasticStore(get_es()), settings.INDEX_NAME)


def get_health_status() -> HealthStatus:
    # health reports, never raises; that includes failing to build the client
    try:
        service = get_search_service()
    except Exception as e:
        log.warning("Health check could not build the search service: %s", e)
        return HealthStatus(HealthState.ERROR, error_text(e))
    return service.check_health()
