"""Document index creation."""
import logging
from typing import Any, Dict

from elasticsearch import Elasticsearch

log = logging.getLogger(__name__)


def get_document_mapping() -> Dict[str, Any]:
    """Mapping for SearchableDocument: analysed text for free text, keyword for exact matches."""
    return {
        "properties": {
            "title": {"type": "text", "analyzer": "standard"},
            "content": {"type": "text", "analyzer": "standard"},
            "author": {"type": "keyword"},
            "category": {"type": "keyword"},
            "tags": {"type": "keyword"},
            "createdDate": {"type": "date"},
            "lastUpdatedDate": {"type": "date"},
            "metadata": {"type": "object", "enabled": True},
        }
    }


def get_index_settings() -> Dict[str, Any]:
    return {
        "number_of_shards": 1,
        "number_of_replicas": 0,
        "index": {"refresh_interval": "1s"},
    }


def ensure_index(es: Elasticsearch, index: str) -> bool:
    """Create `index` with the document mapping if it is missing. Returns True if created."""
    if es.indices.exists(index=index):
        return False
    es.indices.create(index=index, mappings=get_document_mapping(), settings=get_index_settings())
    log.info("Created index '%s'", index)
    return True
