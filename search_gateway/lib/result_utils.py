from typing import Any, Dict, Iterable, Optional, Tuple

from search_gateway.models.common import SearchResponse
from search_gateway.models.documents import SearchableDocument


def assemble(
    hits: Iterable[Tuple[Dict[str, Any], Any]],
    total_hits: int,
    page: int,
    size: int,
    took_ms: int,
    aggregations: Optional[Dict[str, Dict[str, int]]] = None,
) -> SearchResponse[SearchableDocument]:
    """
    Shape raw (document, score) hits into a SearchResponse.

    - Hit order is kept exactly as the store returned it.
    - totalPages/hasNext are derived by SearchResponse itself.
    - Aggregations are passed through untouched (None unless supplied).
    """
    items = [SearchableDocument.model_validate(doc) for doc, _score in hits]
    return SearchResponse[SearchableDocument](
        items=items,
        total_hits=total_hits,
        page=page,
        size=size,
        aggregations=aggregations,
        took=max(int(took_ms), 0),
    )
