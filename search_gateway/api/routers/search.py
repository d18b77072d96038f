"""
Search router
=============
"""

import logging

from fastapi import APIRouter, Depends

from search_gateway.api.dependencies import get_search_service
from search_gateway.api.schemas import ErrorResponse
from search_gateway.core.config import settings
from search_gateway.core.security import require_user
from search_gateway.models.common import SearchResponse
from search_gateway.models.documents import SearchableDocument
from search_gateway.models.search import SearchRequest
from search_gateway.services.search import SearchService

router = APIRouter(prefix=settings.API_PREFIX, tags=["search"])
log = logging.getLogger(__name__)

# ------------------------------ Endpoints ------------------------------------


# curl -s -u user:password -XPOST http://localhost:8000/api/search \
#   -H 'content-type: application/json' -d '{"query": "guide", "size": 5}' | jq
@router.post(
    "/search",
    summary="Search documents",
    response_model=SearchResponse[SearchableDocument],
    response_description="One page of matching documents with pagination metadata",
    responses={
        400: {"model": ErrorResponse, "description": "Invalid search request"},
        401: {"description": "Missing or invalid credentials"},
        500: {"model": ErrorResponse, "description": "Search could not be executed"},
    },
)
def search(
    body: SearchRequest,
    user: str = Depends(require_user),
    service: SearchService = Depends(get_search_service),
) -> SearchResponse[SearchableDocument]:
    """
    POST /api/search
    """
    log.info("Search requested by %s", user)
    return service.search(body)
