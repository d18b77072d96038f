"""
Health router
=============
"""

from fastapi import APIRouter, Depends
from fastapi.responses import PlainTextResponse

from search_gateway.api.dependencies import get_health_status
from search_gateway.core.config import settings
from search_gateway.services.search import HealthStatus

router = APIRouter(prefix=settings.API_PREFIX, tags=["health"])

# ------------------------------ Endpoints ------------------------------------


# curl -s http://localhost:8000/api/health
@router.get(
    "/health",
    summary="Service health check",
    response_class=PlainTextResponse,
    response_description="OK / WARNING / ERROR line describing the search index",
)
def health(status: HealthStatus = Depends(get_health_status)) -> str:
    """
    GET /api/health

    Always 200; the body says whether ES is reachable and the index exists.
    """
    return str(status)
