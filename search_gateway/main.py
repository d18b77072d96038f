import logging
from contextlib import asynccontextmanager

from elasticsearch import ApiError, TransportError
from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.requests import Request
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from search_gateway.api.dependencies import get_es
from search_gateway.api.routers import health
from search_gateway.api.routers import search
from search_gateway.api.schemas import ErrorResponse
from search_gateway.core.config import settings
from search_gateway.lib.errors import QueryExecutionError, map_error
from search_gateway.lib.sample_data import seed_sample_data

tags_metadata = [
    {"name": "health", "description": "Search index health check (public)."},
    {"name": "search", "description": "Paginated document search (HTTP Basic auth)."},
]

log = logging.getLogger("uvicorn.error")


@asynccontextmanager
async def lifespan(app: FastAPI):
    if settings.SEED_SAMPLE_DATA:
        seed_sample_data(get_es(), settings.INDEX_NAME, settings.SEED_DOCUMENT_COUNT)
    else:
        log.info("Sample data initialization is disabled")
    yield


app = FastAPI(
    title="Document Search API",
    version="1.0.0",
    docs_url="/docs",
    redoc_url="/redoc",
    openapi_url="/openapi.json",
    openapi_tags=tags_metadata,
    swagger_ui_parameters={"defaultModelsExpandDepth": -1},
    lifespan=lifespan,
)


@app.middleware("http")
async def add_api_marker(request: Request, call_next):
    resp = await call_next(request)
    resp.headers["x-search-api"] = "Python FastAPI"
    resp.headers["x-search-api-version"] = app.version
    return resp


# CORS (Settings expects JSON array in .env)
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ALLOW_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(health.router)
app.include_router(search.router)


@app.get("/")
def root():
    return {"ok": True}


# ------------------------------ Error handlers -------------------------------
# Every failure leaves the API as an ErrorResponse built by map_error.


def _error_json(status: int, payload: ErrorResponse, headers=None) -> JSONResponse:
    return JSONResponse(status_code=status, content=payload.model_dump(mode="json"), headers=headers)


@app.exception_handler(RequestValidationError)
async def validation_errors(request: Request, exc: RequestValidationError):
    status, payload = map_error(exc, request.url.path)
    log.warning("Validation error on %s: %s", request.url.path, [e.field for e in payload.errors])
    return _error_json(status, payload)


@app.exception_handler(QueryExecutionError)
async def query_errors(request: Request, exc: QueryExecutionError):
    log.error("Elasticsearch query error: %s", exc, exc_info=exc.cause)
    return _error_json(*map_error(exc, request.url.path))


@app.exception_handler(ApiError)
@app.exception_handler(TransportError)
async def store_errors(request: Request, exc: Exception):
    log.error("Elasticsearch error on %s %s", request.method, request.url.path, exc_info=exc)
    return _error_json(*map_error(exc, request.url.path))


@app.exception_handler(StarletteHTTPException)
async def http_errors(request: Request, exc: StarletteHTTPException):
    # 401 from the auth gate, 404/405 from routing: same envelope, own status
    payload = ErrorResponse(status=exc.status_code, message=str(exc.detail), path=request.url.path)
    return _error_json(exc.status_code, payload, headers=getattr(exc, "headers", None))


# return a uniform JSON error instead of a bare trace and capture the trace in the log
@app.exception_handler(Exception)
async def json_errors(request: Request, exc: Exception):
    log.exception("Unhandled error on %s %s", request.method, request.url.path)
    return _error_json(*map_error(exc, request.url.path))
