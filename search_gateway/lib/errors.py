import logging
from enum import Enum
from typing import Any, Dict, Iterable, List, Optional, Tuple

from elasticsearch import ApiError, TransportError
from fastapi.exceptions import RequestValidationError
from pydantic import ValidationError as PydanticValidationError

from search_gateway.api.schemas import ErrorResponse, ValidationError

log = logging.getLogger(__name__)


class FailureKind(str, Enum):
    VALIDATION = "validation"
    QUERY_EXECUTION = "query_execution"
    STORE_PROTOCOL = "store_protocol"
    UNCLASSIFIED = "unclassified"


class QueryExecutionError(Exception):
    """Raised by the search service when the document store fails a search."""

    def __init__(self, message: str, cause: Optional[BaseException] = None):
        if cause is not None:
            message = f"{message}: {error_text(cause)}"
        super().__init__(message)
        self.cause = cause


STATUS_BY_KIND: Dict[FailureKind, int] = {
    FailureKind.VALIDATION: 400,
    FailureKind.QUERY_EXECUTION: 500,
    FailureKind.STORE_PROTOCOL: 500,
    FailureKind.UNCLASSIFIED: 500,
}

PREFIX_BY_KIND: Dict[FailureKind, str] = {
    FailureKind.QUERY_EXECUTION: "Error executing search query: ",
    FailureKind.STORE_PROTOCOL: "Elasticsearch error: ",
    FailureKind.UNCLASSIFIED: "An unexpected error occurred: ",
}

# (field, pydantic error type) -> message shown to callers
FIELD_MESSAGES: Dict[Tuple[str, str], str] = {
    ("query", "missing"): "Search query is required",
    ("query", "string_type"): "Search query is required",
    ("query", "string_too_short"): "Search query must be at least 2 characters",
    ("page", "greater_than_equal"): "Page number must be non-negative",
    ("size", "greater_than_equal"): "Page size must be positive",
}

# pydantic model titles whose validation failures are caller mistakes (400),
# as opposed to bad data coming back from the store (500)
REQUEST_MODELS = ("SearchRequest",)


def error_text(exc: BaseException) -> str:
    # ES ApiError/TransportError carry a clean `message`; str() adds the repr noise
    msg = getattr(exc, "message", None)
    if isinstance(msg, str) and msg:
        return msg
    return str(exc) or exc.__class__.__name__


def classify(exc: BaseException) -> FailureKind:
    if isinstance(exc, RequestValidationError):
        return FailureKind.VALIDATION
    if isinstance(exc, PydanticValidationError) and exc.title in REQUEST_MODELS:
        return FailureKind.VALIDATION
    if isinstance(exc, QueryExecutionError):
        return FailureKind.QUERY_EXECUTION
    if isinstance(exc, (ApiError, TransportError)):
        return FailureKind.STORE_PROTOCOL
    return FailureKind.UNCLASSIFIED


def _field_name(loc: Iterable[Any]) -> str:
    parts = [str(p) for p in loc if p != "body"]
    return ".".join(parts) or "body"


def _field_message(field: str, err: Dict[str, Any]) -> str:
    friendly = FIELD_MESSAGES.get((field, str(err.get("type", ""))))
    if friendly:
        return friendly
    msg = str(err.get("msg", "Invalid value"))
    return msg.removeprefix("Value error, ")


def validation_errors(exc: BaseException) -> List[ValidationError]:
    """One entry per failing field, in the order pydantic reported them."""
    raw: List[Dict[str, Any]] = list(exc.errors()) if hasattr(exc, "errors") else []
    out: List[ValidationError] = []
    seen = set()
    for err in raw:
        if err.get("type") == "json_invalid":
            field = "body"
        else:
            field = _field_name(err.get("loc", ()))
        if field in seen:
            continue
        seen.add(field)
        out.append(ValidationError(field=field, message=_field_message(field, err)))
    return out


def map_error(exc: BaseException, path: str) -> Tuple[int, ErrorResponse]:
    """
    Translate any exception into (HTTP status, ErrorResponse).

    Pure and total: performs no I/O and always returns a payload, falling back
    to a bare 500 if rendering the detailed one fails.
    """
    try:
        kind = classify(exc)
        status = STATUS_BY_KIND[kind]
        if kind is FailureKind.VALIDATION:
            payload = ErrorResponse(status=status, message="Validation error", path=path)
            payload.errors.extend(validation_errors(exc))
        else:
            payload = ErrorResponse(
                status=status, message=PREFIX_BY_KIND[kind] + error_text(exc), path=path
            )
        return status, payload
    except Exception:
        log.exception("Failed to render error payload for %s", type(exc).__name__)
        return 500, ErrorResponse(status=500, message="An unexpected error occurred", path=path)
