from datetime import datetime, timezone
from typing import List
from pydantic import BaseModel, Field


class ValidationError(BaseModel):
    field: str = Field(..., description="Request field that failed validation")
    message: str = Field(..., description="Why the value was rejected")


class ErrorResponse(BaseModel):
    """
    Uniform error payload for every non-2xx response produced by the API.
    `errors` is only populated for validation failures.
    """

    timestamp: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
        description="When the error was produced (UTC)",
    )
    status: int = Field(..., description="HTTP status code")
    message: str = Field(..., description="Human readable summary")
    path: str = Field(..., description="Request path that failed")
    errors: List[ValidationError] = Field(default_factory=list)
