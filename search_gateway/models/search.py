from datetime import datetime, timezone
from typing import Any, Dict, List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator

SCALAR_TYPES = (str, int, float, bool)
SortDirection = Literal["asc", "desc"]


def parse_iso_date(value: str) -> datetime:
    """Parse an ISO-8601 date or datetime; naive values are taken as UTC."""
    parsed = datetime.fromisoformat(value)
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


class SearchRequest(BaseModel):
    """
    Body of POST /api/search.

    JSON keys are camelCase (dateFrom, minScore, ...); Python attributes are
    snake_case. Every constraint here is checked before the request reaches
    the search service.
    """

    model_config = ConfigDict(
        populate_by_name=True,
        str_strip_whitespace=True,
        json_schema_extra={
            "example": {
                "query": "machine learning",
                "fields": ["title", "content"],
                "page": 0,
                "size": 10,
                "sort": {"createdDate": "desc"},
                "filters": {"category": "Technology"},
                "dateFrom": "2024-01-01",
                "dateTo": "2025-12-31",
            }
        },
    )

    query: str = Field(..., min_length=2, description="Free-text search query")
    fields: List[str] = Field(
        default_factory=list,
        description="Fields to match against; empty means title and content",
    )
    page: int = Field(0, ge=0, description="Zero-based page number")
    size: int = Field(10, ge=1, description="Results per page")
    sort: Dict[str, SortDirection] = Field(
        default_factory=dict,
        description="Field -> asc|desc, applied in the order given",
    )
    filters: Dict[str, Any] = Field(
        default_factory=dict,
        description="Field -> exact value (a list means any of the values)",
    )
    date_from: Optional[str] = Field(default=None, alias="dateFrom")
    date_to: Optional[str] = Field(default=None, alias="dateTo")
    date_field: str = Field(default="createdDate", alias="dateField", min_length=1)
    min_score: Optional[float] = Field(default=None, alias="minScore", ge=0)

    @field_validator("fields")
    @classmethod
    def _drop_blank_fields(cls, v: List[str]) -> List[str]:
        return [f for f in v if f]

    @field_validator("sort", mode="before")
    @classmethod
    def _lowercase_directions(cls, v: Any) -> Any:
        if isinstance(v, dict):
            return {k: d.strip().lower() if isinstance(d, str) else d for k, d in v.items()}
        return v

    @field_validator("filters")
    @classmethod
    def _scalar_filters(cls, v: Dict[str, Any]) -> Dict[str, Any]:
        for name, value in v.items():
            values = value if isinstance(value, list) else [value]
            if not values or not all(isinstance(x, SCALAR_TYPES) for x in values):
                raise ValueError(
                    f"filter '{name}' must be a scalar or a non-empty list of scalars"
                )
        return v

    @field_validator("date_from", "date_to")
    @classmethod
    def _iso_date(cls, v: Optional[str]) -> Optional[str]:
        if v is None or v == "":
            return None
        try:
            parse_iso_date(v)
        except ValueError:
            raise ValueError("must be an ISO-8601 date, e.g. 2024-01-31") from None
        return v

    @field_validator("date_to")
    @classmethod
    def _range_in_order(cls, v: Optional[str], info: ValidationInfo) -> Optional[str]:
        start = info.data.get("date_from")
        if v is not None and start is not None:
            if parse_iso_date(start) > parse_iso_date(v):
                raise ValueError("dateTo must not be earlier than dateFrom")
        return v
