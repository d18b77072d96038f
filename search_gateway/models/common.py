from pydantic import BaseModel, ConfigDict, Field, model_validator
from typing import Dict, Generic, List, Optional, TypeVar

T = TypeVar("T")


def count_pages(total_hits: int, size: int) -> int:
    if size <= 0:
        return 0
    return (total_hits + size - 1) // size


def has_next_page(page: int, total_pages: int) -> bool:
    return page + 1 < total_pages


class SearchResponse(BaseModel, Generic[T]):
    """
    One page of search results.

    totalPages and hasNext are derived from totalHits/page/size every time
    the model is built; whatever the caller passes for them is discarded.
    """

    model_config = ConfigDict(populate_by_name=True)

    items: List[T] = Field(default_factory=list, description="Results for the current page")
    total_hits: int = Field(0, alias="totalHits", ge=0, description="Matches across all pages")
    page: int = Field(0, description="Zero-based page number")
    size: int = Field(10, description="Results per page")
    total_pages: int = Field(0, alias="totalPages")
    has_next: bool = Field(False, alias="hasNext")
    aggregations: Optional[Dict[str, Dict[str, int]]] = Field(
        default=None, description="Aggregation name -> bucket label -> count"
    )
    took: int = Field(0, ge=0, description="Search duration in ms")

    @model_validator(mode="after")
    def _derive_pagination(self) -> "SearchResponse[T]":
        self.total_pages = count_pages(self.total_hits, self.size)
        self.has_next = has_next_page(self.page, self.total_pages)
        return self
