from datetime import datetime
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator


class SearchableDocument(BaseModel):
    """A document as stored in the search index (ES _id exposed as `id`)."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    id: str
    title: Optional[str] = None
    content: Optional[str] = None
    author: Optional[str] = None
    category: Optional[str] = None
    created_date: Optional[datetime] = Field(default=None, alias="createdDate")
    last_updated_date: Optional[datetime] = Field(default=None, alias="lastUpdatedDate")
    tags: List[str] = Field(default_factory=list)
    metadata: Dict[str, Any] = Field(default_factory=dict)

    @model_validator(mode="after")
    def _updated_not_before_created(self) -> "SearchableDocument":
        created, updated = self.created_date, self.last_updated_date
        if created is None or updated is None:
            return self
        # ES may hand back a mix of naive and offset timestamps
        if (created.tzinfo is None) != (updated.tzinfo is None):
            created = created.replace(tzinfo=None)
            updated = updated.replace(tzinfo=None)
        if updated < created:
            raise ValueError("lastUpdatedDate must not be earlier than createdDate")
        return self
