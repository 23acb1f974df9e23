from typing import Dict, Mapping

from pydantic import BaseModel, ConfigDict, Field

from content.domain.models.content import ContentStatus


class ContentItem(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    title: str


class StatusCounts(BaseModel):
    """Per-status item counts for one content type. Missing statuses read as 0."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    publish: int = Field(default=0, ge=0)
    future: int = Field(default=0, ge=0)
    draft: int = Field(default=0, ge=0)
    pending: int = Field(default=0, ge=0)
    private: int = Field(default=0, ge=0)
    trash: int = Field(default=0, ge=0)
    auto_draft: int = Field(default=0, ge=0, alias="auto-draft")
    inherit: int = Field(default=0, ge=0)

    @classmethod
    def from_rows(cls, rows: Mapping[ContentStatus, int]) -> "StatusCounts":
        return cls(**{ContentStatus(status).value: int(n or 0) for status, n in rows.items()})

    def get(self, status: ContentStatus | str) -> int:
        return getattr(self, ContentStatus(status).name)


# content type name -> selected count
CountsByType = Dict[str, int]
