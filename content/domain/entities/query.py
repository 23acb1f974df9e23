from typing import List, Literal, Optional, Tuple

from pydantic import BaseModel, Field, model_validator

from content.domain.entities.content import ContentItem
from content.domain.models.content import ContentStatus


class ContentQuery(BaseModel):
    """
    Filter for one bounded read over content items.

    `tag` and `category_name` are term slugs; a category also matches its
    descendant categories. `hour_range` is compared against the hour of
    `published_at` only, both ends inclusive.
    """

    content_types: List[str] = Field(default_factory=lambda: ["post"])
    status: Literal["any"] | List[ContentStatus] = Field(default_factory=lambda: [ContentStatus.publish])
    tag: Optional[str] = None
    category_name: Optional[str] = None
    exclude_ids: List[int] = []
    hour_range: Optional[Tuple[int, int]] = None
    limit: int = Field(default=10, ge=1, le=100)
    compute_total: bool = True

    @model_validator(mode="after")
    def _check_hour_range(self):
        if self.hour_range is not None:
            start, end = self.hour_range
            if not (0 <= start <= 23 and 0 <= end <= 23) or start > end:
                raise ValueError("hour_range must be two hours 0-23 with start <= end")
        return self


class QueryResult(BaseModel):
    query: ContentQuery
    items: List[ContentItem] = []
    found_items: Optional[int] = None  # only when query.compute_total

    @property
    def post_count(self) -> int:
        return len(self.items)

    def have_posts(self) -> bool:
        return bool(self.items)
