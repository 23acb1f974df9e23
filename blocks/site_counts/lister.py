from typing import Optional

from content.domain.entities.query import ContentQuery, QueryResult
from content.services.content_service import ContentService

# Up to 5 posts or pages tagged "foo" in category "baz", published 9:00-17:59.
FOO_BAZ_QUERY = ContentQuery(
    content_types=["post", "page"],
    status="any",
    tag="foo",
    category_name="baz",
    hour_range=(9, 17),
    limit=5,
    compute_total=False,
)


async def fetch_filtered(content: ContentService, exclude_id: Optional[int]) -> QueryResult:
    """Run the fixed foo/baz query without the item being rendered. Errors propagate."""
    exclude_ids = [exclude_id] if exclude_id is not None else []
    return await content.query(FOO_BAZ_QUERY.model_copy(update={"exclude_ids": exclude_ids}))
