import logging
from typing import Iterable, List, Optional

from content.domain.entities.content import ContentItem, StatusCounts
from content.domain.entities.content_type import BUILTIN_CONTENT_TYPES, ContentTypeDescriptor
from content.domain.entities.query import ContentQuery, QueryResult
from content.domain.models.term import Taxonomy
from shared.abstracts.abstract_repository import AbstractRepository

logger = logging.getLogger(__name__)


class ContentService:
    """
    Read API the host exposes to blocks:
    - content type registry (optionally public only),
    - per-status counts for one type,
    - one bounded filtered query.
    Nothing is cached; every call reads the store.
    """

    def __init__(
        self,
        content_types_repo: AbstractRepository,   # ContentTypeRepository
        repo: AbstractRepository,                 # ContentRepository
        terms_repo: AbstractRepository,           # TermRepository
    ):
        self.content_types_repo = content_types_repo
        self.repo = repo
        self.terms_repo = terms_repo

    # ---------- Content types ----------

    async def list_content_types(self, public: Optional[bool] = None) -> List[ContentTypeDescriptor]:
        rows = await self.content_types_repo.list(public=public)
        return [ContentTypeDescriptor.model_validate(row) for row in rows]

    async def ensure_content_types(
        self, descriptors: Iterable[ContentTypeDescriptor] = BUILTIN_CONTENT_TYPES
    ) -> List[ContentTypeDescriptor]:
        rows = await self.content_types_repo.ensure(descriptors)  # type: ignore[attr-defined]
        logger.info("content types ready: %s", ", ".join(row.name for row in rows))
        return [ContentTypeDescriptor.model_validate(row) for row in rows]

    # ---------- Queries ----------

    async def count_by_status(self, content_type: str) -> StatusCounts:
        rows = await self.repo.count_by_status(content_type)  # type: ignore[attr-defined]
        return StatusCounts.from_rows(rows)

    async def query(self, query: ContentQuery) -> QueryResult:
        tag_ids = category_ids = None
        if query.tag:
            tag_ids = await self.terms_repo.ids_with_descendants(Taxonomy.post_tag, query.tag)  # type: ignore[attr-defined]
        if query.category_name:
            category_ids = await self.terms_repo.ids_with_descendants(Taxonomy.category, query.category_name)  # type: ignore[attr-defined]

        rows = await self.repo.list(query=query, tag_ids=tag_ids, category_ids=category_ids)
        found = None
        if query.compute_total:
            found = await self.repo.count(query=query, tag_ids=tag_ids, category_ids=category_ids)  # type: ignore[attr-defined]

        logger.debug("content query matched %d item(s): %s", len(rows), query.model_dump(exclude_defaults=True))
        return QueryResult(
            query=query,
            items=[ContentItem.model_validate(row) for row in rows],
            found_items=found,
        )
