from typing import Dict, List, Optional, Sequence

from sqlalchemy import and_, exists, extract, func, select

from content.domain.entities.query import ContentQuery
from content.domain.models.content import Content, ContentStatus, EXCLUDED_FROM_SEARCH
from content.domain.models.term import content_terms
from shared.abstracts.abstract_repository import AbstractRepository


class ContentRepository(AbstractRepository):

    async def get(self, content_id: int) -> Optional[Content]:
        res = await self.db.execute(select(Content).where(Content.id == content_id))
        return res.scalars().first()

    async def count_by_status(self, content_type: str) -> Dict[ContentStatus, int]:
        stmt = (
            select(Content.status, func.count(Content.id))
            .where(Content.content_type == content_type)
            .group_by(Content.status)
        )
        res = await self.db.execute(stmt)
        return {status: count for status, count in res.all()}

    async def list(
        self,
        *,
        query: ContentQuery,
        tag_ids: Optional[List[int]] = None,
        category_ids: Optional[List[int]] = None,
    ) -> Sequence[Content]:
        """
        Term slugs are resolved by the caller; `tag_ids` / `category_ids` of None
        mean "no term filter", an empty list means "nothing can match".
        """
        stmt = self._filtered(query, tag_ids, category_ids)
        stmt = stmt.order_by(
            Content.published_at.desc().nullslast(),
            Content.id.desc(),
        ).limit(query.limit)

        res = await self.db.execute(stmt)
        return res.scalars().all()

    async def count(
        self,
        *,
        query: ContentQuery,
        tag_ids: Optional[List[int]] = None,
        category_ids: Optional[List[int]] = None,
    ) -> int:
        inner = self._filtered(query, tag_ids, category_ids).with_only_columns(Content.id).subquery()
        return int(await self.db.scalar(select(func.count()).select_from(inner)) or 0)

    # ----------------------------
    # Filter building
    # ----------------------------

    def _filtered(self, query: ContentQuery, tag_ids, category_ids):
        stmt = select(Content).where(Content.content_type.in_(query.content_types))

        if query.status == "any":
            stmt = stmt.where(Content.status.not_in(list(EXCLUDED_FROM_SEARCH)))
        else:
            stmt = stmt.where(Content.status.in_(query.status))

        if tag_ids is not None:
            stmt = stmt.where(_has_any_term(tag_ids))
        if category_ids is not None:
            stmt = stmt.where(_has_any_term(category_ids))

        if query.exclude_ids:
            stmt = stmt.where(Content.id.not_in(query.exclude_ids))

        if query.hour_range is not None:
            start, end = query.hour_range
            stmt = stmt.where(extract("hour", Content.published_at).between(start, end))

        return stmt


def _has_any_term(term_ids: List[int]):
    # EXISTS keeps one row per content even when several terms match
    return exists().where(
        and_(
            content_terms.c.content_id == Content.id,
            content_terms.c.term_id.in_(term_ids),
        )
    )
