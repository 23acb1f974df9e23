from __future__ import annotations

from typing import Iterable, List, Optional, Sequence

from sqlalchemy import func, select

from content.domain.entities.content_type import ContentTypeDescriptor
from content.domain.models.content_type import ContentType
from shared.abstracts.abstract_repository import AbstractRepository


class ContentTypeRepository(AbstractRepository):

    async def get(self, entity_id: str) -> Optional[ContentType]:
        res = await self.db.execute(select(ContentType).where(ContentType.name == entity_id))
        return res.scalars().first()

    async def list(self, *, public: Optional[bool] = None) -> Sequence[ContentType]:
        stmt = select(ContentType).order_by(ContentType.position.asc(), ContentType.name.asc())
        if public is not None:
            stmt = stmt.where(ContentType.is_public == public)
        res = await self.db.execute(stmt)
        return res.scalars().all()

    async def ensure(self, descriptors: Iterable[ContentTypeDescriptor]) -> List[ContentType]:
        """
        Insert-on-miss for the given descriptors; existing rows are left untouched.
        Returns the managed rows in the order given.
        """
        wanted = list(descriptors)
        if not wanted:
            return []

        res = await self.db.execute(
            select(ContentType).where(ContentType.name.in_([d.name for d in wanted]))
        )
        existing = {row.name: row for row in res.scalars().all()}

        next_position = (await self.db.scalar(select(func.max(ContentType.position)))) or 0
        for d in wanted:
            if d.name not in existing:
                next_position += 1
                obj = ContentType(
                    name=d.name,
                    label=d.label,
                    is_public=d.is_public,
                    position=next_position,
                )
                self.db.add(obj)
                existing[d.name] = obj

        await self.db.commit()
        return [existing[d.name] for d in wanted]
