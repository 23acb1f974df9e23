from __future__ import annotations

from typing import List, Optional, Sequence

from sqlalchemy import select

from content.domain.models.term import Taxonomy, Term
from shared.abstracts.abstract_repository import AbstractRepository


class TermRepository(AbstractRepository):

    async def get(self, entity_id: int) -> Optional[Term]:
        res = await self.db.execute(select(Term).where(Term.id == entity_id))
        return res.scalars().first()

    async def list(self, *, taxonomy: Optional[Taxonomy] = None) -> Sequence[Term]:
        stmt = select(Term).order_by(Term.name.asc())
        if taxonomy is not None:
            stmt = stmt.where(Term.taxonomy == taxonomy)
        res = await self.db.execute(stmt)
        return res.scalars().all()

    async def get_by_slug(self, taxonomy: Taxonomy, slug: str) -> Optional[Term]:
        res = await self.db.execute(
            select(Term).where(Term.taxonomy == taxonomy, Term.slug == slug)
        )
        return res.scalars().first()

    async def ids_with_descendants(self, taxonomy: Taxonomy, slug: str) -> List[int]:
        """
        Id of the term with `slug` plus the ids of every term nested below it.
        Empty when the slug is unknown.
        """
        root = await self.get_by_slug(taxonomy, slug)
        if root is None:
            return []

        res = await self.db.execute(
            select(Term.id, Term.parent_id).where(Term.taxonomy == taxonomy)
        )
        children: dict[int, list[int]] = {}
        for term_id, parent_id in res.all():
            if parent_id is not None:
                children.setdefault(parent_id, []).append(term_id)

        ids, stack = [], [root.id]
        while stack:
            current = stack.pop()
            if current in ids:
                continue
            ids.append(current)
            stack.extend(children.get(current, []))
        return ids
