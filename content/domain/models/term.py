from __future__ import annotations
from enum import Enum

from sqlalchemy import Enum as SAEnum, ForeignKey, Integer, String, Table, Column, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.core.database.base import Base

content_terms = Table(
    "content_terms",
    Base.metadata,
    Column("content_id", Integer, ForeignKey("contents.id", ondelete="CASCADE"), primary_key=True),
    Column("term_id", Integer, ForeignKey("terms.id", ondelete="CASCADE"), primary_key=True),
)

class Taxonomy(str, Enum):
    category = "category"
    post_tag = "post_tag"

class Term(Base):
    __tablename__ = "terms"
    __table_args__ = (UniqueConstraint("taxonomy", "slug", name="uq_terms_taxonomy_slug"),)

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    taxonomy: Mapped[Taxonomy] = mapped_column(SAEnum(Taxonomy, name="taxonomy"), nullable=False)
    slug: Mapped[str] = mapped_column(String(200), nullable=False)
    name: Mapped[str] = mapped_column(String(200), nullable=False)
    # only categories nest
    parent_id: Mapped[int | None] = mapped_column(Integer, ForeignKey("terms.id", ondelete="SET NULL"), nullable=True)

    contents = relationship("Content", secondary=content_terms, back_populates="terms")
