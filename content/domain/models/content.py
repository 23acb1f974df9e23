from __future__ import annotations
from datetime import datetime
from enum import Enum

from sqlalchemy import DateTime, Enum as SAEnum, ForeignKey, Integer, String, func
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.core.database.base import Base
from content.domain.models.term import content_terms


class ContentStatus(str, Enum):
    publish = "publish"
    future = "future"
    draft = "draft"
    pending = "pending"
    private = "private"
    trash = "trash"
    auto_draft = "auto-draft"
    inherit = "inherit"

# statuses left out of "any" queries
EXCLUDED_FROM_SEARCH = frozenset({ContentStatus.trash, ContentStatus.auto_draft})

class Content(Base):
    __tablename__ = "contents"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    content_type: Mapped[str] = mapped_column(
        String(20), ForeignKey("content_types.name", ondelete="CASCADE"), nullable=False, index=True
    )
    title: Mapped[str] = mapped_column(String(255), nullable=False, default="")
    status: Mapped[ContentStatus] = mapped_column(
        SAEnum(ContentStatus, name="content_status", values_callable=lambda e: [m.value for m in e]),
        default=ContentStatus.draft,
        nullable=False,
    )
    # site-local wall-clock time, no timezone
    published_at: Mapped[datetime | None] = mapped_column(DateTime(timezone=False), nullable=True)

    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), server_default=func.now(), nullable=False)

    terms = relationship("Term", lazy="selectin", secondary=content_terms, back_populates="contents")
