from __future__ import annotations
from datetime import datetime

from sqlalchemy import Boolean, DateTime, Integer, String, func
from sqlalchemy.orm import Mapped, mapped_column

from app.core.database.base import Base


class ContentType(Base):
    __tablename__ = "content_types"

    name: Mapped[str] = mapped_column(String(20), primary_key=True)
    label: Mapped[str] = mapped_column(String(100), nullable=False)           # plural general label, e.g. "Posts"
    is_public: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    # registration order; host listings follow it
    position: Mapped[int] = mapped_column(Integer, nullable=False, default=0)

    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), server_default=func.now(), nullable=False)
