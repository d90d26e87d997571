"""
Video Model

An instructional video in the catalog.
"""

import uuid
from datetime import datetime
from typing import TYPE_CHECKING, Optional

from sqlalchemy import DateTime, ForeignKey, Integer, String, func
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.core.database import Base

if TYPE_CHECKING:
    from app.models.category import Category
    from app.models.note import Note
    from app.models.watch_progress import WatchProgress


class Video(Base):
    """
    Video model.

    Attributes:
        id: Integer primary key.
        title: Video title.
        description: Optional description.
        source_id: Google Drive file ID, or ``local:<filename>`` for files
            served from the uploads directory.
        thumbnail_url: Thumbnail location.
        duration: Duration in seconds, unknown until probed.
        category_id: Foreign key to categories table.
        uploaded_by: Foreign key to the uploading admin.
        created_at: Creation timestamp.
    """

    __tablename__ = "videos"

    id: Mapped[int] = mapped_column(
        Integer,
        primary_key=True,
        autoincrement=True,
    )
    title: Mapped[str] = mapped_column(
        String(256),
        nullable=False,
    )
    description: Mapped[Optional[str]] = mapped_column(
        String(256),
        nullable=True,
    )
    source_id: Mapped[Optional[str]] = mapped_column(
        String(256),
        nullable=True,
    )
    thumbnail_url: Mapped[Optional[str]] = mapped_column(
        String(256),
        nullable=True,
    )
    duration: Mapped[Optional[int]] = mapped_column(
        Integer,
        nullable=True,
    )
    category_id: Mapped[Optional[int]] = mapped_column(
        Integer,
        ForeignKey("categories.id", ondelete="SET NULL"),
        nullable=True,
        index=True,
    )
    uploaded_by: Mapped[Optional[uuid.UUID]] = mapped_column(
        UUID(as_uuid=True),
        ForeignKey("users.id", ondelete="SET NULL"),
        nullable=True,
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
        nullable=False,
    )

    # Relationships
    category: Mapped[Optional["Category"]] = relationship(
        "Category",
        back_populates="videos",
    )
    progress_records: Mapped[list["WatchProgress"]] = relationship(
        "WatchProgress",
        back_populates="video",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )
    notes: Mapped[list["Note"]] = relationship(
        "Note",
        back_populates="video",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )

    @property
    def is_local(self) -> bool:
        return bool(self.source_id and self.source_id.startswith("local:"))

    def __repr__(self) -> str:
        return f"<Video(id={self.id}, title={self.title})>"
