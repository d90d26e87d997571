"""
Watch Progress Model

One progress record per (user, video) pair.
"""

import uuid
from datetime import datetime
from typing import TYPE_CHECKING

from sqlalchemy import Boolean, DateTime, ForeignKey, Integer, UniqueConstraint, func
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.core.database import Base

if TYPE_CHECKING:
    from app.models.user import User
    from app.models.video import Video


class WatchProgress(Base):
    """
    Watch progress of a learner on a video.

    The row is created lazily on the first progress sync. ``watched_duration``
    never decreases and ``completed`` never goes back to False; both rules
    are enforced by the upsert in ``progress_service``.

    Attributes:
        id: Integer primary key.
        user_id: Owning learner. Immutable.
        video_id: Tracked video. Immutable.
        watched_duration: Effective watched seconds.
        completed: Whether the video counts as completed.
        last_watched_at: Timestamp of the last persisted sync.
    """

    __tablename__ = "user_progress"

    __table_args__ = (
        UniqueConstraint("user_id", "video_id", name="uq_user_progress_user_video"),
    )

    id: Mapped[int] = mapped_column(
        Integer,
        primary_key=True,
        autoincrement=True,
    )
    user_id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True),
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    video_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("videos.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    watched_duration: Mapped[int] = mapped_column(
        Integer,
        default=0,
        nullable=False,
    )
    completed: Mapped[bool] = mapped_column(
        Boolean,
        default=False,
        nullable=False,
    )
    last_watched_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
        nullable=False,
    )

    # Relationships
    user: Mapped["User"] = relationship(
        "User",
        back_populates="progress_records",
    )
    video: Mapped["Video"] = relationship(
        "Video",
        back_populates="progress_records",
    )

    def __repr__(self) -> str:
        return (
            f"<WatchProgress(user_id={self.user_id}, video_id={self.video_id}, "
            f"watched={self.watched_duration}, completed={self.completed})>"
        )
