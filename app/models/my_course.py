"""
My Course Model

Videos a learner has added to their personal course list.
"""

import uuid
from datetime import datetime
from typing import TYPE_CHECKING

from sqlalchemy import DateTime, ForeignKey, Integer, func
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.core.database import Base

if TYPE_CHECKING:
    from app.models.video import Video


class MyCourse(Base):
    """
    Association between a learner and a video they enrolled in.

    Composite primary key (user_id, video_id) makes adding idempotent.
    """

    __tablename__ = "user_courses"

    user_id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True),
        ForeignKey("users.id", ondelete="CASCADE"),
        primary_key=True,
    )
    video_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("videos.id", ondelete="CASCADE"),
        primary_key=True,
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
        nullable=False,
    )

    video: Mapped["Video"] = relationship("Video", lazy="selectin")

    def __repr__(self) -> str:
        return f"<MyCourse(user_id={self.user_id}, video_id={self.video_id})>"
