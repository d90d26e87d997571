"""
Category Model

Training tracks (PPL, CPL, IFR rating, ...) that group videos.
"""

from datetime import datetime
from typing import TYPE_CHECKING, Optional

from sqlalchemy import DateTime, Integer, String, func
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.core.database import Base

if TYPE_CHECKING:
    from app.models.video import Video


class Category(Base):
    """
    Video category.

    Attributes:
        id: Integer primary key.
        name: Display name.
        description: Optional short description.
        icon: Icon identifier used by the frontend.
        created_at: Creation timestamp.
    """

    __tablename__ = "categories"

    id: Mapped[int] = mapped_column(
        Integer,
        primary_key=True,
        autoincrement=True,
    )
    name: Mapped[str] = mapped_column(
        String(256),
        nullable=False,
    )
    description: Mapped[Optional[str]] = mapped_column(
        String(256),
        nullable=True,
    )
    icon: Mapped[str] = mapped_column(
        String(256),
        nullable=False,
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
        nullable=False,
    )

    videos: Mapped[list["Video"]] = relationship(
        "Video",
        back_populates="category",
    )

    def __repr__(self) -> str:
        return f"<Category(id={self.id}, name={self.name})>"
