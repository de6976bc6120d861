"""Database models."""

from datetime import datetime

from sqlalchemy import DateTime, String
from sqlalchemy.orm import Mapped, mapped_column

from webinar_manager.database import Base


class Webinar(Base):
    """Webinar model. One row per webinar, no version column."""

    __tablename__ = "webinars"

    id: Mapped[str] = mapped_column(String(255), primary_key=True)
    organizer_id: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    title: Mapped[str] = mapped_column(String(500), nullable=False)
    start_date: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
    end_date: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
    seats: Mapped[int] = mapped_column(nullable=False)

    def __repr__(self) -> str:
        """String representation of Webinar."""
        return f"<Webinar(id={self.id!r}, title='{self.title[:50]}', seats={self.seats})>"
