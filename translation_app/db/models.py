"""Database models for the translation log."""

from datetime import datetime

from sqlalchemy import CheckConstraint, DateTime, Float, Integer, String, Text, func
from sqlalchemy.orm import Mapped, mapped_column

from translation_app.db.session import Base


class Translation(Base):
    """One translation produced by a client. Rows are append-only."""

    __tablename__ = "translations"
    __table_args__ = (
        CheckConstraint("rating >= 0 AND rating <= 5", name="ck_translations_rating_range"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    original_message: Mapped[str] = mapped_column(Text, nullable=False)
    translated_message: Mapped[str] = mapped_column(Text, nullable=False)
    language: Mapped[str] = mapped_column(String(50), nullable=False)
    model: Mapped[str] = mapped_column(String(50), nullable=False)
    ranking: Mapped[int] = mapped_column(Integer, default=0, server_default="0")
    rating: Mapped[float] = mapped_column(Float, default=0, server_default="0")
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now()
    )


# Column order of the table, used for the CSV export header
TRANSLATION_COLUMNS = [column.name for column in Translation.__table__.columns]
