"""Book ORM — owned by the wider catalog; read here only through genre_id.

Invariants:
    - genre_id is the many-to-one reference used for the delete guard
    - No cascade from Genre: deleting a referenced Genre is refused upstream
"""

import uuid
from datetime import datetime, timezone

from sqlalchemy import String, Text, DateTime, ForeignKey
from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy.dialects.postgresql import UUID

from app.db.base import Base


class Book(Base):
    """Book entity (subset of fields the genre views display)."""
    __tablename__ = "books"

    id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), primary_key=True, default=uuid.uuid4,
    )
    title: Mapped[str] = mapped_column(String(255), nullable=False)
    summary: Mapped[str] = mapped_column(Text, nullable=False, default="")
    isbn: Mapped[str] = mapped_column(String(32), nullable=False, default="")
    genre_id: Mapped[uuid.UUID | None] = mapped_column(
        UUID(as_uuid=True), ForeignKey("genres.id"), nullable=True, index=True,
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )

    @property
    def url(self) -> str:
        return f"/catalog/book/{self.id}"
