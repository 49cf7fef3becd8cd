"""Genre ORM — a named category that Books point at.

Invariants:
    - id is a UUID primary key, generated on insert and never reassigned
    - name is stored trimmed and escaped (see schemas/genre.py)
    - name uniqueness is checked by the create handler, not by the table

Design Decisions:
    - Plain index on name (not unique): update does not re-check uniqueness,
      a unique constraint would turn that path into a store error
    - url property mirrors the route layout so templates and redirects agree
"""

import uuid
from datetime import datetime, timezone

from sqlalchemy import Text, DateTime
from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy.dialects.postgresql import UUID

from app.db.base import Base


class Genre(Base):
    """Genre entity, referenced by Book.genre_id."""
    __tablename__ = "genres"

    id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), primary_key=True, default=uuid.uuid4,
    )
    name: Mapped[str] = mapped_column(
        Text, nullable=False, index=True,
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )

    @property
    def url(self) -> str:
        return f"/catalog/genre/{self.id}"
