"""Initial schema — genres, books.

Revision ID: 001_initial
Revises: None
Create Date: 2026-10-18

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects.postgresql import UUID

revision: str = "001_initial"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "genres",
        sa.Column("id", UUID(as_uuid=True), primary_key=True),
        sa.Column("name", sa.Text, nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
    )
    op.create_index("ix_genres_name", "genres", ["name"])

    op.create_table(
        "books",
        sa.Column("id", UUID(as_uuid=True), primary_key=True),
        sa.Column("title", sa.String(255), nullable=False),
        sa.Column("summary", sa.Text, nullable=False, server_default=""),
        sa.Column("isbn", sa.String(32), nullable=False, server_default=""),
        sa.Column("genre_id", UUID(as_uuid=True), sa.ForeignKey("genres.id"), nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
    )
    op.create_index("ix_books_genre_id", "books", ["genre_id"])


def downgrade() -> None:
    op.drop_index("ix_books_genre_id", table_name="books")
    op.drop_table("books")
    op.drop_index("ix_genres_name", table_name="genres")
    op.drop_table("genres")
