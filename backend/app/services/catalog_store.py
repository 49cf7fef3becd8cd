"""Catalog Store — async find/insert/update/delete for Genres and their dependent Books.

Invariants:
    - Every store call opens its own session: an AsyncSession cannot run
      concurrent statements, and handlers fan out reads with asyncio.gather
    - Store failures surface as DatabaseError (mapped by DatabaseSessionManager)
    - Missing rows are None / False, never an exception (handlers decide)
    - Genre ids are assigned on insert and never rewritten by update

Design Decisions:
    - Name lookups are exact matches on the sanitized (trimmed + escaped) name
    - Check-then-act sequences (unique create, guarded delete) are not atomic
"""

import asyncio
import logging
from uuid import UUID

from sqlalchemy import select

from app.infrastructure.database import DatabaseSessionManager
from app.models.book import Book
from app.models.genre import Genre

logger = logging.getLogger(__name__)


class CatalogStore:
    """Genre persistence plus the Book lookups the genre views need."""

    def __init__(self, manager: DatabaseSessionManager):
        self.manager = manager

    # ─── Reads ──────────────────────────────────────────────────

    async def find_genres(self) -> list[Genre]:
        """All genres, name ascending."""
        async with self.manager.session() as db:
            result = await db.execute(select(Genre).order_by(Genre.name.asc()))
            return list(result.scalars().all())

    async def find_genre(self, genre_id: UUID) -> Genre | None:
        async with self.manager.session() as db:
            return await db.get(Genre, genre_id)

    async def find_genre_by_name(self, name: str) -> Genre | None:
        async with self.manager.session() as db:
            result = await db.execute(
                select(Genre).where(Genre.name == name).limit(1),
            )
            return result.scalars().first()

    async def find_books_by_genre(self, genre_id: UUID) -> list[Book]:
        async with self.manager.session() as db:
            result = await db.execute(
                select(Book)
                .where(Book.genre_id == genre_id)
                .order_by(Book.title.asc()),
            )
            return list(result.scalars().all())

    async def find_genre_with_books(
        self, genre_id: UUID,
    ) -> tuple[Genre | None, list[Book]]:
        """Fetch a genre and its dependent books concurrently.

        Both lookups run independently and are joined; if either fails the
        other is cancelled and the first DatabaseError propagates.
        """
        lookups = [
            asyncio.create_task(self.find_genre(genre_id)),
            asyncio.create_task(self.find_books_by_genre(genre_id)),
        ]
        try:
            genre, genre_books = await asyncio.gather(*lookups)
        except BaseException:
            for task in lookups:
                task.cancel()
            raise
        return genre, genre_books

    # ─── Writes ─────────────────────────────────────────────────

    async def insert_genre(self, genre: Genre) -> Genre:
        """Persist a new genre; the id is assigned here."""
        async with self.manager.session() as db:
            db.add(genre)
            await db.commit()
            await db.refresh(genre)
        logger.info(
            f"Genre created: {genre.name}", extra={"genre_id": str(genre.id)},
        )
        return genre

    async def update_genre(self, genre_id: UUID, name: str) -> Genre | None:
        """Rename the genre stored at genre_id. Returns None if it is gone."""
        async with self.manager.session() as db:
            genre = await db.get(Genre, genre_id)
            if genre is None:
                return None
            genre.name = name
            await db.commit()
        logger.info(
            f"Genre updated: {name}", extra={"genre_id": str(genre_id)},
        )
        return genre

    async def delete_genre(self, genre_id: UUID) -> bool:
        """Delete by id. Returns False if there was nothing to delete."""
        async with self.manager.session() as db:
            genre = await db.get(Genre, genre_id)
            if genre is None:
                return False
            await db.delete(genre)
            await db.commit()
        logger.info("Genre deleted", extra={"genre_id": str(genre_id)})
        return True
