"""Service test fixtures — per-test SQLite catalog + FastAPI test client.

Invariants:
    - Every test gets a fresh file-backed SQLite database
    - db_manager singleton patched so routes and store share the test DB
    - Helpers seed genres/books directly, bypassing the routes

Design Decisions:
    - File-backed (not :memory:) so concurrent store sessions get separate
      pooled connections, as they would against PostgreSQL
    - Lifespan is not run by ASGITransport; the fixture owns the manager
"""

import pytest
from httpx import ASGITransport, AsyncClient

from app.db.base import Base
from app.infrastructure.database import DatabaseSessionManager
import app.infrastructure.database as db_module
from app.main import app
from app.models.book import Book
from app.models.genre import Genre
from app.services.catalog_store import CatalogStore


@pytest.fixture
async def test_manager(tmp_path):
    manager = DatabaseSessionManager(
        f"sqlite+aiosqlite:///{tmp_path / 'catalog.db'}",
        pool_size=5, max_overflow=5,
    )
    async with manager.engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    original_manager = db_module.db_manager
    db_module.db_manager = manager
    yield manager
    db_module.db_manager = original_manager
    await manager.dispose()


@pytest.fixture
def store(test_manager):
    return CatalogStore(test_manager)


@pytest.fixture
async def client(test_manager):
    """FastAPI test client bound to the test DB."""
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c


@pytest.fixture
def add_genre(store):
    """Insert a genre directly (name stored as given)."""
    async def _add(name: str) -> Genre:
        return await store.insert_genre(Genre(name=name))
    return _add


@pytest.fixture
def add_book(test_manager):
    """Insert a book, optionally filed under a genre."""
    async def _add(title: str, genre: Genre | None = None) -> Book:
        book = Book(
            title=title, summary=f"Summary of {title}",
            genre_id=genre.id if genre else None,
        )
        async with test_manager.session() as db:
            db.add(book)
            await db.commit()
            await db.refresh(book)
        return book
    return _add
