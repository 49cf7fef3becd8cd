"""Genre Routes — list, detail, create, delete and update views for catalog genres.

Invariants:
    - Store failures propagate as DatabaseError (global handler → 500); never caught here
    - Detail and update-form raise ResourceNotFoundError for a missing genre (→ 404)
    - Delete-form redirects to the genre list for a missing genre (no error)
    - Form validation failures and blocked deletes re-render; they are not errors
    - Delete-submit reads the genre id from the form body (genreid), not the path
    - Update keeps the path id; the genre is never re-created under a new id

Design Decisions:
    - Genre + dependent books fetched concurrently (CatalogStore.find_genre_with_books)
    - Create with an existing sanitized name redirects to that genre (idempotent)
    - Update does not re-check name uniqueness
    - Update-submit validation failure keeps the "Create Genre" title
    - Static /genre/create registered before /genre/{genre_id} so it is not parsed as a UUID
"""

import logging
from uuid import UUID

from fastapi import APIRouter, Depends, Form, status
from fastapi.responses import RedirectResponse

from app.core.errors import ResourceNotFoundError
from app.infrastructure.database import DatabaseSessionManager, get_db_manager
from app.infrastructure.templates import render
from app.models.genre import Genre
from app.schemas.genre import validate_name
from app.services.catalog_store import CatalogStore

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/catalog", tags=["genres"])

GENRE_LIST_URL = "/catalog/genres"


def get_store(
    manager: DatabaseSessionManager = Depends(get_db_manager),
) -> CatalogStore:
    return CatalogStore(manager)


def _redirect(url: str) -> RedirectResponse:
    return RedirectResponse(url, status_code=status.HTTP_302_FOUND)


@router.get("/genres")
async def genre_list(store: CatalogStore = Depends(get_store)):
    """Display list of all genres, name ascending."""
    genres = await store.find_genres()
    return render("genre_list.html", title="Genre List", genre_list=genres)


@router.get("/genre/create")
async def genre_create_get():
    """Display the empty genre create form."""
    return render("genre_form.html", title="Create Genre")


@router.post("/genre/create")
async def genre_create_post(
    name: str = Form(""), store: CatalogStore = Depends(get_store),
):
    """Validate the form, then create the genre unless the name already exists."""
    sanitized, errors = validate_name(name)
    genre = Genre(name=sanitized)

    if errors:
        return render(
            "genre_form.html", title="Create Genre", genre=genre, errors=errors,
        )

    found = await store.find_genre_by_name(sanitized)
    if found is not None:
        logger.info(
            f"Genre '{sanitized}' already exists",
            extra={"genre_id": str(found.id)},
        )
        return _redirect(found.url)

    genre = await store.insert_genre(genre)
    return _redirect(genre.url)


@router.get("/genre/{genre_id}")
async def genre_detail(
    genre_id: UUID, store: CatalogStore = Depends(get_store),
):
    """Display a genre and the books filed under it."""
    genre, genre_books = await store.find_genre_with_books(genre_id)
    if genre is None:
        raise ResourceNotFoundError("Genre", str(genre_id))
    return render(
        "genre_detail.html",
        title="Genre Detail", genre=genre, genre_books=genre_books,
    )


@router.get("/genre/{genre_id}/delete")
async def genre_delete_get(
    genre_id: UUID, store: CatalogStore = Depends(get_store),
):
    """Display the delete confirmation, listing any books that block it."""
    genre, genre_books = await store.find_genre_with_books(genre_id)
    if genre is None:
        return _redirect(GENRE_LIST_URL)
    return render(
        "genre_delete.html",
        title="Delete Genre", genre=genre, genre_books=genre_books,
    )


@router.post("/genre/{genre_id}/delete")
async def genre_delete_post(
    genreid: UUID = Form(...), store: CatalogStore = Depends(get_store),
):
    """Delete the genre named in the form body, unless books still reference it."""
    genre, genre_books = await store.find_genre_with_books(genreid)

    if genre_books:
        logger.info(
            f"Delete refused: {len(genre_books)} book(s) reference genre",
            extra={"genre_id": str(genreid)},
        )
        return render(
            "genre_delete.html",
            title="Delete Genre", genre=genre, genre_books=genre_books,
        )

    await store.delete_genre(genreid)
    return _redirect(GENRE_LIST_URL)


@router.get("/genre/{genre_id}/update")
async def genre_update_get(
    genre_id: UUID, store: CatalogStore = Depends(get_store),
):
    """Display the genre form pre-filled with the stored genre."""
    genre = await store.find_genre(genre_id)
    if genre is None:
        raise ResourceNotFoundError("Genre", str(genre_id))
    return render("genre_form.html", title="Update Genre", genre=genre)


@router.post("/genre/{genre_id}/update")
async def genre_update_post(
    genre_id: UUID,
    name: str = Form(""),
    store: CatalogStore = Depends(get_store),
):
    """Validate the form, then rename the genre stored at genre_id."""
    sanitized, errors = validate_name(name)
    genre = Genre(id=genre_id, name=sanitized)

    if errors:
        return render(
            "genre_form.html", title="Create Genre", genre=genre, errors=errors,
        )

    updated = await store.update_genre(genre_id, sanitized)
    if updated is None:
        raise ResourceNotFoundError("Genre", str(genre_id))
    return _redirect(updated.url)
