"""Local Library Catalog — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map CatalogError → rendered error page / JSON envelope
    - CORS configured from settings (not hardcoded)
    - Database initialized on startup via lifespan context manager

Design Decisions:
    - Lifespan over @app.on_event: cleaner cleanup of the engine pool
    - GET / redirects to the genre list: genres are the only catalog section served here
"""

import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import RedirectResponse

import app.infrastructure.database as database
from app.infrastructure.observability import setup_logging
from app.config import get_settings
from app.api.error_handlers import register_error_handlers
from app.api.routes import genres, health

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    manager = database.init_db(
        settings.database_url,
        pool_size=settings.database_pool_size,
        max_overflow=settings.database_max_overflow,
    )
    logger.info("Catalog started")
    yield
    logger.info("Catalog shutting down")
    await manager.dispose()


app = FastAPI(
    title="Local Library Catalog", version="1.0.0", lifespan=lifespan,
)

settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(health.router)
app.include_router(genres.router)

register_error_handlers(app)


@app.get("/", include_in_schema=False)
async def index():
    return RedirectResponse(
        genres.GENRE_LIST_URL, status_code=status.HTTP_302_FOUND,
    )


def run() -> None:
    """Console entry point: serve the app with uvicorn."""
    uvicorn.run(
        "app.main:app",
        host=settings.host,
        port=settings.port,
        log_config=None,
    )
