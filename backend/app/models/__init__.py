"""ORM Models — SQLAlchemy declarative models for catalog entities.

Invariants:
    - All models inherit from Base (db/base.py)

Design Decisions:
    - One file per entity
    - All models imported here so Base.metadata is complete for create_all/alembic
"""

from app.models.genre import Genre  # noqa: F401
from app.models.book import Book  # noqa: F401
