"""SQLAlchemy Declarative Base — shared base class for all catalog ORM models.

Invariants:
    - All models inherit from Base
    - Base is the single source of truth for table metadata (alembic + tests)
"""

from sqlalchemy.orm import DeclarativeBase


class Base(DeclarativeBase):
    """Base class for all catalog ORM models."""
    pass
