"""Genre Schemas — form validation and sanitization for the genre create/update views.

Invariants:
    - GenreForm.name: trimmed, >= 2 chars after trimming, then escaped
    - Validation failure never touches the store; caller re-renders the form
    - validate_name() always returns a sanitized candidate, valid or not

Design Decisions:
    - PydanticCustomError for the length rule: message surfaces verbatim in the form
    - Escape runs after the length check (length counts raw characters, not entities)
"""

from pydantic import BaseModel, ValidationError, field_validator
from pydantic_core import PydanticCustomError

from app.core.sanitize import escape, has_min_length, trim

NAME_MIN_LENGTH = 2
NAME_MIN_LENGTH_MESSAGE = (
    f"Genre name must contain at least {NAME_MIN_LENGTH} characters"
)


class GenreForm(BaseModel):
    """Submitted genre form; the only user-editable field is name."""
    name: str = ""

    @field_validator("name", mode="before")
    @classmethod
    def trim_name(cls, v: object) -> str:
        if v is None:
            return ""
        return trim(str(v))

    @field_validator("name")
    @classmethod
    def check_and_escape_name(cls, v: str) -> str:
        if not has_min_length(v, NAME_MIN_LENGTH):
            raise PydanticCustomError("genre_name_too_short", NAME_MIN_LENGTH_MESSAGE)
        return escape(v)


def validate_name(raw_name: str | None) -> tuple[str, list[str]]:
    """Sanitize a submitted genre name.

    Returns (sanitized_name, errors). An empty error list means the name is
    valid. On failure the name is still trimmed and escaped so it can be
    echoed back into the form safely.
    """
    try:
        form = GenreForm(name=raw_name)
    except ValidationError as exc:
        candidate = escape(trim(raw_name or ""))
        return candidate, [e["msg"] for e in exc.errors()]
    return form.name, []
