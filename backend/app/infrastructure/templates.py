"""View Renderer — Mako template lookup and HTML responses for catalog pages.

Invariants:
    - One TemplateLookup per templates directory (cached)
    - Every page receives a title; optional keys default to None
    - Genre names print as stored (escaped on the way in); Book fields use the h filter

Design Decisions:
    - render() returns an HTMLResponse so handlers can `return render(...)`
    - Template errors propagate to the global handler (500), not a Mako debug page
"""

import logging
from functools import lru_cache
from pathlib import Path
from typing import Any

from fastapi.responses import HTMLResponse
from mako.lookup import TemplateLookup

from app.config import get_settings

logger = logging.getLogger(__name__)

# Keys every template may read; absent ones render as empty/None
_CONTEXT_DEFAULTS: dict[str, Any] = {
    "genre": None,
    "genre_books": None,
    "genre_list": None,
    "errors": None,
    "message": None,
    "status_code": None,
}


@lru_cache
def get_template_lookup(templates_dir: Path) -> TemplateLookup:
    """Get the Mako template lookup for the given directory."""
    return TemplateLookup(
        directories=[str(templates_dir)], input_encoding="utf-8",
    )


def render_template(templatename: str, **kwargs: Any) -> str:
    """Render a template to a string.

    Args:
        templatename: The template file to render (e.g. "genre_list.html")
        **kwargs: Context variables; must include title

    Returns:
        The rendered HTML string
    """
    lookup = get_template_lookup(get_settings().templates_dir)
    context = {**_CONTEXT_DEFAULTS, **kwargs}
    template = lookup.get_template(templatename)
    return template.render(**context)


def render(
    templatename: str, status_code: int = 200, **kwargs: Any,
) -> HTMLResponse:
    """Render a template into an HTML response."""
    logger.debug(f"Rendering {templatename}")
    return HTMLResponse(
        render_template(templatename, status_code=status_code, **kwargs),
        status_code=status_code,
    )
