"""Form Sanitizers — pure string transforms applied to user input before persistence.

Invariants:
    - Pure functions (no IO, no state)
    - escape() is not idempotent: "&amp;" becomes "&amp;amp;"
    - Entity set matches what browsers and the catalog templates expect:
      & " ' < > / \\ `

Design Decisions:
    - Escape on input, not on output: stored names are already markup-safe,
      so templates print them as-is
"""

_ESCAPE_TABLE = str.maketrans({
    "&": "&amp;",
    '"': "&quot;",
    "'": "&#x27;",
    "<": "&lt;",
    ">": "&gt;",
    "/": "&#x2F;",
    "\\": "&#x5C;",
    "`": "&#96;",
})


def trim(value: str) -> str:
    """Strip surrounding whitespace."""
    return value.strip()


def escape(value: str) -> str:
    """Replace markup-unsafe characters with HTML entities."""
    return value.translate(_ESCAPE_TABLE)


def has_min_length(value: str, min_length: int) -> bool:
    return len(value) >= min_length
