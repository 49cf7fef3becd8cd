"""Error Hierarchy — typed, categorized exceptions for catalog failure modes.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Not-found is 404; store failures are 500 and never retried
    - to_response() produces the JSON envelope; no internal details in messages

Design Decisions:
    - Single hierarchy with CatalogError base: one global handler catches all
    - Form validation failures and blocked deletes are NOT errors (they re-render)
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any
from datetime import datetime, timezone


class ErrorSeverity(str, Enum):
    """Error severity for observability and client handling."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    VALIDATION = "validation"
    RESOURCE_NOT_FOUND = "resource_not_found"
    DATABASE = "database"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Request-side context attached to an error for logging."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    resource_id: str | None = None
    path: str | None = None
    debug_info: dict[str, Any] | None = None


class CatalogError(Exception):
    """Base exception for all catalog errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        context: ErrorContext | None = None,
        http_status: int = 500,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.severity = severity
        self.context = context or ErrorContext()
        self.http_status = http_status

    def to_response(self) -> dict:
        """Convert to standardized REST error response."""
        return {
            "error": {
                "code": self.code,
                "message": self.message,
                "category": self.category.value,
                "severity": self.severity.value,
                "timestamp": self.context.timestamp.isoformat(),
                "context": {
                    "resource_id": self.context.resource_id,
                    "path": self.context.path,
                },
            }
        }


# ─── Domain Errors (400-level) ──────────────────────────────────

class ResourceNotFoundError(CatalogError):
    """Requested resource does not exist."""
    def __init__(
        self, resource_type: str, resource_id: str, context: ErrorContext | None = None,
    ):
        ctx = context or ErrorContext()
        ctx.resource_id = resource_id
        super().__init__(
            f"{resource_type} not found",
            "RESOURCE_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.ERROR, ctx, 404,
        )
        self.resource_type = resource_type


# ─── Infrastructure Errors (500-level) ──────────────────────────

class DatabaseError(CatalogError):
    """Store operation failed."""
    def __init__(self, message: str, operation: str, context: ErrorContext | None = None):
        super().__init__(
            f"Database {operation} failed: {message}",
            "DATABASE_ERROR", ErrorCategory.DATABASE,
            ErrorSeverity.CRITICAL, context, 500,
        )
        self.operation = operation
