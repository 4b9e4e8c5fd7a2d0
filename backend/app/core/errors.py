"""Error Hierarchy: typed, categorized exceptions for every Tutorials API failure mode.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Domain errors (400-level) are recoverable; storage errors (500-level) are critical
    - to_response() always produces {"message": str}, the only error shape clients see
    - Messages are client-facing verbatim: route tests assert on the exact text

Design Decisions:
    - Single hierarchy with TutorialAPIError base: one FastAPI global handler catches all
    - DatabaseError (repository level) is distinct from StorageError (operation level):
      the repository does not know which operation it serves, the translator does
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any


class ErrorSeverity(str, Enum):
    """Error severity for observability."""
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
    """Context attached to log records, never to response bodies."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    tutorial_id: str | None = None
    operation: str | None = None
    debug_info: dict[str, Any] | None = None


class TutorialAPIError(Exception):
    """Base exception for all Tutorials API errors."""

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
        """Convert to the REST error body."""
        return {"message": self.message}

    def log_extra(self) -> dict:
        """Structured fields for the JSON log formatter."""
        return {
            "error_code": self.code,
            "tutorial_id": self.context.tutorial_id,
            "operation": self.context.operation,
        }


# ─── Domain Errors (400-level) ──────────────────────────────────

class InvalidContentError(TutorialAPIError):
    """Request body missing or violating a required-field rule."""
    def __init__(self, message: str, context: ErrorContext | None = None):
        super().__init__(
            message, "VALIDATION_ERROR", ErrorCategory.VALIDATION,
            ErrorSeverity.WARNING, context, 400,
        )


class ResourceNotFoundError(TutorialAPIError):
    """Well-formed identifier that matches no record."""
    def __init__(self, message: str, context: ErrorContext | None = None):
        super().__init__(
            message, "RESOURCE_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.WARNING, context, 404,
        )


# ─── Storage Errors (500-level) ─────────────────────────────────

class StorageError(TutorialAPIError):
    """An operation's storage call failed (malformed id included)."""
    def __init__(self, message: str, operation: str, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.operation = operation
        super().__init__(
            message, "STORAGE_ERROR", ErrorCategory.DATABASE,
            ErrorSeverity.CRITICAL, ctx, 500,
        )
        self.operation = operation


class DatabaseError(TutorialAPIError):
    """Database call failed below the operation boundary."""
    def __init__(self, message: str, operation: str, context: ErrorContext | None = None):
        super().__init__(
            f"Database {operation} failed: {message}",
            "DATABASE_ERROR", ErrorCategory.DATABASE,
            ErrorSeverity.CRITICAL, context, 500,
        )
        self.operation = operation


class InvalidIdentifierError(DatabaseError):
    """Identifier cannot be parsed into the storage key type."""
    def __init__(self, raw_id: str, context: ErrorContext | None = None):
        super().__init__(
            f"cast to UUID failed for value {raw_id!r}", "parse_id", context,
        )
        self.raw_id = raw_id
