"""Error Hierarchy: typed, categorized exceptions for every API failure mode.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Every failure coming out of the query layer is a StoreError (HTTP 500)
    - to_response() always produces {"error": <message>, "code": <code>}

Design Decisions:
    - Single hierarchy with ApiError base: one FastAPI handler catches all
    - No NotFound error: empty results, null update bodies and delete
      messages are all successful responses
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
    DATABASE = "database"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Context attached to an error for logging."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    sql: str | None = None
    debug_info: dict[str, Any] | None = None


class ApiError(Exception):
    """Base exception for all Restaurantes API errors."""

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
        return {"error": self.message, "code": self.code}


# ─── Request Errors (400-level) ─────────────────────────────────

class InvalidBodyError(ApiError):
    """Request body could not be decoded into a field mapping."""
    def __init__(self, message: str, context: ErrorContext | None = None):
        super().__init__(
            message, "INVALID_BODY", ErrorCategory.VALIDATION,
            ErrorSeverity.WARNING, context, 400,
        )


# ─── Store Errors (500-level) ───────────────────────────────────

class StoreError(ApiError):
    """Any failure raised by the relational store or its driver.

    Covers constraint violations, type rejections, connectivity loss and
    malformed statements alike. The driver's message is kept verbatim.
    """
    def __init__(
        self, message: str, operation: str = "execute",
        context: ErrorContext | None = None,
    ):
        super().__init__(
            message, "STORE_ERROR", ErrorCategory.DATABASE,
            ErrorSeverity.CRITICAL, context, 500,
        )
        self.operation = operation
