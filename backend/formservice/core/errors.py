"""Error Hierarchy - typed, categorized exceptions for every form service failure mode.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Domain errors (400-level) are caller mistakes; store errors are critical
    - to_response() produces the REST envelope {"error": ..., "code": ...}
    - No internal details leaked in user-facing messages

Design Decisions:
    - Single hierarchy with FormServiceError base: FastAPI global handler catches all
      (ADR: uniform error shape)
    - ErrorContext as dataclass: observability fields without coupling to logging
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum


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
    CONFLICT = "conflict"
    DATABASE = "database"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Request-scoped context attached to an error for log correlation."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    tenant_id: str | None = None
    form_id: str | None = None


class FormServiceError(Exception):
    """Base exception for all form service errors."""

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
        return {"error": self.message, "code": self.code}


# ─── Domain Errors (400-level) ──────────────────────────────────

class ValidationFailedError(FormServiceError):
    """Malformed or missing required input."""
    def __init__(self, message: str, field: str, context: ErrorContext | None = None):
        super().__init__(
            message, "VALIDATION_ERROR", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, context, 400,
        )
        self.field = field


class NotFoundError(FormServiceError):
    """No matching active, correctly-scoped row."""
    def __init__(
        self, resource_type: str, resource_id: str, context: ErrorContext | None = None,
    ):
        super().__init__(
            f"{resource_type} not found",
            "RESOURCE_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.WARNING, context, 404,
        )
        self.resource_type = resource_type
        self.resource_id = resource_id


class ConflictError(FormServiceError):
    """Uniqueness violation."""
    def __init__(self, message: str, context: ErrorContext | None = None):
        super().__init__(
            message, "CONFLICT", ErrorCategory.CONFLICT,
            ErrorSeverity.WARNING, context, 409,
        )


# ─── Infrastructure Errors (500-level) ──────────────────────────

class StoreUnavailableError(FormServiceError):
    """Store operation failed. Detail is kept for logs, never sent to the client."""
    def __init__(self, detail: str, operation: str, context: ErrorContext | None = None):
        super().__init__(
            "Internal server error",
            "STORE_UNAVAILABLE", ErrorCategory.DATABASE,
            ErrorSeverity.CRITICAL, context, 500,
        )
        self.detail = detail
        self.operation = operation
