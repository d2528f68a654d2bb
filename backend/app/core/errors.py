"""Error Hierarchy — typed, categorized exceptions for GrubDash failure modes.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Client errors (400/404) are recoverable by resubmitting; 500-level errors are critical
    - to_response() produces the REST envelope: {"error": <message>}
    - No internal details leaked in user-facing messages

Design Decisions:
    - Single hierarchy with GrubDashError base: FastAPI global handler catches all (ADR: uniform error shape)
    - Validators never raise these. They return a Rejection value, which the route
      layer converts via error_from_rejection() (ADR: no exception escapes the pipeline)
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any
from datetime import datetime, timezone


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
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Context attached to an error for logging."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    resource: str | None = None
    resource_id: str | None = None
    debug_info: dict[str, Any] | None = None


class GrubDashError(Exception):
    """Base exception for all GrubDash errors."""

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
        """Convert to the REST error envelope."""
        return {"error": self.message}


# ─── Client Errors (400-level) ──────────────────────────────────

class ValidationError(GrubDashError):
    """Request payload or resource state failed a validation check."""
    def __init__(self, message: str, context: ErrorContext | None = None):
        super().__init__(
            message, "VALIDATION_ERROR", ErrorCategory.VALIDATION,
            ErrorSeverity.WARNING, context, 400,
        )


class NotFoundError(GrubDashError):
    """Requested resource does not exist."""
    def __init__(self, message: str, context: ErrorContext | None = None):
        super().__init__(
            message, "RESOURCE_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.WARNING, context, 404,
        )


def error_from_rejection(status: int, message: str) -> GrubDashError:
    """Map a pipeline rejection (status, message) onto the error hierarchy."""
    if status == 404:
        return NotFoundError(message)
    if status == 400:
        return ValidationError(message)
    return GrubDashError(
        message, "REQUEST_REJECTED", ErrorCategory.INTERNAL,
        ErrorSeverity.ERROR, http_status=status,
    )
