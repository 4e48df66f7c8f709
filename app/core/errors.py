"""Error Hierarchy — typed, categorized exceptions for every API failure mode.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Client errors map to 4xx, anything unexpected maps to 500
    - to_response() produces the REST envelope used by all error responses
    - No internal details leaked in user-facing messages

Design Decisions:
    - Single hierarchy with ApiError base: one global handler renders all of them
    - ErrorContext as dataclass: observability data without coupling to logging
"""

from dataclasses import dataclass, field
from enum import Enum
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
    ROUTING = "routing"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Request-scoped details attached to an error."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    path: str | None = None
    resource_id: str | None = None


class ApiError(Exception):
    """Base exception for all API errors."""

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
                    "path": self.context.path,
                    "resource_id": self.context.resource_id,
                },
            }
        }


# ─── Client Errors (400-level) ──────────────────────────────────

class ResourceNotFoundError(ApiError):
    """Requested resource does not exist."""
    def __init__(
        self, resource_type: str, resource_id: object,
        context: ErrorContext | None = None,
    ):
        ctx = context or ErrorContext()
        ctx.resource_id = str(resource_id)
        super().__init__(
            f"{resource_type} '{resource_id}' not found",
            "RESOURCE_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.ERROR, ctx, 404,
        )
        self.resource_type = resource_type
        self.resource_id = resource_id


class RouteNotFoundError(ApiError):
    """No route matches the request path."""
    def __init__(self, path: str, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.path = path
        super().__init__(
            f"No route matches '{path}'",
            "NOT_FOUND", ErrorCategory.ROUTING,
            ErrorSeverity.WARNING, ctx, 404,
        )


class MethodNotAllowedError(ApiError):
    """Route exists but does not accept the request method."""
    def __init__(
        self, method: str, path: str, context: ErrorContext | None = None,
    ):
        ctx = context or ErrorContext()
        ctx.path = path
        super().__init__(
            f"Method {method} not allowed on '{path}'",
            "METHOD_NOT_ALLOWED", ErrorCategory.ROUTING,
            ErrorSeverity.WARNING, ctx, 405,
        )
        self.method = method
