"""Error Hierarchy: typed, categorized exceptions for every message board failure mode.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - http_status is the status the client sees; 500 for everything except RouteNotFoundError
    - to_response() returns the JSON body, or None when the response carries no body
    - Storage errors never leak driver details to the client

Design Decisions:
    - Single hierarchy with MessageBoardError base: one global handler catches all
    - Body shape is owned by the error type: write-path errors answer with
      {"error": ...}, read-path storage errors answer with an empty body
"""

from dataclasses import dataclass, field
from enum import Enum
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
    DATABASE = "database"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Context attached to an error for logging."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    field_name: str | None = None
    raw_value: str | None = None
    operation: str | None = None


class MessageBoardError(Exception):
    """Base exception for all message board errors."""

    has_body: bool = True

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

    def to_response(self) -> dict | None:
        """Client-facing JSON body, or None for an empty-body response."""
        if not self.has_body:
            return None
        return {"error": self.message}


# ─── Request Errors ─────────────────────────────────────────────

class MissingFieldError(MessageBoardError):
    """Required form field absent from a POST body."""
    def __init__(self, field_name: str, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.field_name = field_name
        super().__init__(
            f"Missing field {field_name}",
            "MISSING_FIELD", ErrorCategory.VALIDATION,
            ErrorSeverity.WARNING, ctx, 500,
        )
        self.field_name = field_name


class InvalidQueryParamError(MessageBoardError):
    """Time-range query parameter is present but not an integer."""
    def __init__(
        self, field_name: str, raw_value: str, context: ErrorContext | None = None,
    ):
        ctx = context or ErrorContext()
        ctx.field_name = field_name
        ctx.raw_value = raw_value
        super().__init__(
            f"Error parsing '{field_name}': invalid integer '{raw_value}'",
            "INVALID_QUERY_PARAM", ErrorCategory.VALIDATION,
            ErrorSeverity.WARNING, ctx, 500,
        )
        self.field_name = field_name
        self.raw_value = raw_value


class RouteNotFoundError(MessageBoardError):
    """No handler for the (method, path) pair."""
    has_body = False

    def __init__(self, method: str, path: str, context: ErrorContext | None = None):
        super().__init__(
            f"No route for {method} {path}",
            "ROUTE_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.INFO, context, 404,
        )


# ─── Storage Errors (500, generic to the client) ────────────────

class StorageConnectError(MessageBoardError):
    """Could not acquire a database connection."""
    has_body = False

    def __init__(self, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.operation = "connect"
        super().__init__(
            "Error connecting to database",
            "STORAGE_CONNECT_FAILURE", ErrorCategory.DATABASE,
            ErrorSeverity.CRITICAL, ctx, 500,
        )


class StorageReadError(MessageBoardError):
    """Message query failed."""
    has_body = False

    def __init__(self, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.operation = "query"
        super().__init__(
            "Error querying database",
            "STORAGE_READ_FAILURE", ErrorCategory.DATABASE,
            ErrorSeverity.CRITICAL, ctx, 500,
        )


class StorageWriteError(MessageBoardError):
    """Message insert failed."""
    def __init__(self, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.operation = "insert"
        super().__init__(
            "service error",
            "STORAGE_WRITE_FAILURE", ErrorCategory.DATABASE,
            ErrorSeverity.CRITICAL, ctx, 500,
        )
