"""Error Hierarchy - typed, categorized exceptions for the product API.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - to_graphql_error() produces a GraphQL-shaped error dict (message + extensions)
    - Not-found is never an error here: lookups return None, update/delete a zero record
    - No internal details leaked in client-facing messages

Design Decisions:
    - Single hierarchy with ProductApiError base: one FastAPI handler catches all
    - Errors surface inside the {"data", "errors"} envelope, so HTTP status stays 200
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
    CONFIGURATION = "configuration"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Context attached to an error for logs."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    operation_name: str | None = None


class ProductApiError(Exception):
    """Base exception for all product API errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        context: ErrorContext | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.severity = severity
        self.context = context or ErrorContext()

    def to_graphql_error(self) -> dict:
        """Convert to a GraphQL error entry for the response envelope."""
        return {
            "message": self.message,
            "extensions": {
                "code": self.code,
                "category": self.category.value,
                "severity": self.severity.value,
                "timestamp": self.context.timestamp.isoformat(),
            },
        }


# ─── Request Errors ──────────────────────────────────────────────

class MissingQueryError(ProductApiError):
    """The `query` request parameter is absent or empty."""
    def __init__(self, context: ErrorContext | None = None):
        super().__init__(
            "Must provide a query string.",
            "MISSING_QUERY", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, context,
        )


class InvalidVariablesError(ProductApiError):
    """The `variables` request parameter is not a JSON object."""
    def __init__(self, reason: str, context: ErrorContext | None = None):
        super().__init__(
            f"Variables are invalid: {reason}",
            "INVALID_VARIABLES", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, context,
        )
        self.reason = reason


class UnknownOperationError(ProductApiError):
    """The document holds no operation, or none named `operationName`."""
    def __init__(self, operation_name: str | None, context: ErrorContext | None = None):
        message = (
            f'Unknown operation named "{operation_name}".' if operation_name
            else "Must provide an operation."
        )
        super().__init__(
            message,
            "UNKNOWN_OPERATION", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, context or ErrorContext(operation_name=operation_name),
        )
        self.operation_name = operation_name


# ─── Startup Errors ──────────────────────────────────────────────

class SeedDataError(ProductApiError):
    """Seed file missing, unreadable or not a list of products."""
    def __init__(self, path: str, reason: str, context: ErrorContext | None = None):
        super().__init__(
            f"Cannot load seed data from {path}: {reason}",
            "SEED_DATA_ERROR", ErrorCategory.CONFIGURATION,
            ErrorSeverity.CRITICAL, context,
        )
        self.path = path
