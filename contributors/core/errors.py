"""Error Hierarchy: typed, categorized exceptions for every sync failure mode.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Run-level failures carry enough context for diagnosis (repository, object id, messages)
    - to_response() produces the REST envelope used by the API layer
    - No internal details leaked in user-facing messages

Design Decisions:
    - Single hierarchy with ContributorsError base: one global handler in the API layer
    - ErrorContext as dataclass: rich observability without coupling to logging framework
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
    EXTERNAL_API = "external_api"
    INTERNAL = "internal"
    CONFLICT = "conflict"


@dataclass
class ErrorContext:
    """Rich context for error observability and debugging."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    repository: str | None = None
    object_id: str | None = None
    lock_name: str | None = None
    user_message: str | None = None
    debug_info: dict[str, Any] | None = None


class ContributorsError(Exception):
    """Base exception for all contributors-sync errors."""

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
                "message": self.context.user_message or self.message,
                "category": self.category.value,
                "severity": self.severity.value,
                "timestamp": self.context.timestamp.isoformat(),
                "context": {
                    "repository": self.context.repository,
                    "object_id": self.context.object_id,
                    "lock_name": self.context.lock_name,
                },
            }
        }


# ─── Run Errors ──────────────────────────────────────────────────

class CommitValidationError(ContributorsError):
    """A newly built commit could not be persisted; the whole run was rolled back."""
    def __init__(
        self, object_id: str, messages: list[str], context: ErrorContext | None = None,
    ):
        ctx = context or ErrorContext()
        ctx.object_id = object_id
        super().__init__(
            f"Couldn't import commit {object_id}: {'; '.join(messages)}",
            "COMMIT_VALIDATION_ERROR", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, ctx, 422,
        )
        self.object_id = object_id
        self.messages = messages


class SyncInProgressError(ContributorsError):
    """Another run holds the sync lock and the policy is fail-fast."""
    def __init__(self, lock_name: str, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.lock_name = lock_name
        super().__init__(
            f"Sync lock '{lock_name}' is held by another run",
            "SYNC_IN_PROGRESS", ErrorCategory.CONFLICT,
            ErrorSeverity.WARNING, ctx, 409,
        )
        self.lock_name = lock_name


class ResourceNotFoundError(ContributorsError):
    """Requested resource does not exist."""
    def __init__(
        self, resource_type: str, resource_id: str, context: ErrorContext | None = None,
    ):
        super().__init__(
            f"{resource_type} '{resource_id}' not found",
            "RESOURCE_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.ERROR, context, 404,
        )


# ─── Infrastructure Errors (500-level) ──────────────────────────

class GitTransportError(ContributorsError):
    """Git repository could not be opened, pulled or read."""
    def __init__(
        self, message: str, operation: str, context: ErrorContext | None = None,
    ):
        super().__init__(
            f"Git {operation} failed: {message}",
            "GIT_TRANSPORT_ERROR", ErrorCategory.EXTERNAL_API,
            ErrorSeverity.CRITICAL, context, 502,
        )
        self.operation = operation


class DatabaseError(ContributorsError):
    """Database operation failed."""
    def __init__(self, message: str, operation: str, context: ErrorContext | None = None):
        super().__init__(
            f"Database {operation} failed: {message}",
            "DATABASE_ERROR", ErrorCategory.DATABASE,
            ErrorSeverity.CRITICAL, context, 503,
        )
        self.operation = operation
