"""Error Hierarchy — typed, categorized exceptions for all user-service failure modes.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Every error names the ProblemType it renders as; the HTTP layer dispatches on
      the class, never on the message text
    - Domain errors (4xx) are recoverable; infrastructure errors (5xx) are critical
    - No internal details leaked in user-facing messages (StorageError keeps the
      driver message in `internal_detail`, not in `message`)

Design Decisions:
    - Single hierarchy with UserServiceError base: one FastAPI handler catches all
    - ErrorContext as dataclass: rich observability without coupling to logging framework
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any

from user_service.core.domain_types import ProblemType


class ErrorSeverity(str, Enum):
    """Error severity for observability and client handling."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    DECODE = "decode"
    VALIDATION = "validation"
    BAD_REQUEST = "bad_request"
    CONFLICT = "conflict"
    RESOURCE_NOT_FOUND = "resource_not_found"
    UNSUPPORTED_MEDIA = "unsupported_media"
    DATABASE = "database"


@dataclass
class ErrorContext:
    """Rich context for error observability and debugging."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    user_id: str | None = None
    email: str | None = None
    debug_info: dict[str, Any] | None = None


@dataclass(frozen=True)
class FieldError:
    """One failed constraint on one request field."""
    field: str
    message: str
    type: str

    @classmethod
    def from_error_dict(cls, error: dict) -> "FieldError":
        """Build from one pydantic error entry ({"loc", "msg", "type"})."""
        loc = [str(part) for part in error.get("loc", ())]
        if loc and loc[0] == "body":
            loc = loc[1:]
        return cls(
            field=".".join(loc) or "body",
            message=error.get("msg", ""),
            type=error.get("type", ""),
        )

    def to_dict(self) -> dict:
        return {"field": self.field, "message": self.message, "type": self.type}


class UserServiceError(Exception):
    """Base exception for all user-service errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        problem: ProblemType,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        context: ErrorContext | None = None,
        http_status: int | None = None,
        title: str | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.problem = problem
        self.severity = severity
        self.context = context or ErrorContext()
        self.http_status = http_status or problem.status
        self.title = title or problem.title

    @property
    def field_errors(self) -> list[FieldError]:
        return []


# ─── Request Errors (4xx) ───────────────────────────────────────

class DecodeError(UserServiceError):
    """Request body is not JSON, or lacks fields / has wrong types."""
    def __init__(
        self, errors: list[FieldError] | None = None, context: ErrorContext | None = None,
    ):
        super().__init__(
            "Request body could not be decoded",
            "INVALID_JSON", ErrorCategory.DECODE, ProblemType.INVALID_JSON,
            ErrorSeverity.WARNING, context,
        )
        self.errors = errors or []

    @property
    def field_errors(self) -> list[FieldError]:
        return self.errors


class FieldValidationError(UserServiceError):
    """Request body decoded but a field violates its constraints."""
    def __init__(self, errors: list[FieldError], context: ErrorContext | None = None):
        fields = ", ".join(sorted({e.field for e in errors}))
        super().__init__(
            f"Invalid value for: {fields}",
            "VALIDATION_ERROR", ErrorCategory.VALIDATION, ProblemType.VALIDATION,
            ErrorSeverity.WARNING, context,
        )
        self.errors = errors

    @property
    def field_errors(self) -> list[FieldError]:
        return self.errors


class InvalidUserIdError(UserServiceError):
    """Path parameter is not a UUID."""
    def __init__(self, raw_value: str, context: ErrorContext | None = None):
        super().__init__(
            f"'{raw_value}' is not a valid user id",
            "INVALID_USER_ID", ErrorCategory.BAD_REQUEST, ProblemType.BAD_REQUEST,
            ErrorSeverity.WARNING, context,
        )
        self.raw_value = raw_value


class DuplicateEmailError(UserServiceError):
    """A user with this email is already registered."""
    def __init__(self, email: str, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.email = email
        super().__init__(
            "email is already registered",
            "DUPLICATE_EMAIL", ErrorCategory.CONFLICT, ProblemType.DUPLICATE_EMAIL,
            ErrorSeverity.WARNING, ctx,
        )
        self.email = email


class UserNotFoundError(UserServiceError):
    """No user row matches the requested id."""
    def __init__(self, user_id: str, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.user_id = user_id
        super().__init__(
            f"User '{user_id}' not found",
            "USER_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND, ProblemType.NOT_FOUND,
            ErrorSeverity.WARNING, ctx, title="User Not Found",
        )
        self.user_id = user_id


class UnsupportedMediaTypeError(UserServiceError):
    """Request body is sent with a content type other than JSON."""
    def __init__(self, content_type: str, context: ErrorContext | None = None):
        super().__init__(
            f"Expected request with Content-Type: application/json, got '{content_type}'",
            "UNSUPPORTED_MEDIA_TYPE", ErrorCategory.UNSUPPORTED_MEDIA,
            ProblemType.UNSUPPORTED_MEDIA_TYPE, ErrorSeverity.WARNING, context,
        )
        self.content_type = content_type


# ─── Infrastructure Errors (5xx) ────────────────────────────────

class StorageError(UserServiceError):
    """Database operation failed."""
    def __init__(
        self, operation: str, internal_detail: str = "", context: ErrorContext | None = None,
    ):
        super().__init__(
            f"Database {operation} failed",
            "STORAGE_ERROR", ErrorCategory.DATABASE, ProblemType.INTERNAL_SERVER_ERROR,
            ErrorSeverity.CRITICAL, context,
        )
        self.operation = operation
        self.internal_detail = internal_detail
