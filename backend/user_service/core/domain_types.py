"""Domain Types — rich types that replace bare primitives across the codebase.

Invariants:
    - UserId wraps a UUID; never pass a bare str id into domain logic
    - UserId equality and hashing are by value; str() is the canonical hyphenated form
    - Every problem kind the API can emit is a ProblemType member; no raw slug strings

Design Decisions:
    - Frozen dataclass for UserId (not NewType): parse/format live next to the value
    - str Enums: serialize to JSON without custom encoders
"""

from dataclasses import dataclass
from enum import Enum
from uuid import UUID, uuid4


# ─── Identity Types ──────────────────────────────────────────────

@dataclass(frozen=True)
class UserId:
    """Identity of a User. Generated once at creation, never reassigned."""
    value: UUID

    @classmethod
    def new(cls) -> "UserId":
        return cls(uuid4())

    @classmethod
    def parse(cls, raw: str) -> "UserId":
        """Parse the string form. Raises InvalidUserIdError on malformed input."""
        from user_service.core.errors import InvalidUserIdError

        try:
            return cls(UUID(raw))
        except (ValueError, TypeError, AttributeError):
            raise InvalidUserIdError(str(raw))

    def __str__(self) -> str:
        return str(self.value)


# ─── Enums ───────────────────────────────────────────────────────

class ProblemType(str, Enum):
    """RFC-7807 problem kinds; value is the slug appended to the type base URI."""
    INVALID_JSON = "invalid-json"
    VALIDATION = "validation"
    DUPLICATE_EMAIL = "duplicate-email"
    BAD_REQUEST = "bad-request"
    NOT_FOUND = "not-found"
    METHOD_NOT_ALLOWED = "method-not-allowed"
    UNSUPPORTED_MEDIA_TYPE = "unsupported-media-type"
    INTERNAL_SERVER_ERROR = "internal-server-error"
    SERVICE_UNAVAILABLE = "service-unavailable"

    @property
    def status(self) -> int:
        return _PROBLEM_STATUS[self]

    @property
    def title(self) -> str:
        return _PROBLEM_TITLE[self]


_PROBLEM_STATUS: dict[ProblemType, int] = {
    ProblemType.INVALID_JSON: 422,
    ProblemType.VALIDATION: 400,
    ProblemType.DUPLICATE_EMAIL: 409,
    ProblemType.BAD_REQUEST: 400,
    ProblemType.NOT_FOUND: 404,
    ProblemType.METHOD_NOT_ALLOWED: 405,
    ProblemType.UNSUPPORTED_MEDIA_TYPE: 415,
    ProblemType.INTERNAL_SERVER_ERROR: 500,
    ProblemType.SERVICE_UNAVAILABLE: 503,
}

_PROBLEM_TITLE: dict[ProblemType, str] = {
    ProblemType.INVALID_JSON: "Invalid JSON",
    ProblemType.VALIDATION: "Validation Error",
    ProblemType.DUPLICATE_EMAIL: "Duplicate User Email",
    ProblemType.BAD_REQUEST: "Bad Request",
    ProblemType.NOT_FOUND: "Not Found",
    ProblemType.METHOD_NOT_ALLOWED: "Method Not Allowed",
    ProblemType.UNSUPPORTED_MEDIA_TYPE: "Unsupported Media Type",
    ProblemType.INTERNAL_SERVER_ERROR: "Internal Server Error",
    ProblemType.SERVICE_UNAVAILABLE: "Service Unavailable",
}
