"""Boundary Protocols — contracts between core and shell.

Invariants:
    - Core NEVER imports from shell: dependency arrows point inward only
    - All IO operations accessed through Protocol types
    - Failures surface as typed errors (core/errors.py), never as None or bool flags

Design Decisions:
    - Protocol over ABC: structural subtyping, so tests can pass plain fakes
    - Async in Protocol: implementations do IO
"""

from typing import Protocol

from user_service.core.domain_types import UserId
from user_service.core.user import User


class UserRepository(Protocol):
    """Contract for user persistence, implemented by shell."""

    async def create(self, user: User) -> User:
        """Insert and return the row as read back. StorageError / DuplicateEmailError."""
        ...

    async def find_all(self) -> list[User]:
        """All users ordered by name ascending. Empty store yields []."""
        ...

    async def find_by_id(self, user_id: UserId) -> User:
        """Raises UserNotFoundError when absent, StorageError on faults."""
        ...


class UserEmailDuplicateValidator(Protocol):
    """Contract for the email-uniqueness pre-check, implemented by shell."""

    async def check(self, email: str) -> None:
        """Returns when email is free. Raises DuplicateEmailError or StorageError."""
        ...
