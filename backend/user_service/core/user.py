"""User Entity — the single aggregate the service manages.

Invariants:
    - Immutable: persisted once, read back unchanged, never updated
    - Field constraints (name length, email syntax) are enforced at the HTTP
      boundary, not here

Design Decisions:
    - Frozen dataclass: value semantics, safe to share across coroutines
"""

from dataclasses import dataclass

from user_service.core.domain_types import UserId


@dataclass(frozen=True)
class User:
    id: UserId
    name: str
    email: str

    @classmethod
    def create(cls, name: str, email: str) -> "User":
        """New user with a freshly generated id."""
        return cls(id=UserId.new(), name=name, email=email)
