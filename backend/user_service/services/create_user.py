"""CreateUser Use-Case — registers a new user, enforcing email uniqueness.

Invariants:
    - Input is pre-validated by the HTTP layer (name 2-50 chars, syntactically valid email)
    - Duplicate check runs BEFORE the insert; on duplicate the repository is never touched
    - Returns the user as read back from storage, not the in-memory draft

Design Decisions:
    - Check-then-insert is not atomic: the unique index on user.email is the
      authoritative signal, the pre-check is the fast path
    - Collaborators injected as Protocols: unit tests pass in-memory fakes
"""

import logging
from dataclasses import dataclass

from user_service.core.repository_protocols import (
    UserEmailDuplicateValidator, UserRepository,
)
from user_service.core.user import User

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CreateUserInput:
    name: str
    email: str


class CreateUser:
    """Orchestrates duplicate check and persistence for one new user."""

    def __init__(
        self,
        user_repository: UserRepository,
        duplicate_validator: UserEmailDuplicateValidator,
    ):
        self.user_repository = user_repository
        self.duplicate_validator = duplicate_validator

    async def execute(self, create_user_input: CreateUserInput) -> User:
        user = User.create(create_user_input.name, create_user_input.email)
        await self.duplicate_validator.check(user.email)
        created = await self.user_repository.create(user)
        logger.info(
            f"User created: {created.id}", extra={"user_id": str(created.id)},
        )
        return created
