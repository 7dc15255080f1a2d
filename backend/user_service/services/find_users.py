"""Read Use-Cases — FindAllUsers and FindUserById.

Invariants:
    - Pure pass-throughs: no filtering, no reshaping
    - UserNotFoundError from the repository propagates unchanged
"""

from user_service.core.domain_types import UserId
from user_service.core.repository_protocols import UserRepository
from user_service.core.user import User


class FindAllUsers:
    def __init__(self, user_repository: UserRepository):
        self.user_repository = user_repository

    async def execute(self) -> list[User]:
        return await self.user_repository.find_all()


class FindUserById:
    def __init__(self, user_repository: UserRepository):
        self.user_repository = user_repository

    async def execute(self, user_id: UserId) -> User:
        return await self.user_repository.find_by_id(user_id)
