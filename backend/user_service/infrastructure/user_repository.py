"""User Repository (SQLAlchemy) — store-backed implementations of the user Protocols.

Invariants:
    - Implements UserRepository and UserEmailDuplicateValidator (core/repository_protocols.py)
    - Never returns ORM objects: every row is converted with UserModel.to_entity()
    - SQLAlchemy exceptions never escape: mapped to StorageError, or to
      DuplicateEmailError when the unique index on email rejects an insert
    - find_all orders by name ascending; ties keep storage order

Design Decisions:
    - One AsyncSession per request, injected by the route (get_db)
    - create() commits and refreshes: the returned user is the row as read back
"""

import logging

from sqlalchemy import exists, select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from user_service.core.domain_types import UserId
from user_service.core.errors import (
    DuplicateEmailError, StorageError, UserNotFoundError,
)
from user_service.core.user import User
from user_service.models.user import UserModel

logger = logging.getLogger(__name__)


class SqlAlchemyUserRepository:
    """UserRepository over the `user` table."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def create(self, user: User) -> User:
        model = UserModel.from_entity(user)
        self.db.add(model)
        try:
            await self.db.commit()
            await self.db.refresh(model)
        except IntegrityError as e:
            await self.db.rollback()
            logger.warning(
                f"Insert rejected by unique index: {e.orig}",
                extra={"user_id": str(user.id)},
            )
            raise DuplicateEmailError(user.email)
        except SQLAlchemyError as e:
            await self.db.rollback()
            logger.error(
                f"Failed to insert user: {e}", extra={"user_id": str(user.id)},
            )
            raise StorageError("insert", str(e))
        return model.to_entity()

    async def find_all(self) -> list[User]:
        try:
            result = await self.db.execute(
                select(UserModel).order_by(UserModel.name.asc()),
            )
        except SQLAlchemyError as e:
            logger.error(f"Failed to fetch users: {e}")
            raise StorageError("select", str(e))
        return [row.to_entity() for row in result.scalars().all()]

    async def find_by_id(self, user_id: UserId) -> User:
        try:
            result = await self.db.execute(
                select(UserModel).where(UserModel.id == user_id.value),
            )
        except SQLAlchemyError as e:
            logger.error(
                f"Failed to fetch user: {e}", extra={"user_id": str(user_id)},
            )
            raise StorageError("select", str(e))
        row = result.scalar_one_or_none()
        if row is None:
            raise UserNotFoundError(str(user_id))
        return row.to_entity()


class SqlAlchemyUserEmailDuplicateValidator:
    """UserEmailDuplicateValidator backed by an EXISTS query."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def check(self, email: str) -> None:
        try:
            taken = await self.db.scalar(
                select(exists().where(UserModel.email == email)),
            )
        except SQLAlchemyError as e:
            logger.error(f"Failed to check email uniqueness: {e}")
            raise StorageError("select", str(e))
        if taken:
            raise DuplicateEmailError(email)
