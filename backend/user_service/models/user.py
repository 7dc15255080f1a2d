"""User ORM — storage row for the `user` table.

Invariants:
    - id is UUID primary key, assigned by the application (never by the database)
    - email carries a unique index: the authoritative duplicate-email signal
    - from_entity / to_entity round-trip preserves id, name, email exactly

Design Decisions:
    - Generic Uuid type: native uuid on PostgreSQL, CHAR(32) on SQLite for tests
    - Text columns: length limits are enforced at the HTTP boundary
"""

import uuid

from sqlalchemy import Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from user_service.core.domain_types import UserId
from user_service.core.user import User
from user_service.db.base import Base


class UserModel(Base):
    __tablename__ = "user"

    id: Mapped[uuid.UUID] = mapped_column(Uuid(as_uuid=True), primary_key=True)
    name: Mapped[str] = mapped_column(Text, nullable=False)
    email: Mapped[str] = mapped_column(Text, nullable=False, unique=True, index=True)

    @classmethod
    def from_entity(cls, user: User) -> "UserModel":
        return cls(id=user.id.value, name=user.name, email=user.email)

    def to_entity(self) -> User:
        return User(id=UserId(self.id), name=self.name, email=self.email)
