"""API Dependencies — wire request-scoped sessions into repositories, guard content types.

Invariants:
    - Repository and validator for one request share the same AsyncSession
    - POST bodies with a non-JSON Content-Type are rejected (415) before decoding;
      a missing Content-Type is decoded as JSON
"""

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from user_service.core.errors import UnsupportedMediaTypeError
from user_service.infrastructure.database import get_db
from user_service.infrastructure.user_repository import (
    SqlAlchemyUserEmailDuplicateValidator, SqlAlchemyUserRepository,
)


def get_user_repository(
    db: AsyncSession = Depends(get_db),
) -> SqlAlchemyUserRepository:
    return SqlAlchemyUserRepository(db)


def get_duplicate_validator(
    db: AsyncSession = Depends(get_db),
) -> SqlAlchemyUserEmailDuplicateValidator:
    return SqlAlchemyUserEmailDuplicateValidator(db)


async def require_json_content(request: Request) -> None:
    content_type = request.headers.get("content-type")
    if content_type is None:
        return
    mime = content_type.split(";")[0].strip().lower()
    if mime == "application/json" or (
        mime.startswith("application/") and mime.endswith("+json")
    ):
        return
    raise UnsupportedMediaTypeError(content_type)
