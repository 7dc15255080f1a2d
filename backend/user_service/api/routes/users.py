"""User Routes — create, list and find-by-id over the /users resource.

Invariants:
    - Routes never contain business logic: decode, validate, call one use-case, serialize
    - Every failure is raised as a typed UserServiceError; no route builds an error response
    - {user_id} is taken as str and parsed by UserId.parse so a malformed id is a
      400 bad-request, not a 422 decode error

Design Decisions:
    - Use-cases built per request from request-scoped repositories (no global state)
"""

import logging

from fastapi import APIRouter, Depends, status

from user_service.api.deps import (
    get_duplicate_validator, get_user_repository, require_json_content,
)
from user_service.core.domain_types import UserId
from user_service.core.repository_protocols import (
    UserEmailDuplicateValidator, UserRepository,
)
from user_service.schemas.user import CreateUserBody, CreateUserRequest, UserResponse
from user_service.services.create_user import CreateUser
from user_service.services.find_users import FindAllUsers, FindUserById

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/users", tags=["users"])


@router.get("", response_model=list[UserResponse])
async def find_all_users(
    user_repository: UserRepository = Depends(get_user_repository),
):
    """List all users ordered by name."""
    users = await FindAllUsers(user_repository).execute()
    return [UserResponse.from_entity(u) for u in users]


@router.post(
    "", response_model=UserResponse,
    status_code=status.HTTP_201_CREATED,
    dependencies=[Depends(require_json_content)],
)
async def create_user(
    body: CreateUserBody,
    user_repository: UserRepository = Depends(get_user_repository),
    duplicate_validator: UserEmailDuplicateValidator = Depends(get_duplicate_validator),
):
    """Create a user. 400 on invalid fields, 409 on duplicate email."""
    request = CreateUserRequest.from_body(body)
    user = await CreateUser(user_repository, duplicate_validator).execute(
        request.to_input(),
    )
    return UserResponse.from_entity(user)


@router.get("/{user_id}", response_model=UserResponse)
async def find_user_by_id(
    user_id: str,
    user_repository: UserRepository = Depends(get_user_repository),
):
    """Get one user. 400 on malformed id, 404 when absent."""
    user = await FindUserById(user_repository).execute(UserId.parse(user_id))
    return UserResponse.from_entity(user)
