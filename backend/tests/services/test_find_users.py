"""Read Use-Cases — FindAllUsers / FindUserById pass straight through to the repository."""

import pytest

from tests.fakes import InMemoryUserRepository
from user_service.core.domain_types import UserId
from user_service.core.errors import UserNotFoundError
from user_service.core.user import User
from user_service.services.find_users import FindAllUsers, FindUserById


async def test_find_all_returns_users_sorted_by_name():
    repository = InMemoryUserRepository([
        User.create("Charlie", "c@example.com"),
        User.create("Alice", "a@example.com"),
        User.create("Bob", "b@example.com"),
    ])

    users = await FindAllUsers(repository).execute()

    assert [u.name for u in users] == ["Alice", "Bob", "Charlie"]


async def test_find_all_on_empty_store_is_empty_list():
    assert await FindAllUsers(InMemoryUserRepository()).execute() == []


async def test_find_by_id_returns_user():
    user = User.create("Test User", "test@example.com")
    repository = InMemoryUserRepository([user])

    assert await FindUserById(repository).execute(user.id) == user


async def test_find_by_id_forwards_not_found():
    missing = UserId.new()

    with pytest.raises(UserNotFoundError) as exc_info:
        await FindUserById(InMemoryUserRepository()).execute(missing)

    assert exc_info.value.user_id == str(missing)
