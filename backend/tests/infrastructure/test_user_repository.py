"""SQLAlchemy User Repository — verifies storage behavior against SQLite.

Invariants:
    - create() returns the row as read back and it round-trips unchanged
    - find_all() orders by name ascending; empty table yields []
    - find_by_id() raises UserNotFoundError for unknown ids
    - unique index on email rejects a second insert as DuplicateEmailError
    - EXISTS pre-check reports taken emails
"""

import pytest

from user_service.core.domain_types import UserId
from user_service.core.errors import DuplicateEmailError, UserNotFoundError
from user_service.core.user import User
from user_service.infrastructure.user_repository import (
    SqlAlchemyUserEmailDuplicateValidator, SqlAlchemyUserRepository,
)
from user_service.models.user import UserModel


@pytest.fixture
def repository(test_db):
    return SqlAlchemyUserRepository(test_db)


@pytest.fixture
def validator(test_db):
    return SqlAlchemyUserEmailDuplicateValidator(test_db)


def test_user_model_round_trip_preserves_fields():
    user = User.create("Test User", "test@example.com")
    model = UserModel.from_entity(user)

    assert model.id == user.id.value
    assert model.to_entity() == user


async def test_create_returns_persisted_user(repository):
    user = User.create("Test User", "test@example.com")

    created = await repository.create(user)

    assert created == user


async def test_find_by_id_reads_back_created_user(repository):
    user = await repository.create(User.create("Test User", "test@example.com"))

    found = await repository.find_by_id(user.id)

    assert found.id == user.id
    assert found.name == "Test User"
    assert found.email == "test@example.com"


async def test_find_by_id_unknown_raises_not_found(repository):
    with pytest.raises(UserNotFoundError):
        await repository.find_by_id(UserId.new())


async def test_find_all_empty(repository):
    assert await repository.find_all() == []


async def test_find_all_sorted_by_name(repository):
    for name, email in [("Carol", "c@example.com"), ("Alan", "a@example.com"),
                        ("Bob", "b@example.com")]:
        await repository.create(User.create(name, email))

    users = await repository.find_all()

    assert [u.name for u in users] == ["Alan", "Bob", "Carol"]


async def test_unique_index_rejects_duplicate_email(repository):
    await repository.create(User.create("First", "dup@example.com"))

    with pytest.raises(DuplicateEmailError):
        await repository.create(User.create("Second", "dup@example.com"))

    users = await repository.find_all()
    assert [u.name for u in users] == ["First"]


async def test_validator_passes_free_email(validator):
    await validator.check("free@example.com")


async def test_validator_rejects_taken_email(repository, validator):
    await repository.create(User.create("Taken", "taken@example.com"))

    with pytest.raises(DuplicateEmailError) as exc_info:
        await validator.check("taken@example.com")

    assert exc_info.value.email == "taken@example.com"
