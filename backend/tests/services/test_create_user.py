"""CreateUser Use-Case — verifies orchestration against in-memory fakes.

Invariants:
    - Duplicate check runs before insert; on duplicate the repository is untouched
    - Storage failures propagate unchanged as StorageError
"""

import pytest

from tests.fakes import (
    FailingUserRepository, InMemoryDuplicateValidator, InMemoryUserRepository,
)
from user_service.core.errors import DuplicateEmailError, StorageError
from user_service.core.user import User
from user_service.services.create_user import CreateUser, CreateUserInput


@pytest.fixture
def repository():
    return InMemoryUserRepository()


@pytest.fixture
def validator(repository):
    return InMemoryDuplicateValidator(repository)


async def test_create_user_returns_persisted_user(repository, validator):
    usecase = CreateUser(repository, validator)

    user = await usecase.execute(CreateUserInput("Test User", "test@example.com"))

    assert user.name == "Test User"
    assert user.email == "test@example.com"
    assert repository.users[user.id] == user
    assert validator.checked == ["test@example.com"]


async def test_create_user_generates_distinct_ids(repository, validator):
    usecase = CreateUser(repository, validator)

    a = await usecase.execute(CreateUserInput("User A", "a@example.com"))
    b = await usecase.execute(CreateUserInput("User B", "b@example.com"))

    assert a.id != b.id


async def test_duplicate_email_fails_without_touching_repository(validator, repository):
    existing = User.create("Existing", "test@example.com")
    repository.users[existing.id] = existing
    usecase = CreateUser(repository, validator)

    with pytest.raises(DuplicateEmailError) as exc_info:
        await usecase.execute(CreateUserInput("Test User", "test@example.com"))

    assert exc_info.value.email == "test@example.com"
    assert "create" not in repository.calls
    assert len(repository.users) == 1


async def test_storage_error_propagates():
    failing = FailingUserRepository(StorageError("insert", "connection reset"))
    validator = InMemoryDuplicateValidator(InMemoryUserRepository())
    usecase = CreateUser(failing, validator)

    with pytest.raises(StorageError):
        await usecase.execute(CreateUserInput("Test User", "test@example.com"))
