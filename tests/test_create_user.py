"""
Tests for CreateUserHandler: input guards, email uniqueness (pre-check and
store-reported), persistence failure wrapping and the created notification.
"""

import pytest

from fakes import RecordingNotifier
from user_service.application.commands.users import CreateUserCommand, CreateUserHandler
from user_service.application.common.result import Err, ErrorKind, Ok
from user_service.application.queries.users import GetUserHandler, GetUserQuery
from user_service.domain.exceptions import RepositoryError


@pytest.fixture()
def handler(repository, notifier):
    return CreateUserHandler(repository, notifier)


@pytest.mark.asyncio
async def test_create_user_persists_and_can_be_read_back(handler, repository):
    result = await handler.execute(CreateUserCommand(name="Ann", email="ann@mail.com", age=30))

    assert isinstance(result, Ok)
    created = result.value
    assert created.id is not None
    assert created.created_at is not None

    fetched = await GetUserHandler(repository).execute(GetUserQuery(user_id=created.id))
    assert isinstance(fetched, Ok)
    assert (fetched.value.name, fetched.value.email, fetched.value.age) == (
        "Ann",
        "ann@mail.com",
        30,
    )


@pytest.mark.asyncio
async def test_create_user_without_age(handler):
    result = await handler.execute(CreateUserCommand(name="Bob", email="bob@mail.com"))

    assert isinstance(result, Ok)
    assert result.value.age is None


@pytest.mark.asyncio
async def test_create_user_notifies_created(handler, notifier):
    result = await handler.execute(CreateUserCommand(name="Ann", email="ann@mail.com", age=30))

    assert notifier.events == [("created", result.value.id, "Ann", "ann@mail.com")]


@pytest.mark.asyncio
@pytest.mark.parametrize("name", ["", "   "])
async def test_create_user_rejects_blank_name(handler, repository, name):
    result = await handler.execute(CreateUserCommand(name=name, email="ann@mail.com"))

    assert isinstance(result, Err)
    assert result.kind is ErrorKind.INVALID_ARGUMENT
    assert repository.calls == []


@pytest.mark.asyncio
@pytest.mark.parametrize("email", ["", "ann.mail.com"])
async def test_create_user_rejects_malformed_email(handler, repository, email):
    result = await handler.execute(CreateUserCommand(name="Ann", email=email))

    assert isinstance(result, Err)
    assert result.kind is ErrorKind.INVALID_ARGUMENT
    assert repository.calls == []


@pytest.mark.asyncio
async def test_create_user_does_not_range_check_age(handler):
    result = await handler.execute(CreateUserCommand(name="Ann", email="ann@mail.com", age=200))

    assert isinstance(result, Ok)
    assert result.value.age == 200


@pytest.mark.asyncio
async def test_create_user_with_existing_email_is_duplicate(handler, repository, notifier):
    repository.seed("Ann", "ann@mail.com", 30)

    result = await handler.execute(CreateUserCommand(name="Other", email="ann@mail.com", age=50))

    assert isinstance(result, Err)
    assert result.kind is ErrorKind.DUPLICATE_EMAIL
    assert "save" not in repository.calls
    assert await repository.count() == 1
    assert notifier.events == []


@pytest.mark.asyncio
async def test_create_user_reclassifies_unique_violation_at_write(handler, repository, notifier):
    repository.seed("Ann", "ann@mail.com")
    repository.skip_exists_check = True

    result = await handler.execute(CreateUserCommand(name="Other", email="ann@mail.com"))

    assert isinstance(result, Err)
    assert result.kind is ErrorKind.DUPLICATE_EMAIL
    assert repository.calls == ["exists_by_email", "save"]
    assert notifier.events == []


@pytest.mark.asyncio
async def test_create_user_wraps_store_failure(handler, repository, notifier):
    repository.failing.add("save")

    result = await handler.execute(CreateUserCommand(name="Ann", email="ann@mail.com"))

    assert isinstance(result, Err)
    assert result.kind is ErrorKind.PERSISTENCE_FAILURE
    assert isinstance(result.cause, RepositoryError)
    assert "create_user" in result.message
    assert "ann@mail.com" in result.message
    assert notifier.events == []


@pytest.mark.asyncio
async def test_create_user_wraps_existence_check_failure(handler, repository):
    repository.failing.add("exists_by_email")

    result = await handler.execute(CreateUserCommand(name="Ann", email="ann@mail.com"))

    assert isinstance(result, Err)
    assert result.kind is ErrorKind.PERSISTENCE_FAILURE
    assert "save" not in repository.calls


@pytest.mark.asyncio
async def test_notifier_failure_keeps_committed_user(repository):
    handler = CreateUserHandler(repository, RecordingNotifier(fail=True))

    result = await handler.execute(CreateUserCommand(name="Ann", email="ann@mail.com"))

    assert isinstance(result, Ok)
    assert await repository.count() == 1
    assert (await repository.list_all())[0].email == "ann@mail.com"
