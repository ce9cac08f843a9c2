import os
import sys

import pytest
from dishka import Provider, Scope, provide
from fastapi.testclient import TestClient

# Add project root to path
sys.path.insert(0, os.path.abspath(os.path.dirname(__file__) + "/.."))

from fakes import InMemoryUserRepository, RecordingNotifier, StubRedis
from user_service.domain.ports.notifiers import UserEventNotifier
from user_service.domain.ports.repositories import UserRepository
from user_service.infrastructure.events import RedisUserEventNotifier
from user_service.fastapi_app import create_fastapi_app
from user_service.setup.ioc import create_container


class FakeInfrastructureProvider(Provider):
    """Binds the domain ports to the in-memory fakes of a single test."""

    def __init__(self, repository: UserRepository, notifier: UserEventNotifier):
        super().__init__()
        self._repository = repository
        self._notifier = notifier

    @provide(scope=Scope.APP)
    def get_user_repository(self) -> UserRepository:
        return self._repository

    @provide(scope=Scope.APP)
    def get_user_event_notifier(self) -> UserEventNotifier:
        return self._notifier


@pytest.fixture()
def repository():
    return InMemoryUserRepository()


@pytest.fixture()
def notifier():
    return RecordingNotifier()


@pytest.fixture()
def container(repository, notifier):
    return create_container(FakeInfrastructureProvider(repository, notifier))


@pytest.fixture()
def redis_client():
    return StubRedis()


@pytest.fixture()
def redis_container(repository, redis_client):
    """Container whose notifier publishes to an in-memory Redis stand-in."""
    notifier = RedisUserEventNotifier(redis_client, channel="user-events")
    return create_container(FakeInfrastructureProvider(repository, notifier))


@pytest.fixture()
def app(container):
    """Create a new FastAPI app instance wired to the fakes for each test."""
    return create_fastapi_app(container=container)


@pytest.fixture()
def client(app):
    """A test client for the FastAPI app."""
    with TestClient(app) as test_client:
        yield test_client
