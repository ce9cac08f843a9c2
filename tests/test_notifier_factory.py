"""Tests for choosing the event notifier from the active settings."""

import json

import pytest

from user_service.config import settings
from user_service.config.settings import Config, get_config
from user_service.infrastructure.events import (
    LoggingUserEventNotifier,
    RedisUserEventNotifier,
    notifier_factory,
    open_user_event_notifier,
)

from fakes import StubRedis


class PublishingConfig(Config):
    USER_EVENTS_ENABLED = True
    USER_EVENTS_CHANNEL = "audit-events"


def test_get_config_selects_testing_settings():
    assert get_config("testing") is settings.TestingConfig
    assert settings.TestingConfig.USER_EVENTS_ENABLED is False


@pytest.mark.asyncio
async def test_testing_settings_use_logging_notifier(monkeypatch):
    async def unexpected_client(config):
        raise AssertionError("Redis must not be contacted when events are disabled")

    monkeypatch.setattr(notifier_factory, "create_redis_client", unexpected_client)

    async with open_user_event_notifier(settings.TestingConfig) as notifier:
        assert isinstance(notifier, LoggingUserEventNotifier)
        notifier.notify_created(1, "Ann", "ann@mail.com")


@pytest.mark.asyncio
async def test_enabled_settings_publish_to_configured_channel(monkeypatch):
    client = StubRedis()

    async def stub_client(config):
        assert config is PublishingConfig
        return client

    monkeypatch.setattr(notifier_factory, "create_redis_client", stub_client)

    async with open_user_event_notifier(PublishingConfig) as notifier:
        assert isinstance(notifier, RedisUserEventNotifier)
        notifier.notify_created(1, "Ann", "ann@mail.com")

    # Leaving the context drains the publish and closes the client
    channel, message = client.published[0]
    assert channel == "audit-events"
    assert json.loads(message)["user_id"] == 1
    assert client.closed
