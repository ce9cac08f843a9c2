"""Tests for the Redis-backed user event notifier."""

import asyncio
import json

import pytest
from prometheus_client import REGISTRY

from user_service.domain.ports.notifiers import UserEventType
from user_service.infrastructure.events import (
    RedisUserEventNotifier,
    build_event_payload,
)

from fakes import StubRedis


def test_build_event_payload():
    payload = json.loads(build_event_payload(UserEventType.CREATED, 3, "Ann", "ann@mail.com"))

    assert payload["event_type"] == "USER_CREATED"
    assert payload["user_id"] == 3
    assert payload["user_name"] == "Ann"
    assert payload["user_email"] == "ann@mail.com"
    assert payload["timestamp"]


@pytest.mark.asyncio
async def test_notify_returns_before_publish_completes():
    client = StubRedis(delay=0.05)
    notifier = RedisUserEventNotifier(client, channel="user-events")

    notifier.notify_created(1, "Ann", "ann@mail.com")
    assert client.published == []

    await notifier.aclose()
    assert len(client.published) == 1
    channel, message = client.published[0]
    assert channel == "user-events"
    assert json.loads(message)["event_type"] == "USER_CREATED"


@pytest.mark.asyncio
async def test_notify_deleted_publishes_deleted_event():
    client = StubRedis()
    notifier = RedisUserEventNotifier(client, channel="events")

    notifier.notify_deleted(5, "Bob", "bob@mail.com")
    await notifier.aclose()

    assert json.loads(client.published[0][1])["event_type"] == "USER_DELETED"
    assert json.loads(client.published[0][1])["user_id"] == 5


@pytest.mark.asyncio
async def test_publish_failure_is_contained():
    client = StubRedis(fail=True)
    notifier = RedisUserEventNotifier(client, channel="user-events")

    notifier.notify_created(1, "Ann", "ann@mail.com")
    await notifier.aclose()

    assert client.published == []


def test_notify_without_running_loop_raises_to_guard():
    notifier = RedisUserEventNotifier(StubRedis(), channel="user-events")

    with pytest.raises(RuntimeError):
        notifier.notify_created(1, "Ann", "ann@mail.com")


def _failures(event_type: str) -> float:
    value = REGISTRY.get_sample_value(
        "user_event_notification_failures_total", {"event_type": event_type}
    )
    return value or 0.0


@pytest.mark.asyncio
async def test_cancelled_publish_is_counted_as_failure():
    before = _failures("USER_DELETED")
    client = StubRedis(delay=1.0)
    notifier = RedisUserEventNotifier(client, channel="user-events")

    notifier.notify_deleted(2, "Bob", "bob@mail.com")
    current = asyncio.current_task()
    for task in asyncio.all_tasks():
        if task is not current:
            task.cancel()
    await notifier.aclose()

    assert client.published == []
    assert _failures("USER_DELETED") == before + 1
