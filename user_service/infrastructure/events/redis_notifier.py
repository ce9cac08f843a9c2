"""
Redis User Event Notifier.

Publishes user lifecycle events to a Redis pub/sub channel.

Delivery model:
- notify_* builds the payload and schedules PUBLISH as a background task,
  then returns immediately (fire-and-forget, at-most-once, no retry)
- Failures are logged and counted from the task's done callback
- aclose() waits for tasks still in flight (called on container shutdown)

Payload (JSON):
    {
        "event_type": "USER_CREATED" | "USER_DELETED",
        "user_id": 3,
        "user_name": "Ann",
        "user_email": "ann@mail.com",
        "timestamp": "2025-01-27T12:00:00+00:00"
    }
"""

import asyncio
import functools
import json
import logging
from datetime import datetime, timezone

import redis.asyncio as redis
from redis.asyncio import Redis

from user_service.config.settings import Config
from user_service.domain.ports.notifiers import UserEventNotifier, UserEventType
from user_service.observability.metrics import increment_notification_failure

logger = logging.getLogger(__name__)


def build_event_payload(
    event_type: UserEventType, user_id: int, name: str, email: str
) -> str:
    return json.dumps(
        {
            "event_type": event_type.value,
            "user_id": user_id,
            "user_name": name,
            "user_email": email,
            "timestamp": datetime.now(timezone.utc).isoformat(),
        }
    )


class RedisUserEventNotifier(UserEventNotifier):
    def __init__(self, client: Redis, channel: str = Config.USER_EVENTS_CHANNEL):
        self._client = client
        self._channel = channel
        self._pending: set[asyncio.Task] = set()

    def notify_created(self, user_id: int, name: str, email: str) -> None:
        self._schedule(UserEventType.CREATED, user_id, name, email)

    def notify_deleted(self, user_id: int, name: str, email: str) -> None:
        self._schedule(UserEventType.DELETED, user_id, name, email)

    def _schedule(
        self, event_type: UserEventType, user_id: int, name: str, email: str
    ) -> None:
        payload = build_event_payload(event_type, user_id, name, email)
        task = asyncio.get_running_loop().create_task(self._publish(payload))
        self._pending.add(task)
        task.add_done_callback(functools.partial(self._on_done, event_type))

    async def _publish(self, payload: str) -> None:
        await self._client.publish(self._channel, payload)
        logger.debug("[Redis] Published to %s: %s", self._channel, payload)

    def _on_done(self, event_type: UserEventType, task: asyncio.Task) -> None:
        self._pending.discard(task)
        if task.cancelled():
            increment_notification_failure(event_type.value)
            logger.warning(
                "[Redis] Publish of %s to %s cancelled before delivery",
                event_type.value,
                self._channel,
            )
            return
        exc = task.exception()
        if exc is not None:
            increment_notification_failure(event_type.value)
            logger.error(
                "[Redis] Failed to publish %s to %s: %s",
                event_type.value,
                self._channel,
                exc,
            )

    async def aclose(self) -> None:
        if self._pending:
            await asyncio.gather(*self._pending, return_exceptions=True)


async def create_redis_client(settings: type[Config] = Config) -> Redis:
    """
    Create async Redis client with connection pool.

    Note:
        - Uses connection pooling (automatic with from_url)
        - decode_responses=True for automatic string decoding
        - socket timeouts bound every publish call
    """
    client = redis.from_url(
        settings.REDIS_URL,
        encoding="utf-8",
        decode_responses=True,
        socket_timeout=settings.REDIS_SOCKET_TIMEOUT,
        socket_connect_timeout=settings.REDIS_SOCKET_TIMEOUT,
    )
    logger.info(f"[Redis] Client created for {settings.REDIS_URL}")
    return client


async def close_redis_client(client: Redis) -> None:
    """Close Redis client connection. Should be called on application shutdown."""
    if client:
        await client.aclose()
        logger.info("[Redis] Connection closed")
