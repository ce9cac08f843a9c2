"""Selects the event notifier for the active configuration and owns its lifecycle."""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from user_service.config.settings import Config
from user_service.domain.ports.notifiers import UserEventNotifier
from user_service.infrastructure.events.logging_notifier import LoggingUserEventNotifier
from user_service.infrastructure.events.redis_notifier import (
    RedisUserEventNotifier,
    close_redis_client,
    create_redis_client,
)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def open_user_event_notifier(
    settings: type[Config],
) -> AsyncIterator[UserEventNotifier]:
    """
    Yield a Redis notifier, or a log-only one when USER_EVENTS_ENABLED is off.

    On exit, in-flight publishes are drained before the Redis client closes.
    """
    if not settings.USER_EVENTS_ENABLED:
        logger.info("User event publishing disabled")
        yield LoggingUserEventNotifier()
        return

    client = await create_redis_client(settings)
    notifier = RedisUserEventNotifier(client, settings.USER_EVENTS_CHANNEL)
    try:
        yield notifier
    finally:
        await notifier.aclose()
        await close_redis_client(client)
