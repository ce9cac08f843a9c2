"""
Event notifiers - implementations of the UserEventNotifier port.
"""

from user_service.infrastructure.events.logging_notifier import LoggingUserEventNotifier
from user_service.infrastructure.events.notifier_factory import open_user_event_notifier
from user_service.infrastructure.events.redis_notifier import (
    RedisUserEventNotifier,
    build_event_payload,
    create_redis_client,
    close_redis_client,
)

__all__ = [
    "LoggingUserEventNotifier",
    "RedisUserEventNotifier",
    "build_event_payload",
    "create_redis_client",
    "close_redis_client",
    "open_user_event_notifier",
]
