"""Guarded calls into the event notifier."""

import logging
from typing import Callable

from user_service.domain.entities.user import User
from user_service.domain.ports.notifiers import UserEventType
from user_service.observability.metrics import increment_notification_failure

logger = logging.getLogger(__name__)


def notify_safely(
    event_type: UserEventType, send: Callable[[int, str, str], None], user: User
) -> None:
    """Invoke a notifier method; a failure is logged and counted, never raised.

    The user has already been committed when this runs, so the operation
    result must not change whatever the notifier does.
    """
    try:
        send(user.id, user.name, user.email)
    except Exception as exc:
        increment_notification_failure(event_type.value)
        logger.warning(
            "Notification %s failed for user %s: %s", event_type.value, user.id, exc
        )
