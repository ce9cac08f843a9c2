"""Notifier used when event publishing is disabled: events only reach the log."""

import logging

from user_service.domain.ports.notifiers import UserEventNotifier, UserEventType

logger = logging.getLogger(__name__)


class LoggingUserEventNotifier(UserEventNotifier):
    def notify_created(self, user_id: int, name: str, email: str) -> None:
        logger.info("%s user_id=%s (publishing disabled)", UserEventType.CREATED.value, user_id)

    def notify_deleted(self, user_id: int, name: str, email: str) -> None:
        logger.info("%s user_id=%s (publishing disabled)", UserEventType.DELETED.value, user_id)
