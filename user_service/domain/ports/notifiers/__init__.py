"""
NOTIFIER PORTS - Outbound event interfaces
"""

from user_service.domain.ports.notifiers.user_event_notifier import (
    UserEventNotifier,
    UserEventType,
)

__all__ = [
    "UserEventNotifier",
    "UserEventType",
]
