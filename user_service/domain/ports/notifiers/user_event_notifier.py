"""
User Event Notifier Port - Fire-and-forget notifications about user lifecycle.
Implementations: user_service/infrastructure/events/

notify_* must return without waiting for delivery. Delivery failures are the
notifier's concern and never reach the caller's success path.
"""

from abc import ABC, abstractmethod
from enum import Enum


class UserEventType(str, Enum):
    CREATED = "USER_CREATED"
    DELETED = "USER_DELETED"


class UserEventNotifier(ABC):
    @abstractmethod
    def notify_created(self, user_id: int, name: str, email: str) -> None: ...

    @abstractmethod
    def notify_deleted(self, user_id: int, name: str, email: str) -> None: ...

    async def aclose(self) -> None:
        """Wait for in-flight deliveries. Called on shutdown."""
        return None
