"""
PORTS - Interfaces the domain needs, implemented by infrastructure.
"""

from user_service.domain.ports.notifiers import UserEventNotifier
from user_service.domain.ports.repositories import UserRepository

__all__ = [
    "UserEventNotifier",
    "UserRepository",
]
