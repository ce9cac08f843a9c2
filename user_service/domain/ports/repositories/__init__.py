"""
REPOSITORY PORTS - Data persistence interfaces

Each repository port:
- Is an abstract base class (ABC)
- Defines methods the application layer needs
- Does NOT specify implementation (Prisma, in-memory, etc.)
"""

from user_service.domain.ports.repositories.user_repository import UserRepository

__all__ = [
    "UserRepository",
]
