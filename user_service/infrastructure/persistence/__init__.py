"""
Persistence Layer - Database implementations.

Contains Prisma repository implementations for domain ports.
"""

from user_service.infrastructure.persistence.prisma_user_repository import (
    PrismaUserRepository,
)

__all__ = [
    "PrismaUserRepository",
]
