"""
Prisma User Repository Implementation.

- Implements UserRepository port from domain layer
- Uses Prisma client for database operations (model ``User`` in schema.prisma)
- Maps between Prisma records and domain entities
- Translates Prisma errors into domain exceptions:
    UniqueViolationError -> DuplicateKeyError
    RecordNotFoundError  -> EntityNotFoundError (update), False (delete)
    PrismaError          -> RepositoryError
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Optional

from prisma.errors import PrismaError, RecordNotFoundError, UniqueViolationError

from user_service.domain.entities.user import User
from user_service.domain.exceptions import (
    DuplicateKeyError,
    EntityNotFoundError,
    RepositoryError,
)
from user_service.domain.ports.repositories import UserRepository

if TYPE_CHECKING:
    from prisma import Prisma

logger = logging.getLogger(__name__)


class PrismaUserRepository(UserRepository):
    _prisma: "Prisma"

    def __init__(self, prisma: "Prisma"):
        self._prisma = prisma

    def _to_entity(self, record: Any) -> User:
        """Map Prisma record to domain entity."""
        return User(
            id=record.id,
            name=record.name,
            email=record.email,
            age=record.age,
            created_at=record.created_at,
        )

    async def save(self, user: User) -> User:
        """Insert a new user or update an existing one."""
        try:
            if user.id is None:
                record = await self._prisma.user.create(
                    data={
                        "name": user.name,
                        "email": user.email,
                        "age": user.age,
                        "created_at": user.created_at,
                    }
                )
            else:
                # created_at is never part of an update
                record = await self._prisma.user.update(
                    where={"id": user.id},
                    data={"name": user.name, "email": user.email, "age": user.age},
                )
                if record is None:
                    raise EntityNotFoundError("User", user.id)
        except UniqueViolationError as exc:
            raise DuplicateKeyError("email", user.email) from exc
        except RecordNotFoundError as exc:
            raise EntityNotFoundError("User", user.id) from exc
        except PrismaError as exc:
            raise RepositoryError(f"Saving user failed: {exc}") from exc
        return self._to_entity(record)

    async def get_by_id(self, user_id: int) -> Optional[User]:
        try:
            record = await self._prisma.user.find_unique(where={"id": user_id})
        except PrismaError as exc:
            raise RepositoryError(f"Loading user {user_id} failed: {exc}") from exc
        return self._to_entity(record) if record else None

    async def get_by_email(self, email: str) -> Optional[User]:
        try:
            record = await self._prisma.user.find_unique(where={"email": email})
        except PrismaError as exc:
            raise RepositoryError(f"Loading user by email failed: {exc}") from exc
        return self._to_entity(record) if record else None

    async def list_all(self) -> list[User]:
        try:
            records = await self._prisma.user.find_many(order={"id": "asc"})
        except PrismaError as exc:
            raise RepositoryError(f"Listing users failed: {exc}") from exc
        return [self._to_entity(record) for record in records]

    async def search_by_name(self, fragment: str) -> list[User]:
        try:
            records = await self._prisma.user.find_many(
                where={"name": {"contains": fragment, "mode": "insensitive"}},
                order={"id": "asc"},
            )
        except PrismaError as exc:
            raise RepositoryError(f"Searching users failed: {exc}") from exc
        return [self._to_entity(record) for record in records]

    async def exists_by_email(self, email: str) -> bool:
        try:
            total = await self._prisma.user.count(where={"email": email})
        except PrismaError as exc:
            raise RepositoryError(f"Checking email failed: {exc}") from exc
        return total > 0

    async def delete(self, user_id: int) -> bool:
        """Delete user by ID. Returns True if deleted."""
        try:
            record = await self._prisma.user.delete(where={"id": user_id})
        except RecordNotFoundError:
            return False
        except PrismaError as exc:
            raise RepositoryError(f"Deleting user {user_id} failed: {exc}") from exc
        return record is not None

    async def count(self) -> int:
        try:
            return await self._prisma.user.count()
        except PrismaError as exc:
            raise RepositoryError(f"Counting users failed: {exc}") from exc
