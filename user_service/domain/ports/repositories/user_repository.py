"""
User Repository Port - Interface for user persistence.
Implementation: user_service/infrastructure/persistence/prisma_user_repository.py

Failures are reported as domain exceptions:
- DuplicateKeyError when a write violates the unique email constraint
- EntityNotFoundError when an update targets a user that no longer exists
- RepositoryError for any other store failure
"""

from abc import ABC, abstractmethod
from typing import Optional
from user_service.domain.entities.user import User


class UserRepository(ABC):
    @abstractmethod
    async def save(self, user: User) -> User:
        """Insert when ``user.id`` is None, otherwise update. Returns the stored user."""
        ...

    @abstractmethod
    async def get_by_id(self, user_id: int) -> Optional[User]: ...

    @abstractmethod
    async def get_by_email(self, email: str) -> Optional[User]: ...

    @abstractmethod
    async def list_all(self) -> list[User]: ...

    @abstractmethod
    async def search_by_name(self, fragment: str) -> list[User]:
        """Case-insensitive substring match on name."""
        ...

    @abstractmethod
    async def exists_by_email(self, email: str) -> bool: ...

    @abstractmethod
    async def delete(self, user_id: int) -> bool: ...

    @abstractmethod
    async def count(self) -> int: ...
