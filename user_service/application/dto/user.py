"""User DTOs for API responses."""

from pydantic import BaseModel
from datetime import datetime
from typing import Optional

from user_service.domain.entities.user import User


class UserDTO(BaseModel):
    id: int
    name: str
    email: str
    age: Optional[int] = None
    created_at: datetime
    links: dict[str, str] = {}

    @classmethod
    def from_entity(cls, user: User, links: Optional[dict[str, str]] = None) -> "UserDTO":
        return cls(
            id=user.id,
            name=user.name,
            email=user.email,
            age=user.age,
            created_at=user.created_at,
            links=links or {},
        )


class UserListDTO(BaseModel):
    users: list[UserDTO]
    total: int
    links: dict[str, str] = {}
