"""
ENTITIES - Business objects with identity

Pure Python dataclasses (no ORM, no Pydantic).
"""

from user_service.domain.entities.user import User

__all__ = [
    "User",
]
