"""
DTOs - Data Transfer Objects

- user.py → UserDTO, UserListDTO

Note: These are different from domain entities.
DTOs are for API input/output, entities are for business logic.
"""

from user_service.application.dto.user import UserDTO, UserListDTO

__all__ = [
    "UserDTO",
    "UserListDTO",
]
