"""
DOMAIN EXCEPTIONS - Failures reported across the repository port

Repositories raise these instead of driver-specific errors so the application
layer can classify a failure without inspecting message text.
"""

from user_service.domain.exceptions.entity_not_found import EntityNotFoundError
from user_service.domain.exceptions.repository_error import (
    DuplicateKeyError,
    RepositoryError,
)

__all__ = [
    "DuplicateKeyError",
    "EntityNotFoundError",
    "RepositoryError",
]
