"""
EntityNotFoundError - Raised when a write targets a record that no longer exists.
Maps to: ErrorKind.NOT_FOUND
"""

from user_service.domain.exceptions.repository_error import RepositoryError


class EntityNotFoundError(RepositoryError):
    """Exception raised when the record to write is missing from the store."""

    def __init__(self, entity: str, entity_id: int):
        super().__init__(f"{entity} {entity_id} not found")
        self.entity = entity
        self.entity_id = entity_id
