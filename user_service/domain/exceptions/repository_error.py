"""
RepositoryError - Raised when the backing store fails an operation.
DuplicateKeyError - Raised when a write violates a unique constraint.
"""


class RepositoryError(Exception):
    """Exception raised when the persistence store fails."""

    def __init__(self, message: str = "Repository operation failed"):
        super().__init__(message)
        self.message = message


class DuplicateKeyError(RepositoryError):
    """Exception raised when a write collides with a unique constraint."""

    def __init__(self, field: str, value: str):
        super().__init__(f"Duplicate value for unique field '{field}'")
        self.field = field
        self.value = value
