"""User commands."""

from .create_user import CreateUserCommand, CreateUserHandler
from .delete_user import DeleteUserCommand, DeleteUserHandler
from .update_user import UpdateUserCommand, UpdateUserHandler

__all__ = [
    "CreateUserCommand",
    "CreateUserHandler",
    "DeleteUserCommand",
    "DeleteUserHandler",
    "UpdateUserCommand",
    "UpdateUserHandler",
]
