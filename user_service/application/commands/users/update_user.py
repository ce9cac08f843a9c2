"""
Update User Command.

Partial update: every field of the command is optional and only the supplied
ones overwrite the stored record. Changing the email to a different value
re-checks uniqueness; resubmitting the current email skips the check.
"""

from dataclasses import dataclass
from typing import Optional

from user_service.application.common.interfaces import Command, CommandHandler
from user_service.application.common.result import (
    ErrorKind,
    Result,
    err,
    ok,
    persistence_failure,
)
from user_service.domain.entities.user import User
from user_service.domain.exceptions import DuplicateKeyError, EntityNotFoundError
from user_service.domain.ports.repositories import UserRepository

OPERATION = "update_user"


@dataclass(frozen=True)
class UpdateUserCommand(Command[Result[User]]):
    user_id: int
    name: Optional[str] = None
    email: Optional[str] = None
    age: Optional[int] = None


class UpdateUserHandler(CommandHandler[Result[User]]):
    def __init__(self, user_repository: UserRepository):
        self._user_repository = user_repository

    async def execute(self, command: UpdateUserCommand) -> Result[User]:
        user_id = command.user_id
        if user_id is None or user_id <= 0:
            return err(OPERATION, ErrorKind.INVALID_ARGUMENT, f"Invalid user id: {user_id}")
        if command.name is not None and not command.name.strip():
            return err(OPERATION, ErrorKind.INVALID_ARGUMENT, "Name must not be blank")
        if command.email is not None and "@" not in command.email:
            return err(OPERATION, ErrorKind.INVALID_ARGUMENT, "Email is not valid")

        try:
            user = await self._user_repository.get_by_id(user_id)
        except Exception as exc:
            return persistence_failure(OPERATION, f"user {user_id}", exc)
        if user is None:
            return err(OPERATION, ErrorKind.NOT_FOUND, f"User {user_id} not found")

        if command.name is not None:
            user.name = command.name

        if command.email is not None and command.email != user.email:
            try:
                taken = await self._user_repository.exists_by_email(command.email)
            except Exception as exc:
                return persistence_failure(OPERATION, f"user {user_id}", exc)
            if taken:
                return err(
                    OPERATION,
                    ErrorKind.EMAIL_TAKEN,
                    f"Email {command.email} is already taken",
                )
            user.email = command.email

        if command.age is not None:
            user.age = command.age

        try:
            saved = await self._user_repository.save(user)
        except DuplicateKeyError:
            return err(
                OPERATION,
                ErrorKind.EMAIL_TAKEN,
                f"Email {user.email} is already taken",
            )
        except EntityNotFoundError:
            # Deleted between the lookup and the write
            return err(OPERATION, ErrorKind.NOT_FOUND, f"User {user_id} not found")
        except Exception as exc:
            return persistence_failure(OPERATION, f"user {user_id}", exc)

        return ok(OPERATION, saved)
