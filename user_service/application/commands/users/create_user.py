"""
Create User Command.

Steps:
1. Reject a blank name or an email without '@' (INVALID_ARGUMENT)
2. Reject an email that already exists (DUPLICATE_EMAIL)
3. Build the User entity and save it; a unique violation reported by the
   store at write time is also DUPLICATE_EMAIL
4. Notify USER_CREATED without letting the notifier affect the result
"""

from dataclasses import dataclass
from typing import Optional

from user_service.application.common.interfaces import Command, CommandHandler
from user_service.application.common.notifications import notify_safely
from user_service.application.common.result import (
    ErrorKind,
    Result,
    err,
    ok,
    persistence_failure,
)
from user_service.domain.entities.user import User
from user_service.domain.exceptions import DuplicateKeyError
from user_service.domain.ports.notifiers import UserEventNotifier, UserEventType
from user_service.domain.ports.repositories import UserRepository

OPERATION = "create_user"


@dataclass(frozen=True)
class CreateUserCommand(Command[Result[User]]):
    name: str
    email: str
    age: Optional[int] = None


class CreateUserHandler(CommandHandler[Result[User]]):
    _user_repository: UserRepository
    _notifier: UserEventNotifier

    def __init__(self, user_repository: UserRepository, notifier: UserEventNotifier):
        self._user_repository = user_repository
        self._notifier = notifier

    async def execute(self, command: CreateUserCommand) -> Result[User]:
        if not command.name or not command.name.strip():
            return err(OPERATION, ErrorKind.INVALID_ARGUMENT, "Name must not be blank")
        if not command.email or "@" not in command.email:
            return err(OPERATION, ErrorKind.INVALID_ARGUMENT, "Email is not valid")

        try:
            exists = await self._user_repository.exists_by_email(command.email)
        except Exception as exc:
            return persistence_failure(OPERATION, f"email {command.email}", exc)
        if exists:
            return err(
                OPERATION,
                ErrorKind.DUPLICATE_EMAIL,
                f"User with email {command.email} already exists",
            )

        user = User.create(name=command.name, email=command.email, age=command.age)
        try:
            saved = await self._user_repository.save(user)
        except DuplicateKeyError:
            return err(
                OPERATION,
                ErrorKind.DUPLICATE_EMAIL,
                f"User with email {command.email} already exists",
            )
        except Exception as exc:
            return persistence_failure(OPERATION, f"email {command.email}", exc)

        notify_safely(UserEventType.CREATED, self._notifier.notify_created, saved)
        return ok(OPERATION, saved)
