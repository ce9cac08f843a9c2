"""Delete User Command."""

from dataclasses import dataclass

from user_service.application.common.interfaces import Command, CommandHandler
from user_service.application.common.notifications import notify_safely
from user_service.application.common.result import (
    ErrorKind,
    Result,
    err,
    ok,
    persistence_failure,
)
from user_service.domain.ports.notifiers import UserEventNotifier, UserEventType
from user_service.domain.ports.repositories import UserRepository

OPERATION = "delete_user"


@dataclass(frozen=True)
class DeleteUserCommand(Command[Result[None]]):
    user_id: int


class DeleteUserHandler(CommandHandler[Result[None]]):
    def __init__(self, user_repository: UserRepository, notifier: UserEventNotifier):
        self._user_repository = user_repository
        self._notifier = notifier

    async def execute(self, command: DeleteUserCommand) -> Result[None]:
        user_id = command.user_id
        if user_id is None or user_id <= 0:
            return err(OPERATION, ErrorKind.INVALID_ARGUMENT, f"Invalid user id: {user_id}")

        try:
            # Captured before deletion: the notification needs name and email
            user = await self._user_repository.get_by_id(user_id)
            if user is None:
                return err(OPERATION, ErrorKind.NOT_FOUND, f"User {user_id} not found")
            deleted = await self._user_repository.delete(user_id)
        except Exception as exc:
            return persistence_failure(OPERATION, f"user {user_id}", exc)

        if not deleted:
            # Removed by someone else between the lookup and the delete
            return err(OPERATION, ErrorKind.NOT_FOUND, f"User {user_id} not found")

        notify_safely(UserEventType.DELETED, self._notifier.notify_deleted, user)
        return ok(OPERATION, None)
