"""Get User Query."""

from dataclasses import dataclass
from user_service.application.common.interfaces import Query, QueryHandler
from user_service.application.common.result import (
    ErrorKind,
    Result,
    err,
    ok,
    persistence_failure,
)
from user_service.domain.entities.user import User
from user_service.domain.ports.repositories import UserRepository

OPERATION = "get_user"


@dataclass(frozen=True)
class GetUserQuery(Query[Result[User]]):
    user_id: int


class GetUserHandler(QueryHandler[Result[User]]):
    def __init__(self, user_repository: UserRepository):
        self._user_repository = user_repository

    async def execute(self, query: GetUserQuery) -> Result[User]:
        user_id = query.user_id
        if user_id is None or user_id <= 0:
            return err(OPERATION, ErrorKind.INVALID_ARGUMENT, f"Invalid user id: {user_id}")

        try:
            user = await self._user_repository.get_by_id(user_id)
        except Exception as exc:
            return persistence_failure(OPERATION, f"user {user_id}", exc)

        if user is None:
            return err(OPERATION, ErrorKind.NOT_FOUND, f"User {user_id} not found")
        return ok(OPERATION, user)
