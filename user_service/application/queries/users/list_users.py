"""List Users Query."""

from dataclasses import dataclass
from user_service.application.common.interfaces import Query, QueryHandler
from user_service.application.common.result import Result, ok, persistence_failure
from user_service.domain.entities.user import User
from user_service.domain.ports.repositories import UserRepository

OPERATION = "list_users"


@dataclass(frozen=True)
class ListUsersQuery(Query[Result[list[User]]]):
    pass


class ListUsersHandler(QueryHandler[Result[list[User]]]):
    def __init__(self, user_repository: UserRepository):
        self._user_repository = user_repository

    async def execute(self, query: ListUsersQuery) -> Result[list[User]]:
        try:
            users = await self._user_repository.list_all()
        except Exception as exc:
            return persistence_failure(OPERATION, "all users", exc)
        return ok(OPERATION, users)
