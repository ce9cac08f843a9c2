"""Search Users Query - case-insensitive substring match on name."""

from dataclasses import dataclass
from user_service.application.common.interfaces import Query, QueryHandler
from user_service.application.common.result import Result, ok, persistence_failure
from user_service.domain.entities.user import User
from user_service.domain.ports.repositories import UserRepository

OPERATION = "search_users"


@dataclass(frozen=True)
class SearchUsersQuery(Query[Result[list[User]]]):
    name: str


class SearchUsersHandler(QueryHandler[Result[list[User]]]):
    def __init__(self, user_repository: UserRepository):
        self._user_repository = user_repository

    async def execute(self, query: SearchUsersQuery) -> Result[list[User]]:
        try:
            users = await self._user_repository.search_by_name(query.name)
        except Exception as exc:
            return persistence_failure(OPERATION, f"name '{query.name}'", exc)
        return ok(OPERATION, users)
