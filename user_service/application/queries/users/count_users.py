"""Count Users Query."""

from dataclasses import dataclass
from user_service.application.common.interfaces import Query, QueryHandler
from user_service.application.common.result import Result, ok, persistence_failure
from user_service.domain.ports.repositories import UserRepository

OPERATION = "count_users"


@dataclass(frozen=True)
class CountUsersQuery(Query[Result[int]]):
    pass


class CountUsersHandler(QueryHandler[Result[int]]):
    def __init__(self, user_repository: UserRepository):
        self._user_repository = user_repository

    async def execute(self, query: CountUsersQuery) -> Result[int]:
        try:
            total = await self._user_repository.count()
        except Exception as exc:
            return persistence_failure(OPERATION, "all users", exc)
        return ok(OPERATION, total)
