"""User-related queries."""

from user_service.application.queries.users.count_users import (
    CountUsersQuery,
    CountUsersHandler,
)
from user_service.application.queries.users.get_user import (
    GetUserQuery,
    GetUserHandler,
)
from user_service.application.queries.users.list_users import (
    ListUsersQuery,
    ListUsersHandler,
)
from user_service.application.queries.users.search_users import (
    SearchUsersQuery,
    SearchUsersHandler,
)

__all__ = [
    "CountUsersQuery",
    "CountUsersHandler",
    "GetUserQuery",
    "GetUserHandler",
    "ListUsersQuery",
    "ListUsersHandler",
    "SearchUsersQuery",
    "SearchUsersHandler",
]
