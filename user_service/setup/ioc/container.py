"""
Dishka DI Container Setup.

- AppProvider registers the command/query handlers against the domain ports
- InfrastructureProvider (infrastructure_provider.py) binds the ports to
  Prisma and Redis
- Tests build the container with their own provider for the ports

Dishka concepts:
- Provider: Class that defines how to create dependencies
- @provide: Decorator to mark factory methods
- Scope: Lifecycle of dependency (APP = singleton, REQUEST = per-request)

Flow:
  Container → provides → PrismaUserRepository → to → CreateUserHandler
                                  ↓
                          uses UserRepository interface
"""

from dishka import AsyncContainer, Provider, Scope, make_async_container, provide

from user_service.application.commands.users import (
    CreateUserHandler,
    DeleteUserHandler,
    UpdateUserHandler,
)
from user_service.application.queries.users import (
    CountUsersHandler,
    GetUserHandler,
    ListUsersHandler,
    SearchUsersHandler,
)
from user_service.domain.ports.notifiers import UserEventNotifier
from user_service.domain.ports.repositories import UserRepository


class AppProvider(Provider):
    """
    Application dependency provider.

    Handlers only ask for the abstract ports; whichever provider is combined
    with this one decides the concrete implementations.
    """

    # ==================== COMMAND HANDLERS ====================

    @provide(scope=Scope.REQUEST)
    def get_create_user_handler(
        self, user_repository: UserRepository, notifier: UserEventNotifier
    ) -> CreateUserHandler:
        return CreateUserHandler(user_repository, notifier)

    @provide(scope=Scope.REQUEST)
    def get_update_user_handler(
        self, user_repository: UserRepository
    ) -> UpdateUserHandler:
        return UpdateUserHandler(user_repository)

    @provide(scope=Scope.REQUEST)
    def get_delete_user_handler(
        self, user_repository: UserRepository, notifier: UserEventNotifier
    ) -> DeleteUserHandler:
        return DeleteUserHandler(user_repository, notifier)

    # ==================== QUERY HANDLERS ====================

    @provide(scope=Scope.REQUEST)
    def get_get_user_handler(self, user_repository: UserRepository) -> GetUserHandler:
        return GetUserHandler(user_repository)

    @provide(scope=Scope.REQUEST)
    def get_list_users_handler(
        self, user_repository: UserRepository
    ) -> ListUsersHandler:
        return ListUsersHandler(user_repository)

    @provide(scope=Scope.REQUEST)
    def get_search_users_handler(
        self, user_repository: UserRepository
    ) -> SearchUsersHandler:
        return SearchUsersHandler(user_repository)

    @provide(scope=Scope.REQUEST)
    def get_count_users_handler(
        self, user_repository: UserRepository
    ) -> CountUsersHandler:
        return CountUsersHandler(user_repository)


def create_container(*providers: Provider) -> AsyncContainer:
    """
    Create and configure the DI container.

    Without arguments the ports are bound to Prisma and Redis. Call this ONCE
    at app startup.
    """
    if not providers:
        # Imported here: the generated Prisma client is only needed when the
        # real database is wired in
        from user_service.setup.ioc.infrastructure_provider import (
            InfrastructureProvider,
        )

        providers = (InfrastructureProvider(),)
    return make_async_container(AppProvider(), *providers)
