"""
Infrastructure provider: binds the domain ports to Prisma and Redis.

- Prisma client: Scope.APP, connected at first use, disconnected on close
- Event notifier: Scope.APP, Redis-backed unless USER_EVENTS_ENABLED is off
- UserRepository: Scope.REQUEST, new repository per request over the shared client
"""

import logging
from typing import AsyncIterable, Optional

from dishka import Provider, Scope, provide
from prisma import Prisma

from user_service.config.settings import Config, get_config
from user_service.domain.ports.notifiers import UserEventNotifier
from user_service.domain.ports.repositories import UserRepository
from user_service.infrastructure.events import open_user_event_notifier
from user_service.infrastructure.persistence import PrismaUserRepository

logger = logging.getLogger(__name__)


class InfrastructureProvider(Provider):
    def __init__(self, settings: Optional[type[Config]] = None):
        super().__init__()
        # APP_ENV picks the settings class unless one is passed in
        self._settings = settings or get_config()

    # ==================== DATABASE ====================

    @provide(scope=Scope.APP)
    async def get_prisma(self) -> AsyncIterable[Prisma]:
        """Provide Prisma client (singleton, app-scoped)."""
        prisma = Prisma()
        await prisma.connect()
        logger.info("[Prisma] Connected")
        yield prisma
        await prisma.disconnect()
        logger.info("[Prisma] Disconnected")

    # ==================== EVENTS ====================

    @provide(scope=Scope.APP)
    async def get_user_event_notifier(self) -> AsyncIterable[UserEventNotifier]:
        async with open_user_event_notifier(self._settings) as notifier:
            yield notifier

    # ==================== REPOSITORIES ====================

    @provide(scope=Scope.REQUEST)
    def get_user_repository(self, prisma: Prisma) -> UserRepository:
        """
        - Return type is ABSTRACT (UserRepository)
        - Implementation is CONCRETE (PrismaUserRepository)
        """
        return PrismaUserRepository(prisma)
