"""
Interactive console for the user service.

Usage:
    python -m user_service.cli

Runs the same command/query handlers as the HTTP API, resolved from the
Dishka container, behind a numbered menu.
"""

import asyncio
import logging
from typing import Callable, Optional, Type, TypeVar

from dishka import AsyncContainer

from user_service.application.commands.users import (
    CreateUserCommand,
    CreateUserHandler,
    DeleteUserCommand,
    DeleteUserHandler,
    UpdateUserCommand,
    UpdateUserHandler,
)
from user_service.application.common.result import Err, Result
from user_service.application.queries.users import (
    CountUsersHandler,
    CountUsersQuery,
    GetUserHandler,
    GetUserQuery,
    ListUsersHandler,
    ListUsersQuery,
    SearchUsersHandler,
    SearchUsersQuery,
)
from user_service.config.logging_config import setup_logging
from user_service.config.settings import Config
from user_service.setup.ioc import create_container

logger = logging.getLogger(__name__)

H = TypeVar("H")

MENU = """
=== User Service ===
1. Create user
2. Show all users
3. Find user by ID
4. Search users by name
5. Update user
6. Delete user
7. Statistics
0. Exit"""

RECENT_USERS_SHOWN = 5


class UserConsole:
    def __init__(
        self,
        container: AsyncContainer,
        input_func: Callable[[str], str] = input,
        output: Callable[[str], None] = print,
    ):
        self._container = container
        self._input = input_func
        self._output = output
        self._actions = {
            "1": self.create_user,
            "2": self.show_all_users,
            "3": self.find_user_by_id,
            "4": self.search_users,
            "5": self.update_user,
            "6": self.delete_user,
            "7": self.show_statistics,
        }

    async def run(self) -> None:
        while True:
            self._output(MENU)
            choice = (await self._ask("Choose an action: ")).strip()
            if choice == "0":
                self._output("Exiting...")
                return
            action = self._actions.get(choice)
            if action is None:
                self._output("Invalid choice. Try again.")
                continue
            try:
                await action()
            except ValueError as exc:
                self._output(f"Error: {exc}")
                logger.warning("Console action %s failed: %s", choice, exc)

    async def _execute(self, handler_type: Type[H], request) -> Result:
        async with self._container() as request_container:
            handler = await request_container.get(handler_type)
            return await handler.execute(request)

    def _report(self, result: Result) -> bool:
        if isinstance(result, Err):
            self._output(f"Error: {result.message}")
            return False
        return True

    async def _ask(self, prompt: str) -> str:
        # Blocking reads run off the loop so background publishes keep flowing
        return await asyncio.to_thread(self._input, prompt)

    async def _read_id(self, prompt: str) -> Optional[int]:
        raw = (await self._ask(prompt)).strip()
        try:
            return int(raw)
        except ValueError:
            self._output("Invalid ID format")
            return None

    async def _read_optional(self, prompt: str) -> Optional[str]:
        value = (await self._ask(prompt)).strip()
        return value or None

    async def _read_age(self, prompt: str) -> Optional[int]:
        raw = (await self._ask(prompt)).strip()
        if not raw:
            return None
        try:
            return int(raw)
        except ValueError:
            raise ValueError(f"Invalid age: {raw}") from None

    # ==================== ACTIONS ====================

    async def create_user(self) -> None:
        self._output("\n--- Create user ---")
        name = (await self._ask("Name: ")).strip()
        email = (await self._ask("Email: ")).strip()
        age = await self._read_age("Age: ")

        result = await self._execute(
            CreateUserHandler, CreateUserCommand(name=name, email=email, age=age)
        )
        if self._report(result):
            self._output(f"User created. ID: {result.value.id}")

    async def show_all_users(self) -> None:
        self._output("\n--- All users ---")
        result = await self._execute(ListUsersHandler, ListUsersQuery())
        if not self._report(result):
            return
        users = result.value
        if not users:
            self._output("No users")
            return

        self._output(f"{'ID':<5} {'Name':<20} {'Email':<30} {'Age':<5} {'Created':<25}")
        self._output("-" * 85)
        for user in users:
            age = "" if user.age is None else str(user.age)
            self._output(
                f"{user.id:<5} {user.name:<20} {user.email:<30} {age:<5} "
                f"{user.created_at.isoformat(timespec='seconds'):<25}"
            )
        self._output(f"Total: {len(users)} users")

    async def find_user_by_id(self) -> None:
        user_id = await self._read_id("\nUser ID: ")
        if user_id is None:
            return
        result = await self._execute(GetUserHandler, GetUserQuery(user_id=user_id))
        if not self._report(result):
            return
        user = result.value
        self._output("\nUser found:")
        self._output(f"ID: {user.id}")
        self._output(f"Name: {user.name}")
        self._output(f"Email: {user.email}")
        self._output(f"Age: {'' if user.age is None else user.age}")
        self._output(f"Created: {user.created_at.isoformat(timespec='seconds')}")

    async def search_users(self) -> None:
        name = (await self._ask("\nName to search: ")).strip()
        result = await self._execute(SearchUsersHandler, SearchUsersQuery(name=name))
        if not self._report(result):
            return
        users = result.value
        if not users:
            self._output("No users found")
            return
        self._output(f"\nFound {len(users)} users:")
        for user in users:
            age = "age unknown" if user.age is None else f"{user.age} years"
            self._output(f"- {user.name} ({user.email}, {age})")

    async def update_user(self) -> None:
        user_id = await self._read_id("\nUser ID to update: ")
        if user_id is None:
            return
        name = await self._read_optional("New name (leave empty to keep): ")
        email = await self._read_optional("New email (leave empty to keep): ")
        age = await self._read_age("New age (leave empty to keep): ")

        result = await self._execute(
            UpdateUserHandler,
            UpdateUserCommand(user_id=user_id, name=name, email=email, age=age),
        )
        if self._report(result):
            self._output(f"User updated: {result.value.name}, {result.value.email}")

    async def delete_user(self) -> None:
        user_id = await self._read_id("\nUser ID to delete: ")
        if user_id is None:
            return
        confirmation = (await self._ask("Are you sure? (y/N): ")).strip()
        if confirmation.lower() != "y":
            self._output("Deletion cancelled")
            return
        result = await self._execute(DeleteUserHandler, DeleteUserCommand(user_id=user_id))
        if self._report(result):
            self._output("User deleted")

    async def show_statistics(self) -> None:
        result = await self._execute(CountUsersHandler, CountUsersQuery())
        if not self._report(result):
            return
        total = result.value
        self._output("\n--- Statistics ---")
        self._output(f"Total users: {total}")
        if total == 0:
            return

        listed = await self._execute(ListUsersHandler, ListUsersQuery())
        if not self._report(listed):
            return
        self._output(f"\nLast {RECENT_USERS_SHOWN} users:")
        for user in listed.value[-RECENT_USERS_SHOWN:]:
            self._output(f"- {user.name} ({user.created_at.isoformat(timespec='seconds')})")


async def run_console(container: Optional[AsyncContainer] = None) -> None:
    container = container or create_container()
    try:
        await UserConsole(container).run()
    finally:
        await container.close()


def main() -> None:
    setup_logging(Config.LOG_LEVEL, Config.LOG_PATH)
    logger.info("Starting user service console")
    try:
        asyncio.run(run_console())
    except (KeyboardInterrupt, EOFError):
        pass
    finally:
        logger.info("User service console stopped")


if __name__ == "__main__":
    main()
