"""
Users API Router - FastAPI endpoints for user management.

- Receives handlers via Dependency Injection (Dishka)
- Thin layer: only handles HTTP concerns (request/response)
- Maps Err results to HTTP status codes

Flow:
  HTTP Request → Router → Command/Query → Handler → Repository → Database
                                               ↓
  HTTP Response ← Router ← Result ←
"""

from logging import getLogger
from typing import Optional

from dishka.integrations.fastapi import FromDishka, inject
from fastapi import APIRouter, HTTPException, Request, Response, status
from pydantic import BaseModel, EmailStr, Field

from user_service.application.commands.users import (
    CreateUserCommand,
    CreateUserHandler,
    DeleteUserCommand,
    DeleteUserHandler,
    UpdateUserCommand,
    UpdateUserHandler,
)
from user_service.application.common.result import Err, ErrorKind, Result
from user_service.application.dto.user import UserDTO, UserListDTO
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
from user_service.domain.entities.user import User

logger = getLogger(__name__)


# ==================== REQUEST/RESPONSE MODELS ====================


class CreateUserRequest(BaseModel):
    """Request body for creating a user."""

    name: str = Field(min_length=2, max_length=100)
    email: EmailStr
    age: Optional[int] = Field(default=None, ge=0, le=150)


class UpdateUserRequest(BaseModel):
    """Request body for a partial update. Omitted fields keep their value."""

    name: Optional[str] = Field(default=None, min_length=2, max_length=100)
    email: Optional[EmailStr] = None
    age: Optional[int] = Field(default=None, ge=0, le=150)


class UserCountResponse(BaseModel):
    count: int


ERROR_STATUS = {
    ErrorKind.INVALID_ARGUMENT: status.HTTP_400_BAD_REQUEST,
    ErrorKind.NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorKind.DUPLICATE_EMAIL: status.HTTP_409_CONFLICT,
    ErrorKind.EMAIL_TAKEN: status.HTTP_409_CONFLICT,
    ErrorKind.PERSISTENCE_FAILURE: status.HTTP_500_INTERNAL_SERVER_ERROR,
}


def _unwrap(result: Result):
    """Return the Ok value or raise the HTTPException matching the error kind."""
    if isinstance(result, Err):
        raise HTTPException(status_code=ERROR_STATUS[result.kind], detail=result.message)
    return result.value


def _user_links(request: Request, user_id: int) -> dict[str, str]:
    return {
        "self": str(request.url_for("get_user", user_id=user_id)),
        "update": str(request.url_for("update_user", user_id=user_id)),
        "delete": str(request.url_for("delete_user", user_id=user_id)),
        "all-users": str(request.url_for("list_users")),
    }


def _to_dto(request: Request, user: User) -> UserDTO:
    return UserDTO.from_entity(user, links=_user_links(request, user.id))


# ==================== ROUTER ====================

router = APIRouter(prefix="/api/users", tags=["users"])


# ==================== ENDPOINTS ====================


@router.post(
    "",
    response_model=UserDTO,
    status_code=status.HTTP_201_CREATED,
    name="create_user",
)
@inject
async def create_user(
    request: Request,
    body: CreateUserRequest,
    handler: FromDishka[CreateUserHandler],
):
    """Create a new user. The email must not belong to another user."""
    command = CreateUserCommand(name=body.name, email=body.email, age=body.age)
    user = _unwrap(await handler.execute(command))
    logger.info("Created user %s", user.id)
    return _to_dto(request, user)


@router.get(
    "",
    response_model=UserListDTO,
    status_code=status.HTTP_200_OK,
    name="list_users",
)
@inject
async def list_users(
    request: Request,
    handler: FromDishka[ListUsersHandler],
):
    """List all users."""
    users = _unwrap(await handler.execute(ListUsersQuery()))
    return UserListDTO(
        users=[_to_dto(request, user) for user in users],
        total=len(users),
        links={
            "self": str(request.url_for("list_users")),
            "create": str(request.url_for("create_user")),
            "search": str(request.url_for("search_users")),
        },
    )


@router.get(
    "/search",
    response_model=UserListDTO,
    status_code=status.HTTP_200_OK,
    name="search_users",
)
@inject
async def search_users(
    request: Request,
    name: str,
    handler: FromDishka[SearchUsersHandler],
):
    """Search users by case-insensitive partial match on name."""
    users = _unwrap(await handler.execute(SearchUsersQuery(name=name)))
    return UserListDTO(
        users=[_to_dto(request, user) for user in users],
        total=len(users),
        links={
            "self": str(request.url_for("search_users").include_query_params(name=name)),
            "all-users": str(request.url_for("list_users")),
        },
    )


@router.get(
    "/count",
    response_model=UserCountResponse,
    status_code=status.HTTP_200_OK,
    name="count_users",
)
@inject
async def count_users(handler: FromDishka[CountUsersHandler]):
    """Return the total number of users."""
    total = _unwrap(await handler.execute(CountUsersQuery()))
    return UserCountResponse(count=total)


@router.get(
    "/{user_id}",
    response_model=UserDTO,
    status_code=status.HTTP_200_OK,
    name="get_user",
)
@inject
async def get_user(
    request: Request,
    user_id: int,
    handler: FromDishka[GetUserHandler],
):
    """Get user by ID."""
    user = _unwrap(await handler.execute(GetUserQuery(user_id=user_id)))
    return _to_dto(request, user)


@router.put(
    "/update/{user_id}",
    response_model=UserDTO,
    status_code=status.HTTP_200_OK,
    name="update_user",
)
@inject
async def update_user(
    request: Request,
    user_id: int,
    body: UpdateUserRequest,
    handler: FromDishka[UpdateUserHandler],
):
    """
    Update a user. Only the fields present in the body change.

    Request: {"email": "new@mail.com"}
    Response: the full updated user
    """
    command = UpdateUserCommand(
        user_id=user_id,
        name=body.name,
        email=body.email,
        age=body.age,
    )
    user = _unwrap(await handler.execute(command))
    return _to_dto(request, user)


@router.delete(
    "/delete/{user_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    name="delete_user",
)
@inject
async def delete_user(
    user_id: int,
    handler: FromDishka[DeleteUserHandler],
):
    """Delete user by ID. The operation cannot be undone."""
    _unwrap(await handler.execute(DeleteUserCommand(user_id=user_id)))
    logger.info("Deleted user %s", user_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
