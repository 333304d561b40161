"""Routes for user accounts and the caller's own profile."""

from __future__ import annotations

from typing import Annotated
from uuid import UUID

from fastapi import APIRouter, Depends, Path, Query, status

from trendiwear_api.api.deps import get_users_service
from trendiwear_api.common.pagination import PageParams, page_params
from trendiwear_api.common.schema import MessageOut
from trendiwear_api.core.http import AdminUser, CurrentUser
from trendiwear_api.models import UserRole

from .schemas import UserCreate, UserOut, UserPage, UserUpdate
from .service import UsersService

router = APIRouter(tags=["users"])

UsersServiceDep = Annotated[UsersService, Depends(get_users_service)]
USER_ID_PARAM = Annotated[UUID, Path(description="User identifier.")]


@router.get(
    "/me",
    response_model=UserOut,
    status_code=status.HTTP_200_OK,
    summary="Return the authenticated user",
    responses={status.HTTP_401_UNAUTHORIZED: {"description": "Authentication required."}},
)
async def read_me(user: CurrentUser) -> UserOut:
    return UserOut.model_validate(user)


@router.get(
    "/users",
    response_model=UserPage,
    status_code=status.HTTP_200_OK,
    summary="List users (administrator only)",
    responses={
        status.HTTP_401_UNAUTHORIZED: {"description": "Authentication required."},
        status.HTTP_403_FORBIDDEN: {"description": "Administrator role required."},
    },
)
async def list_users(
    _: AdminUser,
    page: Annotated[PageParams, Depends(page_params(10))],
    service: UsersServiceDep,
    role: UserRole | None = None,
    search: Annotated[str | None, Query(max_length=128)] = None,
) -> UserPage:
    return await service.list_users(params=page, role=role, search=search)


@router.post(
    "/users",
    response_model=UserOut,
    status_code=status.HTTP_201_CREATED,
    summary="Create a user (administrator only)",
    responses={
        status.HTTP_403_FORBIDDEN: {"description": "Administrator role required."},
        status.HTTP_409_CONFLICT: {"description": "Email already registered."},
    },
)
async def create_user(
    actor: AdminUser,
    payload: UserCreate,
    service: UsersServiceDep,
) -> UserOut:
    return await service.create_user(payload=payload, actor=actor)


@router.get(
    "/users/{user_id}",
    response_model=UserOut,
    status_code=status.HTTP_200_OK,
    summary="Retrieve a user (self or administrator)",
    responses={
        status.HTTP_403_FORBIDDEN: {"description": "Only the user or an administrator."},
        status.HTTP_404_NOT_FOUND: {"description": "User not found."},
    },
)
async def get_user(
    actor: CurrentUser,
    user_id: USER_ID_PARAM,
    service: UsersServiceDep,
) -> UserOut:
    return await service.get_user(user_id=user_id, actor=actor)


@router.put(
    "/users/{user_id}",
    response_model=UserOut,
    status_code=status.HTTP_200_OK,
    summary="Update a user (self or administrator)",
    responses={
        status.HTTP_400_BAD_REQUEST: {"description": "No valid fields were provided."},
        status.HTTP_403_FORBIDDEN: {"description": "Role and activation are admin-only."},
        status.HTTP_404_NOT_FOUND: {"description": "User not found."},
    },
)
async def update_user(
    actor: CurrentUser,
    user_id: USER_ID_PARAM,
    payload: UserUpdate,
    service: UsersServiceDep,
) -> UserOut:
    return await service.update_user(user_id=user_id, payload=payload, actor=actor)


@router.delete(
    "/users/{user_id}",
    response_model=MessageOut,
    status_code=status.HTTP_200_OK,
    summary="Delete a user (administrator only)",
    responses={
        status.HTTP_400_BAD_REQUEST: {"description": "User still has orders."},
        status.HTTP_403_FORBIDDEN: {"description": "Administrator role required."},
        status.HTTP_404_NOT_FOUND: {"description": "User not found."},
    },
)
async def delete_user(
    actor: AdminUser,
    user_id: USER_ID_PARAM,
    service: UsersServiceDep,
) -> MessageOut:
    await service.delete_user(user_id=user_id, actor=actor)
    return MessageOut(message="User deleted successfully")


__all__ = ["router"]
