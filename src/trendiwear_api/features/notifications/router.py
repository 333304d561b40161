from __future__ import annotations

from typing import Annotated
from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException, Path, Query, status

from trendiwear_api.api.deps import get_notifications_service
from trendiwear_api.common.pagination import PageParams, page_params
from trendiwear_api.common.schema import MessageOut
from trendiwear_api.core.http import AdminUser, CurrentUser

from .schemas import (
    NotificationCreate,
    NotificationOut,
    NotificationPage,
    NotificationsMarkRead,
    NotificationUpdate,
)
from .service import NotificationsService

router = APIRouter(prefix="/notifications", tags=["notifications"])

NotificationsServiceDep = Annotated[NotificationsService, Depends(get_notifications_service)]
NOTIFICATION_ID_PARAM = Annotated[UUID, Path(description="Notification identifier.")]


@router.get("", response_model=NotificationPage, summary="List the caller's notifications")
async def list_notifications(
    user: CurrentUser,
    service: NotificationsServiceDep,
    page: Annotated[PageParams, Depends(page_params(20))],
    unread_only: Annotated[bool, Query(alias="unreadOnly")] = False,
) -> NotificationPage:
    return await service.list_notifications(user=user, params=page, unread_only=unread_only)


@router.post(
    "",
    response_model=NotificationOut,
    status_code=status.HTTP_201_CREATED,
    summary="Send a notification to a user (administrator only)",
    responses={status.HTTP_404_NOT_FOUND: {"description": "User not found."}},
)
async def create_notification(
    _: AdminUser,
    payload: NotificationCreate,
    service: NotificationsServiceDep,
) -> NotificationOut:
    return await service.create_notification(payload=payload)


@router.put(
    "",
    response_model=MessageOut,
    summary="Mark every notification as read",
    responses={status.HTTP_400_BAD_REQUEST: {"description": "Nothing to do."}},
)
async def mark_all_read(
    user: CurrentUser,
    payload: NotificationsMarkRead,
    service: NotificationsServiceDep,
) -> MessageOut:
    if not payload.mark_all_as_read:
        raise HTTPException(status.HTTP_400_BAD_REQUEST, detail="Invalid request")
    await service.mark_all_read(user=user)
    return MessageOut(message="All notifications marked as read")


@router.put(
    "/{notification_id}",
    response_model=NotificationOut,
    summary="Mark one notification as read or unread",
    responses={status.HTTP_404_NOT_FOUND: {"description": "Notification not found."}},
)
async def update_notification(
    user: CurrentUser,
    notification_id: NOTIFICATION_ID_PARAM,
    payload: NotificationUpdate,
    service: NotificationsServiceDep,
) -> NotificationOut:
    return await service.set_read(
        user=user, notification_id=notification_id, is_read=payload.is_read
    )


__all__ = ["router"]
