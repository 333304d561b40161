"""In-app notifications: delivery from other features and the user's inbox."""

from __future__ import annotations

import logging
from typing import Any
from uuid import UUID

from fastapi import HTTPException, status
from sqlalchemy import func, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from trendiwear_api.common.logging import log_context
from trendiwear_api.common.pagination import PageParams, paginate_query
from trendiwear_api.models import Notification, NotificationType, User

from .schemas import NotificationCreate, NotificationOut, NotificationPage

logger = logging.getLogger(__name__)


class NotificationsService:
    def __init__(self, *, session: AsyncSession) -> None:
        self._session = session

    async def notify(
        self,
        *,
        user_id: UUID,
        type: NotificationType,
        title: str,
        message: str,
        data: dict[str, Any] | None = None,
    ) -> Notification:
        """Queue a notification for ``user_id`` in the current transaction."""

        notification = Notification(
            user_id=user_id,
            type=NotificationType(type),
            title=title,
            message=message,
            data=data,
        )
        self._session.add(notification)
        await self._session.flush()
        logger.debug(
            "notifications.notify",
            extra=log_context(
                user_id=str(user_id),
                notification_id=str(notification.id),
                type=NotificationType(type).value,
            ),
        )
        return notification

    async def list_notifications(
        self, *, user: User, params: PageParams, unread_only: bool = False
    ) -> NotificationPage:
        stmt = select(Notification).where(Notification.user_id == user.id)
        if unread_only:
            stmt = stmt.where(Notification.is_read.is_(False))

        result = await paginate_query(
            self._session,
            stmt,
            params=params,
            order_by=[Notification.created_at.desc(), Notification.id],
        )
        unread = (
            await self._session.execute(
                select(func.count())
                .select_from(Notification)
                .where(Notification.user_id == user.id, Notification.is_read.is_(False))
            )
        ).scalar_one()

        logger.info(
            "notifications.list.success",
            extra=log_context(
                user_id=str(user.id), count=len(result.rows), unread=unread
            ),
        )
        return NotificationPage(
            items=[NotificationOut.model_validate(row) for row in result.rows],
            pagination=result.pagination,
            unread_count=unread,
        )

    async def create_notification(self, *, payload: NotificationCreate) -> NotificationOut:
        if await self._session.get(User, payload.user_id) is None:
            raise HTTPException(status.HTTP_404_NOT_FOUND, detail="User not found")
        notification = await self.notify(
            user_id=payload.user_id,
            type=payload.type,
            title=payload.title,
            message=payload.message,
            data=payload.data,
        )
        return NotificationOut.model_validate(notification)

    async def mark_all_read(self, *, user: User) -> int:
        result = await self._session.execute(
            update(Notification)
            .where(Notification.user_id == user.id, Notification.is_read.is_(False))
            .values(is_read=True)
            .execution_options(synchronize_session=False)
        )
        marked = result.rowcount or 0
        logger.info(
            "notifications.read_all.success",
            extra=log_context(user_id=str(user.id), marked=marked),
        )
        return marked

    async def set_read(
        self, *, user: User, notification_id: UUID, is_read: bool
    ) -> NotificationOut:
        stmt = select(Notification).where(
            Notification.id == notification_id, Notification.user_id == user.id
        )
        notification = (await self._session.execute(stmt)).scalar_one_or_none()
        if notification is None:
            raise HTTPException(status.HTTP_404_NOT_FOUND, detail="Notification not found")
        notification.is_read = is_read
        await self._session.flush()
        return NotificationOut.model_validate(notification)


__all__ = ["NotificationsService"]
