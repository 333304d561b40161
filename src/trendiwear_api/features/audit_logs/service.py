"""Append and query the administrative audit trail."""

from __future__ import annotations

import logging
import uuid
from typing import Any

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from trendiwear_api.common.logging import log_context
from trendiwear_api.models import AuditLog, User

from .schemas import AuditLogList, AuditLogOut

logger = logging.getLogger(__name__)


class AuditLogService:
    """Record administrative mutations in the request's transaction."""

    def __init__(self, *, session: AsyncSession) -> None:
        self._session = session

    async def record(
        self,
        *,
        actor: User | None,
        action: str,
        entity: str,
        entity_id: str | uuid.UUID | None = None,
        details: dict[str, Any] | None = None,
        ip_address: str | None = None,
    ) -> AuditLog:
        entry = AuditLog(
            user_id=actor.id if actor is not None else None,
            action=action,
            entity=entity,
            entity_id=str(entity_id) if entity_id is not None else None,
            details=details or {},
            ip_address=ip_address,
        )
        self._session.add(entry)
        await self._session.flush()
        logger.info(
            "audit.record",
            extra=log_context(
                user_id=str(entry.user_id) if entry.user_id else None,
                action=action,
                entity=entity,
                entity_id=entry.entity_id,
            ),
        )
        return entry

    async def list_logs(
        self,
        *,
        action: str | None = None,
        entity: str | None = None,
        user_id: uuid.UUID | None = None,
        limit: int = 50,
    ) -> AuditLogList:
        stmt = select(AuditLog)
        if action:
            stmt = stmt.where(AuditLog.action == action)
        if entity:
            stmt = stmt.where(AuditLog.entity == entity)
        if user_id is not None:
            stmt = stmt.where(AuditLog.user_id == user_id)
        stmt = stmt.order_by(AuditLog.created_at.desc()).limit(limit)

        rows = (await self._session.execute(stmt)).scalars().all()
        return AuditLogList(logs=[AuditLogOut.model_validate(row) for row in rows])


__all__ = ["AuditLogService"]
