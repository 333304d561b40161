from __future__ import annotations

import logging

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from trendiwear_api.common.logging import log_context
from trendiwear_api.features.audit_logs.service import AuditLogService
from trendiwear_api.models import SystemSetting, User

from .schemas import SystemSettingList, SystemSettingOut, SystemSettingUpsert

logger = logging.getLogger(__name__)

DEFAULT_CATEGORY = "general"


class SystemSettingsService:
    def __init__(self, *, session: AsyncSession, audit: AuditLogService) -> None:
        self._session = session
        self._audit = audit

    async def list_settings(self) -> SystemSettingList:
        stmt = select(SystemSetting).order_by(SystemSetting.category, SystemSetting.key)
        rows = (await self._session.execute(stmt)).scalars().all()
        return SystemSettingList(settings=[SystemSettingOut.model_validate(row) for row in rows])

    async def upsert_setting(
        self, *, payload: SystemSettingUpsert, actor: User
    ) -> SystemSettingOut:
        """Create or overwrite the setting stored under ``payload.key``."""

        setting = await self._session.get(SystemSetting, payload.key)
        created = setting is None
        if setting is None:
            setting = SystemSetting(key=payload.key)
            self._session.add(setting)
        setting.value = payload.value
        setting.description = payload.description
        setting.category = payload.category or DEFAULT_CATEGORY
        setting.updated_by = actor.id
        await self._session.flush()

        await self._audit.record(
            actor=actor,
            action="CREATE" if created else "UPDATE",
            entity="SystemSetting",
            entity_id=setting.key,
            details={"category": setting.category},
        )
        logger.info(
            "system_settings.upsert.success",
            extra=log_context(key=setting.key, created=created, user_id=str(actor.id)),
        )
        return SystemSettingOut.model_validate(setting)


__all__ = ["DEFAULT_CATEGORY", "SystemSettingsService"]
