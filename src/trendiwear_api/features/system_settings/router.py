from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends

from trendiwear_api.api.deps import get_system_settings_service
from trendiwear_api.core.http import AdminUser

from .schemas import SystemSettingList, SystemSettingOut, SystemSettingUpsert
from .service import SystemSettingsService

router = APIRouter(prefix="/system-settings", tags=["system"])

SystemSettingsServiceDep = Annotated[SystemSettingsService, Depends(get_system_settings_service)]


@router.get(
    "",
    response_model=SystemSettingList,
    summary="List instance settings by category (administrator only)",
)
async def list_settings(_: AdminUser, service: SystemSettingsServiceDep) -> SystemSettingList:
    return await service.list_settings()


@router.put(
    "",
    response_model=SystemSettingOut,
    summary="Create or update an instance setting (administrator only)",
)
async def upsert_setting(
    actor: AdminUser,
    payload: SystemSettingUpsert,
    service: SystemSettingsServiceDep,
) -> SystemSettingOut:
    return await service.upsert_setting(payload=payload, actor=actor)


__all__ = ["router"]
