"""User reports of inappropriate content and their moderation."""

from __future__ import annotations

import logging
from uuid import UUID

from fastapi import HTTPException, status
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from trendiwear_api.common.logging import log_context
from trendiwear_api.db import utc_now
from trendiwear_api.features.audit_logs.service import AuditLogService
from trendiwear_api.models import ReportedContent, ReportStatus, User

from .schemas import ReportCreate, ReportList, ReportOut, ReportResolve

logger = logging.getLogger(__name__)


class ReportedContentService:
    def __init__(self, *, session: AsyncSession, audit: AuditLogService) -> None:
        self._session = session
        self._audit = audit

    async def list_reports(self, *, status_filter: ReportStatus | None = None) -> ReportList:
        stmt = select(ReportedContent).order_by(ReportedContent.created_at.desc())
        if status_filter is not None:
            stmt = stmt.where(ReportedContent.status == ReportStatus(status_filter))
        reports = (await self._session.execute(stmt)).scalars().all()
        return ReportList(reports=[ReportOut.model_validate(report) for report in reports])

    async def create_report(self, *, user: User, payload: ReportCreate) -> ReportOut:
        report = ReportedContent(reporter_id=user.id, **payload.model_dump())
        self._session.add(report)
        await self._session.flush()

        logger.info(
            "reports.create.success",
            extra=log_context(
                report_id=str(report.id),
                user_id=str(user.id),
                content_type=report.content_type,
            ),
        )
        return await self._fresh(report.id)

    async def resolve_report(
        self, *, report_id: UUID, payload: ReportResolve, actor: User
    ) -> ReportOut:
        report = await self._session.get(ReportedContent, report_id)
        if report is None:
            raise HTTPException(status.HTTP_404_NOT_FOUND, detail="Report not found")

        report.status = ReportStatus(payload.status)
        report.resolution = payload.resolution
        report.reviewed_by = actor.id
        report.reviewed_at = utc_now()
        await self._session.flush()
        decision = ReportStatus(report.status).value

        await self._audit.record(
            actor=actor,
            action="MODERATE",
            entity="ReportedContent",
            entity_id=report.id,
            details={"status": decision, "contentId": report.content_id},
        )
        logger.info(
            "reports.resolve.success",
            extra=log_context(report_id=str(report.id), status=decision),
        )
        return await self._fresh(report.id)

    async def _fresh(self, report_id: UUID) -> ReportOut:
        stmt = (
            select(ReportedContent)
            .where(ReportedContent.id == report_id)
            .execution_options(populate_existing=True)
        )
        return ReportOut.model_validate((await self._session.execute(stmt)).scalar_one())


__all__ = ["ReportedContentService"]
