"""Occasions that stylists curate outfit inspirations for."""

from __future__ import annotations

import logging
from uuid import UUID

from fastapi import HTTPException, status
from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from trendiwear_api.common.logging import log_context
from trendiwear_api.features.outfits.schemas import OutfitSummary
from trendiwear_api.models import Event, OutfitInspiration

from .schemas import EventCreate, EventList, EventListItem, EventOut, EventUpdate

logger = logging.getLogger(__name__)

PREVIEW_OUTFITS = 6
_NOT_NULL = {"name", "dress_codes", "seasonality", "is_active"}


class EventsService:
    def __init__(self, *, session: AsyncSession) -> None:
        self._session = session

    async def list_events(self) -> EventList:
        stmt = select(Event).where(Event.is_active.is_(True)).order_by(Event.name)
        events = (await self._session.execute(stmt)).scalars().all()

        counts = await self._outfit_counts([event.id for event in events])
        items = [await self._list_item(event, counts.get(event.id, 0)) for event in events]
        logger.info("events.list.success", extra=log_context(count=len(items)))
        return EventList(events=items)

    async def get_event(self, *, event_id: UUID) -> EventListItem:
        event = await self._get_or_404(event_id)
        counts = await self._outfit_counts([event.id])
        return await self._list_item(event, counts.get(event.id, 0))

    async def create_event(self, *, payload: EventCreate) -> EventOut:
        await self._ensure_name_free(payload.name)
        event = Event(**payload.model_dump())
        self._session.add(event)
        await self._session.flush()
        logger.info(
            "events.create.success",
            extra=log_context(event_id=str(event.id), name=event.name),
        )
        return await self._fresh(event.id)

    async def update_event(self, *, event_id: UUID, payload: EventUpdate) -> EventOut:
        event = await self._get_or_404(event_id)
        updates = {
            key: value
            for key, value in payload.model_dump(exclude_unset=True).items()
            if not (value is None and key in _NOT_NULL)
        }
        if updates.get("name") and updates["name"] != event.name:
            await self._ensure_name_free(updates["name"])
        for key, value in updates.items():
            setattr(event, key, value)
        await self._session.flush()

        logger.info(
            "events.update.success",
            extra=log_context(event_id=str(event.id), fields=",".join(sorted(updates))),
        )
        return await self._fresh(event.id)

    async def delete_event(self, *, event_id: UUID) -> None:
        """Delete an event that no outfit inspiration (active or not) refers to."""

        event = await self._get_or_404(event_id)
        outfits = (
            await self._session.execute(
                select(func.count())
                .select_from(OutfitInspiration)
                .where(OutfitInspiration.event_id == event.id)
            )
        ).scalar_one()
        if outfits:
            raise HTTPException(
                status.HTTP_400_BAD_REQUEST,
                detail=(
                    "Cannot delete event with existing outfit inspirations. "
                    "Please remove outfit inspirations first."
                ),
            )
        await self._session.delete(event)
        await self._session.flush()
        logger.info("events.delete.success", extra=log_context(event_id=str(event_id)))

    async def _list_item(self, event: Event, outfit_count: int) -> EventListItem:
        stmt = (
            select(OutfitInspiration)
            .where(
                OutfitInspiration.event_id == event.id,
                OutfitInspiration.is_active.is_(True),
            )
            .order_by(OutfitInspiration.created_at.desc())
            .limit(PREVIEW_OUTFITS)
        )
        outfits = (await self._session.execute(stmt)).scalars().all()
        return EventListItem.model_validate(event).model_copy(
            update={
                "outfit_count": outfit_count,
                "outfits": [OutfitSummary.model_validate(outfit) for outfit in outfits],
            }
        )

    async def _outfit_counts(self, event_ids: list[UUID]) -> dict[UUID, int]:
        if not event_ids:
            return {}
        stmt = (
            select(OutfitInspiration.event_id, func.count())
            .where(
                OutfitInspiration.event_id.in_(event_ids),
                OutfitInspiration.is_active.is_(True),
            )
            .group_by(OutfitInspiration.event_id)
        )
        return {row[0]: row[1] for row in (await self._session.execute(stmt)).all()}

    async def _ensure_name_free(self, name: str) -> None:
        stmt = select(Event.id).where(func.lower(Event.name) == name.strip().lower())
        if (await self._session.execute(stmt)).first() is not None:
            raise HTTPException(
                status.HTTP_409_CONFLICT,
                detail="An event with this name already exists.",
            )

    async def _get_or_404(self, event_id: UUID) -> Event:
        event = await self._session.get(Event, event_id)
        if event is None:
            raise HTTPException(status.HTTP_404_NOT_FOUND, detail="Event not found")
        return event

    async def _fresh(self, event_id: UUID) -> EventOut:
        stmt = select(Event).where(Event.id == event_id).execution_options(populate_existing=True)
        return EventOut.model_validate((await self._session.execute(stmt)).scalar_one())


__all__ = ["EventsService"]
