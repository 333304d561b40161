from __future__ import annotations

from typing import Annotated
from uuid import UUID

from fastapi import APIRouter, Depends, Path, status

from trendiwear_api.api.deps import get_events_service
from trendiwear_api.common.schema import MessageOut
from trendiwear_api.core.http import AdminUser

from .schemas import EventCreate, EventList, EventListItem, EventOut, EventUpdate
from .service import EventsService

router = APIRouter(prefix="/events", tags=["events"])

EventsServiceDep = Annotated[EventsService, Depends(get_events_service)]
EVENT_ID_PARAM = Annotated[UUID, Path(description="Event identifier.")]


@router.get("", response_model=EventList, summary="List active events with outfit previews")
async def list_events(service: EventsServiceDep) -> EventList:
    return await service.list_events()


@router.get(
    "/{event_id}",
    response_model=EventListItem,
    summary="Read an event",
    responses={status.HTTP_404_NOT_FOUND: {"description": "Event not found."}},
)
async def get_event(event_id: EVENT_ID_PARAM, service: EventsServiceDep) -> EventListItem:
    return await service.get_event(event_id=event_id)


@router.post(
    "",
    response_model=EventOut,
    status_code=status.HTTP_201_CREATED,
    summary="Create an event (administrator only)",
    responses={status.HTTP_409_CONFLICT: {"description": "Name already in use."}},
)
async def create_event(_: AdminUser, payload: EventCreate, service: EventsServiceDep) -> EventOut:
    return await service.create_event(payload=payload)


@router.put(
    "/{event_id}",
    response_model=EventOut,
    summary="Update an event (administrator only)",
    responses={status.HTTP_404_NOT_FOUND: {"description": "Event not found."}},
)
async def update_event(
    _: AdminUser,
    event_id: EVENT_ID_PARAM,
    payload: EventUpdate,
    service: EventsServiceDep,
) -> EventOut:
    return await service.update_event(event_id=event_id, payload=payload)


@router.delete(
    "/{event_id}",
    response_model=MessageOut,
    summary="Delete an event without outfit inspirations (administrator only)",
    responses={
        status.HTTP_400_BAD_REQUEST: {"description": "Event still has outfit inspirations."},
        status.HTTP_404_NOT_FOUND: {"description": "Event not found."},
    },
)
async def delete_event(
    _: AdminUser,
    event_id: EVENT_ID_PARAM,
    service: EventsServiceDep,
) -> MessageOut:
    await service.delete_event(event_id=event_id)
    return MessageOut(message="Event deleted successfully")


__all__ = ["router"]
