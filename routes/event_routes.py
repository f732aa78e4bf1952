"""
Event endpoints.

Public reads return active events annotated for display; writes are admin
only. DELETE is a soft delete (is_active = false).
"""

from __future__ import annotations

import uuid
from typing import Optional

from fastapi import APIRouter, Depends, Query

from dependencies import get_event_service, require_admin
from schemas.dto.requests.event import CreateEventRequest, UpdateEventRequest
from schemas.dto.responses.auth import SessionUser
from schemas.dto.responses.common import ERROR_RESPONSES, MessageResponse
from schemas.dto.responses.event import (
    EventEnvelope,
    EventListResponse,
    EventResponse,
    EventSavedResponse,
)
from services.event_service import EventService

router = APIRouter(prefix="/api/events", tags=["events"], responses=ERROR_RESPONSES)


@router.get("", response_model=EventListResponse)
async def list_events(svc: EventService = Depends(get_event_service)) -> EventListResponse:
    items = await svc.list_for_display()
    return EventListResponse(events=[EventResponse.from_display(i) for i in items])


@router.get("/upcoming", response_model=EventListResponse)
async def list_upcoming_events(
    limit: Optional[int] = Query(default=None, ge=1, le=100),
    svc: EventService = Depends(get_event_service),
) -> EventListResponse:
    items = await svc.list_upcoming(limit)
    return EventListResponse(events=[EventResponse.from_display(i) for i in items])


@router.get("/all", response_model=EventListResponse)
async def list_all_events(
    _: SessionUser = Depends(require_admin),
    svc: EventService = Depends(get_event_service),
) -> EventListResponse:
    items = await svc.list_all()
    return EventListResponse(events=[EventResponse.from_display(i) for i in items])


@router.get("/{event_id}", response_model=EventEnvelope)
async def get_event(
    event_id: uuid.UUID, svc: EventService = Depends(get_event_service)
) -> EventEnvelope:
    item = await svc.get_for_display(event_id)
    return EventEnvelope(event=EventResponse.from_display(item))


@router.post("", response_model=EventSavedResponse, status_code=201)
async def create_event(
    body: CreateEventRequest,
    _: SessionUser = Depends(require_admin),
    svc: EventService = Depends(get_event_service),
) -> EventSavedResponse:
    event = await svc.create(body.model_dump())
    return EventSavedResponse(
        event=EventResponse.from_display(svc.annotate(event)),
        message="Event created successfully",
    )


@router.put("/{event_id}", response_model=EventSavedResponse)
async def update_event(
    event_id: uuid.UUID,
    body: UpdateEventRequest,
    _: SessionUser = Depends(require_admin),
    svc: EventService = Depends(get_event_service),
) -> EventSavedResponse:
    event = await svc.update(event_id, body.to_values())
    return EventSavedResponse(
        event=EventResponse.from_display(svc.annotate(event)),
        message="Event updated successfully",
    )


@router.delete("/{event_id}", response_model=MessageResponse)
async def delete_event(
    event_id: uuid.UUID,
    _: SessionUser = Depends(require_admin),
    svc: EventService = Depends(get_event_service),
) -> MessageResponse:
    await svc.deactivate(event_id)
    return MessageResponse(message="Event deleted successfully")
