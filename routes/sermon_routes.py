"""Sermon endpoints. Reads are public (private sermons hidden); writes are admin only."""

from __future__ import annotations

import uuid
from typing import Optional

from fastapi import APIRouter, Depends

from dependencies import get_current_user, get_sermon_service, require_admin
from schemas.dto.requests.sermon import CreateSermonRequest, UpdateSermonRequest
from schemas.dto.responses.auth import SessionUser
from schemas.dto.responses.common import ERROR_RESPONSES, MessageResponse
from schemas.dto.responses.sermon import (
    SermonEnvelope,
    SermonListResponse,
    SermonResponse,
    SermonSavedResponse,
)
from services.sermon_service import SermonService

router = APIRouter(prefix="/api/sermons", tags=["sermons"], responses=ERROR_RESPONSES)


@router.get("", response_model=SermonListResponse)
async def list_sermons(svc: SermonService = Depends(get_sermon_service)) -> SermonListResponse:
    sermons = await svc.list_public()
    return SermonListResponse(sermons=[SermonResponse.model_validate(s) for s in sermons])


@router.get("/all", response_model=SermonListResponse)
async def list_all_sermons(
    _: SessionUser = Depends(require_admin),
    svc: SermonService = Depends(get_sermon_service),
) -> SermonListResponse:
    sermons = await svc.list_all()
    return SermonListResponse(sermons=[SermonResponse.model_validate(s) for s in sermons])


@router.get("/{sermon_id}", response_model=SermonEnvelope)
async def get_sermon(
    sermon_id: uuid.UUID,
    user: Optional[SessionUser] = Depends(get_current_user),
    svc: SermonService = Depends(get_sermon_service),
) -> SermonEnvelope:
    is_admin = user is not None and user.is_admin
    sermon = await svc.get(sermon_id, include_private=is_admin)
    return SermonEnvelope(sermon=SermonResponse.model_validate(sermon))


@router.post("", response_model=SermonSavedResponse, status_code=201)
async def create_sermon(
    body: CreateSermonRequest,
    _: SessionUser = Depends(require_admin),
    svc: SermonService = Depends(get_sermon_service),
) -> SermonSavedResponse:
    sermon = await svc.create(body.to_values())
    return SermonSavedResponse(
        sermon=SermonResponse.model_validate(sermon),
        message="Sermon created successfully",
    )


@router.put("/{sermon_id}", response_model=SermonSavedResponse)
async def update_sermon(
    sermon_id: uuid.UUID,
    body: UpdateSermonRequest,
    _: SessionUser = Depends(require_admin),
    svc: SermonService = Depends(get_sermon_service),
) -> SermonSavedResponse:
    sermon = await svc.update(sermon_id, body.to_values())
    return SermonSavedResponse(
        sermon=SermonResponse.model_validate(sermon),
        message="Sermon updated successfully",
    )


@router.post("/{sermon_id}/toggle-visibility", response_model=SermonSavedResponse)
async def toggle_sermon_visibility(
    sermon_id: uuid.UUID,
    _: SessionUser = Depends(require_admin),
    svc: SermonService = Depends(get_sermon_service),
) -> SermonSavedResponse:
    sermon = await svc.toggle_visibility(sermon_id)
    state = "public" if sermon.is_public else "private"
    return SermonSavedResponse(
        sermon=SermonResponse.model_validate(sermon),
        message=f"Sermon is now {state}",
    )


@router.delete("/{sermon_id}", response_model=MessageResponse)
async def delete_sermon(
    sermon_id: uuid.UUID,
    _: SessionUser = Depends(require_admin),
    svc: SermonService = Depends(get_sermon_service),
) -> MessageResponse:
    await svc.delete(sermon_id)
    return MessageResponse(message="Sermon deleted successfully")
