"""
Retreat and retreat-registration endpoints.

/api/retreat/retreats/...  — retreat management (reads public, writes admin)
/api/retreat/...           — registrations (submission public, review admin)

Static segments (retreats/..., profile/..., all) are declared before the
/{registration_id} catch-all so they are matched first.
"""

from __future__ import annotations

import uuid
from typing import Optional

from fastapi import APIRouter, Body, Depends, Query

from dependencies import get_retreat_service, require_admin
from schemas.dto.requests.retreat import (
    CreateRegistrationRequest,
    CreateRetreatRequest,
    ToggleRetreatActiveRequest,
    UpdateRegistrationStatusRequest,
    UpdateRetreatRequest,
)
from schemas.dto.responses.auth import SessionUser
from schemas.dto.responses.common import ERROR_RESPONSES, MessageResponse
from schemas.dto.responses.retreat import (
    RegistrantResponse,
    RegistrationDetailResponse,
    RegistrationListResponse,
    RegistrationResponse,
    RegistrationSavedResponse,
    RetreatEnvelope,
    RetreatListResponse,
    RetreatResponse,
    RetreatSavedResponse,
)
from schemas.models.retreat import RetreatRegistration
from services.retreat_service import RetreatService

router = APIRouter(prefix="/api/retreat", tags=["retreat"], responses=ERROR_RESPONSES)


def _registrants(registration: RetreatRegistration) -> list[RegistrantResponse]:
    return [RegistrantResponse.model_validate(r) for r in registration.registrants]


# ── Retreats ─────────────────────────────────────────────────────────────────


@router.get("/retreats/active", response_model=RetreatListResponse)
async def list_active_retreats(
    svc: RetreatService = Depends(get_retreat_service),
) -> RetreatListResponse:
    retreats = await svc.list_active()
    return RetreatListResponse(retreats=[RetreatResponse.model_validate(r) for r in retreats])


@router.get("/retreats/all", response_model=RetreatListResponse)
async def list_all_retreats(
    _: SessionUser = Depends(require_admin),
    svc: RetreatService = Depends(get_retreat_service),
) -> RetreatListResponse:
    retreats = await svc.list_all()
    return RetreatListResponse(retreats=[RetreatResponse.model_validate(r) for r in retreats])


@router.get("/retreats/{retreat_id}", response_model=RetreatEnvelope)
async def get_retreat(
    retreat_id: uuid.UUID, svc: RetreatService = Depends(get_retreat_service)
) -> RetreatEnvelope:
    retreat = await svc.get(retreat_id)
    return RetreatEnvelope(retreat=RetreatResponse.model_validate(retreat))


@router.post("/retreats", response_model=RetreatSavedResponse, status_code=201)
async def create_retreat(
    body: CreateRetreatRequest,
    _: SessionUser = Depends(require_admin),
    svc: RetreatService = Depends(get_retreat_service),
) -> RetreatSavedResponse:
    retreat = await svc.create(body.model_dump())
    return RetreatSavedResponse(
        retreat=RetreatResponse.model_validate(retreat),
        message="Retreat created successfully",
    )


@router.put("/retreats/{retreat_id}", response_model=RetreatSavedResponse)
async def update_retreat(
    retreat_id: uuid.UUID,
    body: UpdateRetreatRequest,
    _: SessionUser = Depends(require_admin),
    svc: RetreatService = Depends(get_retreat_service),
) -> RetreatSavedResponse:
    retreat = await svc.update(retreat_id, body.to_values())
    return RetreatSavedResponse(
        retreat=RetreatResponse.model_validate(retreat),
        message="Retreat updated successfully",
    )


@router.put("/retreats/{retreat_id}/toggle-active", response_model=RetreatSavedResponse)
async def toggle_retreat_active(
    retreat_id: uuid.UUID,
    body: Optional[ToggleRetreatActiveRequest] = Body(default=None),
    _: SessionUser = Depends(require_admin),
    svc: RetreatService = Depends(get_retreat_service),
) -> RetreatSavedResponse:
    retreat = await svc.toggle_active(retreat_id, body.is_active if body else None)
    return RetreatSavedResponse(
        retreat=RetreatResponse.model_validate(retreat),
        message="Retreat status updated successfully",
    )


@router.delete("/retreats/{retreat_id}", response_model=MessageResponse)
async def delete_retreat(
    retreat_id: uuid.UUID,
    _: SessionUser = Depends(require_admin),
    svc: RetreatService = Depends(get_retreat_service),
) -> MessageResponse:
    await svc.delete(retreat_id)
    return MessageResponse(message="Retreat deleted successfully")


# ── Registrations ────────────────────────────────────────────────────────────


@router.post("", response_model=RegistrationSavedResponse, status_code=201)
async def create_registration(
    body: CreateRegistrationRequest,
    svc: RetreatService = Depends(get_retreat_service),
) -> RegistrationSavedResponse:
    registration = await svc.register(body.registration_values(), body.registrant_values())
    return RegistrationSavedResponse(
        registration=RegistrationResponse.model_validate(registration),
        registrants=_registrants(registration),
        message="Registration created successfully",
    )


@router.get("/profile/{profile_id}", response_model=RegistrationListResponse)
async def list_registrations_for_profile(
    profile_id: uuid.UUID,
    svc: RetreatService = Depends(get_retreat_service),
) -> RegistrationListResponse:
    registrations = await svc.list_registrations_for_profile(profile_id)
    return RegistrationListResponse(
        registrations=[RegistrationResponse.model_validate(r) for r in registrations]
    )


@router.get("/all", response_model=RegistrationListResponse)
async def list_all_registrations(
    retreat_id: Optional[uuid.UUID] = Query(default=None, alias="retreatId"),
    _: SessionUser = Depends(require_admin),
    svc: RetreatService = Depends(get_retreat_service),
) -> RegistrationListResponse:
    registrations = await svc.list_registrations(retreat_id)
    return RegistrationListResponse(
        registrations=[RegistrationResponse.model_validate(r) for r in registrations]
    )


@router.get("/{registration_id}", response_model=RegistrationDetailResponse)
async def get_registration(
    registration_id: uuid.UUID,
    svc: RetreatService = Depends(get_retreat_service),
) -> RegistrationDetailResponse:
    registration = await svc.get_registration(registration_id)
    return RegistrationDetailResponse(
        registration=RegistrationResponse.model_validate(registration),
        registrants=_registrants(registration),
    )


@router.put("/{registration_id}/status", response_model=MessageResponse)
async def update_registration_status(
    registration_id: uuid.UUID,
    body: UpdateRegistrationStatusRequest,
    _: SessionUser = Depends(require_admin),
    svc: RetreatService = Depends(get_retreat_service),
) -> MessageResponse:
    await svc.update_status(registration_id, body.status)
    return MessageResponse(message="Status updated successfully")
