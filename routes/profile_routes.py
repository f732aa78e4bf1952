"""
Profile endpoints.

Profiles are provisioned by admins; a signed-in user can only read and edit
their own basic details through /me.
"""

from __future__ import annotations

import uuid

from fastapi import APIRouter, Depends

from dependencies import get_profile_service, require_admin, require_user
from errors import AuthenticationError
from schemas.dto.requests.profile import (
    CreateProfileRequest,
    UpdateMeRequest,
    UpdateProfileRequest,
)
from schemas.dto.responses.auth import SessionUser
from schemas.dto.responses.common import ERROR_RESPONSES, MessageResponse
from schemas.dto.responses.profile import (
    ProfileEnvelope,
    ProfileListResponse,
    ProfileResponse,
    ProfileSavedResponse,
)
from services.profile_service import ProfileService

router = APIRouter(prefix="/api/profiles", tags=["profiles"], responses=ERROR_RESPONSES)


def _session_profile_id(user: SessionUser) -> uuid.UUID:
    try:
        return uuid.UUID(user.id)
    except ValueError as e:
        raise AuthenticationError("Invalid session") from e


@router.get("/me", response_model=ProfileEnvelope)
async def get_me(
    user: SessionUser = Depends(require_user),
    svc: ProfileService = Depends(get_profile_service),
) -> ProfileEnvelope:
    profile = await svc.get(_session_profile_id(user))
    return ProfileEnvelope(profile=ProfileResponse.model_validate(profile))


@router.put("/me", response_model=ProfileSavedResponse)
async def update_me(
    body: UpdateMeRequest,
    user: SessionUser = Depends(require_user),
    svc: ProfileService = Depends(get_profile_service),
) -> ProfileSavedResponse:
    profile = await svc.update_own(_session_profile_id(user), body.to_values())
    return ProfileSavedResponse(
        profile=ProfileResponse.model_validate(profile),
        message="Profile updated successfully",
    )


@router.get("", response_model=ProfileListResponse)
async def list_profiles(
    _: SessionUser = Depends(require_admin),
    svc: ProfileService = Depends(get_profile_service),
) -> ProfileListResponse:
    profiles = await svc.list_profiles()
    return ProfileListResponse(profiles=[ProfileResponse.model_validate(p) for p in profiles])


@router.post("", response_model=ProfileSavedResponse, status_code=201)
async def create_profile(
    body: CreateProfileRequest,
    _: SessionUser = Depends(require_admin),
    svc: ProfileService = Depends(get_profile_service),
) -> ProfileSavedResponse:
    profile = await svc.create(body.model_dump())
    return ProfileSavedResponse(
        profile=ProfileResponse.model_validate(profile),
        message="Profile created successfully",
    )


@router.get("/{profile_id}", response_model=ProfileEnvelope)
async def get_profile(
    profile_id: uuid.UUID,
    _: SessionUser = Depends(require_admin),
    svc: ProfileService = Depends(get_profile_service),
) -> ProfileEnvelope:
    profile = await svc.get(profile_id)
    return ProfileEnvelope(profile=ProfileResponse.model_validate(profile))


@router.put("/{profile_id}", response_model=ProfileSavedResponse)
async def update_profile(
    profile_id: uuid.UUID,
    body: UpdateProfileRequest,
    _: SessionUser = Depends(require_admin),
    svc: ProfileService = Depends(get_profile_service),
) -> ProfileSavedResponse:
    profile = await svc.update(profile_id, body.to_values())
    return ProfileSavedResponse(
        profile=ProfileResponse.model_validate(profile),
        message="Profile updated successfully",
    )


@router.delete("/{profile_id}", response_model=MessageResponse)
async def delete_profile(
    profile_id: uuid.UUID,
    _: SessionUser = Depends(require_admin),
    svc: ProfileService = Depends(get_profile_service),
) -> MessageResponse:
    await svc.delete(profile_id)
    return MessageResponse(message="Profile deleted successfully")
