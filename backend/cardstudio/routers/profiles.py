"""Profile router — CRUD endpoints for card profiles."""

from __future__ import annotations

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from cardstudio.auth import CurrentUser, require_user
from cardstudio.db.session import get_db
from cardstudio.services.profile_service import ProfileService
from cardstudio.schemas.profile import (
    ProfileCreate,
    ProfileUpdate,
    ProfileResponse,
    ProfileEnvelope,
    ProfileListResponse,
)

router = APIRouter()


def _get_service(
    user: CurrentUser = Depends(require_user),
    db: AsyncSession = Depends(get_db),
) -> ProfileService:
    return ProfileService(db, user)


def _envelope(profile) -> ProfileEnvelope:
    return ProfileEnvelope(profile=ProfileResponse.model_validate(profile))


@router.post("/", response_model=ProfileEnvelope, status_code=201)
async def create_profile(
    data: ProfileCreate,
    service: ProfileService = Depends(_get_service),
):
    """Create a card profile. Marking it default unsets the previous default."""
    profile = await service.create(data)
    return _envelope(profile)


@router.get("/", response_model=ProfileListResponse)
async def list_profiles(service: ProfileService = Depends(_get_service)):
    """List the caller's profiles."""
    profiles = await service.list_all()
    return ProfileListResponse(
        profiles=[ProfileResponse.model_validate(p) for p in profiles]
    )


@router.get("/{profile_id}", response_model=ProfileEnvelope)
async def get_profile(
    profile_id: str,
    service: ProfileService = Depends(_get_service),
):
    profile = await service.get_owned(profile_id)
    return _envelope(profile)


@router.patch("/{profile_id}", response_model=ProfileEnvelope)
async def update_profile(
    profile_id: str,
    data: ProfileUpdate,
    service: ProfileService = Depends(_get_service),
):
    """Update the fields present in the body; the rest stay as stored."""
    profile = await service.update(profile_id, data)
    return _envelope(profile)


@router.delete("/{profile_id}", response_model=ProfileEnvelope)
async def delete_profile(
    profile_id: str,
    service: ProfileService = Depends(_get_service),
):
    """Delete a profile and all its designs. Returns the deleted profile."""
    profile = await service.delete(profile_id)
    return _envelope(profile)
