"""Design router — CRUD endpoints for card designs."""

from __future__ import annotations

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from cardstudio.auth import CurrentUser, require_user
from cardstudio.db.session import get_db
from cardstudio.services.design_service import DesignService
from cardstudio.schemas.design import (
    DesignCreate,
    DesignUpdate,
    DesignResponse,
    DesignEnvelope,
    DesignListResponse,
)

router = APIRouter()


def _get_service(
    user: CurrentUser = Depends(require_user),
    db: AsyncSession = Depends(get_db),
) -> DesignService:
    return DesignService(db, user)


def _envelope(design) -> DesignEnvelope:
    return DesignEnvelope(design=DesignResponse.model_validate(design))


@router.post("/", response_model=DesignEnvelope, status_code=201)
async def create_design(
    data: DesignCreate,
    service: DesignService = Depends(_get_service),
):
    """Create a design under one of the caller's profiles."""
    design = await service.create(data)
    return _envelope(design)


@router.get("/", response_model=DesignListResponse)
async def list_designs(
    profile_id: str | None = Query(None),
    service: DesignService = Depends(_get_service),
):
    """List the caller's designs, optionally only those of one profile."""
    designs = await service.list_all(profile_id=profile_id)
    return DesignListResponse(
        designs=[DesignResponse.model_validate(d) for d in designs]
    )


@router.get("/{design_id}", response_model=DesignEnvelope)
async def get_design(
    design_id: str,
    service: DesignService = Depends(_get_service),
):
    design = await service.get_owned(design_id)
    return _envelope(design)


@router.patch("/{design_id}", response_model=DesignEnvelope)
async def update_design(
    design_id: str,
    data: DesignUpdate,
    service: DesignService = Depends(_get_service),
):
    """Update a design; the body's profile_id must be the design's profile."""
    design = await service.update(design_id, data)
    return _envelope(design)


@router.delete("/{design_id}", response_model=DesignEnvelope)
async def delete_design(
    design_id: str,
    service: DesignService = Depends(_get_service),
):
    design = await service.delete(design_id)
    return _envelope(design)
