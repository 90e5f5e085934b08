"""Pydantic schemas for CardDesign operations."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, Field


# ─── Request Schemas ───


class DesignCreate(BaseModel):
    id: str | None = Field(None, min_length=1, max_length=255)
    profile_id: str = Field(..., min_length=1)
    design_name: str | None = None
    template_key: str | None = None
    color_palette: str | None = Field(None, description="JSON of colors used")
    font_config: str | None = Field(None, description="JSON of fonts")
    layout_config: str | None = Field(
        None, description="JSON describing layout blocks"
    )
    logo_url: str | None = None
    is_favorite: bool | None = None
    is_primary_design: bool | None = None


class DesignUpdate(BaseModel):
    """Update a design under the profile it belongs to.

    ``profile_id`` scopes the lookup; it does not move the design.
    """

    profile_id: str = Field(..., min_length=1)
    design_name: str | None = None
    template_key: str | None = None
    color_palette: str | None = None
    font_config: str | None = None
    layout_config: str | None = None
    logo_url: str | None = None
    is_favorite: bool | None = None
    is_primary_design: bool | None = None


# ─── Response Schemas ───


class DesignResponse(BaseModel):
    id: str
    profile_id: str
    user_id: str
    design_name: str | None = None
    template_key: str | None = None
    color_palette: str | None = None
    font_config: str | None = None
    layout_config: str | None = None
    logo_url: str | None = None
    is_favorite: bool
    is_primary_design: bool
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}


class DesignEnvelope(BaseModel):
    design: DesignResponse


class DesignListResponse(BaseModel):
    designs: list[DesignResponse]
