"""Pydantic schemas for CardProfile operations."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, EmailStr, Field


# ─── Request Schemas ───


class ProfileCreate(BaseModel):
    id: str | None = Field(None, min_length=1, max_length=255)
    profile_name: str = Field(..., min_length=1, max_length=255)
    full_name: str = Field(..., min_length=1, max_length=255)
    job_title: str | None = None
    company_name: str | None = None
    email: EmailStr | None = None
    phone: str | None = None
    secondary_phone: str | None = None
    website: str | None = None
    address_line1: str | None = None
    address_line2: str | None = None
    city: str | None = None
    state: str | None = None
    country: str | None = None
    postal_code: str | None = None
    notes: str | None = None
    is_default: bool | None = None


class ProfileUpdate(BaseModel):
    """Fields left out of the request keep their stored values."""

    profile_name: str | None = Field(None, min_length=1, max_length=255)
    full_name: str | None = Field(None, min_length=1, max_length=255)
    job_title: str | None = None
    company_name: str | None = None
    email: EmailStr | None = None
    phone: str | None = None
    secondary_phone: str | None = None
    website: str | None = None
    address_line1: str | None = None
    address_line2: str | None = None
    city: str | None = None
    state: str | None = None
    country: str | None = None
    postal_code: str | None = None
    notes: str | None = None
    is_default: bool | None = None


# ─── Response Schemas ───


class ProfileResponse(BaseModel):
    id: str
    user_id: str
    profile_name: str
    full_name: str
    job_title: str | None = None
    company_name: str | None = None
    email: str | None = None
    phone: str | None = None
    secondary_phone: str | None = None
    website: str | None = None
    address_line1: str | None = None
    address_line2: str | None = None
    city: str | None = None
    state: str | None = None
    country: str | None = None
    postal_code: str | None = None
    notes: str | None = None
    is_default: bool
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}


class ProfileEnvelope(BaseModel):
    profile: ProfileResponse


class ProfileListResponse(BaseModel):
    profiles: list[ProfileResponse]
