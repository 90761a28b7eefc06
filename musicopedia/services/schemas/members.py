# musicopedia/services/schemas/members.py
from __future__ import annotations

from datetime import date, datetime
from typing import Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field


class MemberCreate(BaseModel):
    member_name: Optional[str] = Field(default=None, max_length=255)
    real_name: Optional[str] = Field(default=None, max_length=255)
    description: Optional[str] = None
    image: Optional[str] = None
    nationality: Optional[str] = Field(default=None, max_length=64)
    birth_date: Optional[date] = None
    death_date: Optional[date] = None
    solo_performer_id: Optional[UUID] = None
    data_origin: Optional[str] = None


class MemberUpdate(BaseModel):
    """Null means "leave as is"; the solo link has its own endpoints."""
    member_name: Optional[str] = Field(default=None, max_length=255)
    real_name: Optional[str] = Field(default=None, max_length=255)
    description: Optional[str] = None
    image: Optional[str] = None
    nationality: Optional[str] = Field(default=None, max_length=64)
    birth_date: Optional[date] = None
    death_date: Optional[date] = None
    data_origin: Optional[str] = None


class MemberRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    member_name: str
    real_name: str
    description: Optional[str] = None
    image: Optional[str] = None
    nationality: Optional[str] = None
    birth_date: Optional[date] = None
    death_date: Optional[date] = None
    solo_performer_id: Optional[UUID] = None
    solo_performer_name: Optional[str] = None
    has_official_solo_debut: bool = False
    data_origin: Optional[str] = None
    date_created: Optional[datetime] = None
    last_updated: Optional[datetime] = None


class MemberSummary(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    member_name: str
    real_name: str
    image: Optional[str] = None
    has_official_solo_debut: bool = False


class SoloLinkRequest(BaseModel):
    performer_id: UUID
