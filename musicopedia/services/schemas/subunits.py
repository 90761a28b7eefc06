# musicopedia/services/schemas/subunits.py
from __future__ import annotations

from datetime import date, datetime
from typing import Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from musicopedia.domain.enums import Gender, GroupActivityStatus


class SubunitBase(BaseModel):
    description: Optional[str] = None
    image: Optional[str] = None
    formation_date: Optional[date] = None
    disband_date: Optional[date] = None
    gender: Optional[Gender] = None
    activity_status: Optional[GroupActivityStatus] = None
    origin_country: Optional[str] = Field(default=None, max_length=64)
    data_origin: Optional[str] = None


class SubunitCreate(SubunitBase):
    name: Optional[str] = Field(default=None, max_length=255)
    main_group_id: Optional[UUID] = None
    group_identity_id: Optional[UUID] = None


class SubunitUpdate(SubunitBase):
    """Null means "leave as is", except `group_identity_id`, where null unlinks."""
    name: Optional[str] = Field(default=None, max_length=255)
    group_identity_id: Optional[UUID] = None


class SubunitRead(SubunitBase):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    name: str
    main_group_id: UUID
    main_group_name: Optional[str] = None
    group_identity_id: Optional[UUID] = None
    group_identity_name: Optional[str] = None
    date_created: Optional[datetime] = None
    last_updated: Optional[datetime] = None
