# musicopedia/services/schemas/performers.py
from __future__ import annotations

from datetime import date, datetime
from typing import List, Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from musicopedia.domain.enums import (
    Gender,
    GroupActivityStatus,
    GroupAffiliationStatus,
    PerformerType,
)


# ---------- Profile fields (flat, as on the wire) ----------

class SoloFields(BaseModel):
    birth_date: Optional[date] = None
    death_date: Optional[date] = None
    solo_gender: Optional[Gender] = None
    group_affiliation_status: Optional[GroupAffiliationStatus] = None


class GroupFields(BaseModel):
    formation_date: Optional[date] = None
    disband_date: Optional[date] = None
    group_gender: Optional[Gender] = None
    activity_status: Optional[GroupActivityStatus] = None


# ---------- Performer ----------

class PerformerCreate(SoloFields, GroupFields):
    """
    `type` stays a plain string here: an unknown or missing tag is rejected by
    the performer factory, not by request parsing.
    """
    type: Optional[str] = None
    name: Optional[str] = None
    external_id: Optional[str] = Field(default=None, max_length=64)
    description: Optional[str] = None
    image: Optional[str] = None
    primary_language: Optional[str] = None
    genre: Optional[str] = None
    origin_country: Optional[str] = None
    data_origin: Optional[str] = None


class PerformerBatchCreate(BaseModel):
    items: List[PerformerCreate] = Field(..., min_length=1)


class PerformerUpdate(SoloFields, GroupFields):
    # no `type`: a performer is never re-typed
    name: Optional[str] = None
    external_id: Optional[str] = Field(default=None, max_length=64)
    description: Optional[str] = None
    image: Optional[str] = None
    primary_language: Optional[str] = None
    genre: Optional[str] = None
    origin_country: Optional[str] = None
    data_origin: Optional[str] = None


class PerformerRead(SoloFields, GroupFields):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    type: PerformerType
    name: str
    external_id: Optional[str] = None
    description: Optional[str] = None
    image: Optional[str] = None
    primary_language: Optional[str] = None
    genre: Optional[str] = None
    origin_country: Optional[str] = None
    data_origin: Optional[str] = None
    date_created: Optional[datetime] = None
    last_updated: Optional[datetime] = None


class PerformerSummary(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    type: PerformerType
    name: str
    image: Optional[str] = None
