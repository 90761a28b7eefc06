# musicopedia/services/schemas/memberships.py
from __future__ import annotations

from datetime import date
from typing import Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict

from musicopedia.domain.enums import MembershipStatus


class GroupMembershipCreate(BaseModel):
    group_id: UUID
    member_id: UUID
    status: MembershipStatus = MembershipStatus.current
    join_date: date
    leave_date: Optional[date] = None


class GroupMembershipUpdate(BaseModel):
    """A status change goes through the transition table; `leave_date` travels with it."""
    status: Optional[MembershipStatus] = None
    join_date: Optional[date] = None
    leave_date: Optional[date] = None


class GroupMembershipRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    group_id: UUID
    member_id: UUID
    status: MembershipStatus
    join_date: date
    leave_date: Optional[date] = None


class MembershipCount(BaseModel):
    group_id: UUID
    status: Optional[MembershipStatus] = None
    count: int


class SubunitMembershipRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    subunit_id: UUID
    member_id: UUID
