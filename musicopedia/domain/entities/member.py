# musicopedia/domain/entities/member.py
from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Optional
from uuid import UUID


@dataclass
class Member:
    """
    An individual person who can belong to groups and subunits.

    `solo_performer_id` is a weak reference to the member's official solo
    identity (a performer of type solo). It is resolved by explicit lookup
    and never owns the performer row.
    """
    id: Optional[UUID] = None
    date_created: Optional[datetime] = None
    last_updated: Optional[datetime] = None
    data_origin: Optional[str] = None

    member_name: str = ""     # stage name, required
    real_name: str = ""       # required
    description: Optional[str] = None
    image: Optional[str] = None
    nationality: Optional[str] = None
    birth_date: Optional[date] = None
    death_date: Optional[date] = None

    solo_performer_id: Optional[UUID] = None
    # display helper, filled by the persistence mapping when available
    solo_performer_name: Optional[str] = None

    def __post_init__(self):
        if not self.member_name or not self.member_name.strip():
            raise ValueError("Member.member_name is required")
        self.check_dates()

    def check_dates(self) -> None:
        if self.birth_date and self.death_date and self.death_date < self.birth_date:
            raise ValueError("Member death date cannot be before birth date")

    @property
    def is_deceased(self) -> bool:
        return self.death_date is not None

    @property
    def has_solo_identity(self) -> bool:
        return self.solo_performer_id is not None
