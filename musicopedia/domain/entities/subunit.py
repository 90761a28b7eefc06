# musicopedia/domain/entities/subunit.py
from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Optional
from uuid import UUID

from musicopedia.domain.enums import Gender, GroupActivityStatus


@dataclass(frozen=True)
class SubunitRequest:
    """Fields of a subunit create/replace request; references travel separately."""
    name: Optional[str] = None
    description: Optional[str] = None
    image: Optional[str] = None
    formation_date: Optional[date] = None
    disband_date: Optional[date] = None
    gender: Optional[Gender] = None
    activity_status: Optional[GroupActivityStatus] = None
    origin_country: Optional[str] = None
    data_origin: Optional[str] = None


@dataclass
class Subunit:
    """
    A named sub-formation of a main group. Not a performer profile:
    it only references groups.

      - main_group_id      required, the owning group
      - group_identity_id  optional second group, set when the subunit
                           debuted under its own name and keeps its own ledger
    """
    id: Optional[UUID] = None
    date_created: Optional[datetime] = None
    last_updated: Optional[datetime] = None
    data_origin: Optional[str] = None

    main_group_id: UUID = None  # required
    group_identity_id: Optional[UUID] = None

    name: str = ""
    description: Optional[str] = None
    image: Optional[str] = None
    formation_date: Optional[date] = None
    disband_date: Optional[date] = None
    gender: Optional[Gender] = None
    activity_status: Optional[GroupActivityStatus] = None
    origin_country: Optional[str] = None

    # display helpers, filled by the persistence mapping when available
    main_group_name: Optional[str] = None
    group_identity_name: Optional[str] = None

    def __post_init__(self):
        if self.main_group_id is None:
            raise ValueError("Subunit.main_group_id is required")
        if self.formation_date and self.disband_date and self.disband_date < self.formation_date:
            raise ValueError("Disband date cannot be before formation date")

    @property
    def has_own_ledger(self) -> bool:
        return self.group_identity_id is not None
