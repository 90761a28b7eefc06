# musicopedia/database/repos/profile_repo.py
from __future__ import annotations

from datetime import date
from typing import List, Optional
from uuid import UUID

from sqlalchemy import func, select
from sqlalchemy.orm import Session

from musicopedia.database.models.performer import (
    GroupProfile as DBGroupProfile,
    Performer as DBPerformer,
    SoloProfile as DBSoloProfile,
)
from musicopedia.database.repos._mapping import to_domain_group_profile, to_domain_solo_profile
from musicopedia.domain.entities.profiles import GroupProfile, SoloProfile
from musicopedia.domain.enums import Gender, GroupActivityStatus


class SqlAlchemyProfileRepo:
    """
    Per-type extensions (solo / group). Rows are keyed by performer id and
    the performer row must already exist.
    """

    def __init__(self, db: Session) -> None:
        self.db = db

    # ============================ solo ============================
    def get_solo(self, performer_id: UUID) -> Optional[SoloProfile]:
        row = self.db.get(DBSoloProfile, performer_id)
        return to_domain_solo_profile(row) if row else None

    def has_solo(self, performer_id: UUID) -> bool:
        stmt = select(func.count()).select_from(DBSoloProfile).where(DBSoloProfile.performer_id == performer_id)
        return (self.db.execute(stmt).scalar_one() or 0) > 0

    def list_solos(
        self,
        *,
        gender: Optional[Gender] = None,
        born_from: Optional[date] = None,
        born_to: Optional[date] = None,
        deceased: Optional[bool] = None,
        limit: int = 50,
        offset: int = 0,
    ) -> List[SoloProfile]:
        stmt = select(DBSoloProfile).join(DBPerformer, DBPerformer.id == DBSoloProfile.performer_id)
        if gender is not None:
            stmt = stmt.where(DBSoloProfile.gender == Gender(gender))
        if born_from is not None:
            stmt = stmt.where(DBSoloProfile.birth_date >= born_from)
        if born_to is not None:
            stmt = stmt.where(DBSoloProfile.birth_date <= born_to)
        if deceased is True:
            stmt = stmt.where(DBSoloProfile.death_date.is_not(None))
        elif deceased is False:
            stmt = stmt.where(DBSoloProfile.death_date.is_(None))
        stmt = stmt.order_by(DBPerformer.name.asc()).offset(offset).limit(limit)
        return [to_domain_solo_profile(r) for r in self.db.execute(stmt).scalars().all()]

    def save_solo(self, profile: SoloProfile) -> SoloProfile:
        if profile.performer_id is None:
            raise ValueError("Solo profile needs a persisted performer")
        row = self.db.get(DBSoloProfile, profile.performer_id)
        if row is None:
            row = DBSoloProfile(performer_id=profile.performer_id)
            self.db.add(row)
        row.birth_date = profile.birth_date
        row.death_date = profile.death_date
        row.gender = profile.gender
        row.group_affiliation_status = profile.group_affiliation_status
        self.db.flush()
        self.db.refresh(row)
        return to_domain_solo_profile(row)

    # ============================ group ============================
    def get_group(self, performer_id: UUID) -> Optional[GroupProfile]:
        row = self.db.get(DBGroupProfile, performer_id)
        return to_domain_group_profile(row) if row else None

    def has_group(self, performer_id: UUID) -> bool:
        stmt = select(func.count()).select_from(DBGroupProfile).where(DBGroupProfile.performer_id == performer_id)
        return (self.db.execute(stmt).scalar_one() or 0) > 0

    def list_groups(
        self,
        *,
        gender: Optional[Gender] = None,
        activity_status: Optional[GroupActivityStatus] = None,
        formed_from: Optional[date] = None,
        formed_to: Optional[date] = None,
        disbanded: Optional[bool] = None,
        limit: int = 50,
        offset: int = 0,
    ) -> List[GroupProfile]:
        stmt = select(DBGroupProfile).join(DBPerformer, DBPerformer.id == DBGroupProfile.performer_id)
        if gender is not None:
            stmt = stmt.where(DBGroupProfile.gender == Gender(gender))
        if activity_status is not None:
            stmt = stmt.where(DBGroupProfile.activity_status == GroupActivityStatus(activity_status))
        if formed_from is not None:
            stmt = stmt.where(DBGroupProfile.formation_date >= formed_from)
        if formed_to is not None:
            stmt = stmt.where(DBGroupProfile.formation_date <= formed_to)
        if disbanded is True:
            stmt = stmt.where(DBGroupProfile.disband_date.is_not(None))
        elif disbanded is False:
            stmt = stmt.where(DBGroupProfile.disband_date.is_(None))
        stmt = stmt.order_by(DBPerformer.name.asc()).offset(offset).limit(limit)
        return [to_domain_group_profile(r) for r in self.db.execute(stmt).scalars().all()]

    def save_group(self, profile: GroupProfile) -> GroupProfile:
        if profile.performer_id is None:
            raise ValueError("Group profile needs a persisted performer")
        row = self.db.get(DBGroupProfile, profile.performer_id)
        if row is None:
            row = DBGroupProfile(performer_id=profile.performer_id)
            self.db.add(row)
        row.formation_date = profile.formation_date
        row.disband_date = profile.disband_date
        row.gender = profile.gender
        row.activity_status = profile.activity_status
        self.db.flush()
        self.db.refresh(row)
        return to_domain_group_profile(row)

    # ============================ either ============================
    def save(self, profile):
        """Dispatch on the profile variant."""
        if isinstance(profile, SoloProfile):
            return self.save_solo(profile)
        if isinstance(profile, GroupProfile):
            return self.save_group(profile)
        raise TypeError(f"Unsupported profile: {type(profile).__name__}")
