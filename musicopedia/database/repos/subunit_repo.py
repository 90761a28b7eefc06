# musicopedia/database/repos/subunit_repo.py
from __future__ import annotations

from typing import List, Optional
from uuid import UUID

from sqlalchemy import func, select
from sqlalchemy.orm import Session

from musicopedia.database.models.subunit import Subunit as DBSubunit
from musicopedia.database.repos._mapping import to_domain_subunit
from musicopedia.domain.entities.subunit import Subunit

_FIELDS = (
    "main_group_id",
    "group_identity_id",
    "name",
    "description",
    "image",
    "formation_date",
    "disband_date",
    "gender",
    "activity_status",
    "origin_country",
    "data_origin",
)


class SqlAlchemySubunitRepo:
    def __init__(self, db: Session) -> None:
        self.db = db

    def get(self, subunit_id: UUID) -> Optional[Subunit]:
        row = self.db.get(DBSubunit, subunit_id)
        return to_domain_subunit(row) if row else None

    def exists(self, subunit_id: UUID) -> bool:
        stmt = select(func.count()).select_from(DBSubunit).where(DBSubunit.id == subunit_id)
        return (self.db.execute(stmt).scalar_one() or 0) > 0

    def list(self, *, limit: int = 50, offset: int = 0) -> List[Subunit]:
        stmt = select(DBSubunit).order_by(DBSubunit.name.asc(), DBSubunit.id.asc()).offset(offset).limit(limit)
        return [to_domain_subunit(r) for r in self.db.execute(stmt).scalars().unique().all()]

    def list_by_main_group(self, group_id: UUID, *, limit: int = 50, offset: int = 0) -> List[Subunit]:
        stmt = (
            select(DBSubunit)
            .where(DBSubunit.main_group_id == group_id)
            .order_by(DBSubunit.name.asc(), DBSubunit.id.asc())
            .offset(offset)
            .limit(limit)
        )
        return [to_domain_subunit(r) for r in self.db.execute(stmt).scalars().unique().all()]

    def save(self, subunit: Subunit) -> Subunit:
        row = self.db.get(DBSubunit, subunit.id) if subunit.id else None
        if row is None:
            row = DBSubunit(**{f: getattr(subunit, f) for f in _FIELDS})
            if subunit.id is not None:
                row.id = subunit.id
            self.db.add(row)
        else:
            for f in _FIELDS:
                setattr(row, f, getattr(subunit, f))

        self.db.flush()
        self.db.refresh(row)
        return to_domain_subunit(row)

    def delete(self, subunit_id: UUID) -> bool:
        row = self.db.get(DBSubunit, subunit_id)
        if row is None:
            return False
        self.db.delete(row)
        self.db.flush()
        self.db.expire_all()
        return True
