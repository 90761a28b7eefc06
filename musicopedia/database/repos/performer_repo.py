# musicopedia/database/repos/performer_repo.py
from __future__ import annotations

from typing import List, Optional
from uuid import UUID

from sqlalchemy import func, select
from sqlalchemy.orm import Session

from musicopedia.common.logging import get_logger
from musicopedia.database.models.performer import Performer as DBPerformer
from musicopedia.database.repos._mapping import to_domain_performer
from musicopedia.domain.entities.performer import Performer
from musicopedia.domain.enums.performer_type import PerformerType

logger = get_logger(__name__)

_UPDATABLE = (
    "name",
    "external_id",
    "description",
    "image",
    "primary_language",
    "genre",
    "origin_country",
    "data_origin",
)


class SqlAlchemyPerformerRepo:
    """
    Performer store. Satisfies PerformerLookupPort (`get`).

    The type tag is fixed once a row exists; `save` refuses to change it.
    """

    def __init__(self, db: Session) -> None:
        self.db = db

    # ---------------------------- queries ----------------------------
    def get(self, performer_id: UUID) -> Optional[Performer]:
        row = self.db.get(DBPerformer, performer_id)
        return to_domain_performer(row) if row else None

    def get_by_external_id(self, external_id: str) -> Optional[Performer]:
        stmt = select(DBPerformer).where(DBPerformer.external_id == external_id).limit(1)
        row = self.db.execute(stmt).scalars().first()
        return to_domain_performer(row) if row else None

    def exists(self, performer_id: UUID) -> bool:
        stmt = select(func.count()).select_from(DBPerformer).where(DBPerformer.id == performer_id)
        return (self.db.execute(stmt).scalar_one() or 0) > 0

    def exists_external_id(self, external_id: str, *, exclude_id: Optional[UUID] = None) -> bool:
        stmt = select(func.count()).select_from(DBPerformer).where(DBPerformer.external_id == external_id)
        if exclude_id is not None:
            stmt = stmt.where(DBPerformer.id != exclude_id)
        return (self.db.execute(stmt).scalar_one() or 0) > 0

    def list(
        self,
        *,
        type: Optional[PerformerType] = None,
        limit: int = 50,
        offset: int = 0,
    ) -> List[Performer]:
        stmt = select(DBPerformer)
        if type is not None:
            stmt = stmt.where(DBPerformer.type == PerformerType(type))
        stmt = stmt.order_by(DBPerformer.name.asc(), DBPerformer.id.asc()).offset(offset).limit(limit)
        return [to_domain_performer(r) for r in self.db.execute(stmt).scalars().all()]

    def search(self, q: str, *, type: Optional[PerformerType] = None, limit: int = 25) -> List[Performer]:
        q = (q or "").strip().lower()
        stmt = select(DBPerformer)
        if q:
            stmt = stmt.where(func.lower(DBPerformer.name).like(f"%{q}%"))
        if type is not None:
            stmt = stmt.where(DBPerformer.type == PerformerType(type))
        stmt = stmt.order_by(DBPerformer.name.asc()).limit(limit)
        return [to_domain_performer(r) for r in self.db.execute(stmt).scalars().all()]

    def count_by_type(self) -> dict[str, int]:
        stmt = select(DBPerformer.type, func.count()).group_by(DBPerformer.type)
        return {PerformerType(t).value: int(n) for t, n in self.db.execute(stmt)}

    # ---------------------------- mutations ----------------------------
    def save(self, performer: Performer) -> Performer:
        """
        Insert or update. Rows are matched on `performer.id`; an id that is
        not stored yet is inserted under that id.
        """
        row = self.db.get(DBPerformer, performer.id) if performer.id else None
        if row is None:
            row = DBPerformer(type=performer.type, **{f: getattr(performer, f) for f in _UPDATABLE})
            if performer.id is not None:
                row.id = performer.id
            self.db.add(row)
        else:
            if row.type is not performer.type:
                raise ValueError(
                    f"Performer type cannot change from {row.type.value} to {performer.type.value}"
                )
            for f in _UPDATABLE:
                setattr(row, f, getattr(performer, f))

        self.db.flush()
        self.db.refresh(row)
        logger.debug("Saved performer %s (%s)", row.id, row.type.value)
        return to_domain_performer(row)

    def delete(self, performer_id: UUID) -> bool:
        row = self.db.get(DBPerformer, performer_id)
        if row is None:
            return False
        self.db.delete(row)
        self.db.flush()
        # DB-side cascades / SET NULL touched other rows
        self.db.expire_all()
        return True
