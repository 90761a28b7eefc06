# musicopedia/database/repos/member_repo.py
from __future__ import annotations

from datetime import date
from typing import List, Optional
from uuid import UUID

from sqlalchemy import func, or_, select
from sqlalchemy.orm import Session

from musicopedia.common.logging import get_logger
from musicopedia.database.models.member import Member as DBMember
from musicopedia.database.repos._mapping import to_domain_member
from musicopedia.domain.entities.member import Member

logger = get_logger(__name__)

_FIELDS = (
    "member_name",
    "real_name",
    "description",
    "image",
    "nationality",
    "birth_date",
    "death_date",
    "solo_performer_id",
    "data_origin",
)


class SqlAlchemyMemberRepo:
    def __init__(self, db: Session) -> None:
        self.db = db

    # ---------------------------- queries ----------------------------
    def get(self, member_id: UUID) -> Optional[Member]:
        row = self.db.get(DBMember, member_id)
        return to_domain_member(row) if row else None

    def exists(self, member_id: UUID) -> bool:
        stmt = select(func.count()).select_from(DBMember).where(DBMember.id == member_id)
        return (self.db.execute(stmt).scalar_one() or 0) > 0

    def list(self, *, limit: int = 50, offset: int = 0) -> List[Member]:
        stmt = select(DBMember).order_by(DBMember.member_name.asc(), DBMember.id.asc()).offset(offset).limit(limit)
        return [to_domain_member(r) for r in self.db.execute(stmt).scalars().all()]

    def search(self, q: str, *, limit: int = 25) -> List[Member]:
        """Case-insensitive substring match on stage name or real name."""
        q = (q or "").strip().lower()
        stmt = select(DBMember)
        if q:
            pattern = f"%{q}%"
            stmt = stmt.where(
                or_(
                    func.lower(DBMember.member_name).like(pattern),
                    func.lower(DBMember.real_name).like(pattern),
                )
            )
        stmt = stmt.order_by(DBMember.member_name.asc()).limit(limit)
        return [to_domain_member(r) for r in self.db.execute(stmt).scalars().all()]

    def list_by_birth_date(self, start: Optional[date], end: Optional[date]) -> List[Member]:
        stmt = select(DBMember).where(DBMember.birth_date.is_not(None))
        if start is not None:
            stmt = stmt.where(DBMember.birth_date >= start)
        if end is not None:
            stmt = stmt.where(DBMember.birth_date <= end)
        stmt = stmt.order_by(DBMember.birth_date.asc())
        return [to_domain_member(r) for r in self.db.execute(stmt).scalars().all()]

    def list_with_solo_identity(self) -> List[Member]:
        stmt = (
            select(DBMember)
            .where(DBMember.solo_performer_id.is_not(None))
            .order_by(DBMember.member_name.asc())
        )
        return [to_domain_member(r) for r in self.db.execute(stmt).scalars().all()]

    # ---------------------------- mutations ----------------------------
    def save(self, member: Member) -> Member:
        row = self.db.get(DBMember, member.id) if member.id else None
        if row is None:
            row = DBMember(**{f: getattr(member, f) for f in _FIELDS})
            if member.id is not None:
                row.id = member.id
            self.db.add(row)
        else:
            for f in _FIELDS:
                setattr(row, f, getattr(member, f))

        self.db.flush()
        self.db.refresh(row)
        logger.debug("Saved member %s (%s)", row.id, row.member_name)
        return to_domain_member(row)

    def delete(self, member_id: UUID) -> bool:
        row = self.db.get(DBMember, member_id)
        if row is None:
            return False
        self.db.delete(row)
        self.db.flush()
        self.db.expire_all()
        return True
