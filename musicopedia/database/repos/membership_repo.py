# musicopedia/database/repos/membership_repo.py
from __future__ import annotations

from datetime import date
from typing import List, Optional
from uuid import UUID

from sqlalchemy import and_, func, select
from sqlalchemy.orm import Session

from musicopedia.database.models.membership import (
    GroupMembership as DBGroupMembership,
    SubunitMembership as DBSubunitMembership,
)
from musicopedia.database.repos._mapping import (
    to_domain_group_membership,
    to_domain_subunit_membership,
)
from musicopedia.domain.entities.membership import GroupMembership, SubunitMembership
from musicopedia.domain.enums.membership_status import MembershipStatus


class SqlAlchemyGroupMembershipRepo:
    """Ledger rows keyed by (group_id, member_id)."""

    def __init__(self, db: Session) -> None:
        self.db = db

    # ---------------------------- queries ----------------------------
    def get(self, group_id: UUID, member_id: UUID) -> Optional[GroupMembership]:
        row = self.db.get(DBGroupMembership, (group_id, member_id))
        return to_domain_group_membership(row) if row else None

    def exists(self, group_id: UUID, member_id: UUID) -> bool:
        stmt = select(func.count()).select_from(DBGroupMembership).where(
            and_(
                DBGroupMembership.group_id == group_id,
                DBGroupMembership.member_id == member_id,
            )
        )
        return (self.db.execute(stmt).scalar_one() or 0) > 0

    def list_by_group(self, group_id: UUID, *, status: Optional[MembershipStatus] = None) -> List[GroupMembership]:
        stmt = select(DBGroupMembership).where(DBGroupMembership.group_id == group_id)
        if status is not None:
            stmt = stmt.where(DBGroupMembership.status == MembershipStatus(status))
        stmt = stmt.order_by(DBGroupMembership.join_date.asc())
        return [to_domain_group_membership(r) for r in self.db.execute(stmt).scalars().all()]

    def list_by_member(self, member_id: UUID) -> List[GroupMembership]:
        stmt = (
            select(DBGroupMembership)
            .where(DBGroupMembership.member_id == member_id)
            .order_by(DBGroupMembership.join_date.asc())
        )
        return [to_domain_group_membership(r) for r in self.db.execute(stmt).scalars().all()]

    def list_joined_between(
        self, group_id: UUID, start: Optional[date] = None, end: Optional[date] = None
    ) -> List[GroupMembership]:
        stmt = select(DBGroupMembership).where(DBGroupMembership.group_id == group_id)
        if start is not None:
            stmt = stmt.where(DBGroupMembership.join_date >= start)
        if end is not None:
            stmt = stmt.where(DBGroupMembership.join_date <= end)
        stmt = stmt.order_by(DBGroupMembership.join_date.asc())
        return [to_domain_group_membership(r) for r in self.db.execute(stmt).scalars().all()]

    def count_by_group(self, group_id: UUID, *, status: Optional[MembershipStatus] = None) -> int:
        stmt = select(func.count()).select_from(DBGroupMembership).where(DBGroupMembership.group_id == group_id)
        if status is not None:
            stmt = stmt.where(DBGroupMembership.status == MembershipStatus(status))
        return int(self.db.execute(stmt).scalar_one() or 0)

    # ---------------------------- mutations ----------------------------
    def save(self, membership: GroupMembership) -> GroupMembership:
        """Upsert on the (group_id, member_id) key."""
        row = self.db.get(DBGroupMembership, membership.key)
        if row is None:
            row = DBGroupMembership(group_id=membership.group_id, member_id=membership.member_id)
            self.db.add(row)
        row.status = membership.status
        row.join_date = membership.join_date
        row.leave_date = membership.leave_date
        self.db.flush()
        return to_domain_group_membership(row)

    def delete(self, group_id: UUID, member_id: UUID) -> bool:
        row = self.db.get(DBGroupMembership, (group_id, member_id))
        if row is None:
            return False
        self.db.delete(row)
        self.db.flush()
        return True


class SqlAlchemySubunitMembershipRepo:
    """Existence-only subunit <-> member links."""

    def __init__(self, db: Session) -> None:
        self.db = db

    def exists(self, subunit_id: UUID, member_id: UUID) -> bool:
        return self.db.get(DBSubunitMembership, (subunit_id, member_id)) is not None

    def list_by_subunit(self, subunit_id: UUID) -> List[SubunitMembership]:
        stmt = select(DBSubunitMembership).where(DBSubunitMembership.subunit_id == subunit_id)
        return [to_domain_subunit_membership(r) for r in self.db.execute(stmt).scalars().all()]

    def list_by_member(self, member_id: UUID) -> List[SubunitMembership]:
        stmt = select(DBSubunitMembership).where(DBSubunitMembership.member_id == member_id)
        return [to_domain_subunit_membership(r) for r in self.db.execute(stmt).scalars().all()]

    def add(self, link: SubunitMembership) -> SubunitMembership:
        """Idempotent: an existing link is returned unchanged."""
        row = self.db.get(DBSubunitMembership, (link.subunit_id, link.member_id))
        if row is None:
            row = DBSubunitMembership(subunit_id=link.subunit_id, member_id=link.member_id)
            self.db.add(row)
            self.db.flush()
        return to_domain_subunit_membership(row)

    def remove(self, subunit_id: UUID, member_id: UUID) -> bool:
        row = self.db.get(DBSubunitMembership, (subunit_id, member_id))
        if row is None:
            return False
        self.db.delete(row)
        self.db.flush()
        return True
