# musicopedia/database/models/membership.py
from __future__ import annotations

from datetime import date
from typing import Optional, TYPE_CHECKING
from uuid import UUID as UUID_t

from sqlalchemy import Date, ForeignKey, Index, Uuid, Enum as SAEnum
from sqlalchemy.orm import Mapped, mapped_column, relationship

from musicopedia.database.core.main import Base
from musicopedia.domain.enums import MembershipStatus

if TYPE_CHECKING:
    from .member import Member


class GroupMembership(Base):
    """
    Ledger row: one member in one group, keyed by the pair.
    No leave >= join check here; death sync may write a leave date earlier
    than the join date.
    """
    __tablename__ = "group_memberships"
    __table_args__ = (
        Index("ix_group_memberships_member_id", "member_id"),
        Index("ix_group_memberships_group_status", "group_id", "status"),
    )

    group_id: Mapped[UUID_t] = mapped_column(
        Uuid(as_uuid=True),
        ForeignKey("group_profiles.performer_id", ondelete="CASCADE"),
        primary_key=True,
    )
    member_id: Mapped[UUID_t] = mapped_column(
        Uuid(as_uuid=True),
        ForeignKey("members.id", ondelete="CASCADE"),
        primary_key=True,
    )
    status: Mapped[MembershipStatus] = mapped_column(
        SAEnum(MembershipStatus, name="membership_status"),
        nullable=False,
        default=MembershipStatus.current,
    )
    join_date: Mapped[date] = mapped_column(Date, nullable=False)
    leave_date: Mapped[Optional[date]] = mapped_column(Date)

    member: Mapped["Member"] = relationship("Member", back_populates="group_memberships")

    def __repr__(self) -> str:
        return f"<GroupMembership group={self.group_id} member={self.member_id} status={self.status}>"


class SubunitMembership(Base):
    """Association row Subunit <-> Member; no status or dates."""
    __tablename__ = "subunit_memberships"
    __table_args__ = (
        Index("ix_subunit_memberships_member_id", "member_id"),
    )

    subunit_id: Mapped[UUID_t] = mapped_column(
        Uuid(as_uuid=True),
        ForeignKey("subunits.id", ondelete="CASCADE"),
        primary_key=True,
    )
    member_id: Mapped[UUID_t] = mapped_column(
        Uuid(as_uuid=True),
        ForeignKey("members.id", ondelete="CASCADE"),
        primary_key=True,
    )
