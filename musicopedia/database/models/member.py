# musicopedia/database/models/member.py
from __future__ import annotations

from datetime import date
from typing import Optional, List, TYPE_CHECKING
from uuid import UUID as UUID_t

from sqlalchemy import CheckConstraint, Date, ForeignKey, Index, String, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from musicopedia.database.core.main import Base
from musicopedia.database.core.service_object import ServiceObject

if TYPE_CHECKING:
    from .performer import Performer
    from .membership import GroupMembership


class Member(ServiceObject, Base):
    """
    A person who can belong to groups/subunits.
    `solo_performer_id` points at the member's solo identity; deleting that
    performer only clears the link.
    """
    __tablename__ = "members"
    __table_args__ = (
        Index("ix_members_member_name", "member_name"),
        Index("ix_members_solo_performer_id", "solo_performer_id"),
        CheckConstraint(
            "death_date IS NULL OR birth_date IS NULL OR death_date >= birth_date",
            name="death_after_birth",
        ),
    )

    member_name: Mapped[str] = mapped_column(String(255), nullable=False)
    real_name: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[Optional[str]] = mapped_column(Text)
    image: Mapped[Optional[str]] = mapped_column(Text)
    nationality: Mapped[Optional[str]] = mapped_column(String(64))
    birth_date: Mapped[Optional[date]] = mapped_column(Date)
    death_date: Mapped[Optional[date]] = mapped_column(Date)

    solo_performer_id: Mapped[Optional[UUID_t]] = mapped_column(
        Uuid(as_uuid=True),
        ForeignKey("performers.id", ondelete="SET NULL"),
        nullable=True,
    )

    solo_performer: Mapped[Optional["Performer"]] = relationship("Performer", lazy="joined")

    group_memberships: Mapped[List["GroupMembership"]] = relationship(
        "GroupMembership",
        back_populates="member",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )

    def __repr__(self) -> str:
        return f"<Member id={self.id} name={self.member_name!r}>"
