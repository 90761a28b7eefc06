# musicopedia/database/models/subunit.py
from __future__ import annotations

from datetime import date
from typing import Optional
from uuid import UUID as UUID_t

from sqlalchemy import CheckConstraint, Date, ForeignKey, Index, String, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from musicopedia.database.core.main import Base
from musicopedia.database.core.service_object import ServiceObject
from musicopedia.database.models.performer import GroupProfile, activity_status_enum, gender_enum
from musicopedia.domain.enums import Gender, GroupActivityStatus


class Subunit(ServiceObject, Base):
    """
    Sub-formation of a main group. Removed together with its main group;
    the optional group identity link is cleared instead.
    """
    __tablename__ = "subunits"
    __table_args__ = (
        Index("ix_subunits_main_group_id", "main_group_id"),
        Index("ix_subunits_name", "name"),
        CheckConstraint(
            "disband_date IS NULL OR formation_date IS NULL OR disband_date >= formation_date",
            name="disband_after_formation",
        ),
    )

    main_group_id: Mapped[UUID_t] = mapped_column(
        Uuid(as_uuid=True),
        ForeignKey("group_profiles.performer_id", ondelete="CASCADE"),
        nullable=False,
    )
    group_identity_id: Mapped[Optional[UUID_t]] = mapped_column(
        Uuid(as_uuid=True),
        ForeignKey("group_profiles.performer_id", ondelete="SET NULL"),
        nullable=True,
    )

    name: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[Optional[str]] = mapped_column(Text)
    image: Mapped[Optional[str]] = mapped_column(Text)
    formation_date: Mapped[Optional[date]] = mapped_column(Date)
    disband_date: Mapped[Optional[date]] = mapped_column(Date)
    gender: Mapped[Optional[Gender]] = mapped_column(gender_enum)
    activity_status: Mapped[Optional[GroupActivityStatus]] = mapped_column(activity_status_enum)
    origin_country: Mapped[Optional[str]] = mapped_column(String(64))

    main_group: Mapped[GroupProfile] = relationship(
        GroupProfile, foreign_keys=[main_group_id], lazy="joined"
    )
    group_identity: Mapped[Optional[GroupProfile]] = relationship(
        GroupProfile, foreign_keys=[group_identity_id], lazy="joined"
    )

    def __repr__(self) -> str:
        return f"<Subunit id={self.id} name={self.name!r}>"
