# musicopedia/database/models/performer.py
from __future__ import annotations

from datetime import date
from typing import Optional
from uuid import UUID as UUID_t

from sqlalchemy import (
    CheckConstraint, Date, ForeignKey, Index, String, Text, Uuid, Enum as SAEnum
)
from sqlalchemy.orm import Mapped, mapped_column, relationship

from musicopedia.database.core.main import Base
from musicopedia.database.core.service_object import ServiceObject
from musicopedia.domain.enums import (
    Gender,
    GroupActivityStatus,
    GroupAffiliationStatus,
    PerformerType,
)

# Shared enum types (one DB type each, reused by several tables)
performer_type_enum = SAEnum(PerformerType, name="performer_type")
gender_enum = SAEnum(Gender, name="performer_gender")
activity_status_enum = SAEnum(GroupActivityStatus, name="group_activity_status")
affiliation_status_enum = SAEnum(GroupAffiliationStatus, name="group_affiliation_status")


# =======================
# Performers
# =======================
class Performer(ServiceObject, Base):
    """
    Common identity row for every act. The per-type extension lives in
    `solo_profiles` / `group_profiles`, keyed by the performer id.
    """
    __tablename__ = "performers"
    __table_args__ = (
        Index("ix_performers_name", "name"),
        Index("ix_performers_type", "type"),
    )

    name: Mapped[str] = mapped_column(String(300), nullable=False)
    type: Mapped[PerformerType] = mapped_column(performer_type_enum, nullable=False)
    external_id: Mapped[Optional[str]] = mapped_column(String(64), unique=True)
    description: Mapped[Optional[str]] = mapped_column(Text)
    image: Mapped[Optional[str]] = mapped_column(Text)
    primary_language: Mapped[Optional[str]] = mapped_column(String(64))
    genre: Mapped[Optional[str]] = mapped_column(String(128))
    origin_country: Mapped[Optional[str]] = mapped_column(String(64))

    solo_profile: Mapped[Optional["SoloProfile"]] = relationship(
        back_populates="performer",
        uselist=False,
        cascade="all, delete-orphan",
        passive_deletes=True,
    )
    group_profile: Mapped[Optional["GroupProfile"]] = relationship(
        back_populates="performer",
        uselist=False,
        cascade="all, delete-orphan",
        passive_deletes=True,
    )

    def __repr__(self) -> str:
        return f"<Performer id={self.id} type={self.type} name={self.name!r}>"


class SoloProfile(Base):
    """Solo-only attributes; shares its primary key with the performer row."""
    __tablename__ = "solo_profiles"
    __table_args__ = (
        CheckConstraint(
            "death_date IS NULL OR birth_date IS NULL OR death_date >= birth_date",
            name="death_after_birth",
        ),
    )

    performer_id: Mapped[UUID_t] = mapped_column(
        Uuid(as_uuid=True),
        ForeignKey("performers.id", ondelete="CASCADE"),
        primary_key=True,
    )
    birth_date: Mapped[Optional[date]] = mapped_column(Date)
    death_date: Mapped[Optional[date]] = mapped_column(Date)
    gender: Mapped[Optional[Gender]] = mapped_column(gender_enum)
    group_affiliation_status: Mapped[Optional[GroupAffiliationStatus]] = mapped_column(affiliation_status_enum)

    performer: Mapped["Performer"] = relationship(back_populates="solo_profile", lazy="joined")

    def __repr__(self) -> str:
        return f"<SoloProfile performer_id={self.performer_id}>"


class GroupProfile(Base):
    """Group-only attributes; shares its primary key with the performer row."""
    __tablename__ = "group_profiles"
    __table_args__ = (
        CheckConstraint(
            "disband_date IS NULL OR formation_date IS NULL OR disband_date >= formation_date",
            name="disband_after_formation",
        ),
    )

    performer_id: Mapped[UUID_t] = mapped_column(
        Uuid(as_uuid=True),
        ForeignKey("performers.id", ondelete="CASCADE"),
        primary_key=True,
    )
    formation_date: Mapped[Optional[date]] = mapped_column(Date)
    disband_date: Mapped[Optional[date]] = mapped_column(Date)
    gender: Mapped[Optional[Gender]] = mapped_column(gender_enum)
    activity_status: Mapped[Optional[GroupActivityStatus]] = mapped_column(activity_status_enum)

    performer: Mapped["Performer"] = relationship(back_populates="group_profile", lazy="joined")

    def __repr__(self) -> str:
        return f"<GroupProfile performer_id={self.performer_id}>"
