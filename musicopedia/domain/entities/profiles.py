# musicopedia/domain/entities/profiles.py
from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional, Union
from uuid import UUID

from musicopedia.domain.entities.performer import Performer
from musicopedia.domain.enums import Gender, GroupActivityStatus, GroupAffiliationStatus, PerformerType
from musicopedia.domain.errors import PerformerValidationError, ProfileTypeError


def _check_profile_type(performer: Performer, expected: PerformerType, label: str) -> None:
    if performer is None:
        raise ProfileTypeError(f"{label} profile requires a performer", field="performer")
    if performer.type is not expected:
        raise ProfileTypeError(
            f"{label} profile cannot be attached to a performer of type {performer.type.value}",
            field="type",
        )


@dataclass(frozen=True)
class SoloProfile:
    """
    Solo-only attributes sharing the performer's identity.
    Only constructible for a performer whose type is `solo`.
    """
    performer: Performer
    birth_date: Optional[date] = None
    death_date: Optional[date] = None
    gender: Optional[Gender] = None
    group_affiliation_status: Optional[GroupAffiliationStatus] = None

    def __post_init__(self):
        _check_profile_type(self.performer, PerformerType.solo, "Solo")
        if self.birth_date and self.death_date and self.death_date < self.birth_date:
            raise PerformerValidationError("Death date cannot be before birth date", field="death_date")

    @property
    def performer_id(self) -> Optional[UUID]:
        return self.performer.id

    @property
    def is_deceased(self) -> bool:
        return self.death_date is not None


@dataclass(frozen=True)
class GroupProfile:
    """
    Group-only attributes sharing the performer's identity.
    Only constructible for a performer whose type is `group`.
    """
    performer: Performer
    formation_date: Optional[date] = None
    disband_date: Optional[date] = None
    gender: Optional[Gender] = None
    activity_status: Optional[GroupActivityStatus] = None

    def __post_init__(self):
        _check_profile_type(self.performer, PerformerType.group, "Group")
        if self.formation_date and self.disband_date and self.disband_date < self.formation_date:
            raise PerformerValidationError("Disband date cannot be before formation date", field="disband_date")

    @property
    def performer_id(self) -> Optional[UUID]:
        return self.performer.id


@dataclass(frozen=True)
class PerformerRecord:
    """A performer plus the profile its type calls for (None for franchise/various)."""
    performer: Performer
    profile: Optional[Union[SoloProfile, GroupProfile]] = None

    @property
    def solo(self) -> Optional[SoloProfile]:
        return self.profile if isinstance(self.profile, SoloProfile) else None

    @property
    def group(self) -> Optional[GroupProfile]:
        return self.profile if isinstance(self.profile, GroupProfile) else None
