# musicopedia/domain/policies/profile_builder.py
"""
Construction of the type-specific profile that shares a performer's id.

Attributes travel as immutable values (SoloAttributes / GroupAttributes);
each variant has one validating constructor. The constructor either reuses
a performer that already exists or creates one inline from a
PerformerRequest through the factory, so the factory's type policy always
runs for a new identity.
"""
from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional, Union

from musicopedia.domain.entities.performer import Performer, PerformerRequest
from musicopedia.domain.entities.profiles import GroupProfile, SoloProfile
from musicopedia.domain.enums import Gender, GroupActivityStatus, GroupAffiliationStatus, PerformerType
from musicopedia.domain.errors import ProfileTypeError
from musicopedia.domain.policies.performer_factory import PerformerFactory

_default_factory = PerformerFactory()


@dataclass(frozen=True)
class SoloAttributes:
    birth_date: Optional[date] = None
    death_date: Optional[date] = None
    gender: Optional[Gender] = None
    group_affiliation_status: Optional[GroupAffiliationStatus] = None


@dataclass(frozen=True)
class GroupAttributes:
    formation_date: Optional[date] = None
    disband_date: Optional[date] = None
    gender: Optional[Gender] = None
    activity_status: Optional[GroupActivityStatus] = None


ProfileAttributes = Union[SoloAttributes, GroupAttributes]
Profile = Union[SoloProfile, GroupProfile]


def _resolve_performer(
    performer: Optional[Performer],
    request: Optional[PerformerRequest],
    expected: PerformerType,
    factory: PerformerFactory,
) -> Performer:
    if performer is not None:
        return performer
    if request is None:
        raise ValueError("Either an existing performer or a performer request is required")
    if PerformerFactory.resolve_type(request.type) is not expected:
        raise ProfileTypeError(
            f"Cannot build a {expected.value} profile from a {request.type!r} request", field="type"
        )
    return factory.create(request)


def build_solo_profile(
    attrs: SoloAttributes = SoloAttributes(),
    *,
    performer: Optional[Performer] = None,
    request: Optional[PerformerRequest] = None,
    factory: PerformerFactory = _default_factory,
) -> SoloProfile:
    base = _resolve_performer(performer, request, PerformerType.solo, factory)
    return SoloProfile(
        performer=base,
        birth_date=attrs.birth_date,
        death_date=attrs.death_date,
        gender=attrs.gender,
        group_affiliation_status=attrs.group_affiliation_status,
    )


def build_group_profile(
    attrs: GroupAttributes = GroupAttributes(),
    *,
    performer: Optional[Performer] = None,
    request: Optional[PerformerRequest] = None,
    factory: PerformerFactory = _default_factory,
) -> GroupProfile:
    base = _resolve_performer(performer, request, PerformerType.group, factory)
    return GroupProfile(
        performer=base,
        formation_date=attrs.formation_date,
        disband_date=attrs.disband_date,
        gender=attrs.gender,
        activity_status=attrs.activity_status,
    )


def attach_profile(performer: Performer, attrs: Optional[ProfileAttributes] = None) -> Optional[Profile]:
    """
    Build the profile `performer.type` calls for.

      solo      -> SoloProfile (default attributes if none given)
      group     -> GroupProfile (default attributes if none given)
      franchise / various -> None; passing attributes is an error
    Attributes of the other variant raise ProfileTypeError.
    """
    if performer.type is PerformerType.solo:
        if attrs is not None and not isinstance(attrs, SoloAttributes):
            raise ProfileTypeError("Group attributes cannot be attached to a solo performer", field="type")
        return build_solo_profile(attrs or SoloAttributes(), performer=performer)

    if performer.type is PerformerType.group:
        if attrs is not None and not isinstance(attrs, GroupAttributes):
            raise ProfileTypeError("Solo attributes cannot be attached to a group performer", field="type")
        return build_group_profile(attrs or GroupAttributes(), performer=performer)

    if attrs is not None:
        raise ProfileTypeError(
            f"Performers of type {performer.type.value} do not carry a profile", field="type"
        )
    return None
