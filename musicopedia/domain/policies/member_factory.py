# musicopedia/domain/policies/member_factory.py
from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional
from uuid import UUID

from musicopedia.common.strings.text import is_blank
from musicopedia.domain.entities.member import Member
from musicopedia.domain.enums.performer_type import PerformerType
from musicopedia.domain.errors import MemberValidationError, ReferenceIntegrityError, SoloLinkError
from musicopedia.domain.ports.performer_lookup import PerformerLookupPort


@dataclass(frozen=True)
class MemberRequest:
    member_name: Optional[str] = None
    real_name: Optional[str] = None
    description: Optional[str] = None
    image: Optional[str] = None
    nationality: Optional[str] = None
    birth_date: Optional[date] = None
    death_date: Optional[date] = None
    solo_performer_id: Optional[UUID] = None
    data_origin: Optional[str] = None


def create_member(request: MemberRequest, lookup: Optional[PerformerLookupPort] = None) -> Member:
    """
    Validate and build a Member. A `solo_performer_id` on the request is
    resolved through `lookup` and must point at a solo performer.
    """
    if is_blank(request.member_name):
        raise MemberValidationError("Member name is required", field="member_name")
    if is_blank(request.real_name):
        raise MemberValidationError("Member real name is required", field="real_name")
    if request.birth_date and request.death_date and request.death_date < request.birth_date:
        raise MemberValidationError("Member death date cannot be before birth date", field="death_date")

    member = Member(
        member_name=request.member_name.strip(),
        real_name=request.real_name.strip(),
        description=request.description,
        image=request.image,
        nationality=request.nationality,
        birth_date=request.birth_date,
        death_date=request.death_date,
        data_origin=request.data_origin,
    )
    if request.solo_performer_id is not None:
        if lookup is None:
            raise ValueError("A performer lookup is required to resolve solo_performer_id")
        link_solo_identity(member, request.solo_performer_id, lookup)
    return member


def link_solo_identity(member: Member, performer_id: UUID, lookup: PerformerLookupPort) -> Member:
    """Point `member` at its official solo identity. Only solo performers qualify."""
    performer = lookup.get(performer_id)
    if performer is None:
        raise ReferenceIntegrityError(f"Solo artist not found with ID: {performer_id}")
    if performer.type is not PerformerType.solo:
        raise SoloLinkError(member.member_name, performer.name, performer.type.value)
    member.solo_performer_id = performer.id
    member.solo_performer_name = performer.name
    return member


def unlink_solo_identity(member: Member) -> Member:
    member.solo_performer_id = None
    member.solo_performer_name = None
    return member
