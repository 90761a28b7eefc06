# musicopedia/services/mappers/member.py
from __future__ import annotations

from musicopedia.common.strings.text import is_blank
from musicopedia.domain.entities.member import Member
from musicopedia.domain.errors import MemberValidationError
from musicopedia.domain.policies.member_factory import MemberRequest
from musicopedia.services.schemas.members import MemberCreate, MemberRead, MemberSummary, MemberUpdate


def to_request_from_create(s: MemberCreate) -> MemberRequest:
    return MemberRequest(
        member_name=s.member_name,
        real_name=s.real_name,
        description=s.description,
        image=s.image,
        nationality=s.nationality,
        birth_date=s.birth_date,
        death_date=s.death_date,
        solo_performer_id=s.solo_performer_id,
        data_origin=s.data_origin,
    )


def apply_patch_to_domain(item: Member, p: MemberUpdate) -> Member:
    if p.member_name is not None:
        if is_blank(p.member_name):
            raise MemberValidationError("Member name is required", field="member_name")
        item.member_name = p.member_name.strip()
    if p.real_name is not None:
        if is_blank(p.real_name):
            raise MemberValidationError("Member real name is required", field="real_name")
        item.real_name = p.real_name.strip()

    if p.description is not None: item.description = p.description
    if p.image is not None: item.image = p.image
    if p.nationality is not None: item.nationality = p.nationality
    if p.birth_date is not None: item.birth_date = p.birth_date
    if p.death_date is not None: item.death_date = p.death_date
    if p.data_origin is not None: item.data_origin = p.data_origin

    item.check_dates()
    return item


def to_read_schema(item: Member) -> MemberRead:
    return MemberRead(
        id=item.id,
        member_name=item.member_name,
        real_name=item.real_name,
        description=item.description,
        image=item.image,
        nationality=item.nationality,
        birth_date=item.birth_date,
        death_date=item.death_date,
        solo_performer_id=item.solo_performer_id,
        solo_performer_name=item.solo_performer_name,
        has_official_solo_debut=item.has_solo_identity,
        data_origin=item.data_origin,
        date_created=item.date_created,
        last_updated=item.last_updated,
    )


def to_summary(item: Member) -> MemberSummary:
    return MemberSummary(
        id=item.id,
        member_name=item.member_name,
        real_name=item.real_name,
        image=item.image,
        has_official_solo_debut=item.has_solo_identity,
    )
