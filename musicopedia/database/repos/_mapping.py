# musicopedia/database/repos/_mapping.py
from __future__ import annotations

from musicopedia.database.models.member import Member as DBMember
from musicopedia.database.models.membership import (
    GroupMembership as DBGroupMembership,
    SubunitMembership as DBSubunitMembership,
)
from musicopedia.database.models.performer import (
    GroupProfile as DBGroupProfile,
    Performer as DBPerformer,
    SoloProfile as DBSoloProfile,
)
from musicopedia.database.models.subunit import Subunit as DBSubunit
from musicopedia.domain.entities.member import Member
from musicopedia.domain.entities.membership import GroupMembership, SubunitMembership
from musicopedia.domain.entities.performer import Performer
from musicopedia.domain.entities.profiles import GroupProfile, SoloProfile
from musicopedia.domain.entities.subunit import Subunit


def to_domain_performer(row: DBPerformer) -> Performer:
    return Performer(
        id=row.id,
        date_created=row.date_created,
        last_updated=row.last_updated,
        data_origin=row.data_origin,
        name=row.name,
        type=row.type,
        external_id=row.external_id,
        description=row.description,
        image=row.image,
        primary_language=row.primary_language,
        genre=row.genre,
        origin_country=row.origin_country,
    )


def to_domain_solo_profile(row: DBSoloProfile) -> SoloProfile:
    return SoloProfile(
        performer=to_domain_performer(row.performer),
        birth_date=row.birth_date,
        death_date=row.death_date,
        gender=row.gender,
        group_affiliation_status=row.group_affiliation_status,
    )


def to_domain_group_profile(row: DBGroupProfile) -> GroupProfile:
    return GroupProfile(
        performer=to_domain_performer(row.performer),
        formation_date=row.formation_date,
        disband_date=row.disband_date,
        gender=row.gender,
        activity_status=row.activity_status,
    )


def to_domain_member(row: DBMember) -> Member:
    return Member(
        id=row.id,
        date_created=row.date_created,
        last_updated=row.last_updated,
        data_origin=row.data_origin,
        member_name=row.member_name,
        real_name=row.real_name,
        description=row.description,
        image=row.image,
        nationality=row.nationality,
        birth_date=row.birth_date,
        death_date=row.death_date,
        solo_performer_id=row.solo_performer_id,
        solo_performer_name=row.solo_performer.name if row.solo_performer else None,
    )


def to_domain_subunit(row: DBSubunit) -> Subunit:
    return Subunit(
        id=row.id,
        date_created=row.date_created,
        last_updated=row.last_updated,
        data_origin=row.data_origin,
        main_group_id=row.main_group_id,
        group_identity_id=row.group_identity_id,
        name=row.name,
        description=row.description,
        image=row.image,
        formation_date=row.formation_date,
        disband_date=row.disband_date,
        gender=row.gender,
        activity_status=row.activity_status,
        origin_country=row.origin_country,
        main_group_name=row.main_group.performer.name if row.main_group else None,
        group_identity_name=row.group_identity.performer.name if row.group_identity else None,
    )


def to_domain_group_membership(row: DBGroupMembership) -> GroupMembership:
    # Stored rows are taken as-is: death sync may have written leave < join,
    # so status/leave_date are assigned after construction.
    item = GroupMembership(group_id=row.group_id, member_id=row.member_id, join_date=row.join_date)
    item.status = row.status
    item.leave_date = row.leave_date
    return item


def to_domain_subunit_membership(row: DBSubunitMembership) -> SubunitMembership:
    return SubunitMembership(subunit_id=row.subunit_id, member_id=row.member_id)
