# musicopedia/services/mappers/membership.py
from __future__ import annotations

from musicopedia.domain.entities.membership import GroupMembership, SubunitMembership
from musicopedia.services.schemas.memberships import (
    GroupMembershipCreate,
    GroupMembershipRead,
    SubunitMembershipRead,
)


def to_domain_from_create(s: GroupMembershipCreate) -> GroupMembership:
    return GroupMembership(
        group_id=s.group_id,
        member_id=s.member_id,
        status=s.status,
        join_date=s.join_date,
        leave_date=s.leave_date,
    )


def to_read_schema(item: GroupMembership) -> GroupMembershipRead:
    return GroupMembershipRead(
        group_id=item.group_id,
        member_id=item.member_id,
        status=item.status,
        join_date=item.join_date,
        leave_date=item.leave_date,
    )


def to_subunit_read_schema(item: SubunitMembership) -> SubunitMembershipRead:
    return SubunitMembershipRead(subunit_id=item.subunit_id, member_id=item.member_id)
