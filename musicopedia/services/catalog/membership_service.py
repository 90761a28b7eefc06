# musicopedia/services/catalog/membership_service.py
from __future__ import annotations

from datetime import date
from typing import List, Optional
from uuid import UUID

from sqlalchemy.orm import Session

from musicopedia.common.logging import get_logger
from musicopedia.database.repos.member_repo import SqlAlchemyMemberRepo
from musicopedia.database.repos.membership_repo import SqlAlchemyGroupMembershipRepo
from musicopedia.database.repos.profile_repo import SqlAlchemyProfileRepo
from musicopedia.domain.entities.membership import GroupMembership
from musicopedia.domain.enums import MembershipStatus
from musicopedia.domain.errors import ConflictError, ReferenceIntegrityError
from musicopedia.domain.policies.membership_sync import sync_memberships, sync_status_with_member
from musicopedia.services.schemas.memberships import GroupMembershipUpdate

logger = get_logger(__name__)


class MembershipService:
    """
    Group membership ledger. Explicit status changes follow the transition
    table; the death rule is applied on create and on demand.
    """

    def __init__(self, db: Session):
        self.db = db
        self.memberships = SqlAlchemyGroupMembershipRepo(db)
        self.members = SqlAlchemyMemberRepo(db)
        self.profiles = SqlAlchemyProfileRepo(db)

    def create(self, membership: GroupMembership) -> GroupMembership:
        if not self.profiles.has_group(membership.group_id):
            raise ReferenceIntegrityError(f"Group not found with ID: {membership.group_id}")
        member = self.members.get(membership.member_id)
        if member is None:
            raise ReferenceIntegrityError(f"Member not found with ID: {membership.member_id}")
        if self.memberships.exists(*membership.key):
            raise ConflictError(
                f"Member {membership.member_id} already has a membership in group {membership.group_id}"
            )

        if sync_status_with_member(membership, member):
            logger.info(
                "New membership %s/%s recorded as former: member died %s",
                membership.group_id, membership.member_id, member.death_date,
            )
        saved = self.memberships.save(membership)
        logger.info("Created membership %s/%s (%s)", saved.group_id, saved.member_id, saved.status.value)
        return saved

    def get(self, group_id: UUID, member_id: UUID) -> Optional[GroupMembership]:
        return self.memberships.get(group_id, member_id)

    def list_by_group(self, group_id: UUID, *, status: Optional[MembershipStatus] = None) -> List[GroupMembership]:
        return self.memberships.list_by_group(group_id, status=status)

    def list_by_member(self, member_id: UUID) -> List[GroupMembership]:
        return self.memberships.list_by_member(member_id)

    def list_joined_after(self, group_id: UUID, since: date) -> List[GroupMembership]:
        return self.memberships.list_joined_between(group_id, start=since)

    def list_left_before(self, group_id: UUID, before: date) -> List[GroupMembership]:
        return [
            m for m in self.memberships.list_by_group(group_id, status=MembershipStatus.former)
            if m.leave_date is not None and m.leave_date < before
        ]

    def count(self, group_id: UUID, *, status: Optional[MembershipStatus] = None) -> int:
        return self.memberships.count_by_group(group_id, status=status)

    def update(self, group_id: UUID, member_id: UUID, patch: GroupMembershipUpdate) -> Optional[GroupMembership]:
        """
        Returns None when the membership does not exist.
        A status in the patch goes through `transition_to`; a bare
        `leave_date` corrects the date of a former membership.
        """
        membership = self.memberships.get(group_id, member_id)
        if membership is None:
            return None

        if patch.join_date is not None:
            membership.change_join_date(patch.join_date)

        if patch.status is not None and patch.status is not membership.status:
            membership.transition_to(patch.status, patch.leave_date)
        elif patch.leave_date is not None:
            membership.change_leave_date(patch.leave_date)

        saved = self.memberships.save(membership)
        logger.info("Updated membership %s/%s (%s)", group_id, member_id, saved.status.value)
        return saved

    def delete(self, group_id: UUID, member_id: UUID) -> bool:
        deleted = self.memberships.delete(group_id, member_id)
        if deleted:
            logger.info("Deleted membership %s/%s", group_id, member_id)
        return deleted

    def sync_member(self, member_id: UUID) -> Optional[List[GroupMembership]]:
        """
        Re-apply the death rule to every membership of `member_id`.
        Safe to repeat. Returns the rows that changed, or None for an
        unknown member.
        """
        member = self.members.get(member_id)
        if member is None:
            return None
        changed = sync_memberships(self.memberships.list_by_member(member_id), member)
        for m in changed:
            self.memberships.save(m)
            logger.info(
                "Membership %s/%s set to %s (leave %s) by sync",
                m.group_id, m.member_id, m.status.value, m.leave_date,
            )
        return changed
