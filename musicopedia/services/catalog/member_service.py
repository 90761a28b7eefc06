# musicopedia/services/catalog/member_service.py
from __future__ import annotations

from datetime import date
from typing import List, Optional
from uuid import UUID

from sqlalchemy.orm import Session

from musicopedia.common.logging import get_logger
from musicopedia.common.settings import get_settings
from musicopedia.database.repos.member_repo import SqlAlchemyMemberRepo
from musicopedia.database.repos.membership_repo import SqlAlchemyGroupMembershipRepo
from musicopedia.database.repos.performer_repo import SqlAlchemyPerformerRepo
from musicopedia.domain.entities.member import Member
from musicopedia.domain.entities.membership import GroupMembership
from musicopedia.domain.policies.member_factory import (
    MemberRequest,
    create_member,
    link_solo_identity,
    unlink_solo_identity,
)
from musicopedia.domain.policies.membership_sync import sync_memberships
from musicopedia.services.mappers.member import apply_patch_to_domain
from musicopedia.services.schemas.members import MemberUpdate

logger = get_logger(__name__)


class MemberService:
    """
    Member registry. A change to a member's death date is pushed to all of
    the member's group memberships in the same transaction.
    """

    def __init__(self, db: Session):
        self.db = db
        self.cfg = get_settings()
        self.members = SqlAlchemyMemberRepo(db)
        self.performers = SqlAlchemyPerformerRepo(db)
        self.memberships = SqlAlchemyGroupMembershipRepo(db)

    def create(self, request: MemberRequest) -> Member:
        try:
            member = create_member(request, lookup=self.performers)
        except ValueError as e:
            logger.warning("Rejected member %r: %s", request.member_name, e)
            raise
        saved = self.members.save(member)
        logger.info("Created member %s (%s)", saved.id, saved.member_name)
        return saved

    def get(self, member_id: UUID) -> Optional[Member]:
        return self.members.get(member_id)

    def list(self, *, limit: int = 50, offset: int = 0) -> List[Member]:
        return self.members.list(limit=limit, offset=offset)

    def search(self, q: str, *, limit: int = 25) -> List[Member]:
        return self.members.search(q, limit=min(limit, self.cfg.search_limit_max))

    def list_by_birth_date(self, start: Optional[date], end: Optional[date]) -> List[Member]:
        return self.members.list_by_birth_date(start, end)

    def list_with_solo_identity(self) -> List[Member]:
        return self.members.list_with_solo_identity()

    def update(self, member_id: UUID, patch: MemberUpdate) -> Optional[Member]:
        """Returns None when the member does not exist."""
        member = self.members.get(member_id)
        if member is None:
            return None
        member = apply_patch_to_domain(member, patch)
        saved = self.members.save(member)
        if patch.death_date is not None:
            self._sync(saved)
        logger.info("Updated member %s", member_id)
        return saved

    def delete(self, member_id: UUID) -> bool:
        deleted = self.members.delete(member_id)
        if deleted:
            logger.info("Deleted member %s", member_id)
        return deleted

    # ---------------------------- solo identity ----------------------------
    def link_solo(self, member_id: UUID, performer_id: UUID) -> Optional[Member]:
        member = self.members.get(member_id)
        if member is None:
            return None
        try:
            link_solo_identity(member, performer_id, self.performers)
        except ValueError as e:
            logger.warning("Rejected solo link %s -> %s: %s", member_id, performer_id, e)
            raise
        saved = self.members.save(member)
        logger.info("Linked member %s to solo performer %s", member_id, performer_id)
        return saved

    def unlink_solo(self, member_id: UUID) -> Optional[Member]:
        member = self.members.get(member_id)
        if member is None:
            return None
        return self.members.save(unlink_solo_identity(member))

    # ---------------------------- consistency ----------------------------
    def _sync(self, member: Member) -> List[GroupMembership]:
        changed = sync_memberships(self.memberships.list_by_member(member.id), member)
        for m in changed:
            self.memberships.save(m)
            logger.info(
                "Membership %s/%s set to %s (leave %s) after death of member %s",
                m.group_id, m.member_id, m.status.value, m.leave_date, member.id,
            )
        return changed
