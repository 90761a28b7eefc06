# musicopedia/services/catalog/subunit_service.py
from __future__ import annotations

from typing import List, Optional
from uuid import UUID

from sqlalchemy.orm import Session

from musicopedia.common.logging import get_logger
from musicopedia.database.repos.member_repo import SqlAlchemyMemberRepo
from musicopedia.database.repos.membership_repo import SqlAlchemySubunitMembershipRepo
from musicopedia.database.repos.profile_repo import SqlAlchemyProfileRepo
from musicopedia.database.repos.subunit_repo import SqlAlchemySubunitRepo
from musicopedia.domain.entities.member import Member
from musicopedia.domain.entities.membership import SubunitMembership
from musicopedia.domain.entities.profiles import GroupProfile
from musicopedia.domain.entities.subunit import Subunit, SubunitRequest
from musicopedia.domain.errors import ReferenceIntegrityError
from musicopedia.domain.policies.subunit_factory import create_subunit
from musicopedia.services.mappers.subunit import apply_patch_to_domain
from musicopedia.services.schemas.subunits import SubunitUpdate

logger = get_logger(__name__)


class SubunitService:
    def __init__(self, db: Session):
        self.db = db
        self.subunits = SqlAlchemySubunitRepo(db)
        self.profiles = SqlAlchemyProfileRepo(db)
        self.members = SqlAlchemyMemberRepo(db)
        self.links = SqlAlchemySubunitMembershipRepo(db)

    def _group(self, group_id: Optional[UUID], label: str) -> Optional[GroupProfile]:
        if group_id is None:
            return None
        group = self.profiles.get_group(group_id)
        if group is None:
            raise ReferenceIntegrityError(f"{label} not found with ID: {group_id}")
        return group

    def create(
        self,
        request: SubunitRequest,
        main_group_id: Optional[UUID],
        group_identity_id: Optional[UUID] = None,
    ) -> Subunit:
        try:
            subunit = create_subunit(
                request,
                self._group(main_group_id, "Main group"),
                self._group(group_identity_id, "Group identity"),
            )
        except ValueError as e:
            logger.warning("Rejected subunit %r: %s", request.name, e)
            raise
        saved = self.subunits.save(subunit)
        logger.info("Created subunit %s (%s) under group %s", saved.id, saved.name, saved.main_group_id)
        return saved

    def get(self, subunit_id: UUID) -> Optional[Subunit]:
        return self.subunits.get(subunit_id)

    def list(self, *, limit: int = 50, offset: int = 0) -> List[Subunit]:
        return self.subunits.list(limit=limit, offset=offset)

    def list_by_main_group(self, group_id: UUID, *, limit: int = 50, offset: int = 0) -> List[Subunit]:
        return self.subunits.list_by_main_group(group_id, limit=limit, offset=offset)

    def update(self, subunit_id: UUID, patch: SubunitUpdate) -> Optional[Subunit]:
        """
        Returns None when the subunit does not exist.
        `group_identity_id` sent as null clears the identity; omitting it
        keeps the current one.
        """
        subunit = self.subunits.get(subunit_id)
        if subunit is None:
            return None
        subunit = apply_patch_to_domain(subunit, patch)
        if "group_identity_id" in patch.model_fields_set:
            if patch.group_identity_id is None:
                subunit.group_identity_id = None
            else:
                if patch.group_identity_id == subunit.main_group_id:
                    raise ReferenceIntegrityError("Subunit group identity must differ from its main group")
                self._group(patch.group_identity_id, "Group identity")
                subunit.group_identity_id = patch.group_identity_id
        saved = self.subunits.save(subunit)
        logger.info("Updated subunit %s", subunit_id)
        return saved

    def delete(self, subunit_id: UUID) -> bool:
        deleted = self.subunits.delete(subunit_id)
        if deleted:
            logger.info("Deleted subunit %s", subunit_id)
        return deleted

    # ---------------------------- subunit members ----------------------------
    def add_member(self, subunit_id: UUID, member_id: UUID) -> SubunitMembership:
        if not self.subunits.exists(subunit_id):
            raise ReferenceIntegrityError(f"Subunit not found with ID: {subunit_id}")
        if not self.members.exists(member_id):
            raise ReferenceIntegrityError(f"Member not found with ID: {member_id}")
        return self.links.add(SubunitMembership(subunit_id=subunit_id, member_id=member_id))

    def remove_member(self, subunit_id: UUID, member_id: UUID) -> bool:
        return self.links.remove(subunit_id, member_id)

    def is_member(self, subunit_id: UUID, member_id: UUID) -> bool:
        return self.links.exists(subunit_id, member_id)

    def list_members(self, subunit_id: UUID) -> List[Member]:
        out: List[Member] = []
        for link in self.links.list_by_subunit(subunit_id):
            member = self.members.get(link.member_id)
            if member is not None:
                out.append(member)
        return out

    def list_for_member(self, member_id: UUID) -> List[Subunit]:
        out: List[Subunit] = []
        for link in self.links.list_by_member(member_id):
            subunit = self.subunits.get(link.subunit_id)
            if subunit is not None:
                out.append(subunit)
        return out
