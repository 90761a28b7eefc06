# musicopedia/services/api/routers/group_memberships.py
from __future__ import annotations

from datetime import date
from http import HTTPStatus
from typing import List, Optional
from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.orm import Session

from musicopedia.common.settings import get_settings
from musicopedia.domain.enums import MembershipStatus
from musicopedia.services.api.deps import transactional_session
from musicopedia.services.api.errors import domain_errors
from musicopedia.services.catalog.membership_service import MembershipService
from musicopedia.services.mappers.membership import to_domain_from_create, to_read_schema
from musicopedia.services.schemas.memberships import (
    GroupMembershipCreate,
    GroupMembershipRead,
    GroupMembershipUpdate,
    MembershipCount,
)

cfg = get_settings()
router = APIRouter(prefix=f"{cfg.api.prefix}/group-memberships", tags=["group-memberships"])


def _not_found() -> HTTPException:
    return HTTPException(status_code=HTTPStatus.NOT_FOUND, detail="Group membership not found")


@router.get("/group/{group_id}", response_model=List[GroupMembershipRead])
def list_by_group(
    group_id: UUID,
    status: Optional[MembershipStatus] = Query(None),
    session: Session = Depends(transactional_session),
) -> List[GroupMembershipRead]:
    return [to_read_schema(m) for m in MembershipService(session).list_by_group(group_id, status=status)]


@router.get("/group/{group_id}/former", response_model=List[GroupMembershipRead])
def list_former_by_group(
    group_id: UUID,
    session: Session = Depends(transactional_session),
) -> List[GroupMembershipRead]:
    items = MembershipService(session).list_by_group(group_id, status=MembershipStatus.former)
    return [to_read_schema(m) for m in items]


@router.get("/group/{group_id}/joined-after", response_model=List[GroupMembershipRead])
def list_joined_after(
    group_id: UUID,
    since: date = Query(...),
    session: Session = Depends(transactional_session),
) -> List[GroupMembershipRead]:
    return [to_read_schema(m) for m in MembershipService(session).list_joined_after(group_id, since)]


@router.get("/group/{group_id}/left-before", response_model=List[GroupMembershipRead])
def list_left_before(
    group_id: UUID,
    before: date = Query(...),
    session: Session = Depends(transactional_session),
) -> List[GroupMembershipRead]:
    return [to_read_schema(m) for m in MembershipService(session).list_left_before(group_id, before)]


@router.get("/group/{group_id}/count", response_model=MembershipCount)
def count_by_group(
    group_id: UUID,
    status: Optional[MembershipStatus] = Query(None),
    session: Session = Depends(transactional_session),
) -> MembershipCount:
    n = MembershipService(session).count(group_id, status=status)
    return MembershipCount(group_id=group_id, status=status, count=n)


@router.get("/member/{member_id}", response_model=List[GroupMembershipRead])
def list_by_member(
    member_id: UUID,
    session: Session = Depends(transactional_session),
) -> List[GroupMembershipRead]:
    return [to_read_schema(m) for m in MembershipService(session).list_by_member(member_id)]


@router.get("/{group_id}/{member_id}", response_model=GroupMembershipRead)
def get_membership(
    group_id: UUID,
    member_id: UUID,
    session: Session = Depends(transactional_session),
) -> GroupMembershipRead:
    found = MembershipService(session).get(group_id, member_id)
    if not found:
        raise _not_found()
    return to_read_schema(found)


@router.post("", response_model=GroupMembershipRead, status_code=HTTPStatus.CREATED)
def create_membership(
    payload: GroupMembershipCreate,
    session: Session = Depends(transactional_session),
) -> GroupMembershipRead:
    with domain_errors():
        created = MembershipService(session).create(to_domain_from_create(payload))
    return to_read_schema(created)


@router.patch("/{group_id}/{member_id}", response_model=GroupMembershipRead)
def patch_membership(
    group_id: UUID,
    member_id: UUID,
    payload: GroupMembershipUpdate,
    session: Session = Depends(transactional_session),
) -> GroupMembershipRead:
    with domain_errors():
        updated = MembershipService(session).update(group_id, member_id, payload)
    if updated is None:
        raise _not_found()
    return to_read_schema(updated)


@router.delete("/{group_id}/{member_id}", status_code=HTTPStatus.NO_CONTENT)
def delete_membership(
    group_id: UUID,
    member_id: UUID,
    session: Session = Depends(transactional_session),
) -> None:
    if not MembershipService(session).delete(group_id, member_id):
        raise _not_found()


@router.post("/member/{member_id}/sync", response_model=List[GroupMembershipRead])
def sync_member(
    member_id: UUID,
    session: Session = Depends(transactional_session),
) -> List[GroupMembershipRead]:
    """Re-apply the death rule to all of the member's memberships; returns changed rows."""
    changed = MembershipService(session).sync_member(member_id)
    if changed is None:
        raise HTTPException(status_code=HTTPStatus.NOT_FOUND, detail="Member not found")
    return [to_read_schema(m) for m in changed]
