# musicopedia/services/api/routers/members.py
from __future__ import annotations

from datetime import date
from http import HTTPStatus
from typing import List, Optional
from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException, Path, Query
from sqlalchemy.orm import Session

from musicopedia.common.settings import get_settings
from musicopedia.services.api.deps import transactional_session
from musicopedia.services.api.errors import domain_errors
from musicopedia.services.catalog.member_service import MemberService
from musicopedia.services.catalog.subunit_service import SubunitService
from musicopedia.services.mappers import subunit as subunit_mapper
from musicopedia.services.mappers.member import to_read_schema, to_request_from_create, to_summary
from musicopedia.services.schemas.members import (
    MemberCreate,
    MemberRead,
    MemberSummary,
    MemberUpdate,
    SoloLinkRequest,
)
from musicopedia.services.schemas.subunits import SubunitRead

cfg = get_settings()
router = APIRouter(prefix=f"{cfg.api.prefix}/members", tags=["members"])


def _not_found() -> HTTPException:
    return HTTPException(status_code=HTTPStatus.NOT_FOUND, detail="Member not found")


@router.get("", response_model=List[MemberSummary])
def list_members(
    limit: int = Query(50, ge=1, le=500),
    offset: int = Query(0, ge=0),
    session: Session = Depends(transactional_session),
) -> List[MemberSummary]:
    return [to_summary(m) for m in MemberService(session).list(limit=limit, offset=offset)]


@router.get("/search", response_model=List[MemberSummary])
def search_members(
    q: str = Query("", description="Case-insensitive substring of stage or real name"),
    limit: int = Query(25, ge=1, le=cfg.search_limit_max),
    session: Session = Depends(transactional_session),
) -> List[MemberSummary]:
    return [to_summary(m) for m in MemberService(session).search(q, limit=limit)]


@router.get("/born-between", response_model=List[MemberSummary])
def members_born_between(
    start: Optional[date] = Query(None),
    end: Optional[date] = Query(None),
    session: Session = Depends(transactional_session),
) -> List[MemberSummary]:
    return [to_summary(m) for m in MemberService(session).list_by_birth_date(start, end)]


@router.get("/with-solo-career", response_model=List[MemberSummary])
def members_with_solo_career(
    session: Session = Depends(transactional_session),
) -> List[MemberSummary]:
    return [to_summary(m) for m in MemberService(session).list_with_solo_identity()]


@router.get("/{member_id}", response_model=MemberRead)
def get_member(
    member_id: UUID = Path(...),
    session: Session = Depends(transactional_session),
) -> MemberRead:
    found = MemberService(session).get(member_id)
    if not found:
        raise _not_found()
    return to_read_schema(found)


@router.post("", response_model=MemberRead, status_code=HTTPStatus.CREATED)
def create_member(
    payload: MemberCreate,
    session: Session = Depends(transactional_session),
) -> MemberRead:
    with domain_errors():
        created = MemberService(session).create(to_request_from_create(payload))
    return to_read_schema(created)


@router.patch("/{member_id}", response_model=MemberRead)
def patch_member(
    member_id: UUID,
    payload: MemberUpdate,
    session: Session = Depends(transactional_session),
) -> MemberRead:
    with domain_errors():
        updated = MemberService(session).update(member_id, payload)
    if updated is None:
        raise _not_found()
    return to_read_schema(updated)


@router.delete("/{member_id}", status_code=HTTPStatus.NO_CONTENT)
def delete_member(
    member_id: UUID,
    session: Session = Depends(transactional_session),
) -> None:
    if not MemberService(session).delete(member_id):
        raise _not_found()


# ---- solo identity ----

@router.put("/{member_id}/solo", response_model=MemberRead)
def link_solo(
    member_id: UUID,
    payload: SoloLinkRequest,
    session: Session = Depends(transactional_session),
) -> MemberRead:
    with domain_errors():
        linked = MemberService(session).link_solo(member_id, payload.performer_id)
    if linked is None:
        raise _not_found()
    return to_read_schema(linked)


@router.delete("/{member_id}/solo", response_model=MemberRead)
def unlink_solo(
    member_id: UUID,
    session: Session = Depends(transactional_session),
) -> MemberRead:
    unlinked = MemberService(session).unlink_solo(member_id)
    if unlinked is None:
        raise _not_found()
    return to_read_schema(unlinked)


# ---- subunits of a member ----

@router.get("/{member_id}/subunits", response_model=List[SubunitRead])
def list_member_subunits(
    member_id: UUID,
    session: Session = Depends(transactional_session),
) -> List[SubunitRead]:
    return [subunit_mapper.to_read_schema(s) for s in SubunitService(session).list_for_member(member_id)]
