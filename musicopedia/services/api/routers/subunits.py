# musicopedia/services/api/routers/subunits.py
from __future__ import annotations

from http import HTTPStatus
from typing import List, Optional
from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException, Path, Query
from sqlalchemy.orm import Session

from musicopedia.common.settings import get_settings
from musicopedia.services.api.deps import transactional_session
from musicopedia.services.api.errors import domain_errors
from musicopedia.services.catalog.subunit_service import SubunitService
from musicopedia.services.mappers import member as member_mapper
from musicopedia.services.mappers.membership import to_subunit_read_schema
from musicopedia.services.mappers.subunit import to_read_schema, to_request_from_create
from musicopedia.services.schemas.members import MemberSummary
from musicopedia.services.schemas.memberships import SubunitMembershipRead
from musicopedia.services.schemas.subunits import SubunitCreate, SubunitRead, SubunitUpdate

cfg = get_settings()
router = APIRouter(prefix=f"{cfg.api.prefix}/subunits", tags=["subunits"])


def _not_found() -> HTTPException:
    return HTTPException(status_code=HTTPStatus.NOT_FOUND, detail="Subunit not found")


@router.get("", response_model=List[SubunitRead])
def list_subunits(
    main_group_id: Optional[UUID] = Query(None),
    limit: int = Query(50, ge=1, le=500),
    offset: int = Query(0, ge=0),
    session: Session = Depends(transactional_session),
) -> List[SubunitRead]:
    svc = SubunitService(session)
    if main_group_id is not None:
        items = svc.list_by_main_group(main_group_id, limit=limit, offset=offset)
    else:
        items = svc.list(limit=limit, offset=offset)
    return [to_read_schema(s) for s in items]


@router.get("/{subunit_id}", response_model=SubunitRead)
def get_subunit(
    subunit_id: UUID = Path(...),
    session: Session = Depends(transactional_session),
) -> SubunitRead:
    found = SubunitService(session).get(subunit_id)
    if not found:
        raise _not_found()
    return to_read_schema(found)


@router.post("", response_model=SubunitRead, status_code=HTTPStatus.CREATED)
def create_subunit(
    payload: SubunitCreate,
    session: Session = Depends(transactional_session),
) -> SubunitRead:
    with domain_errors():
        created = SubunitService(session).create(
            to_request_from_create(payload), payload.main_group_id, payload.group_identity_id
        )
    return to_read_schema(created)


@router.patch("/{subunit_id}", response_model=SubunitRead)
def patch_subunit(
    subunit_id: UUID,
    payload: SubunitUpdate,
    session: Session = Depends(transactional_session),
) -> SubunitRead:
    with domain_errors():
        updated = SubunitService(session).update(subunit_id, payload)
    if updated is None:
        raise _not_found()
    return to_read_schema(updated)


@router.delete("/{subunit_id}", status_code=HTTPStatus.NO_CONTENT)
def delete_subunit(
    subunit_id: UUID,
    session: Session = Depends(transactional_session),
) -> None:
    if not SubunitService(session).delete(subunit_id):
        raise _not_found()


# ---- subunit members ----

@router.get("/{subunit_id}/members", response_model=List[MemberSummary])
def list_subunit_members(
    subunit_id: UUID,
    session: Session = Depends(transactional_session),
) -> List[MemberSummary]:
    return [member_mapper.to_summary(m) for m in SubunitService(session).list_members(subunit_id)]


@router.get("/{subunit_id}/members/{member_id}")
def subunit_member_exists(
    subunit_id: UUID,
    member_id: UUID,
    session: Session = Depends(transactional_session),
) -> dict:
    return {"exists": SubunitService(session).is_member(subunit_id, member_id)}


@router.put("/{subunit_id}/members/{member_id}", response_model=SubunitMembershipRead)
def add_subunit_member(
    subunit_id: UUID,
    member_id: UUID,
    session: Session = Depends(transactional_session),
) -> SubunitMembershipRead:
    with domain_errors():
        link = SubunitService(session).add_member(subunit_id, member_id)
    return to_subunit_read_schema(link)


@router.delete("/{subunit_id}/members/{member_id}", status_code=HTTPStatus.NO_CONTENT)
def remove_subunit_member(
    subunit_id: UUID,
    member_id: UUID,
    session: Session = Depends(transactional_session),
) -> None:
    if not SubunitService(session).remove_member(subunit_id, member_id):
        raise HTTPException(status_code=HTTPStatus.NOT_FOUND, detail="Subunit membership not found")
