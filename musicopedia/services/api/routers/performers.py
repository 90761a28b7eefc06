# musicopedia/services/api/routers/performers.py
from __future__ import annotations

from http import HTTPStatus
from typing import List, Optional
from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException, Path, Query
from sqlalchemy.orm import Session

from musicopedia.common.settings import get_settings
from musicopedia.domain.enums import PerformerType
from musicopedia.services.api.deps import transactional_session
from musicopedia.services.api.errors import domain_errors
from musicopedia.services.catalog.performer_service import PerformerService
from musicopedia.services.mappers.performer import (
    to_attributes_from_create,
    to_read_schema,
    to_request_from_create,
    to_summary,
)
from musicopedia.services.schemas.performers import (
    PerformerBatchCreate,
    PerformerCreate,
    PerformerRead,
    PerformerSummary,
    PerformerUpdate,
)

cfg = get_settings()
router = APIRouter(prefix=f"{cfg.api.prefix}/performers", tags=["performers"])


@router.get("", response_model=List[PerformerSummary])
def list_performers(
    type: Optional[PerformerType] = Query(None),
    limit: int = Query(50, ge=1, le=500),
    offset: int = Query(0, ge=0),
    session: Session = Depends(transactional_session),
) -> List[PerformerSummary]:
    items = PerformerService(session).list(type=type, limit=limit, offset=offset)
    return [to_summary(p) for p in items]


@router.get("/search", response_model=List[PerformerSummary])
def search_performers(
    name: str = Query("", description="Case-insensitive substring"),
    type: Optional[PerformerType] = Query(None),
    limit: int = Query(25, ge=1, le=cfg.search_limit_max),
    session: Session = Depends(transactional_session),
) -> List[PerformerSummary]:
    items = PerformerService(session).search(name, type=type, limit=limit)
    return [to_summary(p) for p in items]


@router.get("/by-external-id/{external_id}", response_model=PerformerRead)
def get_performer_by_external_id(
    external_id: str,
    session: Session = Depends(transactional_session),
) -> PerformerRead:
    found = PerformerService(session).get_by_external_id(external_id)
    if not found:
        raise HTTPException(status_code=HTTPStatus.NOT_FOUND, detail="Performer not found")
    return to_read_schema(found)


@router.get("/{performer_id}", response_model=PerformerRead)
def get_performer(
    performer_id: UUID = Path(...),
    session: Session = Depends(transactional_session),
) -> PerformerRead:
    found = PerformerService(session).get(performer_id)
    if not found:
        raise HTTPException(status_code=HTTPStatus.NOT_FOUND, detail="Performer not found")
    return to_read_schema(found)


@router.post("", response_model=PerformerRead, status_code=HTTPStatus.CREATED)
def create_performer(
    payload: PerformerCreate,
    session: Session = Depends(transactional_session),
) -> PerformerRead:
    with domain_errors():
        created = PerformerService(session).create(
            to_request_from_create(payload), to_attributes_from_create(payload)
        )
    return to_read_schema(created)


@router.post("/batch", response_model=List[PerformerRead], status_code=HTTPStatus.CREATED)
def create_performers_batch(
    payload: PerformerBatchCreate,
    session: Session = Depends(transactional_session),
) -> List[PerformerRead]:
    with domain_errors():
        items = [(to_request_from_create(p), to_attributes_from_create(p)) for p in payload.items]
        created = PerformerService(session).create_batch(items)
    return [to_read_schema(r) for r in created]


@router.patch("/{performer_id}", response_model=PerformerRead)
def patch_performer(
    performer_id: UUID,
    payload: PerformerUpdate,
    session: Session = Depends(transactional_session),
) -> PerformerRead:
    with domain_errors():
        updated = PerformerService(session).update(performer_id, payload)
    if updated is None:
        raise HTTPException(status_code=HTTPStatus.NOT_FOUND, detail="Performer not found")
    return to_read_schema(updated)


@router.delete("/{performer_id}", status_code=HTTPStatus.NO_CONTENT)
def delete_performer(
    performer_id: UUID,
    session: Session = Depends(transactional_session),
) -> None:
    if not PerformerService(session).delete(performer_id):
        raise HTTPException(status_code=HTTPStatus.NOT_FOUND, detail="Performer not found")
