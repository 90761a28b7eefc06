# musicopedia/services/api/routers/groups.py
from __future__ import annotations

from datetime import date
from typing import List, Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from musicopedia.common.settings import get_settings
from musicopedia.domain.entities.profiles import PerformerRecord
from musicopedia.domain.enums import Gender, GroupActivityStatus
from musicopedia.services.api.deps import transactional_session
from musicopedia.services.catalog.performer_service import PerformerService
from musicopedia.services.mappers.performer import to_read_schema
from musicopedia.services.schemas.performers import PerformerRead

cfg = get_settings()
router = APIRouter(prefix=f"{cfg.api.prefix}/groups", tags=["groups"])


@router.get("", response_model=List[PerformerRead])
def list_groups(
    gender: Optional[Gender] = Query(None),
    activity_status: Optional[GroupActivityStatus] = Query(None),
    formed_from: Optional[date] = Query(None),
    formed_to: Optional[date] = Query(None),
    limit: int = Query(50, ge=1, le=500),
    offset: int = Query(0, ge=0),
    session: Session = Depends(transactional_session),
) -> List[PerformerRead]:
    profiles = PerformerService(session).list_groups(
        gender=gender,
        activity_status=activity_status,
        formed_from=formed_from,
        formed_to=formed_to,
        limit=limit,
        offset=offset,
    )
    return [to_read_schema(PerformerRecord(performer=p.performer, profile=p)) for p in profiles]


@router.get("/active", response_model=List[PerformerRead])
def list_active_groups(
    limit: int = Query(50, ge=1, le=500),
    session: Session = Depends(transactional_session),
) -> List[PerformerRead]:
    profiles = PerformerService(session).list_groups(disbanded=False, limit=limit)
    return [to_read_schema(PerformerRecord(performer=p.performer, profile=p)) for p in profiles]


@router.get("/disbanded", response_model=List[PerformerRead])
def list_disbanded_groups(
    limit: int = Query(50, ge=1, le=500),
    session: Session = Depends(transactional_session),
) -> List[PerformerRead]:
    profiles = PerformerService(session).list_groups(disbanded=True, limit=limit)
    return [to_read_schema(PerformerRecord(performer=p.performer, profile=p)) for p in profiles]
