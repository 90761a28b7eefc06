# musicopedia/services/api/routers/solos.py
from __future__ import annotations

from datetime import date
from typing import List, Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from musicopedia.common.settings import get_settings
from musicopedia.domain.entities.profiles import PerformerRecord
from musicopedia.domain.enums import Gender
from musicopedia.services.api.deps import transactional_session
from musicopedia.services.catalog.performer_service import PerformerService
from musicopedia.services.mappers.performer import to_read_schema
from musicopedia.services.schemas.performers import PerformerRead

cfg = get_settings()
router = APIRouter(prefix=f"{cfg.api.prefix}/solos", tags=["solos"])


@router.get("", response_model=List[PerformerRead])
def list_solos(
    gender: Optional[Gender] = Query(None),
    born_from: Optional[date] = Query(None),
    born_to: Optional[date] = Query(None),
    limit: int = Query(50, ge=1, le=500),
    offset: int = Query(0, ge=0),
    session: Session = Depends(transactional_session),
) -> List[PerformerRead]:
    profiles = PerformerService(session).list_solos(
        gender=gender, born_from=born_from, born_to=born_to, limit=limit, offset=offset
    )
    return [to_read_schema(PerformerRecord(performer=p.performer, profile=p)) for p in profiles]


@router.get("/active", response_model=List[PerformerRead])
def list_active_solos(
    limit: int = Query(50, ge=1, le=500),
    session: Session = Depends(transactional_session),
) -> List[PerformerRead]:
    profiles = PerformerService(session).list_solos(deceased=False, limit=limit)
    return [to_read_schema(PerformerRecord(performer=p.performer, profile=p)) for p in profiles]


@router.get("/deceased", response_model=List[PerformerRead])
def list_deceased_solos(
    limit: int = Query(50, ge=1, le=500),
    session: Session = Depends(transactional_session),
) -> List[PerformerRead]:
    profiles = PerformerService(session).list_solos(deceased=True, limit=limit)
    return [to_read_schema(PerformerRecord(performer=p.performer, profile=p)) for p in profiles]
