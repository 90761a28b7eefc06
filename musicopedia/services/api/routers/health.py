# musicopedia/services/api/routers/health.py
from __future__ import annotations

from fastapi import APIRouter, Depends
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from musicopedia.common.logging import get_logger
from musicopedia.common.settings import get_settings
from musicopedia.services.api.deps import transactional_session

logger = get_logger(__name__)
router = APIRouter(tags=["health"])


@router.get("/healthz")
def healthz(session: Session = Depends(transactional_session)) -> dict:
    s = get_settings()
    try:
        session.execute(text("SELECT 1"))
        db_ok = True
    except SQLAlchemyError as e:
        logger.warning("Health check could not reach the database: %s", e)
        db_ok = False
    return {
        "ok": db_ok,
        "app": s.app_name,
        "env": s.app_env,
        "version": s.app_version,
        "db": "ok" if db_ok else "unavailable",
    }
