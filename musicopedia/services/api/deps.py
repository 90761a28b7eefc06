# musicopedia/services/api/deps.py
from __future__ import annotations

import secrets
from http import HTTPStatus
from typing import Generator, Optional

from fastapi import Depends, Header, HTTPException, Request
from sqlalchemy.orm import Session

from musicopedia.common.logging import get_logger
from musicopedia.common.settings import get_settings
from musicopedia.database.core.main import SessionLocal

logger = get_logger(__name__)

_GUARDED_METHODS = frozenset({"POST", "PUT", "PATCH", "DELETE"})


def get_db() -> Generator[Session, None, None]:
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def transactional_session(db: Session = Depends(get_db)) -> Generator[Session, None, None]:
    """
    Request-scoped transaction. Any repo/service using this session
    participates in the same transaction.

    Usage in routers:
      def endpoint(session: Session = Depends(transactional_session)):
          ...
    """
    # COMMIT on normal exit, ROLLBACK if an exception bubbles out
    with db.begin():
        yield db


def require_admin_token(
    request: Request,
    authorization: Optional[str] = Header(default=None),
) -> None:
    """
    Guard for mutating requests. With `admin_token` unset the API is open;
    otherwise POST/PUT/PATCH/DELETE need `Authorization: Bearer <token>`.
    """
    token = get_settings().admin_token
    if not token or request.method.upper() not in _GUARDED_METHODS:
        return

    expected = f"Bearer {token}"
    if authorization is None or not secrets.compare_digest(authorization, expected):
        logger.warning("Rejected %s %s: missing or invalid admin token", request.method, request.url.path)
        raise HTTPException(
            status_code=HTTPStatus.UNAUTHORIZED,
            detail="Unauthorized: invalid or missing admin token",
            headers={"WWW-Authenticate": "Bearer"},
        )
