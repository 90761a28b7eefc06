# musicopedia/services/api/errors.py
from __future__ import annotations

from contextlib import contextmanager
from http import HTTPStatus
from typing import Iterator

from fastapi import HTTPException
from sqlalchemy.exc import IntegrityError

from musicopedia.domain.errors import ConflictError, FactoryDispatchError


@contextmanager
def domain_errors() -> Iterator[None]:
    """
    Translate catalog errors raised inside the block into HTTP errors:
      FactoryDispatchError -> 422, ConflictError / IntegrityError -> 409,
      any other ValueError -> 400.
    The request transaction is rolled back as the exception leaves the route.
    """
    try:
        yield
    except FactoryDispatchError as e:
        raise HTTPException(status_code=HTTPStatus.UNPROCESSABLE_ENTITY, detail=str(e)) from e
    except ConflictError as e:
        raise HTTPException(status_code=HTTPStatus.CONFLICT, detail=str(e)) from e
    except IntegrityError as e:
        raise HTTPException(status_code=HTTPStatus.CONFLICT, detail=str(e.orig)) from e
    except ValueError as e:
        raise HTTPException(status_code=HTTPStatus.BAD_REQUEST, detail=str(e)) from e
