# tests/conftest.py
from __future__ import annotations

import os

import pytest
from sqlalchemy import text
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session

# Settings are read (and cached) on first import of musicopedia, so the test
# database has to be chosen before that happens.
_USE_PG = os.getenv("USE_TESTCONTAINERS", "").strip().lower() in {"1", "true", "yes", "y", "on"}
if not _USE_PG:
    os.environ.setdefault("DB__URL", "sqlite+pysqlite:///:memory:")
os.environ.setdefault("APP_ENV", "test")
os.environ.setdefault("LOG_LEVEL", "WARNING")

from musicopedia.common.settings import get_settings  # noqa: E402
from musicopedia.database.core.main import make_engine  # noqa: E402
from musicopedia.database.models import Base  # noqa: E402  (imports every model)


@pytest.fixture(scope="session")
def _database_url():
    if not _USE_PG:
        yield get_settings().database_url
        return

    from testcontainers.postgres import PostgresContainer

    with PostgresContainer(get_settings().test_db_image) as pg:
        # testcontainers defaults to psycopg2; we ship psycopg (v3)
        yield pg.get_connection_url().replace("psycopg2", "psycopg")


@pytest.fixture(scope="session")
def db_engine(_database_url) -> Engine:
    schema = get_settings().db_schema if _USE_PG else None
    engine = make_engine(_database_url, schema=schema, echo=False)
    if schema:
        with engine.begin() as conn:
            conn.execute(text(f'CREATE SCHEMA IF NOT EXISTS "{schema}"'))

    # Skip Alembic here; just create tables from models
    Base.metadata.create_all(bind=engine)
    try:
        yield engine
    finally:
        Base.metadata.drop_all(bind=engine)
        engine.dispose()


@pytest.fixture()
def db(db_engine):
    """A Session on its own connection; everything it writes is rolled back."""
    connection = db_engine.connect()
    outer = connection.begin()
    session = Session(bind=connection, autoflush=False, expire_on_commit=False)
    try:
        yield session
    finally:
        session.close()
        outer.rollback()
        connection.close()
