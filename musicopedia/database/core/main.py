# musicopedia/database/core/main.py
from __future__ import annotations

from sqlalchemy import MetaData, create_engine, event
from sqlalchemy.engine import Engine, make_url
from sqlalchemy.orm import DeclarativeBase, sessionmaker
from sqlalchemy.pool import StaticPool

from musicopedia.common.settings import get_settings

_settings = get_settings()

NAMING_CONVENTION = {
    "ix": "ix_%(column_0_label)s",
    "uq": "uq_%(table_name)s_%(column_0_name)s",
    "ck": "ck_%(table_name)s_%(constraint_name)s",
    "fk": "fk_%(table_name)s_%(column_0_name)s_%(referred_table_name)s",
    "pk": "pk_%(table_name)s",
}


class Base(DeclarativeBase):
    # Default schema keeps DDL/Autogenerate explicit; None on SQLite / public
    metadata = MetaData(
        schema=_settings.db_schema,
        naming_convention=NAMING_CONVENTION,
    )


def make_engine(url: str, *, schema: str | None = None, echo: bool | None = None) -> Engine:
    """
    Build an Engine for `url`.
      - PostgreSQL: pooled, app schema first on the search_path
      - SQLite: foreign keys switched on; in-memory URLs share one connection
    """
    echo = _settings.db.echo if echo is None else echo

    if url.startswith("sqlite"):
        kw = {"echo": echo, "future": True, "connect_args": {"check_same_thread": False}}
        if make_url(url).database in (None, "", ":memory:"):
            kw["poolclass"] = StaticPool
        eng = create_engine(url, **kw)

        @event.listens_for(eng, "connect")
        def _enable_foreign_keys(dbapi_conn, _):
            cur = dbapi_conn.cursor()
            cur.execute("PRAGMA foreign_keys=ON")
            cur.close()

        return eng

    eng = create_engine(
        url,
        echo=echo,
        pool_size=_settings.db.pool_size,
        max_overflow=_settings.db.max_overflow,
        pool_pre_ping=_settings.db.pool_pre_ping,
        pool_recycle=_settings.db.pool_recycle,
        future=True,
    )
    if schema:
        @event.listens_for(eng, "connect")
        def _set_search_path(dbapi_conn, _):
            with dbapi_conn.cursor() as cur:
                cur.execute(f'SET search_path TO "{schema}", public')

    return eng


engine = make_engine(_settings.database_url, schema=_settings.db_schema)

SessionLocal = sessionmaker(bind=engine, expire_on_commit=False, future=True, autoflush=False)
