"""
petclinic_customers.db.session

Async SQLAlchemy engine + session factory helpers.

Responsibilities:
- Create the async engine from a database URL.
- Honour the `createDatabaseIfNotExist` directive carried by resolved URLs.
- Create the async sessionmaker with safe defaults.
"""

from __future__ import annotations

from sqlalchemy.engine import URL, make_url
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from petclinic_customers.observability.logging import get_logger

CREATE_DATABASE_DIRECTIVE = "createDatabaseIfNotExist"

log = get_logger(__name__)


def split_create_directive(url: str | URL) -> tuple[URL, bool]:
    """
    Return the driver-facing URL (directive removed) and whether the directive was set.

    DBAPI drivers reject unknown query arguments, so the directive never reaches them.
    """

    parsed = make_url(url)
    wants_create = str(parsed.query.get(CREATE_DATABASE_DIRECTIVE, "")).lower() == "true"
    return parsed.difference_update_query([CREATE_DATABASE_DIRECTIVE]), wants_create


def create_engine(url: str | URL) -> AsyncEngine:
    driver_url, _ = split_create_directive(url)
    # pool_pre_ping helps detect stale connections in long-lived processes.
    return create_async_engine(driver_url, pool_pre_ping=True)


async def ensure_database(url: str | URL) -> None:
    driver_url, wants_create = split_create_directive(url)
    if not wants_create or not driver_url.database or driver_url.get_backend_name() == "sqlite":
        return

    server_url = URL.create(
        drivername=driver_url.drivername,
        username=driver_url.username,
        password=driver_url.password,
        host=driver_url.host,
        port=driver_url.port,
        query=driver_url.query,
    )
    server_engine = create_async_engine(server_url)
    try:
        quoted = server_engine.dialect.identifier_preparer.quote(driver_url.database)
        async with server_engine.begin() as conn:
            await conn.exec_driver_sql(f"CREATE DATABASE IF NOT EXISTS {quoted}")
        log.info("database_ensured", database=driver_url.database, host=driver_url.host)
    finally:
        await server_engine.dispose()


def create_sessionmaker(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    # expire_on_commit=False avoids surprising lazy loads after commits.
    return async_sessionmaker(
        bind=engine,
        expire_on_commit=False,
        autoflush=False,
        autocommit=False,
    )


# --- Module Notes -----------------------------------------------------------
# The API layer uses FastAPI dependencies for session scoping (`api.deps.db_session`).
