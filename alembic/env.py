"""
alembic.env

Alembic migration environment configuration.

Responsibilities:
- Provide metadata discovery for autogeneration.
- Resolve the target database the same way the service does (env or Secrets Manager).
- Configure offline/online migration execution over the async engine.

Notes:
- This module is executed by Alembic, not imported by the FastAPI runtime.
"""

from __future__ import annotations

import asyncio
import os
from logging.config import fileConfig

from alembic import context
from sqlalchemy import pool
from sqlalchemy.engine import URL, Connection
from sqlalchemy.ext.asyncio import create_async_engine

from petclinic_customers.credentials import create_secrets_client, resolve_connection_parameters
from petclinic_customers.db import models  # noqa: F401  # ensure models are registered on Base.metadata
from petclinic_customers.db.base import Base
from petclinic_customers.db.session import ensure_database, split_create_directive
from petclinic_customers.settings import Settings

config = context.config

if config.config_file_name is not None:
    fileConfig(config.config_file_name)

target_metadata = Base.metadata


def _get_database_url() -> str | URL:
    settings = Settings()
    if settings.use_secrets_manager:
        return resolve_connection_parameters(
            os.environ, client=create_secrets_client(settings)
        ).url
    return settings.database_url


def run_migrations_offline() -> None:
    # Offline: emit SQL scripts without a DB connection.
    url, _ = split_create_directive(_get_database_url())
    context.configure(
        url=url,
        target_metadata=target_metadata,
        literal_binds=True,
        dialect_opts={"paramstyle": "named"},
    )
    with context.begin_transaction():
        context.run_migrations()


def _do_run_migrations(connection: Connection) -> None:
    context.configure(connection=connection, target_metadata=target_metadata)
    with context.begin_transaction():
        context.run_migrations()


async def run_migrations_online() -> None:
    url = _get_database_url()
    await ensure_database(url)
    driver_url, _ = split_create_directive(url)
    connectable = create_async_engine(driver_url, poolclass=pool.NullPool)

    async with connectable.connect() as connection:
        await connection.run_sync(_do_run_migrations)
    await connectable.dispose()


if context.is_offline_mode():
    run_migrations_offline()
else:
    asyncio.run(run_migrations_online())


# --- Module Notes -----------------------------------------------------------
# Keep this file aligned with SQLAlchemy metadata definitions in `petclinic_customers.db.models`.
