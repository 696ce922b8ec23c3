"""
petclinic_customers.api.app

FastAPI app factory for the customers service.

Responsibilities:
- Build the FastAPI application and register routers/middleware.
- Initialize and dispose shared infrastructure (DB engine/session factory).
- Provide a single composition root where cross-cutting concerns live.
"""

from __future__ import annotations

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy.engine import URL, make_url

from petclinic_customers import __version__
from petclinic_customers.api.routers.health import router as health_router
from petclinic_customers.api.routers.owners import router as owners_router
from petclinic_customers.db.init_db import init_db
from petclinic_customers.db.session import create_engine, create_sessionmaker, ensure_database
from petclinic_customers.observability.logging import configure_logging, get_logger
from petclinic_customers.observability.middleware import RequestContextMiddleware
from petclinic_customers.settings import Settings

log = get_logger(__name__)


def create_app(*, settings: Settings, database_url: str | URL | None = None) -> FastAPI:
    """
    `database_url` overrides `settings.database_url`; the entrypoint passes the
    URL resolved from Secrets Manager here.
    """

    configure_logging(service_name=settings.service_name, level=settings.log_level)
    url = database_url if database_url is not None else settings.database_url

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        log.info(
            "startup",
            env=settings.env,
            database=make_url(url).render_as_string(hide_password=True),
        )
        await ensure_database(url)
        engine = create_engine(url)
        app.state.engine = engine
        app.state.sessionmaker = create_sessionmaker(engine)
        if settings.env in ("dev", "test"):
            # Prod schema comes from Alembic migrations.
            await init_db(engine)
        try:
            yield
        finally:
            await engine.dispose()
            log.info("shutdown")

    app = FastAPI(
        title="Petclinic Customers Service",
        version=__version__,
        docs_url="/docs",
        openapi_url="/openapi.json",
        lifespan=lifespan,
    )

    app.add_middleware(RequestContextMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.include_router(health_router, tags=["health"])
    app.include_router(owners_router)

    return app


# --- Module Notes -----------------------------------------------------------
# Seeding is never run from the lifespan hook; only `PUT /owners/boostrap` does it.
