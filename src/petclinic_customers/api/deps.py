"""
petclinic_customers.api.deps

FastAPI dependency wiring for the API layer.

Responsibilities:
- Provide dependency functions for settings, the engine and DB sessions.
- Build the request-scoped `OwnerService`.
"""

from __future__ import annotations

from collections.abc import AsyncIterator

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from petclinic_customers.services.owner_service import OwnerService
from petclinic_customers.settings import Settings, get_settings


def settings_dep() -> Settings:
    return get_settings()


def engine_from_app(request: Request) -> AsyncEngine:
    # Created on app startup in `petclinic_customers.api.app.create_app`.
    return request.app.state.engine  # type: ignore[attr-defined]


def sessionmaker_from_app(request: Request) -> async_sessionmaker[AsyncSession]:
    return request.app.state.sessionmaker  # type: ignore[attr-defined]


async def db_session(
    session_factory: async_sessionmaker[AsyncSession] = Depends(sessionmaker_from_app),
) -> AsyncIterator[AsyncSession]:
    # Request-scoped DB session. Commits are issued by the service layer.
    async with session_factory() as session:
        yield session


def owner_service(
    session: AsyncSession = Depends(db_session),
    engine: AsyncEngine = Depends(engine_from_app),
) -> OwnerService:
    return OwnerService(session=session, engine=engine)
