"""
petclinic_customers.db.repositories.owners

Repository for `Owner` entities.

Responsibilities:
- Persist new and modified owners.
- Look up owners by id, or list all of them.
"""

from __future__ import annotations

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from petclinic_customers.db.models import Owner


class OwnerRepo:
    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def save(self, owner: Owner) -> Owner:
        # Flush so the database assigns the id; the caller owns the commit.
        self._session.add(owner)
        await self._session.flush()
        return owner

    async def find_by_id(self, owner_id: int) -> Owner | None:
        return await self._session.get(Owner, owner_id)

    async def find_all(self) -> list[Owner]:
        stmt = select(Owner).order_by(Owner.id)
        return list((await self._session.execute(stmt)).scalars().all())
