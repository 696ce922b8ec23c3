"""
petclinic_customers.services.owner_service

Owner lifecycle service (transaction + persistence owner).

Responsibilities:
- Create, read and update owners through `OwnerRepo`.
- Signal a missing owner on update with `OwnerNotFoundError`.
- Run the bundled seed script and report the outcome as a `BootstrapResult`.
"""

from __future__ import annotations

from dataclasses import dataclass

from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession

from petclinic_customers.db.models import Owner
from petclinic_customers.db.repositories.owners import OwnerRepo
from petclinic_customers.db.seed import load_seed_script, run_seed_script
from petclinic_customers.observability.logging import get_logger

log = get_logger(__name__)


class OwnerNotFoundError(LookupError):
    def __init__(self, owner_id: int) -> None:
        super().__init__(f"Owner {owner_id} not found")
        self.owner_id = owner_id


@dataclass(frozen=True, slots=True)
class OwnerFields:
    # The mutable part of an owner; the id is never taken from a payload.
    first_name: str | None = None
    last_name: str | None = None
    address: str | None = None
    city: str | None = None
    telephone: str | None = None


@dataclass(frozen=True, slots=True)
class BootstrapSucceeded:
    statements: int


@dataclass(frozen=True, slots=True)
class BootstrapFailed:
    message: str


BootstrapResult = BootstrapSucceeded | BootstrapFailed


class OwnerService:
    def __init__(
        self,
        *,
        session: AsyncSession,
        engine: AsyncEngine,
        seed_script: str | None = None,
    ) -> None:
        self._session = session
        self._engine = engine
        self._seed_script = seed_script
        self._owners = OwnerRepo(session)

    async def create(self, fields: OwnerFields) -> Owner:
        owner = await self._owners.save(
            Owner(
                first_name=fields.first_name,
                last_name=fields.last_name,
                address=fields.address,
                city=fields.city,
                telephone=fields.telephone,
            )
        )
        await self._session.commit()
        log.info("owner_created", owner_id=owner.id)
        return owner

    async def find_one(self, owner_id: int) -> Owner | None:
        return await self._owners.find_by_id(owner_id)

    async def find_all(self) -> list[Owner]:
        return await self._owners.find_all()

    async def update(self, owner_id: int, fields: OwnerFields) -> None:
        owner = await self._owners.find_by_id(owner_id)
        if owner is None:
            raise OwnerNotFoundError(owner_id)

        owner.first_name = fields.first_name
        owner.last_name = fields.last_name
        owner.city = fields.city
        owner.address = fields.address
        owner.telephone = fields.telephone

        log.info("saving_owner", owner_id=owner_id)
        await self._owners.save(owner)
        await self._session.commit()

    async def bootstrap(self) -> BootstrapResult:
        """
        Reset the owners data from the bundled seed script.

        Bypasses the repository and runs on a raw engine connection. Never raises:
        any failure is logged and returned as `BootstrapFailed`.
        """

        try:
            script = self._seed_script if self._seed_script is not None else load_seed_script()
            executed = await run_seed_script(self._engine, script)
        except Exception as e:
            error = f"Error while initializing data {e}"
            log.error("bootstrap_failed", error=error, exc_info=True)
            return BootstrapFailed(message=error)

        log.info("bootstrap_succeeded", statements=executed)
        return BootstrapSucceeded(statements=executed)
