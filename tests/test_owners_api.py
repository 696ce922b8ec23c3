"""
tests.test_owners_api

HTTP contract of the owners resource.
"""

from __future__ import annotations

from collections.abc import AsyncIterator

import httpx
import pytest
import pytest_asyncio
from fastapi import FastAPI
from sqlalchemy.ext.asyncio import AsyncEngine

from petclinic_customers.api.deps import engine_from_app

GEORGE = {
    "firstName": "George",
    "lastName": "Franklin",
    "address": "110 W. Liberty St.",
    "city": "Madison",
    "telephone": "6085551023",
}
BETTY = {
    "firstName": "Betty",
    "lastName": "Davis",
    "address": "638 Cardinal Ave.",
    "city": "Sun Prairie",
    "telephone": "6085551749",
}


@pytest_asyncio.fixture
async def outage_client(
    app: FastAPI, broken_engine: AsyncEngine
) -> AsyncIterator[httpx.AsyncClient]:
    app.dependency_overrides[engine_from_app] = lambda: broken_engine
    try:
        async with app.router.lifespan_context(app):
            transport = httpx.ASGITransport(app=app)
            async with httpx.AsyncClient(transport=transport, base_url="http://test") as c:
                yield c
    finally:
        app.dependency_overrides.clear()


@pytest.mark.asyncio
async def test_create_then_find_one(client: httpx.AsyncClient) -> None:
    r = await client.post("/owners", json=GEORGE)
    assert r.status_code == 201
    created = r.json()
    assert isinstance(created["id"], int)
    assert {k: v for k, v in created.items() if k != "id"} == GEORGE

    r = await client.get(f"/owners/{created['id']}")
    assert r.status_code == 200
    assert r.json() == created


@pytest.mark.asyncio
async def test_create_ignores_client_supplied_id(client: httpx.AsyncClient) -> None:
    first = (await client.post("/owners", json=GEORGE)).json()
    second = (await client.post("/owners", json={**BETTY, "id": first["id"]})).json()
    assert second["id"] != first["id"]


@pytest.mark.asyncio
async def test_create_accepts_partial_payload(client: httpx.AsyncClient) -> None:
    r = await client.post("/owners", json={"lastName": "Coleman"})
    assert r.status_code == 201
    body = r.json()
    assert body["lastName"] == "Coleman"
    assert body["firstName"] is None


@pytest.mark.asyncio
async def test_create_rejects_non_object_payload(client: httpx.AsyncClient) -> None:
    r = await client.post("/owners", json=["not", "an", "owner"])
    assert r.status_code == 422


@pytest.mark.asyncio
async def test_find_one_missing_returns_null(client: httpx.AsyncClient) -> None:
    r = await client.get("/owners/4242")
    assert r.status_code == 200
    assert r.json() is None


@pytest.mark.asyncio
async def test_find_one_is_idempotent(client: httpx.AsyncClient) -> None:
    owner_id = (await client.post("/owners", json=GEORGE)).json()["id"]
    first = await client.get(f"/owners/{owner_id}")
    second = await client.get(f"/owners/{owner_id}")
    assert first.json() == second.json()


@pytest.mark.asyncio
async def test_find_all(client: httpx.AsyncClient) -> None:
    r = await client.get("/owners")
    assert r.status_code == 200
    assert r.json() == []

    created = [(await client.post("/owners", json=p)).json() for p in (GEORGE, BETTY)]

    r = await client.get("/owners")
    assert r.status_code == 200
    assert sorted(r.json(), key=lambda o: o["id"]) == sorted(created, key=lambda o: o["id"])


@pytest.mark.asyncio
async def test_update_overwrites_fields(client: httpx.AsyncClient) -> None:
    owner_id = (await client.post("/owners", json=GEORGE)).json()["id"]

    r = await client.put(f"/owners/{owner_id}", json={**BETTY, "id": owner_id + 100})
    assert r.status_code == 204
    assert r.content == b""

    r = await client.get(f"/owners/{owner_id}")
    assert r.json() == {"id": owner_id, **BETTY}


@pytest.mark.asyncio
async def test_update_missing_owner_is_404(client: httpx.AsyncClient) -> None:
    await client.post("/owners", json=GEORGE)
    before = (await client.get("/owners")).json()

    r = await client.put("/owners/999", json=BETTY)
    assert r.status_code == 404
    assert r.json()["detail"] == "Owner 999 not found"

    assert (await client.get("/owners")).json() == before


@pytest.mark.asyncio
async def test_bootstrap_seeds_owners(client: httpx.AsyncClient) -> None:
    await client.post("/owners", json={"firstName": "Temporary"})

    r = await client.put("/owners/boostrap")
    assert r.status_code == 200
    assert r.text == ""

    owners = (await client.get("/owners")).json()
    assert len(owners) == 10
    assert owners[0] == {"id": 1, **GEORGE}
    assert all(o["firstName"] != "Temporary" for o in owners)


@pytest.mark.asyncio
async def test_bootstrap_reports_storage_outage(outage_client: httpx.AsyncClient) -> None:
    r = await outage_client.put("/owners/boostrap")
    assert r.status_code == 500
    assert r.text.startswith("Error while initializing data ")
    assert len(r.text) > len("Error while initializing data ")
