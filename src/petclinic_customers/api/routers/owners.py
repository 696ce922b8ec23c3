"""
petclinic_customers.api.routers.owners

Owners resource.

Responsibilities:
- Create, read (one/all) and update owner records.
- Expose the operator-triggered seed endpoint (`PUT /owners/boostrap`).
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, Response
from fastapi.responses import PlainTextResponse
from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel
from starlette.status import (
    HTTP_200_OK,
    HTTP_201_CREATED,
    HTTP_204_NO_CONTENT,
    HTTP_404_NOT_FOUND,
    HTTP_500_INTERNAL_SERVER_ERROR,
)

from petclinic_customers.api.deps import owner_service
from petclinic_customers.services.owner_service import (
    BootstrapFailed,
    OwnerFields,
    OwnerNotFoundError,
    OwnerService,
)

router = APIRouter(prefix="/owners", tags=["owners"])


class OwnerRequest(BaseModel):
    # No field-level validation here; an `id` sent by the client is ignored.
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    first_name: str | None = None
    last_name: str | None = None
    address: str | None = None
    city: str | None = None
    telephone: str | None = None

    def to_fields(self) -> OwnerFields:
        return OwnerFields(
            first_name=self.first_name,
            last_name=self.last_name,
            address=self.address,
            city=self.city,
            telephone=self.telephone,
        )


class OwnerResponse(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, from_attributes=True
    )

    id: int
    first_name: str | None = None
    last_name: str | None = None
    address: str | None = None
    city: str | None = None
    telephone: str | None = None


@router.post("", response_model=OwnerResponse, status_code=HTTP_201_CREATED)
async def create_owner(
    body: OwnerRequest,
    svc: OwnerService = Depends(owner_service),
) -> OwnerResponse:
    owner = await svc.create(body.to_fields())
    return OwnerResponse.model_validate(owner)


@router.get("", response_model=list[OwnerResponse])
async def find_all(svc: OwnerService = Depends(owner_service)) -> list[OwnerResponse]:
    return [OwnerResponse.model_validate(o) for o in await svc.find_all()]


# Registered before `/{owner_id}` so the literal segment wins. The misspelling is
# part of the published contract.
@router.put("/boostrap", response_class=PlainTextResponse)
async def bootstrap(svc: OwnerService = Depends(owner_service)) -> PlainTextResponse:
    result = await svc.bootstrap()
    if isinstance(result, BootstrapFailed):
        return PlainTextResponse(result.message, status_code=HTTP_500_INTERNAL_SERVER_ERROR)
    return PlainTextResponse("", status_code=HTTP_200_OK)


@router.get("/{owner_id}", response_model=OwnerResponse | None)
async def find_owner(
    owner_id: int,
    svc: OwnerService = Depends(owner_service),
) -> OwnerResponse | None:
    # Absence is not an error here: the body is JSON null.
    owner = await svc.find_one(owner_id)
    return OwnerResponse.model_validate(owner) if owner is not None else None


@router.put("/{owner_id}", status_code=HTTP_204_NO_CONTENT, response_class=Response)
async def update_owner(
    owner_id: int,
    body: OwnerRequest,
    svc: OwnerService = Depends(owner_service),
) -> Response:
    try:
        await svc.update(owner_id, body.to_fields())
    except OwnerNotFoundError as e:
        raise HTTPException(status_code=HTTP_404_NOT_FOUND, detail=str(e)) from e
    return Response(status_code=HTTP_204_NO_CONTENT)


# --- Module Notes -----------------------------------------------------------
# Owners have no DELETE route.
