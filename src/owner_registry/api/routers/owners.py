"""
owner_registry.api.routers.owners

Owner CRUD endpoints.

Responsibilities:
- insert / list / list by id / edit / delete under `/owners`.
- Delegate uniqueness checks and persistence to `OwnerService`; domain errors
  are mapped to status codes by `owner_registry.api.errors`.
"""

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends, Path, Response
from starlette.status import HTTP_201_CREATED, HTTP_204_NO_CONTENT

from owner_registry.api.deps import owner_service
from owner_registry.api.schemas import OwnerRequest, OwnerResponse
from owner_registry.services.owner_service import OwnerService

router = APIRouter(prefix="/owners", tags=["owners"])

# Signed 64-bit range of the `proprietario.id` column; wider ints answer 400.
OwnerId = Annotated[int, Path(ge=-(2**63), le=2**63 - 1)]


@router.post("/insert", response_model=OwnerResponse, status_code=HTTP_201_CREATED)
async def insert_owner(
    body: OwnerRequest,
    svc: OwnerService = Depends(owner_service),
) -> OwnerResponse:
    owner = await svc.create(name=body.name, email=body.email, phone=body.phone)
    return OwnerResponse.model_validate(owner)


@router.get("/list", response_model=list[OwnerResponse])
async def list_owners(svc: OwnerService = Depends(owner_service)) -> list[OwnerResponse]:
    return [OwnerResponse.model_validate(o) for o in await svc.list_all()]


@router.get("/list/{owner_id}", response_model=OwnerResponse)
async def get_owner(
    owner_id: OwnerId,
    svc: OwnerService = Depends(owner_service),
) -> OwnerResponse:
    return OwnerResponse.model_validate(await svc.get(owner_id))


@router.delete("/delete/{owner_id}", status_code=HTTP_204_NO_CONTENT, response_class=Response)
async def delete_owner(
    owner_id: OwnerId,
    svc: OwnerService = Depends(owner_service),
) -> Response:
    await svc.delete(owner_id)
    return Response(status_code=HTTP_204_NO_CONTENT)


@router.put("/edit/{owner_id}", response_model=OwnerResponse)
async def edit_owner(
    owner_id: OwnerId,
    body: OwnerRequest,
    svc: OwnerService = Depends(owner_service),
) -> OwnerResponse:
    owner = await svc.update(owner_id, name=body.name, email=body.email, phone=body.phone)
    return OwnerResponse.model_validate(owner)


# --- Module Notes -----------------------------------------------------------
# Body validation runs before the service is invoked, so a malformed edit of an
# unknown id answers 400 rather than 404.
