"""Entity Routes — the five CRUD endpoints, generated once per EntityBinding.

Invariants:
    - GET / and GET /{id} → 200 "OK"; POST / → 201 "Created";
      PUT /{id} → 200 "OK"; DELETE /{id} → 200 "Deleted Successfully" (no data)
    - Body must decode to a JSON object, otherwise 400 "Bad Request"
    - Blank path id → 400 "Invalid <Entity> ID"
    - The path id always wins over any id in the PUT body
    - Service errors propagate to api/error_handlers.py; no status mapping here

Design Decisions:
    - Controllers decode the body themselves instead of declaring a pydantic body
      parameter: field validation belongs to the service, so a constraint violation
      is reported by the same ValidationError path for every caller
"""

import logging
from typing import Any

from fastapi import APIRouter, Depends, HTTPException, Request, status

from storefront.api.dependencies import service_for
from storefront.api.responses import envelope
from storefront.services.crud_service import CrudService, EntityBinding

logger = logging.getLogger(__name__)


async def read_json_object(request: Request) -> dict[str, Any]:
    """Decode the request body, or raise 400 Bad Request."""
    try:
        payload = await request.json()
    except ValueError as e:
        raise HTTPException(
            status.HTTP_400_BAD_REQUEST,
            detail={"status": "Bad Request", "data": f"Malformed JSON body: {e}"},
        ) from e
    if not isinstance(payload, dict):
        raise HTTPException(
            status.HTTP_400_BAD_REQUEST,
            detail={"status": "Bad Request", "data": "Request body must be a JSON object"},
        )
    return payload


def build_entity_router(binding: EntityBinding) -> APIRouter:
    """CRUD router mounted at /<kind>, e.g. /products."""
    router = APIRouter(prefix=f"/{binding.kind.value}", tags=[binding.kind.value])
    get_service = service_for(binding.kind)

    def require_id(entity_id: str) -> str:
        if not entity_id.strip():
            raise HTTPException(
                status.HTTP_400_BAD_REQUEST,
                detail={
                    "status": f"Invalid {binding.name} ID",
                    "data": f"{binding.name} ID must not be empty",
                },
            )
        return entity_id

    @router.get("/")
    async def find_all(service: CrudService = Depends(get_service)):
        responses = await service.find_all()
        return envelope(status.HTTP_200_OK, "OK", responses)

    @router.get("/{entity_id}")
    async def find_by_id(
        entity_id: str, service: CrudService = Depends(get_service),
    ):
        response = await service.find_by_id(require_id(entity_id))
        return envelope(status.HTTP_200_OK, "OK", response)

    @router.post("/")
    async def create(
        request: Request, service: CrudService = Depends(get_service),
    ):
        payload = await read_json_object(request)
        response = await service.create(payload)
        return envelope(status.HTTP_201_CREATED, "Created", response)

    @router.put("/{entity_id}")
    async def update(
        entity_id: str,
        request: Request,
        service: CrudService = Depends(get_service),
    ):
        payload = await read_json_object(request)
        payload[binding.id_field] = require_id(entity_id)
        response = await service.update(payload)
        return envelope(status.HTTP_200_OK, "OK", response)

    @router.delete("/{entity_id}")
    async def delete(
        entity_id: str, service: CrudService = Depends(get_service),
    ):
        await service.delete(require_id(entity_id))
        return envelope(status.HTTP_200_OK, "Deleted Successfully")

    return router
