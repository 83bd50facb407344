"""Request Dependencies — auth hook and service lookup.

Invariants:
    - Services are read from app.state.services, populated once by the lifespan
    - authenticate() admits every request; it is the single seam where a real
      credential check would go

Design Decisions:
    - Per-kind dependency factory: routes declare which service they need, tests swap
      app.state.services without touching dependency_overrides
"""

import logging
from typing import Callable

from fastapi import Request

from storefront.core.domain_types import EntityKind
from storefront.services.crud_service import CrudService

logger = logging.getLogger(__name__)


async def authenticate(request: Request) -> None:
    """Pass-through authentication for the /api group."""
    logger.debug(
        "Request admitted",
        extra={"method": request.method, "path": request.url.path},
    )


def service_for(kind: EntityKind) -> Callable[[Request], CrudService]:
    def _get_service(request: Request) -> CrudService:
        services = getattr(request.app.state, "services", None)
        if not services:
            raise RuntimeError("Services not initialized")
        return services[kind]
    return _get_service
