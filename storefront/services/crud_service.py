"""CRUD Service — validate, check existence, persist, map. Shared by all four entities.

Invariants:
    - Validation failures short-circuit before any repository call
    - update() and delete() look the entity up first; a miss raises NotFoundError and
      the mutating repository call is never made
    - update() overwrites every mutable field from the request (full replace); the id
      is never changed
    - At most two sequential repository calls per operation, no retries
    - Repository failures surface as PersistenceError with the original reason text
    - find_all() on an empty store returns [], not an error

Design Decisions:
    - Generic over (entity, create request, update request, response) with an
      EntityBinding supplying the field-copy and mapping functions: the four entity
      pipelines are otherwise identical
    - Collaborators injected through __init__ and held privately; nothing is looked up
      from global state
    - No optimistic locking: last writer wins; the gap between lookup and mutation is
      unguarded (no cross-call transaction)
"""

import logging
from dataclasses import dataclass
from typing import Any, Awaitable, Callable, Generic, Iterable, Mapping, TypeVar

from pydantic import BaseModel

from storefront.core.domain_types import EntityId, EntityKind
from storefront.core.errors import (
    FieldViolation, NotFoundError, PersistenceError, StorefrontError, ValidationError,
)
from storefront.core.repository_protocols import Repository
from storefront.core.validation import RequestValidator

logger = logging.getLogger(__name__)

E = TypeVar("E")
C = TypeVar("C", bound=BaseModel)
U = TypeVar("U", bound=BaseModel)
R = TypeVar("R", bound=BaseModel)
T = TypeVar("T")

Payload = Mapping[str, Any] | BaseModel


@dataclass(frozen=True)
class EntityBinding(Generic[E, C, U, R]):
    """Everything entity-specific the generic service needs."""
    kind: EntityKind
    name: str
    model: type[E]
    create_schema: type[C]
    update_schema: type[U]
    id_field: str
    to_response: Callable[[E], R]
    to_responses: Callable[[Iterable[E] | None], list[R]]
    copy_fields: Callable[[C, E], None]


class CrudService(Generic[E, C, U, R]):
    """Service-layer contract for one entity."""

    def __init__(
        self,
        binding: EntityBinding[E, C, U, R],
        repository: Repository[E],
        validator: RequestValidator,
    ):
        self._binding = binding
        self._repository = repository
        self._validator = validator

    @property
    def binding(self) -> EntityBinding[E, C, U, R]:
        return self._binding

    async def create(self, request: Payload) -> R:
        validated = self._validator.validate(self._binding.create_schema, request)
        entity = self._binding.model()
        self._binding.copy_fields(validated, entity)
        saved = await self._call("save", self._repository.save(entity))
        logger.info(
            f"{self._binding.name} created",
            extra={
                "entity": self._binding.name,
                "entity_id": getattr(saved, self._binding.id_field, None),
            },
        )
        return self._binding.to_response(saved)

    async def update(self, request: Payload) -> R:
        validated = self._validator.validate(self._binding.update_schema, request)
        entity_id = EntityId(getattr(validated, self._binding.id_field))
        entity = await self._get_existing(entity_id)
        self._binding.copy_fields(validated, entity)
        updated = await self._call("update", self._repository.update(entity))
        logger.info(
            f"{self._binding.name} updated",
            extra={"entity": self._binding.name, "entity_id": entity_id},
        )
        return self._binding.to_response(updated)

    async def delete(self, entity_id: str) -> None:
        self._check_id(entity_id)
        entity = await self._get_existing(EntityId(entity_id))
        await self._call("delete", self._repository.delete(entity))
        logger.info(
            f"{self._binding.name} deleted",
            extra={"entity": self._binding.name, "entity_id": entity_id},
        )

    async def find_by_id(self, entity_id: str) -> R:
        self._check_id(entity_id)
        entity = await self._get_existing(EntityId(entity_id))
        return self._binding.to_response(entity)

    async def find_all(self) -> list[R]:
        entities = await self._call("find_all", self._repository.find_all())
        return self._binding.to_responses(entities)

    # ─── helpers ────────────────────────────────────────────────

    def _check_id(self, entity_id: str) -> None:
        if not entity_id or not entity_id.strip():
            raise ValidationError(self._binding.name, [FieldViolation(
                field=self._binding.id_field,
                rule="required",
                message=f"{self._binding.name} ID must not be empty",
            )])

    async def _get_existing(self, entity_id: EntityId) -> E:
        entity = await self._call(
            "find_by_id", self._repository.find_by_id(entity_id),
        )
        if entity is None:
            logger.info(
                f"{self._binding.name} not found",
                extra={"entity": self._binding.name, "entity_id": entity_id},
            )
            raise NotFoundError(self._binding.name, entity_id)
        return entity

    async def _call(self, operation: str, pending: Awaitable[T]) -> T:
        """Await a repository call, mapping foreign failures to PersistenceError."""
        try:
            return await pending
        except StorefrontError:
            raise
        except Exception as e:
            logger.error(
                f"{self._binding.name} {operation} failed: {e}",
                extra={"entity": self._binding.name, "operation": operation},
            )
            raise PersistenceError(str(e), operation) from e
