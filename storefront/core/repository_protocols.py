"""Boundary Protocols — persistence contract consumed by the service layer.

Invariants:
    - find_by_id returns None for a missing entity, the only not-found signal
    - Any other failure surfaces as core.errors.PersistenceError
    - Identity is assigned by save(); update() never changes it

Design Decisions:
    - Protocol over ABC: structural subtyping, the SQL repository and test doubles
      need no shared base class
    - Async methods: implementations do IO; the service awaits them sequentially
"""

from typing import Protocol, TypeVar

from storefront.core.domain_types import EntityId

E = TypeVar("E")


class Repository(Protocol[E]):
    """Per-entity CRUD contract, implemented by infrastructure/sql_repository.py."""
    async def save(self, entity: E) -> E: ...
    async def update(self, entity: E) -> E: ...
    async def find_by_id(self, entity_id: EntityId) -> E | None: ...
    async def find_all(self) -> list[E]: ...
    async def delete(self, entity: E) -> None: ...
