"""SQL Repository — SQLAlchemy implementation of core.repository_protocols.Repository.

Invariants:
    - One short-lived session per call; no transaction spans two calls
    - find_by_id returns None when the row is absent (never raises for not-found)
    - Driver errors leave as PersistenceError via DatabaseSessionManager.session()
    - Returned entities are detached but fully loaded (expire_on_commit=False)

Design Decisions:
    - Generic over the ORM class: the four aggregates share identical persistence
      needs, so one implementation serves all of them
    - update/delete merge the detached entity back into a fresh session; the service
      looked it up in an earlier session
"""

import logging
from typing import Generic, TypeVar

from sqlalchemy import select

from storefront.core.domain_types import EntityId
from storefront.db.base import Base
from storefront.infrastructure.database import DatabaseSessionManager

logger = logging.getLogger(__name__)

E = TypeVar("E", bound=Base)


class SqlAlchemyRepository(Generic[E]):
    """CRUD over one ORM model."""

    def __init__(self, sessions: DatabaseSessionManager, model: type[E]):
        self._sessions = sessions
        self._model = model

    async def save(self, entity: E) -> E:
        async with self._sessions.session() as db:
            db.add(entity)
            await db.commit()
            await db.refresh(entity)
            return entity

    async def update(self, entity: E) -> E:
        async with self._sessions.session() as db:
            merged = await db.merge(entity)
            await db.commit()
            await db.refresh(merged)
            return merged

    async def find_by_id(self, entity_id: EntityId) -> E | None:
        async with self._sessions.session() as db:
            return await db.get(self._model, entity_id)

    async def find_all(self) -> list[E]:
        async with self._sessions.session() as db:
            result = await db.execute(select(self._model))
            return list(result.scalars().all())

    async def delete(self, entity: E) -> None:
        async with self._sessions.session() as db:
            merged = await db.merge(entity)
            await db.delete(merged)
            await db.commit()
        logger.debug(
            f"Deleted {self._model.__tablename__} row",
            extra={"entity": self._model.__name__},
        )
