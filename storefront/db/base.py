"""SQLAlchemy Declarative Base — shared base class for all ORM models.

Invariants:
    - All models inherit from Base
    - Base is the single source of truth for table metadata

Design Decisions:
    - Separate file for Base: avoids circular imports between models
"""

import uuid

from sqlalchemy.orm import DeclarativeBase


def new_entity_id() -> str:
    """Identity generator used as the primary-key default on insert."""
    return str(uuid.uuid4())


class Base(DeclarativeBase):
    """Base class for all Storefront ORM models."""
    pass
