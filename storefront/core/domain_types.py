"""Domain Types — identity and resource enums shared by every layer.

Invariants:
    - EntityId wraps str; identities are assigned by persistence, never by callers
    - EntityKind is closed: exactly the four resources exposed by the API
    - EntityKind values double as the collection path segment (/api/<value>)
"""

from enum import Enum
from typing import NewType


EntityId = NewType("EntityId", str)


class EntityKind(str, Enum):
    """The four independent aggregates."""
    CATEGORY = "categories"
    CUSTOMER = "customers"
    EMPLOYEE = "employees"
    PRODUCT = "products"
