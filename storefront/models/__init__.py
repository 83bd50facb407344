"""ORM Models — SQLAlchemy declarative models for the four aggregates.

Invariants:
    - All models inherit from Base (db/base.py)
    - Primary keys are 36-char string UUIDs assigned on insert, never mutated
    - No relationships: the four aggregates are independent

Design Decisions:
    - One file per entity for locality
    - Attribute names equal the response field names, so mapping is a 1:1 copy
"""

from storefront.models.category import Category  # noqa: F401
from storefront.models.customer import Customer  # noqa: F401
from storefront.models.employee import Employee  # noqa: F401
from storefront.models.product import Product  # noqa: F401
