"""Customer ORM — contact details and loyalty balance.

Invariants:
    - loyalty_points never negative (enforced by CustomerCreate/CustomerUpdate)
"""

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from storefront.db.base import Base, new_entity_id


class Customer(Base):
    __tablename__ = "customers"

    customer_id: Mapped[str] = mapped_column(
        String(36), primary_key=True, default=new_entity_id,
    )
    name: Mapped[str] = mapped_column(String(100), nullable=False)
    email: Mapped[str] = mapped_column(String(255), nullable=False)
    phone: Mapped[str] = mapped_column(String(20), nullable=False)
    address: Mapped[str] = mapped_column(
        String(255), nullable=False, default="",
    )
    loyalty_points: Mapped[int] = mapped_column(
        Integer, nullable=False, default=0,
    )
