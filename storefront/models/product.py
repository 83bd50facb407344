"""Product ORM — catalog item.

Invariants:
    - category is a free-form label, not a foreign key to categories
    - price/tax_rate stored as floats (no currency arithmetic in this service)
"""

from sqlalchemy import Float, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from storefront.db.base import Base, new_entity_id


class Product(Base):
    __tablename__ = "products"

    product_id: Mapped[str] = mapped_column(
        String(36), primary_key=True, default=new_entity_id,
    )
    name: Mapped[str] = mapped_column(String(100), nullable=False)
    description: Mapped[str] = mapped_column(
        String(500), nullable=False, default="",
    )
    price: Mapped[float] = mapped_column(Float, nullable=False)
    stock_qty: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    category: Mapped[str] = mapped_column(String(100), nullable=False)
    sku: Mapped[str] = mapped_column(String(50), nullable=False)
    tax_rate: Mapped[float] = mapped_column(
        Float, nullable=False, default=0.0,
    )
