"""Category ORM — named grouping, no extra fields."""

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from storefront.db.base import Base, new_entity_id


class Category(Base):
    __tablename__ = "categories"

    id: Mapped[str] = mapped_column(
        String(36), primary_key=True, default=new_entity_id,
    )
    name: Mapped[str] = mapped_column(String(100), nullable=False)
