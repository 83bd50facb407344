"""Product Schemas — catalog item with pricing and stock.

Invariants:
    - price and stock_qty are required (must be present) and >= 0; zero is valid
    - category and sku are required non-empty strings, sku <= 50 chars
    - description (<= 500 chars) and tax_rate (>= 0) are optional
    - price and tax_rate must be finite: inf/nan cannot be rendered back as JSON
"""

from pydantic import BaseModel, ConfigDict, Field


class ProductCreate(BaseModel):
    name: str = Field(min_length=1, max_length=100)
    description: str = Field("", max_length=500)
    price: float = Field(ge=0, allow_inf_nan=False)
    stock_qty: int = Field(ge=0)
    category: str = Field(min_length=1)
    sku: str = Field(min_length=1, max_length=50)
    tax_rate: float = Field(0.0, ge=0, allow_inf_nan=False)


class ProductUpdate(ProductCreate):
    product_id: str = Field(min_length=1)


class ProductResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    product_id: str
    name: str
    description: str
    price: float
    stock_qty: int
    category: str
    sku: str
    tax_rate: float
