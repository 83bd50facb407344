"""Customer Schemas — contact details plus loyalty balance.

Invariants:
    - email must be a syntactically valid address, stored exactly as sent
    - phone <= 20 chars, address <= 255 chars, loyalty_points >= 0
    - address and loyalty_points are optional: omitted on update means reset to ""/0
"""

from pydantic import BaseModel, ConfigDict, Field

from storefront.schemas.fields import EmailAddress


class CustomerCreate(BaseModel):
    name: str = Field(min_length=1, max_length=100)
    email: EmailAddress
    phone: str = Field(min_length=1, max_length=20)
    address: str = Field("", max_length=255)
    loyalty_points: int = Field(0, ge=0)


class CustomerUpdate(CustomerCreate):
    customer_id: str = Field(min_length=1)


class CustomerResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    customer_id: str
    name: str
    email: str
    phone: str
    address: str
    loyalty_points: int
