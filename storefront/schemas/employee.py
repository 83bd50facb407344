"""Employee Schemas.

Invariants:
    - date_hired is a required free-form string (no date format check)
    - role <= 50 chars
"""

from pydantic import BaseModel, ConfigDict, Field

from storefront.schemas.fields import EmailAddress


class EmployeeCreate(BaseModel):
    name: str = Field(min_length=1, max_length=100)
    role: str = Field(min_length=1, max_length=50)
    email: EmailAddress
    phone: str = Field(min_length=1, max_length=20)
    date_hired: str = Field(min_length=1)


class EmployeeUpdate(EmployeeCreate):
    employee_id: str = Field(min_length=1)


class EmployeeResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    employee_id: str
    name: str
    role: str
    email: str
    phone: str
    date_hired: str
