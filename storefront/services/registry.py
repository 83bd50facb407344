"""Entity Registry — explicit bindings for the four aggregates and service construction.

Invariants:
    - Every EntityKind has exactly one binding in BINDINGS
    - build_services() constructs each CrudService once, with its own repository and
      a shared stateless validator

Design Decisions:
    - Explicit binding constants over reflection: adding an entity means editing this
      file, and every id field / mapper pairing is visible in one place
"""

from storefront.core.domain_types import EntityKind
from storefront.core.mappers import (
    apply_category_request, to_category_response, to_category_responses,
    apply_customer_request, to_customer_response, to_customer_responses,
    apply_employee_request, to_employee_response, to_employee_responses,
    apply_product_request, to_product_response, to_product_responses,
)
from storefront.core.validation import RequestValidator
from storefront.infrastructure.database import DatabaseSessionManager
from storefront.infrastructure.sql_repository import SqlAlchemyRepository
from storefront.models import Category, Customer, Employee, Product
from storefront.schemas.category import CategoryCreate, CategoryUpdate
from storefront.schemas.customer import CustomerCreate, CustomerUpdate
from storefront.schemas.employee import EmployeeCreate, EmployeeUpdate
from storefront.schemas.product import ProductCreate, ProductUpdate
from storefront.services.crud_service import CrudService, EntityBinding

CATEGORY = EntityBinding(
    kind=EntityKind.CATEGORY,
    name="Category",
    model=Category,
    create_schema=CategoryCreate,
    update_schema=CategoryUpdate,
    id_field="id",
    to_response=to_category_response,
    to_responses=to_category_responses,
    copy_fields=apply_category_request,
)

CUSTOMER = EntityBinding(
    kind=EntityKind.CUSTOMER,
    name="Customer",
    model=Customer,
    create_schema=CustomerCreate,
    update_schema=CustomerUpdate,
    id_field="customer_id",
    to_response=to_customer_response,
    to_responses=to_customer_responses,
    copy_fields=apply_customer_request,
)

EMPLOYEE = EntityBinding(
    kind=EntityKind.EMPLOYEE,
    name="Employee",
    model=Employee,
    create_schema=EmployeeCreate,
    update_schema=EmployeeUpdate,
    id_field="employee_id",
    to_response=to_employee_response,
    to_responses=to_employee_responses,
    copy_fields=apply_employee_request,
)

PRODUCT = EntityBinding(
    kind=EntityKind.PRODUCT,
    name="Product",
    model=Product,
    create_schema=ProductCreate,
    update_schema=ProductUpdate,
    id_field="product_id",
    to_response=to_product_response,
    to_responses=to_product_responses,
    copy_fields=apply_product_request,
)

BINDINGS: dict[EntityKind, EntityBinding] = {
    EntityKind.CATEGORY: CATEGORY,
    EntityKind.CUSTOMER: CUSTOMER,
    EntityKind.EMPLOYEE: EMPLOYEE,
    EntityKind.PRODUCT: PRODUCT,
}


def build_services(sessions: DatabaseSessionManager) -> dict[EntityKind, CrudService]:
    """One service per entity, each with its own repository."""
    validator = RequestValidator()
    return {
        kind: CrudService(
            binding, SqlAlchemyRepository(sessions, binding.model), validator,
        )
        for kind, binding in BINDINGS.items()
    }
