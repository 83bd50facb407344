"""Mappers — pure conversions between stored entities and wire DTOs.

Invariants:
    - No side effects on the input; to_*_response never touches persistence
    - Plural forms map element-wise; None or empty input yields []
    - apply_*_request copies every mutable field (full replace) and never the id
    - Mapping is lossless: response field names equal entity attribute names

Design Decisions:
    - One explicit function per entity over a reflective generic copier: every
      field mapping is visible in one place
    - ORM types imported only for type checking; core stays free of db imports
"""

from typing import TYPE_CHECKING, Iterable

from storefront.schemas.category import CategoryCreate, CategoryResponse
from storefront.schemas.customer import CustomerCreate, CustomerResponse
from storefront.schemas.employee import EmployeeCreate, EmployeeResponse
from storefront.schemas.product import ProductCreate, ProductResponse

if TYPE_CHECKING:
    from storefront.models import Category, Customer, Employee, Product


# ─── Category ────────────────────────────────────────────────────

def to_category_response(category: "Category") -> CategoryResponse:
    return CategoryResponse(id=category.id, name=category.name)


def to_category_responses(
    categories: Iterable["Category"] | None,
) -> list[CategoryResponse]:
    return [to_category_response(c) for c in categories or ()]


def apply_category_request(request: CategoryCreate, category: "Category") -> None:
    category.name = request.name


# ─── Customer ────────────────────────────────────────────────────

def to_customer_response(customer: "Customer") -> CustomerResponse:
    return CustomerResponse(
        customer_id=customer.customer_id,
        name=customer.name,
        email=customer.email,
        phone=customer.phone,
        address=customer.address,
        loyalty_points=customer.loyalty_points,
    )


def to_customer_responses(
    customers: Iterable["Customer"] | None,
) -> list[CustomerResponse]:
    return [to_customer_response(c) for c in customers or ()]


def apply_customer_request(request: CustomerCreate, customer: "Customer") -> None:
    customer.name = request.name
    customer.email = request.email
    customer.phone = request.phone
    customer.address = request.address
    customer.loyalty_points = request.loyalty_points


# ─── Employee ────────────────────────────────────────────────────

def to_employee_response(employee: "Employee") -> EmployeeResponse:
    return EmployeeResponse(
        employee_id=employee.employee_id,
        name=employee.name,
        role=employee.role,
        email=employee.email,
        phone=employee.phone,
        date_hired=employee.date_hired,
    )


def to_employee_responses(
    employees: Iterable["Employee"] | None,
) -> list[EmployeeResponse]:
    return [to_employee_response(e) for e in employees or ()]


def apply_employee_request(request: EmployeeCreate, employee: "Employee") -> None:
    employee.name = request.name
    employee.role = request.role
    employee.email = request.email
    employee.phone = request.phone
    employee.date_hired = request.date_hired


# ─── Product ─────────────────────────────────────────────────────

def to_product_response(product: "Product") -> ProductResponse:
    return ProductResponse(
        product_id=product.product_id,
        name=product.name,
        description=product.description,
        price=product.price,
        stock_qty=product.stock_qty,
        category=product.category,
        sku=product.sku,
        tax_rate=product.tax_rate,
    )


def to_product_responses(
    products: Iterable["Product"] | None,
) -> list[ProductResponse]:
    return [to_product_response(p) for p in products or ()]


def apply_product_request(request: ProductCreate, product: "Product") -> None:
    product.name = request.name
    product.description = request.description
    product.price = request.price
    product.stock_qty = request.stock_qty
    product.category = request.category
    product.sku = request.sku
    product.tax_rate = request.tax_rate
