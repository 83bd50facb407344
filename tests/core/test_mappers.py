"""Mappers — entity → response conversion and request → entity field copy.

Tests:
    - Each mapper copies every declared field
    - Plural mappers return [] for None and for empty input
    - Round-trip through field names changes no values
    - apply_*_request overwrites all mutable fields but never the id
"""

import pytest

from storefront.core.mappers import (
    apply_category_request, apply_customer_request,
    apply_employee_request, apply_product_request,
    to_category_response, to_category_responses,
    to_customer_response, to_customer_responses,
    to_employee_response, to_employee_responses,
    to_product_response, to_product_responses,
)
from storefront.models import Category, Customer, Employee, Product
from storefront.schemas.category import CategoryCreate
from storefront.schemas.customer import CustomerUpdate
from storefront.schemas.employee import EmployeeCreate
from storefront.schemas.product import ProductCreate


def _customer() -> Customer:
    return Customer(
        customer_id="c-1", name="John Doe", email="john@example.com",
        phone="123456789", address="Street 123", loyalty_points=10,
    )


def _employee() -> Employee:
    return Employee(
        employee_id="e-1", name="Jane Roe", role="Cashier",
        email="jane@example.com", phone="555-0101", date_hired="2024-01-15",
    )


def _product() -> Product:
    return Product(
        product_id="p-1", name="Laptop", description="14 inch",
        price=15000000.0, stock_qty=5, category="Electronics",
        sku="LAP-001", tax_rate=0.11,
    )


def test_category_response_copies_fields():
    response = to_category_response(Category(id="cat-1", name="Beverages"))
    assert response.id == "cat-1"
    assert response.name == "Beverages"


def test_customer_response_copies_fields():
    response = to_customer_response(_customer())
    assert response.model_dump() == {
        "customer_id": "c-1",
        "name": "John Doe",
        "email": "john@example.com",
        "phone": "123456789",
        "address": "Street 123",
        "loyalty_points": 10,
    }


def test_employee_response_copies_fields():
    response = to_employee_response(_employee())
    assert response.employee_id == "e-1"
    assert response.role == "Cashier"
    assert response.date_hired == "2024-01-15"


def test_product_response_copies_fields():
    response = to_product_response(_product())
    assert response.product_id == "p-1"
    assert response.price == 15000000.0
    assert response.stock_qty == 5
    assert response.tax_rate == 0.11


@pytest.mark.parametrize("plural", [
    to_category_responses,
    to_customer_responses,
    to_employee_responses,
    to_product_responses,
])
def test_plural_mappers_handle_absent_and_empty_input(plural):
    assert plural(None) == []
    assert plural([]) == []


def test_plural_mapper_preserves_order():
    categories = [Category(id="1", name="A"), Category(id="2", name="B")]
    assert [r.id for r in to_category_responses(categories)] == ["1", "2"]


@pytest.mark.parametrize("entity, mapper, model", [
    (_customer(), to_customer_response, Customer),
    (_employee(), to_employee_response, Employee),
    (_product(), to_product_response, Product),
    (Category(id="cat-1", name="Beverages"), to_category_response, Category),
])
def test_round_trip_is_lossless(entity, mapper, model):
    dumped = mapper(entity).model_dump()
    rebuilt = model(**dumped)
    assert mapper(rebuilt).model_dump() == dumped
    for field, value in dumped.items():
        assert getattr(rebuilt, field) == getattr(entity, field) == value


def test_apply_request_overwrites_all_fields_but_not_id():
    customer = _customer()
    request = CustomerUpdate(
        customer_id="other", name="John Updated",
        email="updated@example.com", phone="987654321",
    )
    apply_customer_request(request, customer)
    assert customer.customer_id == "c-1"
    assert customer.name == "John Updated"
    assert customer.email == "updated@example.com"
    # omitted optional fields reset to defaults (full replace)
    assert customer.address == ""
    assert customer.loyalty_points == 0


def test_apply_request_on_fresh_entity():
    product = Product()
    apply_product_request(ProductCreate(
        name="Pen", price=2.5, stock_qty=100, category="Office", sku="PEN-1",
    ), product)
    assert product.product_id is None
    assert product.name == "Pen"
    assert product.description == ""
    assert product.tax_rate == 0.0


def test_apply_category_and_employee_requests():
    category = Category(id="cat-1", name="Old")
    apply_category_request(CategoryCreate(name="New"), category)
    assert category.id == "cat-1"
    assert category.name == "New"

    employee = _employee()
    apply_employee_request(EmployeeCreate(
        name="Jane Smith", role="Manager", email="js@example.com",
        phone="1", date_hired="2025-02-01",
    ), employee)
    assert employee.employee_id == "e-1"
    assert employee.role == "Manager"
    assert employee.date_hired == "2025-02-01"
