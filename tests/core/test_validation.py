"""Request Validator — verifies pydantic errors become one aggregated ValidationError.

Tests cover:
    - Valid payloads return schema instances
    - Every violated field is reported, with a stable rule name
    - Unvalidated model instances (model_construct) are re-checked
"""

import pytest

from storefront.core.errors import ValidationError
from storefront.core.validation import RequestValidator
from storefront.schemas.customer import CustomerCreate
from storefront.schemas.product import ProductCreate, ProductUpdate


@pytest.fixture
def validator():
    return RequestValidator()


def _rules(exc: ValidationError) -> dict[str, str]:
    return {v.field: v.rule for v in exc.violations}


def test_valid_payload_returns_model(validator):
    result = validator.validate(CustomerCreate, {
        "name": "John Doe", "email": "john@example.com", "phone": "123456789",
    })
    assert isinstance(result, CustomerCreate)
    assert result.address == ""
    assert result.loyalty_points == 0


def test_empty_name_reports_required(validator):
    with pytest.raises(ValidationError) as exc_info:
        validator.validate(CustomerCreate, {
            "name": "", "email": "john@example.com", "phone": "1",
        })
    assert _rules(exc_info.value) == {"name": "required"}


def test_all_violations_reported_together(validator):
    with pytest.raises(ValidationError) as exc_info:
        validator.validate(CustomerCreate, {
            "name": "x" * 101,
            "email": "not-an-email",
            "phone": "1" * 21,
            "loyalty_points": -1,
        })
    assert _rules(exc_info.value) == {
        "name": "max",
        "email": "format",
        "phone": "max",
        "loyalty_points": "min",
    }


def test_missing_fields_report_required(validator):
    with pytest.raises(ValidationError) as exc_info:
        validator.validate(ProductCreate, {"name": "Product A", "price": 1000})
    rules = _rules(exc_info.value)
    assert rules == {"stock_qty": "required", "category": "required", "sku": "required"}


def test_wrong_type_reports_type_rule(validator):
    with pytest.raises(ValidationError) as exc_info:
        validator.validate(ProductCreate, {
            "name": "A", "price": "cheap", "stock_qty": 1,
            "category": "c", "sku": "s",
        })
    assert _rules(exc_info.value) == {"price": "type"}


def test_zero_price_and_stock_are_valid(validator):
    result = validator.validate(ProductCreate, {
        "name": "Freebie", "price": 0, "stock_qty": 0,
        "category": "Promo", "sku": "FREE-1",
    })
    assert result.price == 0
    assert result.stock_qty == 0


def test_update_requires_id(validator):
    with pytest.raises(ValidationError) as exc_info:
        validator.validate(ProductUpdate, {
            "product_id": "", "name": "A", "price": 1, "stock_qty": 1,
            "category": "c", "sku": "s",
        })
    assert _rules(exc_info.value) == {"product_id": "required"}


def test_constructed_model_is_revalidated(validator):
    unchecked = CustomerCreate.model_construct(
        name="", email="john@example.com", phone="1", address="", loyalty_points=0,
    )
    with pytest.raises(ValidationError):
        validator.validate(CustomerCreate, unchecked)


def test_pydantic_error_is_chained(validator):
    with pytest.raises(ValidationError) as exc_info:
        validator.validate(CustomerCreate, {})
    assert exc_info.value.__cause__ is not None


def test_empty_email_reports_required(validator):
    with pytest.raises(ValidationError) as exc_info:
        validator.validate(CustomerCreate, {
            "name": "John", "email": "", "phone": "1",
        })
    assert _rules(exc_info.value) == {"email": "required"}


def test_malformed_email_reports_format(validator):
    with pytest.raises(ValidationError) as exc_info:
        validator.validate(CustomerCreate, {
            "name": "John", "email": "not-an-address", "phone": "1",
        })
    assert _rules(exc_info.value) == {"email": "format"}
