"""Error Taxonomy — verifies kinds, codes and aggregated messages.

Tests:
    - Each concrete error carries exactly one ErrorKind
    - ValidationError message lists every violation
    - NotFoundError names the entity type
    - PersistenceError passes the reason through verbatim
"""

from storefront.core.errors import (
    ErrorKind, FieldViolation, NotFoundError, PersistenceError,
    StorefrontError, ValidationError,
)


def test_error_kind_is_closed_set_of_three():
    assert set(ErrorKind) == {
        ErrorKind.VALIDATION, ErrorKind.NOT_FOUND, ErrorKind.PERSISTENCE,
    }


def test_validation_error_aggregates_all_violations():
    err = ValidationError("CustomerCreate", [
        FieldViolation("name", "required", "String should have at least 1 character"),
        FieldViolation("email", "format", "value is not a valid email address"),
    ])
    assert err.kind is ErrorKind.VALIDATION
    assert len(err.violations) == 2
    assert "'name'" in err.message
    assert "'email'" in err.message
    assert "'format'" in err.message


def test_validation_error_without_violations_still_has_message():
    err = ValidationError("CategoryCreate", [])
    assert err.message == "CategoryCreate is invalid"


def test_not_found_error_names_entity():
    err = NotFoundError("Product", "42")
    assert err.kind is ErrorKind.NOT_FOUND
    assert err.message == "Product not found"
    assert err.entity == "Product"
    assert err.entity_id == "42"
    assert str(err) == "Product not found"


def test_persistence_error_passes_reason_through():
    err = PersistenceError("connection reset by peer", "save")
    assert err.kind is ErrorKind.PERSISTENCE
    assert err.message == "connection reset by peer"
    assert err.operation == "save"


def test_all_errors_share_base_class():
    for err in (
        ValidationError("X", []),
        NotFoundError("X", "1"),
        PersistenceError("boom", "update"),
    ):
        assert isinstance(err, StorefrontError)


def test_to_dict_serializes_enums_as_values():
    data = NotFoundError("Employee", "7").to_dict()
    assert data == {
        "code": "RESOURCE_NOT_FOUND",
        "kind": "not_found",
        "message": "Employee not found",
        "severity": "info",
    }
