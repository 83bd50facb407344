"""Request Validation — runs pydantic constraints and aggregates every violation.

Invariants:
    - validate() either returns a fully validated schema instance or raises
      core.errors.ValidationError; pydantic's own exception never escapes
    - All violations are reported together, in pydantic's field order
    - Already-built model instances are re-validated (model_construct bypasses checks)

Design Decisions:
    - Constraints declared on the schemas (schemas/*.py) via Field(); this module only
      translates pydantic error types into stable rule names for API clients
    - A non-empty string constraint (min_length=1) reports as 'required', matching how
      clients think about blank names; an empty string rejected by a format check
      (email) reports as 'required' too
"""

from typing import Any, Mapping, TypeVar

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from storefront.core.errors import FieldViolation, ValidationError

M = TypeVar("M", bound=BaseModel)

_RULE_BY_ERROR_TYPE = {
    "missing": "required",
    "string_too_short": "min",
    "string_too_long": "max",
    "greater_than_equal": "min",
    "value_error": "format",
}


def _rule_for(error: Mapping[str, Any]) -> str:
    etype = error["type"]
    ctx = error.get("ctx") or {}
    if etype == "string_too_short" and ctx.get("min_length") == 1:
        return "required"
    if etype == "value_error" and error.get("input") == "":
        return "required"
    return _RULE_BY_ERROR_TYPE.get(etype, "type")


def to_violation(error: Mapping[str, Any]) -> FieldViolation:
    """Convert one pydantic error dict into a FieldViolation."""
    field = ".".join(str(loc) for loc in error["loc"]) or "body"
    return FieldViolation(field=field, rule=_rule_for(error), message=error["msg"])


class RequestValidator:
    """Validates request payloads against a schema's declared constraints."""

    def validate(self, schema: type[M], payload: Mapping[str, Any] | BaseModel) -> M:
        if isinstance(payload, BaseModel):
            payload = dict(payload)
        try:
            return schema.model_validate(payload)
        except PydanticValidationError as e:
            raise ValidationError(
                schema.__name__, [to_violation(err) for err in e.errors()],
            ) from e
