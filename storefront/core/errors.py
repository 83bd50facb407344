"""Error Hierarchy — closed, typed error kinds for every service failure mode.

Invariants:
    - Every error carries exactly one ErrorKind (VALIDATION | NOT_FOUND | PERSISTENCE)
    - ValidationError aggregates ALL violated field/rule pairs, never just the first
    - NotFoundError is raised by the service after an explicit lookup miss, never
      inferred from a repository exception
    - PersistenceError carries the failure's own reason text (the driver message for
      database errors), never a bare generic label

Design Decisions:
    - Kind carried as an enum attribute instead of relying on isinstance checks:
      the HTTP boundary matches on exc.kind exhaustively (api/error_handlers.py)
    - HTTP status lives at the boundary, not here; core stays transport-agnostic
"""

from dataclasses import dataclass
from enum import Enum


class ErrorSeverity(str, Enum):
    """Error severity for observability."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorKind(str, Enum):
    """Closed set of failure kinds the service layer can report."""
    VALIDATION = "validation"
    NOT_FOUND = "not_found"
    PERSISTENCE = "persistence"


@dataclass(frozen=True)
class FieldViolation:
    """One violated constraint on one request field."""
    field: str
    rule: str
    message: str

    def describe(self) -> str:
        return f"Field '{self.field}' failed on the '{self.rule}' rule"


class StorefrontError(Exception):
    """Base exception for all Storefront service errors."""

    def __init__(
        self,
        message: str,
        kind: ErrorKind,
        code: str,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
    ):
        super().__init__(message)
        self.message = message
        self.kind = kind
        self.code = code
        self.severity = severity

    def to_dict(self) -> dict:
        return {
            "code": self.code,
            "kind": self.kind.value,
            "message": self.message,
            "severity": self.severity.value,
        }


# ─── Request Errors ─────────────────────────────────────────────

class ValidationError(StorefrontError):
    """Request failed one or more declared field constraints."""
    def __init__(self, schema: str, violations: list[FieldViolation]):
        super().__init__(
            "; ".join(v.describe() for v in violations)
            or f"{schema} is invalid",
            ErrorKind.VALIDATION, "VALIDATION_ERROR", ErrorSeverity.WARNING,
        )
        self.schema = schema
        self.violations = violations


class NotFoundError(StorefrontError):
    """Entity with the given id does not exist."""
    def __init__(self, entity: str, entity_id: str):
        super().__init__(
            f"{entity} not found",
            ErrorKind.NOT_FOUND, "RESOURCE_NOT_FOUND", ErrorSeverity.INFO,
        )
        self.entity = entity
        self.entity_id = entity_id


# ─── Infrastructure Errors ──────────────────────────────────────

class PersistenceError(StorefrontError):
    """Repository operation failed for a reason other than not-found."""
    def __init__(self, reason: str, operation: str):
        super().__init__(
            reason, ErrorKind.PERSISTENCE, "PERSISTENCE_ERROR",
            ErrorSeverity.CRITICAL,
        )
        self.reason = reason
        self.operation = operation
