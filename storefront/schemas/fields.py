"""Shared field types for request schemas.

Invariants:
    - EmailAddress checks syntax only and keeps the client's string as sent
      (no case folding or unicode normalization), so a stored address reads back
      exactly as it was written
"""

from typing import Annotated

from email_validator import EmailNotValidError, validate_email
from pydantic import AfterValidator


def _check_email(value: str) -> str:
    try:
        validate_email(value, check_deliverability=False)
    except EmailNotValidError as e:
        raise ValueError(f"value is not a valid email address: {e}") from e
    return value


EmailAddress = Annotated[str, AfterValidator(_check_email)]
