"""Catalog DTOs for the Service Layer.

Framework-agnostic data transfer objects using Pydantic v2.
These are the contracts between the API layer (DRF Serializers)
and the Service layer.  DTOs are immutable (``frozen=True``).

- ``CreateProductDTO``: input for product creation.
- ``field_errors``: turns a DTO ``ValidationError`` into the per-field
  error mapping used by the API envelope.
"""

from __future__ import annotations

from decimal import Decimal
from typing import Dict, List
from uuid import UUID

from pydantic import BaseModel, ConfigDict, ValidationError, field_validator

NAME_MAX_LENGTH = 255


# ---------------------------------------------------------------------------
# Input DTOs
# ---------------------------------------------------------------------------


class CreateProductDTO(BaseModel):
    """Immutable DTO for product creation requests.

    Validates:
    - ``name`` is non-empty and at most 255 characters.
    - ``price`` is a Decimal greater than or equal to zero.
    """

    model_config = ConfigDict(frozen=True)

    name: str
    category_id: UUID
    price: Decimal
    active: bool

    @field_validator("name")
    @classmethod
    def name_must_be_valid(cls, v: str) -> str:
        if not v or not v.strip():
            raise ValueError("Name must not be empty.")
        if len(v) > NAME_MAX_LENGTH:
            raise ValueError(
                f"Name must not be greater than {NAME_MAX_LENGTH} characters."
            )
        return v

    @field_validator("price")
    @classmethod
    def price_must_be_non_negative(cls, v: Decimal) -> Decimal:
        if v < 0:
            raise ValueError("Price cannot be negative.")
        return v


def field_errors(exc: ValidationError) -> Dict[str, List[str]]:
    """Group a Pydantic ``ValidationError`` into ``{field: [messages]}``."""
    errors: Dict[str, List[str]] = {}
    for error in exc.errors():
        field = str(error["loc"][0]) if error["loc"] else "non_field_errors"
        message = error["msg"]
        # Pydantic prefixes messages raised from validators.
        message = message.removeprefix("Value error, ")
        errors.setdefault(field, []).append(message)
    return errors
