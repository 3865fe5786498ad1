"""Product DTOs for the Service Layer.

Framework-agnostic data transfer objects using Pydantic v2.
These are the wire contracts of the ``/products`` resource and the
input/output of ``ProductService``.  DTOs are immutable (``frozen=True``).

- ``CategoryDTO``: read-side projection of a product's category.
- ``ProductDTO``: request body for create/update and the response body
  for list/get/create.

Field names are snake_case in Python and camelCase on the wire
(``category_id`` <-> ``categoryId``); both spellings are accepted on input.
"""

from __future__ import annotations

from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from modules.products.constants import (
    MAX_PRICE,
    MIN_PRICE,
    NAME_MAX_LENGTH,
    PRICE_DECIMAL_PLACES,
)


class _TransferModel(BaseModel):
    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )

    def to_wire(self) -> dict:
        """Dump with camelCase keys, ready for a DRF ``Response``."""
        return self.model_dump(by_alias=True)


class CategoryDTO(_TransferModel):
    """Immutable DTO for a category."""

    id: Optional[int] = None
    name: str = Field(min_length=1, max_length=NAME_MAX_LENGTH)


class ProductDTO(_TransferModel):
    """Immutable DTO for a product.

    Validates:
    - ``name`` is present, at most 100 characters and not blank.
    - ``price`` lies in 0.01..999999.99 with at most two decimal places.

    ``id`` is ignored on create and must match the path id on update.
    ``category`` is filled on reads only; writes honour ``category_id``.
    """

    id: Optional[int] = None
    name: str = Field(max_length=NAME_MAX_LENGTH)
    price: Decimal = Field(
        ge=MIN_PRICE, le=MAX_PRICE, decimal_places=PRICE_DECIMAL_PLACES
    )
    category_id: Optional[int] = None
    category: Optional[CategoryDTO] = None

    @field_validator("name")
    @classmethod
    def name_must_not_be_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("Name must not be empty.")
        return v
