"""Unit tests for Product DTOs.

Covers:
- ProductDTO: declarative validation of name and price.
- camelCase wire aliases on input and output.
- Frozen immutability.
"""

from __future__ import annotations

from decimal import Decimal

import pytest
from pydantic import ValidationError

from modules.products.dtos import CategoryDTO, ProductDTO

pytestmark = pytest.mark.unit


# ===========================================================================
# ProductDTO: valid input
# ===========================================================================


class TestProductDTOValid:
    def test_create_with_required_fields(self):
        dto = ProductDTO(name="Widget", price=Decimal("19.99"))
        assert dto.id is None
        assert dto.name == "Widget"
        assert dto.price == Decimal("19.99")
        assert dto.category_id is None
        assert dto.category is None

    def test_accepts_camel_case_category_id(self):
        dto = ProductDTO.model_validate(
            {"id": 3, "name": "Widget", "price": 5, "categoryId": 7}
        )
        assert dto.category_id == 7

    def test_accepts_snake_case_category_id(self):
        dto = ProductDTO(name="Widget", price=Decimal("5.00"), category_id=7)
        assert dto.category_id == 7

    def test_price_boundaries_are_inclusive(self):
        assert ProductDTO(name="Min", price=Decimal("0.01")).price == Decimal("0.01")
        assert ProductDTO(name="Max", price=Decimal("999999.99")).price == Decimal(
            "999999.99"
        )

    def test_name_of_exactly_100_characters(self):
        dto = ProductDTO(name="x" * 100, price=Decimal("1.00"))
        assert len(dto.name) == 100

    def test_float_price_is_converted_to_decimal(self):
        dto = ProductDTO.model_validate({"name": "Widget", "price": 19.99})
        assert dto.price == Decimal("19.99")


# ===========================================================================
# ProductDTO: validation
# ===========================================================================


class TestProductDTOValidation:
    def test_missing_name_raises(self):
        with pytest.raises(ValidationError) as exc_info:
            ProductDTO.model_validate({"price": 10})
        assert exc_info.value.errors()[0]["loc"] == ("name",)

    def test_blank_name_raises(self):
        with pytest.raises(ValidationError, match="Name must not be empty"):
            ProductDTO(name="   ", price=Decimal("10.00"))

    def test_name_too_long_raises(self):
        with pytest.raises(ValidationError):
            ProductDTO(name="x" * 101, price=Decimal("10.00"))

    def test_missing_price_raises(self):
        with pytest.raises(ValidationError):
            ProductDTO.model_validate({"name": "Widget"})

    def test_zero_price_raises(self):
        with pytest.raises(ValidationError):
            ProductDTO(name="Widget", price=Decimal("0"))

    def test_price_above_maximum_raises(self):
        with pytest.raises(ValidationError):
            ProductDTO(name="Widget", price=Decimal("1000000.00"))

    def test_more_than_two_decimal_places_raises(self):
        with pytest.raises(ValidationError):
            ProductDTO(name="Widget", price=Decimal("1.005"))

    def test_non_mapping_payload_raises(self):
        with pytest.raises(ValidationError):
            ProductDTO.model_validate(["not", "an", "object"])


# ===========================================================================
# Wire format
# ===========================================================================


class TestProductDTOWire:
    def test_to_wire_uses_camel_case(self):
        dto = ProductDTO(
            id=1,
            name="Widget",
            price=Decimal("10.00"),
            category_id=2,
            category=CategoryDTO(id=2, name="Hardware"),
        )
        assert dto.to_wire() == {
            "id": 1,
            "name": "Widget",
            "price": Decimal("10.00"),
            "categoryId": 2,
            "category": {"id": 2, "name": "Hardware"},
        }

    def test_is_immutable(self):
        dto = ProductDTO(name="Widget", price=Decimal("10.00"))
        with pytest.raises(ValidationError):
            dto.name = "Changed"
