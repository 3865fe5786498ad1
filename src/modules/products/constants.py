"""Declarative field limits shared by the Product entity and its DTO."""

from decimal import Decimal

NAME_MAX_LENGTH = 100

MIN_PRICE = Decimal("0.01")
MAX_PRICE = Decimal("999999.99")
PRICE_MAX_DIGITS = 8
PRICE_DECIMAL_PLACES = 2
