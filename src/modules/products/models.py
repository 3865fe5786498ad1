"""Catalog entities: ``Category`` and ``Product``.

Field constraints mirror the declarative rules enforced on the
``ProductDTO`` so that a row can always be mapped back to a valid DTO:

- ``name``: required, 1..100 characters.
- ``price``: 0.01..999999.99, two decimal places.
- ``category``: optional; the FK keeps ``category_id`` pointing at an
  existing row and is cleared when that category is removed.
"""

from __future__ import annotations

import structlog
from django.core.validators import MaxValueValidator, MinValueValidator
from django.db import models

from modules.products.constants import (
    MAX_PRICE,
    MIN_PRICE,
    NAME_MAX_LENGTH,
    PRICE_DECIMAL_PLACES,
    PRICE_MAX_DIGITS,
)

logger = structlog.get_logger(__name__)


class Category(models.Model):
    """Grouping a product can optionally belong to."""

    name = models.CharField(max_length=NAME_MAX_LENGTH)

    class Meta:
        db_table = "categories"
        ordering = ["id"]
        verbose_name_plural = "categories"

    def __str__(self) -> str:
        return self.name


class Product(models.Model):
    """Product row.

    ``category`` is never written through the relation; callers set
    ``category_id`` and the repository eager-loads ``category`` on read.
    """

    name = models.CharField(max_length=NAME_MAX_LENGTH)
    price = models.DecimalField(
        max_digits=PRICE_MAX_DIGITS,
        decimal_places=PRICE_DECIMAL_PLACES,
        validators=[MinValueValidator(MIN_PRICE), MaxValueValidator(MAX_PRICE)],
    )
    category = models.ForeignKey(
        Category,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="products",
    )

    class Meta:
        db_table = "products"
        ordering = ["id"]
        constraints = [
            models.CheckConstraint(
                check=models.Q(price__gte=MIN_PRICE) & models.Q(price__lte=MAX_PRICE),
                name="products_price_in_range",
            ),
        ]

    def save(self, *args, **kwargs) -> None:
        is_new = self._state.adding
        super().save(*args, **kwargs)
        if is_new:
            logger.info(
                "product_created",
                product_id=self.id,
                name=self.name,
            )

    def __str__(self) -> str:
        return f"#{self.id} {self.name}"
