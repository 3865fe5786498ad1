"""Django ORM implementation of the Product repository.

Satisfies ``IProductRepository`` using Django's QuerySet API.
Reads go through ``select_related("category")`` so every returned
product carries its category from a single JOIN; callers never hit a
lazy load.

Error handling follows the Null Object pattern for reads (``None`` for
a missing row) and an explicit ``UpdateOutcome`` for updates.  Any other
database error propagates untouched.
"""

from __future__ import annotations

from typing import List, Optional

import structlog
from django.db import transaction

from modules.products.models import Product
from modules.products.repositories.interfaces import IProductRepository, UpdateOutcome

logger = structlog.get_logger(__name__)

# Columns overwritten by ``update``; the primary key is the filter.
_UPDATABLE_FIELDS = ("name", "price", "category_id")


class ProductDjangoRepository(IProductRepository):
    """Concrete Product repository backed by Django ORM."""

    # ------------------------------------------------------------------
    # Reads
    # ------------------------------------------------------------------

    def _with_category(self):
        return Product.objects.select_related("category").order_by("id")

    def get_by_id(self, id: int) -> Optional[Product]:
        """Retrieve a product (with its category) by primary key.

        Returns ``None`` for non-existent or malformed IDs.
        """
        try:
            return self._with_category().filter(pk=id).first()
        except (TypeError, ValueError):
            return None

    def list(self) -> List[Product]:
        return list(self._with_category())

    def exists(self, id: int) -> bool:
        try:
            return Product.objects.filter(pk=id).exists()
        except (TypeError, ValueError):
            return False

    # ------------------------------------------------------------------
    # Writes
    # ------------------------------------------------------------------

    @transaction.atomic
    def insert(self, entity: Product) -> Product:
        """Insert ``entity`` and return the stored row with its category."""
        entity.save(force_insert=True)
        logger.info("product.inserted", product_id=entity.pk)
        return self.get_by_id(entity.pk)

    @transaction.atomic
    def update(self, entity: Product) -> UpdateOutcome:
        """Overwrite the mapped columns of the row keyed by ``entity.pk``.

        A pk-filtered ``UPDATE`` that touches zero rows means the row was
        removed after the caller read it.
        """
        values = {field: getattr(entity, field) for field in _UPDATABLE_FIELDS}
        affected = Product.objects.filter(pk=entity.pk).update(**values)
        if affected == 0:
            logger.warning("product.update_missed", product_id=entity.pk)
            return UpdateOutcome.MISSING
        logger.info("product.saved", product_id=entity.pk)
        return UpdateOutcome.UPDATED

    @transaction.atomic
    def delete(self, entity: Product) -> None:
        product_id = entity.pk
        entity.delete()
        logger.info("product.removed", product_id=product_id)
