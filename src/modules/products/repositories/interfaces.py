"""Product repository interface.

Extends ``IRepository[Product]`` with the explicit write operations the
product use cases need.  ``update`` reports a vanished row through
``UpdateOutcome`` instead of raising.
"""

from __future__ import annotations

import enum
from abc import abstractmethod
from typing import TYPE_CHECKING, List

from modules.core.repositories.interfaces import IRepository

if TYPE_CHECKING:
    from modules.products.models import Product


class UpdateOutcome(enum.Enum):
    """Result of a primary-key-filtered update."""

    UPDATED = "updated"
    MISSING = "missing"


class IProductRepository(IRepository["Product"]):
    """Repository contract for the Product aggregate.

    Every read returns products with ``category`` already loaded.
    """

    @abstractmethod
    def list(self) -> List["Product"]:
        """Return every product ordered by id."""

    @abstractmethod
    def exists(self, id: int) -> bool:
        """Return ``True`` when a product row with ``id`` is present."""

    @abstractmethod
    def insert(self, entity: "Product") -> "Product":
        """Insert a new product and return it re-read with its category."""

    @abstractmethod
    def update(self, entity: "Product") -> UpdateOutcome:
        """Overwrite the stored row of ``entity``.

        Returns ``UpdateOutcome.MISSING`` when no row was affected.
        """

    @abstractmethod
    def delete(self, entity: "Product") -> None:
        """Remove the stored row of ``entity``."""
