"""Product service layer (Use Cases).

Orchestrates the five product operations, delegating persistence to the
injected ``IProductRepository`` and entity/DTO conversion to
``modules.products.mappers``.  Input DTOs arrive already validated; the
repository is never called with a payload known to be invalid.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, List

import structlog

from modules.products.exceptions import (
    ProductConcurrencyConflict,
    ProductIdMismatch,
    ProductNotFound,
)
from modules.products.mappers import (
    apply_dto,
    dto_to_product,
    product_to_dto,
    products_to_dtos,
)
from modules.products.repositories.interfaces import UpdateOutcome

if TYPE_CHECKING:
    from modules.products.dtos import ProductDTO
    from modules.products.repositories.interfaces import IProductRepository

logger = structlog.get_logger(__name__)


class ProductService:
    """Application service for Product use-cases.

    Receives an ``IProductRepository`` via constructor injection (DIP).
    Holds no state beyond the repository handle.
    """

    def __init__(self, repository: IProductRepository) -> None:
        self._repo = repository

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def list_products(self) -> List[ProductDTO]:
        """Return every product, ordered by id, each with its category."""
        return products_to_dtos(self._repo.list())

    def get_product(self, id: int) -> ProductDTO:
        """Retrieve a single product by ID.

        Raises:
            ProductNotFound: if the product does not exist.
        """
        product = self._repo.get_by_id(id)
        if product is None:
            raise ProductNotFound(f"Product {id} not found.")
        logger.info("product.retrieved", product_id=id)
        return product_to_dto(product)

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    def create_product(self, dto: ProductDTO) -> ProductDTO:
        """Insert a new product; any id carried by ``dto`` is discarded."""
        product = dto_to_product(dto)
        product.id = None
        product = self._repo.insert(product)
        logger.info("product.created", product_id=product.id)
        return product_to_dto(product)

    def update_product(self, id: int, dto: ProductDTO) -> None:
        """Replace every mapped field of product ``id`` with ``dto``.

        Raises:
            ProductIdMismatch: if ``dto.id`` differs from ``id``.
            ProductNotFound: if the product does not exist, including when
                it is deleted between the read and the write.
            ProductConcurrencyConflict: if the write affected no rows while
                the product is still present.
        """
        if dto.id != id:
            raise ProductIdMismatch(
                f"Path id {id} does not match body id {dto.id}."
            )

        product = self._repo.get_by_id(id)
        if product is None:
            raise ProductNotFound(f"Product {id} not found.")

        log = logger.bind(product_id=id)
        apply_dto(dto, product)

        outcome = self._repo.update(product)
        if outcome is UpdateOutcome.MISSING:
            if not self._repo.exists(id):
                log.info("product.update_lost_to_delete")
                raise ProductNotFound(f"Product {id} not found.")
            log.error("product.update_conflict")
            raise ProductConcurrencyConflict(
                f"Update of product {id} affected no rows."
            )

        log.info("product.updated")

    def delete_product(self, id: int) -> None:
        """Remove a product.

        Raises:
            ProductNotFound: if the product does not exist.
        """
        product = self._repo.get_by_id(id)
        if product is None:
            raise ProductNotFound(f"Product {id} not found.")
        self._repo.delete(product)
        logger.info("product.deleted", product_id=id)
