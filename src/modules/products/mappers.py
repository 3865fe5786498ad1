"""Explicit entity <-> DTO conversions for the catalog.

Every function is pure: no queries are issued and no rows are saved.
``product_to_dto`` expects ``category`` to have been eager-loaded by the
repository (``select_related``); it reads the cached relation only and
never triggers a lazy load.

Mapped product fields: ``id``, ``name``, ``price``, ``category_id``.
``category`` is a read-side projection of ``category_id``.
"""

from __future__ import annotations

from typing import Iterable, List, Optional

from modules.products.dtos import CategoryDTO, ProductDTO
from modules.products.models import Category, Product


def category_to_dto(category: Category) -> CategoryDTO:
    return CategoryDTO(id=category.id, name=category.name)


def dto_to_category(dto: CategoryDTO) -> Category:
    return Category(id=dto.id, name=dto.name)


def product_to_dto(product: Product) -> ProductDTO:
    return ProductDTO(
        id=product.id,
        name=product.name,
        price=product.price,
        category_id=product.category_id,
        category=_loaded_category(product),
    )


def products_to_dtos(products: Iterable[Product]) -> List[ProductDTO]:
    return [product_to_dto(product) for product in products]


def dto_to_product(dto: ProductDTO) -> Product:
    """Build an unsaved ``Product`` carrying the DTO's mapped fields."""
    return Product(
        id=dto.id,
        name=dto.name,
        price=dto.price,
        category_id=dto.category_id,
    )


def apply_dto(dto: ProductDTO, product: Product) -> Product:
    """Overwrite every mapped field of ``product`` with the DTO's values.

    Full-record semantics: a field left out of the DTO (e.g. no
    ``categoryId``) clears the stored value.  The primary key is kept.
    """
    product.name = dto.name
    product.price = dto.price
    product.category_id = dto.category_id
    return product


def _loaded_category(product: Product) -> Optional[CategoryDTO]:
    if product.category_id is None:
        return None
    if not Product.category.is_cached(product):
        return None
    category = product.category
    return category_to_dto(category) if category is not None else None
