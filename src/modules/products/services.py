"""Catalog service layer (Use Cases).

Orchestrates the two catalog use cases, delegating persistence to the
injected repositories:

- ``ProductService.create_product``: writes a product that references an
  existing category.
- ``CategoryService.list_active_categories``: reads the visible categories.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, List

import structlog
from django.db import IntegrityError, transaction

from modules.products.exceptions import CATEGORY_INVALID_MESSAGE, CategoryNotFound
from modules.products.models import Product, ProductCategory

if TYPE_CHECKING:
    from modules.products.dtos import CreateProductDTO
    from modules.products.repositories.interfaces import (
        ICategoryRepository,
        IProductRepository,
    )

logger = structlog.get_logger(__name__)


class ProductService:
    """Application service for Product use-cases.

    Receives the product and category repositories via constructor
    injection (DIP).
    """

    def __init__(
        self,
        repository: IProductRepository,
        category_repository: ICategoryRepository,
    ) -> None:
        self._repo = repository
        self._categories = category_repository

    @transaction.atomic
    def create_product(self, dto: CreateProductDTO) -> Product:
        """Create a new product in the referenced category.

        The category row is re-read under a lock inside the same transaction
        as the insert, so it cannot be removed between the check and the
        write.

        Raises:
            CategoryNotFound: if the category does not exist.
        """
        log = logger.bind(category_id=str(dto.category_id))

        category = self._categories.get_for_update(str(dto.category_id))
        if category is None:
            log.warning("product.category_missing")
            raise CategoryNotFound(CATEGORY_INVALID_MESSAGE)

        product = Product(
            name=dto.name,
            category=category,
            price=dto.price,
            active=dto.active,
        )
        try:
            product = self._repo.save(product)
        except IntegrityError as exc:
            log.warning("product.category_missing", error=str(exc))
            raise CategoryNotFound(CATEGORY_INVALID_MESSAGE) from exc

        log.info("product.created", product_id=str(product.id))
        return product


class CategoryService:
    """Application service for ProductCategory queries."""

    def __init__(self, repository: ICategoryRepository) -> None:
        self._repo = repository

    def list_active_categories(self) -> List[ProductCategory]:
        """Return every active category in insertion order."""
        categories = list(self._repo.list_active())
        logger.info("category.listed_active", count=len(categories))
        return categories
