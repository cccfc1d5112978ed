"""Django ORM implementations of the catalog repositories.

Error handling follows the Null Object pattern: look-ups return ``None``
instead of raising HTTP-level exceptions; the Service Layer decides
how to translate a missing entity into an API response.
"""

from __future__ import annotations

from typing import Any, Dict, Optional

import structlog

from django.core.exceptions import ValidationError
from django.db import connections, models, transaction

from modules.products.models import Product, ProductCategory
from modules.products.repositories.interfaces import (
    ICategoryRepository,
    IProductRepository,
)

logger = structlog.get_logger(__name__)


class ProductDjangoRepository(IProductRepository):
    """Concrete Product repository backed by Django ORM."""

    def get_by_id(self, id: str) -> Optional[Product]:
        """Retrieve a product by primary key.

        Returns ``None`` for non-existent or invalid IDs.
        """
        try:
            return Product.objects.filter(id=id).first()
        except (ValueError, ValidationError):
            return None

    def list(
        self, filters: Optional[Dict[str, Any]] = None
    ) -> models.QuerySet[Product]:
        """List products with optional Django ORM look-ups.

        Examples of valid filters::

            {"active": True}
            {"category_id": "0190f5d2-..."}
        """
        queryset = Product.objects.select_related("category")
        if filters:
            queryset = queryset.filter(**filters)
        return queryset

    @transaction.atomic
    def save(self, entity: Product) -> Product:
        """Persist (create or update) a product.

        Foreign keys are created deferred, so a dangling ``category_id`` would
        otherwise only fail at COMMIT.  Checking the table here raises the
        ``IntegrityError`` inside this savepoint instead.
        """
        entity.save()
        connections[entity._state.db].check_constraints(
            table_names=[Product._meta.db_table]
        )
        logger.info(
            "product.saved",
            product_id=str(entity.id),
            category_id=str(entity.category_id),
        )
        return entity


class CategoryDjangoRepository(ICategoryRepository):
    """Concrete ProductCategory repository backed by Django ORM."""

    def get_by_id(self, id: str) -> Optional[ProductCategory]:
        try:
            return ProductCategory.objects.filter(id=id).first()
        except (ValueError, ValidationError):
            return None

    def list(
        self, filters: Optional[Dict[str, Any]] = None
    ) -> models.QuerySet[ProductCategory]:
        queryset = ProductCategory.objects.all()
        if filters:
            queryset = queryset.filter(**filters)
        return queryset

    def list_active(self) -> models.QuerySet[ProductCategory]:
        return ProductCategory.objects.filter(active=True).order_by("created_at", "id")

    @transaction.atomic
    def save(self, entity: ProductCategory) -> ProductCategory:
        """Persist (create or update) a category."""
        entity.save()
        logger.info("category.saved", category_id=str(entity.id), name=entity.name)
        return entity

    def get_for_update(self, id: str) -> Optional[ProductCategory]:
        try:
            return ProductCategory.objects.select_for_update().filter(id=id).first()
        except (ValueError, ValidationError):
            return None
