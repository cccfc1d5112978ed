"""Catalog repository interfaces.

Extend ``IRepository[T]`` with the look-ups the catalog use cases need:
active-category listing and the locked category read used while creating
a product.
"""

from __future__ import annotations

from abc import abstractmethod
from typing import TYPE_CHECKING, Any, Dict, Optional

from django.db import models

from modules.core.repositories.interfaces import IRepository

if TYPE_CHECKING:
    from modules.products.models import Product, ProductCategory


class IProductRepository(IRepository["Product"]):
    """Repository contract for the Product aggregate."""

    @abstractmethod
    def list(
        self, filters: Optional[Dict[str, Any]] = None
    ) -> "models.QuerySet[Product]":
        """List products with optional filters."""


class ICategoryRepository(IRepository["ProductCategory"]):
    """Repository contract for ProductCategory."""

    @abstractmethod
    def list(
        self, filters: Optional[Dict[str, Any]] = None
    ) -> "models.QuerySet[ProductCategory]":
        """List categories with optional filters."""

    @abstractmethod
    def list_active(self) -> "models.QuerySet[ProductCategory]":
        """List categories flagged ``active``, in insertion order."""

    @abstractmethod
    def get_for_update(self, id: str) -> Optional["ProductCategory"]:
        """Retrieve a category with a row-level lock (SELECT FOR UPDATE).

        Must run inside a transaction.  Used by the product service so the
        referenced category cannot disappear before the product row is
        written.  Returns ``None`` if the category does not exist.
        """
