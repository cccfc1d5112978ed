"""Catalog repositories package."""

from modules.products.repositories.django_repository import (
    CategoryDjangoRepository,
    ProductDjangoRepository,
)
from modules.products.repositories.interfaces import (
    ICategoryRepository,
    IProductRepository,
)

__all__ = [
    "CategoryDjangoRepository",
    "ICategoryRepository",
    "IProductRepository",
    "ProductDjangoRepository",
]
