"""Unit tests for the catalog Django repositories.

Covers:
- ProductDjangoRepository: get_by_id, list, save.
- CategoryDjangoRepository: get_by_id, list, list_active, get_for_update, save.
- Edge cases (invalid UUIDs, unknown IDs).
"""

from __future__ import annotations

from decimal import Decimal

import pytest
from django.db import IntegrityError, transaction

from modules.products.models import Product, ProductCategory
from modules.products.repositories import (
    CategoryDjangoRepository,
    ICategoryRepository,
    IProductRepository,
    ProductDjangoRepository,
)

pytestmark = pytest.mark.unit

MISSING_ID = "00000000-0000-0000-0000-000000000000"


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _make_product(category: ProductCategory, **overrides) -> Product:
    defaults = {
        "name": "Widget",
        "category": category,
        "price": Decimal("19.99"),
        "active": True,
    }
    defaults.update(overrides)
    product = Product(**defaults)
    product.save()
    return product


# ===========================================================================
# Instantiation
# ===========================================================================


class TestRepositoryInstantiation:
    def test_product_repository_implements_interface(self):
        assert isinstance(ProductDjangoRepository(), IProductRepository)

    def test_category_repository_implements_interface(self):
        assert isinstance(CategoryDjangoRepository(), ICategoryRepository)


# ===========================================================================
# ProductDjangoRepository
# ===========================================================================


class TestProductGetById:
    def test_returns_product_when_found(self, category):
        product = _make_product(category)
        result = ProductDjangoRepository().get_by_id(str(product.id))
        assert result is not None
        assert result.id == product.id

    def test_returns_none_when_not_found(self):
        assert ProductDjangoRepository().get_by_id(MISSING_ID) is None

    def test_returns_none_for_invalid_uuid(self):
        assert ProductDjangoRepository().get_by_id("not-a-uuid") is None


class TestProductList:
    def test_list_all(self, category):
        _make_product(category, name="A")
        _make_product(category, name="B")
        result = ProductDjangoRepository().list()
        assert [p.name for p in result] == ["A", "B"]

    def test_list_with_filters(self, category):
        _make_product(category, name="On", active=True)
        _make_product(category, name="Off", active=False)
        result = ProductDjangoRepository().list({"active": False})
        assert [p.name for p in result] == ["Off"]


class TestProductSave:
    def test_save_new_product(self, category):
        product = Product(
            name="Gadget",
            category=category,
            price=Decimal("5.00"),
            active=True,
        )
        saved = ProductDjangoRepository().save(product)
        assert saved.id is not None
        assert Product.objects.filter(id=saved.id).exists()

    def test_save_updates_existing(self, category):
        product = _make_product(category)
        product.name = "Renamed"
        ProductDjangoRepository().save(product)
        product.refresh_from_db()
        assert product.name == "Renamed"

    def test_dangling_category_raises_before_commit(self):
        product = Product(
            name="Orphan",
            category=ProductCategory(name="Ghost"),
            price=Decimal("1.00"),
            active=True,
        )
        with pytest.raises(IntegrityError):
            ProductDjangoRepository().save(product)
        assert Product.objects.count() == 0


# ===========================================================================
# CategoryDjangoRepository
# ===========================================================================


class TestCategoryGetById:
    def test_returns_category_when_found(self, category):
        result = CategoryDjangoRepository().get_by_id(str(category.id))
        assert result == category

    def test_returns_none_when_not_found(self):
        assert CategoryDjangoRepository().get_by_id(MISSING_ID) is None

    def test_returns_none_for_invalid_uuid(self):
        assert CategoryDjangoRepository().get_by_id("not-a-uuid") is None


class TestCategoryList:
    def test_list_all_includes_inactive(self):
        ProductCategory.objects.create(name="On", active=True)
        ProductCategory.objects.create(name="Off", active=False)
        assert CategoryDjangoRepository().list().count() == 2

    def test_list_with_filters(self):
        ProductCategory.objects.create(name="Books")
        ProductCategory.objects.create(name="Clothing")
        result = CategoryDjangoRepository().list({"name": "Books"})
        assert [c.name for c in result] == ["Books"]


class TestCategoryListActive:
    def test_excludes_inactive(self, seeded_categories):
        hidden = seeded_categories[1]
        hidden.active = False
        hidden.save()
        result = list(CategoryDjangoRepository().list_active())
        assert len(result) == 4
        assert hidden not in result

    def test_insertion_order(self, seeded_categories):
        result = list(CategoryDjangoRepository().list_active())
        assert result == seeded_categories

    def test_empty_when_none_active(self):
        ProductCategory.objects.create(name="Off", active=False)
        assert list(CategoryDjangoRepository().list_active()) == []


class TestCategoryGetForUpdate:
    def test_returns_category_inside_transaction(self, category):
        with transaction.atomic():
            result = CategoryDjangoRepository().get_for_update(str(category.id))
        assert result == category

    def test_returns_none_when_not_found(self):
        with transaction.atomic():
            assert CategoryDjangoRepository().get_for_update(MISSING_ID) is None

    def test_returns_none_for_invalid_uuid(self):
        with transaction.atomic():
            assert CategoryDjangoRepository().get_for_update("bad") is None


class TestCategorySave:
    def test_save_new_category(self):
        saved = CategoryDjangoRepository().save(ProductCategory(name="Garden"))
        assert ProductCategory.objects.filter(id=saved.id, name="Garden").exists()
