"""Unit tests for the ``seed_data`` management command."""

from __future__ import annotations

from io import StringIO

import pytest
from django.core.management import call_command

from modules.core.management.commands.seed_data import BASELINE_CATEGORIES
from modules.products.models import ProductCategory

pytestmark = pytest.mark.unit


def _seed() -> str:
    out = StringIO()
    call_command("seed_data", stdout=out)
    return out.getvalue()


class TestSeedData:
    def test_creates_five_active_categories(self):
        _seed()
        names = list(
            ProductCategory.objects.order_by("created_at", "id").values_list(
                "name", flat=True
            )
        )
        assert names == [
            "Electronics",
            "Clothing",
            "Food & Beverages",
            "Books",
            "Furniture",
        ]
        assert not ProductCategory.objects.filter(active=False).exists()

    def test_reports_created_count(self):
        output = _seed()
        assert "categories=5" in output

    def test_is_idempotent(self):
        _seed()
        output = _seed()
        assert ProductCategory.objects.count() == len(BASELINE_CATEGORIES)
        assert "categories=0" in output
