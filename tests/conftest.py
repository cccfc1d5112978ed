from io import StringIO

import pytest

from django.core.management import call_command

from rest_framework.test import APIClient

from modules.products.models import ProductCategory


@pytest.fixture(autouse=True)
def _use_db(db):
    """Automatically use the test database for all tests."""


@pytest.fixture()
def api_client():
    """DRF APIClient for testing API endpoints."""
    return APIClient()


@pytest.fixture()
def api_client_with_correlation(api_client):
    """APIClient pre-configured with a known correlation ID header."""
    cid = "test-correlation-id-fixture"
    api_client.defaults["HTTP_X_REQUEST_ID"] = cid
    return api_client, cid


@pytest.fixture()
def seeded_categories():
    """The five baseline categories, loaded through the seed command."""
    call_command("seed_data", stdout=StringIO())
    return list(ProductCategory.objects.order_by("created_at", "id"))


@pytest.fixture()
def category():
    """A single persisted, active category."""
    return ProductCategory.objects.create(name="Electronics", active=True)
