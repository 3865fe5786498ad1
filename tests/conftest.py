from decimal import Decimal

import pytest

from rest_framework.test import APIClient

from modules.products.models import Category, Product


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
def category():
    """A persisted Category."""
    return Category.objects.create(name="Hardware")


@pytest.fixture()
def make_product():
    """Factory persisting a Product with sensible defaults."""

    def _make(**overrides) -> Product:
        defaults = {"name": "Product 1", "price": Decimal("10.00")}
        defaults.update(overrides)
        return Product.objects.create(**defaults)

    return _make
