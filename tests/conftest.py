from decimal import Decimal

import pytest

from rest_framework.test import APIClient

from modules.categories.models import Category
from modules.products.models import Product


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
    """A persisted Category instance."""
    return Category.objects.create(name="Electronics", description="Gadgets")


@pytest.fixture()
def sample_product(category):
    """A persisted Product instance inside ``category``."""
    product = Product(
        sku="SKU-001",
        name="Widget Alpha",
        description="A fine widget",
        price=Decimal("19.99"),
        stock_quantity=100,
        category=category,
    )
    product.save()
    return product
