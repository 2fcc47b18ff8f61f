"""Integration tests for list pagination."""

from __future__ import annotations

from decimal import Decimal

import pytest

from modules.products.models import Product

pytestmark = pytest.mark.integration

URL = "/api/v1/products"


@pytest.fixture()
def product_batch():
    """Create a batch of products for pagination tests."""
    products = [
        Product(
            sku=f"SKU-{idx:03d}",
            name=f"Product {idx:03d}",
            description="Batch product",
            price=Decimal("9.99"),
            stock_quantity=10,
        )
        for idx in range(1, 121)
    ]
    Product.objects.bulk_create(products)
    return products


class TestPagination:
    def test_default_page_size(self, api_client, product_batch):
        response = api_client.get(URL)
        assert response.status_code == 200
        data = response.json()["data"]
        assert len(data["products"]) == 20
        assert data["pagination"] == {
            "page": 1,
            "page_size": 20,
            "total": 120,
            "total_pages": 6,
        }

    def test_custom_page_size(self, api_client, product_batch):
        data = api_client.get(URL, {"page_size": 50, "page": 3}).json()["data"]
        assert len(data["products"]) == 20
        assert data["pagination"]["total_pages"] == 3

    def test_max_page_size(self, api_client, product_batch):
        data = api_client.get(URL, {"page_size": 1000}).json()["data"]
        assert len(data["products"]) == 100
        assert data["pagination"]["page_size"] == 100

    def test_pages_do_not_overlap(self, api_client, product_batch):
        params = {"order_by": "name", "order_desc": "false", "page_size": 10}
        first = api_client.get(URL, {**params, "page": 1}).json()["data"]["products"]
        second = api_client.get(URL, {**params, "page": 2}).json()["data"]["products"]
        assert first[-1]["name"] == "Product 010"
        assert second[0]["name"] == "Product 011"

    def test_page_past_end_is_empty(self, api_client, product_batch):
        response = api_client.get(URL, {"page": 99})
        assert response.status_code == 200
        assert response.json()["data"]["products"] == []

    @pytest.mark.parametrize("params", [{"page": 0}, {"page_size": 0}, {"page": "x"}])
    def test_invalid_paging_is_400(self, api_client, params):
        response = api_client.get(URL, params)
        assert response.status_code == 400
        assert response.json()["message"] == "Invalid parameters"
