"""Unit tests for ProductDjangoRepository.

Covers:
- get_by_id / save / list.
- Filtering through ProductFilter and explicit ordering.
- get_by_sku normalisation.
- Edge cases (invalid UUIDs, empty tables).
"""

from __future__ import annotations

from decimal import Decimal

import pytest

from modules.products.models import Product, ProductStatus
from modules.products.repositories.django_repository import ProductDjangoRepository
from modules.products.repositories.interfaces import IProductRepository

pytestmark = pytest.mark.unit


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _make_product(**overrides) -> Product:
    defaults = {
        "sku": "SKU-001",
        "name": "Widget",
        "price": Decimal("19.99"),
        "stock_quantity": 10,
    }
    defaults.update(overrides)
    product = Product(**defaults)
    product.save()
    return product


@pytest.fixture()
def repo():
    return ProductDjangoRepository()


class TestRepositoryInstantiation:
    def test_is_instance_of_interface(self, repo):
        assert isinstance(repo, IProductRepository)


# ===========================================================================
# get_by_id
# ===========================================================================


class TestGetById:
    def test_returns_product_when_found(self, repo):
        product = _make_product()
        result = repo.get_by_id(str(product.id))
        assert result is not None
        assert result.id == product.id

    def test_returns_none_when_not_found(self, repo):
        assert repo.get_by_id("00000000-0000-0000-0000-000000000000") is None

    def test_returns_none_for_invalid_uuid(self, repo):
        assert repo.get_by_id("not-a-uuid") is None


# ===========================================================================
# list
# ===========================================================================


class TestList:
    def test_returns_all_products(self, repo):
        _make_product(sku="SKU-A")
        _make_product(sku="SKU-B")
        assert repo.list().count() == 2

    def test_returns_empty_queryset_when_no_products(self, repo):
        assert list(repo.list()) == []

    def test_filters_by_status(self, repo):
        _make_product(sku="SKU-A", status=ProductStatus.ACTIVE)
        _make_product(sku="SKU-B", status=ProductStatus.INACTIVE)
        results = list(repo.list({"status": "active"}))
        assert [p.sku for p in results] == ["SKU-A"]

    def test_filters_by_name_icontains(self, repo):
        _make_product(sku="SKU-A", name="Widget Pro")
        _make_product(sku="SKU-B", name="Gadget Basic")
        results = list(repo.list({"name": "widget"}))
        assert [p.name for p in results] == ["Widget Pro"]

    def test_filters_by_price_range(self, repo):
        _make_product(sku="CHEAP", price=Decimal("5.00"))
        _make_product(sku="MID", price=Decimal("50.00"))
        _make_product(sku="DEAR", price=Decimal("500.00"))
        results = repo.list({"min_price": "10", "max_price": "100"})
        assert [p.sku for p in results] == ["MID"]

    def test_filters_by_category(self, repo, category):
        _make_product(sku="IN", category=category)
        _make_product(sku="OUT")
        results = repo.list({"category_id": str(category.id)})
        assert [p.sku for p in results] == ["IN"]

    def test_explicit_ordering(self, repo):
        _make_product(sku="B", price=Decimal("2.00"))
        _make_product(sku="A", price=Decimal("3.00"))
        _make_product(sku="C", price=Decimal("1.00"))
        results = repo.list(ordering=("-price", "-id"))
        assert [p.sku for p in results] == ["A", "B", "C"]


# ===========================================================================
# save
# ===========================================================================


class TestSave:
    def test_creates_new_product(self, repo):
        product = Product(sku="SKU-NEW", name="New Product", price=Decimal("9.99"))
        saved = repo.save(product)
        assert saved is product
        assert Product.objects.filter(id=saved.id).exists()

    def test_updates_existing_product(self, repo):
        product = _make_product()
        product.name = "Updated Name"
        repo.save(product)
        product.refresh_from_db()
        assert product.name == "Updated Name"


# ===========================================================================
# get_by_sku
# ===========================================================================


class TestGetBySku:
    def test_returns_product_when_found(self, repo):
        product = _make_product(sku="SKU-FIND")
        result = repo.get_by_sku("SKU-FIND")
        assert result is not None
        assert result.id == product.id

    def test_returns_none_when_not_found(self, repo):
        assert repo.get_by_sku("NONEXISTENT") is None

    def test_normalises_sku_on_lookup(self, repo):
        _make_product(sku="SKU-CASE")
        result = repo.get_by_sku("  sku-case  ")
        assert result is not None
        assert result.sku == "SKU-CASE"
