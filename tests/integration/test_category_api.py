"""Integration tests for Category API endpoints."""

from __future__ import annotations

import uuid

import pytest

from modules.categories.models import Category

pytestmark = pytest.mark.integration

URL = "/api/v1/categories"


class TestCategoryRetrieve:
    def test_returns_category(self, api_client, category):
        response = api_client.get(f"{URL}/{category.id}")
        assert response.status_code == 200
        data = response.json()["data"]
        assert data["name"] == "Electronics"
        assert data["active"] is True

    def test_unknown_id_is_400(self, api_client):
        missing = uuid.uuid4()
        response = api_client.get(f"{URL}/{missing}")
        assert response.status_code == 400
        assert response.json()["message"] == f"Category {missing} not found."


class TestCategoryList:
    def test_ordered_by_name_with_pagination(self, api_client):
        for name in ("Home", "Books", "Garden"):
            Category.objects.create(name=name)
        data = api_client.get(URL, {"page_size": "2"}).json()["data"]
        assert [c["name"] for c in data["categories"]] == ["Books", "Garden"]
        assert data["pagination"] == {
            "page": 1,
            "page_size": 2,
            "total": 3,
            "total_pages": 2,
        }

    def test_filter_by_active(self, api_client):
        Category.objects.create(name="Visible")
        Category.objects.create(name="Hidden", active=False)
        data = api_client.get(URL, {"active": "false"}).json()["data"]
        assert [c["name"] for c in data["categories"]] == ["Hidden"]


class TestCategoryCreate:
    def test_creates_category(self, api_client):
        response = api_client.post(URL, {"name": "  Toys ", "description": "Fun"}, format="json")
        assert response.status_code == 200
        [item] = response.json()["data"]
        assert item["name"] == "Toys"
        assert Category.objects.filter(name="Toys").exists()

    def test_duplicate_name_is_500(self, api_client, category):
        response = api_client.post(URL, {"name": "electronics"}, format="json")
        assert response.status_code == 500
        assert response.json()["error"] == "Category 'electronics' already exists."
        assert Category.objects.count() == 1

    def test_blank_name_is_400(self, api_client):
        response = api_client.post(URL, {"name": " "}, format="json")
        assert response.status_code == 400
        assert response.json()["error"][0]["field"] == "name"


class TestCategoryUpdate:
    def test_deactivates_category(self, api_client, category):
        response = api_client.put(f"{URL}/{category.id}", {"active": False}, format="json")
        assert response.status_code == 200
        category.refresh_from_db()
        assert category.active is False

    def test_unknown_id_is_500(self, api_client):
        response = api_client.put(f"{URL}/{uuid.uuid4()}", {"name": "X"}, format="json")
        assert response.status_code == 500
