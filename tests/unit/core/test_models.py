"""Unit tests for BaseModel, exercised through the concrete Category model."""

from __future__ import annotations

import uuid
from datetime import datetime, timedelta, timezone as dt_timezone

import pytest
from freezegun import freeze_time

from modules.categories.models import Category

pytestmark = pytest.mark.unit


class TestBaseModel:
    """Tests for UUIDv7 PK and timestamp behaviour."""

    def test_id_is_uuid_version_7(self):
        obj = Category.objects.create(name="test")
        assert isinstance(obj.id, uuid.UUID)
        assert obj.id.version == 7

    def test_ids_are_time_ordered(self):
        """UUIDv7 encodes timestamp, so sequential creates yield ordered IDs."""
        with freeze_time("2025-06-15 12:00:00") as frozen:
            a = Category.objects.create(name="first")
            frozen.tick(timedelta(milliseconds=5))
            b = Category.objects.create(name="second")
        assert str(a.id) < str(b.id)

    def test_id_is_not_editable(self):
        assert Category._meta.get_field("id").editable is False

    @freeze_time("2025-06-15 12:00:00")
    def test_timestamps_set_on_create(self):
        obj = Category.objects.create(name="test")
        expected = datetime(2025, 6, 15, 12, 0, tzinfo=dt_timezone.utc)
        assert obj.created_at == expected
        assert obj.updated_at == expected

    def test_updated_at_changes_on_save(self):
        with freeze_time("2025-06-15 12:00:00") as frozen:
            obj = Category.objects.create(name="original")
            created = obj.created_at
            frozen.tick(timedelta(minutes=1))
            obj.name = "modified"
            obj.save()
        obj.refresh_from_db()
        assert obj.updated_at == created + timedelta(minutes=1)
        assert obj.created_at == created

    def test_save_with_update_fields_includes_updated_at(self):
        """The save() guard must inject updated_at into update_fields."""
        with freeze_time("2025-06-15 12:00:00") as frozen:
            obj = Category.objects.create(name="original")
            original_updated = obj.updated_at
            frozen.tick(timedelta(seconds=30))
            obj.name = "modified"
            obj.save(update_fields=["name"])
        obj.refresh_from_db()
        assert obj.updated_at == original_updated + timedelta(seconds=30)
