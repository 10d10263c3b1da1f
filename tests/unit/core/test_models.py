"""Unit tests for BaseModel, exercised through the concrete Customer model."""

from __future__ import annotations

import uuid

import pytest

from modules.customers.models import Customer

pytestmark = pytest.mark.unit


def _create(**overrides) -> Customer:
    defaults = {
        "first_name": "Ada",
        "last_name": "Lovelace",
        "email_address": f"{uuid.uuid4().hex[:8]}@example.com",
        "phone_number": "1234567890",
    }
    defaults.update(overrides)
    return Customer.objects.create(**defaults)


class TestBaseModel:
    """Tests for UUIDv7 PK and timestamp behaviour."""

    def test_id_is_uuid_version_7(self):
        obj = _create()
        assert isinstance(obj.id, uuid.UUID)
        assert obj.id.version == 7

    def test_ids_are_unique(self):
        assert _create().id != _create().id

    def test_timestamps_set_on_create(self):
        obj = _create()
        assert obj.created_at is not None
        assert obj.updated_at is not None

    def test_update_fields_refreshes_updated_at(self):
        obj = _create()
        before = obj.updated_at
        obj.first_name = "Augusta"
        obj.save(update_fields=["first_name"])
        obj.refresh_from_db()
        assert obj.first_name == "Augusta"
        assert obj.updated_at >= before

    def test_id_never_changes_on_save(self):
        obj = _create()
        original = obj.id
        obj.last_name = "King"
        obj.save()
        obj.refresh_from_db()
        assert obj.id == original
