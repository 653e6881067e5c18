"""Shared fixtures for API tests."""

import json

import pytest
from fastapi.testclient import TestClient

from civicfix.interface.api.app import create_app
from tests.di import build_test_container
from tests.e2e.helpers import ADMIN_EMAIL, JWT_SECRET, WEBHOOK_SECRET


@pytest.fixture
def client(monkeypatch):
    """Test client backed by a fresh in-memory container."""
    monkeypatch.setenv("ENVIRONMENT", "test")
    monkeypatch.setenv("AUTH__JWT_SECRET", JWT_SECRET)
    monkeypatch.setenv("AUTH__ADMIN_EMAILS", json.dumps([ADMIN_EMAIL]))
    monkeypatch.setenv("PAYMENTS__WEBHOOK_SECRET", WEBHOOK_SECRET)

    app_instance = create_app(container=build_test_container(api=True))
    return TestClient(app_instance)
