"""Pytest configuration and shared fixtures."""

import pytest
from fastapi.testclient import TestClient

from guest_list_api.app.main import create_app
from guest_list_api.app.services.event_store import EventStore


@pytest.fixture
def store() -> EventStore:
    return EventStore()


@pytest.fixture
def client(store: EventStore) -> TestClient:
    return TestClient(create_app(store=store))


@pytest.fixture
def event(store: EventStore):
    return store.create_event({"eventName": "Launch", "eventLocation": "HQ"})
