"""Tests for the GuestListAPI client.

The client is pointed at the in-process app by handing it the
TestClient as its session.
Run with: pytest tests/test_client.py -v
"""

import pytest
import requests
from fastapi.testclient import TestClient

from guest_list_api.client import GuestListAPI


@pytest.fixture
def api(client: TestClient) -> GuestListAPI:
    return GuestListAPI(base_url="http://testserver/", session=client)


class TestGuestListAPI:
    """Tests for GuestListAPI against the real routes"""

    def test_event_roundtrip(self, api: GuestListAPI):
        event, error = api.create_event("Launch", "HQ")

        assert error is None
        assert event["eventId"] == "1"
        events, error = api.list_events()
        assert error is None
        assert [e["eventName"] for e in events] == ["Launch"]

    def test_guest_lifecycle(self, api: GuestListAPI):
        api.create_event("Launch", "HQ")

        guest, error = api.create_guest(1, "Ann", "Lee", deadline="2026-12-01")
        assert error is None
        assert guest["eventId"] == "1"
        assert guest["deadline"] == "2026-12-01"

        updated, error = api.update_guest(1, guest["id"], attending=True)
        assert error is None
        assert updated["attending"] is True

        removed, error = api.delete_guest(1, guest["id"])
        assert error is None
        assert removed["id"] == guest["id"]
        assert api.list_guests(1) == ([], None)

    def test_not_found_error(self, api: GuestListAPI):
        data, error = api.delete_event(5)

        assert data is None
        assert error == {"status_code": 404, "message": "Event 5 not found"}

    def test_list_error_returns_empty_list(self, api: GuestListAPI):
        guests, error = api.list_guests(5)

        assert guests == []
        assert error["status_code"] == 404

    def test_validation_error(self, api: GuestListAPI):
        api.create_event("Launch", "HQ")
        api.create_guest(1, "Ann", "Lee")

        data, error = api.update_guest(1, 1, nickname="A")

        assert data is None
        assert error["status_code"] == 400
        assert "nickname" in error["message"]

    def test_transport_error(self):
        class FailingSession:
            def request(self, *args, **kwargs):
                raise requests.ConnectionError("connection refused")

        api = GuestListAPI(session=FailingSession())

        data, error = api.list_events()

        assert data == []
        assert error == {"status_code": None, "message": "connection refused"}
