"""Integration tests for the HTTP surface.

Requests go through FastAPI's TestClient against an app with a fresh
store per test.
Run with: pytest tests/test_api.py -v
"""

import pytest
from fastapi.testclient import TestClient


def create_event(client: TestClient, name: str = "Launch", location: str = "HQ") -> dict:
    response = client.post("/event", json={"eventName": name, "eventLocation": location})
    assert response.status_code == 200
    return response.json()


def create_guest(client: TestClient, event_id: str = "1", **extra) -> dict:
    body = {"firstName": "Ann", "lastName": "Lee", "eventId": event_id, **extra}
    response = client.post("/", json=body)
    assert response.status_code == 200
    return response.json()


class TestEvents:
    """Tests for /event"""

    def test_list_empty(self, client: TestClient):
        response = client.get("/event")

        assert response.status_code == 200
        assert response.json() == []

    def test_create_event(self, client: TestClient):
        response = client.post("/event", json={"eventName": "Launch", "eventLocation": "HQ"})

        assert response.status_code == 200
        assert response.json() == {
            "eventId": "1",
            "eventName": "Launch",
            "eventLocation": "HQ",
            "guestList": [],
        }

    def test_created_events_listed_with_empty_guest_list(self, client: TestClient):
        create_event(client, "Launch", "HQ")
        create_event(client, "Retro", "Office")

        events = client.get("/event").json()

        assert [e["eventId"] for e in events] == ["1", "2"]
        assert all(e["guestList"] == [] for e in events)

    @pytest.mark.parametrize(
        "body",
        [
            {"eventName": "Launch"},
            {"eventLocation": "HQ"},
            {"eventName": "Launch", "eventLocation": "HQ", "extra": True},
        ],
    )
    def test_create_event_invalid(self, client: TestClient, body):
        response = client.post("/event", json=body)

        assert response.status_code == 400
        errors = response.json()["errors"]
        assert len(errors) == 1
        assert errors[0]["message"]
        assert client.get("/event").json() == []

    def test_create_event_without_body(self, client: TestClient):
        response = client.post("/event")

        assert response.status_code == 400
        assert response.json() == {
            "errors": [{"message": "Request body missing an eventName or eventLocation property"}]
        }

    def test_malformed_json_is_400(self, client: TestClient):
        response = client.post(
            "/event", content="{not json", headers={"Content-Type": "application/json"}
        )

        assert response.status_code == 400
        assert response.json() == {"errors": [{"message": "Request body must be a JSON object"}]}

    def test_array_body_is_400(self, client: TestClient):
        response = client.post("/event", json=["Launch", "HQ"])

        assert response.status_code == 400

    def test_delete_event(self, client: TestClient):
        create_event(client)
        create_guest(client)

        response = client.delete("/event/1")

        assert response.status_code == 200
        assert response.json()["eventId"] == "1"
        assert len(response.json()["guestList"]) == 1
        assert client.get("/event").json() == []

    def test_delete_unknown_event(self, client: TestClient):
        create_event(client)

        response = client.delete("/event/7")

        assert response.status_code == 404
        assert response.json() == {"errors": [{"message": "Event 7 not found"}]}
        assert len(client.get("/event").json()) == 1


class TestGuests:
    """Tests for guest creation, listing, update and deletion"""

    def test_create_guest(self, client: TestClient):
        create_event(client)

        guest = create_guest(client)

        assert guest == {
            "id": "1",
            "firstName": "Ann",
            "lastName": "Lee",
            "attending": False,
            "eventId": "1",
        }
        assert client.get("/event/1/guest-list").json() == [guest]
        assert client.get("/event").json()[0]["guestList"] == [guest]

    def test_create_guest_with_deadline(self, client: TestClient):
        create_event(client)

        guest = create_guest(client, deadline="2026-12-01")

        assert guest["deadline"] == "2026-12-01"

    def test_create_guest_for_unknown_event(self, client: TestClient):
        create_event(client)

        guest = create_guest(client, event_id="99")

        assert guest["id"] == "1"
        assert guest["eventId"] == "99"
        assert client.get("/event/1/guest-list").json() == []
        assert client.get("/event/99/guest-list").status_code == 404

    @pytest.mark.parametrize(
        "body",
        [
            {"firstName": "Ann", "eventId": "1"},
            {"lastName": "Lee", "eventId": "1"},
            {"firstName": "Ann", "lastName": "Lee", "eventId": "1", "nickname": "A"},
        ],
    )
    def test_create_guest_invalid(self, client: TestClient, body):
        create_event(client)

        response = client.post("/", json=body)

        assert response.status_code == 400
        assert client.get("/event/1/guest-list").json() == []

    def test_guest_list_unknown_event(self, client: TestClient):
        response = client.get("/event/3/guest-list")

        assert response.status_code == 404
        assert response.json() == {"errors": [{"message": "Event 3 not found"}]}

    def test_patch_unknown_key_is_400(self, client: TestClient):
        create_event(client)
        create_guest(client)

        response = client.patch(
            "/event/1/guest/1", json={"attending": True, "firstName": "Anna", "nickname": "A"}
        )

        assert response.status_code == 400
        message = response.json()["errors"][0]["message"]
        assert "nickname" in message
        assert client.get("/event/1/guest-list").json()[0]["firstName"] == "Ann"

    def test_patch_attending_false(self, client: TestClient):
        create_event(client)
        create_guest(client)
        client.patch("/event/1/guest/1", json={"attending": True})

        response = client.patch("/event/1/guest/1", json={"attending": False})

        assert response.status_code == 200
        assert response.json()["attending"] is False

    def test_patch_empty_body_returns_guest_unchanged(self, client: TestClient):
        create_event(client)
        guest = create_guest(client)

        response = client.patch("/event/1/guest/1", json={})

        assert response.status_code == 200
        assert response.json() == guest

    @pytest.mark.parametrize(
        "path, message",
        [
            ("/event/2/guest/1", "Event 2 not found"),
            ("/event/1/guest/2", "Guest 2 not found"),
        ],
    )
    def test_patch_not_found(self, client: TestClient, path, message):
        create_event(client)
        create_guest(client)

        response = client.patch(path, json={"attending": True})

        assert response.status_code == 404
        assert response.json() == {"errors": [{"message": message}]}

    def test_delete_guest(self, client: TestClient):
        create_event(client)
        create_guest(client)
        bob = create_guest(client, firstName="Bob")

        response = client.delete("/event/1/guest/1")

        assert response.status_code == 200
        assert response.json()["firstName"] == "Ann"
        assert client.get("/event/1/guest-list").json() == [bob]

    def test_guest_ids_never_reused(self, client: TestClient):
        create_event(client)
        create_guest(client)
        client.delete("/event/1/guest/1")

        unattached = create_guest(client, event_id="42")
        attached = create_guest(client)

        assert (unattached["id"], attached["id"]) == ("2", "3")
        assert [g["id"] for g in client.get("/event/1/guest-list").json()] == ["3"]

    def test_patch_non_boolean_attending(self, client: TestClient):
        create_event(client)
        create_guest(client)

        response = client.patch("/event/1/guest/1", json={"attending": "yes"})

        assert response.status_code == 400
        assert response.json() == {
            "errors": [{"message": "Property attending must be a boolean"}]
        }

    def test_delete_unknown_guest(self, client: TestClient):
        create_event(client)

        response = client.delete("/event/1/guest/1")

        assert response.status_code == 404
        assert response.json() == {"errors": [{"message": "Guest 1 not found"}]}


class TestCors:
    """Every response carries permissive cross-origin headers"""

    @pytest.mark.parametrize(
        "method, path",
        [("get", "/event"), ("delete", "/event/1"), ("post", "/")],
    )
    def test_headers_on_success_and_errors(self, client: TestClient, method, path):
        response = getattr(client, method)(path)

        assert response.headers["access-control-allow-origin"] == "*"
        assert "PATCH" in response.headers["access-control-allow-methods"]
        assert "Content-Type" in response.headers["access-control-allow-headers"]

    def test_preflight(self, client: TestClient):
        response = client.options(
            "/event/1/guest/1",
            headers={"Origin": "http://example.com", "Access-Control-Request-Method": "PATCH"},
        )

        assert response.status_code == 200
        assert response.headers["access-control-allow-origin"] == "*"


class TestScenario:
    """End-to-end walk through the guest list lifecycle"""

    def test_full_lifecycle(self, client: TestClient):
        event = client.post("/event", json={"eventName": "Launch", "eventLocation": "HQ"}).json()
        assert event["eventId"] == "1"

        guest = client.post("/", json={"firstName": "Ann", "lastName": "Lee", "eventId": "1"}).json()
        assert guest["id"] == "1"
        assert guest["attending"] is False
        assert guest["eventId"] == "1"

        guests = client.get("/event/1/guest-list").json()
        assert [g["id"] for g in guests] == ["1"]

        patched = client.patch("/event/1/guest/1", json={"attending": True}).json()
        assert patched["attending"] is True

        deleted = client.delete("/event/1/guest/1")
        assert deleted.status_code == 200
        assert client.get("/event/1/guest-list").json() == []
