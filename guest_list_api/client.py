"""Guest List API client.

This module defines a thin client wrapper around the Guest List REST
API.  The client uses the ``requests`` library internally and exposes
one method per endpoint:

* :meth:`list_events` – return all events with their guest lists.
* :meth:`create_event` – create an event.
* :meth:`delete_event` – delete an event.
* :meth:`list_guests` – return the guest list of one event.
* :meth:`create_guest` – invite a guest to an event.
* :meth:`update_guest` – change a guest's details or attendance.
* :meth:`delete_guest` – remove a guest from an event.

Every method returns a ``(data, error)`` tuple.  On success ``error``
is ``None``; on failure ``data`` is ``None`` (or an empty list for
list operations) and ``error`` is a dictionary with the keys
``status_code`` and ``message``.  The message is taken from the
``errors`` array the server returns for 400 and 404 responses.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Tuple

import requests


logger = logging.getLogger(__name__)

Result = Tuple[Optional[Any], Optional[Dict[str, Any]]]


class GuestListAPI:
    """Client for interacting with the Guest List API."""

    def __init__(
        self,
        *,
        base_url: str = "http://localhost:5000",
        session: Optional[requests.Session] = None,
        timeout: float = 15,
    ) -> None:
        """Initialise the API client.

        Args:
            base_url: Base URL of the server, e.g. ``http://localhost:5000``.
            session: Optional session object.  Anything exposing a
                requests compatible ``request`` method works.  If not
                supplied a ``requests.Session`` is created.
            timeout: Timeout in seconds applied to every request.
        """
        self.base_url = base_url.rstrip("/")
        self.session = session or requests.Session()
        self.timeout = timeout

    # ------------------------------------------------------------------
    # Low level HTTP helpers
    # ------------------------------------------------------------------
    def _request(self, method: str, path: str, *, json_body: Any | None = None) -> Result:
        """Perform an HTTP request to the API.

        Args:
            method: HTTP method (``GET``, ``POST``, ``PATCH``, ``DELETE``).
            path: Path relative to :attr:`base_url` (e.g. ``/event``).
            json_body: JSON body to send with the request.
        Returns:
            A tuple ``(data, error)``.
        """
        url = f"{self.base_url}{path}"
        try:
            logger.debug("Sending %s request to %s", method, url)
            response = self.session.request(method, url, json=json_body, timeout=self.timeout)
        except requests.RequestException as exc:
            logger.error("API request failed: %s", exc)
            return None, {"status_code": None, "message": str(exc)}

        if response.status_code >= 400:
            message = self._error_message(response)
            logger.error("API request failed (%s): %s", response.status_code, message)
            return None, {"status_code": response.status_code, "message": message}
        if response.content:
            return response.json(), None
        return None, None

    @staticmethod
    def _error_message(response: Any) -> str:
        try:
            body = response.json()
        except ValueError:
            return response.text or f"HTTP {response.status_code}"
        errors = body.get("errors") if isinstance(body, dict) else None
        if errors:
            return "; ".join(str(err.get("message", err)) for err in errors)
        return str(body)

    def _list(self, path: str) -> Tuple[List[Dict[str, Any]], Optional[Dict[str, Any]]]:
        data, error = self._request("GET", path)
        if error:
            return [], error
        return data if isinstance(data, list) else [], None

    # ------------------------------------------------------------------
    # Event operations
    # ------------------------------------------------------------------
    def list_events(self) -> Tuple[List[Dict[str, Any]], Optional[Dict[str, Any]]]:
        return self._list("/event")

    def create_event(self, event_name: str, event_location: str) -> Result:
        payload = {"eventName": event_name, "eventLocation": event_location}
        return self._request("POST", "/event", json_body=payload)

    def delete_event(self, event_id: Any) -> Result:
        return self._request("DELETE", f"/event/{event_id}")

    # ------------------------------------------------------------------
    # Guest operations
    # ------------------------------------------------------------------
    def list_guests(self, event_id: Any) -> Tuple[List[Dict[str, Any]], Optional[Dict[str, Any]]]:
        return self._list(f"/event/{event_id}/guest-list")

    def create_guest(
        self,
        event_id: Any,
        first_name: str,
        last_name: str,
        deadline: Optional[str] = None,
    ) -> Result:
        """Invite a guest to an event.

        ``deadline`` is only sent when given.
        """
        payload: Dict[str, Any] = {
            "firstName": first_name,
            "lastName": last_name,
            "eventId": str(event_id),
        }
        if deadline:
            payload["deadline"] = deadline
        return self._request("POST", "/", json_body=payload)

    def update_guest(self, event_id: Any, guest_id: Any, **changes: Any) -> Result:
        """Update a guest.

        Keyword arguments use the wire names, e.g.
        ``update_guest(1, 2, attending=True, firstName="Ann")``.
        """
        return self._request("PATCH", f"/event/{event_id}/guest/{guest_id}", json_body=changes)

    def delete_guest(self, event_id: Any, guest_id: Any) -> Result:
        return self._request("DELETE", f"/event/{event_id}/guest/{guest_id}")
