"""FastAPI dependencies shared by the endpoint modules."""

from fastapi import Request

from guest_list_api.app.services.event_store import EventStore


def get_store(request: Request) -> EventStore:
    """Return the store attached to the running application."""
    return request.app.state.store
