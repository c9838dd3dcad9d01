"""
Event endpoints.

Events can be created, listed and deleted; there is no update route.
Every event is returned with its nested guest list.  Domain errors
raised by the store are translated by the exception handlers installed
in ``create_app``.
"""

from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Body, Depends

from guest_list_api.app.api.deps import get_store
from guest_list_api.app.schemas.error import ErrorResponse
from guest_list_api.app.schemas.event import EventCreate, EventRead
from guest_list_api.app.schemas.guest import GuestRead
from guest_list_api.app.services.event_store import EventStore


router = APIRouter()


@router.get("/event", response_model=List[EventRead], response_model_exclude_none=True)
def list_events(store: EventStore = Depends(get_store)) -> List[EventRead]:
    """Return all events in creation order."""
    return store.list_events()


@router.post(
    "/event",
    response_model=EventRead,
    response_model_exclude_none=True,
    responses={400: {"model": ErrorResponse}},
)
def create_event(
    # Raw JSON object; the request model is applied by ``parse`` so that
    # failures produce the {"errors": [...]} body.
    payload: Optional[Dict[str, Any]] = Body(None),
    store: EventStore = Depends(get_store),
) -> EventRead:
    """Create a new event.

    The body must contain exactly ``eventName`` and ``eventLocation``.
    """
    return store.create_event(EventCreate.parse(payload))


@router.delete(
    "/event/{event_id}",
    response_model=EventRead,
    response_model_exclude_none=True,
    responses={404: {"model": ErrorResponse}},
)
def delete_event(event_id: str, store: EventStore = Depends(get_store)) -> EventRead:
    """Delete an event with its guest list and return the removed event."""
    return store.delete_event(event_id)


@router.get(
    "/event/{event_id}/guest-list",
    response_model=List[GuestRead],
    response_model_exclude_none=True,
    responses={404: {"model": ErrorResponse}},
)
def list_guests(event_id: str, store: EventStore = Depends(get_store)) -> List[GuestRead]:
    """Return the guests of one event in the order they were added."""
    return store.list_guests(event_id)
