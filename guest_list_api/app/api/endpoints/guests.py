"""
Guest endpoints.

Guests are created on ``POST /`` with the owning ``eventId`` in the
body, and updated or deleted through the event they belong to.
"""

from typing import Any, Dict, Optional

from fastapi import APIRouter, Body, Depends

from guest_list_api.app.api.deps import get_store
from guest_list_api.app.schemas.error import ErrorResponse
from guest_list_api.app.schemas.guest import GuestCreate, GuestRead, GuestUpdate
from guest_list_api.app.services.event_store import EventStore


router = APIRouter()


@router.post(
    "/",
    response_model=GuestRead,
    response_model_exclude_none=True,
    responses={400: {"model": ErrorResponse}},
)
def create_guest(
    # Raw JSON object; the request model is applied by ``parse`` so that
    # failures produce the {"errors": [...]} body.
    payload: Optional[Dict[str, Any]] = Body(None),
    store: EventStore = Depends(get_store),
) -> GuestRead:
    """Create a guest.

    The guest is appended to the guest list of the event named by
    ``eventId``.  If no such event exists the guest is still returned,
    but it does not show up in any guest list.
    """
    return store.create_guest(GuestCreate.parse(payload))


@router.patch(
    "/event/{event_id}/guest/{guest_id}",
    response_model=GuestRead,
    response_model_exclude_none=True,
    responses={400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}},
)
def update_guest(
    event_id: str,
    guest_id: str,
    patch: Optional[Dict[str, Any]] = Body(None),
    store: EventStore = Depends(get_store),
) -> GuestRead:
    """Modify a single guest.

    Accepts any subset of ``firstName``, ``lastName``, ``deadline`` and
    ``attending``; any other key rejects the whole request.
    """
    return store.update_guest(event_id, guest_id, GuestUpdate.parse(patch))


@router.delete(
    "/event/{event_id}/guest/{guest_id}",
    response_model=GuestRead,
    response_model_exclude_none=True,
    responses={404: {"model": ErrorResponse}},
)
def delete_guest(
    event_id: str,
    guest_id: str,
    store: EventStore = Depends(get_store),
) -> GuestRead:
    """Remove a guest from its event and return it."""
    return store.delete_guest(event_id, guest_id)
