"""
Pydantic models for event data.

``EventCreate`` is the only accepted request body; events cannot be
updated.  An event is returned together with its full guest list;
there is no separate summary representation.
"""

from typing import ClassVar, List

from pydantic import BaseModel, Field, StrictStr

from .base import RequestModel
from .guest import GuestRead


class EventCreate(RequestModel):
    """Schema for creating an event.  No other property is accepted."""

    missing_message: ClassVar[str] = "Request body missing an eventName or eventLocation property"

    event_name: StrictStr = Field(..., alias="eventName", min_length=1, examples=["Launch"])
    event_location: StrictStr = Field(..., alias="eventLocation", min_length=1, examples=["HQ"])


class EventRead(BaseModel):
    """Schema for reading an event from the API."""

    event_id: str = Field(..., alias="eventId", examples=["1"])
    event_name: str = Field(..., alias="eventName", examples=["Launch"])
    event_location: str = Field(..., alias="eventLocation", examples=["HQ"])
    guest_list: List[GuestRead] = Field(default_factory=list, alias="guestList")

    model_config = {
        "from_attributes": True,
        "populate_by_name": True,
    }
