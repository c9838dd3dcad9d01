"""
Pydantic models for guests.

``GuestCreate`` and ``GuestUpdate`` describe the accepted request
bodies.  ``GuestRead`` is returned by every guest endpoint and nested
inside ``EventRead.guest_list``; ``deadline`` and ``event_id`` are left
out of responses when unset.
"""

from typing import ClassVar, Optional, Union

from pydantic import BaseModel, Field, StrictBool, StrictInt, StrictStr, field_validator

from .base import RequestModel


class GuestCreate(RequestModel):
    missing_message: ClassVar[str] = "Request body missing a firstName or lastName property"

    first_name: StrictStr = Field(..., alias="firstName", min_length=1)
    last_name: StrictStr = Field(..., alias="lastName", min_length=1)
    deadline: Optional[StrictStr] = None
    event_id: Optional[Union[StrictStr, StrictInt]] = Field(None, alias="eventId")

    @field_validator("event_id")
    @classmethod
    def event_id_as_string(cls, value):
        # Integer IDs are accepted on purpose so that {"eventId": 1} matches event "1".
        return str(value) if isinstance(value, int) else value


class GuestUpdate(RequestModel):
    """Schema for updating a guest.

    All fields are optional.  Names and deadline are only applied when
    non‑empty; ``attending`` is applied whenever it was sent, which is
    why it is checked via ``model_fields_set`` rather than its value.
    """

    first_name: Optional[StrictStr] = Field(None, alias="firstName")
    last_name: Optional[StrictStr] = Field(None, alias="lastName")
    deadline: Optional[StrictStr] = None
    attending: StrictBool = False

    @property
    def sends_attending(self) -> bool:
        return "attending" in self.model_fields_set


class GuestRead(BaseModel):
    id: str = Field(..., examples=["1"])
    first_name: str = Field(..., alias="firstName", examples=["Ann"])
    last_name: str = Field(..., alias="lastName", examples=["Lee"])
    deadline: Optional[str] = Field(None, examples=["2026-12-01"])
    attending: bool = False
    event_id: Optional[str] = Field(None, alias="eventId", examples=["1"])

    model_config = {
        "from_attributes": True,
        "populate_by_name": True,
    }
