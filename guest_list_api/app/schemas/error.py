"""Error body shared by every 400 and 404 response."""

from typing import List

from pydantic import BaseModel


class ErrorMessage(BaseModel):
    message: str


class ErrorResponse(BaseModel):
    errors: List[ErrorMessage]

    @classmethod
    def from_message(cls, message: str) -> "ErrorResponse":
        return cls(errors=[ErrorMessage(message=message)])
