"""
Domain errors raised by the event store.

Only two kinds of failure exist: the request data is malformed
(``ValidationError``) or it refers to an event or guest that does not
exist (``NotFoundError``).  The HTTP layer maps them to 400 and 404.
"""


class GuestListError(Exception):
    """Base error carrying a user‑safe ``message``."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ValidationError(GuestListError):
    """Request body is missing required fields or has disallowed keys."""


class NotFoundError(GuestListError):
    """Raised when an event or guest ID has no live entity."""

    def __init__(self, kind: str, entity_id: str) -> None:
        super().__init__(f"{kind} {entity_id} not found")
        self.kind = kind
        self.entity_id = entity_id


class EventNotFoundError(NotFoundError):
    def __init__(self, event_id: str) -> None:
        super().__init__("Event", event_id)


class GuestNotFoundError(NotFoundError):
    def __init__(self, guest_id: str) -> None:
        super().__init__("Guest", guest_id)
