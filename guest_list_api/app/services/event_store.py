"""
In‑memory store for events and their guest lists.

The ``EventStore`` owns two independent ID counters and the ordered
collection of events; each event owns its ordered guest list.  Nothing
is persisted, so a store lives exactly as long as the application that
created it.  One store is created per app (see ``create_app``) which
keeps tests isolated from each other.

Request bodies arrive either as decoded JSON dictionaries or as the
request models from ``schemas``; dictionaries are validated through
the models before anything is touched.

FastAPI runs the (synchronous) endpoints in a thread pool, therefore
every operation is serialised behind a single lock.  Operations hand
out deep copies of the stored entities so that the response
serialisation never observes a mutation made by a later request.
"""

import copy
import itertools
import logging
import threading
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Union

from ..core.errors import EventNotFoundError, GuestNotFoundError
from ..schemas.event import EventCreate
from ..schemas.guest import GuestCreate, GuestUpdate


logger = logging.getLogger(__name__)


@dataclass(eq=False)
class Guest:
    """A single invitee.

    ``id`` comes from the store‑wide guest counter, so it is unique
    across all events.  ``event_id`` is copied from the creation request
    and is ``None`` when the request did not carry one.
    """

    id: str
    first_name: str
    last_name: str
    attending: bool = False
    deadline: Optional[str] = None
    event_id: Optional[str] = None


@dataclass(eq=False)
class Event:
    """A named, located gathering with its guests in arrival order."""

    event_id: str
    event_name: str
    event_location: str
    guest_list: List[Guest] = field(default_factory=list)


class EventStore:
    """Events and guests held in process memory."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._event_ids = itertools.count(1)
        self._guest_ids = itertools.count(1)
        # Insertion ordered, keyed by event ID.
        self._events: Dict[str, Event] = {}

    # ------------------------------------------------------------------
    # Events
    # ------------------------------------------------------------------
    def create_event(self, payload: Union[Dict[str, Any], EventCreate]) -> Event:
        """Create an event from ``eventName`` and ``eventLocation``.

        Both properties are required and no other property is accepted.
        The new event starts with an empty guest list.
        """
        data = EventCreate.parse(payload)

        with self._lock:
            event = Event(
                event_id=str(next(self._event_ids)),
                event_name=data.event_name,
                event_location=data.event_location,
            )
            self._events[event.event_id] = event
            logger.info("Created event %s (%s)", event.event_id, event.event_name)
            return copy.deepcopy(event)

    def list_events(self) -> List[Event]:
        with self._lock:
            return copy.deepcopy(list(self._events.values()))

    def delete_event(self, event_id: str) -> Event:
        """Remove an event together with its guest list and return it."""
        with self._lock:
            event = self._events.pop(event_id, None)
            if event is None:
                raise EventNotFoundError(event_id)
            logger.info(
                "Deleted event %s with %d guest(s)", event_id, len(event.guest_list)
            )
            return event

    # ------------------------------------------------------------------
    # Guests
    # ------------------------------------------------------------------
    def list_guests(self, event_id: str) -> List[Guest]:
        with self._lock:
            return copy.deepcopy(self._find_event(event_id).guest_list)

    def create_guest(self, payload: Union[Dict[str, Any], GuestCreate]) -> Guest:
        """Create a guest and attach it to the event named by ``eventId``.

        When no event has that ID the guest is still created (and its ID
        consumed) but it is not attached to any guest list.
        """
        data = GuestCreate.parse(payload)

        with self._lock:
            guest = Guest(
                id=str(next(self._guest_ids)),
                first_name=data.first_name,
                last_name=data.last_name,
                deadline=data.deadline or None,
                event_id=data.event_id,
            )
            event = self._events.get(data.event_id) if data.event_id is not None else None
            if event is None:
                # TODO: decide with API consumers whether this should become a 404.
                logger.warning(
                    "Guest %s references unknown event %s; not added to any guest list",
                    guest.id,
                    data.event_id,
                )
            else:
                event.guest_list.append(guest)
                logger.info("Added guest %s to event %s", guest.id, data.event_id)
            return copy.deepcopy(guest)

    def update_guest(
        self, event_id: str, guest_id: str, patch: Union[Dict[str, Any], GuestUpdate]
    ) -> Guest:
        """Apply ``patch`` to a guest of an event.

        Names and deadline are only overwritten by non‑empty values.
        ``attending`` is applied whenever the key is present, so an
        explicit ``false`` takes effect.  The body is checked before
        the event and guest are looked up.
        """
        changes = GuestUpdate.parse(patch)

        with self._lock:
            guest = self._find_guest(self._find_event(event_id), guest_id)
            if changes.first_name:
                guest.first_name = changes.first_name
            if changes.last_name:
                guest.last_name = changes.last_name
            if changes.deadline:
                guest.deadline = changes.deadline
            if changes.sends_attending:
                guest.attending = changes.attending
            logger.debug("Updated guest %s of event %s", guest_id, event_id)
            return copy.deepcopy(guest)

    def delete_guest(self, event_id: str, guest_id: str) -> Guest:
        with self._lock:
            event = self._find_event(event_id)
            guest = self._find_guest(event, guest_id)
            event.guest_list = [g for g in event.guest_list if g is not guest]
            logger.info("Removed guest %s from event %s", guest_id, event_id)
            return guest

    # ------------------------------------------------------------------
    # Helpers; callers hold the lock
    # ------------------------------------------------------------------
    def _find_event(self, event_id: str) -> Event:
        event = self._events.get(event_id)
        if event is None:
            raise EventNotFoundError(event_id)
        return event

    @staticmethod
    def _find_guest(event: Event, guest_id: str) -> Guest:
        # Linear scan; guest lists are small.
        for guest in event.guest_list:
            if guest.id == guest_id:
                return guest
        raise GuestNotFoundError(guest_id)
