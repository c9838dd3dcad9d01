"""
Service layer.

``EventStore`` holds all state and business rules.  API handlers only
translate between HTTP and store calls, so the store can be exercised
directly in tests.
"""

from .event_store import Event, EventStore, Guest

__all__ = ["Event", "EventStore", "Guest"]
