"""
Top‑level router of the API.

The public paths are fixed (``/event`` and the guest creation route on
``/``), so the sub‑routers are included without a prefix.
"""

from fastapi import APIRouter

from .endpoints import events, guests

router = APIRouter()

router.include_router(events.router, tags=["events"])
router.include_router(guests.router, tags=["guests"])
