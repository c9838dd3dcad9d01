"""
Endpoint subpackage.

Each module defines an APIRouter for one entity (events, guests).  The
routers are aggregated in ``router.py`` at the package level.
"""
