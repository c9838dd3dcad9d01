"""
Top‑level package for the Guest List API.

The server application lives under ``guest_list_api.app`` and a small
HTTP client for it lives in ``guest_list_api.client``.  Importing the
package itself has no side effects; the FastAPI app is only built when
``guest_list_api.app`` is imported.
"""

__all__ = []
