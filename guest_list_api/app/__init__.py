"""
Application package initializer.

The service is split into a small number of layers: ``core`` holds
configuration, logging and error types, ``schemas`` the pydantic
response models, ``services`` the in‑memory ``EventStore`` and ``api``
the FastAPI routers that translate HTTP requests into store calls.
"""

from .main import app  # noqa: F401
