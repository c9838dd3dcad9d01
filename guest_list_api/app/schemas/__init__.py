"""
Pydantic schema definitions for API payloads.

Attribute names are snake_case in Python and camelCase on the wire
(``eventId``, ``guestList`` ...).  Request models (``*Create``,
``*Update``) are strict and reject unknown keys; read models are used
as response models.
"""
