"""errors.py — Error taxonomy for the records API.

Every error carries the HTTP status it maps to plus the ``message`` and
``detail`` strings of the error reply.
"""
from __future__ import annotations

from typing import Optional

__all__ = [
    "NotFoundError",
    "RecordDecodeError",
    "RecordsApiError",
    "RoutingError",
    "StoreError",
    "ValidationError",
]


class RecordsApiError(Exception):
    status_code = 500
    default_message = "Internal server error"

    def __init__(self, detail: str = "", message: Optional[str] = None) -> None:
        super().__init__(detail)
        self.detail = detail
        self.message = message or self.default_message


class ValidationError(RecordsApiError):
    """Malformed or incomplete create payload."""

    status_code = 400
    default_message = "Invalid request"


class NotFoundError(RecordsApiError):
    """No record stored under the requested id."""

    status_code = 404
    default_message = "Not found"


class RoutingError(RecordsApiError):
    """Unknown path, or unsupported method on a known path."""

    status_code = 404
    default_message = "Invalid path"


class StoreError(RecordsApiError):
    """Any failure talking to DynamoDB."""


class RecordDecodeError(StoreError):
    """A stored item could not be decoded into a Record."""
