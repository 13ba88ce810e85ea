"""Error types raised by ``MyLifeClient``.

Usage:
- Catch `MyLifeApiError` for any non-2xx response and inspect `status_code`
  or `details` (the decoded error body when it is JSON).
- Catch `MyLifeNotFoundError` when the requested record does not exist.
"""

from __future__ import annotations

from typing import Any, Optional


class MyLifeApiError(Exception):
    """Base error for MyLife Companion API failures.

    Args:
        message: Human-readable error description.
        status_code: Optional HTTP status code associated with the failure.
        details: Optional structured payload from the server (e.g., JSON body).
    """

    def __init__(self, message: str, *, status_code: Optional[int] = None, details: Optional[Any] = None) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.details = details


class MyLifeNotFoundError(MyLifeApiError):
    """Raised when the API answers 404 for the requested record."""
