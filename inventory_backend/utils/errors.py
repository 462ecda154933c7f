"""
Error taxonomy for the inventory backend.
"""

from typing import Any, Optional

import httpx
from postgrest.exceptions import APIError

from inventory_backend.utils.constants import LOGIN_FAILED, TRANSPORT_ERROR


class InventoryError(Exception):
    """Base exception for the inventory backend"""
    pass


class AuthenticationError(InventoryError):
    """Raised when login matches zero or more than one employee"""

    def __init__(self, message: str = LOGIN_FAILED):
        super().__init__(message)
        self.message = message


class BackendError(InventoryError):
    """
    Raised when Supabase reports a failure for a query or mutation.

    Carries the PostgREST error fields through unchanged so callers can
    inspect them.
    """

    def __init__(
        self,
        message: str,
        code: Optional[str] = None,
        details: Optional[Any] = None,
        hint: Optional[Any] = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.details = details
        self.hint = hint

    @classmethod
    def from_api_error(cls, exc: APIError) -> "BackendError":
        """Build a BackendError from a postgrest APIError."""
        return cls(
            message=exc.message or str(exc),
            code=exc.code,
            details=exc.details,
            hint=exc.hint,
        )

    @classmethod
    def from_transport_error(cls, exc: httpx.HTTPError) -> "BackendError":
        """Build a BackendError for a request that never got a PostgREST reply."""
        return cls(message=str(exc) or type(exc).__name__, code=TRANSPORT_ERROR)

    def __str__(self) -> str:
        if self.code:
            return f"{self.message} (code={self.code})"
        return self.message
