"""Error types raised by the budget dashboard.

``ValidationError`` never leaves the form that produced it; ``GatewayError``
and ``AuthError`` come back from the remote data service.  Every error carries
a message that is safe to show to the user as-is.
"""

from __future__ import annotations

from typing import Optional


class BudgetAppError(Exception):
    """Base class for all errors surfaced to the user."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(BudgetAppError):
    """User input was rejected before reaching the Gateway or local state."""


class GatewayError(BudgetAppError):
    """A Gateway call failed (network failure or non-2xx response)."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


class AuthError(GatewayError):
    """The session is not valid: 401/403 from the Gateway, or no token held."""
