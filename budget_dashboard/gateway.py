"""HTTP client for the remote budget service.

``BudgetApiGateway`` wraps a :class:`requests.Session` and exposes one method
per endpoint.  Responses are converted into the dataclasses in
:mod:`budget_dashboard.models`; transport failures and non-2xx responses are
raised as :class:`~budget_dashboard.errors.GatewayError`, and 401/403 as
:class:`~budget_dashboard.errors.AuthError`.

Every call except login and register sends ``Authorization: Bearer <token>``
with the token returned by ``token_provider``.  When no token is available
the call fails with ``AuthError`` without touching the network.
"""

from __future__ import annotations

from decimal import Decimal
from typing import Any, Callable, Dict, List, Optional

import requests

from . import config
from .errors import AuthError, GatewayError
from .logging_setup import get_logger
from .models import Expense, PhotoUploadResult, Profile, ProfileUpdate, RegistrationData, to_amount

logger = get_logger(__name__)

UNREACHABLE_MESSAGE = "Could not reach the budget service. Please try again later."
SESSION_EXPIRED_MESSAGE = "Your session has expired. Please log in again."
MALFORMED_MESSAGE = "The budget service sent an unexpected response."


def _error_message(response: requests.Response, default: str) -> str:
    """Pull a user-facing message out of an error response body."""
    try:
        body = response.json()
    except ValueError:
        return default
    if isinstance(body, dict):
        for key in ("message", "error"):
            value = body.get(key)
            if isinstance(value, str) and value.strip():
                return value
    return default


class BudgetApiGateway:
    """Client for the auth, data and profile endpoints of the budget service."""

    def __init__(
        self,
        base_url: Optional[str] = None,
        token_provider: Optional[Callable[[], Optional[str]]] = None,
        *,
        session: Optional[requests.Session] = None,
        timeout: Optional[float] = None,
    ):
        self.base_url = (base_url or config.get_api_url()).rstrip("/")
        self.timeout = timeout if timeout is not None else config.get_api_timeout()
        self._token_provider = token_provider or (lambda: None)
        self._session = session or requests.Session()

    # ------------------------------------------------------------------
    # Transport
    # ------------------------------------------------------------------

    def _request(
        self,
        method: str,
        path: str,
        *,
        json: Any = None,
        files: Optional[Dict[str, Any]] = None,
        authenticated: bool = True,
        error_message: str = "The request failed.",
    ) -> requests.Response:
        headers: Dict[str, str] = {}
        if authenticated:
            token = self._token_provider()
            if not token:
                raise AuthError("Please log in to continue.")
            headers["Authorization"] = f"Bearer {token}"
        if files is None:
            headers["Content-Type"] = "application/json"

        url = f"{self.base_url}{path}"
        try:
            response = self._session.request(
                method,
                url,
                json=json,
                files=files,
                headers=headers,
                timeout=self.timeout,
            )
        except requests.RequestException as exc:
            logger.warning("%s %s failed: %s", method, path, exc)
            raise GatewayError(UNREACHABLE_MESSAGE) from exc

        status = response.status_code
        logger.debug("%s %s -> %s", method, path, status)
        if status in (401, 403):
            logger.warning("%s %s rejected with %s", method, path, status)
            raise AuthError(_error_message(response, SESSION_EXPIRED_MESSAGE), status)
        if not 200 <= status < 300:
            logger.warning("%s %s returned %s", method, path, status)
            raise GatewayError(_error_message(response, error_message), status)
        return response

    @staticmethod
    def _json(response: requests.Response) -> Any:
        try:
            return response.json()
        except ValueError as exc:
            raise GatewayError(MALFORMED_MESSAGE, response.status_code) from exc

    def _token_from(self, response: requests.Response) -> str:
        body = self._json(response)
        token = body.get("token") if isinstance(body, dict) else None
        if not token:
            raise GatewayError(MALFORMED_MESSAGE, response.status_code)
        return str(token)

    def _budget_from(self, response: requests.Response) -> Decimal:
        body = self._json(response)
        try:
            return to_amount(body.get("budget") if isinstance(body, dict) else None)
        except ValueError as exc:
            raise GatewayError(MALFORMED_MESSAGE, response.status_code) from exc

    def _expense_from(self, payload: Any, status: int) -> Expense:
        if not isinstance(payload, dict):
            raise GatewayError(MALFORMED_MESSAGE, status)
        try:
            return Expense.from_api(payload)
        except ValueError as exc:
            raise GatewayError(MALFORMED_MESSAGE, status) from exc

    # ------------------------------------------------------------------
    # Auth endpoints
    # ------------------------------------------------------------------

    def login(self, username: str, password: str) -> str:
        response = self._request(
            "POST",
            "/auth/login",
            json={"username": username, "password": password},
            authenticated=False,
            error_message="Login failed. Please try again later.",
        )
        return self._token_from(response)

    def register(self, user: RegistrationData) -> str:
        response = self._request(
            "POST",
            "/auth/register",
            json=user.to_payload(),
            authenticated=False,
            error_message="Registration failed. Please try again later.",
        )
        return self._token_from(response)

    def change_password(self, current_password: str, new_password: str, confirmation_password: str) -> str:
        response = self._request(
            "POST",
            "/auth/change-password",
            json={
                "currentPassword": current_password,
                "newPassword": new_password,
                "confirmationPassword": confirmation_password,
            },
            error_message="Failed to change password.",
        )
        try:
            body = response.json()
        except ValueError:
            body = None
        if isinstance(body, dict) and body.get("message"):
            return str(body["message"])
        return "Password changed!"

    # ------------------------------------------------------------------
    # Data endpoints
    # ------------------------------------------------------------------

    def get_budget(self) -> Decimal:
        return self._budget_from(self._request("GET", "/data/budget", error_message="Failed to load budget."))

    def set_budget(self, budget: Decimal) -> Decimal:
        response = self._request(
            "POST",
            "/data/budget",
            json={"budget": float(budget)},
            error_message="Error updating budget.",
        )
        return self._budget_from(response)

    def get_expenses(self) -> List[Expense]:
        response = self._request("GET", "/data/expenses", error_message="Failed to load expenses.")
        body = self._json(response)
        if not isinstance(body, list):
            raise GatewayError(MALFORMED_MESSAGE, response.status_code)
        return [self._expense_from(item, response.status_code) for item in body]

    def add_expense(self, name: str, amount: Decimal, category: str) -> Expense:
        response = self._request(
            "POST",
            "/data/expenses",
            json={"name": name, "amount": float(amount), "category": category},
            error_message="Error adding expense.",
        )
        return self._expense_from(self._json(response), response.status_code)

    def delete_expense(self, expense_id: Any) -> None:
        self._request("DELETE", f"/data/expenses/{expense_id}", error_message="Error deleting expense.")

    # ------------------------------------------------------------------
    # Profile endpoints
    # ------------------------------------------------------------------

    def get_profile(self) -> Profile:
        response = self._request("GET", "/profile", error_message="Could not load profile details.")
        body = self._json(response)
        if not isinstance(body, dict):
            raise GatewayError(MALFORMED_MESSAGE, response.status_code)
        return Profile.from_api(body)

    def update_profile(self, update: ProfileUpdate) -> Profile:
        response = self._request(
            "PUT",
            "/profile",
            json=update.to_payload(),
            error_message="Failed to update profile.",
        )
        body = self._json(response)
        if not isinstance(body, dict):
            raise GatewayError(MALFORMED_MESSAGE, response.status_code)
        return Profile.from_api(body)

    def upload_profile_photo(self, filename: str, content: bytes, content_type: str) -> PhotoUploadResult:
        response = self._request(
            "POST",
            "/profile/photo",
            files={"file": (filename, content, content_type)},
            error_message="Failed to upload photo.",
        )
        body = self._json(response)
        file_url = body.get("fileUrl") if isinstance(body, dict) else None
        if not file_url:
            raise GatewayError(MALFORMED_MESSAGE, response.status_code)
        return PhotoUploadResult(file_url=file_url, message=body.get("message") or "Photo updated successfully!")

    def get_profile_photo_url(self) -> Optional[str]:
        response = self._request("GET", "/profile/photo-url", error_message="Could not load profile photo.")
        try:
            body = response.json()
        except ValueError:
            return response.text.strip() or None
        if isinstance(body, dict):
            return body.get("fileUrl") or body.get("profilePhotoUrl") or body.get("url") or None
        if isinstance(body, str):
            return body or None
        return None
