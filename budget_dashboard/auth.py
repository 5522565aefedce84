"""Bearer-token storage and the login, register and logout flows.

The token is kept in a mutable mapping under ``config.TOKEN_SESSION_KEY``.
In the app that mapping is ``st.session_state``; tests pass a plain dict.
"""

from __future__ import annotations

from typing import Any, MutableMapping, Optional

from . import config
from .errors import AuthError, GatewayError
from .gateway import BudgetApiGateway
from .logging_setup import get_logger
from .validation import validate_login, validate_registration

logger = get_logger(__name__)

INVALID_CREDENTIALS_MESSAGE = "Invalid username or password."
LOGIN_FAILED_MESSAGE = "Login failed. Please try again later."


class TokenStore:
    """Holds the opaque bearer token for the current session."""

    def __init__(self, state: MutableMapping[str, Any], key: str = config.TOKEN_SESSION_KEY):
        self._state = state
        self._key = key

    def get(self) -> Optional[str]:
        return self._state.get(self._key) or None

    def set(self, token: str) -> None:
        self._state[self._key] = token

    def clear(self) -> None:
        self._state.pop(self._key, None)

    @property
    def is_authenticated(self) -> bool:
        return self.get() is not None


def make_gateway(store: TokenStore, **kwargs: Any) -> BudgetApiGateway:
    """Build a gateway that reads its bearer token from ``store``."""
    return BudgetApiGateway(token_provider=store.get, **kwargs)


def login(gateway: BudgetApiGateway, store: TokenStore, username: str, password: str) -> str:
    """Log in and keep the returned token.

    Raises:
        ValidationError: If either field is blank.
        AuthError: With a credentials message on 401/403.
        GatewayError: With a generic retry message on any other failure.
    """
    username, password = validate_login(username, password)
    try:
        token = gateway.login(username, password)
    except AuthError as exc:
        store.clear()
        raise AuthError(INVALID_CREDENTIALS_MESSAGE, exc.status_code) from exc
    except GatewayError as exc:
        logger.warning("Login request failed: %s", exc.message)
        raise GatewayError(LOGIN_FAILED_MESSAGE, exc.status_code) from exc
    store.set(token)
    logger.info("Login successful for %s", username)
    return token


def register(gateway: BudgetApiGateway, store: TokenStore, **form: Any) -> str:
    """Validate the sign-up form, register, and keep the returned token."""
    user = validate_registration(**form)
    token = gateway.register(user)
    store.set(token)
    logger.info("Registration successful for %s", user.username)
    return token


def logout(store: TokenStore) -> None:
    store.clear()
    logger.info("User logged out")


def end_session(store: TokenStore, exc: AuthError) -> None:
    """Drop the token after the Gateway rejected it."""
    logger.warning("Session ended: %s", exc.message)
    store.clear()
