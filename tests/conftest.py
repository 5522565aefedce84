"""Shared fixtures.

Gateway tests run against ``FakeSession`` so no request leaves the process.
The token lives in a plain dict standing in for ``st.session_state``.
"""

from __future__ import annotations

from decimal import Decimal

import pytest

from budget_dashboard.auth import TokenStore
from budget_dashboard.gateway import BudgetApiGateway
from budget_dashboard.models import Expense
from tests.helpers.http_stub import BASE_URL, FakeSession


@pytest.fixture(autouse=True)
def _isolate_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep a developer's .env or shell settings out of the tests."""
    monkeypatch.setenv("BUDGET_API_URL", BASE_URL)
    monkeypatch.setenv("BUDGET_API_TIMEOUT", "5")
    monkeypatch.delenv("BUDGET_DASHBOARD_LOG_LEVEL", raising=False)


@pytest.fixture
def session_state() -> dict:
    return {}


@pytest.fixture
def store(session_state: dict) -> TokenStore:
    tokens = TokenStore(session_state)
    tokens.set("secret-token")
    return tokens


@pytest.fixture
def fake_session() -> FakeSession:
    return FakeSession()


@pytest.fixture
def gateway(fake_session: FakeSession, store: TokenStore) -> BudgetApiGateway:
    return BudgetApiGateway(BASE_URL, store.get, session=fake_session, timeout=5)


@pytest.fixture
def sample_expenses() -> list[Expense]:
    return [
        Expense(id=1, name="Coffee", category="food", amount=Decimal("5")),
        Expense(id=2, name="Bus", category="Food ", amount=Decimal("3")),
        Expense(id=3, name="Bus", category="Transport", amount=Decimal("10")),
    ]
