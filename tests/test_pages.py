"""Tests for the helper functions defined in the Streamlit page scripts.

Pages are loaded from their files with importlib; ``main()`` only runs
under ``streamlit run`` so importing them has no UI side effects.
"""

from __future__ import annotations

import importlib.util
from decimal import Decimal
from pathlib import Path

import pytest

from budget_dashboard.budget_ui import sort_button_label
from budget_dashboard.dashboard_service import DashboardService
from budget_dashboard.errors import AuthError
from budget_dashboard.profile_service import ProfileService
from budget_dashboard.view_state import ExpenseViewState
from tests.helpers.http_stub import FakeResponse

PAGES_DIR = Path(__file__).resolve().parents[1] / "budget_dashboard" / "pages"


def _load_page_module(filename: str, name: str):
    spec = importlib.util.spec_from_file_location(name, PAGES_DIR / filename)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


@pytest.fixture(scope="module")
def login_page():
    return _load_page_module("1_🔐_Login.py", "login_page_test")


@pytest.fixture(scope="module")
def register_page():
    return _load_page_module("2_📝_Register.py", "register_page_test")


@pytest.fixture(scope="module")
def dashboard_page():
    return _load_page_module("3_📊_Dashboard.py", "dashboard_page_test")


@pytest.fixture(scope="module")
def profile_page():
    return _load_page_module("4_👤_Profile.py", "profile_page_test")


def test_submit_login_success(login_page, gateway, fake_session, store) -> None:
    store.clear()
    fake_session.route("POST", "/auth/login", FakeResponse(200, {"token": "t1"}))
    assert login_page.submit_login(gateway, store, "ana", "pw") is None
    assert store.get() == "t1"


def test_submit_login_bad_credentials(login_page, gateway, fake_session, store) -> None:
    store.clear()
    fake_session.route("POST", "/auth/login", FakeResponse(401))
    assert login_page.submit_login(gateway, store, "ana", "pw") == "Invalid username or password."
    assert not store.is_authenticated


def test_submit_registration_reports_validation(register_page, gateway, fake_session, store) -> None:
    error = register_page.submit_registration(
        gateway,
        store,
        username="ana",
        password="secret1",
        confirm_password="secret1",
        full_name="Ana",
        email="bad-email",
        village="Hill",
    )
    assert error == "Please enter a valid email address."
    assert fake_session.calls == []


def test_open_dashboard_loads_and_resets_view(dashboard_page, gateway, store, fake_session) -> None:
    fake_session.route("GET", "/data/budget", FakeResponse(200, {"budget": 20}))
    fake_session.route("GET", "/data/expenses", FakeResponse(200, []))
    state = ExpenseViewState()
    state.set_filter("food")
    state.set_sort("amount", "asc")
    service = DashboardService(gateway, store, state)
    assert dashboard_page.open_dashboard(service, arrived=True) is None
    assert state.filter is None and state.sort is None
    assert state.budget == Decimal("20")


def test_open_dashboard_skips_reload_on_rerun(dashboard_page, gateway, store, fake_session) -> None:
    service = DashboardService(gateway, store, ExpenseViewState())
    assert dashboard_page.open_dashboard(service, arrived=False) is None
    assert fake_session.calls == []


def test_open_dashboard_failure_logs_out(dashboard_page, gateway, store, fake_session) -> None:
    fake_session.route("GET", "/data/budget", FakeResponse(500))
    service = DashboardService(gateway, store, ExpenseViewState())
    assert dashboard_page.open_dashboard(service, arrived=True) == "Failed to load budget."
    assert not store.is_authenticated


def test_load_profile_failure_keeps_defaults(profile_page, gateway, store, fake_session) -> None:
    fake_session.route("GET", "/profile", FakeResponse(500))
    service = ProfileService(gateway, store)
    assert profile_page.load_profile(service) == "Could not load profile details."
    assert service.profile.username == "User"
    assert store.is_authenticated


def test_load_profile_falls_back_to_photo_endpoint(profile_page, gateway, store, fake_session) -> None:
    fake_session.route("GET", "/profile", FakeResponse(200, {"username": "ana"}))
    fake_session.route("GET", "/profile/photo-url", FakeResponse(200, {"fileUrl": "https://cdn.test/a.png"}))
    service = ProfileService(gateway, store)
    assert profile_page.load_profile(service) is None
    assert service.profile.profile_photo_url == "https://cdn.test/a.png"


def test_load_profile_reraises_auth_error(profile_page, gateway, store, fake_session) -> None:
    fake_session.route("GET", "/profile", FakeResponse(401))
    with pytest.raises(AuthError):
        profile_page.load_profile(ProfileService(gateway, store))


def test_profile_details_marks_missing_fields(profile_page) -> None:
    from budget_dashboard.models import Profile

    details = dict(profile_page.profile_details(Profile(username="ana", email="a@b.co")))
    assert details["Full Name"] == "Not set"
    assert details["Phone"] == "Not set"
    assert details["Email"] == "a@b.co"


def test_sort_button_label_marks_active_column() -> None:
    state = ExpenseViewState()
    assert sort_button_label(state, "amount") == "Amount"
    state.toggle_sort("amount")
    assert sort_button_label(state, "amount") == "Amount 🔽"
    assert sort_button_label(state, "name") == "Name"
