"""Session plumbing and the sidebar shared by every page.

Pages never build gateways or view state themselves; they go through the
helpers here so the token, the expense view state and the profile survive
Streamlit reruns in ``st.session_state``.
"""

from __future__ import annotations

from typing import Dict, Optional

import streamlit as st

from . import config
from .auth import TokenStore, logout, make_gateway
from .dashboard_service import DashboardService
from .gateway import BudgetApiGateway
from .profile_service import ProfileService
from .view_state import ExpenseViewState

HOME_PAGE = "Home.py"
LOGIN_PAGE = "pages/1_🔐_Login.py"
REGISTER_PAGE = "pages/2_📝_Register.py"
DASHBOARD_PAGE = "pages/3_📊_Dashboard.py"
PROFILE_PAGE = "pages/4_👤_Profile.py"

_PROFILE_KEY = "profile"
_CURRENT_PAGE_KEY = "current_page"


def get_token_store() -> TokenStore:
    return TokenStore(st.session_state)


def get_gateway() -> BudgetApiGateway:
    return make_gateway(get_token_store())


def get_view_state() -> ExpenseViewState:
    state = st.session_state.get(config.VIEW_STATE_SESSION_KEY)
    if not isinstance(state, ExpenseViewState):
        state = ExpenseViewState()
        st.session_state[config.VIEW_STATE_SESSION_KEY] = state
    return state


def get_dashboard_service() -> DashboardService:
    return DashboardService(get_gateway(), get_token_store(), get_view_state())


def get_profile_service() -> ProfileService:
    return ProfileService(get_gateway(), get_token_store(), st.session_state.get(_PROFILE_KEY))


def remember_profile(service: ProfileService) -> None:
    st.session_state[_PROFILE_KEY] = service.profile


def enter_page(page: str) -> bool:
    """Record the current page; True when the user just navigated here.

    Filter and sort selections are transient, so arriving at the dashboard
    from another page starts with a fresh view.
    """
    previous = st.session_state.get(_CURRENT_PAGE_KEY)
    st.session_state[_CURRENT_PAGE_KEY] = page
    return previous != page


def clear_session() -> None:
    """Log out and drop everything cached for the previous user."""
    logout(get_token_store())
    for key in (config.VIEW_STATE_SESSION_KEY, _PROFILE_KEY):
        st.session_state.pop(key, None)


def require_login() -> TokenStore:
    """Redirect to the login page unless a token is held."""
    store = get_token_store()
    if not store.is_authenticated:
        st.switch_page(LOGIN_PAGE)
    return store


def render_shared_sidebar() -> Dict[str, Optional[bool]]:
    """Render navigation and the logout button.

    Returns:
        Dict with key ``'authenticated'``.
    """
    store = get_token_store()
    st.sidebar.title("💰 Budget Manager")
    if store.is_authenticated:
        st.sidebar.page_link(DASHBOARD_PAGE, label="Dashboard", icon="📊")
        st.sidebar.page_link(PROFILE_PAGE, label="Profile", icon="👤")
        if st.sidebar.button("🚪 Logout", key="sidebar_logout"):
            clear_session()
            st.switch_page(HOME_PAGE)
    else:
        st.sidebar.page_link(LOGIN_PAGE, label="Login", icon="🔐")
        st.sidebar.page_link(REGISTER_PAGE, label="Register", icon="📝")
    return {"authenticated": store.is_authenticated}
