"""Main entry point for the Streamlit multi-page app.

This file enables Streamlit's automatic page discovery.  Pages in the
pages/ directory appear in the sidebar.
"""

from __future__ import annotations

import sys
from pathlib import Path

import streamlit as st

# Add project root to path for imports
project_root = Path(__file__).parent.parent.resolve()
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from budget_dashboard.budget_ui import BudgetDashboardUI  # noqa: E402
from budget_dashboard.logging_setup import configure_logging  # noqa: E402
from budget_dashboard.shared_sidebar import (  # noqa: E402
    DASHBOARD_PAGE,
    LOGIN_PAGE,
    REGISTER_PAGE,
    enter_page,
    get_token_store,
    render_shared_sidebar,
)


def main() -> None:
    """Render the welcome screen, or go straight to the dashboard when logged in."""
    configure_logging()
    BudgetDashboardUI().setup_page_config("Budget Manager", "💰")
    enter_page("home")
    render_shared_sidebar()

    if get_token_store().is_authenticated:
        st.switch_page(DASHBOARD_PAGE)

    st.title("💰 Budget Manager")
    st.markdown("A simple and effective way to manage your personal finances.")
    st.markdown(
        """
        - 📋 **Set a budget** and see how much of it is left
        - 🧾 **Record expenses** by category
        - 📊 **See where the money goes** with spending charts
        - 👤 **Keep your profile** and photo up to date
        """
    )
    col1, col2, _ = st.columns([1, 1, 3])
    col1.page_link(LOGIN_PAGE, label="GET STARTED", icon="🚀")
    col2.page_link(REGISTER_PAGE, label="Create an account", icon="📝")


if __name__ == "__main__":
    main()
