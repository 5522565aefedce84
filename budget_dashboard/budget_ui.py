"""Streamlit components for the budget dashboard and profile screens.

Rendering lives here; state changes go through
:class:`~budget_dashboard.dashboard_service.DashboardService` and
:class:`~budget_dashboard.profile_service.ProfileService`.  Errors from a
single action are shown next to it and the rest of the page keeps working.
"""

from __future__ import annotations

from typing import Callable, Optional

import streamlit as st
from streamlit.errors import StreamlitAPIException

from . import config
from . import visualization as viz
from .dashboard_service import DashboardService
from .errors import AuthError, BudgetAppError
from .formatting import escape_dollar_for_markdown, format_currency
from .logging_setup import get_logger
from .view_state import ExpenseViewState

logger = get_logger(__name__)

_ALL_CATEGORIES = "All categories"
_SORT_ARROWS = {"asc": " 🔼", "desc": " 🔽"}


def sort_button_label(state: ExpenseViewState, field: str) -> str:
    """Column label with an arrow when ``field`` is the active sort key."""
    label = config.FIELD_LABELS[field]
    if state.sort is not None and state.sort.field == field:
        label += _SORT_ARROWS[state.sort.direction]
    return label


def run_action(action: Callable[[], object], *, on_auth_error: Optional[Callable[[], None]] = None):
    """Run a user action, showing any ``BudgetAppError`` as ``st.error``.

    Returns the action's result, or ``None`` when it failed.
    """
    try:
        return action()
    except AuthError as exc:
        st.error(exc.message)
        if on_auth_error is not None:
            on_auth_error()
    except BudgetAppError as exc:
        logger.warning("Action failed: %s", exc.message)
        st.error(exc.message)
    return None


class BudgetDashboardUI:
    """Page sections for the dashboard."""
    _PAGE_CONFIGURED = False

    def __init__(self, *, on_auth_error: Optional[Callable[[], None]] = None):
        self.on_auth_error = on_auth_error

    def setup_page_config(self, page_title: str = "Budget Manager", page_icon: str = "💰") -> None:
        """Configure Streamlit page settings once per script run."""
        if BudgetDashboardUI._PAGE_CONFIGURED:
            return
        try:
            st.set_page_config(page_title=page_title, page_icon=page_icon, layout="wide")
        except StreamlitAPIException:
            # Already configured upstream
            pass
        finally:
            BudgetDashboardUI._PAGE_CONFIGURED = True

    def render_totals(self, state: ExpenseViewState) -> None:
        """Budget, spent and remaining cards.  Remaining is shown unfloored."""
        summary = state.summary()
        col1, col2, col3 = st.columns(3)
        col1.metric("Total Budget", format_currency(summary.budget))
        col2.metric("Total Spent", format_currency(summary.spent))
        col3.metric(
            "Remaining",
            format_currency(summary.remaining),
            delta="Over budget" if summary.is_overspent else None,
            delta_color="inverse",
        )

    def render_budget_form(self, service: DashboardService) -> None:
        with st.form("set_budget_form"):
            st.subheader("Set Your Budget")
            raw = st.text_input(
                "Total Budget Amount",
                value=f"{service.state.budget:.2f}",
                placeholder="e.g., 1000",
            )
            submitted = st.form_submit_button("Set Budget", type="primary")
        if submitted and run_action(lambda: service.set_budget(raw), on_auth_error=self.on_auth_error) is not None:
            st.success("Budget updated!")

    def render_expense_form(self, service: DashboardService) -> None:
        with st.form("add_expense_form", clear_on_submit=True):
            st.subheader("Add New Expense")
            name = st.text_input("Expense Name", placeholder="e.g., Coffee")
            amount = st.text_input("Amount", placeholder="e.g., 5")
            category = st.text_input("Category", placeholder="e.g., Food, Transport")
            submitted = st.form_submit_button("Add Expense", type="primary")
        if submitted:
            created = run_action(
                lambda: service.add_expense(name, amount, category),
                on_auth_error=self.on_auth_error,
            )
            if created is not None:
                st.success(f"Added {created.name}.")

    def render_charts(self, state: ExpenseViewState) -> None:
        """Budget bar chart and the category pie; clicking a slice filters."""
        col1, col2 = st.columns(2)
        with col1:
            st.plotly_chart(viz.create_budget_bar_chart(state.summary()), use_container_width=True)
        with col2:
            totals = state.category_totals()
            if not totals:
                st.info("Add expense for category breakdown.")
                return
            event = st.plotly_chart(
                viz.create_category_pie_chart(totals),
                use_container_width=True,
                on_select="rerun",
                key="category_pie",
            )
            # The chart keeps its selection across reruns; only a new click
            # should change the filter.
            label = viz.selected_category(event)
            if label != st.session_state.get("_pie_selection"):
                st.session_state["_pie_selection"] = label
                if label:
                    state.set_filter(label)

    def render_view_controls(self, state: ExpenseViewState) -> None:
        """Category filter selector and sort controls for the expense table."""
        categories = state.available_categories()
        options = [_ALL_CATEGORIES] + categories
        if state.filter_is_stale():
            options.append(state.filter)
        current = state.filter or _ALL_CATEGORIES
        choice = st.selectbox("Category filter", options=options, index=options.index(current))
        state.set_filter(None if choice == _ALL_CATEGORIES else choice)

        st.caption("Sort by (click again to reverse, a third time to clear)")
        columns = st.columns(len(config.SORTABLE_FIELDS))
        for column, field in zip(columns, config.SORTABLE_FIELDS):
            if column.button(sort_button_label(state, field), key=f"sort_{field}"):
                state.toggle_sort(field)
                st.rerun()

    def render_expense_table(self, service: DashboardService) -> None:
        state = service.state
        header = f"Expense Log ({state.filter})" if state.filter else "Expense Log"
        st.subheader(header)
        if state.filter and st.button("Show All Categories", key="clear_filter"):
            state.set_filter(None)
            st.rerun()

        rows = state.visible_rows()
        if not rows:
            if state.filter:
                st.info(f'No expenses in category "{state.filter}".')
            else:
                st.info("No expenses added yet.")
            return

        frame = viz.expenses_frame(rows)
        st.dataframe(
            frame.drop(columns=["id"]),
            hide_index=True,
            use_container_width=True,
            column_config={"Amount": st.column_config.NumberColumn("Amount", format="$%.2f")},
        )

        st.markdown("**Delete an expense**")
        for expense in rows:
            col_a, col_b = st.columns([5, 1])
            col_a.markdown(f"{expense.name} · {escape_dollar_for_markdown(expense.amount)}")
            if col_b.button("Delete", key=f"delete_{expense.id}"):
                if run_action(
                    lambda expense_id=expense.id: service.delete_expense(expense_id) or True,
                    on_auth_error=self.on_auth_error,
                ):
                    st.rerun()
