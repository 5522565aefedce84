"""Plotly and pandas helpers for the budget dashboard.

Functions here accept the values produced by
:mod:`budget_dashboard.aggregation` and
:class:`~budget_dashboard.view_state.ExpenseViewState` and return Plotly
figures or DataFrames that Streamlit renders via ``st.plotly_chart`` and
``st.dataframe``.  Amounts are converted from ``Decimal`` to ``float`` only
at this point, for display.
"""

from __future__ import annotations

from typing import Iterable, List, Sequence

import pandas as pd
import plotly.express as px
import plotly.graph_objects as go

from . import config
from .categories import normalize_category
from .models import BudgetSummary, CategoryTotal, Expense

TABLE_COLUMNS = ["id", "Name", "Category", "Amount"]


def _empty_figure(title: str) -> go.Figure:
    fig = go.Figure()
    fig.update_layout(title=title)
    return fig


def category_totals_series(totals: Sequence[CategoryTotal]) -> pd.Series:
    """Category totals as a float Series indexed by label, order preserved."""
    return pd.Series(
        [float(group.total) for group in totals],
        index=pd.Index([group.label for group in totals], name="Category"),
        name="Total",
        dtype=float,
    )


def create_category_pie_chart(totals: Sequence[CategoryTotal], title: str | None = None) -> go.Figure:
    """Generate the expense breakdown pie chart.

    Parameters
    ----------
    totals : sequence of CategoryTotal
        Output of :func:`budget_dashboard.aggregation.by_category`.
    title : str, optional
        Chart title.  Defaults to ``"Expense Breakdown"``.

    Returns
    -------
    plotly.graph_objects.Figure
        Pie chart with one slice per category, in first-seen order.
    """
    series = category_totals_series(totals)
    if series.empty:
        return _empty_figure("No data to display")
    df = series.reset_index()
    df.columns = ["Category", "Value"]
    fig = px.pie(
        df,
        names="Category",
        values="Value",
        color_discrete_sequence=config.CATEGORY_COLORS,
    )
    fig.update_traces(sort=False, marker=dict(line=dict(color="#fff", width=2)))
    fig.update_layout(title=title or "Expense Breakdown", legend=dict(orientation="h"))
    return fig


def create_budget_bar_chart(summary: BudgetSummary, title: str | None = None) -> go.Figure:
    """Render total spent, remaining and total budget as grouped bars.

    Bars cannot show a negative magnitude, so the remaining bar uses
    :attr:`BudgetSummary.chart_remaining`, which is floored at zero.
    """
    bars = [
        ("Total Spent", float(summary.spent), config.SPENT_COLOR),
        ("Remaining", float(summary.chart_remaining), config.REMAINING_COLOR),
        ("Total Budget", float(summary.budget), config.BUDGET_COLOR),
    ]
    fig = go.Figure()
    for label, value, color in bars:
        fig.add_trace(go.Bar(name=label, x=["Budget Overview"], y=[value], marker_color=color))
    fig.update_layout(
        title=title or "Budget vs. Spent",
        barmode="group",
        yaxis=dict(rangemode="tozero"),
        legend=dict(orientation="h"),
    )
    return fig


def expenses_frame(rows: Iterable[Expense]) -> pd.DataFrame:
    """Build the expense table in the order given.

    The category column shows the normalised label; the id column is kept for
    delete actions and hidden by the page.
    """
    records: List[dict] = [
        {
            "id": expense.id,
            "Name": expense.name,
            "Category": normalize_category(expense.category),
            "Amount": float(expense.amount),
        }
        for expense in rows
    ]
    return pd.DataFrame(records, columns=TABLE_COLUMNS)


def selected_category(selection: object) -> str | None:
    """Extract the clicked slice label from a ``st.plotly_chart`` selection.

    Streamlit returns ``{"selection": {"points": [...]}}``; pie points carry
    the slice name under ``label``.
    """
    if not selection:
        return None
    try:
        points = selection["selection"]["points"]
    except (KeyError, TypeError):
        return None
    for point in points or []:
        label = point.get("label") if isinstance(point, dict) else None
        if label:
            return str(label)
    return None
