"""Expense aggregation: category totals and budget-vs-spent figures.

Both derivations are pure and cheap, so callers simply re-run them after any
change to the expense list or budget.  Input records are assumed to be
validated already (see :mod:`budget_dashboard.validation`).
"""

from __future__ import annotations

from decimal import Decimal
from typing import Dict, Iterable, List

from .categories import normalize_category
from .models import ZERO, BudgetSummary, CategoryTotal, Expense


def total_spent(expenses: Iterable[Expense]) -> Decimal:
    """Sum of all expense amounts."""
    return sum((expense.amount for expense in expenses), ZERO)


def by_category(expenses: Iterable[Expense]) -> List[CategoryTotal]:
    """Group expenses by normalised category and sum their amounts.

    Groups are returned in the order their label is first seen in
    ``expenses``, not sorted.

    Example:
        >>> from decimal import Decimal
        >>> rows = [Expense(1, "Coffee", "food", Decimal("5")),
        ...         Expense(2, "Bus", "Food ", Decimal("3"))]
        >>> by_category(rows)
        [CategoryTotal(label='Food', total=Decimal('8'))]
    """
    totals: Dict[str, Decimal] = {}
    for expense in expenses:
        label = normalize_category(expense.category)
        totals[label] = totals.get(label, ZERO) + expense.amount
    return [CategoryTotal(label=label, total=total) for label, total in totals.items()]


def budget_summary(expenses: Iterable[Expense], budget: Decimal) -> BudgetSummary:
    """Compute spent, remaining and budget.

    ``remaining`` is ``budget - spent`` and is left negative on overspend;
    only :attr:`BudgetSummary.chart_remaining` is floored.
    """
    spent = total_spent(expenses)
    return BudgetSummary(spent=spent, remaining=budget - spent, budget=budget)
