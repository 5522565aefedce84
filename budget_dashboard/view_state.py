"""View-state controller for the expense dashboard.

``ExpenseViewState`` owns the budget, the full expense list as last confirmed
by the Gateway, and the transient filter/sort selections.  Derived values
(visible rows, category totals, the budget summary) are recomputed on every
call.  Filtering and sorting only change what :meth:`visible_rows` returns;
the stored list keeps insertion order.
"""

from __future__ import annotations

from decimal import Decimal
from typing import Any, Callable, Dict, Iterable, List, Optional

from . import config
from .aggregation import budget_summary, by_category
from .categories import normalize_category
from .models import ZERO, BudgetSummary, CategoryTotal, Expense, SortSpec

SORT_DIRECTIONS = ("asc", "desc")

# First direction applied when a column header is clicked.  Numeric columns
# start with the largest values, text columns alphabetically.
_FIRST_DIRECTION = {"name": "asc", "category": "asc", "amount": "desc"}

_SORT_KEYS: Dict[str, Callable[[Expense], Any]] = {
    "name": lambda expense: expense.name.casefold(),
    "category": lambda expense: normalize_category(expense.category),
    "amount": lambda expense: expense.amount,
}


class ExpenseViewState:
    """Budget, expenses, and the current filter and sort selections."""

    def __init__(self, expenses: Optional[Iterable[Expense]] = None, budget: Decimal = ZERO):
        self._expenses: List[Expense] = list(expenses or [])
        self.budget: Decimal = budget
        self.filter: Optional[str] = None
        self.sort: Optional[SortSpec] = None

    # ------------------------------------------------------------------
    # Stored state
    # ------------------------------------------------------------------

    @property
    def expenses(self) -> List[Expense]:
        """The full collection in insertion order (a copy)."""
        return list(self._expenses)

    def set_expenses(self, expenses: Iterable[Expense]) -> None:
        self._expenses = list(expenses)

    def add_expense(self, expense: Expense) -> None:
        self._expenses.append(expense)

    def remove_expense(self, expense_id: Any) -> bool:
        """Remove the expense with ``expense_id``.

        Returns ``True`` when a record was removed; an unknown id is a no-op.
        """
        for index, expense in enumerate(self._expenses):
            if expense.id == expense_id:
                del self._expenses[index]
                return True
        return False

    def set_budget(self, budget: Decimal) -> None:
        self.budget = budget

    # ------------------------------------------------------------------
    # View selections
    # ------------------------------------------------------------------

    def set_filter(self, label: Optional[str]) -> None:
        """Show only one category; ``None`` or an empty label clears it."""
        normalized = normalize_category(label)
        self.filter = normalized or None

    def set_sort(self, field: str, direction: Optional[str] = "asc") -> None:
        """Sort visible rows by ``field``; a ``None`` direction clears sorting.

        Raises:
            ValueError: If the field or direction is unknown.
        """
        if direction is None:
            self.sort = None
            return
        if field not in config.SORTABLE_FIELDS:
            raise ValueError(f"Cannot sort by {field!r}")
        if direction not in SORT_DIRECTIONS:
            raise ValueError(f"Unknown sort direction {direction!r}")
        self.sort = SortSpec(field=field, direction=direction)

    def toggle_sort(self, field: str) -> Optional[SortSpec]:
        """Cycle the sort on ``field`` the way a table header click does.

        Unsorted, then the column's first direction, then the opposite one,
        then unsorted again.  Clicking another column replaces the active key.
        """
        first = _FIRST_DIRECTION.get(field, "asc")
        second = "asc" if first == "desc" else "desc"
        if self.sort is None or self.sort.field != field:
            self.set_sort(field, first)
        elif self.sort.direction == first:
            self.set_sort(field, second)
        else:
            self.sort = None
        return self.sort

    def reset_view(self) -> None:
        self.filter = None
        self.sort = None

    # ------------------------------------------------------------------
    # Derived values
    # ------------------------------------------------------------------

    def visible_rows(self) -> List[Expense]:
        """Filtered, then stably sorted, rows for display.

        A filter naming a category with no remaining expenses yields an empty
        list.
        """
        rows = self._expenses
        if self.filter is not None:
            rows = [expense for expense in rows if normalize_category(expense.category) == self.filter]
        else:
            rows = list(rows)
        if self.sort is not None:
            rows = sorted(rows, key=_SORT_KEYS[self.sort.field], reverse=self.sort.descending)
        return rows

    def category_totals(self) -> List[CategoryTotal]:
        return by_category(self._expenses)

    def summary(self) -> BudgetSummary:
        return budget_summary(self._expenses, self.budget)

    def available_categories(self) -> List[str]:
        return [group.label for group in self.category_totals()]

    def filter_is_stale(self) -> bool:
        """True when the active filter names a category with no expenses."""
        return self.filter is not None and self.filter not in self.available_categories()
