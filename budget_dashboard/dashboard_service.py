"""Reconciles Gateway calls with the local expense view state.

Every mutation goes to the Gateway first and is applied to
:class:`~budget_dashboard.view_state.ExpenseViewState` only once the response
arrives, so a failed call leaves local state exactly as it was.  New expenses
use the id assigned by the server.  An ``AuthError`` from any call clears the
stored token before it is re-raised.
"""

from __future__ import annotations

from decimal import Decimal
from typing import Any, Optional

from .auth import TokenStore, end_session
from .errors import AuthError
from .gateway import BudgetApiGateway
from .logging_setup import get_logger
from .models import Expense
from .validation import validate_budget, validate_expense
from .view_state import ExpenseViewState

logger = get_logger(__name__)


class DashboardService:
    """Budget and expense operations for the dashboard page."""

    def __init__(
        self,
        gateway: BudgetApiGateway,
        tokens: TokenStore,
        state: Optional[ExpenseViewState] = None,
    ):
        self.gateway = gateway
        self.tokens = tokens
        self.state = state if state is not None else ExpenseViewState()

    def _call(self, method, *args: Any):
        try:
            return method(*args)
        except AuthError as exc:
            end_session(self.tokens, exc)
            raise

    def load(self) -> ExpenseViewState:
        """Fetch the budget and the expense list and replace local state."""
        budget = self._call(self.gateway.get_budget)
        expenses = self._call(self.gateway.get_expenses)
        self.state.set_budget(budget)
        self.state.set_expenses(expenses)
        logger.info("Loaded budget %s and %d expenses", budget, len(expenses))
        return self.state

    def set_budget(self, raw_amount: Any) -> Decimal:
        amount = validate_budget(raw_amount)
        confirmed = self._call(self.gateway.set_budget, amount)
        self.state.set_budget(confirmed)
        logger.info("Budget set to %s", confirmed)
        return confirmed

    def add_expense(self, name: Any, amount: Any, category: Any) -> Expense:
        clean_name, clean_amount, clean_category = validate_expense(name, amount, category)
        created = self._call(self.gateway.add_expense, clean_name, clean_amount, clean_category)
        self.state.add_expense(created)
        logger.info("Added expense %s (%s)", created.id, created.category)
        return created

    def delete_expense(self, expense_id: Any) -> None:
        self._call(self.gateway.delete_expense, expense_id)
        self.state.remove_expense(expense_id)
        logger.info("Deleted expense %s", expense_id)
