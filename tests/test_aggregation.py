"""Unit tests for budget_dashboard.aggregation."""

from __future__ import annotations

from decimal import Decimal

from budget_dashboard.aggregation import budget_summary, by_category, total_spent
from budget_dashboard.models import CategoryTotal, Expense


def test_by_category_groups_on_normalized_label(sample_expenses) -> None:
    assert by_category(sample_expenses) == [
        CategoryTotal(label="Food", total=Decimal("8")),
        CategoryTotal(label="Transport", total=Decimal("10")),
    ]


def test_by_category_keeps_first_seen_order() -> None:
    expenses = [
        Expense(1, "Rent", "housing", Decimal("900")),
        Expense(2, "Apples", "groceries", Decimal("4.20")),
        Expense(3, "Power", "Housing", Decimal("60")),
        Expense(4, "Bread", "Bakery", Decimal("3")),
    ]
    assert [group.label for group in by_category(expenses)] == ["Housing", "Groceries", "Bakery"]


def test_group_totals_sum_to_total_spent() -> None:
    expenses = [
        Expense(i, f"item {i}", category, Decimal(amount))
        for i, (category, amount) in enumerate(
            [("food", "0.10"), ("Food", "0.20"), ("misc", "0.30"), (" MISC", "19.99"), ("fun", "0.01")]
        )
    ]
    groups = by_category(expenses)
    assert sum(group.total for group in groups) == total_spent(expenses) == Decimal("20.60")


def test_by_category_empty() -> None:
    assert by_category([]) == []


def test_budget_summary_scenario(sample_expenses) -> None:
    summary = budget_summary(sample_expenses, Decimal("20"))
    assert summary.spent == Decimal("18")
    assert summary.remaining == Decimal("2")
    assert summary.budget == Decimal("20")
    assert summary.remaining == summary.budget - summary.spent


def test_overspend_keeps_negative_remaining(sample_expenses) -> None:
    summary = budget_summary(sample_expenses, Decimal("15"))
    assert summary.remaining == Decimal("-3")
    assert summary.is_overspent
    assert summary.chart_remaining == Decimal("0")


def test_chart_remaining_matches_remaining_when_positive(sample_expenses) -> None:
    summary = budget_summary(sample_expenses, Decimal("100"))
    assert summary.chart_remaining == summary.remaining == Decimal("82")


def test_budget_summary_without_expenses() -> None:
    summary = budget_summary([], Decimal("50"))
    assert summary.spent == Decimal("0")
    assert summary.remaining == Decimal("50")
