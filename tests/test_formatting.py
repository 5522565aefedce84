from __future__ import annotations

from decimal import Decimal

from budget_dashboard.formatting import escape_dollar_for_markdown, format_currency


def test_format_currency() -> None:
    assert format_currency(Decimal("1234.5")) == "$1,234.50"
    assert format_currency(Decimal("-3")) == "-$3.00"
    assert format_currency(2, include_sign=False) == "2.00"


def test_escape_dollar_for_markdown() -> None:
    assert escape_dollar_for_markdown(Decimal("8")) == "\\$8.00"
