"""Formatting utilities for currency display."""

from __future__ import annotations

from decimal import Decimal
from typing import Union


def format_currency(amount: Union[Decimal, float, int], include_sign: bool = True) -> str:
    """Format a currency amount with two decimals and thousands separators.

    Negative amounts keep their sign in front of the dollar sign.

    Example:
        >>> format_currency(1234.56)
        '$1,234.56'
        >>> format_currency(-5)
        '-$5.00'
        >>> format_currency(1234.56, include_sign=False)
        '1,234.56'
    """
    value = Decimal(str(amount))
    formatted = f"{abs(value):,.2f}"
    if include_sign:
        formatted = f"${formatted}"
    return f"-{formatted}" if value < 0 else formatted


def escape_dollar_for_markdown(amount: Union[Decimal, float, int]) -> str:
    """Format an amount and escape the dollar sign for markdown rendering.

    Streamlit markdown treats ``$`` as a LaTeX delimiter.

    Example:
        >>> escape_dollar_for_markdown(1234.56)
        '\\\\$1,234.56'
    """
    return format_currency(amount).replace("$", "\\$")
