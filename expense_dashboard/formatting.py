"""Formatting utilities for currency, dates and text display."""

from __future__ import annotations

from datetime import date
from typing import Optional, Union

from .config import CURRENCY_SYMBOL, EMPTY_NOTES_PLACEHOLDER


def escape_dollar_for_markdown(text: str) -> str:
    """Escape dollar signs so Streamlit markdown does not read them as LaTeX.

    Example:
        >>> escape_dollar_for_markdown('$950.00 / $950.00')
        '\\$950.00 / \\$950.00'
    """
    return text.replace("$", "\\$")


def format_currency(amount: Union[float, int], include_sign: bool = True) -> str:
    """Format a currency amount with thousands separators and two decimals.

    Args:
        amount: The amount to format
        include_sign: Whether to include the currency symbol

    Returns:
        Formatted currency string (e.g., "$1,234.56" or "-$12.00")

    Example:
        >>> format_currency(1234.56)
        '$1,234.56'
        >>> format_currency(-12)
        '-$12.00'
        >>> format_currency(1234.56, include_sign=False)
        '1,234.56'
    """
    rounded = round(float(amount), 2)
    formatted = f"{abs(rounded):,.2f}"
    if include_sign:
        formatted = f"{CURRENCY_SYMBOL}{formatted}"
    # -0.001 rounds to zero and is shown without a minus
    return f"-{formatted}" if rounded < 0 else formatted


def format_date(value: date) -> str:
    """Month/day/year without zero padding, e.g. ``4/2/2024``."""
    return f"{value.month}/{value.day}/{value.year}"


def format_percent(value: float) -> str:
    return f"{value:.0f}%"


def format_notes(notes: Optional[str]) -> str:
    return notes if notes else EMPTY_NOTES_PLACEHOLDER
