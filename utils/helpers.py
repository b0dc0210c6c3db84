# -*- coding: utf-8 -*-
"""
Utility helper functions.
"""

from datetime import datetime, date
from decimal import Decimal, InvalidOperation
from typing import Any, Optional, Union


def format_date(
    value: Optional[Union[datetime, date, str]],
    format_str: str = "%d/%m/%Y"
) -> str:
    """
    Format a date value for display.

    Args:
        value: Date, datetime, or ISO string
        format_str: Output format string

    Returns:
        Formatted date string or empty string
    """
    if value is None:
        return ""

    if isinstance(value, str):
        try:
            value = datetime.fromisoformat(value)
        except ValueError:
            return value

    if isinstance(value, (datetime, date)):
        return value.strftime(format_str)

    return str(value)


def format_datetime(
    value: Optional[Union[datetime, str]],
    format_str: str = "%d/%m/%Y %H:%M"
) -> str:
    """Format a datetime value for display."""
    return format_date(value, format_str)


def format_amount(value: Any, currency: str = "") -> str:
    """
    Format a money amount with thousands separators.

    Unparseable values are returned as given.
    """
    if value is None or value == "":
        return "-"

    try:
        amount = Decimal(str(value).replace(",", ""))
    except InvalidOperation:
        return str(value)

    if amount == amount.to_integral_value():
        text = f"{amount:,.0f}"
    else:
        text = f"{amount:,.2f}"
    return f"{currency} {text}".strip()


def truncate_text(text: str, max_length: int = 50, suffix: str = "...") -> str:
    """Truncate text to max_length characters, including the suffix."""
    if not text or len(text) <= max_length:
        return text or ""
    return text[:max_length - len(suffix)] + suffix
