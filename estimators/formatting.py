"""Parsing and display helpers for dollar amounts and rates."""

import re
from decimal import ROUND_HALF_UP, Decimal

_NON_DIGITS = re.compile(r"[^0-9]")


def parse_formatted_number(value: str | None) -> Decimal:
    """Parse user-entered amounts like "$12,500" to Decimal.

    Every non-digit is stripped, so the result is a non-negative whole
    number; empty input parses to 0.
    """
    digits = _NON_DIGITS.sub("", value or "")
    return Decimal(digits) if digits else Decimal("0")


def round_currency(amount: Decimal) -> Decimal:
    """Round to whole dollars, halves away from zero."""
    return Decimal(amount).quantize(Decimal("1"), rounding=ROUND_HALF_UP)


def round_cents(amount: Decimal) -> Decimal:
    return Decimal(amount).quantize(Decimal("0.01"), rounding=ROUND_HALF_UP)


def format_currency(amount: Decimal) -> str:
    """'$12,345' style, whole dollars."""
    rounded = round_currency(amount)
    if rounded == 0:
        return "$0"
    if rounded < 0:
        return f"-${abs(rounded):,.0f}"
    return f"${rounded:,.0f}"


def format_cents(amount: Decimal) -> str:
    rounded = round_cents(amount)
    if rounded == 0:
        return "$0.00"
    if rounded < 0:
        return f"-${abs(rounded):,.2f}"
    return f"${rounded:,.2f}"


def format_percent(rate: Decimal) -> str:
    """Fraction to percent with one decimal: 0.2619 -> '26.2%'."""
    pct = (Decimal(rate) * 100).quantize(Decimal("0.1"), rounding=ROUND_HALF_UP)
    return f"{pct}%"
