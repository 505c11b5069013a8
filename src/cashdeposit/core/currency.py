#!/usr/bin/env python3
"""
Amount and Currency Handling Utilities

Numeral normalization for amounts lifted out of alert email text.
All amounts are held as Decimal values to avoid floating-point errors.

Amount Formats:
- Email text uses comma-grouped numerals: "30,000.00", "1,234"
- Internal values are Decimal: Decimal("30000.00")
- CSV output uses two fixed decimals: "30000.00"

Key Principles:
- Never use floating-point arithmetic for amounts
- A numeral that cannot be converted is treated as absent, not as an error
- Currency codes are exactly three uppercase ASCII letters
"""

import re
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation

CURRENCY_CODE_PATTERN = re.compile(r"[A-Z]{3}", re.ASCII)

_TWO_PLACES = Decimal("0.01")


def normalize_amount(amount_str: str | None) -> Decimal | None:
    """
    Convert a comma-grouped numeral to a Decimal.

    Args:
        amount_str: Numeral text like '30,000.00' or '1,234'

    Returns:
        Decimal value, or None for empty or non-numeric input

    Examples:
        normalize_amount('30,000.00') -> Decimal('30000.00')
        normalize_amount('1,234') -> Decimal('1234')
        normalize_amount('') -> None
        normalize_amount(',') -> None
    """
    if not amount_str:
        return None

    cleaned = amount_str.replace(",", "").strip()
    if not cleaned:
        return None

    try:
        value = Decimal(cleaned)
    except (InvalidOperation, ValueError):
        return None

    if not value.is_finite():
        return None

    return value


def format_amount(amount: Decimal | None) -> str:
    """
    Format an amount with exactly two decimals for CSV output.

    Args:
        amount: Decimal amount, or None

    Returns:
        String like "30000.00", or "" when the amount is absent

    Example:
        format_amount(Decimal("1234.5")) -> "1234.50"
    """
    if amount is None:
        return ""
    return str(amount.quantize(_TWO_PLACES, rounding=ROUND_HALF_UP))


def normalize_currency_code(code: str | None) -> str | None:
    """
    Upper-case a captured currency token and check its shape.

    Returns:
        Three-letter uppercase code, or None when the token is not one
    """
    if not code:
        return None
    upper = code.strip().upper()
    return upper if is_valid_currency_code(upper) else None


def is_valid_currency_code(code: str) -> bool:
    """Check if a string is a three-letter uppercase currency code."""
    return bool(CURRENCY_CODE_PATTERN.fullmatch(code or ""))
