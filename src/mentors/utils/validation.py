"""
Input Validation and Normalization

Pure helpers used by the request handlers before anything touches the database.
"""
import math
import re
from decimal import Decimal, InvalidOperation
from typing import Any, Optional

# Egyptian mobile numbers: 11 digits with an operator prefix
PHONE_PATTERN = re.compile(r"^(010|011|012|015)[0-9]{8}$")

LEAD_BUDGET_MIN = Decimal("1000000")
LEAD_BUDGET_MAX = Decimal("1000000000")

# NUMERIC(18, 2) holds at most 16 integer digits
STORED_BUDGET_LIMIT = Decimal("1e16")


def is_valid_phone(phone: Any) -> bool:
    """
    Check a phone number against the accepted mobile format.

    Args:
        phone: Raw phone value from the request body

    Returns:
        True if phone is exactly 11 digits starting with 010, 011, 012 or 015
    """
    if not isinstance(phone, str):
        return False
    return PHONE_PATTERN.fullmatch(phone) is not None


def normalize_budget(value: Any) -> Optional[Decimal]:
    """
    Parse a budget entered with optional thousands separators.

    Args:
        value: Raw budget (string such as "1,250,000" or a JSON number)

    Returns:
        Decimal value, or None if the input is not a finite number.
        Empty input parses to zero.
    """
    raw = str(value or "").replace(",", "").strip()
    if not raw:
        return Decimal(0)
    if "_" in raw:
        return None

    try:
        number = Decimal(raw)
    except InvalidOperation:
        return None

    # Values beyond double range (e.g. "1e400") count as infinite
    if not number.is_finite() or math.isinf(float(number)):
        return None
    return number


def is_positive_budget(value: Optional[Decimal]) -> bool:
    """True if a normalized budget is greater than zero and fits the budget column."""
    return value is not None and 0 < value < STORED_BUDGET_LIMIT


def is_lead_budget_in_range(value: Optional[Decimal]) -> bool:
    """True if a normalized lead budget lies within the accepted bounds."""
    return value is not None and LEAD_BUDGET_MIN <= value <= LEAD_BUDGET_MAX


def clean_text(value: Any) -> str:
    """Coerce an optional request value to a stripped string."""
    return str(value or "").strip()
