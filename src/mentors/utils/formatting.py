"""
Formatting Utilities

Helper functions for shaping stored values for display in the admin and filter pages.
"""
from decimal import Decimal, ROUND_HALF_UP
from typing import Optional, Union

BUDGET_FRACTION = Decimal("0.001")


def format_budget(amount: Optional[Union[Decimal, float, int]]) -> str:
    """
    Format a budget with en-US thousands grouping.

    At most three fraction digits are kept and trailing zeros are dropped,
    so stored DECIMAL(18,2) values render the way the pages expect.

    Args:
        amount: Budget value as stored

    Returns:
        Formatted string (e.g., "1,234,567" or "1,234.5")
    """
    if amount is None:
        return "0"
    value = Decimal(str(amount)).quantize(BUDGET_FRACTION, rounding=ROUND_HALF_UP)
    text = f"{value:,f}"
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    if text == "-0":
        return "0"
    return text
