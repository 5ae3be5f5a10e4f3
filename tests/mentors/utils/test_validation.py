"""
Unit tests for validation module
"""
from decimal import Decimal

import pytest

from src.mentors.utils.validation import (
    is_valid_phone,
    normalize_budget,
    is_positive_budget,
    is_lead_budget_in_range,
    clean_text,
)


class TestIsValidPhone:
    """Tests for is_valid_phone"""

    @pytest.mark.parametrize("phone", ["01012345678", "01112345678", "01212345678", "01512345678"])
    def test_accepts_known_prefixes(self, phone):
        """Test that each operator prefix is accepted"""
        assert is_valid_phone(phone) is True

    def test_rejects_bad_prefix(self):
        """Test that a landline-style prefix is rejected"""
        assert is_valid_phone("02012345678") is False
        assert is_valid_phone("01312345678") is False

    def test_rejects_wrong_length(self):
        """Test that short and long numbers are rejected"""
        assert is_valid_phone("123") is False
        assert is_valid_phone("0101234567") is False
        assert is_valid_phone("010123456789") is False

    def test_rejects_non_digits(self):
        """Test that separators and letters are rejected"""
        assert is_valid_phone("010-1234567") is False
        assert is_valid_phone("0101234567a") is False
        assert is_valid_phone(" 01012345678") is False

    def test_rejects_non_strings(self):
        """Test that numbers and None are rejected"""
        assert is_valid_phone(None) is False
        assert is_valid_phone(1012345678) is False


class TestNormalizeBudget:
    """Tests for normalize_budget"""

    def test_strips_thousands_separators(self):
        """Test parsing a comma-grouped amount"""
        assert normalize_budget("1,000,000") == Decimal("1000000")

    def test_trims_whitespace(self):
        """Test that surrounding whitespace is ignored"""
        assert normalize_budget("  2,500,000  ") == Decimal("2500000")

    def test_accepts_json_numbers(self):
        """Test that numeric inputs are parsed too"""
        assert normalize_budget(1500000) == Decimal("1500000")
        assert normalize_budget(1234.5) == Decimal("1234.5")

    def test_rejects_garbage(self):
        """Test that non-numeric text returns None"""
        assert normalize_budget("abc") is None
        assert normalize_budget("12abc") is None
        assert normalize_budget("1_000") is None

    def test_rejects_non_finite(self):
        """Test that NaN and infinity return None"""
        assert normalize_budget("NaN") is None
        assert normalize_budget("Infinity") is None

    def test_rejects_values_beyond_double_range(self):
        """Test that exponents which overflow a double are treated as infinite"""
        assert normalize_budget("1e400") is None
        assert normalize_budget("-1e400") is None
        assert normalize_budget("1e300") == Decimal("1e300")

    def test_empty_input_is_zero(self):
        """Test that missing input parses to zero"""
        assert normalize_budget(None) == Decimal(0)
        assert normalize_budget("") == Decimal(0)


class TestBudgetChecks:
    """Tests for the budget range helpers"""

    def test_positive_budget(self):
        """Test rejecting zero, negative and missing budgets"""
        assert is_positive_budget(Decimal("1")) is True
        assert is_positive_budget(Decimal("0")) is False
        assert is_positive_budget(Decimal("-5")) is False
        assert is_positive_budget(None) is False

    def test_positive_budget_must_fit_column(self):
        """Test that budgets with more than 16 integer digits are rejected"""
        assert is_positive_budget(Decimal("9999999999999999.99")) is True
        assert is_positive_budget(Decimal("1e16")) is False
        assert is_positive_budget(Decimal("1e300")) is False

    def test_lead_budget_bounds_are_inclusive(self):
        """Test lead budget floor and ceiling"""
        assert is_lead_budget_in_range(Decimal("1000000")) is True
        assert is_lead_budget_in_range(Decimal("1000000000")) is True
        assert is_lead_budget_in_range(Decimal("500000")) is False
        assert is_lead_budget_in_range(Decimal("1000000000.01")) is False
        assert is_lead_budget_in_range(None) is False


def test_clean_text():
    """Test coercing optional values to stripped strings"""
    assert clean_text("  Sodic ") == "Sodic"
    assert clean_text(None) == ""
    assert clean_text("   ") == ""
