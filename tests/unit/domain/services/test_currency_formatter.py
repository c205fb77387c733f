"""
Unit tests for currency formatting.
"""

import pytest
from decimal import Decimal

from invoiceflow.domain.models.value_objects import Currency
from invoiceflow.domain.services.currency_formatter import format_currency, resolve_currency


class TestFormatCurrency:
    """Test cases for format_currency."""

    @pytest.mark.parametrize("currency, expected", [
        ("USD", "$1,234.56"),
        ("EUR", "1.234,56\u00a0€"),
        ("GBP", "£1,234.56"),
        ("CAD", "$1,234.56"),
        ("PKR", "Rs\u00a01,234.56"),
    ])
    def test_supported_currencies(self, currency, expected):
        """Test each supported currency uses its locale conventions."""
        assert format_currency(1234.56, currency) == expected

    def test_default_currency_is_usd(self):
        """Test the currency defaults to USD."""
        assert format_currency(10) == "$10.00"

    def test_unknown_currency_falls_back_to_usd(self):
        """Test unknown or missing codes format as US dollars."""
        assert format_currency(5, "XYZ") == "$5.00"
        assert format_currency(5, None) == "$5.00"
        assert format_currency(5, "") == "$5.00"

    def test_currency_code_is_case_insensitive(self):
        """Test lower-case codes are accepted."""
        assert format_currency(1, "gbp") == "£1.00"

    def test_rounds_half_up(self):
        """Test amounts are rounded half up to two places."""
        assert format_currency(2.675, "USD") == "$2.68"
        assert format_currency(0.125, "USD") == "$0.13"
        assert format_currency(0.124, "USD") == "$0.12"

    def test_negative_amount(self):
        """Test negative amounts carry a leading minus sign."""
        assert format_currency(-5, "USD") == "-$5.00"
        assert format_currency(-1234.5, "EUR") == "-1.234,50\u00a0€"

    def test_large_amount_grouping(self):
        """Test every thousands group is separated."""
        assert format_currency(1234567.891, "USD") == "$1,234,567.89"
        assert format_currency(1234567.891, "EUR") == "1.234.567,89\u00a0€"

    def test_accepts_decimal(self):
        """Test Decimal amounts are formatted."""
        assert format_currency(Decimal("99.995"), "USD") == "$100.00"

    def test_none_amount_is_zero(self):
        """Test a missing amount formats as zero."""
        assert format_currency(None, "PKR") == "Rs\u00a00.00"


class TestResolveCurrency:
    """Test cases for resolve_currency."""

    def test_known_code(self):
        """Test known codes resolve to their enum member."""
        assert resolve_currency("EUR") is Currency.EUR

    def test_unknown_code(self):
        """Test unknown codes resolve to USD."""
        assert resolve_currency("JPY") is Currency.USD
