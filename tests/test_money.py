"""Tests for cents-based money arithmetic."""

import pytest
from decimal import Decimal

from invoicekit.utils.money import (
    to_cents,
    from_cents,
    multiply_money,
    add_money,
    subtract_money,
    percentage_of,
    round_money,
    parse_decimal_input,
)


class TestToCents:
    """Tests for to_cents."""

    def test_converts_dollars_to_cents(self):
        """Test converting decimal amounts to cents."""
        assert to_cents(10.99) == 1099
        assert to_cents(0.01) == 1
        assert to_cents(100) == 10000
        assert to_cents(Decimal("12.34")) == 1234
        assert to_cents("5.5") == 550

    def test_removes_float_noise(self):
        """Test that 0.1 + 0.2 (0.30000000000000004) becomes 30 cents."""
        assert to_cents(0.1 + 0.2) == 30

    def test_half_cent_rounds_away_from_zero(self):
        """Test rounding of exactly half a cent."""
        assert to_cents(Decimal("0.005")) == 1
        assert to_cents(Decimal("1.125")) == 113
        assert to_cents(Decimal("-0.005")) == -1

    def test_returns_int(self):
        """Test that the result is a plain int."""
        assert isinstance(to_cents(Decimal("3.14")), int)


class TestFromCents:
    """Tests for from_cents."""

    def test_converts_cents_to_dollars(self):
        """Test converting cents back to decimal amounts."""
        assert from_cents(1099) == Decimal("10.99")
        assert from_cents(1) == Decimal("0.01")
        assert from_cents(10000) == Decimal("100")
        assert from_cents(-250) == Decimal("-2.50")

    def test_has_two_fraction_digits(self):
        """Test that results carry cent precision."""
        assert str(from_cents(10000)) == "100.00"

    @pytest.mark.parametrize("amount", ["0.00", "0.01", "10.99", "-3.50", "1234567.89"])
    def test_inverse_of_to_cents(self, amount):
        """Test that from_cents(to_cents(m)) == m for cent-precision values."""
        money = Decimal(amount)
        assert from_cents(to_cents(money)) == money


class TestMultiplyMoney:
    """Tests for multiply_money."""

    def test_hours_times_rate(self):
        """Test multiplying hours by an hourly rate."""
        assert multiply_money(1.5, 100) == Decimal("150")
        assert multiply_money(8.25, 125.50) == Decimal("1035.38")
        assert multiply_money(1.25, 100) == Decimal("125")
        assert multiply_money(2.5, 150) == Decimal("375")

    def test_avoids_float_error(self):
        """Test that 0.1 * 0.2 is exactly 0.02."""
        result = multiply_money(0.1, 0.2)
        assert result == Decimal("0.02")
        assert str(result) == "0.02"

    def test_negative_operand_keeps_sign(self):
        """Test that negative amounts pass through."""
        assert multiply_money(-2, Decimal("10.50")) == Decimal("-21.00")


class TestAddMoney:
    """Tests for add_money."""

    def test_adds_multiple_amounts(self):
        """Test adding several amounts."""
        assert add_money(10.50, 20.25, 5.25) == Decimal("36")
        assert add_money(1, 2, 3, 4, 5) == Decimal("15")

    def test_avoids_float_error(self):
        """Test that 0.1 + 0.2 is exactly 0.3."""
        assert add_money(0.1, 0.2) == Decimal("0.3")

    def test_single_amount(self):
        """Test adding a single amount."""
        assert add_money(10.50) == Decimal("10.5")

    def test_no_amounts(self):
        """Test that adding nothing gives zero."""
        assert add_money() == 0


class TestSubtractMoney:
    """Tests for subtract_money."""

    def test_subtracts(self):
        """Test subtracting amounts."""
        assert subtract_money(100, 30.50) == Decimal("69.5")
        assert subtract_money(0.3, 0.1) == Decimal("0.2")

    def test_negative_result(self):
        """Test that results may be negative."""
        assert subtract_money(5, 7.25) == Decimal("-2.25")


class TestPercentageOf:
    """Tests for percentage_of."""

    def test_tax_amounts(self):
        """Test typical tax calculations."""
        assert percentage_of(100, 10) == Decimal("10")
        assert percentage_of(150, 8.25) == Decimal("12.38")

    def test_zero_percentage(self):
        """Test that 0% gives zero."""
        assert percentage_of(100, 0) == 0

    def test_over_one_hundred_percent(self):
        """Test that percentages are not capped at 100."""
        assert percentage_of(50, 150) == Decimal("75")


class TestRoundMoney:
    """Tests for round_money."""

    def test_rounds_half_up(self):
        """Test rounding to two places with halves rounding up."""
        assert round_money(10.999) == Decimal("11")
        assert round_money(10.995) == Decimal("11.00")
        assert round_money(10.994) == Decimal("10.99")
        assert round_money(Decimal("2.675")) == Decimal("2.68")

    def test_not_bankers_rounding(self):
        """Test that .x25 rounds up rather than to even."""
        assert round_money(Decimal("0.125")) == Decimal("0.13")

    @pytest.mark.parametrize("value", [0, 1.005, 10.995, -3.333, Decimal("123.4567"), "99.999"])
    def test_idempotent(self, value):
        """Test that rounding twice equals rounding once."""
        once = round_money(value)
        assert round_money(once) == once


class TestLargeAmounts:
    """Tests for amounts beyond the default 28-digit decimal precision."""

    def test_to_cents(self):
        """Test converting very large amounts to cents."""
        assert to_cents(Decimal("1e26")) == 10**28
        assert to_cents(Decimal("-1e40")) == -(10**42)

    def test_round_money(self):
        """Test rounding very large amounts keeps every digit."""
        assert round_money(1e27) == Decimal("1e27")
        assert round_money(Decimal("12345678901234567890123456789.005")) == Decimal(
            "12345678901234567890123456789.01"
        )

    def test_arithmetic(self):
        """Test products, sums and percentages of very large amounts."""
        assert multiply_money(Decimal("1e13"), Decimal("1e12")) == Decimal("1e25")
        assert multiply_money(Decimal("123456789012345678901234.56"), 3) == Decimal(
            "370370367037037036703703.68"
        )
        assert add_money(Decimal("99999999999999999999999999.99"), Decimal("0.01")) == Decimal("1e26")
        assert percentage_of(Decimal("1e30"), 10) == Decimal("1e29")


class TestParseDecimalInput:
    """Tests for parse_decimal_input."""

    def test_parses_valid_strings(self):
        """Test parsing numeric text."""
        assert parse_decimal_input("10.50") == Decimal("10.5")
        assert parse_decimal_input("100") == Decimal("100")
        assert parse_decimal_input("1.25") == Decimal("1.25")
        assert parse_decimal_input("  -3.5") == Decimal("-3.5")
        assert parse_decimal_input(".5") == Decimal("0.5")
        assert parse_decimal_input("1.5e2") == Decimal("150")

    def test_uses_leading_number(self):
        """Test that only the leading decimal literal is read."""
        assert parse_decimal_input("10abc") == Decimal("10")
        assert parse_decimal_input("1,234.56") == Decimal("1")
        assert parse_decimal_input("12.5 hours") == Decimal("12.5")
        assert parse_decimal_input("7e") == Decimal("7")

    def test_invalid_input_returns_default(self):
        """Test that text without a leading number degrades to the default."""
        assert parse_decimal_input("abc") == 0
        assert parse_decimal_input("", 5) == 5
        assert parse_decimal_input("not a number", 10) == 10
        assert parse_decimal_input("NaN", 7) == 7
        assert parse_decimal_input("$1,234.56", 3) == 3
        assert parse_decimal_input("-", 4) == 4

    def test_result_is_rounded(self):
        """Test that parsed values are rounded to cents."""
        assert parse_decimal_input("10.999") == Decimal("11")
        assert parse_decimal_input("0.125xyz") == Decimal("0.13")
