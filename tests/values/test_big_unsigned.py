"""Tests for the arbitrary-precision BigUnsignedInt value type."""

import pytest

from numkit.core.errors import (
    DivisionByZeroError,
    InvalidFormatError,
    NegativeResultError,
    NegativeValueError,
)
from numkit.math.big_unsigned import BigUnsignedInt
from numkit.math.value import INT64_MAX


class TestBigUnsignedConstruction:

    def test_from_int(self):
        assert BigUnsignedInt(7).value == 7

    def test_from_text(self):
        assert BigUnsignedInt("10000000000000000000").value == 10**19

    def test_default_is_zero(self):
        assert BigUnsignedInt().value == 0

    def test_negative_int_rejected(self):
        with pytest.raises(NegativeValueError):
            BigUnsignedInt(-1)

    def test_negative_text_rejected(self):
        with pytest.raises(NegativeValueError):
            BigUnsignedInt("-12")

    def test_beyond_64_bits(self):
        assert BigUnsignedInt(2**200).value == 2**200

    def test_serialization_round_trip(self, assert_serializable):
        assert_serializable(BigUnsignedInt(3**90), BigUnsignedInt)


class TestBigUnsignedArithmetic:

    def test_add_scenario(self):
        result = BigUnsignedInt("10000000000000000000").add(BigUnsignedInt("2"))
        assert result.to_string() == "10000000000000000002"

    def test_add_past_64_bit_register(self):
        result = BigUnsignedInt(INT64_MAX).add(BigUnsignedInt(1))
        assert result.value == INT64_MAX + 1

    def test_multiply_never_overflows(self):
        result = BigUnsignedInt(10**30).multiply(BigUnsignedInt(10**30))
        assert result == BigUnsignedInt(10**60)

    def test_subtract(self):
        assert BigUnsignedInt(10).subtract(BigUnsignedInt(3)) == BigUnsignedInt(7)

    def test_subtract_negative_result(self):
        with pytest.raises(NegativeResultError, match="is negative"):
            BigUnsignedInt(3).subtract(BigUnsignedInt(10))

    def test_divide(self):
        assert BigUnsignedInt(10**20 + 1).divide(BigUnsignedInt(10**10)) == BigUnsignedInt(10**10)

    def test_divide_by_zero(self):
        with pytest.raises(DivisionByZeroError):
            BigUnsignedInt(1).divide(BigUnsignedInt(0))

    def test_operators(self):
        a, b = BigUnsignedInt(100), BigUnsignedInt(7)
        assert a + b == BigUnsignedInt(107)
        assert a - b == BigUnsignedInt(93)
        assert a * b == BigUnsignedInt(700)
        assert a // b == BigUnsignedInt(14)

    def test_ordering(self):
        assert BigUnsignedInt(2**100) > BigUnsignedInt(2**99)
        assert BigUnsignedInt(5) <= BigUnsignedInt(5)


class TestBigUnsignedText:

    def test_parse_whitespace(self):
        assert BigUnsignedInt.parse("  42 \n") == BigUnsignedInt(42)

    @pytest.mark.parametrize("text", ["", "4 2", "abc", "1.5", "+-3"])
    def test_parse_invalid(self, text):
        with pytest.raises(InvalidFormatError):
            BigUnsignedInt.parse(text)

    def test_parse_negative(self):
        with pytest.raises(NegativeValueError):
            BigUnsignedInt.parse("-1")

    def test_very_long_text_round_trip(self):
        """Values longer than the interpreter's int/str digit limit."""
        digits = "9" + "0123456789" * 600
        value = BigUnsignedInt.parse(digits)
        assert value.to_string() == digits
        assert value.divide(BigUnsignedInt(10**6000)).to_string() == "9"

    def test_leading_zeros(self):
        assert BigUnsignedInt.parse("000123").to_string() == "123"

    def test_repr(self):
        assert repr(BigUnsignedInt(5)) == "BigUnsignedInt(5)"


class TestBigUnsignedConversion:

    def test_to_real(self):
        assert BigUnsignedInt(10**20).to_real() == 1e20

    def test_to_real_beyond_float_range(self):
        with pytest.raises(OverflowError):
            BigUnsignedInt(10**400).to_real()
