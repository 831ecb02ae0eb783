"""
Тесты для Difference и DifferenceRepresentation

Проверяет:
1. Difference.between для всех ветвей (None, INFINITY, >, <, ==)
2. Печать to_string / prettify, "N/A" для пустого состояния
3. mul с сохранением знака (отрицательный множитель → ZERO)
4. Filter-style аксессоры
5. Инвариант sign == "" ⇒ absolute_value == 0 и immutability
"""

import dataclasses

import pytest
from pydantic import ValidationError

from src.core.domain import NOT_AVAILABLE, Difference, DifferenceRepresentation, Sign
from src.core.math import Decimal


# =============================================================================
# BETWEEN
# =============================================================================


class TestBetween:
    """Тесты для Difference.between"""

    def test_positive(self) -> None:
        difference = Difference.between(5, 3)
        assert difference.sign is Sign.PLUS
        assert difference.absolute_value.eq(2)
        assert difference.prettify() == "+2"

    def test_negative(self) -> None:
        difference = Difference.between(3, 5)
        assert difference.sign is Sign.MINUS
        assert difference.prettify() == "-2"

    def test_equal(self) -> None:
        difference = Difference.between(5, 5)
        assert difference.sign is Sign.NONE
        assert difference.absolute_value is Decimal.ZERO
        assert difference.prettify() == "0"

    @pytest.mark.parametrize("d1,d2", [(None, 5), (5, None), (None, None)])
    def test_missing_operand_is_not_available(self, d1, d2) -> None:
        difference = Difference.between(d1, d2)
        assert difference.representation is None
        assert difference.to_string() == NOT_AVAILABLE
        assert difference.prettify() == "N/A"

    def test_both_infinite_is_not_available(self) -> None:
        difference = Difference.between(Decimal.INFINITY, Decimal.INFINITY)
        assert difference.to_string() == "N/A"

    def test_first_infinite(self) -> None:
        difference = Difference.between(Decimal.INFINITY, 5)
        assert difference.sign is Sign.PLUS
        assert difference.absolute_value is Decimal.INFINITY
        assert difference.to_string() == "+∞"

    def test_second_infinite(self) -> None:
        difference = Difference.between(5, Decimal.INFINITY)
        assert difference.sign is Sign.MINUS
        assert difference.to_string() == "-∞"

    def test_mixed_decimalish_inputs(self) -> None:
        difference = Difference.between("1.25", Decimal.parse(1))
        assert difference.to_string() == "+0.25"

    def test_malformed_input_parsed_as_zero(self) -> None:
        assert Difference.between("abc", 2).to_string() == "-2"

    def test_too_long_input_parsed_as_zero(self) -> None:
        assert Difference.between("1" * 5000, 1).to_string() == "-1"
        assert Difference.between(10**5000, 1).to_string() == "-1"

    def test_large_operands_beyond_str_conversion_limit(self) -> None:
        huge = Decimal.parse("1e512").pow(10)
        difference = Difference.between(huge, 0)
        assert difference.sign is Sign.PLUS
        assert difference.to_string() == "+1" + "0" * 5120


# =============================================================================
# ПЕЧАТЬ
# =============================================================================


class TestFormatting:
    """Тесты для to_string / prettify"""

    def test_prettify_with_precision(self) -> None:
        assert Difference.between("1234.5", "0.5").prettify(2) == "+1,234.00"

    def test_to_string_with_precision(self) -> None:
        assert Difference.between("1.005", "1").to_string(3) == "+0.005"

    def test_str(self) -> None:
        difference = Difference.between("0.123456", 0)
        assert str(difference) == difference.to_string() == "+0.123"


# =============================================================================
# MUL
# =============================================================================


class TestMul:
    """Тесты для Difference.mul"""

    def test_scales_magnitude(self) -> None:
        difference = Difference.between("0.1", "0.05").mul(1000)
        assert difference.to_string() == "+50"

    def test_keeps_negative_sign(self) -> None:
        assert Difference.between(1, 2).mul(3).to_string() == "-3"

    def test_empty_stays_empty(self) -> None:
        assert Difference.between(None, 1).mul(3).to_string() == "N/A"

    def test_negative_factor_parses_to_zero(self) -> None:
        """Знак не переворачивается: -1 разбирается как ZERO"""
        difference = Difference.between(5, 3).mul(-1)
        assert difference.sign is Sign.PLUS
        assert difference.absolute_value.is_zero
        assert difference.to_string() == "+0"

    def test_returns_new_instance(self) -> None:
        difference = Difference.between(5, 3)
        scaled = difference.mul(2)
        assert difference.to_string() == "+2"
        assert scaled.to_string() == "+4"


# =============================================================================
# АКСЕССОРЫ
# =============================================================================


class TestAccessors:
    """Тесты для filter-style аксессоров"""

    def test_positive_difference(self) -> None:
        difference = Difference.between(5, 3)
        assert difference.positive is difference
        assert difference.negative is None
        assert difference.non_zero is difference
        assert difference.finite is difference
        assert difference.infinite is None

    def test_negative_difference(self) -> None:
        difference = Difference.between(3, 5)
        assert difference.negative is difference
        assert difference.positive is None

    def test_zero_difference(self) -> None:
        difference = Difference.between(5, 5)
        assert difference.non_zero is None
        assert difference.positive is None
        assert difference.negative is None

    def test_infinite_difference(self) -> None:
        difference = Difference.between(Decimal.INFINITY, 1)
        assert difference.infinite is difference
        assert difference.finite is None

    def test_empty_difference(self) -> None:
        difference = Difference.between(None, 1)
        assert difference.sign is None
        assert difference.absolute_value is None
        assert difference.non_zero is None
        assert difference.positive is None
        assert difference.negative is None
        assert difference.infinite is None
        assert difference.finite is None


# =============================================================================
# REPRESENTATION
# =============================================================================


class TestDifferenceRepresentation:
    """Тесты для DifferenceRepresentation"""

    def test_valid(self) -> None:
        representation = DifferenceRepresentation(sign=Sign.PLUS, absolute_value=Decimal.ONE)
        assert representation.sign is Sign.PLUS
        assert representation.absolute_value is Decimal.ONE

    def test_sign_from_string(self) -> None:
        representation = DifferenceRepresentation(sign="-", absolute_value=Decimal.ONE)
        assert representation.sign is Sign.MINUS

    def test_empty_sign_requires_zero(self) -> None:
        with pytest.raises(ValidationError, match="empty sign requires zero absolute_value"):
            DifferenceRepresentation(sign=Sign.NONE, absolute_value=Decimal.ONE)

    def test_absolute_value_must_be_decimal(self) -> None:
        with pytest.raises(ValidationError):
            DifferenceRepresentation(sign=Sign.PLUS, absolute_value="1")

    def test_invalid_sign(self) -> None:
        with pytest.raises(ValidationError):
            DifferenceRepresentation(sign="*", absolute_value=Decimal.ONE)

    def test_frozen(self) -> None:
        representation = DifferenceRepresentation(sign=Sign.PLUS, absolute_value=Decimal.ONE)
        with pytest.raises(ValidationError):
            representation.sign = Sign.MINUS


class TestImmutability:
    """Difference неизменяем и сравним по значению"""

    def test_assignment_raises(self) -> None:
        difference = Difference.between(5, 3)
        with pytest.raises(dataclasses.FrozenInstanceError):
            difference.representation = None  # type: ignore[misc]

    def test_value_equality(self) -> None:
        assert Difference.between(5, 3) == Difference.between(7, 5)
        assert Difference.between(None, 1) == Difference()
        assert Difference.between(5, 3) != Difference.between(3, 5)
