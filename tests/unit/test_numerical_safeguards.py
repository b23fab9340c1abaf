"""
Тесты для модуля Numerical Safeguards

Проверяет:
1. Проверку конечности (NaN/Inf)
2. Валидацию диапазона и различие видов ошибок
3. Упорядочивание пары значений
4. Округление до целого по правилам midpoint rounding
"""

import pytest

from geometry_primitives.core.errors import (
    GeometryError,
    InvalidArgumentError,
    OutOfRangeError,
)
from geometry_primitives.core.math.numerical_safeguards import (
    DEFAULT_MIDPOINT_ROUNDING,
    MidpointRounding,
    is_valid_float,
    min_max,
    round_to_int,
    validate_finite,
    validate_in_range,
)

# =============================================================================
# ТЕСТЫ ПРОВЕРКИ КОНЕЧНОСТИ
# =============================================================================


class TestIsValidFloat:
    """Тесты для is_valid_float"""

    def test_finite_values_valid(self) -> None:
        """Конечные значения валидны"""
        assert is_valid_float(0.0)
        assert is_valid_float(-1e308)
        assert is_valid_float(5)

    def test_nan_and_inf_invalid(self) -> None:
        """NaN и ±Inf невалидны"""
        assert not is_valid_float(float("nan"))
        assert not is_valid_float(float("inf"))
        assert not is_valid_float(float("-inf"))


class TestValidateFinite:
    """Тесты для validate_finite"""

    def test_returns_value(self) -> None:
        """Конечное значение возвращается без изменений"""
        assert validate_finite(1.5, "x") == 1.5
        assert validate_finite(-0.0, "x") == 0.0

    def test_nan_raises_with_param_name(self) -> None:
        """NaN вызывает InvalidArgumentError с именем параметра"""
        with pytest.raises(InvalidArgumentError, match="width") as exc_info:
            validate_finite(float("nan"), "width")

        assert exc_info.value.param_name == "width"

    def test_inf_raises(self) -> None:
        """±Inf вызывает InvalidArgumentError"""
        for value in (float("inf"), float("-inf")):
            with pytest.raises(InvalidArgumentError):
                validate_finite(value, "x")

    def test_error_is_value_error(self) -> None:
        """InvalidArgumentError совместим с ValueError и GeometryError"""
        with pytest.raises(ValueError):
            validate_finite(float("nan"), "x")
        with pytest.raises(GeometryError):
            validate_finite(float("nan"), "x")


class TestValidateInRange:
    """Тесты для validate_in_range"""

    def test_bounds_inclusive(self) -> None:
        """Границы диапазона включены"""
        assert validate_in_range(0.0, "v", 0.0, 1.0) == 0.0
        assert validate_in_range(1.0, "v", 0.0, 1.0) == 1.0

    def test_out_of_range_raises(self) -> None:
        """Значение вне диапазона вызывает OutOfRangeError"""
        with pytest.raises(OutOfRangeError, match="between 0.0 and 1.0"):
            validate_in_range(1.05, "v", 0.0, 1.0)
        with pytest.raises(OutOfRangeError):
            validate_in_range(-0.4, "v", 0.0, 1.0)

    def test_non_finite_is_not_range_error(self) -> None:
        """NaN/Inf дают InvalidArgumentError, а не OutOfRangeError"""
        for value in (float("nan"), float("inf"), float("-inf")):
            with pytest.raises(InvalidArgumentError):
                validate_in_range(value, "v", 0.0, 1.0)

        with pytest.raises(InvalidArgumentError) as exc_info:
            validate_in_range(float("inf"), "v", 0.0, 1.0)
        assert not isinstance(exc_info.value, OutOfRangeError)


# =============================================================================
# ТЕСТЫ УТИЛИТ
# =============================================================================


class TestMinMax:
    """Тесты для min_max"""

    def test_ordered_pair_unchanged(self) -> None:
        """Упорядоченная пара не меняется"""
        assert min_max(1.0, 2.0) == (1.0, 2.0)

    def test_reversed_pair_swapped(self) -> None:
        """Обратная пара переставляется"""
        assert min_max(2.0, -1.0) == (-1.0, 2.0)

    def test_equal_values(self) -> None:
        """Равные значения"""
        assert min_max(4.0, 4.0) == (4.0, 4.0)


# =============================================================================
# ТЕСТЫ ОКРУГЛЕНИЯ
# =============================================================================


class TestRoundToInt:
    """Тесты для round_to_int"""

    def test_default_is_away_from_zero(self) -> None:
        """Правило по умолчанию — от нуля"""
        assert DEFAULT_MIDPOINT_ROUNDING == MidpointRounding.AWAY_FROM_ZERO
        assert round_to_int(5.5) == 6
        assert round_to_int(4.5) == 5
        assert round_to_int(-5.5) == -6
        assert round_to_int(-4.5) == -5

    def test_to_even(self) -> None:
        """Середина округляется к чётному"""
        assert round_to_int(5.5, MidpointRounding.TO_EVEN) == 6
        assert round_to_int(4.5, MidpointRounding.TO_EVEN) == 4
        assert round_to_int(-4.5, MidpointRounding.TO_EVEN) == -4

    def test_non_midpoint_values(self) -> None:
        """Не-середины округляются к ближайшему при любом midpoint правиле"""
        for rounding in (MidpointRounding.AWAY_FROM_ZERO, MidpointRounding.TO_EVEN):
            assert round_to_int(5.8, rounding) == 6
            assert round_to_int(-1.1, rounding) == -1
            assert round_to_int(2.0, rounding) == 2

    def test_directed_modes(self) -> None:
        """Направленные режимы"""
        assert round_to_int(2.7, MidpointRounding.TO_ZERO) == 2
        assert round_to_int(-2.7, MidpointRounding.TO_ZERO) == -2
        assert round_to_int(2.7, MidpointRounding.TO_NEGATIVE_INFINITY) == 2
        assert round_to_int(-2.2, MidpointRounding.TO_NEGATIVE_INFINITY) == -3
        assert round_to_int(2.2, MidpointRounding.TO_POSITIVE_INFINITY) == 3
        assert round_to_int(-2.7, MidpointRounding.TO_POSITIVE_INFINITY) == -2

    def test_just_below_half_not_rounded_up(self) -> None:
        """Наибольший float меньше 0.5 не округляется вверх"""
        assert round_to_int(0.49999999999999994) == 0

    def test_accepts_string_value_of_enum(self) -> None:
        """Правило можно передать строковым значением enum"""
        assert round_to_int(4.5, "to_even") == 4

    def test_non_finite_raises(self) -> None:
        """NaN/Inf не округляются"""
        with pytest.raises(InvalidArgumentError):
            round_to_int(float("nan"))
        with pytest.raises(InvalidArgumentError):
            round_to_int(float("inf"))
