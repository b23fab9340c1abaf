"""
Numerical Safeguards — Finite Validation & Midpoint Rounding

Общие примитивы, которые используют все геометрические типы:
- Проверка конечности float (NaN/Inf не допускаются в значения)
- Проверка попадания в замкнутый диапазон
- Упорядочивание пары значений (min, max)
- Округление до целого с явным правилом для середины (midpoint rounding)

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. NaN/Inf никогда не попадают в значение геометрического типа
2. Округление точное: float переводится в Decimal без потерь,
   поэтому 0.49999999999999994 не превращается в 1
3. Все операции детерминированы и не имеют состояния
"""

import math
from decimal import (
    ROUND_CEILING,
    ROUND_DOWN,
    ROUND_FLOOR,
    ROUND_HALF_EVEN,
    ROUND_HALF_UP,
    Decimal,
)
from enum import Enum
from typing import Final

from geometry_primitives.core.errors import InvalidArgumentError, OutOfRangeError


# =============================================================================
# ENUMS
# =============================================================================


class MidpointRounding(str, Enum):
    """
    Правило округления до целого.

    AWAY_FROM_ZERO и TO_EVEN отличаются только для значений ровно
    посередине между двумя целыми; остальные режимы направленные.
    """

    AWAY_FROM_ZERO = "away_from_zero"
    TO_EVEN = "to_even"
    TO_ZERO = "to_zero"
    TO_NEGATIVE_INFINITY = "to_negative_infinity"
    TO_POSITIVE_INFINITY = "to_positive_infinity"


# =============================================================================
# КОНСТАНТЫ
# =============================================================================

# Правило по умолчанию для всех float → int конверсий
DEFAULT_MIDPOINT_ROUNDING: Final[MidpointRounding] = MidpointRounding.AWAY_FROM_ZERO

# Соответствие правил округления режимам модуля decimal
# (ROUND_HALF_UP в decimal округляет середину от нуля)
_DECIMAL_ROUNDING: Final[dict[MidpointRounding, str]] = {
    MidpointRounding.AWAY_FROM_ZERO: ROUND_HALF_UP,
    MidpointRounding.TO_EVEN: ROUND_HALF_EVEN,
    MidpointRounding.TO_ZERO: ROUND_DOWN,
    MidpointRounding.TO_NEGATIVE_INFINITY: ROUND_FLOOR,
    MidpointRounding.TO_POSITIVE_INFINITY: ROUND_CEILING,
}

_INTEGRAL: Final[Decimal] = Decimal(1)


# =============================================================================
# ПРОВЕРКА КОНЕЧНОСТИ
# =============================================================================


def is_valid_float(value: float) -> bool:
    """
    Проверка, является ли float валидным (не NaN, не Inf).

    Args:
        value: Проверяемое значение

    Returns:
        True если значение валидное (finite), False если NaN или Inf
    """
    return math.isfinite(value)


def validate_finite(value: float, name: str) -> float:
    """
    Валидация, что значение конечное.

    Args:
        value: Проверяемое значение
        name: Имя параметра (для сообщения об ошибке)

    Returns:
        value без изменений

    Raises:
        InvalidArgumentError: Если value равно NaN или ±Inf

    Examples:
        >>> validate_finite(1.5, "x")
        1.5
        >>> validate_finite(float("nan"), "x")  # doctest: +SKIP
        Traceback (most recent call last):
            ...
        InvalidArgumentError: x: value cannot be NaN or infinity, got nan
    """
    if not is_valid_float(value):
        raise InvalidArgumentError(name, value)
    return value


def validate_in_range(
    value: float,
    name: str,
    min_value: float,
    max_value: float,
) -> float:
    """
    Валидация, что значение конечное и лежит в [min_value, max_value].

    Сначала проверяется конечность: NaN/Inf дают InvalidArgumentError,
    а не OutOfRangeError, чтобы вызывающий код различал два вида ошибок.

    Args:
        value: Проверяемое значение
        name: Имя параметра (для сообщения об ошибке)
        min_value: Нижняя граница (включительно)
        max_value: Верхняя граница (включительно)

    Returns:
        value без изменений

    Raises:
        InvalidArgumentError: Если value равно NaN или ±Inf
        OutOfRangeError: Если value вне диапазона
    """
    validate_finite(value, name)

    if value < min_value or value > max_value:
        raise OutOfRangeError(
            name, value, f"value must be between {min_value} and {max_value}"
        )

    return value


# =============================================================================
# УТИЛИТЫ
# =============================================================================


def min_max(a: float, b: float) -> tuple[float, float]:
    """
    Упорядочивание пары значений.

    Examples:
        >>> min_max(3.0, -1.0)
        (-1.0, 3.0)
    """
    return (b, a) if a > b else (a, b)


def round_to_int(
    value: float,
    rounding: MidpointRounding = DEFAULT_MIDPOINT_ROUNDING,
) -> int:
    """
    Округление float до int по заданному правилу.

    Args:
        value: Значение для округления (конечное)
        rounding: Правило округления (default: AWAY_FROM_ZERO)

    Returns:
        Округлённое целое

    Raises:
        InvalidArgumentError: Если value равно NaN или ±Inf

    Examples:
        >>> round_to_int(5.5)
        6
        >>> round_to_int(-4.5)
        -5
        >>> round_to_int(4.5, MidpointRounding.TO_EVEN)
        4
    """
    validate_finite(value, "value")
    mode = _DECIMAL_ROUNDING[MidpointRounding(rounding)]
    # Decimal(float) точен, поэтому середина определяется без погрешности
    return int(Decimal(value).quantize(_INTEGRAL, rounding=mode))
