"""
Portion — Доля целого в диапазоне [0, 1]

Immutable Pydantic модель вещественной доли: 0 — ничего от целого,
1 — всё целое. Используется Angle для построения угла из доли оборота.

Виды ошибок различаются по типу:
- Конструктор: InvalidArgumentError (NaN/Inf), OutOfRangeError (вне [0, 1])
- Конверсии (from_float, from_decimal, from_byte, convert): InvalidConversionError
"""

import numbers
from decimal import Decimal
from typing import ClassVar, Final

from pydantic import BaseModel, Field

from geometry_primitives.core.errors import InvalidConversionError, OutOfRangeError
from geometry_primitives.core.math.number_format import (
    INVARIANT,
    NumberFormatConfig,
    format_number,
)
from geometry_primitives.core.math.numerical_safeguards import (
    DEFAULT_MIDPOINT_ROUNDING,
    MidpointRounding,
    is_valid_float,
    round_to_int,
    validate_in_range,
)


# =============================================================================
# КОНСТАНТЫ
# =============================================================================

# Максимальное значение байта: полная доля соответствует 255
BYTE_MAX: Final[int] = 255


# =============================================================================
# PORTION MODEL
# =============================================================================


class Portion(BaseModel):
    """
    Доля целого, вещественное число от 0 до 1 включительно.

    Immutable модель (frozen=True). Производные доли (complement)
    создаются как новые экземпляры.
    """

    value: float = Field(
        ..., ge=0.0, le=1.0, allow_inf_nan=False, description="Доля целого, 0.0 ≤ value ≤ 1.0"
    )

    model_config = {"frozen": True}

    EMPTY: ClassVar["Portion"]
    FULL: ClassVar["Portion"]

    def __init__(self, value: float) -> None:
        """
        Создание доли.

        Args:
            value: Значение доли от 0 до 1 включительно

        Raises:
            InvalidArgumentError: Если value равно NaN или ±Inf
            OutOfRangeError: Если value < 0 или value > 1
        """
        validate_in_range(value, "value", 0.0, 1.0)
        super().__init__(value=value)

    # -------------------------------------------------------------------------
    # Производные значения
    # -------------------------------------------------------------------------

    @property
    def complement(self) -> "Portion":
        """Доля, которая вместе с этой составляет целое (в сумме 1)."""
        return Portion(1.0 - self.value)

    def lerp(
        self,
        *bounds: float,
        rounding: MidpointRounding = DEFAULT_MIDPOINT_ROUNDING,
    ) -> float:
        """
        Линейная интерполяция: значение между границами, соответствующее доле.

        lerp(max) → value * max
        lerp(min, max) → value * (max - min) + min

        Если все границы целые, результат округляется до int по правилу
        rounding. При min > max большая доля даёт меньшее значение.

        Args:
            *bounds: (max) или (min, max)
            rounding: Правило округления для целых границ (default: AWAY_FROM_ZERO)

        Returns:
            Интерполированное значение (float или int)

        Examples:
            >>> Portion(0.5).lerp(10.0)
            5.0
            >>> Portion(0.25).lerp(10, 20)
            13
            >>> Portion(0.25).lerp(1, 4, rounding=MidpointRounding.TO_EVEN)
            2
        """
        if len(bounds) == 1:
            minimum, maximum = 0, bounds[0]
        elif len(bounds) == 2:
            minimum, maximum = bounds
        else:
            raise TypeError(f"lerp() takes 1 or 2 bounds, got {len(bounds)}")

        result = self.value * (maximum - minimum) + minimum

        if isinstance(minimum, int) and isinstance(maximum, int):
            return round_to_int(result, rounding)
        return result

    def __mul__(self, other: object) -> float:
        if isinstance(other, numbers.Real):
            return self.lerp(other)
        return NotImplemented

    __rmul__ = __mul__

    # -------------------------------------------------------------------------
    # Фабрики
    # -------------------------------------------------------------------------

    @classmethod
    def fraction(cls, numerator: int, denominator: int | None = None) -> "Portion":
        """
        Доля, равная дроби numerator / denominator.

        fraction(d) эквивалентно fraction(1, d).

        Args:
            numerator: Числитель (0 ≤ numerator ≤ denominator)
            denominator: Знаменатель (> 0)

        Returns:
            Portion(numerator / denominator)

        Raises:
            OutOfRangeError: Если numerator < 0, denominator ≤ 0
                или numerator > denominator
        """
        if denominator is None:
            numerator, denominator = 1, numerator

        if numerator < 0:
            raise OutOfRangeError("numerator", numerator, "numerator cannot be negative")
        if denominator <= 0:
            raise OutOfRangeError(
                "denominator", denominator, "denominator cannot be negative or zero"
            )
        if numerator > denominator:
            raise OutOfRangeError(
                "numerator", numerator, "numerator cannot be greater than denominator"
            )

        return cls(numerator / denominator)

    # -------------------------------------------------------------------------
    # Конверсии
    # -------------------------------------------------------------------------

    @classmethod
    def from_float(cls, value: float) -> "Portion":
        """
        Конверсия float → Portion.

        Raises:
            InvalidConversionError: Если value не конечное или вне [0, 1]
        """
        if not is_valid_float(value) or value < 0.0 or value > 1.0:
            raise InvalidConversionError(value, "Portion")
        return cls(value)

    @classmethod
    def from_decimal(cls, value: Decimal) -> "Portion":
        """
        Конверсия Decimal → Portion.

        Raises:
            InvalidConversionError: Если value не конечное или вне [0, 1]
        """
        if not value.is_finite():
            raise InvalidConversionError(value, "Portion")
        return cls.from_float(float(value))

    @classmethod
    def from_byte(cls, value: int) -> "Portion":
        """
        Конверсия байта (0..255) → Portion, эквивалентно fraction(value, 255).

        Raises:
            InvalidConversionError: Если value не целое в диапазоне 0..255
        """
        if not isinstance(value, int) or value < 0 or value > BYTE_MAX:
            raise InvalidConversionError(value, "Portion")
        return cls.fraction(value, BYTE_MAX)

    @classmethod
    def convert(cls, value: object) -> "Portion":
        """
        Общая точка входа для конверсий внешних значений в Portion.

        Portion возвращается как есть, Decimal разбирается через from_decimal,
        остальные вещественные числа — через from_float.

        Raises:
            InvalidConversionError: Для любого неконвертируемого значения
        """
        if isinstance(value, Portion):
            return value
        if isinstance(value, Decimal):
            return cls.from_decimal(value)
        if isinstance(value, numbers.Real):
            return cls.from_float(float(value))
        raise InvalidConversionError(value, "Portion")

    def __float__(self) -> float:
        return float(self.value)

    def to_decimal(self) -> Decimal:
        """Расширяющая конверсия в Decimal (кратчайшая десятичная запись value)."""
        return Decimal(repr(self.value))

    def to_byte(self) -> int:
        """Сужающая конверсия в байт: lerp(255) с округлением от нуля."""
        return self.lerp(BYTE_MAX, rounding=MidpointRounding.AWAY_FROM_ZERO)

    # -------------------------------------------------------------------------
    # Сравнение
    # -------------------------------------------------------------------------

    def compare_to(self, other: "Portion") -> int:
        """Сравнение: -1 если меньше, 0 если равно, 1 если больше."""
        return (self.value > other.value) - (self.value < other.value)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Portion):
            return NotImplemented
        return self.value < other.value

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Portion):
            return NotImplemented
        return self.value <= other.value

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Portion):
            return NotImplemented
        return self.value > other.value

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Portion):
            return NotImplemented
        return self.value >= other.value

    # -------------------------------------------------------------------------
    # Форматирование
    # -------------------------------------------------------------------------

    def to_string(
        self, fmt: str | None = None, config: NumberFormatConfig = INVARIANT
    ) -> str:
        """Текстовая форма value в числовом формате fmt."""
        return format_number(self.value, fmt, config)

    def __str__(self) -> str:
        return self.to_string()

    def __format__(self, format_spec: str) -> str:
        return self.to_string(format_spec or None)


Portion.EMPTY = Portion(0.0)
Portion.FULL = Portion(1.0)
