"""
Angle — Угол на плоскости

Immutable Pydantic модель угла. Каноническое внутреннее представление —
обороты (turns): полный оборот равен 1.0. Значение не ограничено сверху
и снизу (несколько оборотов, отрицательное вращение допустимы), в отличие
от Portion, но обязано быть конечным.

Конверсия единиц:
    turns = value / unit.constant
    to_unit(unit) = turns * unit.constant

Мини-язык формата (to_string / format()):
    "P" / "p"          → проценты, формат числа по умолчанию
    последний символ τ → обороты, π → π-радианы, ° → градусы, % → проценты
    окончание " gon"   → грады (без учёта регистра)
    ровно "gon"        → грады, формат числа по умолчанию
    иначе / пусто      → радианы без суффикса
Остаток формат-строки (без токена единицы) — числовой формат значения.
"""

import math
from enum import Enum
from typing import ClassVar, Final

from pydantic import BaseModel, Field

from geometry_primitives.core.domain.point import Point
from geometry_primitives.core.domain.portion import Portion
from geometry_primitives.core.errors import InvalidArgumentError
from geometry_primitives.core.math.number_format import (
    INVARIANT,
    NumberFormatConfig,
    format_number,
)
from geometry_primitives.core.math.numerical_safeguards import validate_finite


# =============================================================================
# ENUMS
# =============================================================================


class AngleUnit(str, Enum):
    """Единица измерения угла"""

    TURNS = "turns"
    DEGREES = "degrees"
    RADIANS = "radians"
    PI_RADIANS = "pi_radians"
    GRADIANS = "gradians"
    PERCENT = "percent"

    @property
    def constant(self) -> float:
        """Величина полного оборота в этой единице."""
        return _UNIT_CONSTANTS[self]

    @property
    def suffix(self) -> str:
        """Суффикс единицы в текстовой форме угла."""
        return _UNIT_SUFFIXES[self]


# =============================================================================
# КОНСТАНТЫ
# =============================================================================

TAU: Final[float] = math.pi * 2

_UNIT_CONSTANTS: Final[dict[AngleUnit, float]] = {
    AngleUnit.TURNS: 1.0,
    AngleUnit.DEGREES: 360.0,
    AngleUnit.RADIANS: TAU,
    AngleUnit.PI_RADIANS: 2.0,
    AngleUnit.GRADIANS: 400.0,
    AngleUnit.PERCENT: 100.0,
}

_UNIT_SUFFIXES: Final[dict[AngleUnit, str]] = {
    AngleUnit.TURNS: "τ",
    AngleUnit.DEGREES: "°",
    AngleUnit.RADIANS: "",
    AngleUnit.PI_RADIANS: "π",
    AngleUnit.GRADIANS: " gon",
    AngleUnit.PERCENT: "%",
}

# Односимвольные токены единиц в конце формат-строки
_FORMAT_SUFFIX_UNITS: Final[dict[str, AngleUnit]] = {
    "τ": AngleUnit.TURNS,
    "π": AngleUnit.PI_RADIANS,
    "°": AngleUnit.DEGREES,
    "%": AngleUnit.PERCENT,
}

_GRADIANS_SUFFIX: Final[str] = " gon"
_GRADIANS_TOKEN: Final[str] = "gon"


def parse_angle_format(fmt: str | None) -> tuple[AngleUnit, str | None]:
    """
    Разбор формат-строки угла на единицу и числовой формат.

    Порядок проверок фиксирован: "P"/"p", затем односимвольный суффикс,
    затем " gon", затем ровно "gon".

    Args:
        fmt: Формат-строка угла (None/"" → радианы)

    Returns:
        (unit, numeric_format); numeric_format=None означает формат по умолчанию

    Examples:
        >>> parse_angle_format("F1°")
        (<AngleUnit.DEGREES: 'degrees'>, 'F1')
        >>> parse_angle_format("gon")
        (<AngleUnit.GRADIANS: 'gradians'>, None)
    """
    if not fmt:
        return AngleUnit.RADIANS, None

    if fmt in ("P", "p"):
        return AngleUnit.PERCENT, None

    unit = _FORMAT_SUFFIX_UNITS.get(fmt[-1])
    if unit is not None:
        return unit, fmt[:-1]

    if fmt.lower().endswith(_GRADIANS_SUFFIX):
        return AngleUnit.GRADIANS, fmt[: -len(_GRADIANS_SUFFIX)]

    if fmt == _GRADIANS_TOKEN:
        return AngleUnit.GRADIANS, None

    return AngleUnit.RADIANS, fmt


# =============================================================================
# ANGLE MODEL
# =============================================================================


class Angle(BaseModel):
    """
    Угол, хранимый в оборотах.

    Immutable модель (frozen=True). Равенство и порядок — по turns.

    Конструирование:
        Angle(0.25)                      # обороты
        Angle(90, AngleUnit.DEGREES)     # значение в единице
        Angle(Portion(0.5))              # доля оборота
    """

    turns: float = Field(
        ..., allow_inf_nan=False, description="Величина угла в оборотах (1.0 = полный оборот)"
    )

    model_config = {"frozen": True}

    ZERO: ClassVar["Angle"]

    def __init__(self, turns: float | Portion, unit: AngleUnit | None = None) -> None:
        """
        Создание угла.

        Args:
            turns: Величина в оборотах, величина в единице unit, или Portion
            unit: Единица, в которой задано turns (default: обороты)

        Raises:
            InvalidArgumentError: Если величина (или результат конверсии)
                равна NaN или ±Inf
            TypeError: Если вместе с Portion передана единица
        """
        if isinstance(turns, Portion):
            if unit is not None:
                raise TypeError("Angle(portion) takes no unit")
            # Portion гарантированно конечна и ограничена
            turns = turns.value
        elif unit is not None:
            turns = validate_finite(turns, "value") / AngleUnit(unit).constant

        validate_finite(turns, "turns")
        super().__init__(turns=turns)

    @classmethod
    def from_portion(cls, portion: Portion) -> "Angle":
        """Угол, равный доле полного оборота."""
        return cls(portion)

    # -------------------------------------------------------------------------
    # Единицы
    # -------------------------------------------------------------------------

    @property
    def radians(self) -> float:
        """Величина угла в радианах (полный оборот = 2π)."""
        return self.to_unit(AngleUnit.RADIANS)

    @property
    def canonical(self) -> "Angle":
        """Котерминальный угол в диапазоне [0τ, 1τ)."""
        reduced = self.turns - math.floor(self.turns)
        # -1e-17 - floor(-1e-17) округляется ровно до 1.0
        return Angle(0.0 if reduced >= 1.0 else reduced)

    def to_unit(self, unit: AngleUnit) -> float:
        """Величина угла в заданной единице."""
        return self.turns * AngleUnit(unit).constant

    # -------------------------------------------------------------------------
    # Арифметика
    # -------------------------------------------------------------------------

    def __add__(self, other: object) -> "Angle":
        if not isinstance(other, Angle):
            return NotImplemented
        return Angle(self.turns + other.turns)

    def __sub__(self, other: object) -> "Angle":
        if not isinstance(other, Angle):
            return NotImplemented
        return Angle(self.turns - other.turns)

    def __mul__(self, multiple: object) -> "Angle":
        if not isinstance(multiple, (int, float)):
            return NotImplemented
        return Angle(self.turns * multiple)

    __rmul__ = __mul__

    def __truediv__(self, divisor: object) -> "Angle":
        if not isinstance(divisor, (int, float)):
            return NotImplemented
        if divisor == 0:
            raise InvalidArgumentError("divisor", divisor, "cannot divide an angle by zero")
        return Angle(self.turns / divisor)

    def __neg__(self) -> "Angle":
        return Angle(-self.turns)

    # -------------------------------------------------------------------------
    # Тригонометрия
    # -------------------------------------------------------------------------

    @classmethod
    def arc_sin(cls, sine: float) -> "Angle":
        return cls(math.asin(sine), AngleUnit.RADIANS)

    @classmethod
    def arc_cos(cls, cosine: float) -> "Angle":
        return cls(math.acos(cosine), AngleUnit.RADIANS)

    @classmethod
    def arc_tan(cls, tangent: float) -> "Angle":
        return cls(math.atan(tangent), AngleUnit.RADIANS)

    @classmethod
    def arc_tan2(cls, y: float, x: float) -> "Angle":
        return cls(math.atan2(y, x), AngleUnit.RADIANS)

    def cos(self) -> float:
        return math.cos(self.radians)

    def sin(self) -> float:
        return math.sin(self.radians)

    def tan(self) -> float:
        return math.tan(self.radians)

    def cosh(self) -> float:
        return math.cosh(self.radians)

    def sinh(self) -> float:
        return math.sinh(self.radians)

    def tanh(self) -> float:
        return math.tanh(self.radians)

    def to_point(self, radius: float = 1.0, center: Point | None = None) -> Point:
        """
        Проекция угла на окружность.

        Args:
            radius: Радиус окружности (default: 1.0, единичная окружность)
            center: Центр окружности (default: начало координат)

        Returns:
            Point(cos θ * radius, sin θ * radius), смещённая на center
        """
        theta = self.radians
        point = Point(math.cos(theta) * radius, math.sin(theta) * radius)
        if center is None:
            return point
        return point + center

    # -------------------------------------------------------------------------
    # Сравнение
    # -------------------------------------------------------------------------

    def compare_to(self, other: "Angle") -> int:
        """Сравнение: -1 если меньше, 0 если равно, 1 если больше."""
        return (self.turns > other.turns) - (self.turns < other.turns)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Angle):
            return NotImplemented
        return self.turns < other.turns

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Angle):
            return NotImplemented
        return self.turns <= other.turns

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Angle):
            return NotImplemented
        return self.turns > other.turns

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Angle):
            return NotImplemented
        return self.turns >= other.turns

    # -------------------------------------------------------------------------
    # Форматирование
    # -------------------------------------------------------------------------

    def to_string(
        self, fmt: str | None = None, config: NumberFormatConfig = INVARIANT
    ) -> str:
        """
        Текстовая форма угла по мини-языку формата.

        Examples:
            >>> Angle(0.25).to_string("F1°")
            '90.0°'
            >>> Angle(0.25).to_string("gon")
            '100 gon'
            >>> Angle(0.5).to_string("F2τ")
            '0.50τ'
        """
        unit, numeric_format = parse_angle_format(fmt)
        return self.to_string_in(unit, numeric_format, config)

    def to_string_in(
        self,
        unit: AngleUnit,
        numeric_format: str | None = None,
        config: NumberFormatConfig = INVARIANT,
    ) -> str:
        """Текстовая форма угла в явно заданной единице."""
        unit = AngleUnit(unit)
        return format_number(self.to_unit(unit), numeric_format, config) + unit.suffix

    def __str__(self) -> str:
        return self.to_string()

    def __format__(self, format_spec: str) -> str:
        return self.to_string(format_spec)


Angle.ZERO = Angle(0.0)
