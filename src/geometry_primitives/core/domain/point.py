"""
Point — Точка на плоскости (float и int варианты)

Immutable Pydantic модели пары координат:
- Point: float координаты, обе обязаны быть конечными
- IntPoint: целые координаты, без ограничений
- FPoint: псевдоним Point (одна и та же float точка)

Конверсии:
- IntPoint → Point: точная (Point.from_int_point / IntPoint.to_point)
- Point → IntPoint: округление каждой координаты по правилу midpoint
  rounding (Point.to_int_point)
"""

from typing import ClassVar, Iterator

from pydantic import BaseModel, Field

from geometry_primitives.core.math.number_format import (
    INVARIANT,
    NumberFormatConfig,
    format_number,
)
from geometry_primitives.core.math.numerical_safeguards import (
    DEFAULT_MIDPOINT_ROUNDING,
    MidpointRounding,
    round_to_int,
    validate_finite,
)


# =============================================================================
# INTEGER POINT
# =============================================================================


class IntPoint(BaseModel):
    """Точка с целыми координатами."""

    x: int = Field(..., description="Координата X")
    y: int = Field(..., description="Координата Y")

    model_config = {"frozen": True}

    EMPTY: ClassVar["IntPoint"]

    def __init__(self, x: int, y: int) -> None:
        super().__init__(x=x, y=y)

    def replace(self, x: int | None = None, y: int | None = None) -> "IntPoint":
        """Копия с заменой указанных координат."""
        return IntPoint(self.x if x is None else x, self.y if y is None else y)

    def to_point(self) -> "Point":
        """Точная конверсия в float точку."""
        return Point(self.x, self.y)

    def __iter__(self) -> Iterator[int]:  # type: ignore[override]
        return iter((self.x, self.y))

    def __add__(self, other: object) -> "IntPoint":
        if not isinstance(other, IntPoint):
            return NotImplemented
        return IntPoint(self.x + other.x, self.y + other.y)

    def to_string(
        self, fmt: str | None = None, config: NumberFormatConfig = INVARIANT
    ) -> str:
        return f"{format_number(self.x, fmt, config)},{format_number(self.y, fmt, config)}"

    def __str__(self) -> str:
        return self.to_string()

    def __format__(self, format_spec: str) -> str:
        return self.to_string(format_spec)


# =============================================================================
# FLOATING-POINT POINT
# =============================================================================


class Point(BaseModel):
    """
    Точка с вещественными координатами.

    Immutable модель (frozen=True). Равенство и хеш — по обеим координатам.
    """

    x: float = Field(..., allow_inf_nan=False, description="Координата X (конечная)")
    y: float = Field(..., allow_inf_nan=False, description="Координата Y (конечная)")

    model_config = {"frozen": True}

    EMPTY: ClassVar["Point"]

    def __init__(self, x: float, y: float) -> None:
        """
        Создание точки.

        Raises:
            InvalidArgumentError: Если x или y равны NaN или ±Inf
        """
        validate_finite(x, "x")
        validate_finite(y, "y")
        super().__init__(x=x, y=y)

    @classmethod
    def from_int_point(cls, point: IntPoint) -> "Point":
        """Точная конверсия из целочисленной точки."""
        return cls(point.x, point.y)

    def replace(self, x: float | None = None, y: float | None = None) -> "Point":
        """
        Копия с заменой указанных координат.

        Examples:
            >>> Point(0.3, 0.2).replace(y=2.0)
            Point(x=0.3, y=2.0)
        """
        return Point(self.x if x is None else x, self.y if y is None else y)

    def to_int_point(
        self, rounding: MidpointRounding = DEFAULT_MIDPOINT_ROUNDING
    ) -> IntPoint:
        """
        Конверсия в целочисленную точку.

        Каждая координата округляется независимо.

        Args:
            rounding: Правило округления (default: AWAY_FROM_ZERO)

        Examples:
            >>> Point(5.5, 4.5).to_int_point()
            IntPoint(x=6, y=5)
            >>> Point(5.5, 4.5).to_int_point(MidpointRounding.TO_EVEN)
            IntPoint(x=6, y=4)
        """
        return IntPoint(round_to_int(self.x, rounding), round_to_int(self.y, rounding))

    def __iter__(self) -> Iterator[float]:  # type: ignore[override]
        return iter((self.x, self.y))

    def __add__(self, other: object) -> "Point":
        if not isinstance(other, Point):
            return NotImplemented
        return Point(self.x + other.x, self.y + other.y)

    def to_string(
        self, fmt: str | None = None, config: NumberFormatConfig = INVARIANT
    ) -> str:
        """Текстовая форма "x,y" с числовым форматом fmt."""
        return f"{format_number(self.x, fmt, config)},{format_number(self.y, fmt, config)}"

    def __str__(self) -> str:
        return self.to_string()

    def __format__(self, format_spec: str) -> str:
        return self.to_string(format_spec)


# Точка с явно вещественными координатами: тот же тип
FPoint = Point

Point.EMPTY = Point(0.0, 0.0)
IntPoint.EMPTY = IntPoint(0, 0)
