"""
Rectangle — Прямоугольная область на плоскости (float и int варианты)

Immutable Pydantic модели: положение (x, y) левого верхнего угла и размер
(width, height). Position, Size, Right, Bottom, Midpoint, Canonical —
вычисляемые представления, пересчитываются при каждом обращении.

Текстовая форма (serialize / deserialize):
    "<X>,<Y>;<Width>x<Height>"
Числа записываются в инвариантной культуре кратчайшим round-trip
представлением. Разбор ищет разделители строго слева направо: ',' ';' 'x'.
Закон: Rectangle.deserialize(r.serialize()) == r для любого валидного r.
"""

import logging
from typing import ClassVar, Final, Iterator

from pydantic import BaseModel, Field

from geometry_primitives.core.domain.point import IntPoint, Point
from geometry_primitives.core.domain.size import IntSize, Size
from geometry_primitives.core.errors import GeometryFormatError
from geometry_primitives.core.math.number_format import (
    INVARIANT,
    NumberFormatConfig,
    format_number,
    parse_number,
)
from geometry_primitives.core.math.numerical_safeguards import (
    DEFAULT_MIDPOINT_ROUNDING,
    MidpointRounding,
    min_max,
    round_to_int,
    validate_finite,
)

logger = logging.getLogger(__name__)


# =============================================================================
# КОНСТАНТЫ
# =============================================================================

# Разделители текстовой формы в порядке разбора
POSITION_SEPARATOR: Final[str] = ","
SIZE_SEPARATOR: Final[str] = ";"
DIMENSION_SEPARATOR: Final[str] = "x"

# Round-trip формат чисел в serialize
_ROUND_TRIP_FORMAT: Final[str] = "R"


# =============================================================================
# INTEGER RECTANGLE
# =============================================================================


class IntRectangle(BaseModel):
    """Прямоугольник с целыми координатами и размером."""

    x: int = Field(..., description="X левого края")
    y: int = Field(..., description="Y верхнего края")
    width: int = Field(..., description="Ширина")
    height: int = Field(..., description="Высота")

    model_config = {"frozen": True}

    EMPTY: ClassVar["IntRectangle"]

    def __init__(
        self,
        x: int | IntPoint,
        y: int | IntSize,
        width: int | None = None,
        height: int | None = None,
    ) -> None:
        if isinstance(x, IntPoint) and isinstance(y, IntSize):
            if width is not None or height is not None:
                raise TypeError("IntRectangle(position, size) takes no width/height")
            x, y, width, height = x.x, x.y, y.width, y.height
        elif width is None or height is None:
            raise TypeError("IntRectangle requires (x, y, width, height) or (position, size)")

        super().__init__(x=x, y=y, width=width, height=height)

    @property
    def position(self) -> IntPoint:
        return IntPoint(self.x, self.y)

    @property
    def size(self) -> IntSize:
        return IntSize(self.width, self.height)

    @property
    def right(self) -> int:
        return self.x + self.width

    @property
    def bottom(self) -> int:
        return self.y + self.height

    def replace(
        self,
        x: int | None = None,
        y: int | None = None,
        width: int | None = None,
        height: int | None = None,
    ) -> "IntRectangle":
        return IntRectangle(
            self.x if x is None else x,
            self.y if y is None else y,
            self.width if width is None else width,
            self.height if height is None else height,
        )

    def to_rectangle(self) -> "Rectangle":
        """Точная конверсия в float прямоугольник."""
        return Rectangle(self.x, self.y, self.width, self.height)

    def __iter__(self) -> Iterator[int]:  # type: ignore[override]
        return iter((self.x, self.y, self.width, self.height))

    def to_string(
        self, fmt: str | None = None, config: NumberFormatConfig = INVARIANT
    ) -> str:
        return _format_rectangle(self.x, self.y, self.width, self.height, fmt, config)

    def __str__(self) -> str:
        return self.to_string()

    def __format__(self, format_spec: str) -> str:
        return self.to_string(format_spec)


# =============================================================================
# FLOATING-POINT RECTANGLE
# =============================================================================


class Rectangle(BaseModel):
    """
    Прямоугольная область на плоскости.

    Immutable модель (frozen=True). Все четыре поля обязаны быть конечными.
    Отрицательные ширина/высота допустимы (см. canonical).

    Конструирование:
        Rectangle(4, 5, 10, 13)
        Rectangle(Point(4, 5), Size(10, 13))
        Rectangle.from_ltrb(left, top, right, bottom)
        Rectangle.between(point1, point2)
        Rectangle.around(midpoint, size)
    """

    x: float = Field(..., allow_inf_nan=False, description="X левого края (конечное)")
    y: float = Field(..., allow_inf_nan=False, description="Y верхнего края (конечное)")
    width: float = Field(..., allow_inf_nan=False, description="Ширина (конечная, может быть отрицательной)")
    height: float = Field(..., allow_inf_nan=False, description="Высота (конечная, может быть отрицательной)")

    model_config = {"frozen": True}

    EMPTY: ClassVar["Rectangle"]

    def __init__(
        self,
        x: float | Point,
        y: float | Size,
        width: float | None = None,
        height: float | None = None,
    ) -> None:
        """
        Создание прямоугольника.

        Args:
            x: X левого края, или Point положения
            y: Y верхнего края, или Size размера
            width: Ширина (только для формы x, y, width, height)
            height: Высота (только для формы x, y, width, height)

        Raises:
            InvalidArgumentError: Если любое из полей равно NaN или ±Inf
            TypeError: Если набор аргументов не соответствует ни одной форме
        """
        if isinstance(x, Point) and isinstance(y, Size):
            if width is not None or height is not None:
                raise TypeError("Rectangle(position, size) takes no width/height")
            x, y, width, height = x.x, x.y, y.width, y.height
        elif width is None or height is None:
            raise TypeError("Rectangle requires (x, y, width, height) or (position, size)")

        validate_finite(x, "x")
        validate_finite(y, "y")
        validate_finite(width, "width")
        validate_finite(height, "height")
        super().__init__(x=x, y=y, width=width, height=height)

    # -------------------------------------------------------------------------
    # Фабрики
    # -------------------------------------------------------------------------

    @classmethod
    def from_position_size(cls, position: Point, size: Size) -> "Rectangle":
        return cls(position, size)

    @classmethod
    def from_int_rectangle(cls, rectangle: IntRectangle) -> "Rectangle":
        return cls(rectangle.x, rectangle.y, rectangle.width, rectangle.height)

    @classmethod
    def from_ltrb(
        cls, left: float, top: float, right: float, bottom: float
    ) -> "Rectangle":
        """
        Прямоугольник по координатам краёв.

        width = right - left, height = bottom - top (могут быть отрицательными).
        """
        return cls(left, top, right - left, bottom - top)

    @classmethod
    def between(cls, point1: Point, point2: Point) -> "Rectangle":
        """
        Прямоугольник, натянутый на две точки.

        Границы упорядочиваются по каждой оси независимо, поэтому ширина
        и высота неотрицательны при любом порядке точек.

        Examples:
            >>> Rectangle.between(Point(1, 1), Point(-1, -1))
            Rectangle(x=-1.0, y=-1.0, width=2.0, height=2.0)
        """
        left, right = min_max(point1.x, point2.x)
        top, bottom = min_max(point1.y, point2.y)
        return cls.from_ltrb(left, top, right, bottom)

    @classmethod
    def around(
        cls,
        midpoint: Point | float,
        size: Size | float,
        width: float | None = None,
        height: float | None = None,
    ) -> "Rectangle":
        """
        Прямоугольник заданного размера с центром в заданной точке.

        Формы вызова: around(midpoint, size) и around(x, y, width, height).

        Examples:
            >>> Rectangle.around(Point(0, 0), Size(10, 20))
            Rectangle(x=-5.0, y=-10.0, width=10.0, height=20.0)
        """
        if not isinstance(midpoint, Point):
            if width is None or height is None:
                raise TypeError("around() requires (midpoint, size) or (x, y, width, height)")
            midpoint, size = Point(midpoint, size), Size(width, height)

        return cls(
            midpoint.x - size.width / 2,
            midpoint.y - size.height / 2,
            size.width,
            size.height,
        )

    # -------------------------------------------------------------------------
    # Вычисляемые представления
    # -------------------------------------------------------------------------

    @property
    def position(self) -> Point:
        """Положение левого верхнего угла."""
        return Point(self.x, self.y)

    @property
    def size(self) -> Size:
        return Size(self.width, self.height)

    @property
    def right(self) -> float:
        """X правого края."""
        return self.x + self.width

    @property
    def bottom(self) -> float:
        """Y нижнего края."""
        return self.y + self.height

    @property
    def midpoint(self) -> Point:
        """Центр прямоугольника."""
        return Point(self.x + self.width / 2, self.y + self.height / 2)

    @property
    def canonical(self) -> "Rectangle":
        """
        Эквивалентный прямоугольник с неотрицательными шириной и высотой.

        Отрицательное измерение компенсируется сдвигом начала назад.
        Для неотрицательного размера возвращается равный прямоугольник.
        """
        x, y, width, height = self
        if width < 0:
            x += width
            width = -width
        if height < 0:
            y += height
            height = -height
        return Rectangle(x, y, width, height)

    # -------------------------------------------------------------------------
    # Преобразования
    # -------------------------------------------------------------------------

    def inflate(self, *amounts: float) -> "Rectangle":
        """
        Сдвиг краёв наружу от центра (отрицательные значения — внутрь).

        inflate(left, top, right, bottom) → каждый край на своё значение
        inflate(x, y)                     → inflate(x, y, x, y)
        inflate(amount)                   → inflate(amount, amount)

        Знак текущих ширины/высоты не учитывается.

        Examples:
            >>> Rectangle(0, 0, 10, 10).inflate(1, 2, 3, 4)
            Rectangle(x=-1.0, y=-2.0, width=14.0, height=16.0)
        """
        if len(amounts) == 1:
            left = top = right = bottom = amounts[0]
        elif len(amounts) == 2:
            left, top = amounts
            right, bottom = amounts
        elif len(amounts) == 4:
            left, top, right, bottom = amounts
        else:
            raise TypeError(f"inflate() takes 1, 2 or 4 amounts, got {len(amounts)}")

        return Rectangle(
            self.x - left,
            self.y - top,
            self.width + left + right,
            self.height + top + bottom,
        )

    def replace(
        self,
        x: float | None = None,
        y: float | None = None,
        width: float | None = None,
        height: float | None = None,
    ) -> "Rectangle":
        """Копия с заменой указанных полей."""
        return Rectangle(
            self.x if x is None else x,
            self.y if y is None else y,
            self.width if width is None else width,
            self.height if height is None else height,
        )

    def to_int_rectangle(
        self, rounding: MidpointRounding = DEFAULT_MIDPOINT_ROUNDING
    ) -> IntRectangle:
        """Конверсия в целочисленный прямоугольник, каждое поле округляется независимо."""
        return IntRectangle(
            round_to_int(self.x, rounding),
            round_to_int(self.y, rounding),
            round_to_int(self.width, rounding),
            round_to_int(self.height, rounding),
        )

    def __iter__(self) -> Iterator[float]:  # type: ignore[override]
        return iter((self.x, self.y, self.width, self.height))

    # -------------------------------------------------------------------------
    # Текстовая форма
    # -------------------------------------------------------------------------

    def serialize(self) -> str:
        """
        Каноническая текстовая форма "{x},{y};{width}x{height}".

        Examples:
            >>> Rectangle(4, 5.5, 10, -13).serialize()
            '4,5.5;10x-13'
        """
        return _format_rectangle(
            self.x, self.y, self.width, self.height, _ROUND_TRIP_FORMAT, INVARIANT
        )

    @classmethod
    def deserialize(cls, text: str) -> "Rectangle":
        """
        Разбор текстовой формы, созданной serialize().

        Args:
            text: Строка вида "<X>,<Y>;<Width>x<Height>"

        Returns:
            Разобранный прямоугольник

        Raises:
            GeometryFormatError: Если отсутствует разделитель или сегмент
                не является числом
            InvalidArgumentError: Если число переполняется до бесконечности
        """
        try:
            x_text, remainder = _split_segment(text, text, POSITION_SEPARATOR)
            y_text, remainder = _split_segment(text, remainder, SIZE_SEPARATOR)
            width_text, height_text = _split_segment(text, remainder, DIMENSION_SEPARATOR)

            values = [
                parse_number(segment)
                for segment in (x_text, y_text, width_text, height_text)
            ]
        except GeometryFormatError as e:
            logger.debug(f"Rejected serialized rectangle {text!r}: {e}")
            raise

        return cls(*values)

    def to_string(
        self, fmt: str | None = None, config: NumberFormatConfig = INVARIANT
    ) -> str:
        """Текстовая форма "x,y;wxh" с произвольным числовым форматом."""
        return _format_rectangle(self.x, self.y, self.width, self.height, fmt, config)

    def __str__(self) -> str:
        return self.to_string()

    def __format__(self, format_spec: str) -> str:
        return self.to_string(format_spec)


# =============================================================================
# HELPERS
# =============================================================================


def _format_rectangle(
    x: float,
    y: float,
    width: float,
    height: float,
    fmt: str | None,
    config: NumberFormatConfig,
) -> str:
    return (
        format_number(x, fmt, config)
        + POSITION_SEPARATOR
        + format_number(y, fmt, config)
        + SIZE_SEPARATOR
        + format_number(width, fmt, config)
        + DIMENSION_SEPARATOR
        + format_number(height, fmt, config)
    )


def _split_segment(text: str, remainder: str, separator: str) -> tuple[str, str]:
    """Отделение сегмента до первого separator; остаток — после него."""
    index = remainder.find(separator)
    if index == -1:
        raise GeometryFormatError(text, f"missing separator {separator!r}")
    return remainder[:index], remainder[index + 1 :]


Rectangle.EMPTY = Rectangle(0.0, 0.0, 0.0, 0.0)
IntRectangle.EMPTY = IntRectangle(0, 0, 0, 0)
