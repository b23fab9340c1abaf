"""
Size — Размер прямоугольной области без положения (float и int варианты)

Знак не ограничен: отрицательные ширина/высота допустимы и несут
ориентацию (например, приращения размера).
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
# INTEGER SIZE
# =============================================================================


class IntSize(BaseModel):
    """Размер с целыми шириной и высотой."""

    width: int = Field(..., description="Ширина")
    height: int = Field(..., description="Высота")

    model_config = {"frozen": True}

    EMPTY: ClassVar["IntSize"]

    def __init__(self, width: int, height: int) -> None:
        super().__init__(width=width, height=height)

    def replace(self, width: int | None = None, height: int | None = None) -> "IntSize":
        return IntSize(
            self.width if width is None else width,
            self.height if height is None else height,
        )

    def to_size(self) -> "Size":
        """Точная конверсия в float размер."""
        return Size(self.width, self.height)

    def __iter__(self) -> Iterator[int]:  # type: ignore[override]
        return iter((self.width, self.height))

    def __add__(self, other: object) -> "IntSize":
        if not isinstance(other, IntSize):
            return NotImplemented
        return IntSize(self.width + other.width, self.height + other.height)

    def to_string(
        self, fmt: str | None = None, config: NumberFormatConfig = INVARIANT
    ) -> str:
        return f"{format_number(self.width, fmt, config)}x{format_number(self.height, fmt, config)}"

    def __str__(self) -> str:
        return self.to_string()

    def __format__(self, format_spec: str) -> str:
        return self.to_string(format_spec)


# =============================================================================
# FLOATING-POINT SIZE
# =============================================================================


class Size(BaseModel):
    """
    Размер с вещественными шириной и высотой.

    Обе величины обязаны быть конечными; знак не проверяется.
    """

    width: float = Field(..., allow_inf_nan=False, description="Ширина (конечная, может быть отрицательной)")
    height: float = Field(..., allow_inf_nan=False, description="Высота (конечная, может быть отрицательной)")

    model_config = {"frozen": True}

    EMPTY: ClassVar["Size"]

    def __init__(self, width: float, height: float) -> None:
        """
        Создание размера.

        Raises:
            InvalidArgumentError: Если width или height равны NaN или ±Inf
        """
        validate_finite(width, "width")
        validate_finite(height, "height")
        super().__init__(width=width, height=height)

    @classmethod
    def from_int_size(cls, size: IntSize) -> "Size":
        return cls(size.width, size.height)

    def replace(
        self, width: float | None = None, height: float | None = None
    ) -> "Size":
        """Копия с заменой указанных величин."""
        return Size(
            self.width if width is None else width,
            self.height if height is None else height,
        )

    def to_int_size(
        self, rounding: MidpointRounding = DEFAULT_MIDPOINT_ROUNDING
    ) -> IntSize:
        """Конверсия в целочисленный размер с округлением каждой величины."""
        return IntSize(
            round_to_int(self.width, rounding), round_to_int(self.height, rounding)
        )

    def __iter__(self) -> Iterator[float]:  # type: ignore[override]
        return iter((self.width, self.height))

    def __add__(self, other: object) -> "Size":
        if not isinstance(other, Size):
            return NotImplemented
        return Size(self.width + other.width, self.height + other.height)

    def to_string(
        self, fmt: str | None = None, config: NumberFormatConfig = INVARIANT
    ) -> str:
        """Текстовая форма "WxH" с числовым форматом fmt."""
        return f"{format_number(self.width, fmt, config)}x{format_number(self.height, fmt, config)}"

    def __str__(self) -> str:
        return self.to_string()

    def __format__(self, format_spec: str) -> str:
        return self.to_string(format_spec)


Size.EMPTY = Size(0.0, 0.0)
IntSize.EMPTY = IntSize(0, 0)
