"""
geometry_primitives — immutable geometry value types.

Angles, portions, points, sizes and rectangles (float and integer variants)
with unit conversion, rounding conversion, formatting and a text round-trip
for rectangles.
"""

from geometry_primitives.core.domain import (
    Angle,
    AngleUnit,
    FPoint,
    IntPoint,
    IntRectangle,
    IntSize,
    Point,
    Portion,
    Rectangle,
    Size,
)
from geometry_primitives.core.errors import (
    GeometryError,
    GeometryFormatError,
    InvalidArgumentError,
    InvalidConversionError,
    OutOfRangeError,
)
from geometry_primitives.core.math import (
    INVARIANT,
    MidpointRounding,
    NumberFormatConfig,
)

__all__ = [
    # Value types
    "Angle",
    "AngleUnit",
    "FPoint",
    "IntPoint",
    "IntRectangle",
    "IntSize",
    "Point",
    "Portion",
    "Rectangle",
    "Size",
    # Errors
    "GeometryError",
    "GeometryFormatError",
    "InvalidArgumentError",
    "InvalidConversionError",
    "OutOfRangeError",
    # Configuration
    "INVARIANT",
    "MidpointRounding",
    "NumberFormatConfig",
]
