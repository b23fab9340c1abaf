"""
Domain models and value objects.

Contains the geometry value types: Portion, Angle, Point, Size, Rectangle.
"""

from geometry_primitives.core.domain.angle import TAU, Angle, AngleUnit, parse_angle_format
from geometry_primitives.core.domain.point import FPoint, IntPoint, Point
from geometry_primitives.core.domain.portion import BYTE_MAX, Portion
from geometry_primitives.core.domain.rectangle import IntRectangle, Rectangle
from geometry_primitives.core.domain.size import IntSize, Size

__all__ = [
    # Portion
    "BYTE_MAX",
    "Portion",
    # Angle
    "TAU",
    "Angle",
    "AngleUnit",
    "parse_angle_format",
    # Point
    "Point",
    "FPoint",
    "IntPoint",
    # Size
    "Size",
    "IntSize",
    # Rectangle
    "Rectangle",
    "IntRectangle",
]
