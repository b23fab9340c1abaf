"""
Core math modules для geometry_primitives

Проверка конечности, округление до целого и форматирование чисел.
"""

# Numerical Safeguards
from geometry_primitives.core.math.numerical_safeguards import (
    DEFAULT_MIDPOINT_ROUNDING,
    MidpointRounding,
    is_valid_float,
    min_max,
    round_to_int,
    validate_finite,
    validate_in_range,
)

# Number Format
from geometry_primitives.core.math.number_format import (
    INVARIANT,
    NumberFormatConfig,
    format_number,
    parse_number,
)

__all__ = [
    # Numerical Safeguards: Rounding
    "DEFAULT_MIDPOINT_ROUNDING",
    "MidpointRounding",
    "round_to_int",
    # Numerical Safeguards: Validation
    "is_valid_float",
    "validate_finite",
    "validate_in_range",
    # Numerical Safeguards: Utilities
    "min_max",
    # Number Format
    "INVARIANT",
    "NumberFormatConfig",
    "format_number",
    "parse_number",
]
