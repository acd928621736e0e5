"""
Core math modules для prettyscale

Численные примитивы шкалы: валидация диапазонов, range inversion, pretty breaks.
"""

# Numerical Safeguards
from prettyscale.core.math.numerical_safeguards import (
    # Epsilon constants
    EPS_FLOAT_COMPARE_ABS,
    EPS_FLOAT_COMPARE_REL,
    # Exceptions
    DegenerateRangeError,
    # Checks
    is_close,
    is_valid_float,
    # Validation
    validate_finite,
    validate_range,
    # Utilities
    clamp,
    clamp_unit,
    min_max,
    seq,
)

# Range Inversion
from prettyscale.core.math.range_inversion import (
    ScaleParams,
    invert_range,
)

# Pretty Breaks
from prettyscale.core.math.pretty_breaks import (
    DEFAULT_BREAK_COUNT,
    NEAT_UNITS,
    InvalidBreakCountError,
    NeatUnit,
    RangeOrientationError,
    pretty_breaks,
    select_neat_unit,
)

__all__ = [
    # Numerical Safeguards — Epsilon constants
    "EPS_FLOAT_COMPARE_ABS",
    "EPS_FLOAT_COMPARE_REL",
    # Numerical Safeguards — Exceptions
    "DegenerateRangeError",
    # Numerical Safeguards — Checks
    "is_close",
    "is_valid_float",
    # Numerical Safeguards — Validation
    "validate_finite",
    "validate_range",
    # Numerical Safeguards — Utilities
    "clamp",
    "clamp_unit",
    "min_max",
    "seq",
    # Range Inversion
    "ScaleParams",
    "invert_range",
    # Pretty Breaks — Constants
    "DEFAULT_BREAK_COUNT",
    "NEAT_UNITS",
    # Pretty Breaks — Exceptions
    "InvalidBreakCountError",
    "RangeOrientationError",
    # Pretty Breaks — Types
    "NeatUnit",
    # Pretty Breaks — Functions
    "pretty_breaks",
    "select_neat_unit",
]
