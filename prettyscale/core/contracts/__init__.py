"""
Contract Validation Module

JSON контракт сериализованной оси prettyscale.
"""

from .validators import (
    AXIS_SCALE_SCHEMA,
    SCHEMA_DIR,
    axis_scale_payload,
    load_schema,
    validate_axis_scale,
)

__all__ = [
    # Constants
    "SCHEMA_DIR",
    "AXIS_SCALE_SCHEMA",
    # Functions
    "load_schema",
    "axis_scale_payload",
    "validate_axis_scale",
]
