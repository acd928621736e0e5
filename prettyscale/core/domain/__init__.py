"""
Domain models and value objects.
"""

from prettyscale.core.domain.axis import AxisScale, build_axis_scale

__all__ = [
    "AxisScale",
    "build_axis_scale",
]
