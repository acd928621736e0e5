"""
Formatting of axis labels.
"""

from prettyscale.core.format.superscript import (
    DEFAULT_SIGNIFICANT_DIGITS,
    SCIENTIFIC_LOWER_THRESHOLD,
    SCIENTIFIC_UPPER_THRESHOLD,
    SUPERSCRIPT_DIGITS,
    MalformedScientificStringError,
    format_scientific_superscript,
    format_tick_label,
    from_superscript,
    to_superscript,
)

__all__ = [
    # Constants
    "DEFAULT_SIGNIFICANT_DIGITS",
    "SCIENTIFIC_LOWER_THRESHOLD",
    "SCIENTIFIC_UPPER_THRESHOLD",
    "SUPERSCRIPT_DIGITS",
    # Exceptions
    "MalformedScientificStringError",
    # Functions
    "format_scientific_superscript",
    "format_tick_label",
    "from_superscript",
    "to_superscript",
]
