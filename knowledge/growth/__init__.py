"""
Growth reference data.
"""

from .bmi_reference import (
    GROWTH_TABLE,
    MAX_AGE,
    MIN_AGE,
    PercentileEntry,
    covered_ages,
    get_reference,
    get_reference_curve,
)

__all__ = [
    "GROWTH_TABLE",
    "MAX_AGE",
    "MIN_AGE",
    "PercentileEntry",
    "covered_ages",
    "get_reference",
    "get_reference_curve",
]
