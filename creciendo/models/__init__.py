"""
Data models for Creciendo Sano.
"""

from .measurement import (
    Classification,
    Gender,
    Language,
    Measurement,
    PercentileBand,
    Result,
)

__all__ = [
    "Classification",
    "Gender",
    "Language",
    "Measurement",
    "PercentileBand",
    "Result",
]
