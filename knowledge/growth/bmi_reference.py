"""
BMI-for-age reference bands for children aged 2-17.

Simplified from the standard BMI-for-age growth curves: each row holds the
5th percentile (min) and 85th percentile (max) BMI for a whole year of age.
Values between the two are considered a healthy weight.

Reference: https://www.cdc.gov/growthcharts/
"""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Literal, Mapping

Gender = Literal["boy", "girl"]


@dataclass(frozen=True)
class PercentileEntry:
    """A healthy BMI band for one integer year of age."""
    age: int
    min: float
    max: float

    def contains(self, bmi: float) -> bool:
        """Check if a BMI falls inside the band (both ends inclusive)."""
        return self.min <= bmi <= self.max

    def to_dict(self) -> dict[str, float]:
        return {"age": self.age, "min": self.min, "max": self.max}


# Format: age_years -> (5th percentile, 85th percentile)
BMI_BANDS_BOY: dict[int, tuple[float, float]] = {
    2: (14.7, 18.2),
    3: (14.3, 17.4),
    4: (14.0, 16.9),
    5: (13.8, 16.8),
    6: (13.7, 17.0),
    7: (13.7, 17.4),
    8: (13.8, 17.9),
    9: (14.0, 18.6),
    10: (14.2, 19.4),
    11: (14.6, 20.2),
    12: (15.0, 21.0),
    13: (15.5, 21.8),
    14: (16.0, 22.6),
    15: (16.6, 23.4),
    16: (17.1, 24.2),
    17: (17.7, 24.9),
}

BMI_BANDS_GIRL: dict[int, tuple[float, float]] = {
    2: (14.4, 18.0),
    3: (14.0, 17.6),
    4: (13.7, 17.3),
    5: (13.5, 17.1),
    6: (13.4, 17.3),
    7: (13.4, 17.7),
    8: (13.6, 18.3),
    9: (13.9, 19.0),
    10: (14.3, 19.9),
    11: (14.8, 20.8),
    12: (15.3, 21.8),
    13: (15.9, 22.7),
    14: (16.4, 23.6),
    15: (17.0, 24.3),
    16: (17.5, 25.0),
    17: (17.9, 25.6),
}


def _build_curve(bands: dict[int, tuple[float, float]]) -> tuple[PercentileEntry, ...]:
    return tuple(
        PercentileEntry(age=age, min=low, max=high)
        for age, (low, high) in sorted(bands.items())
    )


GROWTH_TABLE: Mapping[str, tuple[PercentileEntry, ...]] = MappingProxyType({
    "boy": _build_curve(BMI_BANDS_BOY),
    "girl": _build_curve(BMI_BANDS_GIRL),
})

MIN_AGE = 2
MAX_AGE = 17


def covered_ages() -> range:
    """Ages (in whole years) that have a reference band."""
    return range(MIN_AGE, MAX_AGE + 1)


def get_reference_curve(gender: Gender) -> tuple[PercentileEntry, ...]:
    """
    Get the full reference band series for a gender, ordered by age.

    Args:
        gender: "boy" or "girl"

    Returns:
        Tuple of PercentileEntry, one per age 2-17
    """
    if gender not in GROWTH_TABLE:
        raise ValueError(f"Unknown gender: {gender!r} (expected 'boy' or 'girl')")
    return GROWTH_TABLE[gender]


def get_reference(gender: Gender, age: int) -> PercentileEntry | None:
    """
    Look up the band for an exact integer age.

    Returns None when the age is not covered by the table.
    """
    for entry in get_reference_curve(gender):
        if entry.age == age:
            return entry
    return None
