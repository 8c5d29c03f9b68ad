"""
Core data models for Creciendo Sano.

These Pydantic models carry a single BMI estimate from input to output.
All estimation, export and API operations work with these models.
"""

from __future__ import annotations

from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field

from knowledge.growth import PercentileEntry


# =============================================================================
# ENUMS
# =============================================================================


class Gender(str, Enum):
    BOY = "boy"
    GIRL = "girl"


class Classification(str, Enum):
    LOW = "low"
    HEALTHY = "healthy"
    HIGH = "high"
    UNCLASSIFIED = "unclassified"


class Language(str, Enum):
    EN = "en"
    ES = "es"


# =============================================================================
# MODELS
# =============================================================================


class Measurement(BaseModel):
    """A single child measurement, as submitted on the form."""
    age: int = Field(..., ge=0, description="Age in whole years")
    gender: Gender
    height_cm: float = Field(..., gt=0, description="Height in centimeters")
    weight_kg: float = Field(..., gt=0, description="Weight in kilograms")


class PercentileBand(BaseModel):
    """Healthy BMI band (5th-85th percentile) for one year of age."""
    age: int
    min: float
    max: float

    @classmethod
    def from_entry(cls, entry: PercentileEntry) -> "PercentileBand":
        return cls(age=entry.age, min=entry.min, max=entry.max)


class Result(BaseModel):
    """Outcome of a BMI estimate."""
    bmi: float = Field(..., description="BMI in kg/m², rounded to one decimal")
    classification: Classification
    status: str = Field(..., description="Display label for the classification")
    advice: str
    age: int
    gender: Gender
    language: Language = Language.EN
    reference: Optional[PercentileBand] = Field(
        None, description="Matched band, or None when the age is not covered"
    )

    @property
    def has_reference(self) -> bool:
        return self.reference is not None
