"""
Creciendo Sano - child BMI estimator.
"""

from creciendo.engines import (
    BMIEstimator,
    IncompleteMeasurementError,
    calculate_bmi,
    classify_bmi,
    estimate,
    parse_measurement,
)
from creciendo.models import Classification, Gender, Language, Measurement, Result

__version__ = "0.1.0"

__all__ = [
    "BMIEstimator",
    "Classification",
    "Gender",
    "IncompleteMeasurementError",
    "Language",
    "Measurement",
    "Result",
    "calculate_bmi",
    "classify_bmi",
    "estimate",
    "parse_measurement",
]
