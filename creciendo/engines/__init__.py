"""
BMI estimation engines.
"""

from .estimator import (
    BMIEstimator,
    IncompleteMeasurementError,
    calculate_bmi,
    classify_bmi,
    coerce_gender,
    estimate,
    estimate_measurement,
    get_estimator,
    parse_measurement,
)

__all__ = [
    "BMIEstimator",
    "IncompleteMeasurementError",
    "calculate_bmi",
    "classify_bmi",
    "coerce_gender",
    "estimate",
    "estimate_measurement",
    "get_estimator",
    "parse_measurement",
]
