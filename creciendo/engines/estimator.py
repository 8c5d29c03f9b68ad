"""
BMI estimation engine.

Computes a child's BMI from height and weight, looks up the healthy band
for the exact age and gender, and classifies the result against it.
"""

from __future__ import annotations

import logging
import math
from pathlib import Path
from typing import Any, Mapping

import yaml

import knowledge
from knowledge.growth import PercentileEntry, get_reference
from creciendo.models import (
    Classification,
    Gender,
    Language,
    Measurement,
    PercentileBand,
    Result,
)

logger = logging.getLogger(__name__)


GENDER_ALIASES: dict[str, Gender] = {
    "boy": Gender.BOY,
    "boys": Gender.BOY,
    "male": Gender.BOY,
    "m": Gender.BOY,
    "girl": Gender.GIRL,
    "girls": Gender.GIRL,
    "female": Gender.GIRL,
    "f": Gender.GIRL,
}


class IncompleteMeasurementError(ValueError):
    """Raised when a form submission is missing a required field or has a non-numeric one."""

    def __init__(self, missing: list[str], invalid: list[str]):
        self.missing = tuple(missing)
        self.invalid = tuple(invalid)
        parts = []
        if self.missing:
            parts.append(f"missing {', '.join(self.missing)}")
        if self.invalid:
            parts.append(f"invalid {', '.join(self.invalid)}")
        super().__init__(f"Incomplete measurement: {'; '.join(parts)}")

    @property
    def fields(self) -> tuple[str, ...]:
        return self.missing + self.invalid


def calculate_bmi(weight_kg: float, height_cm: float) -> float:
    """Calculate BMI from weight and height, rounded to one decimal."""
    if not (math.isfinite(weight_kg) and math.isfinite(height_cm)):
        raise ValueError("Weight and height must be finite numbers")
    if weight_kg <= 0 or height_cm <= 0:
        raise ValueError("Weight and height must be positive")
    height_m = height_cm / 100
    height_sq = height_m * height_m
    if height_sq <= 0:
        raise ValueError(f"Height too small to compute BMI: {height_cm!r} cm")
    bmi = weight_kg / height_sq
    if not math.isfinite(bmi):
        raise ValueError("BMI out of range for the given height and weight")
    return round(bmi, 1)


def classify_bmi(bmi: float, reference: PercentileEntry | None) -> Classification:
    """
    Classify a BMI against a reference band.

    Both ends of the band count as healthy. Without a band the BMI
    cannot be classified.
    """
    if reference is None:
        return Classification.UNCLASSIFIED
    if bmi < reference.min:
        return Classification.LOW
    if bmi > reference.max:
        return Classification.HIGH
    return Classification.HEALTHY


def coerce_gender(value: Gender | str) -> Gender:
    """Accept a Gender or any of its common spellings."""
    if isinstance(value, Gender):
        return value
    gender = GENDER_ALIASES.get(str(value).strip().lower())
    if gender is None:
        raise ValueError(f"Unknown gender: {value!r}")
    return gender


def _is_blank(value: Any) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


def _to_number(value: Any) -> float | None:
    if isinstance(value, bool):
        return None
    try:
        number = float(value)
    except (TypeError, ValueError):
        return None
    if not math.isfinite(number):
        return None
    return number


def _first_present(form: Mapping[str, Any], *keys: str) -> Any:
    for key in keys:
        if not _is_blank(form.get(key)):
            return form[key]
    return None


def parse_measurement(form: Mapping[str, Any]) -> Measurement:
    """
    Build a Measurement from raw form fields.

    Args:
        form: Mapping with age, gender, height (or height_cm) and
            weight (or weight_kg); values may be strings or numbers

    Returns:
        Validated Measurement

    Raises:
        IncompleteMeasurementError: if any field is missing, blank or non-numeric
    """
    missing: list[str] = []
    invalid: list[str] = []

    raw_age = _first_present(form, "age")
    raw_gender = _first_present(form, "gender")
    raw_height = _first_present(form, "height_cm", "height")
    raw_weight = _first_present(form, "weight_kg", "weight")

    age = None
    if raw_age is None:
        missing.append("age")
    else:
        number = _to_number(raw_age)
        if number is None or number < 0:
            invalid.append("age")
        else:
            # Whole years only; 10.7 is age 10
            age = int(number)

    gender = None
    if raw_gender is None:
        missing.append("gender")
    else:
        try:
            gender = coerce_gender(raw_gender)
        except ValueError:
            invalid.append("gender")

    values: dict[str, float] = {}
    for name, raw in (("height_cm", raw_height), ("weight_kg", raw_weight)):
        if raw is None:
            missing.append(name)
            continue
        number = _to_number(raw)
        if number is None or number <= 0:
            invalid.append(name)
        else:
            values[name] = number

    if missing or invalid:
        raise IncompleteMeasurementError(missing, invalid)

    return Measurement(age=age, gender=gender, **values)


class BMIEstimator:
    """
    Child BMI estimator.

    Stateless apart from the advice messages, which are loaded once from
    the knowledge base and shared by every instance.
    """

    # Class-level cache of advice messages, keyed by knowledge directory
    _advice_cache: dict[Path, dict] = {}

    @classmethod
    def _load_advice(cls, knowledge_dir: Path) -> dict:
        """Load advice messages from YAML file, with caching."""
        if knowledge_dir in cls._advice_cache:
            return cls._advice_cache[knowledge_dir]

        advice_path = knowledge_dir / "advice" / "advice.yaml"
        with open(advice_path, "r", encoding="utf-8") as f:
            advice = yaml.safe_load(f) or {}

        for classification in Classification:
            for language in Language:
                entry = advice.get(classification.value, {}).get(language.value)
                if not entry or "status" not in entry or "advice" not in entry:
                    raise ValueError(
                        f"{advice_path}: no advice for {classification.value}/{language.value}"
                    )

        cls._advice_cache[knowledge_dir] = advice
        return advice

    def __init__(
        self,
        language: Language | str = Language.EN,
        knowledge_dir: Path | None = None,
    ):
        self.language = Language(language)
        self.knowledge_dir = knowledge_dir or Path(knowledge.__file__).parent
        self._advice = self._load_advice(self.knowledge_dir)

    def advice_for(
        self,
        classification: Classification,
        language: Language | str | None = None,
    ) -> tuple[str, str]:
        """Get the (status label, advice text) pair for a classification."""
        lang = Language(language) if language else self.language
        entry = self._advice[classification.value][lang.value]
        return entry["status"], entry["advice"]

    def estimate(
        self,
        age: int,
        gender: Gender | str,
        height_cm: float,
        weight_kg: float,
        language: Language | str | None = None,
    ) -> Result:
        """
        Estimate BMI and classify it for the child's age and gender.

        Args:
            age: Age in whole years (ages outside 2-17 are unclassified)
            gender: "boy" or "girl"
            height_cm: Height in centimeters
            weight_kg: Weight in kilograms
            language: Language for the status label and advice

        Returns:
            Result with bmi, classification, advice and the matched band
        """
        gender = coerce_gender(gender)
        lang = Language(language) if language else self.language

        bmi = calculate_bmi(weight_kg, height_cm)
        reference = get_reference(gender.value, age)
        classification = classify_bmi(bmi, reference)
        status, advice = self.advice_for(classification, lang)

        logger.debug(
            "Estimated BMI %.1f for %s age %d: %s",
            bmi, gender.value, age, classification.value,
        )

        return Result(
            bmi=bmi,
            classification=classification,
            status=status,
            advice=advice,
            age=age,
            gender=gender,
            language=lang,
            reference=PercentileBand.from_entry(reference) if reference else None,
        )

    def estimate_measurement(
        self,
        measurement: Measurement,
        language: Language | str | None = None,
    ) -> Result:
        """Estimate from a validated Measurement."""
        return self.estimate(
            age=measurement.age,
            gender=measurement.gender,
            height_cm=measurement.height_cm,
            weight_kg=measurement.weight_kg,
            language=language,
        )


# -----------------------------------------------------------------------------
# Default instance
# -----------------------------------------------------------------------------

_estimator: BMIEstimator | None = None


def get_estimator() -> BMIEstimator:
    """Get the default estimator (singleton)."""
    global _estimator
    if _estimator is None:
        _estimator = BMIEstimator()
    return _estimator


def estimate(
    age: int,
    gender: Gender | str,
    height_cm: float,
    weight_kg: float,
    language: Language | str | None = None,
) -> Result:
    """Estimate BMI with the default estimator."""
    return get_estimator().estimate(age, gender, height_cm, weight_kg, language)


def estimate_measurement(
    measurement: Measurement,
    language: Language | str | None = None,
) -> Result:
    """Estimate BMI from a Measurement with the default estimator."""
    return get_estimator().estimate_measurement(measurement, language)
