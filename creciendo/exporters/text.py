"""
Plain-text results summary, suitable for pasting into a message.
"""

from __future__ import annotations

from creciendo.models import Language, Result
from creciendo.exporters.markdown import GENDER_LABELS

LABELS = {
    Language.EN: ("Creciendo Sano results:", "Age", "years", "Gender", "BMI (kg/m²)", "Status", "Advice"),
    Language.ES: ("Resultados de Creciendo Sano:", "Edad", "años", "Género", "IMC (kg/m²)", "Estado", "Consejo"),
}


def export_text(result: Result) -> str:
    """Export a result as a short plain-text summary."""
    title, age, years, gender, bmi, status, advice = LABELS[result.language]
    return "\n".join([
        title,
        f"{age}: {result.age} {years}",
        f"{gender}: {GENDER_LABELS[result.language][result.gender.value]}",
        f"{bmi}: {result.bmi:.1f}",
        f"{status}: {result.status}",
        f"{advice}: {result.advice}",
    ])
