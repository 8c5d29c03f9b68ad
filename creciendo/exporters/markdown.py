"""
Markdown exporter for Creciendo Sano.

Exports an estimate as a short human-readable Markdown report.
"""

from __future__ import annotations

from pathlib import Path

from creciendo.models import Language, Result

HEADINGS = {
    Language.EN: {
        "title": "BMI Estimate",
        "age": "Age",
        "years": "years",
        "gender": "Gender",
        "bmi": "BMI",
        "status": "Status",
        "reference": "Healthy range",
        "no_reference": "No percentile reference for this age",
        "advice": "Advice",
    },
    Language.ES: {
        "title": "Estimación de IMC",
        "age": "Edad",
        "years": "años",
        "gender": "Género",
        "bmi": "IMC",
        "status": "Estado",
        "reference": "Rango saludable",
        "no_reference": "Sin referencia percentil para esta edad",
        "advice": "Consejo",
    },
}

GENDER_LABELS = {
    Language.EN: {"boy": "Boy", "girl": "Girl"},
    Language.ES: {"boy": "Niño", "girl": "Niña"},
}


def export_markdown(
    result: Result,
    output_path: Path | None = None,
) -> str:
    """
    Export a result to Markdown format.

    Args:
        result: The estimate to export
        output_path: Optional path to write the Markdown file

    Returns:
        Markdown string representation of the result
    """
    h = HEADINGS[result.language]
    lines = []

    lines.append(f"# {h['title']}")
    lines.append("")
    lines.append(f"- **{h['age']}:** {result.age} {h['years']}")
    lines.append(f"- **{h['gender']}:** {GENDER_LABELS[result.language][result.gender.value]}")
    lines.append(f"- **{h['bmi']} (kg/m²):** {result.bmi:.1f}")
    lines.append(f"- **{h['status']}:** {result.status}")
    if result.reference:
        lines.append(
            f"- **{h['reference']}:** {result.reference.min:.1f} - {result.reference.max:.1f}"
        )
    else:
        lines.append(f"- **{h['reference']}:** {h['no_reference']}")
    lines.append("")
    lines.append(f"## {h['advice']}")
    lines.append("")
    lines.append(result.advice)
    lines.append("")

    content = "\n".join(lines)

    if output_path:
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(content, encoding="utf-8")

    return content
