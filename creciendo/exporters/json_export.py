"""
JSON exporter for Creciendo Sano.

Exports an estimate as clean, human-readable JSON.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from creciendo.models import Result


def export_json(
    result: Result,
    output_path: Path | None = None,
    indent: int = 2,
    include_nulls: bool = True,
) -> str:
    """
    Export a result to JSON format.

    Args:
        result: The estimate to export
        output_path: Optional path to write the JSON file
        indent: JSON indentation level
        include_nulls: Whether to include null values (e.g. a missing reference)

    Returns:
        JSON string representation of the result
    """
    data = result.model_dump(mode="json", exclude_none=not include_nulls)
    json_str = json.dumps(data, indent=indent, ensure_ascii=False)

    if output_path:
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(json_str, encoding="utf-8")

    return json_str


def export_json_summary(result: Result) -> dict[str, Any]:
    """
    Export a flat summary of the result (useful for listings and charts).
    """
    return {
        "bmi": result.bmi,
        "classification": result.classification.value,
        "status": result.status,
        "age": result.age,
        "gender": result.gender.value,
        "reference_min": result.reference.min if result.reference else None,
        "reference_max": result.reference.max if result.reference else None,
    }
