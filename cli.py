#!/usr/bin/env python3
"""
Creciendo Sano CLI

Command-line interface for the child BMI estimator.
"""

import json
import sys
from pathlib import Path
from typing import Optional

import click
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

console = Console()


def setup_paths():
    """Add the project root to sys.path for imports."""
    root = Path(__file__).parent
    if str(root) not in sys.path:
        sys.path.insert(0, str(root))


setup_paths()


CLASSIFICATION_STYLES = {
    "low": "blue",
    "healthy": "green",
    "high": "orange1",
    "unclassified": "dim",
}


@click.group()
@click.version_option(version="0.1.0", prog_name="creciendo")
def cli():
    """
    Creciendo Sano - Child BMI Estimator

    Compute a child's BMI and compare it with the healthy range
    (5th-85th percentile) for their age and gender.
    """
    pass


@cli.command()
@click.option("--age", type=click.IntRange(0, 120), required=True, help="Child age in whole years")
@click.option("--gender", type=click.Choice(["boy", "girl"]), required=True, help="Child gender")
@click.option("--height", type=click.FloatRange(min=0, min_open=True), required=True,
              help="Height in centimeters")
@click.option("--weight", type=click.FloatRange(min=0, min_open=True), required=True,
              help="Weight in kilograms")
@click.option("--format", "fmt", type=click.Choice(["table", "json", "summary", "markdown", "text"]),
              default="table", help="Output format (summary: one-line JSON)")
@click.option("--lang", type=click.Choice(["en", "es"]), help="Language for status and advice")
@click.option("--output", "-o", type=click.Path(),
              help="Write json/summary/markdown/text output to this file")
def estimate(
    age: int,
    gender: str,
    height: float,
    weight: float,
    fmt: str,
    lang: Optional[str],
    output: Optional[str],
):
    """
    Estimate a child's BMI.

    Examples:

        creciendo estimate --age 10 --gender boy --height 140 --weight 28

        creciendo estimate --age 5 --gender girl --height 110 --weight 15 --lang es
    """
    from creciendo.config import get_config
    from creciendo.engines import BMIEstimator
    from creciendo.exporters import export_json, export_json_summary, export_markdown, export_text

    if output and fmt == "table":
        raise click.UsageError("--output needs --format json, summary, markdown or text")

    try:
        language = lang or get_config().language
        result = BMIEstimator(language=language).estimate(age, gender, height, weight)
    except ValueError as e:
        console.print(f"[red]{e}[/red]")
        sys.exit(1)

    out_path = Path(output) if output else None

    if fmt != "table":
        if fmt == "json":
            content = export_json(result, out_path)
        elif fmt == "markdown":
            content = export_markdown(result, out_path)
        else:
            if fmt == "summary":
                content = json.dumps(export_json_summary(result), ensure_ascii=False)
            else:
                content = export_text(result)
            if out_path:
                out_path.parent.mkdir(parents=True, exist_ok=True)
                out_path.write_text(content, encoding="utf-8")

        if out_path:
            console.print(f"[green]✓ Exported to {out_path}[/green]")
        else:
            click.echo(content)
        return

    style = CLASSIFICATION_STYLES[result.classification.value]
    body = (
        f"[bold]{result.bmi:.1f}[/bold] kg/m²\n"
        f"[bold {style}]{result.status}[/bold {style}]\n\n"
        f"{result.advice}"
    )
    console.print()
    console.print(Panel(
        body,
        title=f"BMI - {gender}, {age} years",
        border_style=style,
    ))

    if result.reference:
        console.print(
            f"[dim]Healthy range for age {result.reference.age}: "
            f"{result.reference.min:.1f} - {result.reference.max:.1f}[/dim]"
        )
    else:
        console.print("[dim]No percentile reference for this age[/dim]")


@cli.command()
@click.option("--gender", type=click.Choice(["boy", "girl", "all"]), default="all",
              help="Which reference bands to show")
def table(gender: str):
    """Show the healthy BMI bands (5th-85th percentile) by age."""
    from knowledge.growth import covered_ages, get_reference

    genders = ["boy", "girl"] if gender == "all" else [gender]

    ref_table = Table(title="Healthy BMI range by age (kg/m²)")
    ref_table.add_column("Age", justify="right", style="cyan")
    for g in genders:
        ref_table.add_column(f"{g.title()} min", justify="right")
        ref_table.add_column(f"{g.title()} max", justify="right")

    for age in covered_ages():
        row = [str(age)]
        for g in genders:
            entry = get_reference(g, age)
            row.extend([f"{entry.min:.1f}", f"{entry.max:.1f}"])
        ref_table.add_row(*row)

    console.print(ref_table)


@cli.command()
@click.option("--host", type=str, help="Bind address (default: CRECIENDO_HOST)")
@click.option("--port", type=int, help="Port (default: CRECIENDO_PORT)")
def serve(host: Optional[str], port: Optional[int]):
    """Run the HTTP API."""
    try:
        from server import run_server
    except ValueError as e:
        console.print(f"[red]Invalid configuration: {e}[/red]")
        sys.exit(1)

    console.print("[dim]Starting Creciendo Sano API...[/dim]")
    run_server(host=host, port=port)


@cli.command()
def info():
    """Show information about Creciendo Sano."""
    from knowledge.growth import MAX_AGE, MIN_AGE

    console.print(Panel(
        "[bold]Creciendo Sano[/bold]\n\n"
        "Child BMI estimator with age- and gender-specific healthy ranges.\n\n"
        "[dim]Version 0.1.0[/dim]",
        title="About",
        border_style="green",
    ))

    console.print("\n[bold]Features:[/bold]")
    console.print(f"  • Percentile reference bands for ages {MIN_AGE}-{MAX_AGE}")
    console.print("  • Underweight / healthy / overweight classification")
    console.print("  • English and Spanish advice")
    console.print("  • JSON, Markdown and plain-text output")
    console.print("  • HTTP API for web forms and charts")

    console.print("\n[bold]Quick Start:[/bold]")
    console.print("  creciendo estimate --age 10 --gender boy --height 140 --weight 28")
    console.print("  creciendo table --gender girl")
    console.print("  creciendo serve --port 8000")

    console.print("\n[yellow]Educational tool only. Not medical advice.[/yellow]")


def main():
    """Entry point."""
    cli()


if __name__ == "__main__":
    main()
