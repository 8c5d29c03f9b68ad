"""
CLI tests for Creciendo Sano.
"""

import json
import sys
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

import pytest
from click.testing import CliRunner


@pytest.fixture
def runner():
    return CliRunner()


class TestEstimateCommand:

    def test_json_output(self, runner):
        from cli import cli

        result = runner.invoke(cli, [
            "estimate", "--age", "10", "--gender", "boy",
            "--height", "140", "--weight", "28", "--format", "json",
        ])

        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data["bmi"] == 14.3
        assert data["classification"] == "healthy"

    def test_table_output(self, runner):
        from cli import cli

        result = runner.invoke(cli, [
            "estimate", "--age", "10", "--gender", "boy", "--height", "140", "--weight", "45",
        ])

        assert result.exit_code == 0
        assert "23.0" in result.output
        assert "Overweight" in result.output
        assert "19.4" in result.output

    def test_text_output_spanish(self, runner):
        from cli import cli

        result = runner.invoke(cli, [
            "estimate", "--age", "5", "--gender", "girl", "--height", "110",
            "--weight", "15", "--format", "text", "--lang", "es",
        ])

        assert result.exit_code == 0
        assert "Estado: Bajo Peso" in result.output

    def test_markdown_to_file(self, runner, tmp_path):
        from cli import cli

        out = tmp_path / "report.md"
        result = runner.invoke(cli, [
            "estimate", "--age", "10", "--gender", "girl", "--height", "140",
            "--weight", "30", "--format", "markdown", "-o", str(out),
        ])

        assert result.exit_code == 0
        assert out.read_text(encoding="utf-8").startswith("# BMI Estimate")

    def test_text_to_file(self, runner, tmp_path):
        from cli import cli

        out = tmp_path / "summary.txt"
        result = runner.invoke(cli, [
            "estimate", "--age", "10", "--gender", "boy", "--height", "140",
            "--weight", "28", "--format", "text", "-o", str(out),
        ])

        assert result.exit_code == 0
        assert "Status: Healthy Weight" in out.read_text(encoding="utf-8")

    def test_output_with_table_format(self, runner, tmp_path):
        from cli import cli

        out = tmp_path / "nope.txt"
        result = runner.invoke(cli, [
            "estimate", "--age", "10", "--gender", "boy", "--height", "140",
            "--weight", "28", "-o", str(out),
        ])

        assert result.exit_code == 2
        assert "--output" in result.output
        assert not out.exists()

    def test_summary_output(self, runner):
        from cli import cli

        result = runner.invoke(cli, [
            "estimate", "--age", "10", "--gender", "boy", "--height", "140",
            "--weight", "45", "--format", "summary",
        ])

        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data["classification"] == "high"
        assert data["reference_max"] == 19.4

    @pytest.mark.parametrize("height, weight", [("1e-200", "28"), ("140", "inf")])
    def test_unusable_numbers(self, runner, height, weight):
        from cli import cli

        result = runner.invoke(cli, [
            "estimate", "--age", "10", "--gender", "boy", "--height", height, "--weight", weight,
        ])

        assert result.exit_code == 1

    def test_missing_weight(self, runner):
        from cli import cli

        result = runner.invoke(cli, [
            "estimate", "--age", "10", "--gender", "boy", "--height", "140",
        ])

        assert result.exit_code != 0
        assert "--weight" in result.output

    def test_non_positive_height(self, runner):
        from cli import cli

        result = runner.invoke(cli, [
            "estimate", "--age", "10", "--gender", "boy", "--height", "0", "--weight", "28",
        ])

        assert result.exit_code != 0


class TestOtherCommands:

    def test_table(self, runner):
        from cli import cli

        result = runner.invoke(cli, ["table", "--gender", "boy"])

        assert result.exit_code == 0
        assert "14.2" in result.output
        assert "24.9" in result.output

    def test_info(self, runner):
        from cli import cli

        result = runner.invoke(cli, ["info"])

        assert result.exit_code == 0
        assert "Creciendo Sano" in result.output
