import json
from pathlib import Path

import pytest
from typer.testing import CliRunner

from mlopsroi.cli import app

runner = CliRunner()


def _invoke(*args: str):
    return runner.invoke(app, ["--log-level", "WARNING", *args])


def test_compute_prints_tiles():
    result = _invoke("compute")
    assert result.exit_code == 0
    assert "ROI: 9271%" in result.stdout
    assert "Annual Savings: $11.2M" in result.stdout
    assert "Payback Period: 0.1 mon." in result.stdout


def test_compute_json_with_overrides(tmp_path: Path):
    out = tmp_path / "metrics.json"
    result = _invoke("compute", "--json", "--set", "gpu_utilization=100", "--out", str(out))
    assert result.exit_code == 0

    data = json.loads(result.stdout)
    assert data["line_items"]["infrastructure"] == 0.0
    assert json.loads(out.read_text(encoding="utf-8")) == data


def test_compute_zero_investment_emits_infinity():
    result = _invoke(
        "compute", "--json", "--set", "platform_subscription=0", "--set", "implementation_cost=0", "--set", "training_cost=0"
    )
    assert result.exit_code == 0
    assert json.loads(result.stdout)["roi"] == float("inf")


def test_unknown_field_exits_with_error():
    result = _invoke("compute", "--set", "headcount=3")
    assert result.exit_code == 1


def test_defaults_written_to_file(tmp_path: Path):
    out = tmp_path / "defaults.json"
    result = _invoke("defaults", "--out", str(out), "--camel")
    assert result.exit_code == 0
    assert json.loads(out.read_text(encoding="utf-8"))["avgMlAnnualSalary"] == 160000


def test_report_writes_artifacts(tmp_path: Path):
    result = _invoke("report", "--out-dir", str(tmp_path), "--html", "--set", "customer_churn=10")
    assert result.exit_code == 0
    for name in ("summary.json", "report.md", "report.html", "charts/cumulative_savings.html"):
        assert (tmp_path / name).exists(), name
    summary = json.loads((tmp_path / "summary.json").read_text(encoding="utf-8"))
    assert summary["inputs"]["customer_churn"] == 10


def test_sweep_to_csv(tmp_path: Path):
    out = tmp_path / "sweep.csv"
    result = _invoke("sweep", "--field", "gpuUtilization", "--start", "0", "--stop", "100", "--steps", "3", "--out", str(out))
    assert result.exit_code == 0
    lines = out.read_text(encoding="utf-8").strip().splitlines()
    assert len(lines) == 4
    assert lines[0].startswith("gpu_utilization,roi")


def test_scenarios_table(tmp_path: Path):
    path = tmp_path / "scenarios.csv"
    path.write_text("name,deployments_per_month\nslow,1\nfast,6\n", encoding="utf-8")
    result = _invoke("scenarios", "--input", str(path))
    assert result.exit_code == 0
    assert "slow" in result.stdout and "fast" in result.stdout


@pytest.mark.parametrize("command", ["fields", "dump-markdown"])
def test_listing_commands(command):
    result = _invoke(command)
    assert result.exit_code == 0
    assert "gpu" in result.stdout.lower()
