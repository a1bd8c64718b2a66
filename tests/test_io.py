import json
import math
from pathlib import Path

import pytest
from pydantic import ValidationError

from mlopsroi.defaults import FIELD_SPECS, GROUPS, PERCENT_FIELDS, field_spec, fields_in_group, write_default_inputs
from mlopsroi.engine import compute
from mlopsroi.io import (
    InputError,
    apply_edit,
    build_inputs,
    coerce_number,
    load_inputs,
    load_scenarios,
    parse_overrides,
    resolve_field,
    write_metrics_json,
)
from mlopsroi.models import InputRecord


def test_field_catalog_covers_every_input():
    assert [spec.name for spec in FIELD_SPECS] == list(InputRecord.model_fields)
    assert field_spec("current_deployment_time").step == 0.1
    assert "gpu_utilization" in PERCENT_FIELDS
    with pytest.raises(KeyError):
        field_spec("headcount")


def test_input_record_is_immutable(default_inputs):
    with pytest.raises(ValidationError):
        default_inputs.gpu_utilization = 10
    edited = default_inputs.with_value("gpu_utilization", 10)
    assert edited.gpu_utilization == 10.0
    assert default_inputs.gpu_utilization == 40.0


def test_input_record_accepts_camel_case_names():
    record = InputRecord.model_validate({"dataScientists": 7, "avgDsAnnualSalary": 120000})
    assert record.data_scientists == 7.0
    assert record.avg_ds_annual_salary == 120000.0
    with pytest.raises(ValidationError):
        InputRecord.model_validate({"headcount": 3})


@pytest.mark.parametrize(
    "raw, expected",
    [("", 0.0), ("  ", 0.0), (None, 0.0), ("12.5", 12.5), (" 7 ", 7.0), ("1e3", 1000.0), (".5", 0.5), (3, 3.0)],
)
def test_coerce_number(raw, expected):
    assert coerce_number(raw) == expected


@pytest.mark.parametrize("raw", ["abc", "12abc", "1,000", "nan"])
def test_coerce_number_non_numeric_is_nan(raw):
    assert math.isnan(coerce_number(raw))


def test_apply_edit_replaces_one_field(default_inputs):
    edited = apply_edit(default_inputs, "gpuUtilization", "65")
    assert edited.gpu_utilization == 65.0
    assert edited.model_copy(update={"gpu_utilization": 40.0}) == default_inputs
    with pytest.raises(InputError):
        apply_edit(default_inputs, "gpu", "65")


def test_parse_overrides():
    assert parse_overrides(["gpu_utilization=55", "trainingCost = 0"]) == {
        "gpu_utilization": 55.0,
        "training_cost": 0.0,
    }
    with pytest.raises(InputError):
        parse_overrides(["gpu_utilization"])


def test_load_inputs_merges_over_defaults(tmp_path: Path):
    path = tmp_path / "inputs.json"
    path.write_text(json.dumps({"mlEngineers": 6, "gpu_utilization": 70}), encoding="utf-8")

    record = load_inputs(path)
    assert record.ml_engineers == 6.0
    assert record.gpu_utilization == 70.0
    assert record.data_scientists == 5.0


@pytest.mark.parametrize("content", ["[1, 2]", "{not json", '{"headcount": 4}'])
def test_load_inputs_rejects_bad_files(tmp_path: Path, content: str):
    path = tmp_path / "inputs.json"
    path.write_text(content, encoding="utf-8")
    with pytest.raises(InputError):
        load_inputs(path)


def test_default_inputs_round_trip_through_file(tmp_path: Path):
    path = write_default_inputs(tmp_path / "defaults.json", by_alias=True)
    assert "dataScientists" in json.loads(path.read_text(encoding="utf-8"))
    assert build_inputs(path, ["mttr=6"]) == InputRecord(mttr=6)


def test_load_scenarios(tmp_path: Path):
    path = tmp_path / "scenarios.csv"
    path.write_text("name,gpuUtilization,training_cost\nlean,80,\nfull,,20000\n", encoding="utf-8")

    df = load_scenarios(path)
    assert list(df.columns) == ["name", "gpu_utilization", "training_cost"]
    assert df["gpu_utilization"].iloc[0] == 80
    assert math.isnan(df["training_cost"].iloc[0])


def test_load_scenarios_rejects_unknown_columns(tmp_path: Path):
    path = tmp_path / "scenarios.csv"
    path.write_text("name,headcount\nx,1\n", encoding="utf-8")
    with pytest.raises(InputError):
        load_scenarios(path)


def test_groups_partition_the_catalog():
    grouped = [spec.name for group in GROUPS for spec in fields_in_group(group)]
    assert sorted(grouped) == sorted(spec.name for spec in FIELD_SPECS)
    assert [spec.name for spec in fields_in_group("Platform Investment")] == [
        "platform_subscription",
        "implementation_cost",
        "training_cost",
    ]


def test_resolve_field_accepts_both_spellings():
    assert resolve_field(" gpuUtilization ") == "gpu_utilization"
    assert resolve_field("gpu_utilization") == "gpu_utilization"
    with pytest.raises(InputError):
        resolve_field("gpu")


def test_write_metrics_json(tmp_path: Path, default_inputs):
    out = write_metrics_json(tmp_path / "out" / "metrics.json", compute(default_inputs))
    data = json.loads(out.read_text(encoding="utf-8"))
    assert data["annual_investment"] == 120000.0
    assert set(data["categories"]) == {
        "development",
        "deployment",
        "infrastructure",
        "operational",
        "performance",
        "compliance",
        "business_impact",
    }

