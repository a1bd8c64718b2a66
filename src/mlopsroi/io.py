from __future__ import annotations

import json
import re
from pathlib import Path
from typing import Dict, Iterable, Optional, Union

import pandas as pd
from pydantic import ValidationError
from pydantic.alias_generators import to_camel

from .log import logger
from .models import DerivedMetrics, InputRecord

SCENARIO_NAME_COLUMN = "name"

_NUMBER = re.compile(r"^[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?$|^[+-]?Infinity$")

_FIELD_NAMES: Dict[str, str] = {
    alias: name for name in InputRecord.model_fields for alias in (name, to_camel(name))
}


class InputError(ValueError):
    """Raised when raw input cannot be turned into an input snapshot."""


def resolve_field(name: str) -> str:
    key = name.strip()
    if key not in _FIELD_NAMES:
        raise InputError(f"Unknown input field: {name}")
    return _FIELD_NAMES[key]


def coerce_number(raw: Union[str, float, int, None]) -> float:
    """Interpret free-text entry the way the form does.

    Blank text is zero, anything that is not a number is NaN.
    """
    if raw is None:
        return 0.0
    if isinstance(raw, (int, float)):
        return float(raw)
    text = str(raw).strip()
    if not text:
        return 0.0
    if not _NUMBER.match(text):
        return float("nan")
    return float(text)


def apply_edit(inputs: InputRecord, name: str, raw: Union[str, float, int, None]) -> InputRecord:
    return inputs.with_value(resolve_field(name), coerce_number(raw))


def parse_overrides(items: Iterable[str]) -> Dict[str, float]:
    overrides: Dict[str, float] = {}
    for item in items:
        if "=" not in item:
            raise InputError(f"Expected key=value, got {item!r}")
        key, raw = item.split("=", 1)
        overrides[resolve_field(key)] = coerce_number(raw)
    return overrides


def load_inputs(path: Path) -> InputRecord:
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as exc:
        raise InputError(f"Cannot read inputs from {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise InputError(f"{path} must contain a JSON object of field values")
    try:
        record = InputRecord.model_validate(data)
    except ValidationError as exc:
        raise InputError(f"Invalid inputs in {path}: {exc}") from exc
    logger.info("Loaded {} input overrides from {}", len(data), path)
    return record


def build_inputs(inputs_path: Optional[Path] = None, overrides: Iterable[str] = ()) -> InputRecord:
    record = load_inputs(inputs_path) if inputs_path else InputRecord()
    for name, value in parse_overrides(overrides).items():
        record = record.with_value(name, value)
    return record


def load_scenarios(path: Path) -> pd.DataFrame:
    try:
        df = pd.read_csv(path)
    except (OSError, pd.errors.ParserError, pd.errors.EmptyDataError) as exc:
        raise InputError(f"Cannot read scenarios from {path}: {exc}") from exc

    renames = {}
    for col in df.columns:
        if col == SCENARIO_NAME_COLUMN:
            continue
        renames[col] = resolve_field(col)
    df = df.rename(columns=renames)

    fields = [col for col in df.columns if col != SCENARIO_NAME_COLUMN]
    if fields:
        df[fields] = df[fields].apply(pd.to_numeric, errors="coerce")
    logger.info("Loaded {} scenarios from {}", len(df), path)
    return df


def write_metrics_json(out_path: Path, metrics: DerivedMetrics) -> Path:
    out_path.parent.mkdir(parents=True, exist_ok=True)
    out_path.write_text(metrics.model_dump_json(indent=2), encoding="utf-8")
    logger.info("Wrote metrics to {}", out_path)
    return out_path
