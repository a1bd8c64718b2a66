"""What-if tables built from repeated full recomputations."""

from __future__ import annotations

from typing import Dict, Iterable, List, Optional

import numpy as np
import pandas as pd

from .engine import compute
from .io import SCENARIO_NAME_COLUMN, resolve_field
from .log import logger
from .models import DerivedMetrics, InputRecord

HEADLINE_COLUMNS = ["roi", "annual_savings", "annual_investment", "payback_months"]


def _metrics_row(metrics: DerivedMetrics) -> Dict[str, float]:
    row = {col: getattr(metrics, col) for col in HEADLINE_COLUMNS}
    row.update(metrics.categories.model_dump())
    return row


def sweep(inputs: InputRecord, field: str, values: Iterable[float]) -> pd.DataFrame:
    field = resolve_field(field)
    rows: List[Dict[str, float]] = []
    for value in values:
        row = {field: float(value)}
        row.update(_metrics_row(compute(inputs.with_value(field, value))))
        rows.append(row)
    logger.debug("Swept {} over {} values", field, len(rows))
    return pd.DataFrame(rows)


def linear_values(start: float, stop: float, steps: int) -> List[float]:
    if steps < 1:
        raise ValueError("steps must be at least 1")
    return [float(v) for v in np.linspace(start, stop, steps)]


def evaluate_scenarios(frame: pd.DataFrame, base: Optional[InputRecord] = None) -> pd.DataFrame:
    """Evaluate one scenario per row; blank cells keep the base value."""
    base = base or InputRecord()
    fields = [col for col in frame.columns if col != SCENARIO_NAME_COLUMN]
    rows: List[Dict[str, object]] = []
    for idx, record in enumerate(frame.to_dict(orient="records"), start=1):
        overrides = {name: float(record[name]) for name in fields if pd.notna(record[name])}
        inputs = base.model_copy(update=overrides)
        name = record.get(SCENARIO_NAME_COLUMN)
        row: Dict[str, object] = {"scenario": str(name) if pd.notna(name) else f"scenario-{idx}"}
        row.update(_metrics_row(compute(inputs)))
        rows.append(row)
    return pd.DataFrame(rows)


def sensitivity(inputs: InputRecord, delta: float = 0.1) -> pd.DataFrame:
    """ROI response to a relative change of +/-delta in each field, largest swing first."""
    baseline = compute(inputs).roi
    rows = []
    for name, value in inputs.model_dump().items():
        low = compute(inputs.with_value(name, value * (1 - delta))).roi
        high = compute(inputs.with_value(name, value * (1 + delta))).roi
        rows.append(
            {
                "field": name,
                "value": value,
                "roi_low": low,
                "roi_high": high,
                "swing": abs(high - low),
            }
        )
    df = pd.DataFrame(rows)
    df["baseline_roi"] = baseline
    return df.sort_values("swing", ascending=False, kind="stable").reset_index(drop=True)
