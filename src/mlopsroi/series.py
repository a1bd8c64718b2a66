from __future__ import annotations

from typing import List, Sequence

import numpy as np
import pandas as pd

from .constants import MONTHS_PER_YEAR
from .formatting import whole_units
from .models import DerivedMetrics
from .utils import round_half_up

MONTH_LABELS: List[str] = [
    "Jan",
    "Feb",
    "Mar",
    "Apr",
    "May",
    "Jun",
    "Jul",
    "Aug",
    "Sep",
    "Oct",
    "Nov",
    "Dec",
]


def monthly_series(annual_savings: float) -> List[float]:
    """Cumulative savings at the end of each month, rounded to whole units.

    Non-finite savings propagate into every element instead of raising.
    """
    monthly = float(annual_savings) / MONTHS_PER_YEAR
    months = np.arange(1, MONTHS_PER_YEAR + 1, dtype=float)
    with np.errstate(invalid="ignore"):
        values = round_half_up(monthly * months)
    return [float(v) for v in values]


def cumulative_series(metrics: DerivedMetrics) -> List[float]:
    # The trend starts from the savings figure shown on the tile.
    return monthly_series(whole_units(metrics.annual_savings))


def series_frame(values: Sequence[float]) -> pd.DataFrame:
    if len(values) != len(MONTH_LABELS):
        raise ValueError(f"Expected {len(MONTH_LABELS)} monthly values, got {len(values)}")
    return pd.DataFrame({"month": MONTH_LABELS, "cumulative_savings": list(values)})
