"""Display strings for the summary tiles, reports and chart axes."""

from __future__ import annotations

import math
from typing import Dict

from .models import CategorySubtotals, DerivedMetrics
from .utils import plain_number, to_fixed

CATEGORY_TITLES: Dict[str, str] = {
    "development": "Development Savings",
    "deployment": "Deployment Savings",
    "infrastructure": "Infrastructure Savings",
    "operational": "Operational Savings",
    "performance": "Performance Benefits",
    "compliance": "Compliance Savings",
    "business_impact": "Business Impact",
}


def format_magnitude(value: float) -> str:
    """Compact magnitude: ``2500000 -> "2.5M"``, ``1500 -> "1.5K"``, ``999 -> "999"``."""
    value = float(value)
    if not math.isfinite(value):
        return plain_number(value)
    if value >= 1_000_000:
        return f"{to_fixed(value / 1_000_000, 1)}M"
    if value >= 1_000:
        return f"{to_fixed(value / 1_000, 1)}K"
    return plain_number(value)


def whole_units(value: float) -> float:
    return float(to_fixed(value, 0))


def format_currency(value: float, symbol: str = "$") -> str:
    value = float(value)
    if not math.isfinite(value):
        return plain_number(value)
    text = f"{abs(value):,.3f}".rstrip("0").rstrip(".")
    sign = "-" if value < 0 and text != "0" else ""
    return f"{symbol}{sign}{text}"


def format_roi(roi: float) -> str:
    return f"{to_fixed(roi, 0)}%"


def format_payback(months: float) -> str:
    return f"{to_fixed(months, 1)} mon."


def format_savings(value: float, symbol: str = "$") -> str:
    return f"{symbol}{format_magnitude(whole_units(value))}"


def headline_tiles(metrics: DerivedMetrics, symbol: str = "$") -> Dict[str, str]:
    return {
        "ROI": format_roi(metrics.roi),
        "Annual Savings": format_savings(metrics.annual_savings, symbol),
        "Payback Period": format_payback(metrics.payback_months),
    }


def category_tiles(categories: CategorySubtotals, symbol: str = "$") -> Dict[str, str]:
    values = categories.model_dump()
    return {title: format_savings(values[key], symbol) for key, title in CATEGORY_TITLES.items()}
