from __future__ import annotations

import math
from datetime import datetime, timezone
from decimal import ROUND_HALF_UP, Decimal
from typing import Iterable

import numpy as np


def utc_now_iso() -> str:
    return datetime.now(timezone.utc).isoformat()


def safe_divide(numer: float, denom: float) -> float:
    """Divide with IEEE-754 semantics: x/0 is +-inf and 0/0 is nan."""
    with np.errstate(divide="ignore", invalid="ignore"):
        return float(np.float64(numer) / np.float64(denom))


def round_half_up(values: Iterable[float]) -> np.ndarray:
    data = np.asarray(list(values), dtype=float)
    # Compare the exact fraction; x + 0.5 itself rounds for large or near-half values.
    with np.errstate(invalid="ignore"):
        floor = np.floor(data)
        return floor + (data - floor >= 0.5)


def plain_number(value: float) -> str:
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    if value == 0:
        return "0"
    if float(value).is_integer() and abs(value) < 1e21:
        # Shortest round-trip digits, zero-padded: 2**56 -> "72057594037927940".
        return format(Decimal(repr(float(value))).to_integral_value(), "f")
    return repr(float(value))


def to_fixed(value: float, digits: int = 0) -> str:
    """Fixed-point string, rounding ties away from zero on the exact binary value."""
    value = float(value)
    if not math.isfinite(value) or abs(value) >= 1e21:
        return plain_number(value)
    if value == 0:
        value = 0.0
    quantum = Decimal(1).scaleb(-digits)
    return format(Decimal(value).quantize(quantum, rounding=ROUND_HALF_UP), "f")
