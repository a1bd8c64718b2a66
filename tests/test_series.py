import math

import pytest

from mlopsroi.engine import compute
from mlopsroi.series import MONTH_LABELS, cumulative_series, monthly_series, series_frame
from mlopsroi.utils import round_half_up


def test_default_cumulative_series(default_inputs):
    values = cumulative_series(compute(default_inputs))
    assert values == [
        937126,
        1874253,
        2811379,
        3748505,
        4685631,
        5622758,
        6559884,
        7497010,
        8434136,
        9371263,
        10308389,
        11245515,
    ]


@pytest.mark.parametrize("annual", [0.0, 1.0, 11.0, 120000.0, 987654.321])
def test_series_is_non_decreasing_and_ends_at_annual(annual):
    values = monthly_series(annual)
    assert len(values) == 12
    assert all(a <= b for a, b in zip(values, values[1:]))
    assert values[-1] == pytest.approx(math.floor(annual + 0.5), abs=1)


def test_series_rounds_half_up():
    # 6 / 12 = 0.5 per month
    assert monthly_series(6.0)[:3] == [1.0, 1.0, 2.0]
    assert monthly_series(-6.0)[:3] == [-0.0, -1.0, -1.0]


def test_series_propagates_non_finite():
    assert all(math.isnan(v) for v in monthly_series(float("nan")))
    assert all(math.isinf(v) for v in monthly_series(float("inf")))


def test_series_frame_labels_months():
    df = series_frame(monthly_series(1200))
    assert list(df["month"]) == MONTH_LABELS
    assert df["cumulative_savings"].iloc[-1] == 1200


def test_series_frame_rejects_wrong_length():
    with pytest.raises(ValueError):
        series_frame([1.0, 2.0])


def test_round_half_up_is_exact_for_large_and_near_half_values():
    # x + 0.5 is not representable for these, so the sum itself would round.
    values = round_half_up([0.49999999999999994, 4503599627370497.0, -4503599627370497.0, -2.5, 1e300])
    assert list(values) == [0.0, 4503599627370497.0, -4503599627370497.0, -2.0, 1e300]
