from __future__ import annotations

from pathlib import Path
from typing import Dict, Sequence

import plotly.express as px
import plotly.graph_objects as go

from .formatting import CATEGORY_TITLES
from .models import CategorySubtotals, Summary
from .series import series_frame


def savings_trend_figure(
    values: Sequence[float],
    currency_symbol: str = "$",
    template: str = "plotly_white",
) -> go.Figure:
    df = series_frame(values)
    fig = px.line(
        df,
        x="month",
        y="cumulative_savings",
        markers=True,
        title="Cumulative Savings Trend",
        labels={"month": "", "cumulative_savings": f"Cumulative Savings ({currency_symbol})"},
        template=template,
    )
    fig.update_traces(line_shape="spline", fill="tozeroy", line_width=3)
    fig.update_yaxes(tickprefix=currency_symbol, tickformat=",")
    return fig


def category_figure(
    categories: CategorySubtotals,
    currency_symbol: str = "$",
    template: str = "plotly_white",
) -> go.Figure:
    values = categories.model_dump()
    fig = go.Figure(
        go.Bar(
            x=list(CATEGORY_TITLES.values()),
            y=[values[key] for key in CATEGORY_TITLES],
        )
    )
    fig.update_layout(title="Savings by Category", template=template)
    fig.update_yaxes(tickprefix=currency_symbol, tickformat=",")
    return fig


def render_charts(
    summary: Summary,
    out_dir: Path,
    currency_symbol: str = "$",
    template: str = "plotly_white",
) -> Dict[str, str]:
    out_dir.mkdir(parents=True, exist_ok=True)
    outputs = {}

    fig = savings_trend_figure(summary.series, currency_symbol, template)
    path = out_dir / "cumulative_savings.html"
    fig.write_html(path)
    outputs["cumulative_savings"] = str(path)

    fig = category_figure(summary.metrics.categories, currency_symbol, template)
    path = out_dir / "categories.html"
    fig.write_html(path)
    outputs["categories"] = str(path)

    return outputs
