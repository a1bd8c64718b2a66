from __future__ import annotations

import math

import streamlit as st

from mlopsroi.charts import category_figure, savings_trend_figure
from mlopsroi.config import settings
from mlopsroi.defaults import GROUPS, FieldSpec, fields_in_group
from mlopsroi.engine import summarize
from mlopsroi.io import apply_edit
from mlopsroi.log import configure_logging
from mlopsroi.models import InputRecord

st.set_page_config(page_title="MLOps ROI Calculator", layout="wide")

if "inputs" not in st.session_state:
    configure_logging(settings.log_level, settings.log_file)
    st.session_state["inputs"] = InputRecord()


def _clamp(spec: FieldSpec, value: float) -> float:
    return float(min(max(value, spec.minimum), spec.maximum))


def _on_number(spec: FieldSpec) -> None:
    record = apply_edit(st.session_state["inputs"], spec.name, st.session_state[f"num_{spec.name}"])
    st.session_state["inputs"] = record
    # Typed values may exceed the slider range; only the slider is clamped.
    value = getattr(record, spec.name)
    if not math.isnan(value):
        st.session_state[f"sld_{spec.name}"] = _clamp(spec, value)


def _on_slider(spec: FieldSpec) -> None:
    value = st.session_state[f"sld_{spec.name}"]
    st.session_state["inputs"] = apply_edit(st.session_state["inputs"], spec.name, value)
    st.session_state[f"num_{spec.name}"] = float(value)


def _render_control(spec: FieldSpec) -> None:
    value = getattr(st.session_state["inputs"], spec.name)
    if f"num_{spec.name}" not in st.session_state:
        st.session_state[f"num_{spec.name}"] = float(value)
        st.session_state[f"sld_{spec.name}"] = _clamp(spec, value)
    st.number_input(spec.label, key=f"num_{spec.name}", step=float(spec.step), on_change=_on_number, args=(spec,))
    st.slider(
        spec.label,
        min_value=float(spec.minimum),
        max_value=float(spec.maximum),
        step=float(spec.step),
        key=f"sld_{spec.name}",
        on_change=_on_slider,
        args=(spec,),
        label_visibility="collapsed",
    )


st.title("MLOps Platform ROI Calculator")

inputs_col, results_col = st.columns(2)

with inputs_col:
    for idx, group in enumerate(GROUPS):
        with st.expander(group, expanded=idx == 0):
            cols = st.columns(2)
            for pos, spec in enumerate(fields_in_group(group)):
                with cols[pos % 2]:
                    _render_control(spec)

    if st.button("Reset to defaults"):
        for key in list(st.session_state.keys()):
            del st.session_state[key]
        st.rerun()

summary = summarize(st.session_state["inputs"], settings.currency_symbol)

with results_col:
    tile_cols = st.columns(3)
    for col, (title, value) in zip(tile_cols, summary.tiles.items()):
        col.metric(title, value)

    category_cols = st.columns(3)
    for pos, (title, value) in enumerate(summary.category_tiles.items()):
        category_cols[pos % 3].metric(title, value)

    st.subheader("Cumulative Savings Trend")
    st.plotly_chart(
        savings_trend_figure(summary.series, settings.currency_symbol, settings.chart_template),
        use_container_width=True,
    )
    st.plotly_chart(
        category_figure(summary.metrics.categories, settings.currency_symbol, settings.chart_template),
        use_container_width=True,
    )

    for note in summary.notes:
        st.warning(note)

st.caption("Projections use fixed capture fractions; inputs are not validated against the slider ranges.")
